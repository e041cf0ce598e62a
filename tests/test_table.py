"""Tests for the round table."""

import pytest

from escoba.errors import InvalidArgumentError
from escoba.models.player import Player
from escoba.models.table import RoundTable

from card_helpers import card, cards


@pytest.fixture
def table():
    t = RoundTable()
    t.set_all(cards("5-gold", "11-gold", "10-clubs", "11-clubs"))
    return t


class TestRoundTable:
    """Tests for RoundTable class."""

    def test_set_all(self, table):
        assert table.cards() == cards("5-gold", "11-gold", "10-clubs", "11-clubs")
        assert len(table) == 4

    def test_set_all_none(self, table):
        """Test that None empties the table."""
        table.set_all(None)
        assert table.is_empty()

    def test_add(self, table):
        table.add(card("3-cups"))
        assert card("3-cups") in table
        assert len(table) == 5

    def test_add_none(self, table):
        with pytest.raises(InvalidArgumentError):
            table.add(None)

    def test_remove_all(self, table):
        """Test removing cards; absent ones are ignored."""
        table.remove_all(cards("5-gold", "11-gold", "1-cups"))
        assert table.cards() == cards("10-clubs", "11-clubs")

    def test_remove_all_none(self, table):
        """Test that None is a no-op."""
        table.remove_all(None)
        assert len(table) == 4

    def test_value_sum(self, table):
        """Test value sum with the face card mapping."""
        # 5 + 9 + 8 + 9
        assert table.value_sum() == 31

    def test_value_sum_empty(self):
        assert RoundTable().value_sum() == 0

    def test_sweep_to(self, table):
        """Test moving every card to a player."""
        player = Player(name="Luis")
        swept = table.sweep_to(player)

        assert table.is_empty()
        assert len(swept) == 4
        assert player.captured == cards("5-gold", "11-gold", "10-clubs", "11-clubs")

    def test_sweep_to_none(self, table):
        with pytest.raises(InvalidArgumentError):
            table.sweep_to(None)
        assert len(table) == 4

    def test_cards_is_copy(self, table):
        table.cards().clear()
        assert len(table) == 4
