"""Tests for move validation."""

import pytest

from escoba.config import RulesConfig
from escoba.game.validator import MoveValidator

from card_helpers import card, cards


@pytest.fixture
def validator():
    return MoveValidator()


TABLE = cards("5-gold", "11-gold", "10-clubs", "11-clubs")


class TestValidatePlay:
    """Tests for MoveValidator.validate_play."""

    def test_drop(self, validator):
        """Test that dropping a held card is always valid."""
        result = validator.validate_play(card("1-cups"), [], cards("1-cups"), TABLE)
        assert result.is_valid
        assert not result.is_capture
        assert not result.is_broom

    def test_not_in_hand(self, validator):
        result = validator.validate_play(card("2-cups"), [], cards("1-cups"), TABLE)
        assert not result.is_valid
        assert "2-cups" in result.error_message

    def test_capture_fifteen(self, validator):
        """Test 1 + 5 + 9 = 15."""
        result = validator.validate_play(
            card("1-cups"), cards("5-gold", "11-gold"), cards("1-cups"), TABLE
        )
        assert result.is_valid
        assert result.is_capture
        assert not result.is_broom

    def test_capture_wrong_sum(self, validator):
        result = validator.validate_play(
            card("1-cups"), cards("5-gold"), cards("1-cups"), TABLE
        )
        assert not result.is_valid
        assert "6" in result.error_message

    def test_capture_not_on_table(self, validator):
        result = validator.validate_play(
            card("1-cups"), cards("5-cups", "11-gold"), cards("1-cups"), TABLE
        )
        assert not result.is_valid

    def test_capture_duplicate(self, validator):
        """Test that the same table card cannot be counted twice."""
        table = cards("5-gold", "10-clubs")
        result = validator.validate_play(
            card("5-cups"), cards("5-gold", "5-gold"), cards("5-cups"), table
        )
        assert not result.is_valid

    def test_broom(self, validator):
        """Test that capturing the whole table is an escoba."""
        table = cards("4-cups", "1-clubs", "2-clubs", "1-swords")
        result = validator.validate_play(
            card("7-cups"), table, cards("7-cups"), table
        )
        assert result.is_valid
        assert result.is_broom

    def test_broom_any_order(self, validator):
        table = cards("12-cups", "2-gold")
        result = validator.validate_play(
            card("3-clubs"), cards("2-gold", "12-cups"), cards("3-clubs"), table
        )
        assert result.is_broom

    def test_custom_target(self):
        validator = MoveValidator(RulesConfig(capture_target=10))
        result = validator.validate_play(
            card("5-cups"), cards("5-gold"), cards("5-cups"), cards("5-gold", "1-cups")
        )
        assert result.is_valid


class TestValidateFinalTable:
    """Tests for MoveValidator.validate_final_table."""

    def test_empty(self, validator):
        assert validator.validate_final_table([]).is_valid

    @pytest.mark.parametrize(
        "table",
        [
            cards("12-cups"),
            cards("12-cups", "7-gold", "1-clubs", "7-cups"),
            cards("12-swords", "12-gold", "12-clubs", "3-swords", "7-clubs"),
        ],
    )
    def test_valid_sums(self, validator, table):
        assert validator.validate_final_table(table).is_valid

    @pytest.mark.parametrize(
        "table",
        [cards("1-cups"), cards("12-cups", "1-cups"), cards("7-cups", "7-gold")],
    )
    def test_invalid_sums(self, validator, table):
        result = validator.validate_final_table(table)
        assert not result.is_valid
        assert "sum" in result.error_message
