"""Tests for final scoring."""

from escoba.game.scoring import ScoreBreakdown, final_score, score_breakdown
from escoba.models.card import RANKS, Card, Suit
from escoba.models.player import Player

from card_helpers import cards


def make_player(name, captured=(), brooms=0):
    player = Player(name=name)
    for c in captured:
        player.add_to_captured(c)
    for _ in range(brooms):
        player.sweep_bonus()
    return player


class TestScoreBreakdown:
    """Tests for score_breakdown function."""

    def test_nothing(self):
        a = make_player("Ana")
        b = make_player("Luis")
        assert score_breakdown(a, b) == ScoreBreakdown()
        assert final_score(a, b) == 0

    def test_brooms(self):
        a = make_player("Ana", brooms=3)
        b = make_player("Luis")
        assert score_breakdown(a, b).brooms == 3

    def test_guindis(self):
        a = make_player("Ana", cards("7-gold"))
        b = make_player("Luis", cards("7-cups"))
        breakdown = score_breakdown(a, b)
        assert breakdown.sevens_bonus == 1
        # One seven each: no bonus for most sevens
        assert breakdown.most_sevens == 0

    def test_all_sevens_replaces_guindis(self):
        a = make_player("Ana", cards("7-gold", "7-cups", "7-swords", "7-clubs"))
        b = make_player("Luis")
        breakdown = score_breakdown(a, b)
        assert breakdown.sevens_bonus == 3
        assert breakdown.most_sevens == 1

    def test_most_golds(self):
        a = make_player("Ana", cards("1-gold", "2-gold"))
        b = make_player("Luis", cards("3-gold"))
        assert score_breakdown(a, b).golds_bonus == 1
        assert score_breakdown(b, a).golds_bonus == 0

    def test_all_golds(self):
        a = make_player("Ana", [Card(suit=Suit.GOLD, rank=r) for r in RANKS])
        b = make_player("Luis")
        assert score_breakdown(a, b).golds_bonus == 2

    def test_golds_tie(self):
        a = make_player("Ana", cards("1-gold"))
        b = make_player("Luis", cards("2-gold"))
        assert score_breakdown(a, b).golds_bonus == 0
        assert score_breakdown(b, a).golds_bonus == 0

    def test_most_cards(self):
        a = make_player("Ana", cards("1-cups", "2-cups"))
        b = make_player("Luis", cards("3-cups"))
        assert score_breakdown(a, b).most_cards == 1
        assert score_breakdown(b, a).most_cards == 0

    def test_total(self):
        """Test that the items add up."""
        a = make_player(
            "Ana",
            cards("7-gold", "7-cups", "7-swords", "7-clubs", "1-gold"),
            brooms=2,
        )
        b = make_player("Luis", cards("3-cups"))
        # 2 brooms + 3 all sevens + 1 most sevens + 1 most golds + 1 most cards
        assert final_score(a, b) == 8

    def test_pure(self):
        """Test that scoring twice gives the same result."""
        a = make_player("Ana", cards("7-gold", "1-cups"), brooms=1)
        b = make_player("Luis", cards("2-cups"))
        assert final_score(a, b) == final_score(a, b)
        assert a.captured_count == 2
