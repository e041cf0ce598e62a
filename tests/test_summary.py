"""Tests for the match summary."""

from datetime import date

import pytest
from pydantic import ValidationError

from escoba.errors import InvalidOperationError
from escoba.models.player import Player
from escoba.models.summary import MatchSummary, PlayerResult

from card_helpers import cards


def make_summary(points1, points2, complete=True):
    return MatchSummary(
        match_id="m1",
        played_on=date(2024, 5, 1),
        player1=PlayerResult(name="Ana", points=points1),
        player2=PlayerResult(name="Luis", points=points2),
        complete=complete,
    )


class TestMatchSummary:
    """Tests for MatchSummary class."""

    def test_winner(self):
        assert make_summary(3, 1).winner == "Ana"
        assert make_summary(1, 3).winner == "Luis"

    def test_tie(self):
        assert make_summary(2, 2).winner is None

    def test_incomplete(self):
        with pytest.raises(InvalidOperationError):
            make_summary(3, 1, complete=False).winner

    def test_empty_id(self):
        with pytest.raises(ValidationError):
            MatchSummary(
                match_id="",
                played_on=date(2024, 5, 1),
                player1=PlayerResult(name="Ana"),
                player2=PlayerResult(name="Luis"),
            )

    def test_str(self):
        assert str(make_summary(0, 5)) == "m1 (2024-05-01): Ana 0 - 5 Luis"


class TestPlayerResult:
    """Tests for PlayerResult.from_player."""

    def test_from_player(self):
        player = Player(name="Luis")
        for c in cards("7-gold", "7-clubs", "1-gold", "4-cups"):
            player.add_to_captured(c)
        player.sweep_bonus()

        result = PlayerResult.from_player(player, points=4)
        assert result.name == "Luis"
        assert result.points == 4
        assert result.brooms == 1
        assert result.golds == 2
        assert result.sevens == 2
        assert result.guindis
        assert result.captured == 4
