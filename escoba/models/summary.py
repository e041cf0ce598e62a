"""Match summary model."""

from datetime import date

from pydantic import BaseModel, Field

from escoba.errors import InvalidOperationError

from .player import Player


class PlayerResult(BaseModel):
    """Final figures for one player."""

    name: str
    points: int = 0
    brooms: int = 0
    golds: int = 0
    sevens: int = 0
    guindis: bool = False
    captured: int = 0

    @classmethod
    def from_player(cls, player: Player, points: int) -> "PlayerResult":
        return cls(
            name=player.name,
            points=points,
            brooms=player.brooms,
            golds=player.count_golds(),
            sevens=player.count_sevens(),
            guindis=player.has_guindis(),
            captured=player.captured_count,
        )


class MatchSummary(BaseModel):
    """Result of a match, ready to be stored or displayed."""

    match_id: str = Field(min_length=1)
    played_on: date
    player1: PlayerResult
    player2: PlayerResult
    complete: bool = False

    @property
    def winner(self) -> str | None:
        """Name of the winner, or None on a tie.

        Raises:
            InvalidOperationError: If the match is not complete.
        """
        if not self.complete:
            raise InvalidOperationError("Incomplete match has no winner")
        if self.player1.points == self.player2.points:
            return None
        if self.player1.points > self.player2.points:
            return self.player1.name
        return self.player2.name

    def __str__(self) -> str:
        return (
            f"{self.match_id} ({self.played_on.isoformat()}): "
            f"{self.player1.name} {self.player1.points} - "
            f"{self.player2.points} {self.player2.name}"
        )
