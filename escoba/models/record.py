"""Recorded match models consumed by the replay executor."""

from pydantic import BaseModel, Field, model_validator

from .card import Card


class TurnRecord(BaseModel):
    """One recorded play."""

    play: Card
    capture: list[Card] = Field(default_factory=list)
    table_after: list[Card] | None = None  # Optional consistency check


class RoundRecord(BaseModel):
    """Turns of one round, in play order."""

    number: int = Field(ge=1)
    turns: list[TurnRecord] = Field(default_factory=list)


class MatchRecord(BaseModel):
    """A complete recorded match.

    hands_player1[i] / hands_player2[i] are the hands dealt in round i + 1.
    """

    players: list[str] = Field(min_length=2, max_length=2)
    initial_table: list[Card]
    hands_player1: list[list[Card]]
    hands_player2: list[list[Card]]
    rounds: list[RoundRecord] = Field(min_length=1)

    @model_validator(mode="after")
    def _check_players(self) -> "MatchRecord":
        if any(not name for name in self.players):
            raise ValueError("Player names cannot be empty")
        if self.players[0] == self.players[1]:
            raise ValueError("Player names must be distinct")
        return self

    def hands_for_round(self, number: int) -> tuple[list[Card], list[Card]]:
        """Get the hands dealt at the start of a round (1-based)."""
        index = number - 1
        if index >= len(self.hands_player1) or index >= len(self.hands_player2):
            raise ValueError(f"No hands recorded for round {number}")
        return self.hands_player1[index], self.hands_player2[index]
