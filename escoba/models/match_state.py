"""Match state models."""

from enum import Enum

from pydantic import BaseModel


class MatchPhase(str, Enum):
    """Phase of the match state machine."""

    NEW = "new"  # Round started, cards not dealt yet
    DEALT = "dealt"  # Hands dealt, no card played this round
    IN_PLAY = "in_play"  # At least one turn played, round not over
    ROUND_OVER = "round_over"  # All turns of the round played
    FINISHED = "finished"  # Terminal


class MatchState(BaseModel):
    """Overall match progress."""

    round_number: int = 1
    phase: MatchPhase = MatchPhase.NEW

    @property
    def is_finished(self) -> bool:
        return self.phase == MatchPhase.FINISHED

    def start_next_round(self) -> None:
        """Move to the next round, waiting for its deal."""
        self.round_number += 1
        self.phase = MatchPhase.NEW

    def __str__(self) -> str:
        if self.is_finished:
            return f"Match finished after round {self.round_number}"
        return f"Round {self.round_number} [{self.phase.value}]"
