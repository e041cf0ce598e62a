"""Turn sequencing within a round."""

import logging

from escoba.errors import InvalidArgumentError
from escoba.models.player import Player

logger = logging.getLogger(__name__)


class TurnSequencer:
    """Cycles turn ownership and counts the turns played in a round.

    Participants are matched by identity, not by name.
    """

    def __init__(self, players: list[Player], turns_per_round: int):
        """Initialize sequencer.

        Args:
            players: Players in turn order (at least 2).
            turns_per_round: Turns making up one round.
        """
        if players is None:
            raise InvalidArgumentError("Player list cannot be None")
        if len(players) < 2:
            raise InvalidArgumentError("At least 2 players are required")
        if turns_per_round <= 0:
            raise InvalidArgumentError("turns_per_round must be positive")

        self._players = list(players)
        self.turns_per_round = turns_per_round
        self._current = 0
        self._turns_played = 0

    @property
    def players(self) -> list[Player]:
        return list(self._players)

    @property
    def current(self) -> Player:
        """Player whose turn it is."""
        return self._players[self._current]

    @property
    def current_index(self) -> int:
        return self._current

    @property
    def turns_played(self) -> int:
        return self._turns_played

    def _index_of(self, player: Player | None) -> int:
        for i, p in enumerate(self._players):
            if p is player:
                return i
        return -1

    def start(self, first_player: Player | None = None) -> None:
        """Start a round with the given player (first one if unknown)."""
        idx = self._index_of(first_player)
        self._current = idx if idx >= 0 else 0
        self._turns_played = 0

    def advance(self) -> None:
        """Pass the turn to the next player."""
        self._current = (self._current + 1) % len(self._players)
        self._turns_played += 1
        logger.debug(
            f"Turn {self._turns_played}/{self.turns_per_round} done, "
            f"next: {self.current.name}"
        )

    def is_round_over(self) -> bool:
        return self._turns_played >= self.turns_per_round

    def reset(self) -> None:
        """Zero the turn counter without changing the turn owner."""
        self._turns_played = 0

    def set_current(self, player: Player | None) -> None:
        """Hand the turn to a participant.

        None or a player not in this sequencer is ignored.
        """
        idx = self._index_of(player)
        if idx >= 0:
            self._current = idx
