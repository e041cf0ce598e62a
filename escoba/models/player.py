"""Player model."""

import logging

from pydantic import BaseModel, Field, PrivateAttr

from escoba.errors import CardNotFoundError, InvalidArgumentError

from .card import GOLD_SEVEN, Card

logger = logging.getLogger(__name__)


class Player(BaseModel):
    """Player state.

    Hand and captured pile are owned by the player; the properties hand
    out copies so callers cannot bypass the engine's checks.
    """

    name: str = Field(min_length=1)

    _hand: list[Card] = PrivateAttr(default_factory=list)
    _captured: list[Card] = PrivateAttr(default_factory=list)
    _brooms: int = PrivateAttr(default=0)

    @property
    def hand(self) -> list[Card]:
        return list(self._hand)

    @property
    def captured(self) -> list[Card]:
        return list(self._captured)

    @property
    def brooms(self) -> int:
        return self._brooms

    @property
    def captured_count(self) -> int:
        return len(self._captured)

    def holds(self, card: Card) -> bool:
        """Check if the card is currently in hand."""
        return card in self._hand

    def add_to_hand(self, card: Card | None) -> None:
        """Add a dealt card to the hand."""
        if card is None:
            raise InvalidArgumentError("Card cannot be None")
        self._hand.append(card)

    def remove_from_hand(self, card: Card | None) -> None:
        """Remove a card from the hand.

        Raises:
            InvalidArgumentError: If card is None.
            CardNotFoundError: If the card is not in hand.
        """
        if card is None:
            raise InvalidArgumentError("Card cannot be None")
        if card not in self._hand:
            raise CardNotFoundError(f"{self.name} does not hold {card}")
        self._hand.remove(card)

    def add_to_captured(self, card: Card | None) -> None:
        """Add a card to the captured pile."""
        if card is None:
            raise InvalidArgumentError("Card cannot be None")
        self._captured.append(card)

    def sweep_bonus(self) -> None:
        """Count one escoba (broom)."""
        self._brooms += 1
        logger.debug(f"{self.name} now has {self._brooms} brooms")

    def count_sevens(self) -> int:
        """Count captured sevens."""
        return sum(1 for c in self._captured if c.is_seven)

    def count_golds(self) -> int:
        """Count captured gold cards."""
        return sum(1 for c in self._captured if c.is_gold)

    def has_guindis(self) -> bool:
        """Check if the seven of golds was captured."""
        return GOLD_SEVEN in self._captured

    def __str__(self) -> str:
        return f"Player[{self.name}]"

    def __repr__(self) -> str:
        return (
            f"Player(name={self.name!r}, hand={len(self._hand)}, "
            f"captured={len(self._captured)}, brooms={self._brooms})"
        )
