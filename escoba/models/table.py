"""Round table: the face-up cards between the players."""

import logging
from typing import Iterable, Iterator

from escoba.errors import InvalidArgumentError

from .card import Card, cards_value
from .player import Player

logger = logging.getLogger(__name__)


class RoundTable:
    """Face-up cards on the table.

    Insertion order is kept for reporting only; it has no meaning for
    the rules.
    """

    def __init__(self) -> None:
        self._cards: list[Card] = []

    def set_all(self, cards: Iterable[Card] | None) -> None:
        """Replace the table contents. None is treated as empty."""
        self._cards = list(cards) if cards is not None else []

    def add(self, card: Card | None) -> None:
        """Put a card face-up on the table."""
        if card is None:
            raise InvalidArgumentError("Card cannot be None")
        self._cards.append(card)

    def remove_all(self, cards: Iterable[Card] | None) -> None:
        """Remove every listed card that is on the table.

        None is treated as an empty list; cards not on the table are
        ignored.
        """
        if cards is None:
            return
        to_remove = set(cards)
        self._cards = [c for c in self._cards if c not in to_remove]

    def value_sum(self) -> int:
        """Sum of the capture values of the cards on the table."""
        return cards_value(self._cards)

    def sweep_to(self, player: Player | None) -> list[Card]:
        """Move every remaining card into a player's captured pile.

        Returns:
            The swept cards.
        """
        if player is None:
            raise InvalidArgumentError("Receiver cannot be None")
        swept = list(self._cards)
        for card in swept:
            player.add_to_captured(card)
        self._cards = []
        logger.debug(f"Swept {len(swept)} cards to {player.name}")
        return swept

    def cards(self) -> list[Card]:
        """Get a copy of the cards on the table."""
        return list(self._cards)

    def is_empty(self) -> bool:
        return not self._cards

    def __iter__(self) -> Iterator[Card]:
        return iter(list(self._cards))

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __str__(self) -> str:
        if not self._cards:
            return "Table: [empty]"
        return "Table: [" + ", ".join(str(c) for c in self._cards) + "]"
