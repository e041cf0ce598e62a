"""Deck of undealt cards."""

import logging
from typing import Iterator

from escoba.errors import CardNotFoundError, DeckEmptyError, InvalidArgumentError

from .card import Card, create_full_deck

logger = logging.getLogger(__name__)


class Deck:
    """Pool of the 40 undealt cards.

    Cards are only ever removed, so the size goes from 40 down to 0
    over one match.
    """

    def __init__(self) -> None:
        self._cards: list[Card] = create_full_deck()

    def draw(self, card: Card | None) -> None:
        """Remove a specific card from the deck.

        Args:
            card: Card to draw.

        Raises:
            DeckEmptyError: If the deck has no cards left.
            InvalidArgumentError: If card is None.
            CardNotFoundError: If the card is not in the deck.
        """
        if not self._cards:
            raise DeckEmptyError("No cards left in the deck")
        if card is None:
            raise InvalidArgumentError("Card to draw cannot be None")
        if card not in self._cards:
            raise CardNotFoundError(f"Card {card} is not in the deck")
        self._cards.remove(card)
        logger.debug(f"Drew {card} ({len(self._cards)} left)")

    def cards(self) -> list[Card]:
        """Get a copy of the remaining cards."""
        return list(self._cards)

    def count(self) -> int:
        """Get number of cards left."""
        return len(self._cards)

    def is_empty(self) -> bool:
        return not self._cards

    def __iter__(self) -> Iterator[Card]:
        return iter(list(self._cards))

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __repr__(self) -> str:
        return f"Deck({len(self._cards)} cards)"
