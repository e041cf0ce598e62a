"""Card model for the 40-card Spanish deck."""

from enum import Enum

from pydantic import BaseModel, field_validator


class Suit(str, Enum):
    """Card suit (values match the record file format)."""

    GOLD = "gold"
    CUPS = "cups"
    SWORDS = "swords"
    CLUBS = "clubs"


# Legal ranks: 8 and 9 are removed from the Spanish deck
RANKS: tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7, 10, 11, 12)

# Capture value for the face cards (sota, caballo, rey)
FACE_VALUES = {
    10: 8,
    11: 9,
    12: 10,
}

SEVEN = 7


class Card(BaseModel, frozen=True):
    """Single card representation."""

    suit: Suit
    rank: int

    @field_validator("rank")
    @classmethod
    def _check_rank(cls, rank: int) -> int:
        if rank not in RANKS:
            raise ValueError(f"Invalid rank: {rank}")
        return rank

    @property
    def value(self) -> int:
        """Get the capture value (1-7 as is, 10/11/12 count 8/9/10)."""
        return FACE_VALUES.get(self.rank, self.rank)

    @property
    def is_seven(self) -> bool:
        return self.rank == SEVEN

    @property
    def is_gold(self) -> bool:
        return self.suit == Suit.GOLD

    def __str__(self) -> str:
        return f"{self.rank}-{self.suit.value}"

    def __repr__(self) -> str:
        return str(self)


# The "guindis": seven of golds
GOLD_SEVEN = Card(suit=Suit.GOLD, rank=SEVEN)


def cards_value(cards: list[Card]) -> int:
    """Sum the capture values of several cards."""
    return sum(c.value for c in cards)


def create_full_deck() -> list[Card]:
    """Create the 40 cards of a Spanish deck, one per (suit, rank)."""
    return [Card(suit=suit, rank=rank) for suit in Suit for rank in RANKS]
