"""Escoba match engine."""

from .errors import (
    CardNotFoundError,
    DeckEmptyError,
    EscobaError,
    InvalidArgumentError,
    InvalidOperationError,
)
from .game import MatchEngine, PlayResult
from .models import Card, Deck, MatchPhase, Player, RoundTable, Suit

__all__ = [
    "Card",
    "Suit",
    "Deck",
    "Player",
    "RoundTable",
    "MatchPhase",
    "MatchEngine",
    "PlayResult",
    "EscobaError",
    "InvalidArgumentError",
    "InvalidOperationError",
    "CardNotFoundError",
    "DeckEmptyError",
]
