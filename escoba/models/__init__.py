"""Match models."""

from .card import GOLD_SEVEN, RANKS, Card, Suit, cards_value, create_full_deck
from .deck import Deck
from .match_state import MatchPhase, MatchState
from .player import Player
from .record import MatchRecord, RoundRecord, TurnRecord
from .summary import MatchSummary, PlayerResult
from .table import RoundTable

__all__ = [
    "Card",
    "Suit",
    "RANKS",
    "GOLD_SEVEN",
    "cards_value",
    "create_full_deck",
    "Deck",
    "Player",
    "RoundTable",
    "MatchPhase",
    "MatchState",
    "MatchRecord",
    "RoundRecord",
    "TurnRecord",
    "MatchSummary",
    "PlayerResult",
]
