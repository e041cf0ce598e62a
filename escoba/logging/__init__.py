"""Match logging module."""

from .formatters import format_card, format_cards, format_hands
from .match_logger import MatchLogger

__all__ = [
    "MatchLogger",
    "format_card",
    "format_cards",
    "format_hands",
]
