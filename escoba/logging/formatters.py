"""Formatters for match log output."""

from escoba.models.card import Card
from escoba.models.player import Player


def format_card(card: Card) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Formatted string (e.g., "1-cups", "12-gold").
    """
    return f"{card.rank}-{card.suit.value}"


def format_cards(cards: list[Card]) -> str:
    """Format cards to comma-separated string.

    Args:
        cards: Cards to format, in order.

    Returns:
        Comma-separated card strings (e.g., "5-gold,11-gold").
        Empty string if no cards.
    """
    return ",".join(format_card(c) for c in cards)


def format_hands(players: list[Player]) -> dict[str, str]:
    """Format all players' hands to dict.

    Args:
        players: Players in seat order.

    Returns:
        Dict mapping player name to formatted hand string.
    """
    return {p.name: format_cards(p.hand) for p in players}
