"""Logging utilities and match display."""

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from escoba.game.engine import MatchEngine
    from escoba.models.summary import MatchSummary, PlayerResult


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


class MatchDisplay:
    """Display match results to stdout."""

    def __init__(self, show_hands: bool = False):
        """Initialize display.

        Args:
            show_hands: Whether to show the captured piles
        """
        self.show_hands = show_hands

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 60)

    def print_player(self, result: "PlayerResult") -> None:
        """Print the figures of one player."""
        guindis = " +guindis" if result.guindis else ""
        print(
            f"  {result.name}: {result.points} points "
            f"(brooms {result.brooms}, cards {result.captured}, "
            f"golds {result.golds}, sevens {result.sevens}{guindis})"
        )

    def print_captured(self, engine: "MatchEngine") -> None:
        """Print every player's captured pile (if show_hands is enabled)."""
        if not self.show_hands:
            return

        print("\nCaptured:")
        for player in engine.players:
            print(f"  {player.name}: {', '.join(str(c) for c in player.captured)}")

    def print_summary(self, summary: "MatchSummary") -> None:
        """Print final match results."""
        self.print_separator()
        print(f"MATCH {summary.match_id}")
        self.print_separator()
        self.print_player(summary.player1)
        self.print_player(summary.player2)
        if summary.complete:
            winner = summary.winner
            print(f"\nWinner: {winner}" if winner else "\nTie")
