"""Match logger for step-by-step review of a match."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from escoba.config import MatchLogConfig
from escoba.models.card import Card
from escoba.models.player import Player

from .formatters import format_cards, format_hands


class MatchLogger:
    """Logger for match events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    """

    def __init__(self, config: MatchLogConfig | None = None):
        """Initialize match logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or MatchLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "MatchLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        """Write an event to the log file.

        Args:
            event: Event dictionary to write as JSON.
        """
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_match_start(self, players: list[Player]) -> None:
        """Log match start with player names.

        Args:
            players: Players in seat order.
        """
        self._write({
            "type": "match_start",
            "timestamp": datetime.now().isoformat(),
            "players": [p.name for p in players],
        })

    def log_deal(
        self,
        round_num: int,
        players: list[Player],
        table: list[Card],
        deck_size: int,
    ) -> None:
        """Log a deal.

        Args:
            round_num: Round being dealt.
            players: Players, with their freshly dealt hands.
            table: Cards on the table after the deal.
            deck_size: Cards left in the deck.
        """
        self._write({
            "type": "deal",
            "round": round_num,
            "hands": format_hands(players),
            "table": format_cards(table),
            "deck": deck_size,
        })

    def log_play(
        self,
        round_num: int,
        turn_num: int,
        player: Player,
        card: Card,
        capture: list[Card],
        is_broom: bool,
        table: list[Card],
    ) -> None:
        """Log a single play.

        Args:
            round_num: Round number.
            turn_num: Turn number within the round (1-based).
            player: Player who played.
            card: Card played.
            capture: Cards captured from the table (empty if none).
            is_broom: Whether the capture cleared the table.
            table: Table after the play.
        """
        self._write({
            "type": "play",
            "round": round_num,
            "turn": turn_num,
            "player": player.name,
            "card": format_cards([card]),
            "capture": format_cards(capture),
            "broom": is_broom,
            "table": format_cards(table),
        })

    def log_round_advance(self, round_num: int, deck_size: int) -> None:
        """Log the start of a new round.

        Args:
            round_num: New round number.
            deck_size: Cards left in the deck.
        """
        self._write({
            "type": "round_advance",
            "round": round_num,
            "deck": deck_size,
        })

    def log_match_end(
        self,
        round_num: int,
        receiver: Player | None,
        swept: list[Card],
        points: dict[str, int],
    ) -> None:
        """Log match end with results.

        Args:
            round_num: Last round played.
            receiver: Player who got the leftover table cards, if any.
            swept: Leftover cards swept at the end.
            points: Final points by player name.
        """
        self._write({
            "type": "match_end",
            "round": round_num,
            "swept_to": receiver.name if receiver else None,
            "swept": format_cards(swept),
            "points": points,
        })
