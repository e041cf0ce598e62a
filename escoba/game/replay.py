"""Replay of recorded matches through the engine."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import yaml

from escoba.config import Config
from escoba.errors import EscobaError, InvalidOperationError
from escoba.models.player import Player
from escoba.models.record import MatchRecord, RoundRecord

from .engine import MatchEngine

if TYPE_CHECKING:
    from escoba.logging import MatchLogger

logger = logging.getLogger(__name__)


def load_record(path: Path | str) -> MatchRecord:
    """Load a recorded match from a YAML file.

    Cards are written as mappings (``{suit: cups, rank: 1}``), so the
    record is validated by the models without any card notation parsing.

    Args:
        path: Path to the record file.

    Returns:
        MatchRecord
    """
    with open(Path(path), encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return MatchRecord.model_validate(data or {})


class ReplayExecutor:
    """Drives a full recorded match through a MatchEngine.

    Any inconsistency in the record surfaces as the engine's own error
    (InvalidArgumentError / InvalidOperationError).
    """

    def __init__(
        self,
        record: MatchRecord,
        config: Config | None = None,
        match_logger: MatchLogger | None = None,
    ):
        if record is None:
            raise ValueError("Record cannot be None")
        self.record = record
        self.config = config or Config()
        self.match_logger = match_logger
        self.engine: MatchEngine | None = None

    def run(self) -> MatchEngine:
        """Replay the whole match and finish it.

        Returns:
            The finished MatchEngine.
        """
        name1, name2 = self.record.players
        engine = MatchEngine(
            Player(name=name1),
            Player(name=name2),
            self.config,
            self.match_logger,
        )
        self.engine = engine

        hand1, hand2 = self.record.hands_for_round(1)
        engine.deal_initial(hand1, hand2, self.record.initial_table)

        rounds = self.record.rounds
        for i, round_record in enumerate(rounds):
            self._play_round(engine, round_record)
            if i + 1 < len(rounds):
                engine.advance_round()
                engine.deal_round(*self.record.hands_for_round(engine.round_number))

        # Advancing past the last round finalizes once the deck is exhausted
        engine.advance_round()
        if not engine.is_finished:
            raise InvalidOperationError(
                f"Record ends with {engine.deck_size} cards left in the deck"
            )

        logger.info(f"Replay finished after round {engine.round_number}")
        return engine

    def _play_round(self, engine: MatchEngine, round_record: RoundRecord) -> None:
        if round_record.number != engine.round_number:
            raise InvalidOperationError(
                f"Recorded round {round_record.number} found while "
                f"playing round {engine.round_number}"
            )

        for turn_num, turn in enumerate(round_record.turns, start=1):
            try:
                engine.play(turn.play, turn.capture)
            except EscobaError as e:
                logger.warning(
                    f"Round {round_record.number}, turn {turn_num}: "
                    f"{turn.play} rejected: {e}"
                )
                raise

            if turn.table_after is not None and sorted(
                engine.table_cards, key=str
            ) != sorted(turn.table_after, key=str):
                logger.warning(
                    f"Round {round_record.number}, turn {turn_num}: table "
                    f"{engine.table_cards} differs from recorded {turn.table_after}"
                )
                raise InvalidOperationError(
                    f"Replay diverged from the record in round "
                    f"{round_record.number}, turn {turn_num}"
                )
