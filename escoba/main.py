"""Command line entry point: replay a recorded match."""

import argparse
import logging
import sys
from pathlib import Path

from escoba.config import load_config
from escoba.errors import EscobaError
from escoba.game.replay import ReplayExecutor, load_record
from escoba.logging import MatchLogger
from escoba.utils.logger import MatchDisplay, setup_logging

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    parser = argparse.ArgumentParser(
        description="Replay a recorded Escoba match and print the final score"
    )
    parser.add_argument(
        "record",
        type=Path,
        help="Path to the match record (YAML)",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "--match-id",
        help="Identifier shown in the summary (defaults to the record file name)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--show-hands",
        action="store_true",
        help="Show captured piles in output",
    )
    parser.add_argument(
        "--match-log",
        type=Path,
        help="JSONL file for the match event log",
    )

    args = parser.parse_args(argv)

    # Load config
    config = load_config(args.config)

    # Apply command-line overrides
    if args.verbose:
        config.logging.level = "DEBUG"
    if args.show_hands:
        config.logging.show_hands = True
    if args.match_log:
        config.match_log.enabled = True
        config.match_log.output_path = str(args.match_log)

    setup_logging(config.logging.level)
    display = MatchDisplay(show_hands=config.logging.show_hands)

    try:
        record = load_record(args.record)
        with MatchLogger(config.match_log) as match_logger:
            engine = ReplayExecutor(record, config, match_logger).run()

        display.print_captured(engine)
        display.print_summary(engine.summary(args.match_id or args.record.stem))
        return 0

    except EscobaError as e:
        logger.error(f"Replay rejected: {e}")
        return 1
    except Exception as e:
        logger.exception(f"Replay error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
