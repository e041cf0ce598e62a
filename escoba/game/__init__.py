"""Game logic."""

from .engine import MatchEngine, PlayResult
from .replay import ReplayExecutor, load_record
from .scoring import ScoreBreakdown, final_score, score_breakdown
from .turns import TurnSequencer
from .validator import MoveValidator, ValidationResult

__all__ = [
    "MatchEngine",
    "PlayResult",
    "ReplayExecutor",
    "load_record",
    "ScoreBreakdown",
    "final_score",
    "score_breakdown",
    "TurnSequencer",
    "MoveValidator",
    "ValidationResult",
]
