"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field


class RulesConfig(BaseModel):
    """Rules configuration."""

    turns_per_round: int = Field(default=6, gt=0)
    hand_size: int = 3
    initial_table_size: int = 4
    capture_target: int = 15

    # Deck runs out after this round
    final_round: int = 6

    # Table sums reachable by leftover cards at the end of a legal match
    valid_final_sums: list[int] = [10, 25, 40, 55]


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    show_hands: bool = False


class MatchLogConfig(BaseModel):
    """Configuration for the JSONL match log."""

    enabled: bool = False
    output_path: str = "match_log.jsonl"


class Config(BaseModel):
    """Root configuration."""

    rules: RulesConfig = RulesConfig()
    logging: LoggingConfig = LoggingConfig()
    match_log: MatchLogConfig = MatchLogConfig()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
