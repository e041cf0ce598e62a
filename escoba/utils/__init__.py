"""Utilities."""

from .logger import MatchDisplay, setup_logging

__all__ = ["MatchDisplay", "setup_logging"]
