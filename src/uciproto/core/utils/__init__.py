"""Shared utilities for uciproto."""

from uciproto.core.utils.logging import setup_logging
from uciproto.core.utils.squares import FILES, RANKS, split_square

__all__ = [
    "FILES",
    "RANKS",
    "setup_logging",
    "split_square",
]
