"""Pytest configuration and shared fixtures."""

import pytest
from loguru import logger

from uciproto.core.configs import CodecConfig
from uciproto.uci import Move, Piece, Square


@pytest.fixture
def a1a7() -> Move:
    """A plain rook-style move from a1 to a7."""
    return Move.from_to(Square("a", 1), Square("a", 7))


@pytest.fixture
def b4d6q() -> Move:
    """A move from b4 to d6 promoting to a queen."""
    return Move(Square("b", 4), Square("d", 6), Piece.QUEEN)


@pytest.fixture
def legacy_codec() -> CodecConfig:
    """Codec that writes black's clock with the old `bt` token."""
    return CodecConfig(legacy_black_time_token=True)


@pytest.fixture(autouse=True)
def _silence_package_logs():
    """Put the package back in its import-time state (records disabled)."""
    yield
    logger.disable("uciproto")
