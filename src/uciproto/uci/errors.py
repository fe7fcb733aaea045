"""Exceptions raised by the strict UCI parsing helpers.

The decoder never lets these escape: a token that fails strict parsing is
dropped and the rest of the line is still decoded. They exist for callers
that want a hard failure, e.g. when reading a move typed by a user.
"""


class UciParseError(ValueError):
    """Base exception for UCI token parsing errors."""

    pass


class SquareParseError(UciParseError):
    """Raised when a token is not a square in coordinate notation."""

    pass


class PieceParseError(UciParseError):
    """Raised when a character does not name a chess piece."""

    pass


class MoveParseError(UciParseError):
    """Raised when a token is not a move in UCI long algebraic notation."""

    pass
