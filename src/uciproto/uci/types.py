"""Value types shared by UCI messages.

Squares, pieces, moves and FEN strings are carried as plain tokens: nothing
here checks whether a move is legal or a FEN describes a real position.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from uciproto.core.utils.squares import split_square
from uciproto.uci.errors import MoveParseError, PieceParseError, SquareParseError

# Largest values the protocol fields are expected to carry
MAX_SMALL_INT = 2**8 - 1
MAX_LARGE_INT = 2**64 - 1


class CommunicationDirection(Enum):
    """Whether a message is engine-bound or GUI-bound."""

    GUI_TO_ENGINE = "gui_to_engine"
    ENGINE_TO_GUI = "engine_to_gui"


class Piece(Enum):
    """Chess piece kinds."""

    PAWN = "p"
    KNIGHT = "n"
    BISHOP = "b"
    ROOK = "r"
    QUEEN = "q"
    KING = "k"

    def as_char(self) -> str | None:
        """Return the promotion letter used in UCI move notation.

        Pawns have no promotion letter, so `Piece.PAWN.as_char()` is None.
        """
        if self is Piece.PAWN:
            return None
        return self.value

    @classmethod
    def from_char(cls, char: str) -> "Piece":
        """Create a Piece from its letter (`p n b r q k`, any case).

        Raises:
            PieceParseError: If the character does not name a piece.
        """
        try:
            return cls(char.lower())
        except ValueError as err:
            msg = f"Invalid piece character: {char!r}"
            raise PieceParseError(msg) from err


@dataclass(frozen=True)
class Square:
    """A board square.

    File and rank are not range-checked. The default square (file "\\0",
    rank 0) is a sentinel for "unset" and differs from every real square.
    """

    file: str = "\0"
    rank: int = 0

    @classmethod
    def parse(cls, text: str) -> "Square":
        """Parse coordinate notation (e.g., 'e4').

        Raises:
            SquareParseError: If the text is not a square a1..h8.
        """
        try:
            file, rank = split_square(text)
        except ValueError as err:
            raise SquareParseError(str(err)) from err
        return cls(file, rank)

    @property
    def is_sentinel(self) -> bool:
        return self == Square()

    def __str__(self) -> str:
        return f"{self.file}{self.rank}"


@dataclass(frozen=True)
class Move:
    """A chess move in UCI long algebraic notation (e.g., `e2e4`, `a7a8q`)."""

    from_square: Square
    to_square: Square
    promotion: Piece | None = None

    @classmethod
    def from_to(cls, from_square: Square, to_square: Square) -> "Move":
        """Create a regular, non-promotion move."""
        return cls(from_square, to_square)

    @classmethod
    def parse(cls, text: str) -> "Move":
        """Parse a move token such as `e2e4` or `b7b8q`.

        Raises:
            MoveParseError: If the token is not a 4 or 5 character move.
        """
        if len(text) not in (4, 5):
            msg = f"Invalid move notation: {text!r}"
            raise MoveParseError(msg)

        try:
            from_square = Square.parse(text[0:2])
            to_square = Square.parse(text[2:4])
            promotion = Piece.from_char(text[4]) if len(text) == 5 else None
        except (SquareParseError, PieceParseError) as err:
            msg = f"Invalid move notation: {text!r}"
            raise MoveParseError(msg) from err

        return cls(from_square, to_square, promotion)

    def __str__(self) -> str:
        s = f"{self.from_square}{self.to_square}"
        if self.promotion is not None:
            char = self.promotion.as_char()
            if char is not None:
                s += char
        return s


@dataclass(frozen=True)
class Fen:
    """A position in FEN notation. Stored verbatim and never validated."""

    value: str

    def as_str(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Ponder:
    """`go ponder`: search in pondering mode."""


@dataclass(frozen=True)
class Infinite:
    """`go infinite`: search until `stop`."""


@dataclass(frozen=True)
class MoveTime:
    """`go movetime <ms>`: search exactly this many milliseconds."""

    milliseconds: int


@dataclass(frozen=True)
class TimeLeft:
    """Clock state sent with `go`.

    Every field is optional and None means "not sent", never zero.
    Times and increments are in milliseconds.
    """

    white_time: int | None = None
    black_time: int | None = None
    white_increment: int | None = None
    black_increment: int | None = None
    moves_to_go: int | None = None

    def is_empty(self) -> bool:
        return (
            self.white_time is None
            and self.black_time is None
            and self.white_increment is None
            and self.black_increment is None
            and self.moves_to_go is None
        )


TimeControl = Union[Ponder, Infinite, MoveTime, TimeLeft]


@dataclass(frozen=True)
class SearchControl:
    """Non-time-related `go` settings.

    Attributes:
        search_moves: Restrict the search to these moves.
        mate: Search for a mate in this many moves.
        depth: Search to this ply depth.
        nodes: Search no more than this many nodes.
    """

    search_moves: tuple[Move, ...] = ()
    mate: int | None = None
    depth: int | None = None
    nodes: int | None = None

    def __post_init__(self) -> None:
        """Store search moves as a tuple so the value stays hashable."""
        if not isinstance(self.search_moves, tuple):
            object.__setattr__(self, "search_moves", tuple(self.search_moves))

    @classmethod
    def for_depth(cls, depth: int) -> "SearchControl":
        return cls(depth=depth)

    @classmethod
    def for_mate(cls, mate: int) -> "SearchControl":
        return cls(mate=mate)

    @classmethod
    def for_nodes(cls, nodes: int) -> "SearchControl":
        return cls(nodes=nodes)

    def is_empty(self) -> bool:
        """Return True if every setting is None or empty."""
        return not self.search_moves and self.mate is None and self.depth is None and self.nodes is None
