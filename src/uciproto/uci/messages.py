"""UCI protocol messages.

Each UCI command is a frozen dataclass deriving from `UciMessage`. The set of
variants is closed: `Message` is the union of all of them, and consumers
(the encoder, the CLI) dispatch on the concrete class.

Messages are usually produced by `uciproto.uci.decoder.parse`, but can be
built in code and serialized to send to an engine or GUI:

    >>> go_infinite().serialize()
    'go infinite'
"""

import re
from dataclasses import dataclass
from typing import ClassVar, Union

from uciproto.uci.types import CommunicationDirection, Fen, Infinite, Move, MoveTime, Ponder, SearchControl, TimeControl

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


@dataclass(frozen=True)
class UciMessage:
    """Base class for every UCI message."""

    _direction: ClassVar[CommunicationDirection] = CommunicationDirection.GUI_TO_ENGINE

    def direction(self) -> CommunicationDirection:
        """Return whether the message is meant for the engine or for the GUI."""
        return self._direction

    def as_bool(self) -> bool | None:
        """Return the option value as a bool for `SetOption`, else None."""
        return None

    def as_int(self) -> int | None:
        """Return the option value as a 32-bit integer for `SetOption`, else None."""
        return None

    def serialize(self) -> str:
        """Serialize the message into one line of protocol text (no newline)."""
        from uciproto.uci.encoder import serialize

        return serialize(self)

    def __str__(self) -> str:
        return self.serialize()


# Engine-bound messages


@dataclass(frozen=True)
class Uci(UciMessage):
    """`uci`: switch the engine to UCI mode."""


@dataclass(frozen=True)
class Debug(UciMessage):
    """`debug on|off`."""

    enabled: bool


@dataclass(frozen=True)
class IsReady(UciMessage):
    """`isready`: synchronisation ping."""


@dataclass(frozen=True)
class Register(UciMessage):
    """`register later` or `register name <name> code <code>`."""

    later: bool = False
    name: str | None = None
    code: str | None = None


@dataclass(frozen=True)
class Position(UciMessage):
    """`position [startpos | fen <fen>] [moves ...]`.

    When `startpos` is True, `fen` is normally None.
    """

    startpos: bool = False
    fen: Fen | None = None
    moves: tuple[Move, ...] = ()

    def __post_init__(self) -> None:
        """Store moves as a tuple so the value stays hashable."""
        if not isinstance(self.moves, tuple):
            object.__setattr__(self, "moves", tuple(self.moves))


@dataclass(frozen=True)
class SetOption(UciMessage):
    """`setoption name <name> [value <value>]`."""

    name: str
    value: str | None = None

    def as_bool(self) -> bool | None:
        if self.value == "true":
            return True
        if self.value == "false":
            return False
        return None

    def as_int(self) -> int | None:
        if self.value is None or not _INT_RE.fullmatch(self.value):
            return None
        number = int(self.value)
        if not _INT32_MIN <= number <= _INT32_MAX:
            return None
        return number


@dataclass(frozen=True)
class UciNewGame(UciMessage):
    """`ucinewgame`."""


@dataclass(frozen=True)
class Stop(UciMessage):
    """`stop`."""


@dataclass(frozen=True)
class PonderHit(UciMessage):
    """`ponderhit`: the opponent played the expected move."""


@dataclass(frozen=True)
class Quit(UciMessage):
    """`quit`."""


@dataclass(frozen=True)
class Go(UciMessage):
    """`go` with optional time-control and search sub-commands."""

    time_control: TimeControl | None = None
    search_control: SearchControl | None = None


# GUI-bound messages


@dataclass(frozen=True)
class Id(UciMessage):
    """`id name <name>` or `id author <author>`."""

    _direction: ClassVar[CommunicationDirection] = CommunicationDirection.ENGINE_TO_GUI

    name: str | None = None
    author: str | None = None


@dataclass(frozen=True)
class UciOk(UciMessage):
    """`uciok`."""

    _direction: ClassVar[CommunicationDirection] = CommunicationDirection.ENGINE_TO_GUI


@dataclass(frozen=True)
class ReadyOk(UciMessage):
    """`readyok`."""

    _direction: ClassVar[CommunicationDirection] = CommunicationDirection.ENGINE_TO_GUI


@dataclass(frozen=True)
class BestMove(UciMessage):
    """`bestmove <move> [ponder <move>]`."""

    _direction: ClassVar[CommunicationDirection] = CommunicationDirection.ENGINE_TO_GUI

    best_move: Move
    ponder: Move | None = None


Message = Union[
    Uci,
    Debug,
    IsReady,
    Register,
    Position,
    SetOption,
    UciNewGame,
    Stop,
    PonderHit,
    Quit,
    Go,
    Id,
    UciOk,
    ReadyOk,
    BestMove,
]

MessageList = list[UciMessage]


def register_later() -> Register:
    """Construct a `register later` message."""
    return Register(later=True)


def register_code(name: str, code: str) -> Register:
    """Construct a `register name <name> code <code>` message."""
    return Register(later=False, name=name, code=code)


def go_ponder() -> Go:
    """Construct a `go ponder` message."""
    return Go(time_control=Ponder())


def go_infinite() -> Go:
    """Construct a `go infinite` message."""
    return Go(time_control=Infinite())


def go_movetime(milliseconds: int) -> Go:
    """Construct a `go movetime <milliseconds>` message."""
    return Go(time_control=MoveTime(milliseconds))


def id_name(name: str) -> Id:
    """Construct an `id name <name>` message."""
    return Id(name=name)


def id_author(author: str) -> Id:
    """Construct an `id author <author>` message."""
    return Id(author=author)


def best_move(move: Move) -> BestMove:
    """Construct a `bestmove` message without a ponder move."""
    return BestMove(best_move=move)


def best_move_with_ponder(move: Move, ponder: Move) -> BestMove:
    """Construct a `bestmove` message with a ponder move."""
    return BestMove(best_move=move, ponder=ponder)
