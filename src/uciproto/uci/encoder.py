"""Serialization of UCI messages into protocol text.

`serialize` is total: every message value yields exactly one line, without
the line terminator (the transport appends it). Encoding a move that holds a
sentinel square is a caller error and produces garbage text, not an
exception.
"""

from uciproto.core.configs.schema import CodecConfig
from uciproto.uci.messages import (
    BestMove,
    Debug,
    Go,
    Id,
    IsReady,
    PonderHit,
    Position,
    Quit,
    ReadyOk,
    Register,
    SetOption,
    Stop,
    Uci,
    UciMessage,
    UciNewGame,
    UciOk,
)
from uciproto.uci.types import Infinite, Move, MoveTime, Ponder, SearchControl, TimeControl, TimeLeft

_DEFAULT_CONFIG = CodecConfig()

# Commands without arguments
_KEYWORDS: dict[type, str] = {
    Uci: "uci",
    IsReady: "isready",
    UciNewGame: "ucinewgame",
    Stop: "stop",
    PonderHit: "ponderhit",
    Quit: "quit",
    UciOk: "uciok",
    ReadyOk: "readyok",
}


def serialize(message: UciMessage, config: CodecConfig | None = None) -> str:
    """Serialize a message into one line of UCI text.

    Args:
        message: Any UCI message.
        config: Codec options; defaults to `CodecConfig()`.

    Returns:
        The canonical protocol line, without a trailing newline.

    Raises:
        TypeError: If `message` is not one of the UCI message classes.
    """
    config = config or _DEFAULT_CONFIG

    keyword = _KEYWORDS.get(type(message))
    if keyword is not None:
        return keyword

    if isinstance(message, Debug):
        return "debug on" if message.enabled else "debug off"
    if isinstance(message, Register):
        return _serialize_register(message)
    if isinstance(message, Position):
        return _serialize_position(message)
    if isinstance(message, SetOption):
        s = f"setoption name {message.name}"
        if message.value is not None:
            s += f" value {message.value}"
        return s
    if isinstance(message, Go):
        return _serialize_go(message, config)
    if isinstance(message, Id):
        if message.name is not None:
            return f"id name {message.name}"
        if message.author is not None:
            return f"id author {message.author}"
        return "id"
    if isinstance(message, BestMove):
        s = f"bestmove {message.best_move}"
        if message.ponder is not None:
            s += f" ponder {message.ponder}"
        return s

    msg = f"Cannot serialize {type(message).__name__}"
    raise TypeError(msg)


def serialize_moves(moves: tuple[Move, ...] | list[Move]) -> str:
    """Render moves space-separated, in order."""
    return " ".join(str(move) for move in moves)


def _serialize_register(message: Register) -> str:
    if message.later:
        return "register later"

    parts = ["register"]
    if message.name is not None:
        parts.append(f"name {message.name}")
    if message.code is not None:
        parts.append(f"code {message.code}")
    return " ".join(parts)


def _serialize_position(message: Position) -> str:
    if message.startpos:
        s = "position startpos"
    elif message.fen is not None:
        s = f"position fen {message.fen}"
    else:
        s = "position"

    if message.moves:
        s += f" moves {serialize_moves(message.moves)}"
    return s


def _serialize_go(message: Go, config: CodecConfig) -> str:
    parts = ["go"]
    if message.time_control is not None:
        parts.extend(_time_control_tokens(message.time_control, config))
    if message.search_control is not None:
        parts.extend(_search_control_tokens(message.search_control))
    return " ".join(parts)


def _time_control_tokens(time_control: TimeControl, config: CodecConfig) -> list[str]:
    if isinstance(time_control, Infinite):
        return ["infinite"]
    if isinstance(time_control, Ponder):
        return ["ponder"]
    if isinstance(time_control, MoveTime):
        return ["movetime", str(time_control.milliseconds)]
    if isinstance(time_control, TimeLeft):
        tokens: list[str] = []
        fields = (
            ("wtime", time_control.white_time),
            (config.black_time_token, time_control.black_time),
            ("winc", time_control.white_increment),
            ("binc", time_control.black_increment),
            ("movestogo", time_control.moves_to_go),
        )
        for keyword, value in fields:
            if value is not None:
                tokens.extend((keyword, str(value)))
        return tokens

    msg = f"Unknown time control: {type(time_control).__name__}"
    raise TypeError(msg)


def _search_control_tokens(search_control: SearchControl) -> list[str]:
    tokens: list[str] = []
    if search_control.depth is not None:
        tokens.extend(("depth", str(search_control.depth)))
    if search_control.nodes is not None:
        tokens.extend(("nodes", str(search_control.nodes)))
    if search_control.mate is not None:
        tokens.extend(("mate", str(search_control.mate)))
    if search_control.search_moves:
        tokens.append("searchmoves")
        tokens.extend(str(move) for move in search_control.search_moves)
    return tokens
