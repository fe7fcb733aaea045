"""Decoding of UCI protocol text into messages.

The decoder follows the protocol's forward-compatibility rule: unknown
commands and tokens are ignored, never reported as errors. Decoding works in
one pass over whitespace-separated tokens:

1. Tokens before the first known command keyword are skipped
   (`joho debug on` decodes as `debug on`).
2. The command's handler walks the remaining tokens, recognising its own
   sub-keywords in any order.
3. A sub-field whose value is malformed is left as None and the walk
   continues with the next token.

Only a line with no usable command yields no message. Nothing here raises
on protocol input.
"""

import re
from collections.abc import Callable, Iterable, Iterator

from loguru import logger

from uciproto.core.configs.schema import CodecConfig
from uciproto.uci.errors import MoveParseError
from uciproto.uci.messages import (
    BestMove,
    Debug,
    Go,
    Id,
    IsReady,
    MessageList,
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
from uciproto.uci.types import (
    MAX_LARGE_INT,
    MAX_SMALL_INT,
    Fen,
    Infinite,
    Move,
    MoveTime,
    Ponder,
    SearchControl,
    Square,
    TimeControl,
    TimeLeft,
)

_DEFAULT_CONFIG = CodecConfig()
_DIGITS_RE = re.compile(r"[0-9]+")

# Engine output we know about but do not model. Lines starting with these are
# dropped whole so that free text inside them (e.g. `info string stop`) is
# never mistaken for a command.
_UNSUPPORTED_COMMANDS = frozenset({"info", "option", "copyprotection", "registration"})

_POSITION_KEYWORDS = frozenset({"startpos", "fen", "moves"})
_REGISTER_TEXT_KEYWORDS = frozenset({"name", "code", "later"})
_ID_KEYWORDS = frozenset({"name", "author"})
_SETOPTION_NAME_STOP = frozenset({"value"})

# go keyword -> (field, maximum value); fields map onto TimeLeft / SearchControl
_GO_NUMERIC: dict[str, tuple[str, int]] = {
    "movetime": ("movetime", MAX_LARGE_INT),
    "wtime": ("white_time", MAX_LARGE_INT),
    "btime": ("black_time", MAX_LARGE_INT),
    "winc": ("white_increment", MAX_LARGE_INT),
    "binc": ("black_increment", MAX_LARGE_INT),
    "movestogo": ("moves_to_go", MAX_SMALL_INT),
    "depth": ("depth", MAX_SMALL_INT),
    "nodes": ("nodes", MAX_LARGE_INT),
    "mate": ("mate", MAX_SMALL_INT),
}
_GO_FLAGS = frozenset({"infinite", "ponder"})
_TIME_LEFT_FIELDS = ("white_time", "black_time", "white_increment", "black_increment", "moves_to_go")
_LEGACY_BLACK_TIME = "bt"


def parse_square(text: str) -> Square:
    """Parse a square strictly.

    Raises:
        SquareParseError: If the text is not a square a1..h8.
    """
    return Square.parse(text)


def parse_move(text: str) -> Move:
    """Parse a move strictly.

    Raises:
        MoveParseError: If the text is not a move in UCI notation.
    """
    return Move.parse(text)


def try_parse_move(text: str) -> Move | None:
    """Parse a move, returning None instead of raising."""
    try:
        return Move.parse(text)
    except MoveParseError:
        return None


def parse_line(line: str, config: CodecConfig | None = None) -> MessageList:
    """Decode one line of UCI text.

    Args:
        line: A single protocol line, with or without its terminator.
        config: Codec options; defaults to `CodecConfig()`.

    Returns:
        A list holding the decoded message, or an empty list if the line
        contains no recognisable command.
    """
    config = config or _DEFAULT_CONFIG
    tokens = line.split()

    for index, token in enumerate(tokens):
        if token in _UNSUPPORTED_COMMANDS:
            logger.debug(f"Ignoring unsupported UCI command: {line.strip()!r}")
            return []

        handler = _HANDLERS.get(token)
        if handler is None:
            continue

        if index:
            logger.debug(f"Skipped unknown leading tokens: {tokens[:index]}")

        message = handler(tokens[index + 1 :], config)
        if message is None:
            logger.debug(f"Could not decode {token!r} command: {line.strip()!r}")
            return []
        return [message]

    if tokens:
        logger.debug(f"Ignoring unknown UCI line: {line.strip()!r}")
    return []


def iter_messages(lines: Iterable[str], config: CodecConfig | None = None) -> Iterator[UciMessage]:
    """Lazily decode a stream of lines (e.g., a file object or a pipe)."""
    for line in lines:
        yield from parse_line(line, config)


def parse(text: str, config: CodecConfig | None = None) -> MessageList:
    """Decode every line of a block of UCI text.

    Example:
        >>> parse("uci\\nisready\\n")
        [Uci(), IsReady()]
    """
    return list(iter_messages(text.splitlines(), config))


def _parse_number(token: str, maximum: int) -> int | None:
    """Parse an unsigned integer no larger than `maximum`, or return None."""
    if not _DIGITS_RE.fullmatch(token):
        return None
    value = int(token)
    if value > maximum:
        return None
    return value


def _collect_text(tokens: list[str], start: int, stop_words: frozenset[str]) -> tuple[str | None, int]:
    """Join tokens from `start` up to the next stop word.

    Returns:
        The joined text (None if no tokens were taken) and the index of the
        first token not consumed.
    """
    end = start
    while end < len(tokens) and tokens[end] not in stop_words:
        end += 1
    text = " ".join(tokens[start:end])
    return (text or None), end


def _parse_zero_arg(message_type: type[UciMessage]) -> Callable[[list[str], CodecConfig], UciMessage]:
    def handler(tokens: list[str], config: CodecConfig) -> UciMessage:
        if tokens:
            logger.debug(f"Ignoring trailing tokens after {message_type.__name__}: {tokens}")
        return message_type()

    return handler


def _parse_debug(tokens: list[str], config: CodecConfig) -> Debug | None:
    for token in tokens:
        if token == "on":
            return Debug(True)
        if token == "off":
            return Debug(False)
    return None


def _parse_register(tokens: list[str], config: CodecConfig) -> Register:
    later = False
    name: str | None = None
    code: str | None = None

    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token == "later":
            later = True
            i += 1
        elif token == "name":
            name, i = _collect_text(tokens, i + 1, _REGISTER_TEXT_KEYWORDS)
        elif token == "code":
            code, i = _collect_text(tokens, i + 1, _REGISTER_TEXT_KEYWORDS)
        else:
            logger.debug(f"Skipping unknown register token: {token!r}")
            i += 1

    return Register(later=later, name=name, code=code)


def _parse_position(tokens: list[str], config: CodecConfig) -> Position:
    startpos = False
    fen: Fen | None = None
    moves: list[Move] = []

    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token == "startpos":
            startpos = True
            i += 1
        elif token == "fen":
            text, i = _collect_text(tokens, i + 1, _POSITION_KEYWORDS)
            fen = Fen(text) if text is not None else None
        elif token == "moves":
            i += 1
            while i < len(tokens) and tokens[i] not in _POSITION_KEYWORDS:
                move = try_parse_move(tokens[i])
                if move is None:
                    logger.debug(f"Skipping malformed move in position: {tokens[i]!r}")
                else:
                    moves.append(move)
                i += 1
        else:
            logger.debug(f"Skipping unknown position token: {token!r}")
            i += 1

    return Position(startpos=startpos, fen=fen, moves=tuple(moves))


def _parse_setoption(tokens: list[str], config: CodecConfig) -> SetOption | None:
    name: str | None = None
    value: str | None = None

    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token == "name":
            name, i = _collect_text(tokens, i + 1, _SETOPTION_NAME_STOP)
        elif token == "value":
            # Values are free-form and run to the end of the line
            value = " ".join(tokens[i + 1 :]) or None
            break
        else:
            logger.debug(f"Skipping unknown setoption token: {token!r}")
            i += 1

    if name is None:
        return None
    return SetOption(name=name, value=value)


def _go_keywords(config: CodecConfig) -> frozenset[str]:
    keywords = set(_GO_NUMERIC) | _GO_FLAGS | {"searchmoves"}
    if config.accept_legacy_black_time_token:
        keywords.add(_LEGACY_BLACK_TIME)
    return frozenset(keywords)


def _parse_go(tokens: list[str], config: CodecConfig) -> Go:
    keywords = _go_keywords(config)
    flags: set[str] = set()
    values: dict[str, int | None] = {}
    search_moves: list[Move] = []

    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token == _LEGACY_BLACK_TIME and token in keywords:
            token = "btime"

        if token in _GO_FLAGS:
            flags.add(token)
            i += 1
        elif token in _GO_NUMERIC:
            field, maximum = _GO_NUMERIC[token]
            if i + 1 < len(tokens) and tokens[i + 1] not in keywords:
                value = _parse_number(tokens[i + 1], maximum)
                if value is None:
                    logger.debug(f"Dropping go {token}: bad value {tokens[i + 1]!r}")
                values[field] = value
                i += 2
            else:
                logger.debug(f"Dropping go {token}: missing value")
                i += 1
        elif token == "searchmoves":
            i += 1
            while i < len(tokens) and tokens[i] not in keywords:
                move = try_parse_move(tokens[i])
                if move is None:
                    logger.debug(f"Skipping malformed search move: {tokens[i]!r}")
                else:
                    search_moves.append(move)
                i += 1
        else:
            logger.debug(f"Skipping unknown go token: {token!r}")
            i += 1

    search_control = SearchControl(
        search_moves=tuple(search_moves),
        mate=values.get("mate"),
        depth=values.get("depth"),
        nodes=values.get("nodes"),
    )
    return Go(
        time_control=_resolve_time_control(flags, values),
        search_control=None if search_control.is_empty() else search_control,
    )


def _resolve_time_control(flags: set[str], values: dict[str, int | None]) -> TimeControl | None:
    """Pick one time control; precedence is infinite, ponder, movetime, clocks."""
    if "infinite" in flags:
        return Infinite()
    if "ponder" in flags:
        return Ponder()
    if values.get("movetime") is not None:
        return MoveTime(values["movetime"])

    time_left = TimeLeft(**{name: values.get(name) for name in _TIME_LEFT_FIELDS})
    if time_left.is_empty():
        return None
    return time_left


def _parse_id(tokens: list[str], config: CodecConfig) -> Id:
    name: str | None = None
    author: str | None = None

    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token == "name":
            name, i = _collect_text(tokens, i + 1, _ID_KEYWORDS)
        elif token == "author":
            author, i = _collect_text(tokens, i + 1, _ID_KEYWORDS)
        else:
            logger.debug(f"Skipping unknown id token: {token!r}")
            i += 1

    return Id(name=name, author=author)


def _parse_bestmove(tokens: list[str], config: CodecConfig) -> BestMove | None:
    if not tokens:
        return None

    best = try_parse_move(tokens[0])
    if best is None:
        return None

    ponder: Move | None = None
    i = 1
    while i < len(tokens):
        token = tokens[i]
        if token == "ponder":
            if i + 1 < len(tokens):
                ponder = try_parse_move(tokens[i + 1])
                if ponder is None:
                    logger.debug(f"Dropping malformed ponder move: {tokens[i + 1]!r}")
            i += 2
        else:
            logger.debug(f"Skipping unknown bestmove token: {token!r}")
            i += 1

    return BestMove(best_move=best, ponder=ponder)


_HANDLERS: dict[str, Callable[[list[str], CodecConfig], UciMessage | None]] = {
    "uci": _parse_zero_arg(Uci),
    "debug": _parse_debug,
    "isready": _parse_zero_arg(IsReady),
    "register": _parse_register,
    "position": _parse_position,
    "setoption": _parse_setoption,
    "ucinewgame": _parse_zero_arg(UciNewGame),
    "stop": _parse_zero_arg(Stop),
    "ponderhit": _parse_zero_arg(PonderHit),
    "quit": _parse_zero_arg(Quit),
    "go": _parse_go,
    "id": _parse_id,
    "uciok": _parse_zero_arg(UciOk),
    "readyok": _parse_zero_arg(ReadyOk),
    "bestmove": _parse_bestmove,
}
