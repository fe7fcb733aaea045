"""UCI message model and codec.

- `uciproto.uci.messages`: one frozen dataclass per UCI command
- `uciproto.uci.encoder`: message -> protocol line
- `uciproto.uci.decoder`: protocol line(s) -> messages
"""

from uciproto.uci.decoder import iter_messages, parse, parse_line, parse_move, parse_square, try_parse_move
from uciproto.uci.encoder import serialize
from uciproto.uci.errors import MoveParseError, PieceParseError, SquareParseError, UciParseError
from uciproto.uci.messages import (
    BestMove,
    Debug,
    Go,
    Id,
    IsReady,
    Message,
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
    best_move,
    best_move_with_ponder,
    go_infinite,
    go_movetime,
    go_ponder,
    id_author,
    id_name,
    register_code,
    register_later,
)
from uciproto.uci.types import (
    CommunicationDirection,
    Fen,
    Infinite,
    Move,
    MoveTime,
    Piece,
    Ponder,
    SearchControl,
    Square,
    TimeControl,
    TimeLeft,
)

__all__ = [
    "BestMove",
    "CommunicationDirection",
    "Debug",
    "Fen",
    "Go",
    "Id",
    "Infinite",
    "IsReady",
    "Message",
    "MessageList",
    "Move",
    "MoveParseError",
    "MoveTime",
    "Piece",
    "PieceParseError",
    "Ponder",
    "PonderHit",
    "Position",
    "Quit",
    "ReadyOk",
    "Register",
    "SearchControl",
    "SetOption",
    "Square",
    "SquareParseError",
    "Stop",
    "TimeControl",
    "TimeLeft",
    "Uci",
    "UciMessage",
    "UciNewGame",
    "UciOk",
    "UciParseError",
    "best_move",
    "best_move_with_ponder",
    "go_infinite",
    "go_movetime",
    "go_ponder",
    "id_author",
    "id_name",
    "iter_messages",
    "parse",
    "parse_line",
    "parse_move",
    "parse_square",
    "register_code",
    "register_later",
    "serialize",
    "try_parse_move",
]
