"""Conversion between UCI value types and python-chess objects.

Only notation is converted. Whether a move is legal in some position is
python-chess's business (`move in board.legal_moves`), not ours.
"""

import chess

from uciproto.uci.types import Move, Piece, Square

_TO_CHESS_PIECE: dict[Piece, chess.PieceType] = {
    Piece.PAWN: chess.PAWN,
    Piece.KNIGHT: chess.KNIGHT,
    Piece.BISHOP: chess.BISHOP,
    Piece.ROOK: chess.ROOK,
    Piece.QUEEN: chess.QUEEN,
    Piece.KING: chess.KING,
}


def to_chess_square(square: Square) -> chess.Square:
    """Convert a Square to a python-chess square index.

    Raises:
        ValueError: If the square is the sentinel or lies off the board.
    """
    return chess.parse_square(str(square))


def from_chess_square(square: chess.Square) -> Square:
    """Convert a python-chess square index to a Square."""
    return Square.parse(chess.square_name(square))


def to_chess_move(move: Move) -> chess.Move:
    """Convert a Move to a chess.Move.

    Raises:
        ValueError: If either square is not on the board.
    """
    promotion = _TO_CHESS_PIECE[move.promotion] if move.promotion is not None else None
    return chess.Move(
        to_chess_square(move.from_square),
        to_chess_square(move.to_square),
        promotion=promotion,
    )


def from_chess_move(move: chess.Move) -> Move:
    """Convert a chess.Move to a Move.

    Raises:
        ValueError: For the null move (`0000`), which has no UCI move value.
        ValueError: For drop moves, which UCI chess does not know.
    """
    if not move:
        msg = "Null move cannot be represented as a UCI move"
        raise ValueError(msg)
    if move.drop is not None:
        msg = f"Drop move cannot be represented as a UCI move: {move.uci()}"
        raise ValueError(msg)

    return Move.parse(move.uci())
