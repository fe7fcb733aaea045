"""Tests for python-chess interop."""

import chess
import pytest

from uciproto.uci import Move, Piece, Square
from uciproto.uci.interop import from_chess_move, from_chess_square, to_chess_move, to_chess_square


class TestSquares:
    """Tests for square conversion."""

    def test_to_chess_square(self) -> None:
        assert to_chess_square(Square("e", 4)) == chess.E4
        assert to_chess_square(Square("a", 1)) == chess.A1
        assert to_chess_square(Square("h", 8)) == chess.H8

    def test_from_chess_square(self) -> None:
        assert from_chess_square(chess.G7) == Square("g", 7)

    def test_sentinel_rejected(self) -> None:
        """Test the sentinel square has no board index."""
        with pytest.raises(ValueError):
            to_chess_square(Square())

    def test_every_board_square(self) -> None:
        """Test conversion agrees with python-chess square names on the whole board."""
        for square in chess.SQUARES:
            converted = from_chess_square(square)
            assert str(converted) == chess.square_name(square)
            assert to_chess_square(converted) == square

    def test_off_board_rejected(self) -> None:
        with pytest.raises(ValueError):
            to_chess_square(Square("i", 1))


class TestMoves:
    """Tests for move conversion."""

    def test_to_chess_move(self, b4d6q: Move) -> None:
        assert to_chess_move(b4d6q) == chess.Move.from_uci("b4d6q")

    def test_from_chess_move(self) -> None:
        move = from_chess_move(chess.Move.from_uci("a7a8n"))
        assert move == Move(Square("a", 7), Square("a", 8), Piece.KNIGHT)

    def test_notation_agrees(self) -> None:
        """Test both libraries render the same text."""
        for uci in ("e2e4", "e1g1", "h2h1q", "b7b8r"):
            assert str(from_chess_move(chess.Move.from_uci(uci))) == uci
            assert to_chess_move(Move.parse(uci)).uci() == uci

    def test_legality_is_not_checked(self) -> None:
        """Test that nonsense moves convert without complaint."""
        assert to_chess_move(Move.parse("a1h8k")).uci() == "a1h8k"

    def test_null_move_rejected(self) -> None:
        with pytest.raises(ValueError):
            from_chess_move(chess.Move.null())

    def test_drop_move_rejected(self) -> None:
        with pytest.raises(ValueError):
            from_chess_move(chess.Move.from_uci("N@f3"))
