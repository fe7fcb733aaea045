"""Chess square utilities for coordinate notation.

UCI moves name squares by file letter followed by rank digit (e.g., "e4").
This module holds the alphabet of valid files and ranks and the strict
splitting helper used by the move parser. Board-index conversion is left to
python-chess (`chess.parse_square`, `chess.square_name`).
"""

# File letters and rank numbers for square parsing
FILES = "abcdefgh"
RANKS = "12345678"


def split_square(square: str) -> tuple[str, int]:
    """Split coordinate notation into a file letter and a rank number.

    Args:
        square: Coordinate notation for a square (e.g., 'a1', 'h8').
            Uppercase file letters are accepted and lowered.

    Returns:
        Tuple of (file letter, rank number), e.g. ('e', 4).

    Raises:
        ValueError: If the square notation is invalid.
    """
    if len(square) != 2:
        msg = f"Invalid square notation: {square!r}"
        raise ValueError(msg)

    file_char, rank_char = square[0].lower(), square[1]

    if file_char not in FILES or rank_char not in RANKS:
        msg = f"Invalid square notation: {square!r}"
        raise ValueError(msg)

    return file_char, RANKS.index(rank_char) + 1
