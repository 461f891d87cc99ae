"""Core layer — coordinates, pieces and board snapshots, free of Qt.

Quick start::

    from schack.core import BoardSnapshot, square_to_filerank

    snap = BoardSnapshot.parse(engine.get_board())
    piece = snap.piece_at((4, 6))
    print(square_to_filerank(*piece.square))  # "E2"
"""

from schack.core.enums import MouseButton, Role
from schack.core.errors import (
    BoardFormatError,
    InvalidCoordinate,
    InvalidNotation,
    SchackError,
)
from schack.core.piece import EMPTY_CHAR, Piece
from schack.core.snapshot import BoardSnapshot
from schack.core.types import (
    BOARD_SIZE,
    FILES,
    Square,
    all_squares,
    filerank_to_square,
    is_valid_square,
    pixel_to_square,
    square_to_filerank,
    to_tuple_moves,
)

__all__ = [
    # Enums
    "MouseButton",
    "Role",
    # Errors
    "BoardFormatError",
    "InvalidCoordinate",
    "InvalidNotation",
    "SchackError",
    # Types / helpers
    "BOARD_SIZE",
    "FILES",
    "Square",
    "all_squares",
    "filerank_to_square",
    "is_valid_square",
    "pixel_to_square",
    "square_to_filerank",
    "to_tuple_moves",
    # Domain objects
    "EMPTY_CHAR",
    "BoardSnapshot",
    "Piece",
]
