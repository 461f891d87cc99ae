"""Core enumerations for the board adapter."""

from __future__ import annotations

from enum import IntEnum


class Role(IntEnum):
    """Piece role as shown on the board.

    ``NONE`` stands for an unrecognised board character; it is never drawn
    and never selectable.
    """

    NONE = 0
    KING = 1
    QUEEN = 2
    BISHOP = 3
    KNIGHT = 4
    ROOK = 5
    PAWN = 6

    def __str__(self) -> str:
        return self.name.lower()


class MouseButton(IntEnum):
    """Mouse buttons the controller distinguishes, independent of Qt."""

    LEFT = 1
    RIGHT = 2
    MIDDLE = 3
    OTHER = 4
