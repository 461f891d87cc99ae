"""Square type alias and coordinate helpers.

Board layout (as drawn, white at the bottom)::

    (0,0)=A8  (1,0)=B8  ...  (7,0)=H8
    ...
    (0,7)=A1  (1,7)=B1  ...  (7,7)=H1

A square is a ``(column, row)`` pair: column 0 is file A, row 0 is rank 8.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeAlias

from schack.core.errors import InvalidCoordinate, InvalidNotation

Square: TypeAlias = tuple[int, int]  # (column, row), both 0–7

BOARD_SIZE = 8
FILES = "ABCDEFGH"
RANKS = "12345678"


def is_valid_square(column: object, row: object) -> bool:
    """Check whether *column* and *row* are both ints in 0–7."""
    return (
        isinstance(column, int)
        and isinstance(row, int)
        and not isinstance(column, bool)
        and not isinstance(row, bool)
        and 0 <= column < BOARD_SIZE
        and 0 <= row < BOARD_SIZE
    )


def square_to_filerank(column: int, row: int) -> str:
    """Grid coordinates → file-rank, e.g. ``(0, 0)`` → ``'A8'``."""
    if not is_valid_square(column, row):
        raise InvalidCoordinate(f"Square out of range: ({column!r}, {row!r})")
    return FILES[column] + str(BOARD_SIZE - row)


def filerank_to_square(code: str) -> Square:
    """File-rank → grid coordinates, e.g. ``'E4'`` → ``(4, 4)``.

    File letters are upper-case only.
    """
    if (
        not isinstance(code, str)
        or len(code) != 2
        or code[0] not in FILES
        or code[1] not in RANKS
    ):
        raise InvalidNotation(f"Invalid file-rank: {code!r}")
    column = FILES.index(code[0])
    row = 7 - (int(code[1]) - 1)
    return column, row


def to_tuple_moves(codes: Iterable[str]) -> list[Square]:
    """Convert engine destinations to squares, one-to-one and in order."""
    return [filerank_to_square(code) for code in codes]


def pixel_to_square(x: float, y: float, tile_size: int) -> Square | None:
    """Pixel position → square, or ``None`` outside the board."""
    if tile_size <= 0:
        raise ValueError(f"Tile size must be positive, got {tile_size}")
    if x < 0 or y < 0:
        return None
    column = int(x // tile_size)
    row = int(y // tile_size)
    if not (column < BOARD_SIZE and row < BOARD_SIZE):
        return None
    return column, row


def all_squares() -> list[Square]:
    """Every square in row-major drawing order."""
    return [(column, row) for row in range(BOARD_SIZE) for column in range(BOARD_SIZE)]
