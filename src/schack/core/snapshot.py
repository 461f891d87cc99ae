"""BoardSnapshot — the 8×8 piece grid rebuilt from the engine's board string."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from schack.core.errors import BoardFormatError, InvalidCoordinate
from schack.core.piece import EMPTY_CHAR, Piece
from schack.core.types import BOARD_SIZE, Square, is_valid_square

_LOGGER = logging.getLogger(__name__)

# Eight squares plus the trailing line separator.
_ROW_STRIDE = BOARD_SIZE + 1


class BoardSnapshot:
    """Read-only 8×8 grid of ``Piece | None`` indexed ``[row][column]``.

    Never patched in place: a new snapshot is parsed on every refresh.
    """

    __slots__ = ("_grid",)

    def __init__(self, grid: list[list[Piece | None]]) -> None:
        if len(grid) != BOARD_SIZE or any(len(r) != BOARD_SIZE for r in grid):
            raise BoardFormatError("Snapshot grid must be 8×8")
        self._grid = grid

    @classmethod
    def empty(cls) -> BoardSnapshot:
        return cls([[None] * BOARD_SIZE for _ in range(BOARD_SIZE)])

    @classmethod
    def parse(cls, serialized: str) -> BoardSnapshot:
        """Parse the engine's row-major board string.

        Each row is eight characters followed by one separator, which is
        skipped. ``*`` is an empty square; unknown characters become a
        ``Role.NONE`` placeholder.
        """
        needed = BOARD_SIZE * _ROW_STRIDE - 1  # last separator is optional
        if len(serialized) < needed:
            raise BoardFormatError(
                f"Board string too short: {len(serialized)} < {needed} characters"
            )

        grid: list[list[Piece | None]] = []
        for row in range(BOARD_SIZE):
            cells: list[Piece | None] = []
            for column in range(BOARD_SIZE):
                char = serialized[row * _ROW_STRIDE + column]
                if char == EMPTY_CHAR:
                    cells.append(None)
                    continue
                piece = Piece.from_char(char, (column, row))
                if not piece.is_present:
                    _LOGGER.debug(
                        "Unrecognised board character %r at (%d, %d)", char, column, row
                    )
                cells.append(piece)
            grid.append(cells)
        return cls(grid)

    def __getitem__(self, row: int) -> tuple[Piece | None, ...]:
        return tuple(self._grid[row])

    def piece_at(self, square: Square) -> Piece | None:
        """Return the piece on *square*, ``None`` when empty or unrecognised.

        Raises ``InvalidCoordinate`` for squares off the board.
        """
        column, row = square
        if not is_valid_square(column, row):
            raise InvalidCoordinate(f"Square out of range: {square!r}")
        piece = self._grid[row][column]
        if piece is None or not piece.is_present:
            return None
        return piece

    def pieces(self) -> Iterator[Piece]:
        """Iterate over every present piece in row-major order."""
        for cells in self._grid:
            for piece in cells:
                if piece is not None and piece.is_present:
                    yield piece

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardSnapshot):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows = []
        for cells in self._grid:
            rows.append("".join(EMPTY_CHAR if p is None else str(p) for p in cells))
        return f"BoardSnapshot({'/'.join(rows)})"
