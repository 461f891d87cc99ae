"""BoardController — owns the engine, the snapshot and the selection state.

Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from schack.core.enums import MouseButton
from schack.core.errors import InvalidCoordinate
from schack.core.piece import Piece
from schack.core.snapshot import BoardSnapshot
from schack.core.types import Square, pixel_to_square, square_to_filerank
from schack.engine import DefaultEngine
from schack.engine.interfaces import GameStatus, IRulesEngine
from schack.game.selection import (
    IDLE,
    SelectionState,
    Selected,
    handle_click,
    is_move_target,
)

_LOGGER = logging.getLogger(__name__)

DEFAULT_TILE_SIZE = 90  # px per square

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[str, str], None]  # from, to (file-rank), once accepted
SelectionCallback = Callable[[SelectionState], None]
RefreshCallback = Callable[[BoardSnapshot], None]


@dataclass
class ControllerEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_refresh: list[RefreshCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class BoardController:
    """Translates clicks in board pixels into moves against an engine.

    The snapshot is rebuilt from the engine after every click and on
    ``refresh``; it is never patched incrementally.

    Args:
        engine: Rules engine to drive; a fresh ``engine_cls.new()`` if omitted.
        engine_cls: Engine type used by ``new_game``.
        tile_size: Pixel size of one square.
    """

    __slots__ = (
        "_engine",
        "_engine_cls",
        "_snapshot",
        "_state",
        "_tile_size",
        "events",
    )

    def __init__(
        self,
        engine: IRulesEngine | None = None,
        *,
        engine_cls: type[IRulesEngine] | None = None,
        tile_size: int = DEFAULT_TILE_SIZE,
    ) -> None:
        if engine_cls is None:
            engine_cls = type(engine) if engine is not None else DefaultEngine
        self._engine_cls = engine_cls
        self._engine = engine if engine is not None else engine_cls.new()
        self._state: SelectionState = IDLE
        self._tile_size = tile_size
        self.events = ControllerEvents()
        self._snapshot = BoardSnapshot.parse(self._engine.get_board())

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def engine(self) -> IRulesEngine:
        return self._engine

    @property
    def snapshot(self) -> BoardSnapshot:
        return self._snapshot

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def highlights(self) -> frozenset[Square]:
        return self._state.destinations

    @property
    def selected_piece(self) -> Piece | None:
        if isinstance(self._state, Selected):
            return self._state.piece
        return None

    @property
    def tile_size(self) -> int:
        return self._tile_size

    @tile_size.setter
    def tile_size(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"Tile size must be positive, got {size}")
        self._tile_size = size

    # ── Game lifecycle ───────────────────────────────────────────────────

    def new_game(self) -> None:
        """Replace the engine with a fresh game and clear the selection."""
        self._engine = self._engine_cls.new()
        self._set_state(IDLE)
        self.refresh()

    def refresh(self) -> BoardSnapshot:
        """Rebuild the snapshot from the engine's current board."""
        self._snapshot = BoardSnapshot.parse(self._engine.get_board())
        for cb in self.events.on_refresh:
            cb(self._snapshot)
        return self._snapshot

    def game_status(self) -> GameStatus | str:
        return self._engine.get_game_state()

    def status_text(self) -> str:
        """Display text, e.g. ``"Game is Ongoing."``."""
        return f"Game is {self.game_status()}."

    # ── Input ────────────────────────────────────────────────────────────

    def click(self, x: float, y: float, button: MouseButton = MouseButton.LEFT) -> bool:
        """Handle a mouse click at board pixel (*x*, *y*).

        Returns True when the click was consumed by the state machine,
        False when it was ignored (other button, outside the board).
        """
        if button != MouseButton.LEFT:
            return False
        square = pixel_to_square(x, y, self._tile_size)
        if square is None:
            _LOGGER.debug("Ignoring click outside the board at (%s, %s)", x, y)
            return False
        return self.click_square(square)

    def click_square(self, square: Square) -> bool:
        """Drive the selection state machine with a click on *square*."""
        try:
            code = square_to_filerank(*square)
        except InvalidCoordinate:
            _LOGGER.debug("Ignoring click on invalid square %r", square)
            return False
        _LOGGER.debug(
            "Click on %s, piece present: %s", code, self._snapshot.piece_at(square) is not None
        )

        previous = self._state
        white_to_move = self._engine.is_white_turn()
        new_state = handle_click(previous, square, self._snapshot, self._engine)
        # The engine rejects illegal moves silently; only a turn change counts.
        if (
            is_move_target(previous, square)
            and self._engine.is_white_turn() != white_to_move
        ):
            assert isinstance(previous, Selected)
            self._emit_move(square_to_filerank(*previous.origin), code)
        self._set_state(new_state)
        self.refresh()
        return True

    def clear_selection(self) -> None:
        self._set_state(IDLE)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _set_state(self, state: SelectionState) -> None:
        if state == self._state:
            return
        self._state = state
        for cb in self.events.on_selection_changed:
            cb(state)

    def _emit_move(self, from_code: str, to_code: str) -> None:
        for cb in self.events.on_move:
            cb(from_code, to_code)
