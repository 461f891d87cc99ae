"""Two-click selection state machine.

States::

    Idle ──(click own piece with legal moves)──▶ Selected
    Selected ──(click highlighted square: move)──▶ Idle
    Selected ──(click own piece with legal moves)──▶ Selected (re-select)
    Selected ──(any other click)──▶ Idle

The state is an explicit value threaded through ``handle_click``; nothing
here touches Qt.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from schack.core.errors import InvalidCoordinate, InvalidNotation
from schack.core.piece import Piece
from schack.core.types import (
    Square,
    is_valid_square,
    square_to_filerank,
    to_tuple_moves,
)

if TYPE_CHECKING:
    from schack.core.snapshot import BoardSnapshot
    from schack.engine.interfaces import IRulesEngine

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Idle:
    """Nothing selected, nothing highlighted."""

    @property
    def destinations(self) -> frozenset[Square]:
        return frozenset()


@dataclass(frozen=True, slots=True)
class Selected:
    """A piece of the side to move is chosen; *destinations* are highlighted."""

    piece: Piece
    destinations: frozenset[Square]

    @property
    def origin(self) -> Square:
        return self.piece.square


SelectionState: TypeAlias = Idle | Selected

IDLE = Idle()


def is_move_target(state: SelectionState, square: Square) -> bool:
    """True when a click on *square* confirms a move from the selection."""
    return isinstance(state, Selected) and square in state.destinations


def handle_click(
    state: SelectionState,
    square: Square,
    snapshot: BoardSnapshot,
    engine: IRulesEngine,
) -> SelectionState:
    """Apply one primary-button click on *square* and return the next state."""
    if not is_valid_square(*square):
        _LOGGER.debug("Ignoring click on off-board square %r", square)
        return IDLE

    # 1. Confirm a move onto a highlighted square
    if is_move_target(state, square):
        assert isinstance(state, Selected)
        origin = square_to_filerank(*state.origin)
        target = square_to_filerank(*square)
        _LOGGER.debug("Move %s → %s", origin, target)
        engine.make_move(origin, target)
        return IDLE

    # 2. Select a piece of the side to move
    piece = snapshot.piece_at(square)
    if piece is None or piece.is_white != engine.is_white_turn():
        return IDLE

    code = square_to_filerank(*square)
    codes = engine.get_possible_moves(code)
    if not codes:
        _LOGGER.debug("No legal moves from %s", code)
        return IDLE
    try:
        destinations = frozenset(to_tuple_moves(codes))
    except (InvalidNotation, InvalidCoordinate):
        _LOGGER.warning("Engine returned unparseable destinations for %s: %r", code, codes)
        return IDLE

    _LOGGER.debug("Selected %s at %s, %d destinations", piece.role, code, len(destinations))
    return Selected(piece, destinations)
