"""Game layer — selection state machine and board controller.

Quick start::

    from schack.game import BoardController

    ctrl = BoardController()
    ctrl.click(4 * 90 + 10, 6 * 90 + 10)  # select the e2 pawn
    ctrl.click(4 * 90 + 10, 4 * 90 + 10)  # play e2-e4
"""

from schack.game.controller import BoardController, ControllerEvents
from schack.game.selection import (
    IDLE,
    Idle,
    Selected,
    SelectionState,
    handle_click,
    is_move_target,
)

__all__ = [
    "IDLE",
    "BoardController",
    "ControllerEvents",
    "Idle",
    "Selected",
    "SelectionState",
    "handle_click",
    "is_move_target",
]
