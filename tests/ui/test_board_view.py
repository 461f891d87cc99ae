"""Tests for BoardView mouse handling through real Qt events."""

from __future__ import annotations

from typing import Any

from PyQt6.QtCore import QPoint, QPointF, Qt
from PyQt6.QtTest import QTest

from schack.game.controller import BoardController
from schack.game.selection import IDLE, Selected
from schack.ui.board.board_view import BoardView

_LEFT = Qt.MouseButton.LeftButton
_NO_MOD = Qt.KeyboardModifier.NoModifier


def _make_view(engine: Any = None) -> BoardView:
    view = BoardView(BoardController(engine))
    view.resize(740, 740)
    view.show()
    QTest.qWaitForWindowExposed(view)
    return view


def _square_point(view: BoardView, column: int, row: int) -> QPoint:
    t = view.board_scene.tile_size()
    return view.mapFromScene(QPointF(column * t + t / 2, row * t + t / 2))


def test_press_alone_does_not_select() -> None:
    view = _make_view()

    QTest.mousePress(view.viewport(), _LEFT, _NO_MOD, _square_point(view, 4, 6))

    assert view.board_scene.controller.state == IDLE


def test_release_selects_piece() -> None:
    view = _make_view()
    pos = _square_point(view, 4, 6)

    QTest.mousePress(view.viewport(), _LEFT, _NO_MOD, pos)
    QTest.mouseRelease(view.viewport(), _LEFT, _NO_MOD, pos)

    state = view.board_scene.controller.state
    assert isinstance(state, Selected)
    assert state.origin == (4, 6)


def test_release_square_decides_the_click(stub_engine: Any) -> None:
    view = _make_view(stub_engine)
    origin = _square_point(view, 4, 6)
    QTest.mouseClick(view.viewport(), _LEFT, _NO_MOD, origin)

    # Press on an empty square, release on the highlighted target.
    QTest.mousePress(view.viewport(), _LEFT, _NO_MOD, _square_point(view, 0, 4))
    QTest.mouseRelease(view.viewport(), _LEFT, _NO_MOD, _square_point(view, 4, 4))

    assert stub_engine.made == [("E2", "E4")]
    assert view.board_scene.controller.state == IDLE


def test_right_click_is_ignored() -> None:
    view = _make_view()

    QTest.mouseClick(
        view.viewport(), Qt.MouseButton.RightButton, _NO_MOD, _square_point(view, 4, 6)
    )

    assert view.board_scene.controller.state == IDLE
