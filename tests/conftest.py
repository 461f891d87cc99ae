"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

from schack.engine.interfaces import GameStatus, IRulesEngine

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


START_BOARD = (
    "rnbqkbnr\n"
    "pppppppp\n"
    "********\n"
    "********\n"
    "********\n"
    "********\n"
    "PPPPPPPP\n"
    "RNBQKBNR\n"
)


class StubEngine(IRulesEngine):
    """Scriptable rules engine: fixed board, canned moves, recorded calls."""

    def __init__(
        self,
        board: str = START_BOARD,
        *,
        white_turn: bool = True,
        moves: dict[str, list[str] | None] | None = None,
        state: GameStatus | str = GameStatus.ONGOING,
    ) -> None:
        self.board = board
        self.white_turn = white_turn
        self.moves = dict(moves or {})
        self.state = state
        self.made: list[tuple[str, str]] = []
        self.queried: list[str] = []

    @classmethod
    def new(cls) -> StubEngine:
        return cls()

    def get_board(self) -> str:
        return self.board

    def get_game_state(self) -> GameStatus | str:
        return self.state

    def is_white_turn(self) -> bool:
        return self.white_turn

    def get_possible_moves(self, from_square: str) -> list[str] | None:
        self.queried.append(from_square)
        return self.moves.get(from_square)

    def make_move(self, from_square: str, to_square: str) -> None:
        self.made.append((from_square, to_square))
        self.white_turn = not self.white_turn


@pytest.fixture
def stub_engine_cls() -> type[StubEngine]:
    """The stub engine class, for tests that script their own board."""
    return StubEngine


@pytest.fixture
def stub_engine() -> StubEngine:
    """Stub engine at the starting position with a few scripted moves."""
    return StubEngine(
        moves={
            "E2": ["E3", "E4"],
            "G1": ["F3", "H3"],
            "E7": ["E6", "E5"],
        }
    )


def _is_ui_test(request: pytest.FixtureRequest) -> bool:
    return "ui" in Path(str(request.node.fspath)).parts


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for UI tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _cleanup_qt_widgets(
    request: pytest.FixtureRequest,
) -> Iterator[None]:
    """Ensure UI tests do not leak top-level widgets into the next test."""
    if not _is_ui_test(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield

    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()
