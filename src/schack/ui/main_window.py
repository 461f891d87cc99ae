"""MainWindow — top-level window hosting the board."""

from __future__ import annotations

import logging
from dataclasses import replace

from PyQt6.QtGui import QAction, QActionGroup
from PyQt6.QtWidgets import QLabel, QMainWindow, QMenu, QStatusBar

from schack.core.snapshot import BoardSnapshot
from schack.engine.interfaces import IRulesEngine
from schack.game.controller import BoardController
from schack.ui.board.board_view import BoardView
from schack.ui.settings import AppSettings, apply_settings
from schack.ui.styles.theme import THEMES

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window for Schack."""

    def __init__(
        self,
        engine: IRulesEngine | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Schack")

        self._controller = BoardController(engine)
        self._settings = settings if settings is not None else AppSettings()

        self._setup_ui()
        self._setup_menu()
        self._controller.events.on_refresh.append(self._on_refresh)

        self.apply_settings(self._settings)
        self._update_status()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        self._board_view = BoardView(self._controller)
        self.setCentralWidget(self._board_view)

        self._status_label = QLabel()
        status_bar = QStatusBar()
        status_bar.addWidget(self._status_label, 1)
        self.setStatusBar(status_bar)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        menu_game = menu_bar.addMenu("&Game")
        assert menu_game is not None

        self._act_new = QAction("&New Game", self)
        self._act_new.setShortcut("Ctrl+N")
        self._act_new.triggered.connect(self.new_game)
        menu_game.addAction(self._act_new)

        menu_game.addSeparator()

        self._act_quit = QAction("&Quit", self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        menu_game.addAction(self._act_quit)

        # Settings menu
        menu_settings = menu_bar.addMenu("&Settings")
        assert menu_settings is not None

        menu_theme = menu_settings.addMenu("Board &Theme")
        assert menu_theme is not None
        self._theme_group = QActionGroup(self)
        self._theme_group.setExclusive(True)
        self._theme_actions: dict[str, QAction] = {}
        for name in THEMES:
            act = QAction(name, self)
            act.setCheckable(True)
            act.triggered.connect(lambda _checked, n=name: self._on_theme(n))
            self._theme_group.addAction(act)
            menu_theme.addAction(act)
            self._theme_actions[name] = act

        self._act_coords = self._add_toggle(
            menu_settings, "Show &Coordinates", "show_coordinates"
        )
        self._act_legal = self._add_toggle(
            menu_settings, "Show &Legal Moves", "show_legal_moves"
        )
        self._act_status = self._add_toggle(
            menu_settings, "Show &Status Text", "show_status_text"
        )

    def _add_toggle(self, menu: QMenu, text: str, field_name: str) -> QAction:
        act = QAction(text, self)
        act.setCheckable(True)
        act.toggled.connect(lambda checked: self._on_toggle(field_name, checked))
        menu.addAction(act)
        return act

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def controller(self) -> BoardController:
        return self._controller

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def settings(self) -> AppSettings:
        return self._settings

    def apply_settings(self, settings: AppSettings) -> None:
        scene = self._board_view.board_scene
        resize = scene.tile_size() != settings.tile_size or not self.isVisible()
        self._settings = settings
        apply_settings(scene, settings)
        self._sync_settings_menu()
        if resize:
            tile = scene.tile_size()
            self._board_view.setMinimumSize(tile * 4, tile * 4)
            self.resize(tile * 8 + 4, tile * 8 + 48)

    def new_game(self) -> None:
        _LOGGER.info("Starting a new game")
        self._controller.new_game()

    def status_message(self) -> str:
        return self._status_label.text()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _on_theme(self, name: str) -> None:
        self.apply_settings(replace(self._settings, board_theme=name))

    def _on_toggle(self, field_name: str, checked: bool) -> None:
        if getattr(self._settings, field_name) == checked:
            return
        self.apply_settings(replace(self._settings, **{field_name: checked}))

    def _sync_settings_menu(self) -> None:
        s = self._settings
        theme = s.board_theme if s.board_theme in self._theme_actions else "Classic"
        self._theme_actions[theme].setChecked(True)
        for act, value in (
            (self._act_coords, s.show_coordinates),
            (self._act_legal, s.show_legal_moves),
            (self._act_status, s.show_status_text),
        ):
            act.blockSignals(True)
            act.setChecked(value)
            act.blockSignals(False)

    def _on_refresh(self, _snapshot: BoardSnapshot) -> None:
        self._update_status()

    def _update_status(self) -> None:
        turn = "White" if self._controller.engine.is_white_turn() else "Black"
        self._status_label.setText(f"{self._controller.status_text()} {turn} to move.")
