"""User settings and how they are applied to the board."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from schack.ui.styles.theme import THEMES, BoardTheme

if TYPE_CHECKING:
    from schack.ui.board.board_scene import BoardScene

_LOGGER = logging.getLogger(__name__)

MIN_TILE_SIZE = 32


@dataclass
class AppSettings:
    """All user-configurable settings (kept in memory only)."""

    # Board
    board_theme: str = "Classic"
    tile_size: int = 90
    show_coordinates: bool = False
    show_legal_moves: bool = True
    show_status_text: bool = True


def resolve_theme(name: str) -> BoardTheme:
    """Theme preset by name, ``Classic`` for unknown names."""
    theme = THEMES.get(name)
    if theme is None:
        _LOGGER.warning("Unknown board theme %r, using Classic", name)
        return THEMES["Classic"]
    return theme


def apply_settings(scene: BoardScene, settings: AppSettings) -> None:
    """Push *settings* into a board scene."""
    if settings.tile_size < MIN_TILE_SIZE:
        raise ValueError(
            f"Tile size must be at least {MIN_TILE_SIZE}px, got {settings.tile_size}"
        )
    scene.set_theme(resolve_theme(settings.board_theme))
    if scene.tile_size() != settings.tile_size:
        scene.set_tile_size(settings.tile_size)
    scene.set_show_coordinates(settings.show_coordinates)
    scene.set_show_legal_moves(settings.show_legal_moves)
    scene.set_show_status(settings.show_status_text)
