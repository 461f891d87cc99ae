"""Piece rendering helpers for chess SVG assets."""

from __future__ import annotations

from PyQt6.QtSvg import QSvgRenderer

from schack.core.enums import Role
from schack.runtime_assets import asset_path

_ASSETS_DIR = asset_path("pieces")

_ROLE_NAMES: dict[Role, str] = {
    Role.PAWN: "pawn",
    Role.KNIGHT: "knight",
    Role.BISHOP: "bishop",
    Role.ROOK: "rook",
    Role.QUEEN: "queen",
    Role.KING: "king",
}

# Cache SVG renderers (one per colour/role)
_renderers: dict[tuple[bool, Role], QSvgRenderer] = {}


def sprite_path(is_white: bool, role: Role) -> str:
    """Asset path of the sprite for a piece, e.g. ``pieces/king-w.svg``."""
    try:
        name = _ROLE_NAMES[role]
    except KeyError:
        raise ValueError(f"No sprite for role {role!r}") from None
    suffix = "w" if is_white else "b"
    return str(_ASSETS_DIR / f"{name}-{suffix}.svg")


def piece_renderer(is_white: bool, role: Role) -> QSvgRenderer:
    """Load and cache the QSvgRenderer for a piece."""
    key = (is_white, role)
    if key not in _renderers:
        path = sprite_path(is_white, role)
        renderer = QSvgRenderer(path)
        if not renderer.isValid():
            raise FileNotFoundError(f"SVG asset not found or invalid: {path}")
        _renderers[key] = renderer
    return _renderers[key]


def preload_sprites() -> None:
    """Load every sprite up front so a missing asset fails at startup."""
    for is_white in (True, False):
        for role in _ROLE_NAMES:
            piece_renderer(is_white, role)
