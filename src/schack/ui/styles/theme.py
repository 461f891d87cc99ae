"""Visual theme constants and QSS styles for Schack."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


def add_color(base: QColor, overlay: QColor) -> QColor:
    """Additive blend of *overlay* onto *base*, clamped, fully opaque.

    Channels are summed as-is; the overlay's alpha is ignored.
    """
    r = min(1.0, base.redF() + overlay.redF())
    g = min(1.0, base.greenF() + overlay.greenF())
    b = min(1.0, base.blueF() + overlay.blueF())
    return QColor.fromRgbF(r, g, b, 1.0)


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_to: QColor  # legal move targets, added to the tile colour
    highlight_from: QColor  # selected piece origin, added to the tile colour
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares
    status_background: QColor
    status_text: QColor

    def square_color(self, column: int, row: int) -> QColor:
        """Base colour of a square; A8 is light."""
        return self.light_square if (column + row) % 2 == 0 else self.dark_square

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(228, 196, 108),  # sand
            dark_square=QColor(188, 140, 76),  # ochre
            highlight_to=QColor(40, 90, 80, 77),  # teal, added to the tile colour
            highlight_from=QColor(90, 90, 0, 77),  # yellow
            coord_light=QColor(228, 196, 108),
            coord_dark=QColor(188, 140, 76),
            status_background=QColor(255, 255, 255),
            status_text=QColor(0, 0, 0),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            highlight_to=QColor(40, 90, 80, 77),
            highlight_from=QColor(90, 90, 0, 77),
            coord_light=QColor(222, 227, 230),
            coord_dark=QColor(140, 162, 173),
            status_background=QColor(255, 255, 255),
            status_text=QColor(0, 0, 0),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_square=QColor(236, 238, 220),
            dark_square=QColor(112, 149, 120),
            highlight_to=QColor(40, 90, 80, 77),
            highlight_from=QColor(90, 90, 0, 77),
            coord_light=QColor(236, 238, 220),
            coord_dark=QColor(112, 149, 120),
            status_background=QColor(255, 255, 255),
            status_text=QColor(0, 0, 0),
        )


THEMES: dict[str, BoardTheme] = {
    "Classic": BoardTheme.default(),
    "Blue": BoardTheme.blue(),
    "Green": BoardTheme.green(),
}


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #808080;
}

QStatusBar {
    background: #2b2b2b;
    color: #e0e0e0;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""
