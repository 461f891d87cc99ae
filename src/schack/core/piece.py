"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from schack.core.enums import Role
from schack.core.types import Square

EMPTY_CHAR = "*"

# Board character (lower-case) → role; case carries the colour.
_ROLE_CHARS: dict[str, Role] = {
    "k": Role.KING,
    "q": Role.QUEEN,
    "b": Role.BISHOP,
    "n": Role.KNIGHT,
    "r": Role.ROOK,
    "p": Role.PAWN,
}

_CHARS: dict[Role, str] = {v: k for k, v in _ROLE_CHARS.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable piece as seen in one board snapshot."""

    role: Role
    is_white: bool
    square: Square

    def __str__(self) -> str:
        """Board character (upper-case = white), ``?`` for an unknown role."""
        char = _CHARS.get(self.role, "?")
        return char.upper() if self.is_white else char

    @property
    def is_present(self) -> bool:
        """False for placeholders built from unrecognised characters."""
        return self.role is not Role.NONE

    @classmethod
    def from_char(cls, char: str, square: Square) -> Piece:
        """Create a piece from a board character, e.g. ``'N'`` → white knight.

        Unknown characters produce ``Role.NONE`` instead of failing.
        """
        role = _ROLE_CHARS.get(char.lower(), Role.NONE)
        return cls(role, char.isupper(), square)
