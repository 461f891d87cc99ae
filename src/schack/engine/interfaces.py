"""Abstract rules-engine interface consumed by the board adapter.

The adapter never inspects engine internals: any implementation of
``IRulesEngine`` can drive the board, which lets tests run against a stub.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum


class GameStatus(str, Enum):
    """Display label for the state of a game."""

    ONGOING = "Ongoing"
    CHECK = "Check"
    CHECKMATE = "Checkmate"
    STALEMATE = "Stalemate"
    DRAW = "Draw"

    def __str__(self) -> str:
        return self.value


class IRulesEngine(ABC):
    """Interface for a chess-rules engine.

    Squares cross this boundary in upper-case file-rank notation (``"E2"``).
    """

    @classmethod
    @abstractmethod
    def new(cls) -> IRulesEngine:
        """Fresh game at the standard starting position, white to move."""

    @abstractmethod
    def get_board(self) -> str:
        """Row-major board serialization, rank 8 first.

        Eight characters per row followed by ``"\\n"``; ``*`` marks an empty
        square, upper-case letters are white pieces.
        """

    @abstractmethod
    def get_game_state(self) -> GameStatus | str:
        """Human-readable state label, used only for display."""

    @abstractmethod
    def is_white_turn(self) -> bool: ...

    @abstractmethod
    def get_possible_moves(self, from_square: str) -> list[str] | None:
        """Legal destinations from *from_square*.

        ``None`` (or an empty list) when the square has no piece or no
        legal moves.
        """

    @abstractmethod
    def make_move(self, from_square: str, to_square: str) -> None:
        """Play a move. Illegal moves are the engine's business to reject."""
