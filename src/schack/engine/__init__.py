"""Rules-engine package: the abstract interface and its default adapter."""

from schack.engine.interfaces import GameStatus, IRulesEngine
from schack.engine.python_chess import PythonChessEngine

DefaultEngine: type[IRulesEngine] = PythonChessEngine

__all__ = [
    "DefaultEngine",
    "GameStatus",
    "IRulesEngine",
    "PythonChessEngine",
]
