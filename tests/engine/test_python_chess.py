"""Tests for the python-chess rules engine adapter."""

import chess
import pytest

from schack.core.snapshot import BoardSnapshot
from schack.engine import DefaultEngine
from schack.engine.interfaces import GameStatus, IRulesEngine
from schack.engine.python_chess import PythonChessEngine

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


@pytest.fixture
def engine() -> PythonChessEngine:
    return PythonChessEngine.new()


class TestBoard:
    def test_start_serialization(self, engine: PythonChessEngine) -> None:
        assert engine.get_board() == START_BOARD

    def test_serialization_parses(self, engine: PythonChessEngine) -> None:
        snap = BoardSnapshot.parse(engine.get_board())
        assert len(list(snap.pieces())) == 32

    def test_custom_fen(self) -> None:
        eng = PythonChessEngine("4k3/8/8/8/8/8/8/4K3 w - - 0 1")
        rows = eng.get_board().split("\n")
        assert rows[0] == "****k***"
        assert rows[7] == "****K***"


class TestTurns:
    def test_white_moves_first(self, engine: PythonChessEngine) -> None:
        assert engine.is_white_turn()

    def test_move_switches_turn(self, engine: PythonChessEngine) -> None:
        engine.make_move("E2", "E4")
        assert not engine.is_white_turn()
        rows = engine.get_board().split("\n")
        assert rows[4] == "****P***"
        assert rows[6] == "PPPP*PPP"

    def test_illegal_move_is_ignored(self, engine: PythonChessEngine) -> None:
        engine.make_move("E2", "E5")
        assert engine.is_white_turn()
        assert engine.get_board() == START_BOARD

    def test_bad_square_in_move_is_ignored(self, engine: PythonChessEngine) -> None:
        engine.make_move("Z9", "E4")
        assert engine.get_board() == START_BOARD

    def test_pawn_promotes_to_queen(self) -> None:
        eng = PythonChessEngine("7k/P7/8/8/8/8/8/K7 w - - 0 1")
        eng.make_move("A7", "A8")
        piece = eng.board.piece_at(chess.A8)
        assert piece is not None
        assert piece.piece_type == chess.QUEEN and piece.color == chess.WHITE


class TestPossibleMoves:
    def test_pawn_moves(self, engine: PythonChessEngine) -> None:
        assert sorted(engine.get_possible_moves("E2") or []) == ["E3", "E4"]

    def test_knight_moves(self, engine: PythonChessEngine) -> None:
        assert sorted(engine.get_possible_moves("G1") or []) == ["F3", "H3"]

    def test_empty_square_is_none(self, engine: PythonChessEngine) -> None:
        assert engine.get_possible_moves("E4") is None

    def test_blocked_piece_is_none(self, engine: PythonChessEngine) -> None:
        assert engine.get_possible_moves("E1") is None

    def test_opponent_piece_has_no_moves(self, engine: PythonChessEngine) -> None:
        assert engine.get_possible_moves("E7") is None

    def test_bad_square_is_none(self, engine: PythonChessEngine) -> None:
        assert engine.get_possible_moves("Z9") is None

    def test_promotion_destinations_are_unique(self) -> None:
        eng = PythonChessEngine("7k/P7/8/8/8/8/8/K7 w - - 0 1")
        assert eng.get_possible_moves("A7") == ["A8"]


class TestGameState:
    def test_ongoing(self, engine: PythonChessEngine) -> None:
        assert engine.get_game_state() == GameStatus.ONGOING
        assert str(engine.get_game_state()) == "Ongoing"

    def test_check(self) -> None:
        eng = PythonChessEngine("4k3/8/8/8/8/8/4R3/4K3 b - - 0 1")
        assert eng.get_game_state() == GameStatus.CHECK

    def test_fools_mate(self, engine: PythonChessEngine) -> None:
        for src, dst in (("F2", "F3"), ("E7", "E5"), ("G2", "G4"), ("D8", "H4")):
            engine.make_move(src, dst)
        assert engine.get_game_state() == GameStatus.CHECKMATE

    def test_stalemate(self) -> None:
        eng = PythonChessEngine("7k/5Q2/6K1/8/8/8/8/8 b - - 0 1")
        assert eng.get_game_state() == GameStatus.STALEMATE

    def test_insufficient_material_is_draw(self) -> None:
        eng = PythonChessEngine("8/8/8/8/8/8/8/K6k w - - 0 1")
        assert eng.get_game_state() == GameStatus.DRAW


def test_default_engine_is_python_chess() -> None:
    assert DefaultEngine is PythonChessEngine
    assert isinstance(DefaultEngine.new(), IRulesEngine)
