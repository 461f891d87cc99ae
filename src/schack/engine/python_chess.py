"""IRulesEngine adapter over the ``python-chess`` library."""

from __future__ import annotations

import logging

import chess

from schack.engine.interfaces import GameStatus, IRulesEngine

_LOGGER = logging.getLogger(__name__)

_EMPTY = "*"
_ROW_SEPARATOR = "\n"


def _to_chess_square(code: str) -> chess.Square:
    """``'E2'`` → ``chess.E2``; raises ``ValueError`` on bad input."""
    return chess.parse_square(code.lower())


def _to_code(square: chess.Square) -> str:
    return chess.square_name(square).upper()


class PythonChessEngine(IRulesEngine):
    """Rules engine backed by ``chess.Board``.

    Args:
        fen: Optional starting position; the standard one when omitted.
    """

    __slots__ = ("_board",)

    def __init__(self, fen: str | None = None) -> None:
        self._board = chess.Board() if fen is None else chess.Board(fen)

    @classmethod
    def new(cls) -> PythonChessEngine:
        return cls()

    @property
    def board(self) -> chess.Board:
        """Underlying ``chess.Board`` (read it, do not mutate it)."""
        return self._board

    # ── IRulesEngine impl ────────────────────────────────────────────────

    def get_board(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            cells = []
            for file in range(8):
                piece = self._board.piece_at(chess.square(file, rank))
                cells.append(_EMPTY if piece is None else piece.symbol())
            rows.append("".join(cells) + _ROW_SEPARATOR)
        return "".join(rows)

    def get_game_state(self) -> GameStatus:
        board = self._board
        if board.is_checkmate():
            return GameStatus.CHECKMATE
        if board.is_stalemate():
            return GameStatus.STALEMATE
        if (
            board.is_insufficient_material()
            or board.is_seventyfive_moves()
            or board.is_fivefold_repetition()
        ):
            return GameStatus.DRAW
        if board.is_check():
            return GameStatus.CHECK
        return GameStatus.ONGOING

    def is_white_turn(self) -> bool:
        return self._board.turn == chess.WHITE

    def get_possible_moves(self, from_square: str) -> list[str] | None:
        try:
            origin = _to_chess_square(from_square)
        except ValueError:
            _LOGGER.warning("Ignoring move query for bad square %r", from_square)
            return None
        if self._board.piece_at(origin) is None:
            return None

        # Promotions yield several moves per destination; keep one of each.
        destinations: list[str] = []
        for move in self._board.legal_moves:
            if move.from_square != origin:
                continue
            code = _to_code(move.to_square)
            if code not in destinations:
                destinations.append(code)
        return destinations or None

    def make_move(self, from_square: str, to_square: str) -> None:
        try:
            origin = _to_chess_square(from_square)
            target = _to_chess_square(to_square)
        except ValueError:
            _LOGGER.warning("Ignoring move with bad squares %r → %r", from_square, to_square)
            return

        # Auto-queen: the board offers no promotion picker.
        piece = self._board.piece_at(origin)
        promotion = None
        if (
            piece is not None
            and piece.piece_type == chess.PAWN
            and chess.square_rank(target) in (0, 7)
        ):
            promotion = chess.QUEEN
        move = chess.Move(origin, target, promotion=promotion)

        if move not in self._board.legal_moves:
            _LOGGER.warning("Rejected illegal move %s → %s", from_square, to_square)
            return
        self._board.push(move)
        _LOGGER.debug("Played %s", move.uci())
