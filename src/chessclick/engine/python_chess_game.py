"""IChessGame implementation backed by python-chess."""

from __future__ import annotations

import logging

import chess

from chessclick.core.enums import Color, GameState, PieceType
from chessclick.core.piece import Piece
from chessclick.core.types import Square, is_back_rank, square_name
from chessclick.engine.interfaces import IBoard, IChessGame

_LOGGER = logging.getLogger(__name__)


class IllegalMoveError(ValueError):
    """Raised when python-chess rejects a submitted move."""


def _to_piece(piece: chess.Piece | None) -> Piece | None:
    if piece is None:
        return None
    color = Color.WHITE if piece.color == chess.WHITE else Color.BLACK
    return Piece(color, PieceType(piece.piece_type))


class _BoardCells(IBoard):
    """Snapshot of the python-chess board that the controller may overwrite.

    Writes only touch the snapshot; the engine reads them back in
    :meth:`PythonChessGame.make_move` to pick the promotion piece.
    """

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[Piece | None] = [None] * 64

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._cells[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._cells[sq] = piece

    def load(self, board: chess.Board) -> None:
        self._cells = [_to_piece(board.piece_at(sq)) for sq in chess.SQUARES]


class PythonChessGame(IChessGame):
    """Adapter exposing a ``chess.Board`` through :class:`IChessGame`.

    Args:
        fen: Optional starting position; the standard one when omitted.
    """

    __slots__ = ("_board", "_cells")

    def __init__(self, fen: str | None = None) -> None:
        self._board = chess.Board(fen) if fen else chess.Board()
        self._cells = _BoardCells()
        self._cells.load(self._board)

    @classmethod
    def new(cls) -> PythonChessGame:
        """Fresh game from the standard starting position."""
        return cls()

    # ── IChessGame impl ──────────────────────────────────────────────────

    @property
    def board(self) -> IBoard:
        return self._cells

    def get_legal_moves(self, square: Square) -> set[Square]:
        return {
            m.to_square for m in self._board.legal_moves if m.from_square == square
        }

    def get_game_state(self) -> GameState:
        if self._board.is_game_over():
            return GameState.GAME_OVER
        return GameState.IN_PROGRESS

    def make_move(self, from_sq: Square, to_sq: Square) -> None:
        promotion = self._promotion_for(from_sq, to_sq)
        move = chess.Move(from_sq, to_sq, promotion=promotion)
        if move not in self._board.legal_moves:
            raise IllegalMoveError(
                f"Illegal move: {square_name(from_sq)}{square_name(to_sq)}"
            )
        self._board.push(move)
        self._cells.load(self._board)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _promotion_for(self, from_sq: Square, to_sq: Square) -> int | None:
        if self._board.piece_type_at(from_sq) != chess.PAWN or not is_back_rank(to_sq):
            return None
        chosen = self._cells[from_sq]
        if chosen is None or chosen.piece_type in (PieceType.PAWN, PieceType.KING):
            _LOGGER.warning(
                "No promotion piece chosen for %s%s, promoting to queen",
                square_name(from_sq),
                square_name(to_sq),
            )
            return chess.QUEEN
        return int(chosen.piece_type)
