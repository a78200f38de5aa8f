"""Core domain types shared by every layer — no Qt, no engine.

Quick start::

    from chessclick.core import Color, Piece, PieceType, parse_square

    queen = Piece(Color.WHITE, PieceType.QUEEN)
    queen.asset_key  # 'wQ'
"""

from chessclick.core.enums import Color, GameState, PieceType
from chessclick.core.piece import Piece
from chessclick.core.types import (
    QuarterSquare,
    Square,
    file_of,
    is_back_rank,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameState",
    "PieceType",
    # Types / helpers
    "QuarterSquare",
    "Square",
    "file_of",
    "is_back_rank",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Piece",
]
