"""Promotion piece choice from a quarter-square gesture.

A promotion target square is split into four quadrants, one per
candidate piece (screen orientation)::

    +-------+--------+
    | Queen | Knight |
    +-------+--------+
    | Rook  | Bishop |
    +-------+--------+
"""

from __future__ import annotations

from chessclick.core.enums import PieceType
from chessclick.core.types import (
    QUARTER_BOARD_SIZE,
    QuarterSquare,
    Square,
    file_of,
    rank_of,
)

PROMOTION_PIECES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.KNIGHT,
    PieceType.ROOK,
    PieceType.BISHOP,
)


def promotion_quarters(sq: Square) -> dict[PieceType, QuarterSquare]:
    """Quarter square assigned to each promotion piece inside *sq*."""
    knight = (file_of(sq) * 2 + 1) + QUARTER_BOARD_SIZE * (rank_of(sq) * 2 + 1)
    queen = knight - 1
    return {
        PieceType.QUEEN: queen,
        PieceType.KNIGHT: knight,
        PieceType.ROOK: queen - QUARTER_BOARD_SIZE,
        PieceType.BISHOP: knight - QUARTER_BOARD_SIZE,
    }


def resolve_promotion(sq: Square, quarter: QuarterSquare) -> PieceType:
    """Piece whose quadrant of *sq* is *quarter*.

    Returns ``PieceType.PAWN`` when *quarter* is not one of the four
    quadrants of *sq*; callers treat that as a geometry bug.
    """
    for piece_type, q in promotion_quarters(sq).items():
        if q == quarter:
            return piece_type
    return PieceType.PAWN
