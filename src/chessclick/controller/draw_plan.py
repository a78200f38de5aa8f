"""Draw planning — what each visual layer shows, without any Qt calls.

The planner turns board contents and interaction state into an ordered
list of :class:`DrawPrimitive`. The presentation layer maps each kind to
concrete paint calls and colours.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from chessclick.controller.geometry import Viewport, square_rect
from chessclick.controller.promotion import PROMOTION_PIECES
from chessclick.core.enums import PieceType
from chessclick.core.types import Square, is_back_rank

if TYPE_CHECKING:
    from chessclick.core.piece import Piece
    from chessclick.engine.interfaces import IBoard

Rect = tuple[float, float, float, float]  # left, top, width, height


class PrimitiveKind(IntEnum):
    BOARD_BACKGROUND = auto()
    PIECE = auto()
    SELECTED_SQUARE = auto()
    MOVE_DOT = auto()
    CAPTURE_RING = auto()
    PROMOTION_ICON = auto()
    PROMOTION_HIGHLIGHT = auto()
    LAST_MOVE_HIGHLIGHT = auto()


# Stacking order across both layers. Kinds below PIECE_Z sit under pieces.
PIECE_Z = 1.0
_Z: dict[PrimitiveKind, float] = {
    PrimitiveKind.BOARD_BACKGROUND: 0.0,
    PrimitiveKind.PIECE: PIECE_Z,
    PrimitiveKind.LAST_MOVE_HIGHLIGHT: 0.5,
    PrimitiveKind.SELECTED_SQUARE: 0.75,
    PrimitiveKind.PROMOTION_HIGHLIGHT: 1.5,
    PrimitiveKind.MOVE_DOT: 2.0,
    PrimitiveKind.CAPTURE_RING: 2.0,
    PrimitiveKind.PROMOTION_ICON: 2.0,
}

# Quadrant offsets (column, row) in screen orientation, matching
# chessclick.controller.promotion.promotion_quarters.
_QUADRANTS: dict[PieceType, tuple[int, int]] = {
    PieceType.QUEEN: (0, 0),
    PieceType.KNIGHT: (1, 0),
    PieceType.ROOK: (0, 1),
    PieceType.BISHOP: (1, 1),
}

_DOT_RATIO = 0.25  # marker diameter relative to a tile


@dataclass(frozen=True, slots=True)
class DrawPrimitive:
    """One visual element of a layer."""

    kind: PrimitiveKind
    rect: Rect
    square: Square | None = None
    piece: Piece | None = None

    @property
    def z(self) -> float:
        return _Z[self.kind]


def plan_board_layer(board: IBoard, viewport: Viewport) -> list[DrawPrimitive]:
    """Background followed by one sprite per occupied square."""
    t = viewport.tile
    primitives = [
        DrawPrimitive(
            PrimitiveKind.BOARD_BACKGROUND, (viewport.board_left, 0.0, 8 * t, 8 * t)
        )
    ]
    for sq in range(64):
        piece = board[sq]
        if piece is not None:
            primitives.append(
                DrawPrimitive(
                    PrimitiveKind.PIECE, square_rect(sq, viewport), sq, piece
                )
            )
    return primitives


def plan_marker_layer(
    board: IBoard,
    selected: Square | None,
    legal_moves: Iterable[Square],
    last_move: tuple[Square, Square] | None,
    viewport: Viewport,
) -> list[DrawPrimitive]:
    """Selection highlight, legal-move markers, then last-move highlights.

    *legal_moves* is only consulted when a square is selected.
    """
    primitives: list[DrawPrimitive] = []

    if selected is not None:
        primitives.append(
            DrawPrimitive(
                PrimitiveKind.SELECTED_SQUARE, square_rect(selected, viewport), selected
            )
        )
        mover = board[selected]
        for dest in sorted(legal_moves):
            if (
                mover is not None
                and mover.piece_type == PieceType.PAWN
                and is_back_rank(dest)
            ):
                primitives.extend(_promotion_picker(mover, dest, viewport))
            elif board[dest] is not None:
                primitives.append(
                    DrawPrimitive(
                        PrimitiveKind.CAPTURE_RING, _marker_rect(dest, viewport), dest
                    )
                )
            else:
                primitives.append(
                    DrawPrimitive(
                        PrimitiveKind.MOVE_DOT, _marker_rect(dest, viewport), dest
                    )
                )

    if last_move is not None:
        for sq in last_move:
            primitives.append(
                DrawPrimitive(
                    PrimitiveKind.LAST_MOVE_HIGHLIGHT, square_rect(sq, viewport), sq
                )
            )

    return primitives


def quadrant_rect(sq: Square, piece_type: PieceType, viewport: Viewport) -> Rect:
    """Rectangle of the quadrant of *sq* assigned to *piece_type*."""
    left, top, w, h = square_rect(sq, viewport)
    col, row = _QUADRANTS[piece_type]
    return (left + col * w / 2, top + row * h / 2, w / 2, h / 2)


def split_by_z(
    primitives: Iterable[DrawPrimitive],
) -> tuple[list[DrawPrimitive], list[DrawPrimitive]]:
    """Partition a layer into the parts drawn under and over the pieces.

    Each layer is cached as two surfaces so the widget can composite board
    and markers in z order: board under, markers under, pieces, markers
    over.
    """
    under: list[DrawPrimitive] = []
    over: list[DrawPrimitive] = []
    for prim in primitives:
        (under if prim.z < PIECE_Z else over).append(prim)
    return under, over


def _promotion_picker(
    mover: Piece, dest: Square, viewport: Viewport
) -> list[DrawPrimitive]:
    icons: list[DrawPrimitive] = []
    highlights: list[DrawPrimitive] = []
    for piece_type in PROMOTION_PIECES:
        rect = quadrant_rect(dest, piece_type, viewport)
        icons.append(
            DrawPrimitive(
                PrimitiveKind.PROMOTION_ICON, rect, dest, mover.promoted(piece_type)
            )
        )
        highlights.append(DrawPrimitive(PrimitiveKind.PROMOTION_HIGHLIGHT, rect, dest))
    return icons + highlights


def _marker_rect(sq: Square, viewport: Viewport) -> Rect:
    left, top, w, h = square_rect(sq, viewport)
    d = w * _DOT_RATIO
    return (left + (w - d) / 2, top + (h - d) / 2, d, d)
