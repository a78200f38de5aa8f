"""Viewport geometry — pointer pixels ↔ squares.

The board is always drawn as an ``H × H`` square horizontally centred in a
``W × H`` viewport. Screen y grows downward while rank 0 is the bottom row,
hence the rank flip in :func:`to_square`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from chessclick.core.types import (
    BOARD_SIZE,
    QUARTER_BOARD_SIZE,
    QuarterSquare,
    Square,
    file_of,
    rank_of,
)


@dataclass(frozen=True, slots=True)
class Viewport:
    """Pixel size of the drawing surface."""

    width: float
    height: float

    @property
    def size(self) -> tuple[float, float]:
        return (self.width, self.height)

    @property
    def board_left(self) -> float:
        """x of the board's left edge."""
        return (self.width - self.height) / 2

    @property
    def tile(self) -> float:
        """Side length of one square in pixels."""
        return self.height / BOARD_SIZE


def is_over_board(x: float, y: float, viewport: Viewport) -> bool:
    """True iff ``(x, y)`` lies on the board (bounds inclusive)."""
    rel_x = x - viewport.board_left
    return 0 <= rel_x <= viewport.height and 0 <= y <= viewport.height


def _grid_index(
    x: float, y: float, viewport: Viewport, cells: int, *, clamp: bool = False
) -> int:
    rel_x = x - viewport.board_left
    file = math.floor(rel_x / viewport.height * cells)
    rank = cells - math.floor(y / viewport.height * cells) - 1
    if clamp:
        file = min(max(file, 0), cells - 1)
        rank = min(max(rank, 0), cells - 1)
    return file + cells * rank


def to_square(x: float, y: float, viewport: Viewport) -> Square:
    """Square under ``(x, y)``. Only meaningful when :func:`is_over_board`."""
    return _grid_index(x, y, viewport, BOARD_SIZE)


def to_quarter_square(x: float, y: float, viewport: Viewport) -> QuarterSquare:
    """Quarter square (16×16 grid) under ``(x, y)``."""
    return _grid_index(x, y, viewport, QUARTER_BOARD_SIZE)


def pointer_cell(
    x: float, y: float, viewport: Viewport
) -> tuple[Square, QuarterSquare] | None:
    """Square and quarter square under the pointer, ``None`` off the board.

    Points on the inclusive right/bottom edge belong to the outermost
    row or column instead of falling outside the 8×8 grid.
    """
    if viewport.height <= 0 or not is_over_board(x, y, viewport):
        return None
    return (
        _grid_index(x, y, viewport, BOARD_SIZE, clamp=True),
        _grid_index(x, y, viewport, QUARTER_BOARD_SIZE, clamp=True),
    )


def square_rect(sq: Square, viewport: Viewport) -> tuple[float, float, float, float]:
    """``(left, top, width, height)`` of *sq* in viewport pixels."""
    t = viewport.tile
    left = viewport.board_left + file_of(sq) * t
    top = (BOARD_SIZE - 1 - rank_of(sq)) * t
    return (left, top, t, t)


def square_center(sq: Square, viewport: Viewport) -> tuple[float, float]:
    """Pixel centre of *sq*; ``to_square`` maps it back to *sq*."""
    left, top, w, h = square_rect(sq, viewport)
    return (left + w / 2, top + h / 2)
