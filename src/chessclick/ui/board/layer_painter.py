"""Paints planned draw primitives into cached layer pixmaps."""

from __future__ import annotations

from collections.abc import Sequence

from PyQt6.QtCore import QRectF, Qt
from PyQt6.QtGui import QBrush, QPainter, QPen, QPixmap

from chessclick.controller.draw_plan import DrawPrimitive, PrimitiveKind
from chessclick.core.types import file_of, rank_of
from chessclick.ui.resources import paint_piece
from chessclick.ui.styles.theme import BoardTheme

_RING_WIDTH_RATIO = 0.25  # ring pen width relative to the marker diameter


def render_layer(
    primitives: Sequence[DrawPrimitive],
    width: int,
    height: int,
    theme: BoardTheme,
    piece_set: str,
    device_pixel_ratio: float = 1.0,
) -> QPixmap | None:
    """Render *primitives* onto a transparent ``width × height`` pixmap.

    *width* and *height* are logical pixels; the backing store is scaled by
    *device_pixel_ratio* so cached layers stay sharp on HiDPI screens.
    Returns ``None`` for an empty surface (e.g. a widget not yet shown).
    """
    if width <= 0 or height <= 0:
        return None
    pixmap = QPixmap(
        round(width * device_pixel_ratio), round(height * device_pixel_ratio)
    )
    pixmap.setDevicePixelRatio(device_pixel_ratio)
    pixmap.fill(Qt.GlobalColor.transparent)

    p = QPainter(pixmap)
    p.setRenderHint(QPainter.RenderHint.Antialiasing)
    p.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)
    for prim in sorted(primitives, key=lambda item: item.z):
        _paint(p, prim, theme, piece_set)
    p.end()
    return pixmap


def _paint(p: QPainter, prim: DrawPrimitive, theme: BoardTheme, piece_set: str) -> None:
    rect = QRectF(*prim.rect)
    kind = prim.kind

    if kind == PrimitiveKind.BOARD_BACKGROUND:
        _paint_squares(p, rect, theme)
    elif kind in (PrimitiveKind.PIECE, PrimitiveKind.PROMOTION_ICON):
        if prim.piece is not None:
            paint_piece(p, prim.piece, rect, piece_set)
    elif kind == PrimitiveKind.MOVE_DOT:
        p.setPen(Qt.PenStyle.NoPen)
        p.setBrush(QBrush(theme.move_dot))
        p.drawEllipse(rect)
    elif kind == PrimitiveKind.CAPTURE_RING:
        pen_width = rect.width() * _RING_WIDTH_RATIO
        p.setPen(QPen(theme.capture_ring, pen_width))
        p.setBrush(Qt.BrushStyle.NoBrush)
        p.drawEllipse(rect)
    else:
        colors = {
            PrimitiveKind.SELECTED_SQUARE: theme.selected,
            PrimitiveKind.PROMOTION_HIGHLIGHT: theme.promotion_highlight,
            PrimitiveKind.LAST_MOVE_HIGHLIGHT: theme.last_move,
        }
        p.fillRect(rect, colors[kind])


def _paint_squares(p: QPainter, board: QRectF, theme: BoardTheme) -> None:
    t = board.width() / 8
    for sq in range(64):
        f, r = file_of(sq), rank_of(sq)
        is_dark = (f + r) % 2 == 0  # a1 is dark
        color = theme.dark_square if is_dark else theme.light_square
        cell = QRectF(board.left() + f * t, board.top() + (7 - r) * t, t, t)
        p.fillRect(cell, color)
