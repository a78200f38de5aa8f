"""Piece rendering helpers.

Pieces are drawn from ``assets/pieces/<piece set>/<key>.svg`` (``wQ.svg``,
``bP.svg``, ...). With no piece set configured, or when the configured one
is missing, the Unicode chess glyph is drawn instead.
"""

from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QRectF, Qt
from PyQt6.QtGui import QColor, QFont, QPainter, QPen
from PyQt6.QtSvg import QSvgRenderer

from chessclick.core.enums import Color
from chessclick.core.piece import Piece

_LOGGER = logging.getLogger(__name__)

_PACKAGE_ASSETS_DIR = Path(__file__).resolve().parents[1] / "assets"
_REPO_ASSETS_DIR = Path(__file__).resolve().parents[3] / "assets"

# Cache SVG renderers (one per piece set / asset key); None = asset missing
_renderers: dict[tuple[str, str], QSvgRenderer | None] = {}
_missing_sets: set[str] = set()


def piece_asset_path(piece_set: str, key: str) -> Path:
    """SVG path for asset *key* (e.g. ``wQ``) in *piece_set*.

    Installed packages ship assets next to the code; a source checkout
    keeps them at the repository root.
    """
    root = _PACKAGE_ASSETS_DIR if _PACKAGE_ASSETS_DIR.is_dir() else _REPO_ASSETS_DIR
    return root / "pieces" / piece_set / f"{key}.svg"


def piece_renderer(piece: Piece, piece_set: str) -> QSvgRenderer | None:
    """Return a cached SVG renderer for *piece*, or ``None`` if unavailable.

    An empty *piece_set* selects the glyph fallback without a warning.
    """
    if not piece_set:
        return None
    key = (piece_set, piece.asset_key)
    if key not in _renderers:
        path = piece_asset_path(piece_set, piece.asset_key)
        renderer: QSvgRenderer | None = None
        if path.is_file():
            renderer = QSvgRenderer(str(path))
            if not renderer.isValid():
                _LOGGER.warning("Invalid SVG asset: %s", path)
                renderer = None
        elif piece_set not in _missing_sets:
            _missing_sets.add(piece_set)
            _LOGGER.warning(
                "Piece set %r not found under %s, drawing glyphs",
                piece_set,
                path.parent.parent,
            )
        _renderers[key] = renderer
    return _renderers[key]


def paint_piece(
    painter: QPainter, piece: Piece, target: QRectF, piece_set: str
) -> None:
    """Draw *piece* scaled into *target*."""
    renderer = piece_renderer(piece, piece_set)
    if renderer is not None:
        renderer.render(painter, target)
        return

    font = QFont("DejaVu Sans")
    font.setPixelSize(max(1, int(target.height() * 0.8)))
    painter.save()
    painter.setFont(font)
    align = Qt.AlignmentFlag.AlignCenter
    # The black glyphs are the filled ones; white pieces get a filled white
    # body under the outline glyph.
    filled = Piece(Color.BLACK, piece.piece_type).symbol
    if piece.color == Color.WHITE:
        painter.setPen(QPen(QColor(255, 255, 255)))
        painter.drawText(target, align, filled)
        painter.setPen(QPen(QColor(0, 0, 0)))
        painter.drawText(target, align, piece.symbol)
    else:
        painter.setPen(QPen(QColor(0, 0, 0)))
        painter.drawText(target, align, filled)
    painter.restore()
