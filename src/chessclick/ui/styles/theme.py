"""Visual theme constants for the chessboard."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard and its markers."""

    background: QColor  # window area around the board
    light_square: QColor
    dark_square: QColor
    selected: QColor  # darkens the selected square
    move_dot: QColor  # quiet legal move
    capture_ring: QColor  # legal capture
    promotion_highlight: QColor  # promotion quadrant
    last_move: QColor  # last move origin/destination

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            background=QColor(0, 0, 0),
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            selected=QColor(0, 0, 0, 128),
            move_dot=QColor(0, 0, 0, 128),
            capture_ring=QColor(255, 0, 0, 128),
            promotion_highlight=QColor(0, 0, 0, 128),
            last_move=QColor(255, 255, 0, 51),
        )

    @classmethod
    def classic(cls) -> BoardTheme:
        return cls(
            background=QColor(0, 0, 0),
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            selected=QColor(0, 0, 0, 128),
            move_dot=QColor(0, 0, 0, 128),
            capture_ring=QColor(255, 0, 0, 128),
            promotion_highlight=QColor(0, 0, 0, 128),
            last_move=QColor(255, 255, 0, 51),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            background=QColor(0, 0, 0),
            light_square=QColor(236, 238, 220),
            dark_square=QColor(112, 149, 120),
            selected=QColor(0, 0, 0, 128),
            move_dot=QColor(0, 0, 0, 128),
            capture_ring=QColor(255, 0, 0, 128),
            promotion_highlight=QColor(0, 0, 0, 128),
            last_move=QColor(255, 255, 0, 51),
        )

    @classmethod
    def by_name(cls, name: str) -> BoardTheme:
        """Theme for a settings name; unknown names fall back to blue."""
        theme_map = {
            "Blue": cls.blue,
            "Classic": cls.classic,
            "Green": cls.green,
        }
        return theme_map.get(name, cls.blue)()
