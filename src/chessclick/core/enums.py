"""Core enumerations shared by the controller and the engine adapter."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class GameState(IntEnum):
    """Coarse game status as reported by the engine."""

    IN_PROGRESS = 0
    GAME_OVER = 1
