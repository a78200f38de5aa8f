"""Selection / drag state machine.

States are ``None`` (idle) and a selected square. Two pointer events drive
it:

========  ==============  =====================================================
Event     State           Outcome
========  ==============  =====================================================
Press     idle            select the square if occupied, else stay idle
Press     selected(from)  legal target → move; else reselect occupied target
                          or go idle (marker layer always dirty)
Release   selected(from)  legal target → move; else keep the selection
Release   idle            nothing
========  ==============  =====================================================

Press grabs and release drops, so both click-click and drag-and-drop play
a move. Events off the board, or while the game is over, change nothing.

:func:`transition` is pure: it reads the game but never mutates it. The
board controller applies the returned :class:`Transition`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from chessclick.controller.geometry import Viewport, pointer_cell
from chessclick.controller.promotion import resolve_promotion
from chessclick.core.enums import GameState, PieceType
from chessclick.core.types import QuarterSquare, Square, is_back_rank

if TYPE_CHECKING:
    from chessclick.engine.interfaces import IChessGame


class PointerAction(IntEnum):
    PRESS = auto()
    RELEASE = auto()


class CursorHint(IntEnum):
    """Cursor shape the presentation layer should show."""

    DEFAULT = auto()
    GRAB = auto()


@dataclass(frozen=True, slots=True)
class PointerEvent:
    """Left-button press or release at viewport pixel ``(x, y)``."""

    action: PointerAction
    x: float
    y: float

    @classmethod
    def press(cls, x: float, y: float) -> PointerEvent:
        return cls(PointerAction.PRESS, x, y)

    @classmethod
    def release(cls, x: float, y: float) -> PointerEvent:
        return cls(PointerAction.RELEASE, x, y)


@dataclass(frozen=True, slots=True)
class PlannedMove:
    """A legal move the controller should play.

    ``promotion`` is set only for pawns reaching the back rank; it may be
    ``PieceType.PAWN`` when the gesture matched no quadrant.
    """

    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None


@dataclass(frozen=True, slots=True)
class Transition:
    """Result of feeding one event to the state machine."""

    selected: Square | None
    move: PlannedMove | None = None
    board_dirty: bool = False
    markers_dirty: bool = False
    cursor: CursorHint | None = None


def transition(
    selected: Square | None,
    event: PointerEvent,
    game: IChessGame,
    viewport: Viewport,
) -> Transition:
    """Next state for *event* given the current *selected* square."""
    cell = pointer_cell(event.x, event.y, viewport)
    if cell is None or game.get_game_state() == GameState.GAME_OVER:
        return Transition(selected)
    target, quarter = cell

    if event.action == PointerAction.PRESS:
        return _on_press(selected, target, quarter, game)
    return _on_release(selected, target, quarter, game)


def _on_press(
    selected: Square | None,
    target: Square,
    quarter: QuarterSquare,
    game: IChessGame,
) -> Transition:
    if selected is not None:
        move = _plan_move(selected, target, quarter, game)
        if move is not None:
            return _moved(move)

    new_selected = target if game.board[target] is not None else None
    changed = selected is not None or new_selected is not None
    return Transition(new_selected, markers_dirty=changed, cursor=CursorHint.GRAB)


def _on_release(
    selected: Square | None,
    target: Square,
    quarter: QuarterSquare,
    game: IChessGame,
) -> Transition:
    if selected is not None:
        move = _plan_move(selected, target, quarter, game)
        if move is not None:
            return _moved(move)
    return Transition(selected, cursor=CursorHint.DEFAULT)


def _moved(move: PlannedMove) -> Transition:
    return Transition(
        None,
        move=move,
        board_dirty=True,
        markers_dirty=True,
        cursor=CursorHint.DEFAULT,
    )


def _plan_move(
    from_sq: Square,
    to_sq: Square,
    quarter: QuarterSquare,
    game: IChessGame,
) -> PlannedMove | None:
    if to_sq not in game.get_legal_moves(from_sq):
        return None
    piece = game.board[from_sq]
    if piece is not None and piece.piece_type == PieceType.PAWN and is_back_rank(to_sq):
        return PlannedMove(from_sq, to_sq, resolve_promotion(to_sq, quarter))
    return PlannedMove(from_sq, to_sq)
