"""Interactive board controller — pointer geometry, selection state machine,
promotion gestures, redraw invalidation and draw planning.

Quick start::

    from chessclick.controller import BoardController, PointerEvent, Viewport
    from chessclick.engine import PythonChessGame

    ctrl = BoardController(PythonChessGame.new)
    vp = Viewport(800, 800)
    frame = ctrl.tick([PointerEvent.press(450, 650)], vp)  # pick up e2
"""

from chessclick.controller.board_controller import BoardController, BoardEvents, Frame
from chessclick.controller.draw_plan import (
    DrawPrimitive,
    PrimitiveKind,
    plan_board_layer,
    plan_marker_layer,
    split_by_z,
)
from chessclick.controller.geometry import (
    Viewport,
    is_over_board,
    pointer_cell,
    square_center,
    square_rect,
    to_quarter_square,
    to_square,
)
from chessclick.controller.invalidation import InvalidationTracker, Layer
from chessclick.controller.promotion import promotion_quarters, resolve_promotion
from chessclick.controller.selection import (
    CursorHint,
    PlannedMove,
    PointerAction,
    PointerEvent,
    Transition,
    transition,
)

__all__ = [
    # Geometry
    "Viewport",
    "is_over_board",
    "pointer_cell",
    "square_center",
    "square_rect",
    "to_quarter_square",
    "to_square",
    # Promotion
    "promotion_quarters",
    "resolve_promotion",
    # State machine
    "CursorHint",
    "PlannedMove",
    "PointerAction",
    "PointerEvent",
    "Transition",
    "transition",
    # Invalidation
    "InvalidationTracker",
    "Layer",
    # Drawing
    "DrawPrimitive",
    "PrimitiveKind",
    "plan_board_layer",
    "plan_marker_layer",
    "split_by_z",
    # Orchestration
    "BoardController",
    "BoardEvents",
    "Frame",
]
