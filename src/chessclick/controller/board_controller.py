"""BoardController — owns the interactive board state and runs the frame tick.

Coordinates: selection state machine, engine, invalidation tracker, draw
planner. Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from chessclick.controller.draw_plan import (
    DrawPrimitive,
    plan_board_layer,
    plan_marker_layer,
)
from chessclick.controller.geometry import Viewport
from chessclick.controller.invalidation import InvalidationTracker, Layer
from chessclick.controller.selection import (
    CursorHint,
    PlannedMove,
    PointerEvent,
    Transition,
    transition,
)
from chessclick.core.enums import GameState, PieceType
from chessclick.core.types import Square, square_name
from chessclick.engine.interfaces import GameFactory, IChessGame
from chessclick.settings import AppSettings, GameOverPolicy

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Square, Square], None]  # from, to
GameOverCallback = Callable[["BoardController"], None]


@dataclass
class BoardEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class Frame:
    """Output of one tick.

    A layer is ``None`` when its cached rendering is still valid.
    """

    board_layer: list[DrawPrimitive] | None
    marker_layer: list[DrawPrimitive] | None
    cursor: CursorHint | None = None


# ── Controller ───────────────────────────────────────────────────────────────


class BoardController:
    """Turns pointer events into engine moves and layer rebuilds.

    One :meth:`tick` per rendered frame, strictly ordered: input, game-over
    check, board layer, marker layer. Everything runs on the caller's
    thread; nothing here blocks.

    Args:
        game_factory: Creates a fresh game at start-up and on restart.
        settings: Initial viewport size and game-over policy.
    """

    __slots__ = (
        "_factory",
        "_game",
        "_selected",
        "_last_move",
        "_tracker",
        "_policy",
        "_game_over_reported",
        "events",
    )

    def __init__(
        self,
        game_factory: GameFactory,
        settings: AppSettings | None = None,
    ) -> None:
        settings = settings or AppSettings()
        self._factory = game_factory
        self._game: IChessGame = game_factory()
        self._selected: Square | None = None
        self._last_move: tuple[Square, Square] | None = None
        self._tracker = InvalidationTracker(settings.window_size)
        self._policy = settings.on_game_over
        self._game_over_reported = False
        self.events = BoardEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def game(self) -> IChessGame:
        return self._game

    @property
    def selected(self) -> Square | None:
        return self._selected

    @property
    def last_move(self) -> tuple[Square, Square] | None:
        return self._last_move

    @property
    def tracker(self) -> InvalidationTracker:
        return self._tracker

    @property
    def policy(self) -> GameOverPolicy:
        return self._policy

    def set_policy(self, policy: GameOverPolicy) -> None:
        self._policy = policy

    # ── Input ────────────────────────────────────────────────────────────

    def handle_event(self, event: PointerEvent, viewport: Viewport) -> Transition:
        """Feed one pointer event through the state machine and apply it."""
        result = transition(self._selected, event, self._game, viewport)
        if result.move is not None:
            self._play(result.move)
        self._selected = result.selected
        if result.board_dirty:
            self._tracker.mark_dirty(Layer.BOARD)
        if result.markers_dirty:
            self._tracker.mark_dirty(Layer.MARKERS)
        return result

    # ── Frame ────────────────────────────────────────────────────────────

    def tick(self, events: Iterable[PointerEvent], viewport: Viewport) -> Frame:
        """Process one frame worth of input and return the layers to redraw."""
        cursor: CursorHint | None = None
        for event in events:
            result = self.handle_event(event, viewport)
            if result.cursor is not None:
                cursor = result.cursor

        self._check_game_over()

        size = viewport.size
        board_layer: list[DrawPrimitive] | None = None
        if self._tracker.should_rebuild(Layer.BOARD, size):
            board_layer = plan_board_layer(self._game.board, viewport)
            self._tracker.mark_rebuilt(Layer.BOARD, size)

        marker_layer: list[DrawPrimitive] | None = None
        if self._tracker.should_rebuild(Layer.MARKERS, size):
            legal = (
                self._game.get_legal_moves(self._selected)
                if self._selected is not None
                else set()
            )
            marker_layer = plan_marker_layer(
                self._game.board, self._selected, legal, self._last_move, viewport
            )
            self._tracker.mark_rebuilt(Layer.MARKERS, size)

        return Frame(board_layer, marker_layer, cursor)

    def restart(self) -> None:
        """Discard the current game and start a fresh one."""
        _LOGGER.info("Starting a new game")
        self._game = self._factory()
        self._selected = None
        self._last_move = None
        self._game_over_reported = False
        self._tracker.mark_dirty(Layer.BOARD, Layer.MARKERS)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _play(self, move: PlannedMove) -> None:
        if move.promotion is not None:
            self._apply_promotion(move)
        self._game.make_move(move.from_sq, move.to_sq)
        self._last_move = (move.from_sq, move.to_sq)
        _LOGGER.debug("Played %s%s", square_name(move.from_sq), square_name(move.to_sq))
        for cb in self.events.on_move:
            cb(move.from_sq, move.to_sq)

    def _apply_promotion(self, move: PlannedMove) -> None:
        piece = self._game.board[move.from_sq]
        if piece is None:
            return
        if move.promotion == PieceType.PAWN:
            _LOGGER.error(
                "Promotion gesture on %s matched no quadrant; piece left unchanged",
                square_name(move.to_sq),
            )
            return
        self._game.board[move.from_sq] = piece.promoted(move.promotion)

    def _check_game_over(self) -> None:
        if self._game.get_game_state() != GameState.GAME_OVER:
            return
        if self._policy == GameOverPolicy.RESTART:
            self.restart()
            return
        if self._game_over_reported:
            return
        self._game_over_reported = True
        _LOGGER.info("Game over (policy: %s)", self._policy.value)
        if self._policy == GameOverPolicy.CALLBACK:
            for cb in self.events.on_game_over:
                cb(self)
