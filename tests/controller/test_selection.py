"""Tests for the selection / drag state machine."""

from __future__ import annotations

from chessclick.controller.draw_plan import quadrant_rect
from chessclick.controller.geometry import Viewport, square_center
from chessclick.controller.selection import (
    CursorHint,
    PlannedMove,
    PointerEvent,
    Transition,
    transition,
)
from chessclick.core.enums import Color, GameState, PieceType
from chessclick.core.piece import Piece
from chessclick.core.types import parse_square

VP = Viewport(800, 800)
E2, E4, D2, E7 = (parse_square(n) for n in ("e2", "e4", "d2", "e7"))
WHITE_PAWN = Piece(Color.WHITE, PieceType.PAWN)
BLACK_PAWN = Piece(Color.BLACK, PieceType.PAWN)


def _press(sq: int, vp: Viewport = VP) -> PointerEvent:
    return PointerEvent.press(*square_center(sq, vp))


def _release(sq: int, vp: Viewport = VP) -> PointerEvent:
    return PointerEvent.release(*square_center(sq, vp))


def _quadrant_release(sq: int, piece_type: PieceType) -> PointerEvent:
    left, top, w, h = quadrant_rect(sq, piece_type, VP)
    return PointerEvent.release(left + w / 2, top + h / 2)


def _opening(make_game):
    return make_game(
        pieces={E2: WHITE_PAWN, D2: WHITE_PAWN, E7: BLACK_PAWN},
        moves={E2: {parse_square("e3"), E4}},
    )


class TestIdle:
    def test_press_occupied_selects(self, make_game) -> None:
        result = transition(None, _press(E2), _opening(make_game), VP)
        assert result == Transition(E2, markers_dirty=True, cursor=CursorHint.GRAB)

    def test_press_empty_stays_idle_without_dirt(self, make_game) -> None:
        result = transition(None, _press(E4), _opening(make_game), VP)
        assert result.selected is None
        assert not result.markers_dirty
        assert not result.board_dirty

    def test_release_is_noop(self, make_game) -> None:
        result = transition(None, _release(E2), _opening(make_game), VP)
        assert result.selected is None
        assert result.move is None
        assert not result.markers_dirty


class TestSelected:
    def test_press_legal_target_plans_move(self, make_game) -> None:
        game = _opening(make_game)
        result = transition(E2, _press(E4), game, VP)
        assert result.selected is None
        assert result.move == PlannedMove(E2, E4)
        assert result.board_dirty and result.markers_dirty
        assert result.cursor == CursorHint.DEFAULT
        assert game.made == []

    def test_press_other_piece_reselects(self, make_game) -> None:
        result = transition(E2, _press(D2), _opening(make_game), VP)
        assert result.selected == D2
        assert result.move is None
        assert result.markers_dirty
        assert not result.board_dirty

    def test_press_same_square_keeps_selection_and_dirties_markers(
        self, make_game
    ) -> None:
        result = transition(E2, _press(E2), _opening(make_game), VP)
        assert result.selected == E2
        assert result.markers_dirty

    def test_press_illegal_empty_deselects(self, make_game) -> None:
        result = transition(E2, _press(parse_square("h5")), _opening(make_game), VP)
        assert result.selected is None
        assert result.markers_dirty
        assert result.move is None

    def test_release_legal_target_plans_move(self, make_game) -> None:
        result = transition(E2, _release(E4), _opening(make_game), VP)
        assert result.move == PlannedMove(E2, E4)
        assert result.selected is None

    def test_release_illegal_occupied_keeps_selection(self, make_game) -> None:
        result = transition(E2, _release(D2), _opening(make_game), VP)
        assert result.selected == E2
        assert result.move is None
        assert not result.markers_dirty
        assert result.cursor == CursorHint.DEFAULT


class TestIgnoredEvents:
    def test_off_board_press_changes_nothing(self, make_game) -> None:
        wide = Viewport(1000, 800)
        result = transition(E2, PointerEvent.press(50, 400), _opening(make_game), wide)
        assert result == Transition(E2)

    def test_game_over_ignores_input(self, make_game) -> None:
        game = _opening(make_game)
        game.state = GameState.GAME_OVER
        assert transition(None, _press(E2), game, VP) == Transition(None)
        assert transition(E2, _press(E4), game, VP) == Transition(E2)


class TestPromotion:
    def _promotion_game(self, make_game):
        return make_game(
            pieces={52: WHITE_PAWN},
            moves={52: {60, 59, 61}},
        )

    def test_release_on_queen_quadrant(self, make_game) -> None:
        game = self._promotion_game(make_game)
        result = transition(52, _quadrant_release(60, PieceType.QUEEN), game, VP)
        assert result.move == PlannedMove(52, 60, PieceType.QUEEN)

    def test_each_quadrant_picks_its_piece(self, make_game) -> None:
        game = self._promotion_game(make_game)
        for piece_type in (
            PieceType.QUEEN,
            PieceType.KNIGHT,
            PieceType.ROOK,
            PieceType.BISHOP,
        ):
            result = transition(52, _quadrant_release(61, piece_type), game, VP)
            assert result.move == PlannedMove(52, 61, piece_type)

    def test_press_driven_promotion(self, make_game) -> None:
        game = self._promotion_game(make_game)
        left, top, w, h = quadrant_rect(59, PieceType.ROOK, VP)
        result = transition(52, PointerEvent.press(left + 1, top + 1), game, VP)
        assert result.move == PlannedMove(52, 59, PieceType.ROOK)

    def test_black_pawn_promotes_on_first_rank(self, make_game) -> None:
        game = make_game(pieces={12: BLACK_PAWN}, moves={12: {4}})
        result = transition(12, _quadrant_release(4, PieceType.KNIGHT), game, VP)
        assert result.move == PlannedMove(12, 4, PieceType.KNIGHT)

    def test_non_pawn_reaching_back_rank_has_no_promotion(self, make_game) -> None:
        rook = Piece(Color.WHITE, PieceType.ROOK)
        game = make_game(pieces={52: rook}, moves={52: {60}})
        result = transition(52, _quadrant_release(60, PieceType.QUEEN), game, VP)
        assert result.move == PlannedMove(52, 60)
