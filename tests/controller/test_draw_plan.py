"""Tests for layer draw planning."""

from __future__ import annotations

from chessclick.controller.draw_plan import (
    PrimitiveKind,
    plan_board_layer,
    plan_marker_layer,
    quadrant_rect,
    split_by_z,
)
from chessclick.controller.geometry import Viewport, square_rect, to_quarter_square
from chessclick.controller.promotion import resolve_promotion
from chessclick.core.enums import Color, PieceType
from chessclick.core.piece import Piece
from chessclick.core.types import parse_square

VP = Viewport(1000, 800)
WHITE_PAWN = Piece(Color.WHITE, PieceType.PAWN)
WHITE_ROOK = Piece(Color.WHITE, PieceType.ROOK)
BLACK_KNIGHT = Piece(Color.BLACK, PieceType.KNIGHT)


def _kinds(primitives) -> list[PrimitiveKind]:
    return [p.kind for p in primitives]


def test_board_layer_background_then_pieces(make_game) -> None:
    game = make_game(pieces={0: WHITE_ROOK, 62: BLACK_KNIGHT})
    layer = plan_board_layer(game.board, VP)

    assert _kinds(layer) == [
        PrimitiveKind.BOARD_BACKGROUND,
        PrimitiveKind.PIECE,
        PrimitiveKind.PIECE,
    ]
    assert layer[0].rect == (100, 0, 800, 800)
    assert layer[1].piece == WHITE_ROOK
    assert layer[1].rect == square_rect(0, VP)
    assert layer[2].piece.asset_key == "bN"


def test_marker_layer_empty_without_selection_or_last_move(make_game) -> None:
    game = make_game(pieces={0: WHITE_ROOK})
    assert plan_marker_layer(game.board, None, {8, 16}, None, VP) == []


def test_marker_layer_dots_and_capture_rings(make_game) -> None:
    game = make_game(pieces={0: WHITE_ROOK, 16: BLACK_KNIGHT})
    layer = plan_marker_layer(game.board, 0, {8, 16, 1}, None, VP)

    assert layer[0].kind == PrimitiveKind.SELECTED_SQUARE
    assert layer[0].square == 0
    by_square = {p.square: p.kind for p in layer[1:]}
    assert by_square == {
        1: PrimitiveKind.MOVE_DOT,
        8: PrimitiveKind.MOVE_DOT,
        16: PrimitiveKind.CAPTURE_RING,
    }


def test_marker_dot_is_centred_inside_square(make_game) -> None:
    game = make_game(pieces={0: WHITE_ROOK})
    dot = plan_marker_layer(game.board, 0, {8}, None, VP)[1]
    left, top, w, h = square_rect(8, VP)
    dl, dt, dw, dh = dot.rect
    assert dw == dh == w / 4
    assert dl + dw / 2 == left + w / 2
    assert dt + dh / 2 == top + h / 2


def test_promotion_picker_icons_and_highlights(make_game) -> None:
    e7, e8 = parse_square("e7"), parse_square("e8")
    game = make_game(pieces={e7: WHITE_PAWN})
    layer = plan_marker_layer(game.board, e7, {e8}, None, VP)

    assert _kinds(layer) == [PrimitiveKind.SELECTED_SQUARE] + [
        PrimitiveKind.PROMOTION_ICON
    ] * 4 + [PrimitiveKind.PROMOTION_HIGHLIGHT] * 4
    icons = [p.piece.piece_type for p in layer[1:5]]
    assert icons == [
        PieceType.QUEEN,
        PieceType.KNIGHT,
        PieceType.ROOK,
        PieceType.BISHOP,
    ]
    assert all(p.piece.color == Color.WHITE for p in layer[1:5])
    assert [p.rect for p in layer[1:5]] == [p.rect for p in layer[5:]]


def test_promotion_quadrants_resolve_to_their_icon() -> None:
    for sq in list(range(8)) + list(range(56, 64)):
        for piece_type in (
            PieceType.QUEEN,
            PieceType.KNIGHT,
            PieceType.ROOK,
            PieceType.BISHOP,
        ):
            left, top, w, h = quadrant_rect(sq, piece_type, VP)
            quarter = to_quarter_square(left + w / 2, top + h / 2, VP)
            assert resolve_promotion(sq, quarter) == piece_type


def test_last_move_highlights_come_last(make_game) -> None:
    game = make_game(pieces={0: WHITE_ROOK, 28: WHITE_PAWN})
    layer = plan_marker_layer(game.board, 0, {8}, (12, 28), VP)

    assert _kinds(layer)[-2:] == [PrimitiveKind.LAST_MOVE_HIGHLIGHT] * 2
    assert [p.square for p in layer[-2:]] == [12, 28]


def test_z_orders_markers_above_last_move() -> None:
    from chessclick.controller.draw_plan import DrawPrimitive

    last = DrawPrimitive(PrimitiveKind.LAST_MOVE_HIGHLIGHT, (0, 0, 1, 1))
    dot = DrawPrimitive(PrimitiveKind.MOVE_DOT, (0, 0, 1, 1))
    assert last.z < dot.z


def test_split_keeps_square_highlights_under_pieces(make_game) -> None:
    game = make_game(pieces={12: WHITE_PAWN, 21: BLACK_KNIGHT})
    markers = plan_marker_layer(game.board, 12, {20, 21}, (4, 12), VP)

    under, over = split_by_z(markers)

    assert set(_kinds(under)) == {
        PrimitiveKind.SELECTED_SQUARE,
        PrimitiveKind.LAST_MOVE_HIGHLIGHT,
    }
    assert set(_kinds(over)) == {PrimitiveKind.MOVE_DOT, PrimitiveKind.CAPTURE_RING}


def test_split_board_layer_puts_pieces_over_background(make_game) -> None:
    game = make_game(pieces={0: WHITE_ROOK})

    under, over = split_by_z(plan_board_layer(game.board, VP))

    assert _kinds(under) == [PrimitiveKind.BOARD_BACKGROUND]
    assert _kinds(over) == [PrimitiveKind.PIECE]
