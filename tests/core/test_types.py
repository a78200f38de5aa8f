"""Tests for square helpers and the Piece value object."""

from __future__ import annotations

import pytest

from chessclick.core.enums import Color, PieceType
from chessclick.core.piece import Piece
from chessclick.core.types import (
    file_of,
    is_back_rank,
    make_square,
    parse_square,
    rank_of,
    square_name,
)


def test_file_rank_roundtrip() -> None:
    for sq in range(64):
        assert make_square(file_of(sq), rank_of(sq)) == sq


def test_square_names() -> None:
    assert square_name(0) == "a1"
    assert square_name(63) == "h8"
    assert parse_square("e4") == 28


def test_parse_square_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        parse_square("z9")


def test_back_rank_covers_first_and_last_rank_only() -> None:
    back = {sq for sq in range(64) if is_back_rank(sq)}
    assert back == set(range(8)) | set(range(56, 64))


def test_piece_asset_key_and_promotion() -> None:
    pawn = Piece(Color.BLACK, PieceType.PAWN)
    assert pawn.asset_key == "bP"
    queen = pawn.promoted(PieceType.QUEEN)
    assert queen == Piece(Color.BLACK, PieceType.QUEEN)
    assert queen.asset_key == "bQ"
    assert Piece(Color.WHITE, PieceType.KNIGHT).symbol == "♘"
