"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from chessclick.core.enums import GameState
from chessclick.core.piece import Piece
from chessclick.core.types import Square
from chessclick.engine.interfaces import IBoard, IChessGame

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


def _is_ui_test(request: pytest.FixtureRequest) -> bool:
    return "ui" in Path(str(request.node.fspath)).parts


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for UI tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _cleanup_qt_widgets(
    request: pytest.FixtureRequest,
) -> Iterator[None]:
    """Ensure UI tests do not leak top-level widgets into the next test."""
    if not _is_ui_test(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield

    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()


# ── Scriptable engine ────────────────────────────────────────────────────────


class FakeBoard(IBoard):
    def __init__(self, pieces: dict[Square, Piece]) -> None:
        self.cells: list[Piece | None] = [None] * 64
        for sq, piece in pieces.items():
            self.cells[sq] = piece

    def __getitem__(self, sq: Square) -> Piece | None:
        return self.cells[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self.cells[sq] = piece


class FakeGame(IChessGame):
    """Engine double with fixed legal moves.

    ``made`` records ``(from, to, piece on from at call time)`` so tests can
    check what the controller wrote before moving.
    """

    def __init__(
        self,
        pieces: dict[Square, Piece] | None = None,
        moves: dict[Square, set[Square]] | None = None,
    ) -> None:
        self._board = FakeBoard(pieces or {})
        self.moves = moves or {}
        self.state = GameState.IN_PROGRESS
        self.made: list[tuple[Square, Square, Piece | None]] = []

    @property
    def board(self) -> FakeBoard:
        return self._board

    def get_legal_moves(self, square: Square) -> set[Square]:
        return set(self.moves.get(square, set()))

    def get_game_state(self) -> GameState:
        return self.state

    def make_move(self, from_sq: Square, to_sq: Square) -> None:
        piece = self._board[from_sq]
        self.made.append((from_sq, to_sq, piece))
        self._board[to_sq] = piece
        self._board[from_sq] = None
        self.moves = {}


@pytest.fixture
def make_game() -> Callable[..., FakeGame]:
    """Factory for :class:`FakeGame` instances."""
    return FakeGame
