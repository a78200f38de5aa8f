"""Abstract interface of the chess rules engine.

The board controller never validates moves itself; it depends on this ABC
and leaves legality, move application and end-of-game detection to the
concrete engine.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessclick.core.enums import GameState
    from chessclick.core.piece import Piece
    from chessclick.core.types import Square


class IBoard(ABC):
    """64 cells of ``Piece | None``, writable for promotion overwrites."""

    @abstractmethod
    def __getitem__(self, sq: Square) -> Piece | None: ...

    @abstractmethod
    def __setitem__(self, sq: Square, piece: Piece | None) -> None: ...

    def __len__(self) -> int:
        return 64

    def __iter__(self) -> Iterator[Piece | None]:
        for sq in range(64):
            yield self[sq]


class IChessGame(ABC):
    """Interface for a running game of chess."""

    @property
    @abstractmethod
    def board(self) -> IBoard:
        """Current board contents."""

    @abstractmethod
    def get_legal_moves(self, square: Square) -> set[Square]:
        """Destination squares reachable from *square* by the side to move."""

    @abstractmethod
    def get_game_state(self) -> GameState:
        """``IN_PROGRESS`` or ``GAME_OVER``."""

    @abstractmethod
    def make_move(self, from_sq: Square, to_sq: Square) -> None:
        """Play a move.

        A pawn reaching the back rank promotes to whatever piece type is
        stored in ``board[from_sq]`` at call time.
        """


GameFactory = Callable[[], IChessGame]
