"""Chess engine layer: the interface the controller depends on and a
python-chess backed implementation of it."""

from chessclick.engine.interfaces import GameFactory, IBoard, IChessGame
from chessclick.engine.python_chess_game import IllegalMoveError, PythonChessGame

__all__ = [
    "GameFactory",
    "IBoard",
    "IChessGame",
    "IllegalMoveError",
    "PythonChessGame",
]
