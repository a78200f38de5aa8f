"""MainWindow — top-level window hosting the board."""

from __future__ import annotations

from PyQt6.QtWidgets import QMainWindow

from chessclick.controller.board_controller import BoardController
from chessclick.engine.interfaces import GameFactory
from chessclick.engine.python_chess_game import PythonChessGame
from chessclick.settings import AppSettings
from chessclick.ui.board.board_widget import BoardWidget


class MainWindow(QMainWindow):
    """Main application window for Chessclick."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        game_factory: GameFactory = PythonChessGame.new,
    ) -> None:
        super().__init__()
        self._settings = settings or AppSettings()
        self.setWindowTitle(self._settings.window_title)
        self.resize(self._settings.window_width, self._settings.window_height)

        self._controller = BoardController(game_factory, self._settings)
        self._board_widget = BoardWidget(self._controller, self._settings)
        self.setCentralWidget(self._board_widget)

    @property
    def board_widget(self) -> BoardWidget:
        return self._board_widget
