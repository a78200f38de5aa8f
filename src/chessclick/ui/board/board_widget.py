"""BoardWidget — QWidget that feeds pointer input to the board controller
and paints its cached layers in z order."""

from __future__ import annotations

from PyQt6.QtCore import Qt, QTimer, pyqtSignal
from PyQt6.QtGui import QCursor, QMouseEvent, QPainter, QPaintEvent, QPixmap
from PyQt6.QtWidgets import QSizePolicy, QWidget

from chessclick.controller.board_controller import BoardController, Frame
from chessclick.controller.draw_plan import DrawPrimitive, split_by_z
from chessclick.controller.geometry import Viewport
from chessclick.controller.selection import CursorHint, PointerEvent
from chessclick.settings import AppSettings
from chessclick.ui.board.layer_painter import render_layer
from chessclick.ui.styles.theme import BoardTheme

_LayerPixmaps = tuple[QPixmap | None, QPixmap | None]

_CURSORS: dict[CursorHint, Qt.CursorShape] = {
    CursorHint.GRAB: Qt.CursorShape.OpenHandCursor,
    CursorHint.DEFAULT: Qt.CursorShape.ArrowCursor,
}


class BoardWidget(QWidget):
    """Displays the board and drives one controller tick per frame.

    Pointer events are queued as they arrive and handed to the controller
    on the next frame, in order.

    Signals:
        move_made(int, int): Origin and destination square of a played move.
    """

    move_made = pyqtSignal(int, int)

    def __init__(
        self,
        controller: BoardController,
        settings: AppSettings | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        settings = settings or AppSettings()
        self._controller = controller
        self._theme = BoardTheme.by_name(settings.board_theme)
        self._piece_set = settings.piece_set
        self._pending: list[PointerEvent] = []
        # (under pieces, pieces and above) per layer
        self._board_pixmaps: _LayerPixmaps = (None, None)
        self._marker_pixmaps: _LayerPixmaps = (None, None)

        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(320, 320)

        controller.events.on_move.append(self.move_made.emit)

        self._timer = QTimer(self)
        self._timer.setInterval(settings.frame_interval_ms)
        self._timer.timeout.connect(self.advance_frame)
        self._timer.start()

    @property
    def controller(self) -> BoardController:
        return self._controller

    def board_viewport(self) -> Viewport:
        return Viewport(float(self.width()), float(self.height()))

    # ── Frame loop ───────────────────────────────────────────────────────

    def advance_frame(self) -> Frame:
        """Run one controller tick and refresh any rebuilt layer."""
        events, self._pending = self._pending, []
        frame = self._controller.tick(events, self.board_viewport())

        if frame.board_layer is not None:
            self._board_pixmaps = self._render(frame.board_layer)
        if frame.marker_layer is not None:
            self._marker_pixmaps = self._render(frame.marker_layer)
        if frame.cursor is not None:
            self.setCursor(QCursor(_CURSORS[frame.cursor]))
        if frame.board_layer is not None or frame.marker_layer is not None:
            self.update()
        return frame

    def _render(self, primitives: list[DrawPrimitive]) -> _LayerPixmaps:
        w, h = self.width(), self.height()
        dpr = self.devicePixelRatioF()
        under, over = split_by_z(primitives)
        return (
            render_layer(under, w, h, self._theme, self._piece_set, dpr),
            render_layer(over, w, h, self._theme, self._piece_set, dpr),
        )

    # ── Qt events ────────────────────────────────────────────────────────

    def paintEvent(self, event: QPaintEvent | None) -> None:
        p = QPainter(self)
        p.fillRect(self.rect(), self._theme.background)
        board_under, board_over = self._board_pixmaps
        marker_under, marker_over = self._marker_pixmaps
        for pixmap in (board_under, marker_under, board_over, marker_over):
            if pixmap is not None:
                p.drawPixmap(0, 0, pixmap)
        p.end()

    def mousePressEvent(self, event: QMouseEvent | None) -> None:
        if event is not None and event.button() == Qt.MouseButton.LeftButton:
            pos = event.position()
            self._pending.append(PointerEvent.press(pos.x(), pos.y()))
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent | None) -> None:
        if event is not None and event.button() == Qt.MouseButton.LeftButton:
            pos = event.position()
            self._pending.append(PointerEvent.release(pos.x(), pos.y()))
        super().mouseReleaseEvent(event)
