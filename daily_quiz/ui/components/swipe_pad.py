"""Touch surface used by the swipe hint challenge."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QMouseEvent
from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget

from daily_quiz.constants.ui_constants import SWIPE_PAD_PROMPT
from daily_quiz.core.sensor_sampler import TouchCallback


class SwipePad(QWidget):
    """Forwards press and drag positions to the active swipe challenge.

    Touch input reaches the widget as synthesized mouse events, so the same
    handlers serve touch screens and trackpads.
    """

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._on_start: TouchCallback | None = None
        self._on_move: TouchCallback | None = None
        self.setMinimumHeight(240)
        self.setAttribute(Qt.WA_AcceptTouchEvents, False)

        layout = QVBoxLayout()
        self.setLayout(layout)
        self.prompt_label = QLabel(SWIPE_PAD_PROMPT, self)
        self.prompt_label.setAlignment(Qt.AlignCenter)
        self.prompt_label.setAttribute(Qt.WA_TransparentForMouseEvents, True)
        layout.addWidget(self.prompt_label)

    def set_handlers(self, on_start: TouchCallback, on_move: TouchCallback) -> None:
        self._on_start = on_start
        self._on_move = on_move

    def clear_handlers(self) -> None:
        self._on_start = None
        self._on_move = None

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if self._on_start is not None:
            point = event.position()
            self._on_start(point.x(), point.y())
        event.accept()

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        if self._on_move is not None and event.buttons() & Qt.LeftButton:
            point = event.position()
            self._on_move(point.x(), point.y())
        event.accept()
