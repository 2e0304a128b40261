"""Component for choosing a difficulty and a category."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QButtonGroup,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from daily_quiz.constants.quiz_constants import CATEGORIES, DIFFICULTIES, DIFFICULTY_EMOJI
from daily_quiz.constants.ui_constants import (
    CATEGORY_LABEL,
    DIFFICULTY_LABEL,
    HOME_HEADER,
    OFFLINE_BANNER,
    OFFLINE_MESSAGE,
    OFFLINE_TITLE,
)
from daily_quiz.core.models import Category
from daily_quiz.styling.styles import Styles
from daily_quiz.ui.dialog_helpers import show_warning


class HomePanel(QWidget):
    """Category picker; calls ``on_start_quiz(category, difficulty)`` on selection."""

    def __init__(
        self,
        on_start_quiz: Callable[[Category, str], None],
        default_difficulty: str,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_start_quiz = on_start_quiz
        self._difficulty = default_difficulty
        self._difficulty_buttons: dict[str, QPushButton] = {}
        self._online = True

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        header = QLabel(HOME_HEADER, self)
        header.setAlignment(Qt.AlignCenter)
        header.setStyleSheet(Styles.get_header_style())
        layout.addWidget(header)

        self.offline_banner = QLabel(OFFLINE_BANNER, self)
        self.offline_banner.setAlignment(Qt.AlignCenter)
        self.offline_banner.setStyleSheet(Styles.get_offline_banner_style())
        self.offline_banner.setVisible(False)
        layout.addWidget(self.offline_banner)

        layout.addWidget(QLabel(DIFFICULTY_LABEL, self))
        difficulty_row = QHBoxLayout()
        self.difficulty_group = QButtonGroup(self)
        self.difficulty_group.setExclusive(True)
        for difficulty in DIFFICULTIES:
            button = QPushButton(f"{DIFFICULTY_EMOJI[difficulty]} {difficulty.capitalize()}", self)
            button.setCheckable(True)
            button.setChecked(difficulty == self._difficulty)
            button.clicked.connect(lambda _checked=False, value=difficulty: self._set_difficulty(value))
            self.difficulty_group.addButton(button)
            self._difficulty_buttons[difficulty] = button
            difficulty_row.addWidget(button)
        layout.addLayout(difficulty_row)

        layout.addWidget(QLabel(CATEGORY_LABEL, self))
        grid = QGridLayout()
        for idx, category in enumerate(CATEGORIES):
            button = QPushButton(f"{category.icon}\n{category.name}", self)
            button.setStyleSheet(Styles.get_category_button_style(category.color))
            button.clicked.connect(lambda _checked=False, value=category: self._handle_category(value))
            grid.addWidget(button, idx // 2, idx % 2)
        layout.addLayout(grid)
        layout.addStretch()

    def _set_difficulty(self, difficulty: str) -> None:
        self._difficulty = difficulty

    def set_default_difficulty(self, difficulty: str) -> None:
        self._difficulty = difficulty
        button = self._difficulty_buttons.get(difficulty)
        if button is not None:
            button.setChecked(True)

    def set_online(self, online: bool) -> None:
        self._online = online
        self.offline_banner.setVisible(not online)

    def _handle_category(self, category: Category) -> None:
        if not self._online:
            show_warning(self, OFFLINE_TITLE, OFFLINE_MESSAGE)
            return
        self.on_start_quiz(category, self._difficulty)
