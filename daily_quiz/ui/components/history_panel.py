"""Component listing past results with summary statistics."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from daily_quiz.constants.quiz_constants import CATEGORIES
from daily_quiz.constants.ui_constants import (
    HISTORY_CLEAR_BUTTON,
    HISTORY_EMPTY_MESSAGE,
    HISTORY_HEADER,
    HISTORY_STATS_TEMPLATE,
)
from daily_quiz.core.services.history_stats import format_relative_date, summarize_history
from daily_quiz.core.services.history_store import HistoryStore, HistoryStoreError
from daily_quiz.styling.styles import Styles
from daily_quiz.ui.dialog_helpers import confirm_clear_history, show_error

_CATEGORY_ICONS = {category.name: category.icon for category in CATEGORIES}


class HistoryPanel(QWidget):
    """UI component showing the stored history."""

    def __init__(self, history_store: HistoryStore, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.history_store = history_store
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        header = QLabel(HISTORY_HEADER, self)
        header.setAlignment(Qt.AlignCenter)
        header.setStyleSheet(Styles.get_header_style())
        layout.addWidget(header)

        self.stats_label = QLabel("", self)
        self.stats_label.setWordWrap(True)
        layout.addWidget(self.stats_label)

        self.trend_label = QLabel("", self)
        layout.addWidget(self.trend_label)

        self.category_list = QListWidget(self)
        self.category_list.setMaximumHeight(140)
        layout.addWidget(self.category_list)

        self.result_list = QListWidget(self)
        self.result_list.setAlternatingRowColors(True)
        layout.addWidget(self.result_list, stretch=1)

        self.empty_label = QLabel(HISTORY_EMPTY_MESSAGE, self)
        self.empty_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.empty_label)

        self.clear_button = QPushButton(HISTORY_CLEAR_BUTTON, self)
        self.clear_button.clicked.connect(self._handle_clear)
        layout.addWidget(self.clear_button)

    def refresh(self) -> None:
        history = self.history_store.load()
        summary = summarize_history(history)
        has_history = bool(history)

        self.empty_label.setVisible(not has_history)
        self.stats_label.setVisible(has_history)
        self.trend_label.setVisible(has_history)
        self.category_list.setVisible(has_history)
        self.clear_button.setEnabled(has_history)

        self.stats_label.setText(
            HISTORY_STATS_TEMPLATE.format(
                total_quizzes=summary.total_quizzes,
                total_questions=summary.total_questions,
                total_correct=summary.total_correct,
                average_score=summary.average_score,
            )
        )
        self.trend_label.setText(
            "Recent: " + " → ".join(f"{value}%" for value in summary.recent_percentages)
        )

        self.category_list.clear()
        for row in summary.categories:
            icon = _CATEGORY_ICONS.get(row.category, "❓")
            QListWidgetItem(f"{icon} {row.category}: {row.percentage}% ({row.count} quiz(zes))", self.category_list)

        self.result_list.clear()
        for entry in history:
            difficulty = entry.difficulty.capitalize() if entry.difficulty else "Mixed"
            QListWidgetItem(
                f"{_CATEGORY_ICONS.get(entry.category, '❓')} {entry.category} — "
                f"{entry.score}/{entry.total} ({entry.percentage}%) • {difficulty} • "
                f"{format_relative_date(entry.date)}",
                self.result_list,
            )

    def _handle_clear(self) -> None:
        if not confirm_clear_history(self):
            return
        try:
            self.history_store.clear()
        except HistoryStoreError as exc:
            show_error(self, "Clear failed", str(exc))
            return
        self.refresh()
