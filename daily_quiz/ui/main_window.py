"""Qt main window hosting the home, history and reader tabs."""

from __future__ import annotations

from dataclasses import fields
from enum import Enum, auto

from PySide6.QtWidgets import (
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QTabWidget,
    QVBoxLayout,
    QWidget,
)

from daily_quiz.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from daily_quiz.constants.ui_constants import TAB_HISTORY, TAB_HOME, TAB_READER, WINDOW_TITLE
from daily_quiz.core.models import Category
from daily_quiz.core.quiz_manager import QuizManager
from daily_quiz.core.settings import AppSettings
from daily_quiz.styling.styles import Styles
from daily_quiz.ui.components.history_panel import HistoryPanel
from daily_quiz.ui.components.home_panel import HomePanel
from daily_quiz.ui.components.quiz_panel import QuizPanel
from daily_quiz.ui.components.reader_panel import ReaderPanel
from daily_quiz.ui.components.swipe_pad import SwipePad
from daily_quiz.ui.dialog_helpers import show_info
from daily_quiz.ui.network_status import NetworkStatus
from daily_quiz.ui.settings_dialog import SettingsDialog


class HomeMode(Enum):
    """Which page of the Home tab is showing."""

    CATEGORY_PICKER = auto()
    QUIZ = auto()


class MainWindow(QMainWindow):
    """Main Qt window with the Home (picker and quiz), History and Reader tabs."""

    def __init__(
        self,
        quiz_manager: QuizManager,
        settings: AppSettings,
        swipe_pad: SwipePad,
        network_status: NetworkStatus | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)

        self.quiz_manager = quiz_manager
        self.settings = settings
        self._home_mode = HomeMode.CATEGORY_PICKER

        self._build_ui(swipe_pad)
        self._apply_styles()

        if network_status is not None:
            self.home_panel.set_online(network_status.is_online())
            network_status.online_changed.connect(self.home_panel.set_online)

    def _build_ui(self, swipe_pad: SwipePad) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_menu_buttons(root_layout)

        self.tabs = QTabWidget(self)

        self.home_stack = QStackedWidget(self)
        self.home_panel = HomePanel(
            on_start_quiz=self._handle_start_quiz,
            default_difficulty=self.settings.default_difficulty,
            parent=self,
        )
        self.quiz_panel = QuizPanel(
            self.quiz_manager,
            swipe_pad,
            on_exit=self._show_category_picker,
            parent=self,
        )
        self.home_stack.addWidget(self.home_panel)
        self.home_stack.addWidget(self.quiz_panel)

        self.history_panel = HistoryPanel(self.quiz_manager.history_store, self)
        self.reader_panel = ReaderPanel(self)

        self.tabs.addTab(self.home_stack, TAB_HOME)
        self.tabs.addTab(self.history_panel, TAB_HISTORY)
        self.tabs.addTab(self.reader_panel, TAB_READER)
        self.tabs.currentChanged.connect(self._handle_tab_changed)
        self.tabs.tabBarClicked.connect(self._handle_tab_clicked)

        root_layout.addWidget(self.tabs)

    def _build_menu_buttons(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()
        button_row.addStretch()

        self.about_button = QPushButton(f"About {APP_NAME}", self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        self.help_button = QPushButton("Help", self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        self.settings_button = QPushButton("Settings", self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        layout.addLayout(button_row)

    def _set_home_mode(self, mode: HomeMode) -> None:
        self._home_mode = mode
        index_map = {
            HomeMode.CATEGORY_PICKER: 0,
            HomeMode.QUIZ: 1,
        }
        self.home_stack.setCurrentIndex(index_map[mode])

    def _handle_start_quiz(self, category: Category, difficulty: str) -> None:
        self._set_home_mode(HomeMode.QUIZ)
        self.quiz_panel.start_round(category, difficulty, self.settings.questions_per_quiz)

    def _show_category_picker(self) -> None:
        self._set_home_mode(HomeMode.CATEGORY_PICKER)

    def _handle_tab_changed(self, index: int) -> None:
        if self.tabs.widget(index) is not self.home_stack and self._home_mode == HomeMode.QUIZ:
            self.quiz_panel.leave()
        if self.tabs.widget(index) is self.history_panel:
            self.history_panel.refresh()

    def _handle_tab_clicked(self, index: int) -> None:
        # Tapping Home while already on it returns to the category picker.
        if self.tabs.widget(index) is self.home_stack and self.tabs.currentIndex() == index:
            if self._home_mode == HomeMode.QUIZ:
                self.quiz_panel.leave()
            self._show_category_picker()

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(self.settings, self)
        if dialog.exec():
            selected = dialog.get_settings()
            # Update in place: the sound player holds the same settings object.
            for settings_field in fields(AppSettings):
                setattr(self.settings, settings_field.name, getattr(selected, settings_field.name))
            self.home_panel.set_default_difficulty(self.settings.default_difficulty)
            self._apply_styles()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style())
        self.quiz_panel.apply_text_size(self.settings.text_size)
        self.reader_panel.apply_text_size(self.settings.text_size)

    def closeEvent(self, event) -> None:
        self.quiz_panel.leave()
        super().closeEvent(event)
