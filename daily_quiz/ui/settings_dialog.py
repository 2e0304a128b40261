"""Settings dialog for configuring Daily Quiz preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QDialog,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QSpinBox,
    QPushButton,
    QGroupBox,
    QCheckBox,
    QComboBox,
)

from daily_quiz.constants.about import APP_VERSION
from daily_quiz.constants.quiz_constants import DIFFICULTIES, QUESTION_COUNT_CHOICES
from daily_quiz.core.settings import AppSettings


class SettingsDialog(QDialog):
    """Dialog for configuring application settings."""

    def __init__(self, settings: AppSettings, parent=None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(400)

        self._settings = settings

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Quiz settings group
        quiz_group = QGroupBox("Quiz Settings")
        quiz_layout = QVBoxLayout()
        quiz_group.setLayout(quiz_layout)

        difficulty_row = QHBoxLayout()
        difficulty_label = QLabel("Default Difficulty:")
        self.difficulty_combo = QComboBox()
        for difficulty in DIFFICULTIES:
            self.difficulty_combo.addItem(difficulty.capitalize(), difficulty)
        self.difficulty_combo.setCurrentIndex(DIFFICULTIES.index(self._settings.default_difficulty))
        difficulty_row.addWidget(difficulty_label)
        difficulty_row.addStretch()
        difficulty_row.addWidget(self.difficulty_combo)
        quiz_layout.addLayout(difficulty_row)

        count_row = QHBoxLayout()
        count_label = QLabel("Questions per Quiz:")
        self.count_combo = QComboBox()
        for count in QUESTION_COUNT_CHOICES:
            self.count_combo.addItem(str(count), count)
        self.count_combo.setCurrentIndex(QUESTION_COUNT_CHOICES.index(self._settings.questions_per_quiz))
        count_row.addWidget(count_label)
        count_row.addStretch()
        count_row.addWidget(self.count_combo)
        quiz_layout.addLayout(count_row)

        self.sound_checkbox = QCheckBox("Sound Effects")
        self.sound_checkbox.setChecked(self._settings.sound_enabled)
        quiz_layout.addWidget(self.sound_checkbox)

        layout.addWidget(quiz_group)

        # Display settings group
        display_group = QGroupBox("Display Settings")
        display_layout = QVBoxLayout()
        display_group.setLayout(display_layout)

        text_row = QHBoxLayout()
        text_label = QLabel("Text Size (questions, answers):")
        self.text_size_spinbox = QSpinBox()
        self.text_size_spinbox.setRange(10, 32)
        self.text_size_spinbox.setValue(self._settings.text_size)
        self.text_size_spinbox.setSuffix(" pt")
        text_row.addWidget(text_label)
        text_row.addStretch()
        text_row.addWidget(self.text_size_spinbox)
        display_layout.addLayout(text_row)

        layout.addWidget(display_group)
        layout.addWidget(QLabel(f"Version {APP_VERSION}"))

        # Buttons
        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    def get_settings(self) -> AppSettings:
        """Build the settings selected in the dialog."""
        return AppSettings(
            default_difficulty=self.difficulty_combo.currentData(),
            questions_per_quiz=self.count_combo.currentData(),
            sound_enabled=self.sound_checkbox.isChecked(),
            text_size=self.text_size_spinbox.value(),
        )
