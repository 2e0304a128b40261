"""Application entry point for Daily Quiz."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from daily_quiz.core.feedback import FeedbackHub
from daily_quiz.core.quiz_manager import QuizManager
from daily_quiz.core.services.history_store import HistoryStore
from daily_quiz.core.services.question_source import OpenTriviaQuestionSource
from daily_quiz.core.settings import AppSettings
from daily_quiz.ui.components.swipe_pad import SwipePad
from daily_quiz.ui.main_window import MainWindow
from daily_quiz.ui.network_status import NetworkStatus
from daily_quiz.ui.qt_sensors import QtSensorCapabilities
from daily_quiz.ui.sound_player import SoundPlayer
from daily_quiz.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, wire the services, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting Daily Quiz…")

    app = QApplication(sys.argv)

    settings = AppSettings()
    history_store = HistoryStore()
    logger.info("History stored at %s", history_store.file_path)

    capabilities = QtSensorCapabilities(app)
    swipe_pad = SwipePad()
    capabilities.attach_swipe_pad(swipe_pad)

    feedback = FeedbackHub()
    sound_player = SoundPlayer(settings, app)
    feedback.subscribe(sound_player)

    quiz_manager = QuizManager(
        question_source=OpenTriviaQuestionSource(),
        history_store=history_store,
        capabilities=capabilities,
        feedback=feedback,
    )

    network_status = NetworkStatus(app)

    window = MainWindow(
        quiz_manager=quiz_manager,
        settings=settings,
        swipe_pad=swipe_pad,
        network_status=network_status,
    )
    window.resize(900, 760)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
