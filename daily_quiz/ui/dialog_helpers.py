"""Message boxes shared by the quiz, history and reader views."""

from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget

from daily_quiz.constants.ui_constants import (
    LOAD_FAILED_MESSAGE,
    MICROPHONE_REQUIRED_TITLE,
)


def _message_box(
    parent: QWidget,
    icon: QMessageBox.Icon,
    title: str,
    text: str,
    details: str | None = None,
) -> QMessageBox:
    box = QMessageBox(parent)
    box.setIcon(icon)
    box.setWindowTitle(title)
    box.setText(text)
    if details:
        box.setInformativeText(details)
    box.setStandardButtons(QMessageBox.Ok)
    return box


def confirm_clear_history(parent: QWidget) -> bool:
    """Ask before deleting every saved result; defaults to No."""
    reply = QMessageBox.question(
        parent,
        "Clear History",
        "Are you sure you want to delete all quiz history? This cannot be undone.",
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No,
    )
    return reply == QMessageBox.Yes


def show_load_failed(parent: QWidget, reason: str) -> None:
    """Report that no questions could be fetched for the selected category."""
    _message_box(parent, QMessageBox.Critical, "Quiz unavailable", LOAD_FAILED_MESSAGE, reason).exec()


def show_microphone_required(parent: QWidget, reason: str) -> None:
    _message_box(
        parent,
        QMessageBox.Warning,
        MICROPHONE_REQUIRED_TITLE,
        reason,
        "Allow microphone access in your system settings, then try the Shout hint again.",
    ).exec()


def show_error(parent: QWidget, title: str, message: str) -> None:
    _message_box(parent, QMessageBox.Critical, title, message).exec()


def show_warning(parent: QWidget, title: str, message: str) -> None:
    _message_box(parent, QMessageBox.Warning, title, message).exec()


def show_info(parent: QWidget, title: str, message: str) -> None:
    _message_box(parent, QMessageBox.Information, title, message).exec()
