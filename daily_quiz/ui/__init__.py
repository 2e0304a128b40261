"""Qt UI components for the Daily Quiz application."""

from .dialog_helpers import (
    confirm_clear_history,
    show_error,
    show_info,
    show_load_failed,
    show_microphone_required,
    show_warning,
)
from .main_window import MainWindow
from .network_status import NetworkStatus
from .qt_sensors import QtSensorCapabilities
from .sound_player import SoundPlayer

__all__ = [
    "MainWindow",
    "NetworkStatus",
    "QtSensorCapabilities",
    "SoundPlayer",
    "confirm_clear_history",
    "show_error",
    "show_info",
    "show_load_failed",
    "show_microphone_required",
    "show_warning",
]
