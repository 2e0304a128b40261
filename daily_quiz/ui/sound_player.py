"""Plays sound cues for feedback events."""

from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import QObject, QUrl
from PySide6.QtMultimedia import QSoundEffect

from daily_quiz.core.feedback import FeedbackEvent
from daily_quiz.core.settings import AppSettings
from daily_quiz.core.sound_assets import DEFAULT_SOUNDS_DIRECTORY, ensure_sound_files

logger = logging.getLogger(__name__)


class SoundPlayer(QObject):
    """Feedback listener backed by preloaded ``QSoundEffect`` instances."""

    def __init__(
        self,
        settings: AppSettings,
        parent: QObject | None = None,
        sounds_directory: Path = DEFAULT_SOUNDS_DIRECTORY,
    ) -> None:
        super().__init__(parent)
        self._settings = settings
        self._effects: dict[str, QSoundEffect] = {}
        self._load_sounds(sounds_directory)

    def _load_sounds(self, directory: Path) -> None:
        try:
            sound_paths = ensure_sound_files(directory)
        except OSError as exc:
            logger.warning("Sound cues unavailable, playing silently: %s", exc)
            return
        for name, sound_path in sound_paths.items():
            effect = QSoundEffect(self)
            effect.setSource(QUrl.fromLocalFile(str(sound_path)))
            effect.setVolume(0.8)
            self._effects[name] = effect
        logger.info("Loaded %d sound effect(s)", len(self._effects))

    def __call__(self, event: FeedbackEvent) -> None:
        if event is FeedbackEvent.HINT_PULSE:
            # Haptic-only cue on mobile; desktop has nothing to pulse.
            return
        if not self._settings.sound_enabled:
            return
        effect = self._effects.get(event.value)
        if effect is not None:
            effect.play()
