"""Fire-and-forget notifications for sound and haptic cues."""

from __future__ import annotations

from enum import Enum
import logging
from typing import Callable

logger = logging.getLogger(__name__)


class FeedbackEvent(Enum):
    """Transitions that may trigger a sound cue or haptic pulse."""

    HINT_STARTED = "tap"
    HINT_PULSE = "pulse"
    HINT_FAILED = "incorrect"
    HINT_WEAK = "hint_1"
    HINT_STRONG = "hint_2"
    ANSWER_CORRECT = "correct"
    ANSWER_INCORRECT = "incorrect"
    ROUND_COMPLETE = "complete"


FeedbackListener = Callable[[FeedbackEvent], None]


class FeedbackHub:
    """Broadcasts feedback events to registered listeners."""

    def __init__(self) -> None:
        self._listeners: list[FeedbackListener] = []

    def subscribe(self, listener: FeedbackListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: FeedbackListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self, event: FeedbackEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Feedback listener failed for %s", event.name)
