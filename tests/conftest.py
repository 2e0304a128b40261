"""Shared fakes for the headless core tests."""

from __future__ import annotations

import pytest

from daily_quiz.core.models import Question
from daily_quiz.core.sensor_sampler import MicrophoneUnavailableError


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeHandle:
    def __init__(self, kind: str) -> None:
        self.kind = kind
        self.released = False

    def release(self) -> None:
        self.released = True


class FakeCapabilities:
    """Records the callbacks a challenge registers so tests can drive them."""

    def __init__(self) -> None:
        self.handles: list[FakeHandle] = []
        self.motion_callback = None
        self.touch_start = None
        self.touch_move = None
        self.metering_callback = None
        self.microphone_error: str | None = None

    def subscribe_motion(self, interval_ms, callback):
        self.motion_callback = callback
        return self._handle("motion")

    def subscribe_touch_gesture(self, on_start, on_move):
        self.touch_start = on_start
        self.touch_move = on_move
        return self._handle("touch")

    def start_recording(self, interval_ms, on_metering):
        if self.microphone_error is not None:
            raise MicrophoneUnavailableError(self.microphone_error)
        self.metering_callback = on_metering
        return self._handle("recording")

    def _handle(self, kind: str) -> FakeHandle:
        handle = FakeHandle(kind)
        self.handles.append(handle)
        return handle

    def live_handles(self) -> list[FakeHandle]:
        return [handle for handle in self.handles if not handle.released]


def make_question(index: int = 0, correct: str = "A") -> Question:
    return Question(
        text=f"Question {index + 1}?",
        correct_answer=correct,
        answers=("A", "B", "C", "D"),
        difficulty_label="medium",
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def capabilities() -> FakeCapabilities:
    return FakeCapabilities()
