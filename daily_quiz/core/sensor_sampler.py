"""Per-modality samplers that turn raw sensor input into hint events.

Each sampler is fed synthetic or real readings by whoever owns the device
binding (see ``SensorCapabilities``) and reports the scalar contribution of
that reading:

* ``ShakeSampler.feed`` returns ``True`` when a debounced shake is detected.
* ``SwipeSampler.move`` returns ``True`` when the finger travelled far enough
  from the last registered point.
* ``ShoutSampler.feed`` returns the number of loud seconds added.

The samplers hold no reference to Qt so they can be exercised headless.
"""

from __future__ import annotations

import math
from typing import Callable, Protocol

from daily_quiz.constants.hint_constants import (
    LOUD_VOLUME_THRESHOLD,
    METERING_FLOOR_DB,
    SHAKE_DEBOUNCE_MS,
    SHAKE_MAGNITUDE_THRESHOLD,
    SWIPE_DISTANCE_THRESHOLD,
)

MotionCallback = Callable[[float, float, float], None]
TouchCallback = Callable[[float, float], None]
MeteringCallback = Callable[[float], None]


class MicrophoneUnavailableError(Exception):
    """Raised when a recording session cannot be started."""


class SensorHandle(Protocol):
    """Live subscription or recording session owned by a challenge."""

    def release(self) -> None:
        ...


class SensorCapabilities(Protocol):
    """Device bindings the hint challenges acquire while active."""

    def subscribe_motion(self, interval_ms: int, callback: MotionCallback) -> SensorHandle:
        ...

    def subscribe_touch_gesture(self, on_start: TouchCallback, on_move: TouchCallback) -> SensorHandle:
        ...

    def start_recording(self, interval_ms: int, on_metering: MeteringCallback) -> SensorHandle:
        """Start a metered recording session or raise ``MicrophoneUnavailableError``."""
        ...


def metering_to_volume(db: float) -> float:
    """Map a dBFS metering value (-160..0) to a non-negative volume."""
    return max(0.0, db + METERING_FLOOR_DB)


class ShakeSampler:
    """Counts accelerometer spikes above the shake threshold."""

    def __init__(
        self,
        threshold: float = SHAKE_MAGNITUDE_THRESHOLD,
        debounce_ms: int = SHAKE_DEBOUNCE_MS,
    ) -> None:
        self._threshold = threshold
        self._debounce_ms = debounce_ms
        self._last_shake_ms: float | None = None

    def reset(self) -> None:
        self._last_shake_ms = None

    def feed(self, x: float, y: float, z: float, now_ms: float) -> bool:
        magnitude = math.sqrt(x * x + y * y + z * z)
        if magnitude <= self._threshold:
            return False
        if self._last_shake_ms is not None and now_ms - self._last_shake_ms < self._debounce_ms:
            return False
        self._last_shake_ms = now_ms
        return True


class SwipeSampler:
    """Registers a swipe each time the pointer travels past the distance threshold."""

    def __init__(self, threshold: float = SWIPE_DISTANCE_THRESHOLD) -> None:
        self._threshold = threshold
        self._last_point: tuple[float, float] | None = None

    def reset(self) -> None:
        self._last_point = None

    def start(self, x: float, y: float) -> None:
        self._last_point = (x, y)

    def move(self, x: float, y: float) -> bool:
        if self._last_point is None:
            # Move without a preceding press: treat it as the gesture start.
            self._last_point = (x, y)
            return False
        last_x, last_y = self._last_point
        distance = max(abs(y - last_y), abs(x - last_x))
        if distance > self._threshold:
            self._last_point = (x, y)
            return True
        return False


class ShoutSampler:
    """Accumulates how long the microphone stayed above the loud threshold."""

    def __init__(self, loud_threshold: float = LOUD_VOLUME_THRESHOLD) -> None:
        self._loud_threshold = loud_threshold
        self._last_sample_s: float | None = None
        self.volume: float = 0.0

    def reset(self) -> None:
        self._last_sample_s = None
        self.volume = 0.0

    def start(self, now_s: float) -> None:
        self._last_sample_s = now_s
        self.volume = 0.0

    def feed(self, db: float, now_s: float) -> float:
        self.volume = metering_to_volume(db)
        added = 0.0
        if self.volume >= self._loud_threshold and self._last_sample_s is not None:
            added = max(0.0, now_s - self._last_sample_s)
        self._last_sample_s = now_s
        return added
