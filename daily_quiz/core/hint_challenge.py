"""Timed hint challenge state machine.

A challenge is either idle or active for exactly one modality. While active
it owns one device handle (motion subscription, touch pad or recording
session) and accumulates the modality's score. An external tick source calls
``tick()`` once per second; when the countdown reaches zero the device is
released and a ``CompletedChallenge`` snapshot is handed back so the caller
can score it exactly once.

Sensor callbacks carry the generation of the challenge that registered them.
Anything arriving for an older generation, or after the challenge went idle,
is dropped.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
import logging
import time
from typing import Callable

from daily_quiz.constants.hint_constants import (
    SHAKE_SAMPLE_INTERVAL_MS,
    SHAKE_WINDOW_SECONDS,
    SHOUT_METERING_INTERVAL_MS,
    SHOUT_WINDOW_SECONDS,
    SWIPE_WINDOW_SECONDS,
)
from daily_quiz.core.models import HintModality
from daily_quiz.core.sensor_sampler import (
    SensorCapabilities,
    SensorHandle,
    ShakeSampler,
    ShoutSampler,
    SwipeSampler,
)

logger = logging.getLogger(__name__)

CHALLENGE_WINDOWS: dict[HintModality, int] = {
    HintModality.SHAKE: SHAKE_WINDOW_SECONDS,
    HintModality.SWIPE: SWIPE_WINDOW_SECONDS,
    HintModality.SHOUT: SHOUT_WINDOW_SECONDS,
}


@dataclass(frozen=True, slots=True)
class IdleChallenge:
    """No challenge is running."""


@dataclass(slots=True)
class ActiveChallenge:
    """A running challenge and its live counters."""

    modality: HintModality
    accumulator: float
    remaining_seconds: int
    started_at: float
    generation: int
    volume: float = 0.0


@dataclass(frozen=True, slots=True)
class CompletedChallenge:
    """Snapshot taken when the countdown expired."""

    modality: HintModality
    accumulator: float
    final_volume: float


ChallengeState = IdleChallenge | ActiveChallenge
SampleListener = Callable[[ActiveChallenge, bool], None]

IDLE = IdleChallenge()


class HintChallenge:
    """Runs one hint challenge at a time against the device capabilities."""

    def __init__(
        self,
        capabilities: SensorCapabilities,
        clock: Callable[[], float] = time.monotonic,
        on_sample: SampleListener | None = None,
    ) -> None:
        self._capabilities = capabilities
        self._clock = clock
        self._on_sample = on_sample
        self._state: ChallengeState = IDLE
        self._generation: int = 0
        self._handle: SensorHandle | None = None

        self._shake = ShakeSampler()
        self._swipe = SwipeSampler()
        self._shout = ShoutSampler()

    @property
    def state(self) -> ChallengeState:
        return self._state

    def is_active(self) -> bool:
        return isinstance(self._state, ActiveChallenge)

    def set_sample_listener(self, listener: SampleListener | None) -> None:
        self._on_sample = listener

    def start(self, modality: HintModality) -> ActiveChallenge:
        """Acquire the device for ``modality`` and begin the countdown.

        Raises ``MicrophoneUnavailableError`` for a shout when recording cannot
        start; the challenge stays idle in that case.
        """
        if self.is_active():
            raise RuntimeError("A hint challenge is already running.")

        generation = self._generation + 1
        self._reset_samplers()
        now = self._clock()
        self._handle = self._acquire(modality, generation, now)
        self._generation = generation
        self._state = ActiveChallenge(
            modality=modality,
            accumulator=0.0,
            remaining_seconds=CHALLENGE_WINDOWS[modality],
            started_at=now,
            generation=generation,
        )
        logger.info("Hint challenge started: %s", modality.value)
        return self._state

    def tick(self) -> CompletedChallenge | None:
        """Advance the countdown by one second.

        Returns the completed snapshot on the tick that reaches zero and
        ``None`` otherwise.
        """
        state = self._state
        if not isinstance(state, ActiveChallenge):
            return None
        state.remaining_seconds -= 1
        if state.remaining_seconds > 0:
            return None

        completed = CompletedChallenge(
            modality=state.modality,
            accumulator=state.accumulator,
            final_volume=state.volume,
        )
        self._finish()
        logger.info(
            "Hint challenge completed: %s accumulator=%.2f volume=%.1f",
            completed.modality.value,
            completed.accumulator,
            completed.final_volume,
        )
        return completed

    def abandon(self) -> None:
        """Release the device and drop the running challenge without scoring it."""
        if self.is_active():
            logger.info("Hint challenge abandoned.")
        self._finish()

    def _finish(self) -> None:
        handle = self._handle
        self._handle = None
        self._state = IDLE
        self._reset_samplers()
        if handle is not None:
            handle.release()

    def _reset_samplers(self) -> None:
        self._shake.reset()
        self._swipe.reset()
        self._shout.reset()

    def _acquire(self, modality: HintModality, generation: int, now: float) -> SensorHandle:
        if modality is HintModality.SHAKE:
            return self._capabilities.subscribe_motion(
                SHAKE_SAMPLE_INTERVAL_MS, partial(self._on_motion, generation)
            )
        if modality is HintModality.SWIPE:
            return self._capabilities.subscribe_touch_gesture(
                partial(self._on_touch_start, generation),
                partial(self._on_touch_move, generation),
            )
        self._shout.start(now)
        return self._capabilities.start_recording(
            SHOUT_METERING_INTERVAL_MS, partial(self._on_metering, generation)
        )

    def _active_for(self, generation: int, modality: HintModality) -> ActiveChallenge | None:
        state = self._state
        if not isinstance(state, ActiveChallenge):
            return None
        if state.generation != generation or state.modality is not modality:
            return None
        return state

    def _on_motion(self, generation: int, x: float, y: float, z: float) -> None:
        state = self._active_for(generation, HintModality.SHAKE)
        if state is None:
            return
        if self._shake.feed(x, y, z, self._clock() * 1000.0):
            state.accumulator += 1
            logger.debug("Shake registered (%d)", state.accumulator)
            self._notify(state, True)

    def _on_touch_start(self, generation: int, x: float, y: float) -> None:
        if self._active_for(generation, HintModality.SWIPE) is None:
            return
        self._swipe.start(x, y)

    def _on_touch_move(self, generation: int, x: float, y: float) -> None:
        state = self._active_for(generation, HintModality.SWIPE)
        if state is None:
            return
        if self._swipe.move(x, y):
            state.accumulator += 1
            logger.debug("Swipe registered (%d)", state.accumulator)
            self._notify(state, True)

    def _on_metering(self, generation: int, db: float) -> None:
        state = self._active_for(generation, HintModality.SHOUT)
        if state is None:
            return
        state.accumulator += self._shout.feed(db, self._clock())
        state.volume = self._shout.volume
        self._notify(state, False)

    def _notify(self, state: ActiveChallenge, registered: bool) -> None:
        if self._on_sample is not None:
            self._on_sample(state, registered)
