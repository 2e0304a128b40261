"""Tests for the timed hint challenge state machine."""

import pytest

from daily_quiz.core.hint_challenge import ActiveChallenge, CompletedChallenge, HintChallenge, IdleChallenge
from daily_quiz.core.models import HintModality
from daily_quiz.core.sensor_sampler import MicrophoneUnavailableError


def _shake(capabilities, clock, times, step=0.2):
    for _ in range(times):
        clock.advance(step)
        capabilities.motion_callback(3.0, 0.0, 0.0)


class TestLifecycle:
    def test_starts_idle(self, capabilities, clock):
        challenge = HintChallenge(capabilities, clock=clock)
        assert isinstance(challenge.state, IdleChallenge)
        assert challenge.tick() is None

    def test_start_acquires_one_device_and_sets_window(self, capabilities, clock):
        challenge = HintChallenge(capabilities, clock=clock)
        state = challenge.start(HintModality.SWIPE)
        assert isinstance(state, ActiveChallenge)
        assert state.remaining_seconds == 3
        assert state.accumulator == 0
        assert [handle.kind for handle in capabilities.live_handles()] == ["touch"]

    def test_second_start_is_rejected(self, capabilities, clock):
        challenge = HintChallenge(capabilities, clock=clock)
        challenge.start(HintModality.SHAKE)
        with pytest.raises(RuntimeError):
            challenge.start(HintModality.SWIPE)
        assert len(capabilities.handles) == 1

    def test_countdown_completes_once_and_releases(self, capabilities, clock):
        challenge = HintChallenge(capabilities, clock=clock)
        challenge.start(HintModality.SHAKE)
        _shake(capabilities, clock, 6)

        assert challenge.tick() is None
        assert challenge.tick() is None
        completed = challenge.tick()

        assert completed == CompletedChallenge(HintModality.SHAKE, 6, 0.0)
        assert isinstance(challenge.state, IdleChallenge)
        assert capabilities.live_handles() == []
        assert challenge.tick() is None

    def test_shout_window_is_ten_seconds(self, capabilities, clock):
        challenge = HintChallenge(capabilities, clock=clock)
        challenge.start(HintModality.SHOUT)
        results = [challenge.tick() for _ in range(10)]
        assert results[:9] == [None] * 9
        assert isinstance(results[9], CompletedChallenge)

    def test_abandon_releases_without_completing(self, capabilities, clock):
        challenge = HintChallenge(capabilities, clock=clock)
        challenge.start(HintModality.SHOUT)
        challenge.abandon()
        assert isinstance(challenge.state, IdleChallenge)
        assert capabilities.live_handles() == []
        assert challenge.tick() is None


class TestSampling:
    def test_debounced_shakes_are_counted(self, capabilities, clock):
        challenge = HintChallenge(capabilities, clock=clock)
        challenge.start(HintModality.SHAKE)
        _shake(capabilities, clock, 3, step=0.2)
        _shake(capabilities, clock, 3, step=0.06)
        # At 60 ms apart only every other spike clears the debounce.
        assert challenge.state.accumulator == 4

    def test_swipes_are_counted(self, capabilities, clock):
        challenge = HintChallenge(capabilities, clock=clock)
        challenge.start(HintModality.SWIPE)
        capabilities.touch_start(0, 0)
        capabilities.touch_move(0, 200)
        capabilities.touch_move(0, 0)
        capabilities.touch_move(50, 10)
        assert challenge.state.accumulator == 2

    def test_shout_accumulates_loud_seconds_and_volume(self, capabilities, clock):
        challenge = HintChallenge(capabilities, clock=clock)
        challenge.start(HintModality.SHOUT)
        for _ in range(4):
            clock.advance(0.5)
            capabilities.metering_callback(-20.0)
        clock.advance(0.5)
        capabilities.metering_callback(-90.0)
        assert challenge.state.accumulator == 2.0
        assert challenge.state.volume == 70.0

    def test_sample_listener_sees_registered_events(self, capabilities, clock):
        seen = []
        challenge = HintChallenge(capabilities, clock=clock, on_sample=lambda state, registered: seen.append(registered))
        challenge.start(HintModality.SHAKE)
        _shake(capabilities, clock, 2)
        capabilities.motion_callback(0.1, 0.1, 0.1)
        assert seen == [True, True]

    def test_late_callbacks_after_completion_are_ignored(self, capabilities, clock):
        challenge = HintChallenge(capabilities, clock=clock)
        challenge.start(HintModality.SHAKE)
        stale_motion = capabilities.motion_callback
        for _ in range(3):
            challenge.tick()

        challenge.start(HintModality.SHAKE)
        clock.advance(1.0)
        stale_motion(5.0, 0.0, 0.0)
        assert challenge.state.accumulator == 0

    def test_callbacks_for_other_modality_are_ignored(self, capabilities, clock):
        challenge = HintChallenge(capabilities, clock=clock)
        challenge.start(HintModality.SHAKE)
        motion = capabilities.motion_callback
        challenge.abandon()
        challenge.start(HintModality.SWIPE)
        motion(5.0, 0.0, 0.0)
        assert challenge.state.accumulator == 0


class TestMicrophoneFailure:
    def test_failed_recording_leaves_challenge_idle(self, capabilities, clock):
        capabilities.microphone_error = "Microphone permission required."
        challenge = HintChallenge(capabilities, clock=clock)
        with pytest.raises(MicrophoneUnavailableError):
            challenge.start(HintModality.SHOUT)
        assert isinstance(challenge.state, IdleChallenge)
        assert capabilities.live_handles() == []

        # A later challenge still starts normally.
        challenge.start(HintModality.SHAKE)
        assert challenge.is_active()
