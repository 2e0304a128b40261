"""Tests for the per-modality samplers."""

from daily_quiz.core.sensor_sampler import ShakeSampler, ShoutSampler, SwipeSampler, metering_to_volume


class TestShakeSampler:
    def test_magnitude_must_exceed_threshold(self):
        sampler = ShakeSampler()
        assert sampler.feed(2.5, 0.0, 0.0, now_ms=0) is False
        assert sampler.feed(2.0, 2.0, 0.0, now_ms=200) is True

    def test_debounce_rejects_spikes_within_interval(self):
        sampler = ShakeSampler()
        assert sampler.feed(3.0, 0.0, 0.0, now_ms=1000) is True
        assert sampler.feed(3.0, 0.0, 0.0, now_ms=1050) is False
        assert sampler.feed(3.0, 0.0, 0.0, now_ms=1100) is True

    def test_reset_forgets_last_shake(self):
        sampler = ShakeSampler()
        sampler.feed(3.0, 0.0, 0.0, now_ms=1000)
        sampler.reset()
        assert sampler.feed(3.0, 0.0, 0.0, now_ms=1010) is True


class TestSwipeSampler:
    def test_registers_when_distance_exceeds_threshold(self):
        sampler = SwipeSampler()
        sampler.start(0, 0)
        assert sampler.move(100, 0) is False
        assert sampler.move(131, 0) is True
        # The registered point becomes the new origin.
        assert sampler.move(200, 0) is False
        assert sampler.move(131, -10) is False
        assert sampler.move(131, -131) is True

    def test_distance_is_exactly_threshold_is_not_enough(self):
        sampler = SwipeSampler()
        sampler.start(10, 10)
        assert sampler.move(10, 140) is False

    def test_move_without_start_begins_tracking(self):
        sampler = SwipeSampler()
        assert sampler.move(500, 500) is False
        assert sampler.move(500, 700) is True


class TestShoutSampler:
    def test_metering_maps_to_non_negative_volume(self):
        assert metering_to_volume(-160) == 0
        assert metering_to_volume(-200) == 0
        assert metering_to_volume(-40) == 120
        assert metering_to_volume(0) == 160

    def test_loud_samples_add_elapsed_time(self):
        sampler = ShoutSampler()
        sampler.start(10.0)
        assert sampler.feed(-30.0, 10.5) == 0.5
        assert sampler.volume == 130
        assert sampler.feed(-80.0, 11.0) == 0.0
        assert sampler.volume == 80
        assert sampler.feed(-40.0, 12.0) == 1.0

    def test_reset_clears_volume(self):
        sampler = ShoutSampler()
        sampler.start(0.0)
        sampler.feed(-10.0, 1.0)
        sampler.reset()
        assert sampler.volume == 0.0
        # No previous sample after reset, so nothing is credited.
        assert sampler.feed(-10.0, 2.0) == 0.0
