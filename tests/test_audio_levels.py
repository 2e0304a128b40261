"""Tests for converting microphone blocks of each sample encoding to dBFS."""

from array import array
import math

import pytest

from daily_quiz.core.audio_levels import SILENCE_DB, SampleEncoding, block_to_dbfs


def _sine(amplitude, count=1600):
    return [amplitude * math.sin(2 * math.pi * index / 32) for index in range(count)]


class TestFloatBlocks:
    def test_constant_tenth_of_full_scale_is_minus_twenty(self):
        data = array("f", [0.1] * 400).tobytes()
        assert block_to_dbfs(data, SampleEncoding.FLOAT32) == pytest.approx(-20.0, abs=0.01)

    def test_full_scale_sine_is_about_minus_three(self):
        data = array("f", _sine(1.0)).tobytes()
        assert block_to_dbfs(data, SampleEncoding.FLOAT32) == pytest.approx(-3.01, abs=0.05)

    def test_float_block_is_not_read_as_int16(self):
        """A quiet float block must stay quiet rather than look like loud 16-bit noise."""
        data = array("f", _sine(0.001)).tobytes()
        assert block_to_dbfs(data, SampleEncoding.FLOAT32) < -55.0

    def test_overrange_samples_clamp_to_zero(self):
        data = array("f", [4.0] * 100).tobytes()
        assert block_to_dbfs(data, SampleEncoding.FLOAT32) == 0.0


class TestIntegerBlocks:
    def test_int16_half_scale(self):
        data = array("h", [16384] * 200).tobytes()
        assert block_to_dbfs(data, SampleEncoding.INT16) == pytest.approx(-6.02, abs=0.01)

    def test_int32_tenth_of_full_scale(self):
        data = array("i", [214748365] * 200).tobytes()
        assert block_to_dbfs(data, SampleEncoding.INT32) == pytest.approx(-20.0, abs=0.01)

    def test_uint8_midpoint_is_silence(self):
        data = array("B", [128] * 200).tobytes()
        assert block_to_dbfs(data, SampleEncoding.UINT8) == SILENCE_DB

    def test_default_encoding_is_int16(self):
        data = array("h", [3277] * 100).tobytes()
        assert block_to_dbfs(data) == pytest.approx(-20.0, abs=0.01)


class TestEdgeCases:
    def test_empty_block_is_silence(self):
        assert block_to_dbfs(b"", SampleEncoding.FLOAT32) == SILENCE_DB

    def test_zero_samples_are_silence(self):
        assert block_to_dbfs(bytes(64), SampleEncoding.INT16) == SILENCE_DB

    def test_trailing_partial_sample_is_ignored(self):
        data = array("h", [16384] * 10).tobytes() + b"\x01"
        assert block_to_dbfs(data, SampleEncoding.INT16) == pytest.approx(-6.02, abs=0.01)
