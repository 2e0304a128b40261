"""Tests for the generated feedback sound cues."""

import wave

from daily_quiz.constants.quiz_constants import SOUND_FILES
from daily_quiz.core.feedback import FeedbackEvent
from daily_quiz.core.sound_assets import SAMPLE_RATE, SOUND_TONES, ensure_sound_files, render_tones


class TestEnsureSoundFiles:
    def test_every_cue_resolves_to_a_readable_wav(self, tmp_path):
        paths = ensure_sound_files(tmp_path / "sounds")

        assert set(paths) == set(SOUND_FILES)
        for name, path in paths.items():
            assert path.name == SOUND_FILES[name]
            with wave.open(str(path), "rb") as wav_file:
                assert wav_file.getnchannels() == 1
                assert wav_file.getsampwidth() == 2
                assert wav_file.getframerate() == SAMPLE_RATE
                assert wav_file.getnframes() > 0

    def test_every_audible_event_has_a_cue(self):
        audible = {event.value for event in FeedbackEvent if event is not FeedbackEvent.HINT_PULSE}
        assert audible <= set(SOUND_FILES)
        assert set(SOUND_TONES) == set(SOUND_FILES)

    def test_existing_files_are_kept(self, tmp_path):
        tmp_path.joinpath("tap.wav").write_bytes(b"custom")
        paths = ensure_sound_files(tmp_path)
        assert paths["tap"].read_bytes() == b"custom"

    def test_second_call_reuses_generated_files(self, tmp_path):
        first = ensure_sound_files(tmp_path)
        modified = {name: path.stat().st_mtime_ns for name, path in first.items()}
        second = ensure_sound_files(tmp_path)
        assert {name: path.stat().st_mtime_ns for name, path in second.items()} == modified


def test_rendered_tones_fit_sixteen_bit_range():
    samples = render_tones(((440.0, 0.05), (880.0, 0.05)))
    assert len(samples) == 2 * int(0.05 * SAMPLE_RATE)
    assert max(abs(sample) for sample in samples) <= 32767
    assert samples[0] == 0
