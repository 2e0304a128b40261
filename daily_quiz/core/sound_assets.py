"""Synthesized WAV cues for the feedback sounds.

The app ships no audio files; each cue is a short sequence of sine tones
written once into the user's data directory and reused afterwards.
"""

from __future__ import annotations

from array import array
import logging
import math
from pathlib import Path
import sys
import wave

from daily_quiz.constants.quiz_constants import SOUND_FILES

logger = logging.getLogger(__name__)

DEFAULT_SOUNDS_DIRECTORY = Path.home() / ".daily_quiz" / "sounds"
SAMPLE_RATE = 22050
_AMPLITUDE = 0.35
_FADE_SECONDS = 0.008

# (frequency in Hz, duration in seconds) per note.
SOUND_TONES: dict[str, tuple[tuple[float, float], ...]] = {
    "correct": ((660.0, 0.09), (880.0, 0.14)),
    "incorrect": ((330.0, 0.12), (220.0, 0.2)),
    "tap": ((1000.0, 0.04),),
    "complete": ((523.25, 0.12), (659.25, 0.12), (783.99, 0.24)),
    "hint_1": ((587.33, 0.1), (783.99, 0.16)),
    "hint_2": ((587.33, 0.09), (783.99, 0.09), (987.77, 0.2)),
}


def render_tones(notes: tuple[tuple[float, float], ...], sample_rate: int = SAMPLE_RATE) -> array:
    """Render notes back to back as signed 16-bit mono samples with short fades."""
    samples = array("h")
    fade = max(1, int(_FADE_SECONDS * sample_rate))
    for frequency, duration in notes:
        length = int(duration * sample_rate)
        for index in range(length):
            envelope = min(1.0, index / fade, (length - 1 - index) / fade)
            value = _AMPLITUDE * envelope * math.sin(2 * math.pi * frequency * index / sample_rate)
            samples.append(int(value * 32767))
    return samples


def write_wav(path: Path, samples: array, sample_rate: int = SAMPLE_RATE) -> None:
    if sys.byteorder == "big":
        samples = array("h", samples)
        samples.byteswap()
    with wave.open(str(path), "wb") as wav_file:
        wav_file.setnchannels(1)
        wav_file.setsampwidth(2)
        wav_file.setframerate(sample_rate)
        wav_file.writeframes(samples.tobytes())


def ensure_sound_files(directory: Path = DEFAULT_SOUNDS_DIRECTORY) -> dict[str, Path]:
    """Return the WAV path of every feedback cue, generating any that are missing.

    Existing files are left alone so a user can drop in their own sounds.
    Raises ``OSError`` if the directory or a file cannot be written.
    """
    directory.mkdir(parents=True, exist_ok=True)
    paths: dict[str, Path] = {}
    for name, file_name in SOUND_FILES.items():
        path = directory / file_name
        if not path.exists():
            write_wav(path, render_tones(SOUND_TONES[name]))
            logger.debug("Generated sound cue %s", path)
        paths[name] = path
    return paths
