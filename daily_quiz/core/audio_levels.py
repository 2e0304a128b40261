"""RMS level of raw microphone blocks, for the encodings audio devices deliver."""

from __future__ import annotations

from array import array
from enum import Enum
import math

SILENCE_DB = -160.0


class SampleEncoding(Enum):
    """Sample layout of a PCM block: array typecode, zero offset and full-scale value."""

    UINT8 = ("B", 128.0, 128.0)
    INT16 = ("h", 0.0, 32768.0)
    INT32 = ("i", 0.0, 2147483648.0)
    FLOAT32 = ("f", 0.0, 1.0)

    def __init__(self, typecode: str, offset: float, full_scale: float) -> None:
        self.typecode = typecode
        self.offset = offset
        self.full_scale = full_scale


def block_to_dbfs(data: bytes, encoding: SampleEncoding = SampleEncoding.INT16) -> float:
    """Convert a block of native-endian PCM to an RMS level in dBFS, clamped to -160..0.

    A trailing partial sample is ignored; an empty or silent block is -160.
    """
    samples = array(encoding.typecode)
    usable = len(data) - len(data) % samples.itemsize
    samples.frombytes(data[:usable])
    if not samples:
        return SILENCE_DB
    offset = encoding.offset
    mean_square = sum((sample - offset) ** 2 for sample in samples) / len(samples)
    if not mean_square > 0:
        return SILENCE_DB
    level = 20.0 * math.log10(math.sqrt(mean_square) / encoding.full_scale)
    return max(SILENCE_DB, min(0.0, level))
