from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional

import numpy as np

from ..errors import UnsupportedBitDepthError


class BitDepth(IntEnum):
    PCM16 = 16
    PCM32 = 32

    @classmethod
    def parse(cls, value: object) -> "BitDepth":
        """Return the member for ``value`` or raise UnsupportedBitDepthError."""
        try:
            return cls(int(value))  # type: ignore[arg-type]
        except (TypeError, ValueError) as exc:
            raise UnsupportedBitDepthError(value) from exc

    @property
    def max_value(self) -> int:
        return (1 << (self.value - 1)) - 1

    @property
    def min_value(self) -> int:
        return -(1 << (self.value - 1))

    @property
    def sample_width(self) -> int:
        return self.value // 8

    @property
    def dtype(self) -> np.dtype:
        return np.dtype("<i2") if self is BitDepth.PCM16 else np.dtype("<i4")


class Variant(str, Enum):
    PLAIN = "plain"
    AMPLITUDE_MODULATION = "amplitude_modulation"


@dataclass(frozen=True)
class ToneSpec:
    """One sine component of a test signal."""

    gain_db: float
    frequency_hz: float

    @property
    def scale(self) -> float:
        return 10.0 ** (self.gain_db / 20.0)


@dataclass
class Waveform:
    """Mono float64 sample buffer produced by the synthesizer."""

    sample_rate: int
    samples: np.ndarray

    @property
    def num_samples(self) -> int:
        return int(self.samples.shape[0])

    @property
    def duration_seconds(self) -> float:
        return self.num_samples / self.sample_rate

    def peak(self) -> float:
        if self.num_samples == 0:
            return 0.0
        return float(np.max(np.abs(self.samples)))


@dataclass
class WriteReport:
    """Outcome of encoding a waveform."""

    path: Optional[str]
    bit_depth: BitDepth
    peak_level_db: float
    clipped: bool
    num_bytes: int

    def status_line(self) -> str:
        line = f"FileSaved: {self.path}, Peak Level = {self.peak_level_db:.1f} dB"
        if self.clipped:
            line += ", CLIPPED!!"
        return line


@dataclass
class GenerationResult:
    """Per-preset outcome of a batch run."""

    preset: str
    path: str
    report: Optional[WriteReport] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.report is not None


def peak_to_db(peak: float) -> float:
    if peak <= 0.0:
        return -math.inf
    return 20.0 * math.log10(peak)
