from __future__ import annotations

import math
from typing import Iterable

import numpy as np

from multitone.errors import InvalidToneFrequencyError
from multitone.logging_utils import get_logger
from multitone.models import ToneSpec, Waveform


logger = get_logger(__name__)


class SynthService:
    """Mixes sine tones into a mono float64 buffer.

    Tones are summed without normalization, so a loud mix can exceed 1.0;
    the encoder reports that as clipping.
    """

    def synthesize(
        self,
        sample_rate: int,
        duration_seconds: int,
        tones: Iterable[ToneSpec],
    ) -> Waveform:
        tones = list(tones)
        self._validate(sample_rate, duration_seconds, tones)

        num_samples = sample_rate * duration_seconds
        samples = np.zeros(num_samples, dtype=np.float64)
        index = np.arange(num_samples, dtype=np.float64)

        for tone in tones:
            period = sample_rate / tone.frequency_hz
            samples += np.sin(index * 2.0 * math.pi / period) * tone.scale

        logger.debug(
            "Synthesized %d tones (rate=%dHz, duration=%ds, samples=%d)",
            len(tones),
            sample_rate,
            duration_seconds,
            num_samples,
        )
        return Waveform(sample_rate=sample_rate, samples=samples)

    def synthesize_amplitude_modulation(
        self,
        sample_rate: int,
        duration_seconds: int,
        tones: Iterable[ToneSpec],
    ) -> Waveform:
        """Synthesize, then fold the mix into an envelope at the sample rate.

        Each sample ``v`` becomes ``0.5 + v / 2`` with odd indices negated,
        so an envelope detector recovers the original mix.
        """
        wave = self.synthesize(sample_rate, duration_seconds, tones)
        folded = 0.5 + wave.samples / 2.0
        folded[1::2] *= -1.0
        return Waveform(sample_rate=sample_rate, samples=folded)

    @staticmethod
    def _validate(sample_rate: int, duration_seconds: int, tones: list[ToneSpec]) -> None:
        if sample_rate <= 0:
            raise ValueError(f"sample_rate must be positive, got {sample_rate}")
        if duration_seconds < 0:
            raise ValueError(f"duration_seconds must not be negative, got {duration_seconds}")
        for tone in tones:
            if not math.isfinite(tone.frequency_hz) or tone.frequency_hz <= 0:
                raise InvalidToneFrequencyError(tone.frequency_hz)
            if not math.isfinite(tone.gain_db):
                raise ValueError(f"Tone gain must be finite, got {tone.gain_db!r}")
