from __future__ import annotations

import math

import numpy as np
import pytest

from multitone.errors import InvalidToneFrequencyError
from multitone.models import ToneSpec
from multitone.services import SynthService


def test_synthesize_buffer_length_is_rate_times_duration() -> None:
    synth = SynthService()
    tones = [ToneSpec(-6.0, 60.0), ToneSpec(-30.0, 7000.0)]

    wave = synth.synthesize(8000, 3, tones)

    assert wave.sample_rate == 8000
    assert wave.num_samples == 24000
    assert wave.duration_seconds == 3.0


def test_single_tone_at_unity_gain_matches_sine() -> None:
    synth = SynthService()
    rate, freq = 48000, 1000.0

    wave = synth.synthesize(rate, 1, [ToneSpec(0.0, freq)])

    i = np.arange(rate)
    expected = np.sin(2 * np.pi * freq * i / rate)
    np.testing.assert_allclose(wave.samples, expected, atol=1e-9)
    assert wave.peak() == pytest.approx(1.0, abs=1e-9)


def test_gain_in_db_scales_amplitude() -> None:
    synth = SynthService()

    wave = synth.synthesize(48000, 1, [ToneSpec(-20.0, 1000.0)])

    assert wave.peak() == pytest.approx(0.1, abs=1e-9)


def test_empty_tone_list_is_silence() -> None:
    wave = SynthService().synthesize(22050, 2, [])

    assert wave.num_samples == 44100
    assert not np.any(wave.samples)
    assert wave.peak() == 0.0


def test_tones_superpose_without_normalization() -> None:
    synth = SynthService()
    tones = [ToneSpec(0.0, 1000.0), ToneSpec(0.0, 1000.0)]

    wave = synth.synthesize(48000, 1, tones)

    # Two in-phase unit tones peak at 2.0; nothing rescales the mix.
    assert wave.peak() == pytest.approx(2.0, abs=1e-9)


def test_two_tone_imd_peak_is_bounded_by_sum_of_scales() -> None:
    tones = [ToneSpec(-6.0, 60.0), ToneSpec(-30.0, 7000.0)]

    wave = SynthService().synthesize(48000, 1, tones)

    bound = 10 ** (-6 / 20) + 10 ** (-30 / 20)
    assert wave.peak() <= bound + 1e-12
    assert bound == pytest.approx(0.5328, abs=1e-3)


def test_amplitude_modulation_of_silence_alternates_half_scale() -> None:
    wave = SynthService().synthesize_amplitude_modulation(1000, 1, [])

    expected = np.tile([0.5, -0.5], 500)
    np.testing.assert_array_equal(wave.samples, expected)


def test_amplitude_modulation_folds_envelope() -> None:
    synth = SynthService()
    tones = [ToneSpec(0.0, 100.0)]

    plain = synth.synthesize(8000, 1, tones)
    am = synth.synthesize_amplitude_modulation(8000, 1, tones)

    envelope = 0.5 + plain.samples / 2
    np.testing.assert_allclose(am.samples[0::2], envelope[0::2])
    np.testing.assert_allclose(am.samples[1::2], -envelope[1::2])
    assert am.num_samples == plain.num_samples


@pytest.mark.parametrize("freq", [0.0, -440.0, math.nan, math.inf])
def test_rejects_non_positive_or_non_finite_frequency(freq: float) -> None:
    with pytest.raises(InvalidToneFrequencyError) as exc_info:
        SynthService().synthesize(48000, 1, [ToneSpec(0.0, 1000.0), ToneSpec(0.0, freq)])

    assert isinstance(exc_info.value, ValueError)
    assert "frequency" in str(exc_info.value)


def test_rejects_invalid_sample_rate_and_duration() -> None:
    synth = SynthService()

    with pytest.raises(ValueError):
        synth.synthesize(0, 1, [])
    with pytest.raises(ValueError):
        synth.synthesize(48000, -1, [])


def test_zero_duration_yields_empty_buffer() -> None:
    wave = SynthService().synthesize(48000, 0, [ToneSpec(0.0, 1000.0)])

    assert wave.num_samples == 0
    assert wave.peak() == 0.0
