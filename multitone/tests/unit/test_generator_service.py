from __future__ import annotations

import wave
from pathlib import Path

import pytest

from multitone.metrics import MULTITONE_FILES_TOTAL
from multitone.models import BitDepth, ToneSpec
from multitone.presets import PresetDefinition, PresetRegistry
from multitone.services import GeneratorService, SynthService, WavWriter


def _build_service() -> GeneratorService:
    return GeneratorService(synth=SynthService(), writer=WavWriter())


def _get_files_metric_value(preset: str, status: str) -> float:
    for metric in MULTITONE_FILES_TOTAL.collect():
        for sample in metric.samples:
            if (
                sample.name == "multitone_files_total"
                and sample.labels.get("preset") == preset
                and sample.labels.get("status") == status
            ):
                return float(sample.value)
    return 0.0


def test_run_writes_every_default_preset(tmp_path: Path) -> None:
    registry = PresetRegistry()
    out_dir = tmp_path / "out"

    results = _build_service().run(
        registry.defaults(), sample_rate=8000, duration_seconds=1, output_dir=out_dir
    )

    assert [r.preset for r in results] == [p.id for p in registry.defaults()]
    assert all(r.ok for r in results)
    for result in results:
        assert Path(result.path).exists()

    with wave.open(str(out_dir / "99_Sine_100Hz_AM.wav"), "rb") as wf:
        assert wf.getsampwidth() == 2
        assert wf.getnchannels() == 2
    with wave.open(str(out_dir / "1_Sine_1kHz.wav"), "rb") as wf:
        assert wf.getsampwidth() == 4
        assert wf.getnframes() == 8000


def test_failed_file_does_not_stop_the_batch(tmp_path: Path) -> None:
    registry = PresetRegistry()
    # A directory where the file should go makes open() fail.
    (tmp_path / "2_Silent.wav").mkdir()
    before = _get_files_metric_value("silent", "failed")

    results = _build_service().run(
        registry.defaults(), sample_rate=8000, duration_seconds=1, output_dir=tmp_path
    )

    by_id = {r.preset: r for r in results}
    assert by_id["silent"].ok is False
    assert by_id["silent"].error
    assert all(r.ok for r in results if r.preset != "silent")
    assert (tmp_path / "99_Sine_100Hz_AM.wav").exists()
    assert _get_files_metric_value("silent", "failed") == before + 1.0


def test_invalid_tone_is_reported_per_file(tmp_path: Path) -> None:
    zero = PresetDefinition(
        "zero_hz", "zero.wav", lambda: [ToneSpec(gain_db=0.0, frequency_hz=0.0)]
    )
    sine = PresetRegistry().get("sine_1khz")

    results = _build_service().run(
        [zero, sine], sample_rate=8000, duration_seconds=1, output_dir=tmp_path
    )

    assert results[0].ok is False
    assert "frequency" in (results[0].error or "")
    assert not (tmp_path / "zero.wav").exists()
    assert results[1].ok is True


def test_worker_pool_keeps_preset_order(tmp_path: Path) -> None:
    registry = PresetRegistry()
    presets = list(registry.list_presets())

    results = _build_service().run(
        presets, sample_rate=4000, duration_seconds=1, output_dir=tmp_path, workers=3
    )

    assert [r.preset for r in results] == [p.id for p in presets]
    assert all(r.ok for r in results)
    assert results[-1].report is not None
    assert results[-1].report.bit_depth is BitDepth.PCM16


def test_written_metric_increments(tmp_path: Path) -> None:
    preset = PresetRegistry().get("sine_1khz")
    before = _get_files_metric_value("sine_1khz", "written")

    result = _build_service().generate(
        preset, sample_rate=8000, duration_seconds=1, output_dir=tmp_path
    )

    assert result.ok
    assert result.report is not None
    assert result.report.peak_level_db == pytest.approx(0.0, abs=1e-6)
    assert _get_files_metric_value("sine_1khz", "written") == before + 1.0


def test_header_overflow_is_reported_per_file(tmp_path: Path) -> None:
    registry = PresetRegistry()
    sine = registry.get("sine_1khz")
    before = _get_files_metric_value("sine_1khz", "failed")

    result = _build_service().generate(
        sine, sample_rate=600_000_000, duration_seconds=0, output_dir=tmp_path
    )

    assert result.ok is False
    assert "byte rate" in (result.error or "")
    assert not (tmp_path / sine.file_name).exists()
    assert _get_files_metric_value("sine_1khz", "failed") == before + 1.0


def test_long_duration_fails_before_synthesis(tmp_path: Path) -> None:
    # 20000 s at 48 kHz would need ~7.7 GB for 32-bit output; the limit
    # check must fail before any buffer is allocated.
    sine = PresetRegistry().get("sine_1khz")

    results = _build_service().run(
        [sine], sample_rate=48000, duration_seconds=20000, output_dir=tmp_path
    )

    assert results[0].ok is False
    assert "data size" in (results[0].error or "")
    assert not (tmp_path / sine.file_name).exists()
