from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, Union

from multitone.logging_utils import get_logger
from multitone.models import GenerationResult, Variant, Waveform
from multitone.presets import PresetDefinition
from multitone import metrics as app_metrics
from .synth_service import SynthService
from .wav_writer import WavWriter


logger = get_logger(__name__)


class GeneratorService:
    """Runs preset -> synthesize -> write jobs and collects per-file results.

    A failing file is logged and reported in its result; the remaining
    files are still attempted.
    """

    def __init__(self, *, synth: SynthService, writer: WavWriter) -> None:
        self._synth = synth
        self._writer = writer

    def render(
        self,
        preset: PresetDefinition,
        *,
        sample_rate: int,
        duration_seconds: int,
    ) -> Waveform:
        tones = preset.tones()
        if preset.variant is Variant.AMPLITUDE_MODULATION:
            return self._synth.synthesize_amplitude_modulation(
                sample_rate, duration_seconds, tones
            )
        return self._synth.synthesize(sample_rate, duration_seconds, tones)

    def generate(
        self,
        preset: PresetDefinition,
        *,
        sample_rate: int,
        duration_seconds: int,
        output_dir: Union[str, os.PathLike],
    ) -> GenerationResult:
        path = str(Path(output_dir) / preset.file_name)
        try:
            self._writer.check_limits(
                sample_rate, sample_rate * duration_seconds, preset.bit_depth
            )
            waveform = self.render(
                preset, sample_rate=sample_rate, duration_seconds=duration_seconds
            )
            report = self._writer.write(waveform, path, preset.bit_depth)
        except (OSError, ValueError) as exc:
            # WaveWriteError already logged the FAILED status line.
            logger.error("Generating preset %s failed: %s", preset.id, exc)
            app_metrics.record_file_failed(preset.id)
            return GenerationResult(preset=preset.id, path=path, error=str(exc))

        app_metrics.record_file_written(
            preset.id, peak_level_db=report.peak_level_db, clipped=report.clipped
        )
        return GenerationResult(preset=preset.id, path=path, report=report)

    def run(
        self,
        presets: Iterable[PresetDefinition],
        *,
        sample_rate: int,
        duration_seconds: int,
        output_dir: Union[str, os.PathLike],
        workers: int = 1,
    ) -> list[GenerationResult]:
        """Generate one file per preset; results keep the preset order."""
        presets = list(presets)
        Path(output_dir).mkdir(parents=True, exist_ok=True)
        logger.info(
            "Generating %d files (rate=%dHz, duration=%ds, workers=%d) into %s",
            len(presets),
            sample_rate,
            duration_seconds,
            workers,
            output_dir,
        )

        def job(preset: PresetDefinition) -> GenerationResult:
            return self.generate(
                preset,
                sample_rate=sample_rate,
                duration_seconds=duration_seconds,
                output_dir=output_dir,
            )

        if workers <= 1:
            return [job(p) for p in presets]

        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(job, presets))
