from __future__ import annotations

import os
from typing import Tuple, Union

from multitone.audio import check_header_limits, pcm_from_floats, wav_header
from multitone.errors import WaveWriteError
from multitone.logging_utils import get_logger
from multitone.models import BitDepth, Waveform, WriteReport, peak_to_db
from multitone import metrics as app_metrics


logger = get_logger(__name__)


class WavWriter:
    """Encodes waveforms as 2-channel PCM RIFF/WAVE data.

    Stateless; every call is independent. The mono signal is duplicated
    into both channels.
    """

    def encode(
        self,
        waveform: Waveform,
        bit_depth: Union[BitDepth, int] = BitDepth.PCM32,
    ) -> Tuple[bytes, WriteReport]:
        """Render ``waveform`` to WAV bytes in memory."""
        depth = self.check_limits(waveform.sample_rate, waveform.num_samples, bit_depth)
        header, pcm, report = self._render(waveform, depth, path=None)
        return header + pcm, report

    def check_limits(
        self,
        sample_rate: int,
        num_frames: int,
        bit_depth: Union[BitDepth, int] = BitDepth.PCM32,
    ) -> BitDepth:
        """Validate depth and header sizes before any samples are rendered.

        Raises UnsupportedBitDepthError or WaveTooLargeError.
        """
        depth = BitDepth.parse(bit_depth)
        check_header_limits(num_frames, sample_rate, depth)
        return depth

    def write(
        self,
        waveform: Waveform,
        path: Union[str, os.PathLike],
        bit_depth: Union[BitDepth, int] = BitDepth.PCM32,
    ) -> WriteReport:
        """Write ``waveform`` to ``path``, creating or truncating it.

        Raises WaveWriteError if the file cannot be opened or written. A
        failure part-way through leaves the truncated file in place.
        """
        depth = self.check_limits(waveform.sample_rate, waveform.num_samples, bit_depth)
        target = os.fspath(path)
        header, pcm, report = self._render(waveform, depth, path=target)

        try:
            with open(target, "wb") as fh:
                fh.write(header)
                fh.write(pcm)
        except OSError as exc:
            logger.error("FileSave FAILED: %s", target)
            raise WaveWriteError(target, exc.strerror or str(exc)) from exc

        app_metrics.record_bytes_written(depth, report.num_bytes)
        logger.info(report.status_line())
        return report

    @staticmethod
    def _render(
        waveform: Waveform,
        depth: BitDepth,
        *,
        path: str | None,
    ) -> Tuple[bytes, bytes, WriteReport]:
        header = wav_header(waveform.num_samples, waveform.sample_rate, depth)
        pcm, clipped = pcm_from_floats(waveform.samples, depth)
        report = WriteReport(
            path=path,
            bit_depth=depth,
            peak_level_db=peak_to_db(waveform.peak()),
            clipped=clipped,
            num_bytes=len(header) + len(pcm),
        )
        return header, pcm, report
