from __future__ import annotations

import math

from prometheus_client import Counter, Gauge


MULTITONE_FILES_TOTAL = Counter(
    "multitone_files_total",
    "Total generated files by preset and status.",
    ["preset", "status"],
)

MULTITONE_CLIPPED_FILES_TOTAL = Counter(
    "multitone_clipped_files_total",
    "Total generated files in which at least one sample saturated.",
    ["preset"],
)

MULTITONE_BYTES_WRITTEN_TOTAL = Counter(
    "multitone_bytes_written_total",
    "Total number of WAV bytes written to disk.",
    ["bit_depth"],
)

MULTITONE_PEAK_LEVEL_DB = Gauge(
    "multitone_peak_level_db",
    "Peak level in dBFS of the most recently generated file per preset.",
    ["preset"],
)

MULTITONE_HTTP_RENDERS_TOTAL = Counter(
    "multitone_http_renders_total",
    "Total HTTP render requests by outcome.",
    ["status"],
)


def record_file_written(preset: str, *, peak_level_db: float, clipped: bool) -> None:
    MULTITONE_FILES_TOTAL.labels(preset=preset, status="written").inc()
    if clipped:
        MULTITONE_CLIPPED_FILES_TOTAL.labels(preset=preset).inc()
    # Silence has no finite peak level.
    if math.isfinite(peak_level_db):
        MULTITONE_PEAK_LEVEL_DB.labels(preset=preset).set(peak_level_db)


def record_file_failed(preset: str) -> None:
    MULTITONE_FILES_TOTAL.labels(preset=preset, status="failed").inc()


def record_bytes_written(bit_depth: int, num_bytes: int) -> None:
    MULTITONE_BYTES_WRITTEN_TOTAL.labels(bit_depth=str(int(bit_depth))).inc(num_bytes)


def record_http_render(status: str) -> None:
    """Record the outcome ("ok" or "rejected") of an HTTP render request."""
    MULTITONE_HTTP_RENDERS_TOTAL.labels(status=status).inc()
