from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass
class AppConfig:
    """Application configuration loaded from environment.

    The CLI uses these as defaults for its positional arguments, and the
    HTTP app uses them to bound render requests.
    """

    sample_rate_hz: int = int(os.getenv("MULTITONE_SAMPLE_RATE", "48000"))
    duration_seconds: int = int(os.getenv("MULTITONE_DURATION_SECONDS", "60"))
    output_dir: str = os.getenv("MULTITONE_OUTPUT_DIR", ".")

    # Number of files generated concurrently by a batch run.
    worker_count: int = int(os.getenv("MULTITONE_WORKERS", "1"))

    # Upper bound on duration for HTTP render requests; a 600 s, 48 kHz,
    # 32-bit stereo file is roughly 220 MB.
    max_render_seconds: int = int(os.getenv("MULTITONE_MAX_RENDER_SECONDS", "600"))
    max_render_sample_rate_hz: int = int(
        os.getenv("MULTITONE_MAX_RENDER_SAMPLE_RATE", "768000")
    )

    log_level: str = os.getenv("MULTITONE_LOG_LEVEL", "INFO")


settings = AppConfig()
