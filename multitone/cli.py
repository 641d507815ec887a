from __future__ import annotations

import argparse

from .config import settings
from .container import get_generator_service, get_preset_registry
from .logging_utils import get_logger


logger = get_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate multi-tone test signals as stereo PCM WAV files"
    )
    parser.add_argument(
        "sample_rate",
        nargs="?",
        type=int,
        default=settings.sample_rate_hz,
        help="Sampling frequency in Hz",
    )
    parser.add_argument(
        "duration",
        nargs="?",
        type=int,
        default=settings.duration_seconds,
        help="Length of each file in seconds",
    )
    parser.add_argument("--out-dir", default=settings.output_dir, help="Output directory")
    parser.add_argument(
        "--preset",
        action="append",
        dest="presets",
        metavar="ID",
        help="Preset to generate (repeatable); defaults to the standard set",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=settings.worker_count,
        help="Number of files generated concurrently",
    )
    parser.add_argument("--list", action="store_true", help="List presets and exit")

    args = parser.parse_args(argv)
    registry = get_preset_registry()

    if args.list:
        for preset in registry.list_presets():
            print(
                f"{preset.id:<22} {preset.file_name:<26} "
                f"{preset.bit_depth.value}-bit {preset.variant.value}"
                f"{'' if preset.default else ' (opt-in)'}"
            )
        return 0

    if args.sample_rate <= 0:
        parser.error("sample_rate must be positive")
    if args.duration < 0:
        parser.error("duration must not be negative")
    if args.workers < 1:
        parser.error("--workers must be at least 1")

    try:
        presets = (
            [registry.get(p) for p in args.presets] if args.presets else registry.defaults()
        )
    except ValueError as exc:
        parser.error(str(exc))

    try:
        results = get_generator_service().run(
            presets,
            sample_rate=args.sample_rate,
            duration_seconds=args.duration,
            output_dir=args.out_dir,
            workers=args.workers,
        )
    except OSError as exc:
        logger.error("Cannot prepare output directory %s: %s", args.out_dir, exc)
        return 1

    failed = [r for r in results if not r.ok]
    logger.info("Done: %d written, %d failed", len(results) - len(failed), len(failed))
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
