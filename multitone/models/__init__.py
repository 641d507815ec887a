from .api import (
    HealthResponse,
    Preset,
    PresetsResponse,
    RenderRequest,
    Tone,
)
from .domain import (
    BitDepth,
    GenerationResult,
    ToneSpec,
    Variant,
    Waveform,
    WriteReport,
    peak_to_db,
)

__all__ = [
    "HealthResponse",
    "Preset",
    "PresetsResponse",
    "RenderRequest",
    "Tone",
    "BitDepth",
    "GenerationResult",
    "ToneSpec",
    "Variant",
    "Waveform",
    "WriteReport",
    "peak_to_db",
]
