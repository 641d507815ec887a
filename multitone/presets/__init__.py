from .registry import PresetDefinition, PresetRegistry
from .tables import (
    multitone_20_uneven,
    multitone_32,
    piano88,
    single_tone,
    smpte_60_7000,
)

__all__ = [
    "PresetDefinition",
    "PresetRegistry",
    "multitone_20_uneven",
    "multitone_32",
    "piano88",
    "single_tone",
    "smpte_60_7000",
]
