from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable

from multitone.models import BitDepth, ToneSpec, Variant
from . import tables


@dataclass(frozen=True)
class PresetDefinition:
    """A named test signal and the file it is written to."""

    id: str
    file_name: str
    tones: Callable[[], list[ToneSpec]]
    variant: Variant = Variant.PLAIN
    bit_depth: BitDepth = BitDepth.PCM32
    default: bool = True


_PRESETS: tuple[PresetDefinition, ...] = (
    PresetDefinition("sine_1khz", "1_Sine_1kHz.wav", lambda: tables.single_tone(1000.0)),
    PresetDefinition("silent", "2_Silent.wav", list),
    PresetDefinition("smpte_60_7000", "3_SMPTE_60Hz_7kHz.wav", tables.smpte_60_7000),
    PresetDefinition("multitone_32", "4_MultiTone_32.wav", tables.multitone_32),
    PresetDefinition("multitone_20_uneven", "5_MultiTone_20uneven.wav", tables.multitone_20_uneven),
    PresetDefinition("piano88", "6_Piano88.wav", tables.piano88, default=False),
    PresetDefinition(
        "sine_100hz_am",
        "99_Sine_100Hz_AM.wav",
        lambda: tables.single_tone(100.0),
        variant=Variant.AMPLITUDE_MODULATION,
        bit_depth=BitDepth.PCM16,
    ),
)


class PresetRegistry:
    """Simple in-memory registry of the built-in test signals."""

    def __init__(self, presets: Iterable[PresetDefinition] = _PRESETS) -> None:
        self._presets: Dict[str, PresetDefinition] = {p.id: p for p in presets}

    def get(self, preset_id: str) -> PresetDefinition:
        try:
            return self._presets[preset_id]
        except KeyError:
            raise ValueError(f"Unknown preset '{preset_id}'")

    def list_presets(self) -> Iterable[PresetDefinition]:
        return self._presets.values()

    def defaults(self) -> list[PresetDefinition]:
        return [p for p in self._presets.values() if p.default]
