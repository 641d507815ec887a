from __future__ import annotations

from functools import lru_cache

from multitone.presets import PresetRegistry
from multitone.services import GeneratorService, SynthService, WavWriter


@lru_cache(maxsize=1)
def get_preset_registry() -> PresetRegistry:
    return PresetRegistry()


@lru_cache(maxsize=1)
def get_synth_service() -> SynthService:
    return SynthService()


@lru_cache(maxsize=1)
def get_wav_writer() -> WavWriter:
    return WavWriter()


@lru_cache(maxsize=1)
def get_generator_service() -> GeneratorService:
    return GeneratorService(synth=get_synth_service(), writer=get_wav_writer())
