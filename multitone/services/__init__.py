from .synth_service import SynthService
from .wav_writer import WavWriter
from .generator_service import GeneratorService

__all__ = [
    "SynthService",
    "WavWriter",
    "GeneratorService",
]
