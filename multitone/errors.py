from __future__ import annotations


class InvalidToneFrequencyError(ValueError):
    """Raised when a tone frequency is zero, negative or not finite."""

    def __init__(self, frequency_hz: float) -> None:
        super().__init__(f"Tone frequency must be a positive number, got {frequency_hz!r}")
        self.frequency_hz = frequency_hz


class UnsupportedBitDepthError(ValueError):
    """Raised when a bit depth other than 16 or 32 is requested."""

    def __init__(self, bit_depth: object) -> None:
        super().__init__(f"Unsupported bit depth {bit_depth!r}; expected 16 or 32")
        self.bit_depth = bit_depth


class WaveWriteError(OSError):
    """Raised when the target WAV file could not be opened or written."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to write '{path}': {reason}")
        self.path = path
        self.reason = reason


class WaveTooLargeError(ValueError):
    """Raised when a RIFF size field would not fit in 32 bits."""

    def __init__(self, field: str, value: int) -> None:
        super().__init__(
            f"WAV {field} of {value} exceeds the 32-bit RIFF limit of {0xFFFFFFFF}"
        )
        self.field = field
        self.value = value
