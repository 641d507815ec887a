from __future__ import annotations

import struct
from typing import Tuple

import numpy as np

from .errors import WaveTooLargeError
from .models.domain import BitDepth


NUM_CHANNELS = 2
FMT_CHUNK_SIZE = 16
HEADER_SIZE = 44
UINT32_MAX = 0xFFFFFFFF


def check_header_limits(num_frames: int, sample_rate: int, bit_depth: BitDepth) -> None:
    """Raise WaveTooLargeError if a header field would overflow uint32."""
    block_align = NUM_CHANNELS * bit_depth.sample_width
    data_size = num_frames * block_align
    fields = (
        ("sample rate", sample_rate),
        ("byte rate", sample_rate * block_align),
        ("data size", data_size),
        ("RIFF size", 4 + (8 + FMT_CHUNK_SIZE) + 8 + data_size),
    )
    for name, value in fields:
        if value > UINT32_MAX:
            raise WaveTooLargeError(name, value)


def wav_header(num_frames: int, sample_rate: int, bit_depth: BitDepth) -> bytes:
    check_header_limits(num_frames, sample_rate, bit_depth)
    block_align = NUM_CHANNELS * bit_depth.sample_width
    byte_rate = sample_rate * block_align
    data_size = num_frames * block_align
    # "WAVE" tag + fmt sub-chunk + data sub-chunk header + payload
    riff_size = 4 + (8 + FMT_CHUNK_SIZE) + 8 + data_size
    return struct.pack(
        '<4sI4s4sIHHIIHH4sI',
        b'RIFF',
        riff_size,
        b'WAVE',
        b'fmt ',
        FMT_CHUNK_SIZE,
        1,  # linear PCM
        NUM_CHANNELS,
        sample_rate,
        byte_rate,
        block_align,
        int(bit_depth),
        b'data',
        data_size,
    )


def quantize(samples: np.ndarray, bit_depth: BitDepth) -> Tuple[np.ndarray, bool]:
    """Scale [-1.0, 1.0] floats to signed integers for ``bit_depth``.

    Rounds half away from zero, then saturates at the integer bounds.
    Returns the integer samples and whether any sample saturated.
    """
    scaled = np.asarray(samples, dtype=np.float64) * bit_depth.max_value
    rounded = np.trunc(np.where(scaled >= 0, scaled + 0.5, scaled - 0.5))
    over = rounded > bit_depth.max_value
    under = rounded < bit_depth.min_value
    clipped = bool(over.any() or under.any())
    clamped = np.clip(rounded, bit_depth.min_value, bit_depth.max_value)
    return clamped.astype(bit_depth.dtype), clipped


def interleave_stereo(values: np.ndarray) -> bytes:
    # Same value on left and right.
    return np.repeat(values, NUM_CHANNELS).tobytes()


def pcm_from_floats(samples: np.ndarray, bit_depth: BitDepth) -> Tuple[bytes, bool]:
    values, clipped = quantize(samples, bit_depth)
    return interleave_stereo(values), clipped


def join_wav(samples: np.ndarray, sample_rate: int, bit_depth: BitDepth) -> Tuple[bytes, bool]:
    pcm, clipped = pcm_from_floats(samples, bit_depth)
    header = wav_header(len(samples), sample_rate, bit_depth)
    return header + pcm, clipped
