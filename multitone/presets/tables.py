from __future__ import annotations

from multitone.models import ToneSpec


def single_tone(frequency_hz: float, gain_db: float = 0.0) -> list[ToneSpec]:
    return [ToneSpec(gain_db=gain_db, frequency_hz=frequency_hz)]


def smpte_60_7000() -> list[ToneSpec]:
    """SMPTE IMD stimulus: 60 Hz and 7 kHz at a 4:1 amplitude ratio."""
    return [
        ToneSpec(gain_db=-6.0, frequency_hz=60.0),
        ToneSpec(gain_db=-30.0, frequency_hz=7000.0),
    ]


_UNEVEN_20_HZ = (
    30, 40, 50, 70, 100, 150, 200, 300, 400, 500,
    700, 1000, 1500, 2000, 3000, 4000, 5000, 7000, 10000, 15000,
)


def multitone_20_uneven() -> list[ToneSpec]:
    # 1 kHz sits 6 dB above the rest as a level reference.
    return [
        ToneSpec(gain_db=-14.0 if freq == 1000 else -20.0, frequency_hz=float(freq))
        for freq in _UNEVEN_20_HZ
    ]


def multitone_32() -> list[ToneSpec]:
    """32 tones on a third-octave grid from ~15.6 Hz to ~20.2 kHz."""
    return [
        ToneSpec(gain_db=-20.0 if i == 0 else -26.0, frequency_hz=2 ** (i / 3.0) * 1000.0)
        for i in range(-18, 14)
    ]


def piano88() -> list[ToneSpec]:
    """All 88 piano keys, A0 (27.5 Hz) to C8."""
    return [
        ToneSpec(gain_db=-36.0, frequency_hz=2 ** (i / 12.0) * 27.5)
        for i in range(88)
    ]
