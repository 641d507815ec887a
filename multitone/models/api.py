from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field

from .domain import ToneSpec


BitDepthValue = Literal[16, 32]
VariantValue = Literal["plain", "amplitude_modulation"]


class Tone(BaseModel):
    gain_db: float = Field(0.0, description="Tone level in dB relative to full scale")
    frequency_hz: float = Field(..., gt=0, description="Tone frequency in Hz")

    def to_spec(self) -> ToneSpec:
        return ToneSpec(gain_db=self.gain_db, frequency_hz=self.frequency_hz)


class RenderRequest(BaseModel):
    """Request body for rendering an ad-hoc multitone signal."""

    tones: List[Tone] = Field(default_factory=list, description="Tones to mix; empty renders silence")
    sample_rate_hz: int = Field(48000, gt=0, description="Output sample rate")
    duration_seconds: int = Field(1, ge=0, description="Output length in whole seconds")
    bit_depth: BitDepthValue = Field(32, description="PCM bits per sample")
    amplitude_modulation: bool = Field(
        False, description="Fold the mix into an alternating-sign AM envelope"
    )


class Preset(BaseModel):
    id: str
    file_name: str
    variant: VariantValue
    bit_depth: BitDepthValue
    default: bool
    tones: List[Tone]


class PresetsResponse(BaseModel):
    presets: List[Preset]


class HealthResponse(BaseModel):
    status: Literal["ok"]
