from __future__ import annotations

import asyncio
from typing import Optional

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import PlainTextResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from multitone.config import settings
from multitone.container import (
    get_generator_service,
    get_preset_registry,
    get_synth_service,
    get_wav_writer,
)
from multitone.logging_utils import get_logger
from multitone.models import (
    BitDepth,
    HealthResponse,
    Preset,
    PresetsResponse,
    RenderRequest,
    Tone,
    Waveform,
    WriteReport,
)
from multitone import metrics as app_metrics


logger = get_logger(__name__)
router = APIRouter()


def _wav_response(body: bytes, report: WriteReport) -> Response:
    return Response(
        content=body,
        media_type="audio/wav",
        headers={
            "X-Peak-Level-Db": f"{report.peak_level_db:.1f}",
            "X-Clipped": "true" if report.clipped else "false",
        },
    )


def _check_render_size(sample_rate_hz: int, duration_seconds: int) -> None:
    detail = None
    if duration_seconds > settings.max_render_seconds:
        detail = f"duration_seconds must not exceed {settings.max_render_seconds}"
    elif sample_rate_hz > settings.max_render_sample_rate_hz:
        detail = (
            f"sample_rate_hz must not exceed {settings.max_render_sample_rate_hz}"
        )
    if detail is not None:
        app_metrics.record_http_render("rejected")
        raise HTTPException(status_code=400, detail=detail)


async def _encode(waveform: Waveform, bit_depth: BitDepth) -> tuple[bytes, WriteReport]:
    return await asyncio.to_thread(get_wav_writer().encode, waveform, bit_depth)


@router.get("/", response_class=PlainTextResponse)
async def root() -> PlainTextResponse:
    """Simple root endpoint for quick sanity checks."""
    return PlainTextResponse("multitone generator", media_type="text/plain")


@router.get("/healthz", response_model=HealthResponse)
async def healthz() -> HealthResponse:
    return HealthResponse(status="ok")


@router.get("/v1/presets", response_model=PresetsResponse)
async def list_presets() -> PresetsResponse:
    items: list[Preset] = []
    for p in get_preset_registry().list_presets():
        items.append(
            Preset(
                id=p.id,
                file_name=p.file_name,
                variant=p.variant.value,
                bit_depth=int(p.bit_depth),
                default=p.default,
                tones=[
                    Tone(gain_db=t.gain_db, frequency_hz=t.frequency_hz)
                    for t in p.tones()
                ],
            )
        )
    return PresetsResponse(presets=items)


@router.get("/v1/presets/{preset_id}.wav")
async def render_preset(
    preset_id: str,
    sample_rate_hz: int = Query(48000, gt=0),
    duration_seconds: int = Query(1, ge=0),
    bit_depth: Optional[int] = Query(None),
) -> Response:
    try:
        preset = get_preset_registry().get(preset_id)
    except ValueError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    _check_render_size(sample_rate_hz, duration_seconds)

    try:
        depth = get_wav_writer().check_limits(
            sample_rate_hz,
            sample_rate_hz * duration_seconds,
            bit_depth if bit_depth is not None else preset.bit_depth,
        )
        waveform = await asyncio.to_thread(
            get_generator_service().render,
            preset,
            sample_rate=sample_rate_hz,
            duration_seconds=duration_seconds,
        )
        body, report = await _encode(waveform, depth)
    except ValueError as exc:
        app_metrics.record_http_render("rejected")
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    app_metrics.record_http_render("ok")
    logger.info(
        "Rendered preset %s (%d bytes, peak=%.1f dB, clipped=%s)",
        preset.id,
        report.num_bytes,
        report.peak_level_db,
        report.clipped,
    )
    return _wav_response(body, report)


@router.post("/v1/render")
async def render(req: RenderRequest) -> Response:
    _check_render_size(req.sample_rate_hz, req.duration_seconds)
    synth = get_synth_service()
    tones = [t.to_spec() for t in req.tones]
    fn = (
        synth.synthesize_amplitude_modulation
        if req.amplitude_modulation
        else synth.synthesize
    )

    try:
        depth = get_wav_writer().check_limits(
            req.sample_rate_hz,
            req.sample_rate_hz * req.duration_seconds,
            req.bit_depth,
        )
        waveform = await asyncio.to_thread(
            fn, req.sample_rate_hz, req.duration_seconds, tones
        )
        body, report = await _encode(waveform, depth)
    except ValueError as exc:
        app_metrics.record_http_render("rejected")
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    app_metrics.record_http_render("ok")
    return _wav_response(body, report)


@router.get("/metrics")
async def metrics() -> Response:
    data = generate_latest()
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)
