from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response

from ..core.errors import TTSPlaygroundError, UnknownError, ValidationError
from ..core.voices import MODELS, VOICES
from ..schemas.common import ErrorResponse
from ..schemas.tts import ModelOption, SynthesisRequest, SynthesisResult, VoiceOption
from ..services.tts import TTSService, get_tts_service
from ..utils import timestamp_filename

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Failed to generate speech. Please check the server logs."

_ERROR_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}

router = APIRouter(prefix="/v1/tts", tags=["tts"])
speech_router = APIRouter(prefix="/api", tags=["tts"])


async def tts_error_handler(_: Request, exc: TTSPlaygroundError) -> JSONResponse:
    """Render package errors as ``{"error": ...}``; only validation text reaches callers."""

    if isinstance(exc, ValidationError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
    logger.error("Error in Gemini TTS generation", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": GENERIC_FAILURE})


@contextmanager
def provider_failures() -> Iterator[None]:
    """Re-raise SDK and network exceptions as :class:`UnknownError`."""

    try:
        yield
    except TTSPlaygroundError:
        raise
    except Exception as exc:
        raise UnknownError(f"{type(exc).__name__}: {exc}") from exc


@speech_router.post(
    "/generate-speech", response_model=SynthesisResult, responses=_ERROR_RESPONSES
)
def generate_speech(
    payload: SynthesisRequest, service: TTSService = Depends(get_tts_service)
) -> SynthesisResult:
    with provider_failures():
        return service.synthesize(payload)


@router.post("/synthesize", response_model=SynthesisResult, responses=_ERROR_RESPONSES)
def synthesize_speech(
    payload: SynthesisRequest, service: TTSService = Depends(get_tts_service)
) -> SynthesisResult:
    with provider_failures():
        return service.synthesize(payload)


@router.post(
    "/synthesize.wav",
    response_class=Response,
    responses={200: {"content": {"audio/wav": {}}}, **_ERROR_RESPONSES},
)
def synthesize_wav(
    payload: SynthesisRequest, service: TTSService = Depends(get_tts_service)
) -> Response:
    with provider_failures():
        wav = service.synthesize_wav(payload)
    filename = timestamp_filename()
    return Response(
        content=wav,
        media_type="audio/wav",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/voices", response_model=list[VoiceOption])
def list_voices() -> list[VoiceOption]:
    return [VoiceOption(name=name, description=desc) for name, desc in VOICES.items()]


@router.get("/models", response_model=list[ModelOption])
def list_models() -> list[ModelOption]:
    return [ModelOption(name=name) for name in MODELS]
