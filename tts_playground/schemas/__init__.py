"""Pydantic schemas for the TTS playground endpoints."""

from .common import ErrorResponse, HealthResponse
from .tts import ModelOption, SynthesisRequest, SynthesisResult, VoiceOption

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "ModelOption",
    "SynthesisRequest",
    "SynthesisResult",
    "VoiceOption",
]
