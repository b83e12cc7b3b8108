"""Service layer for the TTS playground."""

from .gemini import build_gemini_client, build_speech_config
from .tts import TTSService, build_prompt, extract_inline_audio, get_tts_service

__all__ = [
    "TTSService",
    "build_gemini_client",
    "build_prompt",
    "build_speech_config",
    "extract_inline_audio",
    "get_tts_service",
]
