"""Construction of the Gemini API client and its speech request config."""

from __future__ import annotations

from google import genai
from google.genai import types

from ..core.settings import Settings


def build_gemini_client(settings: Settings) -> genai.Client:
    """Create the provider client from settings; raise when no API key is set."""

    if not settings.has_api_key:
        raise RuntimeError("GEMINI_API_KEY is not configured")
    return genai.Client(api_key=settings.gemini_api_key.get_secret_value())


def build_speech_config(voice: str) -> types.GenerateContentConfig:
    return types.GenerateContentConfig(
        response_modalities=["AUDIO"],
        speech_config=types.SpeechConfig(
            voice_config=types.VoiceConfig(
                prebuilt_voice_config=types.PrebuiltVoiceConfig(voice_name=voice),
            ),
        ),
    )


__all__ = ["build_gemini_client", "build_speech_config"]
