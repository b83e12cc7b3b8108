from __future__ import annotations

import logging
from typing import Any, Tuple

from fastapi import Request

from ..core.errors import UpstreamProtocolError, ValidationError
from ..core.settings import Settings
from ..schemas.tts import SynthesisRequest, SynthesisResult
from ..utils import build_wav_container, decode_base64_to_bytes, encode_bytes_to_base64
from .gemini import build_speech_config

logger = logging.getLogger(__name__)


def build_prompt(text: str, style_prompt: str | None = None) -> str:
    if style_prompt:
        return f"Read aloud {style_prompt}: {text}"
    return text


def _first(items: Any) -> Any:
    if not items:
        return None
    return items[0]


def extract_inline_audio(response: Any) -> Tuple[bytes | str, str]:
    """Return ``(data, mime_type)`` of the first inline part of a response.

    Every level of ``candidates[0].content.parts[0].inline_data`` is optional
    in the provider's schema; the first missing one raises
    :class:`UpstreamProtocolError` naming it.
    """

    candidate = _first(getattr(response, "candidates", None))
    if candidate is None:
        raise UpstreamProtocolError("API response has no candidates.")
    content = getattr(candidate, "content", None)
    if content is None:
        raise UpstreamProtocolError("First candidate in the API response has no content.")
    part = _first(getattr(content, "parts", None))
    if part is None:
        raise UpstreamProtocolError("Candidate content in the API response has no parts.")
    inline_data = getattr(part, "inline_data", None)
    if inline_data is None:
        raise UpstreamProtocolError(
            "No valid content part with inlineData found in the API response."
        )

    data = getattr(inline_data, "data", None)
    mime_type = getattr(inline_data, "mime_type", None)
    if not data or not mime_type:
        raise UpstreamProtocolError("API response is missing audio data or mimeType.")
    return data, mime_type


class TTSService:
    """Forward one synthesis request to Gemini and reshape its answer."""

    def __init__(self, client: Any, settings: Settings):
        self._client = client
        self._settings = settings

    def synthesize(self, request: SynthesisRequest) -> SynthesisResult:
        text = request.text
        if not text or not text.strip():
            raise ValidationError("Text input is required.")

        model = request.model or self._settings.default_model
        voice = request.voice or self._settings.default_voice
        prompt = build_prompt(text, request.style_prompt)
        logger.info(
            "Requesting speech model=%s voice=%s chars=%d styled=%s",
            model,
            voice,
            len(text),
            bool(request.style_prompt),
        )

        response = self._client.models.generate_content(
            model=model,
            contents=[prompt],
            config=build_speech_config(voice),
        )
        data, mime_type = extract_inline_audio(response)
        if isinstance(data, (bytes, bytearray)):
            data = encode_bytes_to_base64(bytes(data))
        logger.info("Received %d base64 chars of %s", len(data), mime_type)
        return SynthesisResult(audio_content=data, mime_type=mime_type)

    def synthesize_wav(self, request: SynthesisRequest) -> bytes:
        result = self.synthesize(request)
        try:
            pcm = decode_base64_to_bytes(result.audio_content)
        except ValueError as exc:
            raise UpstreamProtocolError(str(exc)) from exc
        return build_wav_container(pcm, result.mime_type, self._settings.default_sample_rate)


def get_tts_service(request: Request) -> TTSService:
    state = request.app.state
    return TTSService(state.gemini_client, state.settings)
