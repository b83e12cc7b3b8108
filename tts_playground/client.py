"""Python client for the speech endpoint.

Mirrors what the browser form does with a response: decode the base64
payload, put a WAV header in front of the PCM samples and save the file
under a timestamped name.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

import httpx
import pydantic

from .core.errors import NetworkError, UnknownError, UpstreamError, ValidationError
from .schemas.tts import SynthesisRequest, SynthesisResult
from .utils import (
    build_wav_container,
    decode_base64_to_bytes,
    timestamp_filename,
    write_bytes_to_file,
)

log = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = (
    "Network Error: Cannot connect to the server. Please check your connection."
)
DEFAULT_SERVER_URL = "http://127.0.0.1:8000"


class SpeechClient:
    def __init__(
        self,
        base_url: str = DEFAULT_SERVER_URL,
        timeout: float | None = 60.0,
        transport: Optional[httpx.BaseTransport] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        self._http = http_client or httpx.Client(
            base_url=base_url, timeout=timeout, transport=transport
        )

    def __enter__(self) -> "SpeechClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def generate(
        self,
        text: str,
        voice: str | None = None,
        style_prompt: str | None = None,
        model: str | None = None,
    ) -> SynthesisResult:
        """Request speech for ``text`` and return the server's payload.

        Raises:
            ValidationError: ``text`` is blank; nothing is sent.
            NetworkError: the server could not be reached.
            UpstreamError: the server answered with an error status.
            UnknownError: the server answered 2xx without usable data.
        """
        if not text or not text.strip():
            raise ValidationError("Please enter some text to generate speech.")

        body = SynthesisRequest(
            text=text, voice=voice, style_prompt=style_prompt, model=model
        ).model_dump(by_alias=True)
        try:
            resp = self._http.post("/api/generate-speech", json=body)
        except httpx.TransportError as exc:
            log.warning("Speech server unreachable: %s", exc)
            raise NetworkError(NETWORK_ERROR_MESSAGE) from exc

        if resp.is_error:
            raise UpstreamError(_error_message(resp), resp.status_code)

        try:
            payload = resp.json()
        except ValueError as exc:
            raise UnknownError("Invalid data received.") from exc
        if not isinstance(payload, dict) or not payload.get("audioContent") or not payload.get("mimeType"):
            raise UnknownError("Invalid data received.")
        try:
            return SynthesisResult.model_validate(payload)
        except pydantic.ValidationError as exc:
            raise UnknownError("Invalid data received.") from exc

    def generate_wav(
        self,
        text: str,
        voice: str | None = None,
        style_prompt: str | None = None,
        model: str | None = None,
    ) -> bytes:
        result = self.generate(text, voice=voice, style_prompt=style_prompt, model=model)
        try:
            pcm = decode_base64_to_bytes(result.audio_content)
        except ValueError as exc:
            raise UnknownError("Invalid data received.") from exc
        wav = build_wav_container(pcm, result.mime_type)
        log.info("Built %d byte WAV from %s", len(wav), result.mime_type)
        return wav

    @staticmethod
    def save(wav: bytes, directory: Path, now: datetime | None = None) -> Path:
        return write_bytes_to_file(wav, Path(directory), timestamp_filename(now))


def _error_message(resp: httpx.Response) -> str:
    try:
        message = resp.json().get("error")
    except (ValueError, AttributeError):
        message = None
    return message or "Failed to generate speech."


__all__ = ["NETWORK_ERROR_MESSAGE", "SpeechClient"]
