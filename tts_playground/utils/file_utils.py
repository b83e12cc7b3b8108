from __future__ import annotations

import base64
import binascii
from datetime import datetime
from pathlib import Path


def encode_bytes_to_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("utf-8")


def decode_base64_to_bytes(data: str) -> bytes:
    try:
        return base64.b64decode(data, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"invalid base64 audio payload: {exc}") from exc


def timestamp_filename(now: datetime | None = None, extension: str = "wav") -> str:
    """Sortable name such as ``audio_2025-06-01_14-03-09.wav`` (local time)."""

    now = now or datetime.now()
    return f"audio_{now:%Y-%m-%d_%H-%M-%S}.{extension}"


def write_bytes_to_file(data: bytes, directory: Path, filename: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / filename
    path.write_bytes(data)
    return path
