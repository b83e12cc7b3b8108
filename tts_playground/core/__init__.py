"""Configuration, logging and error primitives."""

from .errors import (
    InvalidWavHeader,
    NetworkError,
    TTSPlaygroundError,
    UnknownError,
    UpstreamError,
    UpstreamProtocolError,
    ValidationError,
    WavLengthMismatch,
)
from .logging import configure_logging
from .settings import Settings, get_settings

__all__ = [
    "InvalidWavHeader",
    "NetworkError",
    "Settings",
    "TTSPlaygroundError",
    "UnknownError",
    "UpstreamError",
    "UpstreamProtocolError",
    "ValidationError",
    "WavLengthMismatch",
    "configure_logging",
    "get_settings",
]
