"""Exception hierarchy shared by the server and the client."""

from __future__ import annotations


class TTSPlaygroundError(Exception):
    """Base class for every error raised by this package."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TTSPlaygroundError):
    """The caller supplied input that cannot be synthesized."""

    status_code = 400


class UpstreamProtocolError(TTSPlaygroundError):
    """The provider answered, but not with an inline audio payload."""


class NetworkError(TTSPlaygroundError):
    """The speech server could not be reached."""


class UpstreamError(TTSPlaygroundError):
    """The speech server reported a failure."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class UnknownError(TTSPlaygroundError):
    """Anything that does not fit the other categories."""


class InvalidWavHeader(TTSPlaygroundError):
    """A byte sequence is not a PCM WAV container this package can read."""


class WavLengthMismatch(InvalidWavHeader):
    """The lengths declared in a WAV header disagree with its payload."""


__all__ = [
    "InvalidWavHeader",
    "NetworkError",
    "TTSPlaygroundError",
    "UnknownError",
    "UpstreamError",
    "UpstreamProtocolError",
    "ValidationError",
    "WavLengthMismatch",
]
