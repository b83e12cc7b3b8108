"""Utility helpers for the TTS playground."""

from .file_utils import (
    decode_base64_to_bytes,
    encode_bytes_to_base64,
    timestamp_filename,
    write_bytes_to_file,
)
from .wav import (
    DEFAULT_SAMPLE_RATE,
    WAV_HEADER_SIZE,
    WavHeader,
    build_wav_container,
    build_wav_header,
    parse_sample_rate,
    read_wav_header,
)

__all__ = [
    "DEFAULT_SAMPLE_RATE",
    "WAV_HEADER_SIZE",
    "WavHeader",
    "build_wav_container",
    "build_wav_header",
    "decode_base64_to_bytes",
    "encode_bytes_to_base64",
    "parse_sample_rate",
    "read_wav_header",
    "timestamp_filename",
    "write_bytes_to_file",
]
