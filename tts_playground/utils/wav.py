"""Wrap raw linear PCM samples in a RIFF/WAVE container.

The provider streams headerless 16-bit mono PCM and describes it with a mime
type such as ``audio/L16;codec=pcm;rate=24000``. Browsers and media players
need a WAV header in front of the samples before they can play them.
"""

from __future__ import annotations

import re
import struct
from typing import NamedTuple

from ..core.errors import InvalidWavHeader, WavLengthMismatch

DEFAULT_SAMPLE_RATE = 24000
NUM_CHANNELS = 1
BITS_PER_SAMPLE = 16
PCM_FORMAT = 1

# RIFF chunk, "fmt " subchunk, "data" subchunk header; little-endian
WAV_HEADER_FORMAT = "<4sI4s4sIHHIIHH4sI"
WAV_HEADER_SIZE = struct.calcsize(WAV_HEADER_FORMAT)

_RATE_PATTERN = re.compile(r"rate=(\d+)")
_UINT32_MAX = 0xFFFFFFFF


class WavHeader(NamedTuple):
    riff_size: int
    audio_format: int
    num_channels: int
    sample_rate: int
    byte_rate: int
    block_align: int
    bits_per_sample: int
    data_length: int


def parse_sample_rate(mime_type_hint: str | None, default: int = DEFAULT_SAMPLE_RATE) -> int:
    """Return the ``rate=<digits>`` value found anywhere in ``mime_type_hint``.

    Hints without a rate token, or with a rate too large for the header's
    32-bit byte-rate field, fall back to ``default``.
    """

    match = _RATE_PATTERN.search(mime_type_hint or "")
    if match is None:
        return default
    digits = match.group(1).lstrip("0") or "0"
    # longer than any uint32
    if len(digits) > 10:
        return default
    sample_rate = int(digits)
    if sample_rate * NUM_CHANNELS * BITS_PER_SAMPLE // 8 > _UINT32_MAX:
        return default
    return sample_rate


def build_wav_header(data_length: int, sample_rate: int = DEFAULT_SAMPLE_RATE) -> bytes:
    block_align = NUM_CHANNELS * BITS_PER_SAMPLE // 8
    byte_rate = sample_rate * block_align
    return struct.pack(
        WAV_HEADER_FORMAT,
        b"RIFF",
        36 + data_length,
        b"WAVE",
        b"fmt ",
        16,
        PCM_FORMAT,
        NUM_CHANNELS,
        sample_rate,
        byte_rate,
        block_align,
        BITS_PER_SAMPLE,
        b"data",
        data_length,
    )


def build_wav_container(
    raw: bytes,
    mime_type_hint: str | None,
    default_sample_rate: int = DEFAULT_SAMPLE_RATE,
) -> bytes:
    """Return a playable WAV file: a 44-byte header followed by ``raw`` verbatim."""

    sample_rate = parse_sample_rate(mime_type_hint, default_sample_rate)
    return build_wav_header(len(raw), sample_rate) + bytes(raw)


def read_wav_header(blob: bytes) -> WavHeader:
    """Parse the header written by :func:`build_wav_container`.

    Raises :class:`WavLengthMismatch` when the declared chunk sizes do not
    match the number of payload bytes that follow the header.
    """

    if len(blob) < WAV_HEADER_SIZE:
        raise WavLengthMismatch(
            f"expected at least {WAV_HEADER_SIZE} bytes, got {len(blob)}"
        )
    fields = struct.unpack(WAV_HEADER_FORMAT, blob[:WAV_HEADER_SIZE])
    riff_id, riff_size, wave_id, fmt_id, fmt_size = fields[:5]
    data_id = fields[11]
    if (riff_id, wave_id, fmt_id, data_id) != (b"RIFF", b"WAVE", b"fmt ", b"data") or fmt_size != 16:
        raise InvalidWavHeader("not a canonical 44-byte PCM WAV header")

    header = WavHeader(riff_size, *fields[5:11], fields[12])
    payload_length = len(blob) - WAV_HEADER_SIZE
    if header.data_length != payload_length or header.riff_size != 36 + payload_length:
        raise WavLengthMismatch(
            f"header declares {header.data_length} data bytes, payload has {payload_length}"
        )
    return header


__all__ = [
    "DEFAULT_SAMPLE_RATE",
    "WAV_HEADER_SIZE",
    "WavHeader",
    "build_wav_container",
    "build_wav_header",
    "parse_sample_rate",
    "read_wav_header",
]
