"""
Raw PCM helpers for narration audio (audio package).

The TTS providers return linear PCM without a container. These helpers derive
the playable duration from the byte count and wrap the samples in a WAV file
so browsers and ffprobe can read them.
"""

from __future__ import annotations

import base64
import binascii
import io
import wave
from dataclasses import dataclass

WAV_HEADER_SIZE = 44

# Sample widths the WAV writer supports
_SUPPORTED_BITS_PER_SAMPLE = (8, 16, 24, 32)


class AudioDecodeError(ValueError):
    """Raised when a transported audio payload cannot be decoded."""


@dataclass(frozen=True)
class PcmFormat:
    sample_rate: int = 24000
    channels: int = 1
    bits_per_sample: int = 16

    def __post_init__(self) -> None:
        if self.sample_rate <= 0:
            raise ValueError(f"sample_rate must be positive, got {self.sample_rate}")
        if self.channels <= 0:
            raise ValueError(f"channels must be positive, got {self.channels}")
        if self.bits_per_sample not in _SUPPORTED_BITS_PER_SAMPLE:
            raise ValueError(
                f"bits_per_sample must be one of {_SUPPORTED_BITS_PER_SAMPLE}, "
                f"got {self.bits_per_sample}"
            )

    @property
    def bytes_per_sample(self) -> int:
        return self.bits_per_sample // 8

    @property
    def block_align(self) -> int:
        return self.channels * self.bytes_per_sample

    @property
    def byte_rate(self) -> int:
        return self.sample_rate * self.block_align


DEFAULT_PCM_FORMAT = PcmFormat()


def estimate_duration(
    sample_byte_length: int, fmt: PcmFormat = DEFAULT_PCM_FORMAT
) -> float:
    """Return the playable duration in seconds of ``sample_byte_length`` PCM bytes."""
    if sample_byte_length < 0:
        raise ValueError("sample_byte_length must be non-negative")
    if sample_byte_length == 0:
        return 0.0
    return sample_byte_length / fmt.byte_rate


def decode_base64_pcm(data: str | bytes | bytearray) -> bytes:
    """Decode a base64-transported PCM payload.

    The google-genai SDK already hands back raw bytes for inline data, while the
    REST transport (and our API clients) send base64 text. Raw bytes pass
    through unchanged.
    """
    if isinstance(data, bytes | bytearray):
        return bytes(data)
    try:
        return base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise AudioDecodeError(f"Invalid base64 audio payload: {e}") from e


def pcm_to_wav(pcm: bytes, fmt: PcmFormat = DEFAULT_PCM_FORMAT) -> bytes:
    buffer = io.BytesIO()
    with wave.open(buffer, "wb") as wf:
        wf.setnchannels(fmt.channels)
        wf.setsampwidth(fmt.bytes_per_sample)
        wf.setframerate(fmt.sample_rate)
        wf.writeframes(pcm)
    return buffer.getvalue()
