"""
Audio package for SermonClip.

Raw PCM helpers live here; narration generation is in
:mod:`sermonclip.audio.narration` (it depends on the llm package, which in turn
uses these helpers).
"""

from .pcm import (
    DEFAULT_PCM_FORMAT,
    AudioDecodeError,
    PcmFormat,
    decode_base64_pcm,
    estimate_duration,
    pcm_to_wav,
)

__all__ = [
    "DEFAULT_PCM_FORMAT",
    "AudioDecodeError",
    "PcmFormat",
    "decode_base64_pcm",
    "estimate_duration",
    "pcm_to_wav",
]
