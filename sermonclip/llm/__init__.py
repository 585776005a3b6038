"""
LLM package exposing a provider-agnostic facade.

Backed by Google Gemini by default, with an OpenAI-compatible alternative.
"""

from .json_utils import parse_json_reply
from .provider import (
    _get_llm,
    chat_completion,
    tts_speech_pcm,
    video_download,
    video_generate,
)

__all__ = [
    "_get_llm",
    "chat_completion",
    "parse_json_reply",
    "tts_speech_pcm",
    "video_download",
    "video_generate",
]
