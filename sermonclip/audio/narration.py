"""
Narration generator for SermonClip (audio package).

Requests narration from the configured TTS model, then derives the playable
WAV, the duration and the caption timeline from the returned PCM.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field

from loguru import logger

from sermonclip.configs.config import config
from sermonclip.llm import tts_speech_pcm
from sermonclip.subtitle import SubtitleSegment, create_smart_subtitles

from .pcm import PcmFormat, estimate_duration, pcm_to_wav


class NarrationError(RuntimeError):
    """Raised when the TTS provider does not return usable audio."""


@dataclass
class NarrationAudio:
    pcm: bytes
    wav: bytes
    duration: float
    subtitles: list[SubtitleSegment] = field(default_factory=list)


def build_narration_prompt(quote: str, voice: str, mood: str) -> str:
    return f'Read this quote with a {mood.lower()}, {voice} voice: "{quote}"'


class NarrationGenerator:
    """Generator for narrated quotes and their caption timeline"""

    def __init__(
        self, model: str | None = None, pcm_format: PcmFormat | None = None
    ) -> None:
        self.model = model or config.tts_model
        self.pcm_format = pcm_format or PcmFormat(
            sample_rate=config.pcm_sample_rate,
            channels=config.pcm_channels,
            bits_per_sample=config.pcm_bits_per_sample,
        )

    def voice_name(self, voice: str) -> str:
        if voice == "female":
            return config.tts_voice_female
        return config.tts_voice_male

    def build_audio(self, pcm: bytes, text: str) -> NarrationAudio:
        duration = estimate_duration(len(pcm), self.pcm_format)
        return NarrationAudio(
            pcm=pcm,
            wav=pcm_to_wav(pcm, self.pcm_format),
            duration=duration,
            subtitles=create_smart_subtitles(text, duration),
        )

    async def generate(self, quote: str, voice: str, mood: str) -> NarrationAudio:
        if not quote.strip():
            raise NarrationError("Cannot narrate an empty quote.")
        prompt = build_narration_prompt(quote, voice, mood)
        pcm = await asyncio.to_thread(
            tts_speech_pcm, self.model, self.voice_name(voice), prompt
        )
        if not pcm:
            raise NarrationError("Failed to generate audio.")
        narration = self.build_audio(pcm, quote)
        logger.info(
            f"Narration ready: {len(pcm)} PCM bytes, {narration.duration:.2f}s, "
            f"{len(narration.subtitles)} captions"
        )
        return narration
