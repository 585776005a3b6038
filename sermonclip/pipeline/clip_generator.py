"""
Clip generation pipeline for SermonClip.

Audio is generated first because its duration decides how many video clips
the storyboard has to plan. All clips are then filmed concurrently.
"""

from __future__ import annotations

import asyncio
import math
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from sermonclip.audio.narration import NarrationAudio, NarrationGenerator
from sermonclip.configs.config import config
from sermonclip.configs.themes import get_theme
from sermonclip.core.models import ClipConfig
from sermonclip.llm import video_download, video_generate
from sermonclip.subtitle import SubtitleSegment

from .storyboard import clips_needed, generate_storyboard
from .suggestion import Suggestion, suggest_variation

ProgressCallback = Callable[[str], None]


class VideoGenerationError(RuntimeError):
    """Raised when a clip operation fails or returns no video."""


@dataclass
class GeneratedClip:
    index: int
    prompt: str
    uri: str
    data: bytes = field(repr=False, default=b"")

    def to_dict(self) -> dict[str, Any]:
        return {"index": self.index, "prompt": self.prompt, "size": len(self.data)}


@dataclass
class ClipResult:
    narration: NarrationAudio
    clips: list[GeneratedClip]
    suggestion: Suggestion | None = None

    @property
    def duration(self) -> float:
        return self.narration.duration

    @property
    def subtitles(self) -> list[SubtitleSegment]:
        return self.narration.subtitles

    def to_dict(self) -> dict[str, Any]:
        return {
            "duration": self.duration,
            "clips": [clip.to_dict() for clip in self.clips],
            "subtitles": [segment.to_dict() for segment in self.subtitles],
            "suggestion": self.suggestion.to_dict() if self.suggestion else None,
        }


class ClipGenerator:
    def __init__(
        self,
        narration_generator: NarrationGenerator | None = None,
        video_model: str | None = None,
        text_model: str | None = None,
        poll_interval: float | None = None,
    ) -> None:
        self.narration_generator = narration_generator or NarrationGenerator()
        self.video_model = video_model or config.video_model
        self.text_model = text_model or config.text_model
        self.poll_interval = (
            config.video_poll_interval if poll_interval is None else poll_interval
        )

    async def generate(
        self, clip_config: ClipConfig, progress: ProgressCallback | None = None
    ) -> ClipResult:
        def report(text: str) -> None:
            logger.info(f"=== {text} ===")
            if progress:
                progress(text)

        theme = get_theme(clip_config.theme_id)

        report("Recording voiceover...")
        narration = await self.narration_generator.generate(
            clip_config.quote, clip_config.voice, clip_config.mood
        )

        report(
            f"Storyboarding visuals for {math.ceil(narration.duration)}s of audio..."
        )
        count = clips_needed(narration.duration)
        prompts = await generate_storyboard(
            clip_config, theme, count, model=self.text_model
        )

        report(f"Filming {count} scenes simultaneously...")
        clips = await asyncio.gather(
            *(
                self._film_clip(index, prompt, clip_config)
                for index, prompt in enumerate(prompts)
            )
        )

        suggestion = await suggest_variation(clip_config, theme, model=self.text_model)
        return ClipResult(narration=narration, clips=list(clips), suggestion=suggestion)

    async def _film_clip(
        self, index: int, prompt: str, clip_config: ClipConfig
    ) -> GeneratedClip:
        try:
            uri = await asyncio.to_thread(
                video_generate,
                prompt,
                self.video_model,
                aspect_ratio=clip_config.aspect_ratio,
                resolution=clip_config.resolution,
                poll_interval=self.poll_interval,
            )
            data = await asyncio.to_thread(video_download, uri, self.video_model)
        except Exception as e:
            raise VideoGenerationError(f"Clip {index + 1} failed: {e}") from e
        logger.info(f"Clip {index + 1} ready ({len(data)} bytes)")
        return GeneratedClip(index=index, prompt=prompt, uri=uri, data=data)
