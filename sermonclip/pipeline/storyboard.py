"""
Storyboard step: plan one video prompt per clip needed to cover the narration.
"""

from __future__ import annotations

import asyncio
import math

from loguru import logger

from sermonclip.configs.config import config
from sermonclip.configs.themes import Theme
from sermonclip.core.models import ClipConfig
from sermonclip.llm import chat_completion, parse_json_reply

# Useful length of one generated clip, in seconds
CLIP_LENGTH_SECONDS = 5

STORYBOARD_PROMPT = """
Role: Cinematic Storyteller.
Task: Create {count} distinct but visually cohesive video prompts for Veo.
Theme: {theme_name} ({visual_details})
Mood: {mood}
Format: {aspect_ratio}

Guidelines:
- The prompts should form a sequence (e.g., establishing shot -> detail -> action).
- Use visual metaphors matching: "{quote_excerpt}..."
- Ensure they look like they belong in the same video.
- No text in video.

Return ONLY a JSON array of strings.
Example: ["Wide shot of...", "Close up of..."]
"""


class StoryboardError(RuntimeError):
    """Raised when the storyboard reply has no usable prompts."""


def clips_needed(duration: float) -> int:
    return max(1, math.ceil(duration / CLIP_LENGTH_SECONDS))


def fit_prompts(prompts: list[str], count: int) -> list[str]:
    """Pad with the first prompt, or truncate, so exactly ``count`` remain."""
    if not prompts:
        raise StoryboardError("Storyboard returned no prompts")
    fitted = list(prompts[:count])
    while len(fitted) < count:
        fitted.append(prompts[0])
    return fitted


async def generate_storyboard(
    clip_config: ClipConfig,
    theme: Theme | None,
    count: int,
    model: str | None = None,
) -> list[str]:
    prompt = STORYBOARD_PROMPT.format(
        count=count,
        theme_name=theme.name if theme else clip_config.theme_id,
        visual_details=theme.visual_details if theme else "",
        mood=clip_config.mood,
        aspect_ratio=clip_config.aspect_ratio,
        quote_excerpt=clip_config.quote[:100],
    )
    content = await asyncio.to_thread(
        chat_completion,
        [{"role": "user", "content": prompt}],
        model or config.text_model,
    )
    try:
        data = parse_json_reply(content)
    except ValueError as e:
        raise StoryboardError(str(e)) from e
    if not isinstance(data, list):
        raise StoryboardError("Storyboard reply is not a JSON array")
    prompts = [p.strip() for p in data if isinstance(p, str) and p.strip()]
    fitted = fit_prompts(prompts, count)
    if len(prompts) != count:
        logger.warning(f"Storyboard returned {len(prompts)} prompts, expected {count}")
    return fitted
