"""
Suggestion step: propose one creative variation after a clip is generated.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from sermonclip.configs.config import config
from sermonclip.configs.themes import Theme
from sermonclip.core.models import ClipConfig
from sermonclip.llm import chat_completion, parse_json_reply

SUGGESTION_PROMPT = """
Based on the quote "{quote}" and the current theme "{theme_name}",
suggest ONE creative variation (different theme, voice, or mood) that might also work well.
Return JSON: {{ "summary": "Try x...", "reason": "Because...", "updates": {{...config updates}} }}
No markdown.
"""


@dataclass
class Suggestion:
    summary: str
    reason: str
    updates: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"summary": self.summary, "reason": self.reason, "updates": self.updates}


DEFAULT_SUMMARY = "Try a different theme"
DEFAULT_REASON = "For variety"


def default_suggestion() -> Suggestion:
    return Suggestion(summary=DEFAULT_SUMMARY, reason=DEFAULT_REASON)


def _to_suggestion(data: Any) -> Suggestion:
    if not isinstance(data, dict):
        return default_suggestion()
    updates = data.get("updates")
    return Suggestion(
        summary=str(data.get("summary") or DEFAULT_SUMMARY),
        reason=str(data.get("reason") or DEFAULT_REASON),
        updates=updates if isinstance(updates, dict) else {},
    )


async def suggest_variation(
    clip_config: ClipConfig, theme: Theme | None, model: str | None = None
) -> Suggestion:
    prompt = SUGGESTION_PROMPT.format(
        quote=clip_config.quote,
        theme_name=theme.name if theme else clip_config.theme_id,
    )
    try:
        content = await asyncio.to_thread(
            chat_completion,
            [{"role": "user", "content": prompt}],
            model or config.text_model,
        )
        return _to_suggestion(parse_json_reply(content))
    except Exception as e:
        logger.warning(f"Suggestion unavailable: {e}")
        return default_suggestion()
