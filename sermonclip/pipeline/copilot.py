"""
Copilot: interpret free-form chat commands typed during the wizard.
"""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from sermonclip.configs.config import config
from sermonclip.configs.themes import MOODS, theme_ids
from sermonclip.core.models import ClipConfig
from sermonclip.llm import chat_completion, parse_json_reply

CLARIFY_RESPONSE = "I didn't quite catch that. Could you clarify?"

COPILOT_PROMPT = """
User says: "{text}".
Current Step: {step}.
Current Config: {config}.
Available Themes: {themes}.
Available Moods: {moods}.

Interpret the user's intent.
If they want to change a setting (voice, themeId, mood, aspectRatio, resolution, textOverlay), return a JSON object with "updates" (partial config) and "response" (string).
If they want to proceed, return "action": "next".
If they want to restart, return "action": "restart".

JSON Only. No markdown.
"""


@dataclass
class CopilotResult:
    updates: dict[str, Any] = field(default_factory=dict)
    response: str | None = None
    action: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"updates": self.updates, "response": self.response, "action": self.action}


def _to_result(data: Any) -> CopilotResult:
    if not isinstance(data, dict):
        return CopilotResult(response=CLARIFY_RESPONSE)
    updates = data.get("updates")
    action = data.get("action")
    if isinstance(updates, dict) and updates:
        response = data.get("response")
        return CopilotResult(
            updates=updates,
            response=response if isinstance(response, str) and response else "Updated.",
        )
    if action in ("next", "restart"):
        return CopilotResult(action=action, response=data.get("response") or None)
    return CopilotResult(response=CLARIFY_RESPONSE)


async def interpret_command(
    text: str, step: str, clip_config: ClipConfig, model: str | None = None
) -> CopilotResult:
    prompt = COPILOT_PROMPT.format(
        text=text,
        step=step,
        config=json.dumps(clip_config.to_dict()),
        themes=", ".join(theme_ids()),
        moods=", ".join(MOODS),
    )
    content = await asyncio.to_thread(
        chat_completion,
        [{"role": "user", "content": prompt}],
        model or config.text_model,
    )
    try:
        data = parse_json_reply(content)
    except ValueError as e:
        logger.warning(f"Copilot reply was not JSON: {e}")
        return CopilotResult(response=CLARIFY_RESPONSE)
    return _to_result(data)
