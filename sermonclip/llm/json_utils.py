"""
Helpers for reading JSON out of model replies.
"""

from __future__ import annotations

import json
from typing import Any


def strip_code_fences(content: str) -> str:
    text = (content or "").strip()
    if text.startswith("```"):
        lines = text.split("\n")
        # drop the opening fence (with optional language tag) and closing fence
        lines = lines[1:]
        if lines and lines[-1].strip().startswith("```"):
            lines = lines[:-1]
        text = "\n".join(lines).strip()
    return text


def parse_json_reply(content: str | None, default: Any = None) -> Any:
    """Parse a model reply that should be JSON, tolerating markdown fences.

    Raises ``ValueError`` when the reply is not valid JSON and no default is given.
    """
    text = strip_code_fences(content or "")
    if not text:
        if default is not None:
            return default
        raise ValueError("Empty model reply")
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        if default is not None:
            return default
        raise ValueError(f"Model reply is not valid JSON: {e}") from e
