"""
Clip configuration models for SermonClip.

The wizard, the copilot and the suggestion step all edit the same
:class:`ClipConfig`. Free-form updates coming back from the model are merged
through :meth:`ClipConfig.apply_updates`, which drops anything it cannot
validate instead of failing the conversation.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from typing import Any, Literal, get_args

from loguru import logger

from sermonclip.configs.themes import MOODS, get_theme

AspectRatio = Literal["9:16", "16:9"]
Resolution = Literal["720p", "1080p"]
Voice = Literal["male", "female"]
TextStyle = Literal["modern", "classic", "handwritten"]
TextPosition = Literal["center", "bottom"]
TextMode = Literal["static", "captions"]

_CAMEL_TO_SNAKE = {
    "themeId": "theme_id",
    "aspectRatio": "aspect_ratio",
    "textOverlay": "text_overlay",
}


@dataclass(frozen=True)
class TextOverlay:
    enabled: bool = True
    style: TextStyle = "modern"
    position: TextPosition = "center"
    mode: TextMode = "static"

    def merged(self, updates: dict[str, Any]) -> TextOverlay:
        changes: dict[str, Any] = {}
        for key, value in (updates or {}).items():
            if key == "enabled":
                if isinstance(value, bool):
                    changes[key] = value
                continue
            allowed = _OVERLAY_CHOICES.get(key)
            if allowed is None or value not in allowed:
                logger.warning(f"Ignoring invalid text overlay update {key}={value!r}")
                continue
            changes[key] = value
        return replace(self, **changes) if changes else self

    def describe(self) -> str:
        if not self.enabled:
            return "None"
        mode = "Synced Captions" if self.mode == "captions" else "Static"
        return f"{mode} ({self.style})"


_OVERLAY_CHOICES: dict[str, tuple[str, ...]] = {
    "style": get_args(TextStyle),
    "position": get_args(TextPosition),
    "mode": get_args(TextMode),
}


@dataclass(frozen=True)
class ClipConfig:
    quote: str = ""
    voice: Voice = "male"
    theme_id: str = "ethereal_light"
    mood: str = "Inspiring"
    aspect_ratio: AspectRatio = "9:16"
    resolution: Resolution = "720p"
    text_overlay: TextOverlay = field(default_factory=TextOverlay)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def apply_updates(self, updates: dict[str, Any] | None) -> ClipConfig:
        """Return a copy with the valid entries of ``updates`` applied."""
        changes: dict[str, Any] = {}
        for raw_key, value in (updates or {}).items():
            key = _CAMEL_TO_SNAKE.get(raw_key, raw_key)
            if key == "text_overlay":
                if isinstance(value, dict):
                    changes[key] = self.text_overlay.merged(value)
                continue
            if not _is_valid(key, value):
                logger.warning(f"Ignoring invalid config update {raw_key}={value!r}")
                continue
            changes[key] = value
        return replace(self, **changes) if changes else self

    def summary(self) -> dict[str, str]:
        theme = get_theme(self.theme_id)
        return {
            "Voice": self.voice.capitalize(),
            "Theme": theme.name if theme else self.theme_id,
            "Mood": self.mood,
            "Format": f"{self.aspect_ratio} @ {self.resolution}",
            "Overlay": self.text_overlay.describe(),
        }


def _is_valid(key: str, value: Any) -> bool:
    if key == "quote":
        return isinstance(value, str) and bool(value.strip())
    if key == "voice":
        return value in get_args(Voice)
    if key == "theme_id":
        return isinstance(value, str) and get_theme(value) is not None
    if key == "mood":
        return value in MOODS
    if key == "aspect_ratio":
        return value in get_args(AspectRatio)
    if key == "resolution":
        return value in get_args(Resolution)
    return False
