"""
Pydantic models for wizard endpoints.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator


class TextPayload(BaseModel):
    """Free text sent by the user (source input or chat command)."""

    text: str = Field(..., description="Text typed or pasted by the user")

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Text must not be empty")
        return v


class QuotePayload(BaseModel):
    text: str = Field(..., min_length=1, description="Quote chosen for the clip")


class VoicePayload(BaseModel):
    voice: Literal["male", "female"]


class ThemePayload(BaseModel):
    theme_id: str = Field(..., description="Theme identifier from the catalog")


class MoodPayload(BaseModel):
    mood: str


class FormatPayload(BaseModel):
    aspect_ratio: Literal["9:16", "16:9"] = "9:16"
    resolution: Literal["720p", "1080p"] = "720p"


class TextOverlayPayload(BaseModel):
    enabled: bool | None = None
    style: Literal["modern", "classic", "handwritten"] | None = None
    position: Literal["center", "bottom"] | None = None
    mode: Literal["static", "captions"] | None = None

    def updates(self) -> dict[str, object]:
        return self.model_dump(exclude_none=True)


class UpdatesPayload(BaseModel):
    """Partial config updates, e.g. from an applied suggestion."""

    updates: dict[str, object] = Field(default_factory=dict)
    regenerate: bool = False
