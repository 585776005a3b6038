"""
Catalog and health endpoints.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from sermonclip.configs.config import config
from sermonclip.configs.themes import MOODS, THEMES
from sermonclip.core.wizard import session_store

router = APIRouter(prefix="/api", tags=["catalog"])


@router.get("/catalog")
async def catalog() -> dict[str, Any]:
    """List the themes and moods offered by the wizard."""
    return {
        "themes": [theme.to_dict() for theme in THEMES],
        "moods": list(MOODS),
        "aspect_ratios": ["9:16", "16:9"],
        "resolutions": ["720p", "1080p"],
        "voices": ["male", "female"],
    }


@router.get("/health")
async def health() -> dict[str, Any]:
    return {
        "ok": True,
        "sessions": len(session_store),
        "models": {
            "text": config.text_model,
            "tts": config.tts_model,
            "video": config.video_model,
        },
    }
