"""
Generation pipeline for SermonClip.

Steps: quote extraction, copilot commands, narration, storyboard, clip filming
and the closing variation suggestion.
"""

from .clip_generator import (
    ClipGenerator,
    ClipResult,
    GeneratedClip,
    VideoGenerationError,
)
from .copilot import CopilotResult, interpret_command
from .quotes import QuoteExtractionError, extract_quotes
from .storyboard import (
    CLIP_LENGTH_SECONDS,
    StoryboardError,
    clips_needed,
    generate_storyboard,
)
from .suggestion import Suggestion, suggest_variation

__all__ = [
    "CLIP_LENGTH_SECONDS",
    "ClipGenerator",
    "ClipResult",
    "CopilotResult",
    "GeneratedClip",
    "QuoteExtractionError",
    "StoryboardError",
    "Suggestion",
    "VideoGenerationError",
    "clips_needed",
    "extract_quotes",
    "generate_storyboard",
    "interpret_command",
    "suggest_variation",
]
