"""
Configs components for SermonClip
"""

from .themes import MOODS, THEMES, Theme, get_theme

__all__ = ["MOODS", "THEMES", "Theme", "get_theme"]
