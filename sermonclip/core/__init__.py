"""
Core components for SermonClip: clip configuration, wizard state and playback.
"""

from .models import ClipConfig, TextOverlay
from .playback import ClipSequence, PlaybackTimeline
from .wizard import (
    SessionStore,
    WizardSession,
    WizardStateError,
    WizardStep,
    session_store,
)

__all__ = [
    "ClipConfig",
    "ClipSequence",
    "PlaybackTimeline",
    "SessionStore",
    "TextOverlay",
    "WizardSession",
    "WizardStateError",
    "WizardStep",
    "session_store",
]
