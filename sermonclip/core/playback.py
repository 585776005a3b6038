"""
Playback-side helpers: clip sequencing and the on-screen text timeline.
"""

from __future__ import annotations

from collections.abc import Sequence

from sermonclip.subtitle import SubtitleSegment, active_caption

from .models import TextOverlay


class ClipSequence:
    """Cycles through the generated clips while the narration plays."""

    def __init__(self, clip_count: int) -> None:
        if clip_count < 1:
            raise ValueError("A clip sequence needs at least one clip")
        self.clip_count = clip_count
        self.index = 0

    def advance(self) -> int:
        # after the last clip, loop back to the first
        if self.index < self.clip_count - 1:
            self.index += 1
        else:
            self.index = 0
        return self.index

    def reset(self) -> None:
        self.index = 0


class PlaybackTimeline:
    def __init__(self, segments: Sequence[SubtitleSegment], duration: float) -> None:
        self.segments = list(segments)
        self.duration = duration

    def caption_at(self, t: float) -> str | None:
        # nothing is shown before playback starts
        if not self.segments or not t:
            return None
        return active_caption(self.segments, t)

    def overlay_text(self, t: float, overlay: TextOverlay, quote: str) -> str | None:
        if not overlay.enabled:
            return None
        if overlay.mode == "captions":
            return self.caption_at(t)
        return quote
