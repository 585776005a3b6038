"""
Caption cue model and playback lookup (subtitle package).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class SubtitleSegment:
    text: str
    start: float
    end: float

    @property
    def duration(self) -> float:
        return self.end - self.start

    def contains(self, t: float) -> bool:
        return self.start <= t <= self.end

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def active_segment(
    segments: Iterable[SubtitleSegment], t: float
) -> SubtitleSegment | None:
    """Return the first segment whose window includes ``t`` (both ends inclusive)."""
    for segment in segments:
        if segment.contains(t):
            return segment
    return None


def active_caption(segments: Iterable[SubtitleSegment], t: float) -> str | None:
    segment = active_segment(segments, t)
    return segment.text if segment else None
