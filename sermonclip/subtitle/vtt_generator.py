"""
VTT subtitle content generator.

Formats caption segments into VTT text with language header.
"""

from __future__ import annotations

from collections.abc import Iterable

from .cues import SubtitleSegment


def _format_vtt_timestamp(seconds: float) -> str:
    total_ms = int(round(max(0.0, seconds) * 1000))
    hours, rem = divmod(total_ms, 3_600_000)
    minutes, rem = divmod(rem, 60_000)
    secs, milliseconds = divmod(rem, 1000)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}.{milliseconds:03d}"


def generate_vtt_content(
    segments: Iterable[SubtitleSegment], language: str = "en"
) -> str:
    lines: list[str] = [f"WEBVTT Language: {language}", ""]
    for segment in segments:
        lines.append(
            f"{_format_vtt_timestamp(segment.start)} --> "
            f"{_format_vtt_timestamp(segment.end)}"
        )
        lines.append(segment.text)
        lines.append("")
    return "\n".join(lines)
