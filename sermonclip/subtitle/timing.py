"""
Subtitle timing utilities (subtitle package).
"""

from __future__ import annotations

from loguru import logger

from .cues import SubtitleSegment
from .text_segmentation import normalize_text, split_caption_chunks


def calculate_chunk_durations(
    total_duration: float, chunks: list[str], total_chars: int
) -> list[float]:
    """Share ``total_duration`` between chunks in proportion to their length."""
    if not chunks or total_chars <= 0:
        return []
    return [(len(chunk) / total_chars) * total_duration for chunk in chunks]


def create_smart_subtitles(
    full_text: str, total_duration: float
) -> list[SubtitleSegment]:
    """Build contiguous caption segments covering ``total_duration``.

    Exact word timestamps are not available from the TTS providers, so each
    chunk gets screen time in proportion to its share of the caption
    characters, and the windows tile the whole narration.
    """
    chunks = split_caption_chunks(normalize_text(full_text))
    # spaces between chunks belong to no caption, so they are left out
    total_chars = sum(len(chunk) for chunk in chunks)
    if total_chars == 0:
        return []

    durations = calculate_chunk_durations(
        max(0.0, total_duration), chunks, total_chars
    )

    segments: list[SubtitleSegment] = []
    current_time = 0.0
    for chunk, duration in zip(chunks, durations, strict=True):
        segments.append(
            SubtitleSegment(text=chunk, start=current_time, end=current_time + duration)
        )
        current_time += duration
    logger.debug(
        f"Built {len(segments)} caption segments over {total_duration:.2f}s"
    )
    return segments
