"""
Subtitle package for SermonClip.

Provides caption chunking, proportional timing and playback lookup.
"""

from .cues import SubtitleSegment, active_caption, active_segment
from .text_segmentation import normalize_text, split_caption_chunks
from .timing import calculate_chunk_durations, create_smart_subtitles
from .vtt_generator import generate_vtt_content

__all__ = [
    "SubtitleSegment",
    "active_caption",
    "active_segment",
    "calculate_chunk_durations",
    "create_smart_subtitles",
    "generate_vtt_content",
    "normalize_text",
    "split_caption_chunks",
]
