"""
Unit tests for caption chunking and proportional subtitle timing.
"""

import pytest

from sermonclip.subtitle import (
    calculate_chunk_durations,
    create_smart_subtitles,
    normalize_text,
    split_caption_chunks,
)

SERMON_LINE = (
    "Faith is not about everything turning out okay; it is about being okay "
    "no matter how things turn out."
)


class TestSplitCaptionChunks:
    """Test cases for split_caption_chunks."""

    def test_empty_and_whitespace_only(self):
        assert split_caption_chunks("") == []
        assert split_caption_chunks("   \n\t ") == []
        assert split_caption_chunks(None) == []

    def test_breaks_on_soft_char_limit_and_word_cap(self):
        assert split_caption_chunks(SERMON_LINE) == [
            "Faith is not about everything",
            "turning out okay; it is about",
            "being okay no matter how things",
            "turn out.",
        ]

    def test_sentence_end_closes_chunk_after_two_words(self):
        chunks = split_caption_chunks("Go forth. Be brave and strong today.")
        assert chunks[0] == "Go forth."
        assert chunks[1] == "Be brave and strong today."

    def test_single_word_sentence_does_not_close_chunk(self):
        # a chunk needs at least two words before a natural break
        chunks = split_caption_chunks("Amen. Praise the Lord!")
        assert chunks == ["Amen. Praise the Lord!"]

    def test_forced_break_at_six_words(self):
        text = "one two three four five six seven eight"
        assert split_caption_chunks(text) == [
            "one two three four five six",
            "seven eight",
        ]

    def test_trailing_single_word_is_kept(self):
        chunks = split_caption_chunks("He is risen indeed. Hallelujah")
        assert chunks[-1] == "Hallelujah"

    def test_chunk_word_bounds(self):
        text = (
            "Faith is not about everything turning out okay. It's about trusting "
            "God even when it doesn't."
        )
        chunks = split_caption_chunks(text)
        assert len(chunks) >= 2
        for chunk in chunks[:-1]:
            assert 2 <= len(chunk.split(" ")) <= 6
        assert len(chunks[-1].split(" ")) <= 6

    def test_text_is_preserved(self):
        messy = "  Grace   upon\ngrace,\tday after   day. "
        chunks = split_caption_chunks(messy)
        assert " ".join(chunks) == normalize_text(messy)


class TestCalculateChunkDurations:
    """Test cases for calculate_chunk_durations."""

    def test_proportional_to_length(self):
        durations = calculate_chunk_durations(10.0, ["abcd", "ab"], 7)
        assert durations == pytest.approx([10.0 * 4 / 7, 10.0 * 2 / 7])

    def test_no_chunks(self):
        assert calculate_chunk_durations(5.0, [], 0) == []


class TestCreateSmartSubtitles:
    """Test cases for create_smart_subtitles."""

    def test_empty_text_yields_no_segments(self):
        assert create_smart_subtitles("", 5.0) == []
        assert create_smart_subtitles("   ", 5.0) == []

    def test_proportional_windows(self):
        segments = create_smart_subtitles(SERMON_LINE, 9.8)

        assert [s.text for s in segments] == split_caption_chunks(SERMON_LINE)
        assert [s.duration for s in segments] == pytest.approx([2.9, 2.9, 3.1, 0.9])
        assert segments[-1].end == pytest.approx(9.8)

    def test_coverage_is_contiguous_and_complete(self):
        text = (
            "Faith is not about everything turning out okay. It's about trusting "
            "God even when it doesn't."
        )
        segments = create_smart_subtitles(text, 6.0)

        assert len(segments) >= 2
        assert segments[0].start == 0.0
        assert "." not in segments[0].text.rstrip(".")
        for previous, current in zip(segments, segments[1:]):
            assert previous.end == current.start
            assert current.start <= current.end
        assert segments[-1].end == pytest.approx(6.0, abs=1e-6)
        assert sum(s.duration for s in segments) == pytest.approx(6.0, abs=1e-6)

    def test_text_preservation(self):
        text = "The Lord is my shepherd;\n I shall not want.  He makes me lie down."
        segments = create_smart_subtitles(text, 4.0)
        assert " ".join(s.text for s in segments) == normalize_text(text)

    def test_zero_duration(self):
        segments = create_smart_subtitles("Blessed are the peacemakers.", 0.0)
        assert segments
        assert all(s.start == 0.0 and s.end == 0.0 for s in segments)

    def test_negative_duration_is_clamped(self):
        segments = create_smart_subtitles("Blessed are the meek.", -3.0)
        assert all(s.start == 0.0 and s.end == 0.0 for s in segments)

    def test_single_word(self):
        segments = create_smart_subtitles("Selah", 1.5)
        assert len(segments) == 1
        assert segments[0].text == "Selah"
        assert segments[0].end == pytest.approx(1.5)
