"""
Unit tests for narration and the clip generation pipeline.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from sermonclip.audio.narration import (
    NarrationAudio,
    NarrationError,
    NarrationGenerator,
    build_narration_prompt,
)
from sermonclip.audio.pcm import WAV_HEADER_SIZE, PcmFormat
from sermonclip.core.models import ClipConfig
from sermonclip.pipeline.clip_generator import ClipGenerator, VideoGenerationError
from sermonclip.pipeline.suggestion import default_suggestion

QUOTE = "Be still, and know that I am God."
FMT = PcmFormat(sample_rate=24000, channels=1, bits_per_sample=16)


class TestNarrationGenerator:
    """Test cases for NarrationGenerator."""

    def test_build_prompt(self):
        assert build_narration_prompt("Hope.", "female", "Peaceful") == (
            'Read this quote with a peaceful, female voice: "Hope."'
        )

    def test_voice_name(self):
        generator = NarrationGenerator(model="google/tts", pcm_format=FMT)
        with patch("sermonclip.audio.narration.config") as mock_config:
            mock_config.tts_voice_male = "Fenrir"
            mock_config.tts_voice_female = "Aoede"
            assert generator.voice_name("male") == "Fenrir"
            assert generator.voice_name("female") == "Aoede"

    @pytest.mark.asyncio
    async def test_generate(self):
        pcm = b"\x00\x00" * 24000 * 2
        generator = NarrationGenerator(model="google/tts", pcm_format=FMT)
        with patch(
            "sermonclip.audio.narration.tts_speech_pcm", return_value=pcm
        ) as mock_tts:
            narration = await generator.generate(QUOTE, "male", "Inspiring")

        model, voice, prompt = mock_tts.call_args.args
        assert model == "google/tts"
        assert voice == generator.voice_name("male")
        assert QUOTE in prompt
        assert narration.duration == pytest.approx(2.0)
        assert narration.wav[:4] == b"RIFF"
        assert len(narration.wav) == WAV_HEADER_SIZE + len(pcm)
        assert " ".join(s.text for s in narration.subtitles) == QUOTE
        assert narration.subtitles[-1].end == pytest.approx(2.0)

    @pytest.mark.asyncio
    async def test_empty_audio_raises(self):
        generator = NarrationGenerator(model="google/tts", pcm_format=FMT)
        with patch("sermonclip.audio.narration.tts_speech_pcm", return_value=b""):
            with pytest.raises(NarrationError, match="Failed to generate audio."):
                await generator.generate(QUOTE, "male", "Inspiring")

    @pytest.mark.asyncio
    async def test_empty_quote_raises(self):
        generator = NarrationGenerator(model="google/tts", pcm_format=FMT)
        with pytest.raises(NarrationError):
            await generator.generate("  ", "male", "Inspiring")


class TestClipGenerator:
    """Test cases for ClipGenerator."""

    @pytest.fixture
    def narration(self):
        generator = NarrationGenerator(model="google/tts", pcm_format=FMT)
        # 12 seconds of audio needs three 5-second clips
        return generator.build_audio(b"\x00" * 48000 * 12, QUOTE)

    @pytest.fixture
    def clip_generator(self, narration):
        narration_generator = MagicMock(spec=NarrationGenerator)
        narration_generator.generate = AsyncMock(return_value=narration)
        return ClipGenerator(
            narration_generator=narration_generator,
            video_model="google/veo",
            text_model="google/text",
            poll_interval=0,
        )

    @pytest.mark.asyncio
    async def test_generate(self, clip_generator, narration):
        progress: list[str] = []
        with (
            patch(
                "sermonclip.pipeline.clip_generator.generate_storyboard",
                new=AsyncMock(return_value=["shot 1", "shot 2", "shot 3"]),
            ) as mock_storyboard,
            patch(
                "sermonclip.pipeline.clip_generator.video_generate",
                side_effect=lambda prompt, model, **kwargs: f"uri://{prompt}",
            ) as mock_video,
            patch(
                "sermonclip.pipeline.clip_generator.video_download",
                side_effect=lambda uri, model: uri.encode(),
            ),
            patch(
                "sermonclip.pipeline.clip_generator.suggest_variation",
                new=AsyncMock(return_value=default_suggestion()),
            ),
        ):
            config = ClipConfig(quote=QUOTE, aspect_ratio="16:9")
            result = await clip_generator.generate(config, progress.append)

        assert mock_storyboard.await_args.args[2] == 3
        assert [clip.index for clip in result.clips] == [0, 1, 2]
        assert [clip.data for clip in result.clips] == [
            b"uri://shot 1",
            b"uri://shot 2",
            b"uri://shot 3",
        ]
        assert mock_video.call_args.kwargs["aspect_ratio"] == "16:9"
        assert mock_video.call_args.kwargs["poll_interval"] == 0
        assert result.narration is narration
        assert result.duration == pytest.approx(12.0)
        assert progress == [
            "Recording voiceover...",
            "Storyboarding visuals for 12s of audio...",
            "Filming 3 scenes simultaneously...",
        ]
        payload = result.to_dict()
        assert payload["suggestion"]["summary"] == default_suggestion().summary
        assert len(payload["subtitles"]) == len(narration.subtitles)

    @pytest.mark.asyncio
    async def test_failed_clip_raises(self, clip_generator):
        def _video(prompt, model, **kwargs):
            if prompt == "shot 2":
                raise RuntimeError("Missing video URI")
            return "uri"

        with (
            patch(
                "sermonclip.pipeline.clip_generator.generate_storyboard",
                new=AsyncMock(return_value=["shot 1", "shot 2", "shot 3"]),
            ),
            patch(
                "sermonclip.pipeline.clip_generator.video_generate",
                side_effect=_video,
            ),
            patch(
                "sermonclip.pipeline.clip_generator.video_download",
                return_value=b"mp4",
            ),
        ):
            with pytest.raises(VideoGenerationError, match="Clip 2 failed"):
                await clip_generator.generate(ClipConfig(quote=QUOTE))

    @pytest.mark.asyncio
    async def test_narration_failure_propagates(self, clip_generator):
        clip_generator.narration_generator.generate = AsyncMock(
            side_effect=NarrationError("Failed to generate audio.")
        )
        with pytest.raises(NarrationError):
            await clip_generator.generate(ClipConfig(quote=QUOTE))

    def test_narration_audio_fields(self, narration):
        assert isinstance(narration, NarrationAudio)
        assert narration.duration == pytest.approx(12.0)
