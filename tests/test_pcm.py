"""
Unit tests for the raw PCM helpers.
"""

import base64
import struct

import pytest

from sermonclip.audio.pcm import (
    DEFAULT_PCM_FORMAT,
    WAV_HEADER_SIZE,
    AudioDecodeError,
    PcmFormat,
    decode_base64_pcm,
    estimate_duration,
    pcm_to_wav,
)


class TestEstimateDuration:
    """Test cases for estimate_duration."""

    def test_default_format_byte_rate(self):
        assert DEFAULT_PCM_FORMAT.byte_rate == 48000

    @pytest.mark.parametrize(
        ("length", "expected"),
        [(0, 0.0), (48000, 1.0), (96000, 2.0), (24000, 0.5)],
    )
    def test_default_format(self, length, expected):
        assert estimate_duration(length) == pytest.approx(expected)

    def test_odd_length_is_fractional(self):
        # half-samples are not rounded away
        assert estimate_duration(1) == pytest.approx(1 / 48000)

    def test_custom_format(self):
        fmt = PcmFormat(sample_rate=44100, channels=2, bits_per_sample=16)
        assert estimate_duration(176400, fmt) == pytest.approx(1.0)

    def test_negative_length(self):
        with pytest.raises(ValueError):
            estimate_duration(-1)


class TestPcmFormat:
    """Test cases for PcmFormat validation."""

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"sample_rate": 0},
            {"sample_rate": -24000},
            {"channels": 0},
            {"bits_per_sample": 4},
            {"bits_per_sample": 12},
            {"bits_per_sample": 0},
            {"bits_per_sample": 40},
        ],
    )
    def test_rejects_invalid_format(self, kwargs):
        with pytest.raises(ValueError):
            PcmFormat(**kwargs)

    @pytest.mark.parametrize("bits", [8, 16, 24, 32])
    def test_accepts_supported_widths(self, bits):
        fmt = PcmFormat(bits_per_sample=bits)
        assert fmt.bytes_per_sample == bits // 8

    def test_wav_uses_format(self):
        fmt = PcmFormat(sample_rate=44100, channels=2, bits_per_sample=24)
        fields = struct.unpack("<4sI4s4sIHHIIHH4sI", pcm_to_wav(b"\x00" * 12, fmt)[:44])
        assert fields[6:11] == (2, 44100, 44100 * 6, 6, 24)


class TestDecodeBase64Pcm:
    """Test cases for decode_base64_pcm."""

    def test_decodes_text(self):
        raw = b"\x00\x01\x02\x03"
        assert decode_base64_pcm(base64.b64encode(raw).decode("ascii")) == raw

    def test_raw_bytes_pass_through(self):
        assert decode_base64_pcm(b"\x10\x20") == b"\x10\x20"
        assert decode_base64_pcm(bytearray(b"\x10")) == b"\x10"

    def test_invalid_payload(self):
        with pytest.raises(AudioDecodeError):
            decode_base64_pcm("not base64!!")


class TestWavContainer:
    """Test cases for the WAV container writer."""

    def test_header_fields(self):
        wav = pcm_to_wav(b"\x00" * 48000)
        assert len(wav) == WAV_HEADER_SIZE + 48000
        header = wav[:WAV_HEADER_SIZE]
        fields = struct.unpack("<4sI4s4sIHHIIHH4sI", header)
        assert fields == (
            b"RIFF",
            36 + 48000,
            b"WAVE",
            b"fmt ",
            16,
            1,
            1,
            24000,
            48000,
            2,
            16,
            b"data",
            48000,
        )

    def test_pcm_to_wav_appends_samples(self):
        pcm = b"\x01\x00" * 10
        wav = pcm_to_wav(pcm)
        assert wav[:4] == b"RIFF"
        assert wav[WAV_HEADER_SIZE:] == pcm
