"""
Unit tests for the command-line tool.
"""

import base64

import pytest

import cli


class TestCli:
    """Test cases for the captions and wav subcommands."""

    def test_captions_from_duration_vtt(self, capsys):
        text = "Jesus wept. He is risen."
        code = cli.main(["captions", "--text", text, "--duration", "2", "--vtt"])
        assert code == 0
        out = capsys.readouterr().out
        assert out.startswith("WEBVTT Language: en")
        assert "Jesus wept." in out
        assert "00:00:00.000 --> " in out

    def test_captions_from_pcm_file(self, tmp_path, capsys):
        pcm_path = tmp_path / "narration.pcm"
        pcm_path.write_bytes(b"\x00" * 96000)
        code = cli.main(
            ["captions", "--text", "Be still and know.", "--pcm", str(pcm_path)]
        )
        assert code == 0
        out = capsys.readouterr().out
        assert "2.00" in out
        assert "Be still and know." in out

    def test_captions_from_base64_pcm(self, tmp_path, capsys):
        pcm_path = tmp_path / "narration.b64"
        pcm_path.write_text(base64.b64encode(b"\x00" * 48000).decode("ascii"))
        code = cli.main(
            [
                "captions",
                "--text",
                "Grace upon grace.",
                "--pcm",
                str(pcm_path),
                "--base64",
                "--vtt",
                "--language",
                "es",
            ]
        )
        assert code == 0
        out = capsys.readouterr().out
        assert "WEBVTT Language: es" in out
        assert "--> 00:00:01.000" in out

    def test_captions_require_audio_source(self, capsys):
        assert cli.main(["captions", "--text", "Amen amen"]) == 2

    def test_captions_text_required(self):
        with pytest.raises(SystemExit):
            cli.main(["captions", "--duration", "1"])

    def test_wav(self, tmp_path):
        pcm_path = tmp_path / "narration.pcm"
        pcm_path.write_bytes(b"\x01\x00" * 24000)
        out_path = tmp_path / "narration.wav"
        assert cli.main(["wav", "--pcm", str(pcm_path), "--out", str(out_path)]) == 0
        data = out_path.read_bytes()
        assert data[:4] == b"RIFF"
        assert len(data) == 44 + 48000

    def test_missing_file(self, tmp_path):
        missing = tmp_path / "missing.pcm"
        code = cli.main(["wav", "--pcm", str(missing), "--out", str(tmp_path / "x")])
        assert code == 1

    @pytest.mark.parametrize(
        "format_args",
        [
            ["--bits-per-sample", "4"],
            ["--bits-per-sample", "12"],
            ["--sample-rate", "0"],
            ["--channels", "0"],
        ],
    )
    def test_invalid_pcm_format(self, tmp_path, format_args):
        pcm_path = tmp_path / "narration.pcm"
        pcm_path.write_bytes(b"\x00" * 4800)
        out_path = tmp_path / "narration.wav"
        code = cli.main(
            [*format_args, "wav", "--pcm", str(pcm_path), "--out", str(out_path)]
        )
        assert code == 1
        assert not out_path.exists()

    def test_invalid_pcm_format_for_captions(self, tmp_path):
        pcm_path = tmp_path / "narration.pcm"
        pcm_path.write_bytes(b"\x00" * 4800)
        code = cli.main(
            ["--bits-per-sample", "4", "captions", "--text", "a b"]
            + ["--pcm", str(pcm_path)]
        )
        assert code == 1
