#!/usr/bin/env python3
"""
CLI tool for SermonClip narration assets.

This tool provides command-line interface for:
- Building the caption timeline for a narration (from raw PCM or a duration)
- Exporting captions as WebVTT
- Wrapping raw PCM narration in a WAV container
"""

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from sermonclip.audio.pcm import (
    PcmFormat,
    decode_base64_pcm,
    estimate_duration,
    pcm_to_wav,
)
from sermonclip.configs.config import config
from sermonclip.subtitle import (
    SubtitleSegment,
    create_smart_subtitles,
    generate_vtt_content,
)

console = Console()
err_console = Console(stderr=True)


def _pcm_format(args: argparse.Namespace) -> PcmFormat:
    return PcmFormat(
        sample_rate=args.sample_rate,
        channels=args.channels,
        bits_per_sample=args.bits_per_sample,
    )


def _read_pcm(path: str, base64_encoded: bool) -> bytes:
    raw = Path(path).read_bytes()
    if base64_encoded:
        return decode_base64_pcm(raw.decode("ascii").strip())
    return raw


def _read_text(args: argparse.Namespace) -> str:
    if args.text_file:
        return Path(args.text_file).read_text(encoding="utf-8")
    return args.text or ""


def render_captions(segments: list[SubtitleSegment], duration: float) -> Table:
    table = Table(title=f"Captions ({duration:.2f}s)")
    table.add_column("#", justify="right")
    table.add_column("Start", justify="right")
    table.add_column("End", justify="right")
    table.add_column("Text")
    for i, segment in enumerate(segments, start=1):
        table.add_row(
            str(i), f"{segment.start:.2f}", f"{segment.end:.2f}", segment.text
        )
    return table


def cmd_captions(args: argparse.Namespace) -> int:
    text = _read_text(args)
    if args.pcm:
        pcm = _read_pcm(args.pcm, args.base64)
        duration = estimate_duration(len(pcm), _pcm_format(args))
    elif args.duration is not None:
        duration = args.duration
    else:
        err_console.print("[red]Either --pcm or --duration is required[/red]")
        return 2

    segments = create_smart_subtitles(text, duration)
    if args.vtt:
        print(generate_vtt_content(segments, args.language))
    elif not segments:
        console.print("[yellow]No captions: narration text is empty[/yellow]")
    else:
        console.print(render_captions(segments, duration))
    return 0


def cmd_wav(args: argparse.Namespace) -> int:
    pcm = _read_pcm(args.pcm, args.base64)
    fmt = _pcm_format(args)
    Path(args.out).write_bytes(pcm_to_wav(pcm, fmt))
    console.print(
        f"[green]Wrote {args.out}[/green] ({estimate_duration(len(pcm), fmt):.2f}s)"
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="SermonClip narration tools")
    parser.add_argument("--sample-rate", type=int, default=config.pcm_sample_rate)
    parser.add_argument("--channels", type=int, default=config.pcm_channels)
    parser.add_argument(
        "--bits-per-sample", type=int, default=config.pcm_bits_per_sample
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    captions = subparsers.add_parser("captions", help="Build the caption timeline")
    source = captions.add_mutually_exclusive_group(required=True)
    source.add_argument("--text", help="Narration text")
    source.add_argument("--text-file", help="File containing the narration text")
    captions.add_argument("--pcm", help="Raw PCM narration file")
    captions.add_argument("--duration", type=float, help="Narration length in seconds")
    captions.add_argument(
        "--base64", action="store_true", help="PCM file is base64 encoded"
    )
    captions.add_argument("--vtt", action="store_true", help="Print WebVTT output")
    captions.add_argument("--language", default="en", help="VTT language code")
    captions.set_defaults(func=cmd_captions)

    wav = subparsers.add_parser("wav", help="Wrap raw PCM in a WAV container")
    wav.add_argument("--pcm", required=True, help="Raw PCM narration file")
    wav.add_argument("--out", required=True, help="Output .wav path")
    wav.add_argument("--base64", action="store_true", help="PCM file is base64 encoded")
    wav.set_defaults(func=cmd_wav)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return int(args.func(args))
    except (OSError, ValueError) as e:
        err_console.print(f"[red]Error:[/red] {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
