"""
Media routes: narration audio, caption timeline and generated clips.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import Response

from sermonclip.core.playback import PlaybackTimeline
from sermonclip.pipeline.clip_generator import ClipResult
from sermonclip.subtitle import generate_vtt_content

from .wizard_routes import get_session_or_404

router = APIRouter(prefix="/api", tags=["media"])


def _result_or_404(session_id: str) -> ClipResult:
    session = get_session_or_404(session_id)
    if session.result is None:
        raise HTTPException(status_code=404, detail="No clip generated yet")
    return session.result


@router.get("/sessions/{session_id}/audio.wav")
async def download_audio(session_id: str) -> Response:
    result = _result_or_404(session_id)
    return Response(
        content=result.narration.wav,
        media_type="audio/wav",
        headers={"Content-Disposition": 'inline; filename="narration.wav"'},
    )


@router.get("/sessions/{session_id}/captions")
async def list_captions(session_id: str) -> dict[str, Any]:
    result = _result_or_404(session_id)
    return {
        "duration": result.duration,
        "segments": [segment.to_dict() for segment in result.subtitles],
    }


@router.get("/sessions/{session_id}/captions.vtt")
async def download_captions_vtt(
    session_id: str, language: str = Query("en")
) -> Response:
    result = _result_or_404(session_id)
    return Response(
        content=generate_vtt_content(result.subtitles, language),
        media_type="text/vtt",
    )


@router.get("/sessions/{session_id}/caption")
async def caption_at(session_id: str, t: float = Query(..., ge=0)) -> dict[str, Any]:
    """Return the on-screen text for playback time ``t`` (None when nothing shows)."""
    session = get_session_or_404(session_id)
    result = _result_or_404(session_id)
    timeline = PlaybackTimeline(result.subtitles, result.duration)
    return {
        "t": t,
        "caption": timeline.caption_at(t),
        "overlay": timeline.overlay_text(
            t, session.config.text_overlay, session.config.quote
        ),
    }


@router.get("/sessions/{session_id}/clips/{index}.mp4")
async def download_clip(session_id: str, index: int) -> Response:
    result = _result_or_404(session_id)
    if index < 0 or index >= len(result.clips):
        raise HTTPException(status_code=404, detail="Clip not found")
    return Response(
        content=result.clips[index].data,
        media_type="video/mp4",
        headers={
            "Content-Disposition": f'attachment; filename="clip_{index + 1:02d}.mp4"'
        },
    )
