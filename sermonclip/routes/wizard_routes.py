"""
Wizard routes: drive a clip session from source text to a generated clip.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from fastapi import APIRouter, HTTPException
from loguru import logger

from sermonclip.core.wizard import (
    WizardSession,
    WizardStateError,
    WizardStep,
    session_store,
)
from sermonclip.pipeline.clip_generator import ClipGenerator
from sermonclip.pipeline.copilot import CLARIFY_RESPONSE, interpret_command
from sermonclip.pipeline.quotes import QuoteExtractionError, extract_quotes
from sermonclip.schemas.wizard import (
    FormatPayload,
    MoodPayload,
    QuotePayload,
    TextOverlayPayload,
    TextPayload,
    ThemePayload,
    UpdatesPayload,
    VoicePayload,
)

router = APIRouter(prefix="/api", tags=["wizard"])


def get_session_or_404(session_id: str) -> WizardSession:
    session = session_store.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


@contextmanager
def wizard_errors() -> Iterator[None]:
    """Translate wizard errors into HTTP errors."""
    try:
        yield
    except WizardStateError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


async def _process_source(session: WizardSession, text: str) -> dict[str, Any]:
    with wizard_errors():
        if session.step not in (WizardStep.SOURCE, WizardStep.QUOTE):
            raise WizardStateError("Source text can only be submitted at the start")
    try:
        quotes = await extract_quotes(text)
    except QuoteExtractionError as e:
        session.error = str(e)
        raise HTTPException(status_code=502, detail=str(e)) from e
    session.error = None
    with wizard_errors():
        session.submit_quotes(text, quotes)
    return {"session": session.to_dict(), "quotes": quotes}


async def _run_generation(session: WizardSession) -> dict[str, Any]:
    if session.generation_lock.locked():
        raise HTTPException(
            status_code=409, detail="A clip is already being generated"
        )
    async with session.generation_lock:
        with wizard_errors():
            session.begin_generation()
        try:
            result = await ClipGenerator().generate(session.config)
        except Exception as e:
            session.fail_generation(str(e))
            raise HTTPException(status_code=502, detail=session.error) from e
        session.complete_generation(result)
    logger.info(f"Session {session.id}: clip generated with {len(result.clips)} clips")
    return {"session": session.to_dict(), "result": result.to_dict()}


@router.post("/sessions")
async def create_session() -> dict[str, Any]:
    return session_store.create().to_dict()


@router.get("/sessions/{session_id}")
async def get_session(session_id: str) -> dict[str, Any]:
    return get_session_or_404(session_id).to_dict()


@router.delete("/sessions/{session_id}")
async def delete_session(session_id: str) -> dict[str, bool]:
    if not session_store.delete(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    return {"deleted": True}


@router.post("/sessions/{session_id}/source")
async def submit_source(session_id: str, payload: TextPayload) -> dict[str, Any]:
    """Extract candidate quotes from a transcript or a single quote."""
    session = get_session_or_404(session_id)
    return await _process_source(session, payload.text)


@router.post("/sessions/{session_id}/quote")
async def select_quote(session_id: str, payload: QuotePayload) -> dict[str, Any]:
    session = get_session_or_404(session_id)
    with wizard_errors():
        session.select_quote(payload.text)
    return session.to_dict()


@router.post("/sessions/{session_id}/voice")
async def select_voice(session_id: str, payload: VoicePayload) -> dict[str, Any]:
    session = get_session_or_404(session_id)
    with wizard_errors():
        session.select_voice(payload.voice)
    return session.to_dict()


@router.post("/sessions/{session_id}/theme")
async def select_theme(session_id: str, payload: ThemePayload) -> dict[str, Any]:
    session = get_session_or_404(session_id)
    with wizard_errors():
        session.select_theme(payload.theme_id)
    return session.to_dict()


@router.post("/sessions/{session_id}/mood")
async def select_mood(session_id: str, payload: MoodPayload) -> dict[str, Any]:
    session = get_session_or_404(session_id)
    with wizard_errors():
        session.select_mood(payload.mood)
    return session.to_dict()


@router.post("/sessions/{session_id}/format")
async def confirm_format(session_id: str, payload: FormatPayload) -> dict[str, Any]:
    session = get_session_or_404(session_id)
    with wizard_errors():
        session.confirm_format(payload.aspect_ratio, payload.resolution)
    return session.to_dict()


@router.post("/sessions/{session_id}/text-overlay")
async def confirm_text_overlay(
    session_id: str, payload: TextOverlayPayload
) -> dict[str, Any]:
    session = get_session_or_404(session_id)
    with wizard_errors():
        session.confirm_text_overlay(**payload.updates())
    return session.to_dict()


@router.post("/sessions/{session_id}/command")
async def copilot_command(session_id: str, payload: TextPayload) -> dict[str, Any]:
    """Interpret a free-form chat message; at the start it is the source text."""
    session = get_session_or_404(session_id)
    if session.step == WizardStep.SOURCE:
        return await _process_source(session, payload.text)

    try:
        result = await interpret_command(
            payload.text, session.step.value, session.config
        )
    except Exception as e:
        logger.error(f"Copilot command failed: {e}")
        raise HTTPException(status_code=502, detail=f"Copilot unavailable: {e}") from e

    session.add_user_text(payload.text)
    if result.updates:
        session.apply_updates(result.updates, result.response)
    elif result.action == "restart":
        session.restart()
    else:
        session.add_assistant_text(result.response or CLARIFY_RESPONSE)
    return {"session": session.to_dict(), "copilot": result.to_dict()}


@router.post("/sessions/{session_id}/updates")
async def apply_updates(session_id: str, payload: UpdatesPayload) -> dict[str, Any]:
    """Apply config updates (e.g. an AI suggestion), optionally regenerating."""
    session = get_session_or_404(session_id)
    if session.step == WizardStep.GENERATING:
        raise HTTPException(status_code=409, detail="A clip is already being generated")
    if payload.regenerate and session.step not in (WizardStep.CONFIRM, WizardStep.DONE):
        raise HTTPException(
            status_code=409, detail="Clips can only be regenerated after confirming"
        )
    session.apply_updates(payload.updates)
    if not payload.regenerate:
        return {"session": session.to_dict()}
    session.add_user_text("Applied suggestion.")
    return await _run_generation(session)


@router.post("/sessions/{session_id}/generate")
async def generate_clip(session_id: str) -> dict[str, Any]:
    session = get_session_or_404(session_id)
    return await _run_generation(session)
