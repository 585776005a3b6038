"""
Conversational wizard state for SermonClip.

A :class:`WizardSession` walks the user from source text to a generated clip:

    source -> quote -> voice -> theme -> mood -> format -> text -> confirm
           -> generating -> done

Every selection echoes the user's choice into the message stream and appends
the assistant widget for the next step, so a client can render the
conversation straight from ``messages``. Failed generations drop back to
``confirm`` with the error kept on the session.
"""

from __future__ import annotations

import asyncio
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, get_args

from loguru import logger

from sermonclip.configs.themes import MOODS, get_theme

from .models import AspectRatio, ClipConfig, Resolution, Voice

if TYPE_CHECKING:
    from sermonclip.pipeline.clip_generator import ClipResult

WELCOME_MESSAGE = (
    "Welcome to SermonClip AI. To begin, please paste your sermon transcript, "
    "a specific quote, or upload a .txt file."
)


class WizardStep(str, Enum):
    SOURCE = "source"
    QUOTE = "quote"
    VOICE = "voice"
    THEME = "theme"
    MOOD = "mood"
    FORMAT = "format"
    TEXT = "text"
    CONFIRM = "confirm"
    GENERATING = "generating"
    DONE = "done"


class WizardStateError(RuntimeError):
    """Raised when an action is not allowed at the session's current step."""


@dataclass
class Message:
    id: str
    role: str
    type: str
    content: str | None = None
    data: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "role": self.role,
            "type": self.type,
            "content": self.content,
            "data": self.data,
        }


@dataclass
class WizardSession:
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    step: WizardStep = WizardStep.SOURCE
    config: ClipConfig = field(default_factory=ClipConfig)
    messages: list[Message] = field(default_factory=list)
    result: ClipResult | None = None
    error: str | None = None
    generation_lock: asyncio.Lock = field(default_factory=asyncio.Lock, repr=False)

    def __post_init__(self) -> None:
        if not self.messages:
            self._start_conversation()

    def _start_conversation(self) -> None:
        self._add("assistant", "welcome", WELCOME_MESSAGE)
        self._add("assistant", "source-input")

    def _add(
        self, role: str, msg_type: str, content: str | None = None, data: Any = None
    ) -> Message:
        message = Message(
            id=str(len(self.messages) + 1),
            role=role,
            type=msg_type,
            content=content,
            data=data,
        )
        self.messages.append(message)
        return message

    def _require(self, *steps: WizardStep) -> None:
        if self.step not in steps:
            expected = ", ".join(s.value for s in steps)
            raise WizardStateError(
                f"Cannot do that at step '{self.step.value}' (expected {expected})"
            )

    def add_user_text(self, text: str) -> None:
        self._add("user", "text", text)

    def add_assistant_text(self, text: str) -> None:
        self._add("assistant", "text", text)

    def submit_quotes(self, source_text: str, quotes: list[str]) -> None:
        self._require(WizardStep.SOURCE, WizardStep.QUOTE)
        echo = (
            "Transcript uploaded"
            if len(source_text) > 50
            else f'Input: "{source_text}"'
        )
        self._add("user", "text", echo)
        self._add("assistant", "quote-select", data=[{"text": q} for q in quotes])
        self.step = WizardStep.QUOTE

    def select_quote(self, quote: str) -> None:
        self._require(WizardStep.QUOTE)
        if not quote.strip():
            raise ValueError("Quote must not be empty")
        self.config = self.config.apply_updates({"quote": quote})
        self._add("user", "text", f'Selected: "{quote[:30]}..."')
        self._add("assistant", "voice-select")
        self.step = WizardStep.VOICE

    def select_voice(self, voice: str) -> None:
        self._require(WizardStep.VOICE)
        if voice not in get_args(Voice):
            raise ValueError(f"Unknown voice: {voice}")
        self.config = self.config.apply_updates({"voice": voice})
        self._add("user", "text", f"{voice} voice")
        self._add("assistant", "theme-select")
        self.step = WizardStep.THEME

    def select_theme(self, theme_id: str) -> None:
        self._require(WizardStep.THEME)
        theme = get_theme(theme_id)
        if theme is None:
            raise ValueError(f"Unknown theme: {theme_id}")
        self.config = self.config.apply_updates({"theme_id": theme_id})
        self._add("user", "text", theme.name)
        self._add("assistant", "mood-select")
        self.step = WizardStep.MOOD

    def select_mood(self, mood: str) -> None:
        self._require(WizardStep.MOOD)
        if mood not in MOODS:
            raise ValueError(f"Unknown mood: {mood}")
        self.config = self.config.apply_updates({"mood": mood})
        self._add("user", "text", mood)
        self._add("assistant", "format-select")
        self.step = WizardStep.FORMAT

    def confirm_format(self, aspect_ratio: str, resolution: str) -> None:
        self._require(WizardStep.FORMAT)
        if aspect_ratio not in get_args(AspectRatio):
            raise ValueError(f"Unknown aspect ratio: {aspect_ratio}")
        if resolution not in get_args(Resolution):
            raise ValueError(f"Unknown resolution: {resolution}")
        self.config = self.config.apply_updates(
            {"aspect_ratio": aspect_ratio, "resolution": resolution}
        )
        self._add("user", "text", f"{aspect_ratio}, {resolution}")
        self._add("assistant", "text-select")
        self.step = WizardStep.TEXT

    def confirm_text_overlay(self, **overlay: Any) -> None:
        self._require(WizardStep.TEXT)
        self.config = self.config.apply_updates({"text_overlay": overlay})
        current = self.config.text_overlay
        if not current.enabled:
            echo = "No Text"
        elif current.mode == "captions":
            echo = "Synced Captions"
        else:
            echo = "Static Text"
        self._add("user", "text", echo)
        self._add("assistant", "confirmation", data=self.config.summary())
        self.step = WizardStep.CONFIRM

    def begin_generation(self) -> None:
        self._require(WizardStep.CONFIRM, WizardStep.DONE)
        if not self.config.quote:
            raise WizardStateError("Select a quote before generating a clip")
        self.step = WizardStep.GENERATING
        self.error = None
        self.result = None

    def complete_generation(self, result: ClipResult) -> None:
        self._require(WizardStep.GENERATING)
        self.result = result
        self.step = WizardStep.DONE
        if result.suggestion is not None:
            self._add("assistant", "suggestion", data=result.suggestion.to_dict())

    def fail_generation(self, message: str) -> None:
        self.error = f"Failed to generate clip: {message}"
        self.step = WizardStep.CONFIRM
        logger.error(f"Session {self.id}: {self.error}")

    def apply_updates(
        self, updates: dict[str, Any], response: str | None = None
    ) -> None:
        self.config = self.config.apply_updates(updates)
        self._add("assistant", "text", response or "Updated.")

    def restart(self) -> None:
        self.step = WizardStep.SOURCE
        self.config = ClipConfig()
        self.messages = []
        self.result = None
        self.error = None
        self._start_conversation()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "step": self.step.value,
            "config": self.config.to_dict(),
            "messages": [m.to_dict() for m in self.messages],
            "error": self.error,
            "has_result": self.result is not None,
        }


class SessionStore:
    """In-memory registry of wizard sessions."""

    def __init__(self) -> None:
        self._sessions: dict[str, WizardSession] = {}

    def create(self) -> WizardSession:
        session = WizardSession()
        self._sessions[session.id] = session
        logger.info(f"Created wizard session {session.id}")
        return session

    def get(self, session_id: str) -> WizardSession | None:
        return self._sessions.get(session_id)

    def delete(self, session_id: str) -> bool:
        return self._sessions.pop(session_id, None) is not None

    def __len__(self) -> int:
        return len(self._sessions)


session_store = SessionStore()
