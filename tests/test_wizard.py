"""
Unit tests for the wizard session state machine.
"""

import pytest

from sermonclip.audio.narration import NarrationAudio
from sermonclip.core.wizard import (
    WELCOME_MESSAGE,
    SessionStore,
    WizardSession,
    WizardStateError,
    WizardStep,
)
from sermonclip.pipeline.clip_generator import ClipResult
from sermonclip.pipeline.suggestion import default_suggestion

QUOTE = "Faith is not about everything turning out okay."


def _walk_to_confirm(session: WizardSession) -> None:
    session.submit_quotes(QUOTE, [QUOTE])
    session.select_quote(QUOTE)
    session.select_voice("female")
    session.select_theme("nature_psalm")
    session.select_mood("Peaceful")
    session.confirm_format("16:9", "1080p")
    session.confirm_text_overlay(mode="captions")


def _result() -> ClipResult:
    narration = NarrationAudio(pcm=b"\x00" * 4, wav=b"RIFF", duration=1.0)
    return ClipResult(narration=narration, clips=[], suggestion=default_suggestion())


class TestWizardSession:
    """Test cases for WizardSession."""

    def test_initial_conversation(self):
        session = WizardSession()
        assert session.step == WizardStep.SOURCE
        assert [m.type for m in session.messages] == ["welcome", "source-input"]
        assert session.messages[0].content == WELCOME_MESSAGE

    def test_full_flow_to_confirm(self):
        session = WizardSession()
        _walk_to_confirm(session)

        assert session.step == WizardStep.CONFIRM
        assert session.config.quote == QUOTE
        assert session.config.voice == "female"
        assert session.config.theme_id == "nature_psalm"
        assert session.config.mood == "Peaceful"
        assert session.config.aspect_ratio == "16:9"
        assert session.config.resolution == "1080p"
        assert session.config.text_overlay.mode == "captions"
        confirmation = session.messages[-1]
        assert confirmation.type == "confirmation"
        assert confirmation.data["Voice"] == "Female"
        assert session.messages[-2].content == "Synced Captions"

    def test_source_echo(self):
        short = WizardSession()
        short.submit_quotes("Be still", ["Be still"])
        assert short.messages[2].content == 'Input: "Be still"'

        long = WizardSession()
        transcript = "word " * 20
        long.submit_quotes(transcript, ["word word"])
        assert long.messages[2].content == "Transcript uploaded"
        assert long.messages[3].data == [{"text": "word word"}]

    def test_out_of_order_step(self):
        session = WizardSession()
        with pytest.raises(WizardStateError):
            session.select_voice("male")

    def test_invalid_choices(self):
        session = WizardSession()
        session.submit_quotes(QUOTE, [QUOTE])
        session.select_quote(QUOTE)
        with pytest.raises(ValueError):
            session.select_voice("robot")
        session.select_voice("male")
        with pytest.raises(ValueError):
            session.select_theme("unknown_theme")
        assert session.step == WizardStep.THEME

    def test_text_overlay_disabled(self):
        session = WizardSession()
        session.submit_quotes(QUOTE, [QUOTE])
        session.select_quote(QUOTE)
        session.select_voice("male")
        session.select_theme("ethereal_light")
        session.select_mood("Joyful")
        session.confirm_format("9:16", "720p")
        session.confirm_text_overlay(enabled=False)
        assert session.messages[-2].content == "No Text"
        assert session.config.text_overlay.enabled is False

    def test_generation_success(self):
        session = WizardSession()
        _walk_to_confirm(session)
        session.begin_generation()
        assert session.step == WizardStep.GENERATING

        session.complete_generation(_result())
        assert session.step == WizardStep.DONE
        assert session.result is not None
        assert session.messages[-1].type == "suggestion"
        assert session.to_dict()["has_result"] is True

    def test_generation_failure_returns_to_confirm(self):
        session = WizardSession()
        _walk_to_confirm(session)
        session.begin_generation()
        session.fail_generation("quota exceeded")
        assert session.step == WizardStep.CONFIRM
        assert session.error == "Failed to generate clip: quota exceeded"

    def test_regenerate_from_done(self):
        session = WizardSession()
        _walk_to_confirm(session)
        session.begin_generation()
        session.complete_generation(_result())
        session.begin_generation()
        assert session.result is None
        assert session.step == WizardStep.GENERATING

    def test_begin_generation_requires_confirm(self):
        session = WizardSession()
        with pytest.raises(WizardStateError):
            session.begin_generation()

    def test_apply_updates_and_restart(self):
        session = WizardSession()
        _walk_to_confirm(session)
        session.apply_updates({"voice": "male"}, "Switched to a male voice.")
        assert session.config.voice == "male"
        assert session.messages[-1].content == "Switched to a male voice."

        session.restart()
        assert session.step == WizardStep.SOURCE
        assert session.config.quote == ""
        assert len(session.messages) == 2


class TestSessionStore:
    """Test cases for SessionStore."""

    def test_create_get_delete(self):
        store = SessionStore()
        session = store.create()
        assert store.get(session.id) is session
        assert len(store) == 1
        assert store.delete(session.id) is True
        assert store.delete(session.id) is False
        assert store.get(session.id) is None
