from __future__ import annotations

import abc
from collections.abc import Sequence
from typing import Any, Literal, TypedDict, cast

MessageRole = Literal["system", "user", "assistant"]


class ChatMessage(TypedDict):
    role: MessageRole
    content: str


class GeminiTextPart(TypedDict):
    text: str


class GeminiChatMessage(TypedDict):
    role: str
    parts: list[GeminiTextPart]


ChatMessages = Sequence[ChatMessage]


def _map_role_to_gemini(role: str) -> str:
    if role == "assistant":
        return "model"
    return role


def to_gemini_messages(messages: ChatMessages) -> list[GeminiChatMessage]:
    """Normalize chat messages into Google Gemini payloads."""

    normalized: list[GeminiChatMessage] = []
    for message in messages:
        if "content" not in message:
            raise ValueError("Chat message must include 'content'.")
        content = message["content"]
        if not isinstance(content, str):
            raise ValueError("Only text content is supported for Gemini conversion.")
        parts: list[GeminiTextPart] = [{"text": content}] if content else []
        normalized.append(
            {"role": _map_role_to_gemini(message["role"]), "parts": parts}
        )
    return normalized


def to_openai_messages(messages: ChatMessages) -> list[dict[str, Any]]:
    return [cast(dict[str, Any], dict(message)) for message in messages]


class LLMClient(abc.ABC):
    """Abstract generative client interface used by the app."""

    @abc.abstractmethod
    def chat_completion(
        self,
        messages: ChatMessages,
        model: str,
        *,
        retries: int | None = None,
        backoff: float | None = None,
        timeout: float | None = None,
        **kwargs: Any,
    ) -> str:
        """Return assistant message content as string (may be empty)."""

    @abc.abstractmethod
    def tts_speech_pcm(
        self,
        model: str,
        voice: str,
        input_text: str,
        *,
        retries: int | None = None,
        backoff: float | None = None,
        timeout: float | None = None,
    ) -> bytes:
        """Return raw 16-bit little-endian PCM for synthesized speech (may be empty)."""

    @abc.abstractmethod
    def video_generate(
        self,
        prompt: str,
        model: str,
        *,
        aspect_ratio: str = "9:16",
        resolution: str = "720p",
        poll_interval: float | None = None,
        retries: int | None = None,
        backoff: float | None = None,
    ) -> str:
        """Generate one video clip and block until it is ready, returning its URI."""

    @abc.abstractmethod
    def video_download(self, uri: str, *, timeout: float | None = None) -> bytes:
        """Fetch the bytes of a generated video."""
