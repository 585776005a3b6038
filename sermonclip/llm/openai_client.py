"""
OpenAI client implementation for the pluggable generative interface.
"""

from __future__ import annotations

import time
from typing import Any, cast

from loguru import logger
from openai import OpenAI

from sermonclip.configs.config import config

from .base import ChatMessages, LLMClient, to_openai_messages


class OpenAILLMClient(LLMClient):
    def __init__(self) -> None:
        api_key = config.openai_api_key
        if not api_key:
            raise ValueError("OPENAI_API_KEY is required for OpenAI client")
        if config.openai_base_url:
            self._client = OpenAI(api_key=api_key, base_url=config.openai_base_url)
        else:
            self._client = OpenAI(api_key=api_key)

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
        cli = cast(Any, self._client)
        r = config.openai_retries if retries is None else retries
        b = config.openai_backoff if backoff is None else backoff
        t = config.openai_timeout if timeout is None else timeout
        payload = to_openai_messages(messages)
        last_err: Exception | None = None
        for attempt in range(r):
            try:
                resp = cli.chat.completions.create(
                    model=model,
                    messages=payload,
                    timeout=t,
                    **kwargs,
                )
                return (resp.choices[0].message.content or "") if resp.choices else ""
            except Exception as e:
                last_err = e
                if attempt == r - 1:
                    raise
                time.sleep(b * (2**attempt))
        if last_err:
            raise last_err
        return ""

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
        """Synthesize speech as raw PCM (24kHz, 16-bit, mono little-endian)."""
        cli = cast(Any, self._client)
        r = config.openai_retries if retries is None else retries
        b = config.openai_backoff if backoff is None else backoff
        t = config.openai_timeout if timeout is None else timeout
        last_err: Exception | None = None
        for attempt in range(r):
            try:
                resp = cli.audio.speech.create(
                    model=model,
                    voice=voice,
                    input=input_text,
                    response_format="pcm",
                    timeout=t,
                )
                payload = getattr(resp, "content", None)
                if isinstance(payload, bytes | bytearray):
                    return bytes(payload)
                if hasattr(resp, "read"):
                    return bytes(resp.read())
                return bytes(resp)
            except Exception as e:
                last_err = e
                if attempt == r - 1:
                    raise
                logger.warning(f"OpenAI speech failed (attempt {attempt + 1}): {e}")
                time.sleep(b * (2**attempt))
        if last_err:
            raise last_err
        return b""

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
        raise NotImplementedError("Video generation is not supported for OpenAI")

    def video_download(self, uri: str, *, timeout: float | None = None) -> bytes:
        raise NotImplementedError("Video generation is not supported for OpenAI")
