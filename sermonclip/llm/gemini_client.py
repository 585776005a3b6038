"""Google Gemini client implementation using the google-genai SDK."""

from __future__ import annotations

import time
from typing import Any

import httpx
from google import genai
from google.genai import types as genai_types
from loguru import logger

from sermonclip.audio.pcm import decode_base64_pcm
from sermonclip.configs.config import config

from .base import ChatMessages, LLMClient, to_gemini_messages


class GeminiLLMClient(LLMClient):
    """Client backed by Gemini (text, speech) and Veo (video) via the official SDK."""

    def __init__(self) -> None:
        api_key = config.google_gemini_api_key
        if not api_key:
            raise ValueError("GOOGLE_GEMINI_API_KEY is required for Gemini client")

        http_options: dict[str, Any] = {}
        if config.google_gemini_endpoint:
            http_options["base_url"] = config.google_gemini_endpoint
        if config.google_gemini_timeout:
            http_options["timeout"] = _to_millis(config.google_gemini_timeout)

        self._api_key = api_key
        self._client = genai.Client(
            api_key=api_key,
            http_options=http_options or None,
        )
        self._timeout = config.google_gemini_timeout
        self._retries = config.google_gemini_retries
        self._backoff = config.google_gemini_backoff

    def _prepare_contents(
        self, messages: ChatMessages
    ) -> tuple[str | None, list[dict[str, Any]]]:
        contents: list[dict[str, Any]] = []
        system_texts: list[str] = []
        for message in to_gemini_messages(messages):
            if message["role"] == "system":
                system_texts.extend(part["text"] for part in message["parts"])
                continue
            contents.append({"role": message["role"], "parts": message["parts"]})
        system_instruction = "\n".join(system_texts) if system_texts else None
        return system_instruction, contents

    def _build_generation_config(self, options: dict[str, Any]) -> dict[str, Any]:
        allowed_keys = {
            "temperature",
            "top_p",
            "top_k",
            "max_output_tokens",
            "stop_sequences",
            "seed",
            "response_mime_type",
            "response_schema",
        }
        return {
            key: value
            for key, value in options.items()
            if key in allowed_keys and value is not None
        }

    def _http_options(self, timeout: float | None) -> dict[str, Any] | None:
        if timeout is None or timeout <= 0:
            return None
        return {"timeout": _to_millis(timeout)}

    def _with_retries(self, func: Any, retries: int, backoff: float) -> Any:
        last_err: Exception | None = None
        for attempt in range(max(1, retries)):
            try:
                return func()
            except Exception as err:
                last_err = err
                if attempt >= retries - 1:
                    raise
                logger.warning(
                    f"Gemini call failed (attempt {attempt + 1}/{retries}): {err}"
                )
                time.sleep(backoff * (2**attempt))
        if last_err:
            raise last_err
        return None

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
        r = self._retries if retries is None else retries
        b = self._backoff if backoff is None else backoff
        t = self._timeout if timeout is None else timeout
        system_instruction, contents = self._prepare_contents(messages)

        config_payload = self._build_generation_config(dict(kwargs))
        if system_instruction:
            config_payload["system_instruction"] = system_instruction
        http_options = self._http_options(t)
        if http_options:
            config_payload["http_options"] = http_options

        def _call() -> str:
            response = self._client.models.generate_content(
                model=model,
                contents=contents,
                config=config_payload or None,
            )
            return _extract_text(response) or ""

        return str(self._with_retries(_call, r, b))

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
        r = self._retries if retries is None else retries
        b = self._backoff if backoff is None else backoff
        t = self._timeout if timeout is None else timeout

        config_payload: dict[str, Any] = {
            "response_modalities": ["AUDIO"],
            "speech_config": {
                "voice_config": {"prebuilt_voice_config": {"voice_name": voice}}
            },
        }
        http_options = self._http_options(t)
        if http_options:
            config_payload["http_options"] = http_options

        def _call() -> bytes:
            response = self._client.models.generate_content(
                model=model, contents=input_text, config=config_payload
            )
            return _extract_inline_audio(response)

        return bytes(self._with_retries(_call, r, b))

    def video_generate(
        self,
        prompt: str,
        model: str,
        *,
        aspect_ratio: str = "9:16",
        resolution: str = "720p",
        poll_interval: float | None = None,
        timeout: float | None = None,
        retries: int | None = None,
        backoff: float | None = None,
    ) -> str:
        r = self._retries if retries is None else retries
        b = self._backoff if backoff is None else backoff
        interval = config.video_poll_interval if poll_interval is None else poll_interval
        limit = config.video_timeout if timeout is None else timeout

        config_payload = {
            "number_of_videos": 1,
            "resolution": resolution,
            "aspect_ratio": aspect_ratio,
        }
        operation = self._with_retries(
            lambda: self._client.models.generate_videos(
                model=model, prompt=prompt, config=config_payload
            ),
            r,
            b,
        )
        deadline = time.monotonic() + limit
        while operation.done is not True:
            if time.monotonic() >= deadline:
                raise RuntimeError(f"Video generation timed out after {limit:g}s")
            time.sleep(interval)
            operation = self._client.operations.get(operation)

        error = getattr(operation, "error", None)
        if error:
            message = (
                error.get("message") if isinstance(error, dict) else str(error)
            ) or "Video generation failed"
            raise RuntimeError(str(message))

        uri = _extract_video_uri(operation)
        if not uri:
            raise RuntimeError("Missing video URI")
        return uri

    def video_download(self, uri: str, *, timeout: float | None = None) -> bytes:
        t = self._timeout if timeout is None else timeout
        with httpx.Client(timeout=t or None, follow_redirects=True) as client:
            resp = client.get(uri, headers={"x-goog-api-key": self._api_key})
            resp.raise_for_status()
            return resp.content


def _extract_text(response: genai_types.GenerateContentResponse) -> str | None:
    text = getattr(response, "text", None)
    if isinstance(text, str) and text:
        return text

    for part in _iter_parts(response):
        part_text = getattr(part, "text", None)
        if part_text:
            return str(part_text)
    return None


def _extract_inline_audio(response: Any) -> bytes:
    for part in _iter_parts(response):
        inline_data = getattr(part, "inline_data", None)
        data = getattr(inline_data, "data", None) if inline_data is not None else None
        if data:
            return decode_base64_pcm(data)
    return b""


def _iter_parts(response: Any) -> list[Any]:
    parts_out: list[Any] = []
    for candidate in getattr(response, "candidates", None) or []:
        content = getattr(candidate, "content", None)
        parts = getattr(content, "parts", None) if content is not None else None
        parts_out.extend(parts or [])
    return parts_out


def _extract_video_uri(operation: Any) -> str | None:
    response = getattr(operation, "response", None)
    generated = getattr(response, "generated_videos", None) or []
    if not generated:
        return None
    video = getattr(generated[0], "video", None)
    uri = getattr(video, "uri", None) if video is not None else None
    return str(uri) if uri else None


def _to_millis(seconds: float) -> int:
    # HttpOptions.timeout is expressed in milliseconds
    return int(max(1.0, seconds) * 1000)
