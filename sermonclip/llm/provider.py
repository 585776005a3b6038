"""
LLM provider factory and module-level facade functions.
"""

from __future__ import annotations

from typing import Any

from .base import ChatMessages, LLMClient
from .gemini_client import GeminiLLMClient
from .openai_client import OpenAILLMClient

_llm_clients: dict[str, LLMClient] = {}


def _get_llm(provider: str | None = None) -> LLMClient:
    prov = (provider or "google").lower()
    if prov in {"google", "gemini"}:
        prov = "google"
    if prov in _llm_clients:
        return _llm_clients[prov]

    client: LLMClient
    if prov == "openai":
        client = OpenAILLMClient()
    elif prov == "google":
        client = GeminiLLMClient()
    else:
        raise ValueError(f"Unsupported provider: {prov}")

    _llm_clients[prov] = client
    return client


def _resolve_provider_and_model(model: str) -> tuple[str, str]:
    spec_provider, separator, spec_model = model.partition("/")
    if not separator:
        # No explicit provider prefix, default to Gemini models.
        return "google", spec_provider
    if not spec_model:
        raise ValueError(f"Invalid model specification '{model}'")
    return spec_provider.lower(), spec_model


def chat_completion(
    messages: ChatMessages,
    model: str,
    *,
    retries: int | None = None,
    backoff: float | None = None,
    timeout: float | None = None,
    **kwargs: Any,
) -> str:
    prov, model_name = _resolve_provider_and_model(model)
    return _get_llm(prov).chat_completion(
        messages,
        model_name,
        retries=retries,
        backoff=backoff,
        timeout=timeout,
        **kwargs,
    )


def tts_speech_pcm(
    model: str,
    voice: str,
    input_text: str,
    *,
    retries: int | None = None,
    backoff: float | None = None,
    timeout: float | None = None,
) -> bytes:
    prov, model_name = _resolve_provider_and_model(model)
    voice_name = voice.split("/", 1)[1] if "/" in voice else voice
    return _get_llm(prov).tts_speech_pcm(
        model_name,
        voice_name,
        input_text,
        retries=retries,
        backoff=backoff,
        timeout=timeout,
    )


def video_generate(
    prompt: str,
    model: str,
    *,
    aspect_ratio: str = "9:16",
    resolution: str = "720p",
    poll_interval: float | None = None,
    retries: int | None = None,
    backoff: float | None = None,
) -> str:
    prov, model_name = _resolve_provider_and_model(model)
    return _get_llm(prov).video_generate(
        prompt,
        model_name,
        aspect_ratio=aspect_ratio,
        resolution=resolution,
        poll_interval=poll_interval,
        retries=retries,
        backoff=backoff,
    )


def video_download(uri: str, model: str, *, timeout: float | None = None) -> bytes:
    prov, _ = _resolve_provider_and_model(model)
    return _get_llm(prov).video_download(uri, timeout=timeout)
