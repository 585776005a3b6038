"""
Quote extraction step: turn a transcript (or a single quote) into candidates.
"""

from __future__ import annotations

import asyncio

from loguru import logger

from sermonclip.configs.config import config
from sermonclip.llm import chat_completion, parse_json_reply

# Inputs shorter than this are treated as the quote itself when the model fails
FALLBACK_QUOTE_MAX_CHARS = 300

QUOTE_EXTRACTION_PROMPT = """
Analyze the following input text: "{source}".

Task:
1. If the input is a long transcript/sermon: Extract 5-6 powerful, viral-worthy, emotionally resonant quotes suitable for a short social media video.
2. If the input is a short text (likely a direct quote): Simply clean it up if needed and return it as the single option.

CRITICAL RULES:
1. QUOTES MUST BE VERBATIM from the text provided.
2. Focus on "Biblical Truths" or "Inspiring Messages".

Return ONLY a JSON array of objects with key: "text" (string).
Example: [{{"text": "Faith is not about everything turning out okay..."}}]
Do not include markdown code blocks.
"""


class QuoteExtractionError(RuntimeError):
    """Raised when no quotes can be produced from the source text."""


def _parse_quotes(content: str) -> list[str]:
    data = parse_json_reply(content)
    if not isinstance(data, list):
        raise ValueError("Expected a JSON array of quotes")
    quotes: list[str] = []
    for item in data:
        text = item.get("text") if isinstance(item, dict) else item
        if isinstance(text, str) and text.strip():
            quotes.append(text.strip())
    if not quotes:
        raise ValueError("Model returned no quotes")
    return quotes


async def extract_quotes(source_text: str, model: str | None = None) -> list[str]:
    text = (source_text or "").strip()
    if not text:
        raise QuoteExtractionError("Source text is empty")

    source = text[: config.max_source_chars]
    if len(text) > config.max_source_chars:
        source += "... (truncated)"
    prompt = QUOTE_EXTRACTION_PROMPT.format(source=source)
    try:
        content = await asyncio.to_thread(
            chat_completion,
            [{"role": "user", "content": prompt}],
            model or config.text_model,
        )
        quotes = _parse_quotes(content)
        logger.info(f"Extracted {len(quotes)} quotes from {len(text)} chars")
        return quotes
    except Exception as e:
        logger.error(f"Quote extraction failed: {e}")
        if len(text) < FALLBACK_QUOTE_MAX_CHARS:
            return [text]
        raise QuoteExtractionError(
            "Failed to process text. Please try a shorter segment or check the format."
        ) from e
