"""
Caption chunking utilities (subtitle package).
"""

import re

_SENTENCE_ENDERS = (".", "!", "?")
_MIN_CHUNK_WORDS = 2
_MAX_CHUNK_WORDS = 6
_SOFT_MAX_CHUNK_CHARS = 25


def normalize_text(text: str | None) -> str:
    return re.sub(r"\s+", " ", text or "").strip()


def split_caption_chunks(text: str | None) -> list[str]:
    """Split narration text into short, readable caption chunks.

    A chunk closes once it holds at least two words and either runs past the
    soft character limit or ends a sentence. Chunks that never hit a natural
    break are forced closed at six words. The trailing fragment is kept as is,
    even when it is a single word.
    """
    s = normalize_text(text)
    if not s:
        return []

    chunks: list[str] = []
    current: list[str] = []
    for word in s.split(" "):
        current.append(word)
        chunk = " ".join(current)
        natural_break = len(current) >= _MIN_CHUNK_WORDS and (
            len(chunk) > _SOFT_MAX_CHUNK_CHARS or word.endswith(_SENTENCE_ENDERS)
        )
        if natural_break or len(current) >= _MAX_CHUNK_WORDS:
            chunks.append(chunk)
            current = []
    if current:
        chunks.append(" ".join(current))
    return chunks
