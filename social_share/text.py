"""Plain-text helpers shared by every generation stage."""

from __future__ import annotations

import re
import unicodedata
from typing import Iterator, Optional

_WHITESPACE_RE = re.compile(r"\s+")
_SENTENCE_BOUNDARY_RE = re.compile(r"(?<=[.!?])\s+")
# Control characters and invisible format marks such as zero-width spaces.
_DROPPED_CATEGORIES = frozenset({"Cc", "Cf"})

TITLE_MAX_LENGTH = 120


def normalize_whitespace(text: Optional[str]) -> str:
    """Collapse whitespace runs to single spaces and drop control characters."""

    if not text:
        return ""
    collapsed = _WHITESPACE_RE.sub(" ", text)
    cleaned = "".join(char for char in collapsed if unicodedata.category(char) not in _DROPPED_CATEGORIES)
    return _WHITESPACE_RE.sub(" ", cleaned).strip()


def split_sentences(text: str) -> Iterator[str]:
    """Yield sentences with their terminal punctuation attached.

    Text without a terminator comes back as a single sentence. The generator
    is lazy; call the function again to start over.
    """

    for fragment in _SENTENCE_BOUNDARY_RE.split(text or ""):
        fragment = fragment.strip()
        if fragment:
            yield fragment


def truncate_words(text: str, limit: int, ellipsis: str = "…") -> str:
    """Cut ``text`` at a word boundary so the result, ellipsis included, fits ``limit``."""

    if len(text) <= limit:
        return text
    if limit <= len(ellipsis):
        return text[:max(limit, 0)]
    room = limit - len(ellipsis)
    cut = text[:room + 1]
    if " " in cut:
        cut = cut[:cut.rindex(" ")]
    else:
        cut = cut[:room]
    cut = cut.rstrip(" ,;:-")
    if not cut:
        cut = text[:room]
    return cut + ellipsis


def derive_title(body: str, max_length: int = TITLE_MAX_LENGTH) -> Optional[str]:
    """Use the opening sentence as a headline when none was supplied."""

    first = next(split_sentences(normalize_whitespace(body)), None)
    if first is None:
        return None
    return first[:max_length]


__all__ = [
    "TITLE_MAX_LENGTH",
    "derive_title",
    "normalize_whitespace",
    "split_sentences",
    "truncate_words",
]
