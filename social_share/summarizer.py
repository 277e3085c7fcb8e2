"""Extractive summaries built from the leading sentences of an article."""

from __future__ import annotations

import logging
from typing import List

from .text import split_sentences, truncate_words

LOGGER = logging.getLogger(__name__)

DEFAULT_MAX_SENTENCES = 3
DEFAULT_MAX_CHARS = 280
ELLIPSIS = "…"


def summarize(body: str, max_sentences: int = DEFAULT_MAX_SENTENCES, max_chars: int = DEFAULT_MAX_CHARS) -> str:
    """Concatenate leading sentences until either budget is reached.

    ``body`` is expected to be normalized already. Bodies that fit the
    character budget are returned unchanged. An overlong first sentence is cut
    at a word boundary and marked with an ellipsis.
    """

    if not body:
        return ""
    if len(body) <= max_chars:
        return body

    selected: List[str] = []
    length = 0
    for sentence in split_sentences(body):
        if len(selected) >= max(max_sentences, 1):
            break
        added = len(sentence) + (1 if selected else 0)
        if length + added > max_chars:
            break
        selected.append(sentence)
        length += added

    if not selected:
        first = next(split_sentences(body))
        LOGGER.debug("First sentence exceeds %d chars; truncating", max_chars)
        return truncate_words(first, max_chars, ELLIPSIS)
    return " ".join(selected)


__all__ = ["DEFAULT_MAX_CHARS", "DEFAULT_MAX_SENTENCES", "summarize"]
