"""Reading time estimates."""

from __future__ import annotations

import math

DEFAULT_WORDS_PER_MINUTE = 200


def estimate_reading_time(body: str, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE) -> str:
    words = len((body or "").split())
    minutes = max(1, math.ceil(words / max(1, words_per_minute)))
    return f"{minutes} min read"


__all__ = ["DEFAULT_WORDS_PER_MINUTE", "estimate_reading_time"]
