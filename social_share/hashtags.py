"""Hashtag cleaning and assembly."""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional

LOGGER = logging.getLogger(__name__)

DEFAULT_HASHTAG_CAP = 8

_NON_WORD_RE = re.compile(r"[^A-Za-z0-9_]")
HASHTAG_RE = re.compile(r"^#[A-Za-z0-9_]{2,}$")


def _clean(raw: str) -> Optional[str]:
    compact = "".join(raw.split())
    if compact.startswith("#"):
        compact = compact[1:]
    tag = "#" + _NON_WORD_RE.sub("", compact)
    if len(tag) <= 2:
        return None
    return tag


def normalize_hashtag(raw: str) -> Optional[str]:
    """Turn user input such as ``"Product Marketing"`` into ``#ProductMarketing``.

    Returns None for entries with fewer than two usable characters.
    """

    tag = _clean(raw or "")
    if tag is None:
        LOGGER.debug("Dropping malformed hashtag %r", raw)
    return tag


def keyword_to_hashtag(keyword: str) -> Optional[str]:
    tag = _clean(keyword or "")
    return tag.lower() if tag else None


def assemble_hashtags(
    keywords: Iterable[str],
    custom_hashtags: Optional[Iterable[str]] = None,
    cap: int = DEFAULT_HASHTAG_CAP,
) -> List[str]:
    """Merge caller hashtags (first) with keyword hashtags, deduplicated and capped."""

    candidates = [normalize_hashtag(raw) for raw in custom_hashtags or ()]
    candidates.extend(keyword_to_hashtag(keyword) for keyword in keywords)

    tags: List[str] = []
    seen = set()
    for tag in candidates:
        if len(tags) >= cap:
            break
        if tag is None or tag.lower() in seen:
            continue
        seen.add(tag.lower())
        tags.append(tag)
    return tags


__all__ = [
    "DEFAULT_HASHTAG_CAP",
    "HASHTAG_RE",
    "assemble_hashtags",
    "keyword_to_hashtag",
    "normalize_hashtag",
]
