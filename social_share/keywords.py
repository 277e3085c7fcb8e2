"""Frequency based keyword extraction."""

from __future__ import annotations

import logging
import re
from collections import Counter
from typing import Dict, Iterable, List, Optional

from .models import Keyword

LOGGER = logging.getLogger(__name__)

_TOKEN_RE = re.compile(r"[^\W_]+(?:['’-][^\W_]+)*")

MIN_TOKEN_LENGTH = 3
DEFAULT_KEYWORD_LIMIT = 10

STOP_WORDS = frozenset(
    """
    a about above after again against all also am an and any are aren't as at be because been
    before being below between both but by can can't cannot could couldn't did didn't do does
    doesn't doing don't down during each even ever every few for from further get gets got had
    hadn't has hasn't have haven't having he her here hers herself him himself his how however
    i if in into is isn't it it's its itself just let's like made make makes many may me might
    more most much must my myself new no nor not now of off often on once one only or other
    our ours ourselves out over own per really same she should shouldn't so some still such
    than that that's the their theirs them themselves then there there's these they they're
    this those though through to too under until up upon us very was wasn't way we we're were
    weren't what what's when where which while who whom why will with within without won't
    would wouldn't yet you you're your yours yourself yourselves
    """.split()
)


def _tokenize(body: str) -> List[str]:
    return _TOKEN_RE.findall(body or "")


def _is_candidate(token: str, stop_words: frozenset) -> bool:
    if len(token) < MIN_TOKEN_LENGTH or token.isdigit():
        return False
    return token not in stop_words


def extract_keywords(
    body: str,
    stop_words: Optional[Iterable[str]] = None,
    limit: int = DEFAULT_KEYWORD_LIMIT,
) -> List[Keyword]:
    """Return the most frequent non stop-word terms of ``body``.

    Terms are counted case-insensitively and ordered by frequency, ties going
    to the term that appears first. Each term is reported in the casing it is
    most often written with (first seen wins a tie), so acronyms keep their
    capitals.
    """

    stops = frozenset(word.lower().replace("’", "'") for word in stop_words) if stop_words is not None else STOP_WORDS
    counts: Counter = Counter()
    first_seen: Dict[str, int] = {}
    spellings: Dict[str, Counter] = {}

    for position, token in enumerate(_tokenize(body)):
        key = token.lower().replace("’", "'")
        if not _is_candidate(key, stops):
            continue
        counts[key] += 1
        first_seen.setdefault(key, position)
        spellings.setdefault(key, Counter())[token] += 1

    ranked = sorted(counts, key=lambda key: (-counts[key], first_seen[key]))[:max(limit, 0)]
    # Counter.most_common keeps insertion order for equal counts.
    keywords = [Keyword(term=spellings[key].most_common(1)[0][0], score=counts[key]) for key in ranked]
    LOGGER.debug("Extracted %d keywords from %d candidate terms", len(keywords), len(counts))
    return keywords


def keyword_terms(keywords: Iterable[Keyword]) -> List[str]:
    return [keyword.term for keyword in keywords]


__all__ = ["DEFAULT_KEYWORD_LIMIT", "STOP_WORDS", "extract_keywords", "keyword_terms"]
