"""Pipeline orchestration module."""

from __future__ import annotations

import logging
import time
from typing import Optional

from .config import GeneratorConfig
from .errors import EmptyContentError
from .hashtags import assemble_hashtags
from .keywords import extract_keywords, keyword_terms
from .models import ArticleInput, GenerationResult
from .reading_time import estimate_reading_time
from .social import PostContext, compose_posts
from .summarizer import summarize
from .text import derive_title, normalize_whitespace

LOGGER = logging.getLogger(__name__)

FALLBACK_TITLE = "Untitled blog post"


class StepTimer:
    """Context manager to log step durations."""

    def __init__(self, name: str):
        self.name = name
        self.start = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        duration = time.perf_counter() - self.start
        LOGGER.info("Step '%s' completed in %.3fs", self.name, duration)


def generate(article: ArticleInput, config: Optional[GeneratorConfig] = None) -> GenerationResult:
    """Turn an article into a summary, keywords, reading time and social posts.

    Raises EmptyContentError when the body is empty after normalization; any
    other gap in the input is filled with a default.
    """

    config = config or GeneratorConfig()

    with StepTimer("normalize"):
        body = normalize_whitespace(article.body)
    if not body:
        raise EmptyContentError()

    title = normalize_whitespace(article.title) or derive_title(body) or FALLBACK_TITLE

    with StepTimer("keywords"):
        keywords = keyword_terms(extract_keywords(body, limit=config.KEYWORD_LIMIT))
    with StepTimer("summary"):
        summary = summarize(body, config.SUMMARY_MAX_SENTENCES, config.SUMMARY_MAX_CHARS)
    with StepTimer("reading_time"):
        reading_time = estimate_reading_time(body, config.WORDS_PER_MINUTE)
    with StepTimer("hashtags"):
        hashtags = assemble_hashtags(keywords, article.custom_hashtags, cap=config.HASHTAG_CAP)

    context = PostContext(
        title=title,
        summary=summary,
        tone=article.tone,
        call_to_action=article.call_to_action,
        hashtags=tuple(hashtags),
        url=(article.url or "").strip() or None,
        audience=article.audience,
    )
    with StepTimer("social_posts"):
        posts = compose_posts(context, config.PLATFORMS)

    LOGGER.info("Generated %d posts with %d keywords and %d hashtags", len(posts), len(keywords), len(hashtags))
    return GenerationResult(
        title=title,
        summary=summary,
        keywords=keywords,
        estimated_reading_time=reading_time,
        hashtags=hashtags,
        posts=posts,
    )


__all__ = ["FALLBACK_TITLE", "StepTimer", "generate"]
