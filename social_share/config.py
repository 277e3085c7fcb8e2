"""Configuration utilities for the social share generator."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

LOGGER = logging.getLogger(__name__)

DEFAULT_PLATFORMS = ["x", "linkedin", "facebook", "instagram"]


def _strtobool(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    value = value.strip().lower()
    if value in {"1", "true", "yes", "y", "on"}:
        return True
    if value in {"0", "false", "no", "n", "off"}:
        return False
    LOGGER.warning("Unrecognised boolean value '%s', falling back to default %s", value, default)
    return default


def _parse_int(value: Optional[str], default: int, minimum: int = 1) -> int:
    if value is None or not value.strip():
        return default
    try:
        parsed = int(value.strip())
    except ValueError:
        LOGGER.warning("Unrecognised integer value '%s', falling back to default %s", value, default)
        return default
    if parsed < minimum:
        LOGGER.warning("Value %s below minimum %s, falling back to default %s", parsed, minimum, default)
        return default
    return parsed


def _parse_list(value: Optional[str], default: Iterable[str]) -> List[str]:
    if value is None:
        return list(default)
    value = value.strip()
    if not value:
        return list(default)
    try:
        parsed = json.loads(value)
        if isinstance(parsed, list):
            return [str(item) for item in parsed]
    except json.JSONDecodeError:
        pass
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class GeneratorConfig:
    """Holds budgets, limits and runtime defaults for the generator."""

    SUMMARY_MAX_SENTENCES: int = 3
    SUMMARY_MAX_CHARS: int = 280
    KEYWORD_LIMIT: int = 10
    HASHTAG_CAP: int = 8
    WORDS_PER_MINUTE: int = 200
    FEATURE_URL_FETCH: bool = True
    FETCH_TIMEOUT_SECONDS: int = 10
    FETCH_USER_AGENT: str = "SocialShareBot/1.0 (+https://example.com/bot)"
    PLATFORMS: List[str] = field(default_factory=lambda: list(DEFAULT_PLATFORMS))

    def snapshot(self) -> dict:
        """Return a serialisable snapshot of the current settings."""

        return {
            "SUMMARY_MAX_SENTENCES": self.SUMMARY_MAX_SENTENCES,
            "SUMMARY_MAX_CHARS": self.SUMMARY_MAX_CHARS,
            "KEYWORD_LIMIT": self.KEYWORD_LIMIT,
            "HASHTAG_CAP": self.HASHTAG_CAP,
            "WORDS_PER_MINUTE": self.WORDS_PER_MINUTE,
            "FEATURE_URL_FETCH": self.FEATURE_URL_FETCH,
            "FETCH_TIMEOUT_SECONDS": self.FETCH_TIMEOUT_SECONDS,
            "FETCH_USER_AGENT": self.FETCH_USER_AGENT,
            "PLATFORMS": list(self.PLATFORMS),
        }


def load_config(overrides: Optional[dict] = None) -> GeneratorConfig:
    """Load configuration from environment variables with optional overrides."""

    config = GeneratorConfig(
        SUMMARY_MAX_SENTENCES=_parse_int(os.getenv("SUMMARY_MAX_SENTENCES"), 3),
        SUMMARY_MAX_CHARS=_parse_int(os.getenv("SUMMARY_MAX_CHARS"), 280, minimum=20),
        KEYWORD_LIMIT=_parse_int(os.getenv("KEYWORD_LIMIT"), 10),
        HASHTAG_CAP=_parse_int(os.getenv("HASHTAG_CAP"), 8),
        WORDS_PER_MINUTE=_parse_int(os.getenv("WORDS_PER_MINUTE"), 200),
        FEATURE_URL_FETCH=_strtobool(os.getenv("FEATURE_URL_FETCH"), True),
        FETCH_TIMEOUT_SECONDS=_parse_int(os.getenv("FETCH_TIMEOUT_SECONDS"), 10),
        FETCH_USER_AGENT=os.getenv("FETCH_USER_AGENT") or GeneratorConfig.FETCH_USER_AGENT,
        PLATFORMS=_parse_list(os.getenv("PLATFORMS"), DEFAULT_PLATFORMS),
    )

    if overrides:
        for key, value in overrides.items():
            if hasattr(config, key):
                setattr(config, key, value)
            else:
                raise AttributeError(f"Unknown config option: {key}")

    LOGGER.debug("Loaded generator config: %s", config.snapshot())
    return config


__all__ = ["DEFAULT_PLATFORMS", "GeneratorConfig", "load_config"]
