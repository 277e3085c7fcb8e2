"""Shared datamodels for the social share generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class Tone(str, Enum):
    """Voice profile used when phrasing generated copy."""

    PROFESSIONAL = "professional"
    CASUAL = "casual"
    ENTHUSIASTIC = "enthusiastic"
    AUTHORITATIVE = "authoritative"
    PLAYFUL = "playful"


class CallToAction(str, Enum):
    """Closing directive appended to every post."""

    READ_NOW = "readNow"
    LEARN_MORE = "learnMore"
    JOIN_CONVERSATION = "joinConversation"
    SUBSCRIBE = "subscribe"
    CONTACT = "contact"


@dataclass(frozen=True)
class ArticleInput:
    """Input payload for a single generation run."""

    title: str
    body: str
    tone: Tone = Tone.PROFESSIONAL
    call_to_action: CallToAction = CallToAction.READ_NOW
    url: Optional[str] = None
    audience: Optional[str] = None
    custom_hashtags: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Keyword:
    term: str
    score: int


@dataclass(frozen=True)
class SocialPost:
    platform: str
    copy: str

    def to_dict(self) -> Dict[str, str]:
        return {"platform": self.platform, "copy": self.copy}


@dataclass
class GenerationResult:
    """Result payload produced by the generator."""

    title: str
    summary: str
    keywords: List[str]
    estimated_reading_time: str
    hashtags: List[str] = field(default_factory=list)
    posts: List[SocialPost] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Serialise the result for external consumers."""

        return {
            "title": self.title,
            "summary": self.summary,
            "keywords": list(self.keywords),
            "estimatedReadingTime": self.estimated_reading_time,
            "hashtags": list(self.hashtags),
            "posts": [post.to_dict() for post in self.posts],
        }


__all__ = [
    "ArticleInput",
    "CallToAction",
    "GenerationResult",
    "Keyword",
    "SocialPost",
    "Tone",
]
