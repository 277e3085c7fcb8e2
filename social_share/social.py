"""Social post generation utilities."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Tuple

from .models import CallToAction, SocialPost, Tone
from .text import truncate_words

LOGGER = logging.getLogger(__name__)

SECTION_SEPARATOR = "\n\n"
MIN_SUMMARY_CHARS = 20


@dataclass(frozen=True)
class PlatformProfile:
    """Length budget and link policy for one platform."""

    key: str
    label: str
    max_chars: int
    embeds_links: bool = True
    include_summary: bool = True
    max_hashtags: int = 5
    reserved_hashtags: int = 1


@dataclass(frozen=True)
class VoiceProfile:
    short_hook: str
    long_hook: str
    summary_lead: str
    audience: str


@dataclass(frozen=True)
class CallToActionTemplate:
    with_link: str
    link_in_bio: str
    without_link: str


@dataclass(frozen=True)
class PostContext:
    """Everything the composer needs to write one post."""

    title: str
    summary: str
    tone: Tone
    call_to_action: CallToAction
    hashtags: Tuple[str, ...] = ()
    url: Optional[str] = None
    audience: Optional[str] = None


PLATFORMS: Tuple[PlatformProfile, ...] = (
    PlatformProfile("x", "X", 280, include_summary=False, max_hashtags=3, reserved_hashtags=2),
    PlatformProfile("linkedin", "LinkedIn", 3000, max_hashtags=5),
    PlatformProfile("facebook", "Facebook", 2000, max_hashtags=3),
    PlatformProfile("instagram", "Instagram", 2200, embeds_links=False, max_hashtags=8, reserved_hashtags=3),
)

PLATFORM_INDEX: Mapping[str, PlatformProfile] = MappingProxyType({profile.key: profile for profile in PLATFORMS})

VOICE_PROFILES: Mapping[Tone, VoiceProfile] = MappingProxyType(
    {
        Tone.PROFESSIONAL: VoiceProfile(
            short_hook="New on the blog: {title}",
            long_hook="New on the blog, and worth a few minutes of your day: {title}",
            summary_lead="Key takeaways:",
            audience="Particularly relevant for {audience}.",
        ),
        Tone.CASUAL: VoiceProfile(
            short_hook="Quick one for you: {title}",
            long_hook="Quick one for you, fresh off the blog: {title}",
            summary_lead="The short version?",
            audience="Wrote this one with {audience} in mind.",
        ),
        Tone.ENTHUSIASTIC: VoiceProfile(
            short_hook="Big news! {title}",
            long_hook="Big news, and we can't wait to share it! {title}",
            summary_lead="Here's why we're excited:",
            audience="Calling all {audience}!",
        ),
        Tone.AUTHORITATIVE: VoiceProfile(
            short_hook="What you need to know: {title}",
            long_hook="Our latest analysis, and what you need to know: {title}",
            summary_lead="The evidence:",
            audience="Essential reading for {audience}.",
        ),
        Tone.PLAYFUL: VoiceProfile(
            short_hook="Plot twist: {title}",
            long_hook="Grab a coffee, plot twist incoming: {title}",
            summary_lead="Spoiler alert:",
            audience="Psst, {audience}, this one's for you.",
        ),
    }
)

CTA_TEMPLATES: Mapping[CallToAction, CallToActionTemplate] = MappingProxyType(
    {
        CallToAction.READ_NOW: CallToActionTemplate(
            with_link="Read now: {url}",
            link_in_bio="Read now, link in bio.",
            without_link="Read now on the blog.",
        ),
        CallToAction.LEARN_MORE: CallToActionTemplate(
            with_link="Learn more: {url}",
            link_in_bio="Learn more via the link in bio.",
            without_link="Learn more on the blog.",
        ),
        CallToAction.JOIN_CONVERSATION: CallToActionTemplate(
            with_link="Join the conversation: {url}",
            link_in_bio="Join the conversation in the comments. Full post via the link in bio.",
            without_link="Join the conversation in the comments.",
        ),
        CallToAction.SUBSCRIBE: CallToActionTemplate(
            with_link="Subscribe for more like this: {url}",
            link_in_bio="Subscribe for more like this, link in bio.",
            without_link="Subscribe so you never miss a post.",
        ),
        CallToAction.CONTACT: CallToActionTemplate(
            with_link="Talk to us: {url}",
            link_in_bio="Talk to us, link in bio.",
            without_link="Talk to us, our inbox is open.",
        ),
    }
)


def _render_cta(template: CallToActionTemplate, url: Optional[str], profile: PlatformProfile) -> str:
    if not url:
        return template.without_link
    if profile.embeds_links:
        return template.with_link.format(url=url)
    return template.link_in_bio


def _hashtag_block_length(tags: Iterable[str]) -> int:
    tags = list(tags)
    if not tags:
        return 0
    return len(SECTION_SEPARATOR) + len(" ".join(tags))


def _append_hashtags(copy: str, tags: Iterable[str], max_chars: int) -> str:
    added = 0
    for tag in tags:
        piece = (SECTION_SEPARATOR if added == 0 else " ") + tag
        if len(copy) + len(piece) > max_chars:
            break
        copy += piece
        added += 1
    return copy


def compose_post(
    profile: PlatformProfile,
    context: PostContext,
    voices: Mapping[Tone, VoiceProfile] = VOICE_PROFILES,
    ctas: Mapping[CallToAction, CallToActionTemplate] = CTA_TEMPLATES,
) -> SocialPost:
    """Render the copy for a single platform within its character budget.

    The call to action and a reserve for the first few hashtags are kept
    intact; the hook, audience line and summary share what is left, in that
    order of priority.
    """

    voice = voices[context.tone]
    hook_template = voice.long_hook if profile.include_summary else voice.short_hook
    hook = hook_template.format(title=context.title.strip())
    cta_line = _render_cta(ctas[context.call_to_action], context.url, profile)
    tags = list(context.hashtags[: profile.max_hashtags])

    reserved = _hashtag_block_length(tags[: profile.reserved_hashtags])
    room = profile.max_chars - len(cta_line) - len(SECTION_SEPARATOR) - reserved

    hook_text = hook if len(hook) <= room else truncate_words(hook, max(room, 0))
    room -= len(hook_text)

    audience_text = ""
    if context.audience and context.audience.strip():
        candidate = voice.audience.format(audience=context.audience.strip())
        if len(SECTION_SEPARATOR) + len(candidate) <= room:
            audience_text = candidate
            room -= len(SECTION_SEPARATOR) + len(candidate)

    summary_text = ""
    if profile.include_summary and context.summary:
        summary_room = room - len(SECTION_SEPARATOR)
        if summary_room >= len(voice.summary_lead) + 1 + MIN_SUMMARY_CHARS:
            summary_text = truncate_words(f"{voice.summary_lead} {context.summary}", summary_room)

    sections = [part for part in (hook_text, summary_text, audience_text, cta_line) if part]
    copy = _append_hashtags(SECTION_SEPARATOR.join(sections), tags, profile.max_chars)

    if len(copy) > profile.max_chars:
        LOGGER.warning("Copy for %s exceeded %d chars; clamping", profile.key, profile.max_chars)
        copy = truncate_words(copy, profile.max_chars)
    return SocialPost(platform=profile.label, copy=copy)


def resolve_platforms(keys: Optional[Iterable[str]] = None) -> List[PlatformProfile]:
    """Return the requested platform profiles in their fixed display order."""

    if keys is None:
        return list(PLATFORMS)
    wanted = {key.strip().lower() for key in keys}
    unknown = wanted - set(PLATFORM_INDEX)
    if unknown:
        raise ValueError(f"Unknown platform(s): {', '.join(sorted(unknown))}")
    return [profile for profile in PLATFORMS if profile.key in wanted]


def compose_posts(context: PostContext, platforms: Optional[Iterable[str]] = None) -> List[SocialPost]:
    """Generate one post per platform."""

    posts = []
    for profile in resolve_platforms(platforms):
        post = compose_post(profile, context)
        LOGGER.info("Generated %d-char post for %s", len(post.copy), profile.key)
        posts.append(post)
    return posts


__all__ = [
    "CTA_TEMPLATES",
    "PLATFORMS",
    "PLATFORM_INDEX",
    "PlatformProfile",
    "PostContext",
    "VOICE_PROFILES",
    "VoiceProfile",
    "compose_post",
    "compose_posts",
    "resolve_platforms",
]
