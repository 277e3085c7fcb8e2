import itertools

import pytest

from social_share.models import CallToAction, Tone
from social_share.social import (
    CTA_TEMPLATES,
    PLATFORM_INDEX,
    PLATFORMS,
    VOICE_PROFILES,
    PostContext,
    compose_post,
    compose_posts,
    resolve_platforms,
)

LONG_SUMMARY = ("Our marketing team embraces experimentation and structured measurement. " * 4).strip()
HASHTAGS = ("#ProductMarketing", "#SaaS", "#growth", "#teams", "#review", "#pricing", "#launch", "#tooling")


def _context(**overrides):
    values = {
        "title": "How our team halved review time with a new tool",
        "summary": "AI helps teams ship faster. Our new tool cuts review time by half.",
        "tone": Tone.PROFESSIONAL,
        "call_to_action": CallToAction.READ_NOW,
        "hashtags": HASHTAGS,
        "url": "https://example.com/blog/review-time",
        "audience": "SaaS marketers",
    }
    values.update(overrides)
    return PostContext(**values)


@pytest.mark.parametrize("tone, cta", list(itertools.product(Tone, CallToAction)))
def test_every_post_fits_platform_budget(tone, cta):
    context = _context(
        title="A remarkably long headline " * 6,
        summary=LONG_SUMMARY,
        tone=tone,
        call_to_action=cta,
    )
    for profile in PLATFORMS:
        post = compose_post(profile, context)
        assert len(post.copy) <= profile.max_chars
        assert post.platform == profile.label


def test_overlong_url_is_still_clamped_to_budget():
    context = _context(url="https://example.com/" + "a" * 500)
    post = compose_post(PLATFORM_INDEX["x"], context)
    assert len(post.copy) <= 280


def test_links_embedded_or_pointed_to_bio():
    context = _context()
    x_post = compose_post(PLATFORM_INDEX["x"], context)
    instagram_post = compose_post(PLATFORM_INDEX["instagram"], context)

    assert "Read now: https://example.com/blog/review-time" in x_post.copy
    assert "https://" not in instagram_post.copy
    assert CTA_TEMPLATES[CallToAction.READ_NOW].link_in_bio in instagram_post.copy


def test_post_without_url_uses_plain_call_to_action():
    post = compose_post(PLATFORM_INDEX["linkedin"], _context(url=None, call_to_action=CallToAction.SUBSCRIBE))
    assert CTA_TEMPLATES[CallToAction.SUBSCRIBE].without_link in post.copy


def test_hook_summary_audience_and_hashtags_on_roomy_platform():
    context = _context(tone=Tone.PLAYFUL)
    post = compose_post(PLATFORM_INDEX["linkedin"], context)
    voice = VOICE_PROFILES[Tone.PLAYFUL]

    assert post.copy.startswith(voice.long_hook.format(title=context.title))
    assert voice.summary_lead in post.copy
    assert "SaaS marketers" in post.copy
    assert post.copy.endswith(" ".join(HASHTAGS[:PLATFORM_INDEX["linkedin"].max_hashtags]))


def test_short_platform_skips_summary_and_limits_hashtags():
    context = _context(tone=Tone.CASUAL)
    post = compose_post(PLATFORM_INDEX["x"], context)

    assert post.copy.startswith(VOICE_PROFILES[Tone.CASUAL].short_hook.format(title=context.title))
    assert context.summary not in post.copy
    assert post.copy.endswith("#ProductMarketing #SaaS #growth")


def test_tight_budget_truncates_content_not_call_to_action():
    context = _context(title="Headline " * 40, audience=None)
    post = compose_post(PLATFORM_INDEX["x"], context)

    assert "…" in post.copy
    assert "Read now: https://example.com/blog/review-time" in post.copy
    assert "#ProductMarketing #SaaS" in post.copy


def test_compose_posts_is_deterministic_and_ordered():
    context = _context()
    first = compose_posts(context)
    second = compose_posts(context)

    assert first == second
    assert [post.platform for post in first] == ["X", "LinkedIn", "Facebook", "Instagram"]


def test_resolve_platforms_keeps_fixed_order_and_rejects_unknown():
    assert [profile.key for profile in resolve_platforms(["instagram", "X"])] == ["x", "instagram"]
    with pytest.raises(ValueError):
        resolve_platforms(["myspace"])
