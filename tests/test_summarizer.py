import pytest

from social_share.reading_time import estimate_reading_time
from social_share.summarizer import summarize

SENTENCE = ("alpha " * 15).strip() + "."


def test_short_body_is_returned_unchanged():
    body = "AI helps teams ship faster. Our new tool cuts review time by half. Try it today!"
    assert summarize(body) == body


def test_summary_stops_at_sentence_boundaries():
    body = " ".join([SENTENCE] * 5)

    summary = summarize(body, max_sentences=3, max_chars=280)
    assert summary == " ".join([SENTENCE] * 3)
    assert len(summary) <= 280

    assert summarize(body, max_sentences=2, max_chars=280) == " ".join([SENTENCE] * 2)
    assert summarize(body, max_sentences=3, max_chars=200) == " ".join([SENTENCE] * 2)


def test_overlong_first_sentence_is_truncated_with_ellipsis():
    body = ("word " * 100).strip() + ". Second sentence."
    summary = summarize(body, max_chars=50)

    assert summary.endswith("…")
    assert len(summary) <= 50
    assert set(summary[:-1].split()) == {"word"}


def test_empty_body_yields_empty_summary():
    assert summarize("") == ""


@pytest.mark.parametrize(
    "words, expected",
    [(0, "1 min read"), (1, "1 min read"), (200, "1 min read"), (201, "2 min read"), (1000, "5 min read")],
)
def test_reading_time(words, expected):
    assert estimate_reading_time(" ".join(["word"] * words)) == expected


def test_reading_time_is_monotonic():
    minutes = [int(estimate_reading_time("w " * count).split()[0]) for count in range(0, 2000, 37)]
    assert minutes == sorted(minutes)
    assert min(minutes) == 1
