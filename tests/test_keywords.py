from social_share.keywords import extract_keywords, keyword_terms


def test_keywords_exclude_stop_words_and_short_tokens():
    body = "AI helps teams ship faster. Our new tool cuts review time by half. Try it today!"
    terms = keyword_terms(extract_keywords(body))

    assert {"teams", "tool", "review"} <= set(terms)
    assert not {"our", "by", "it", "ai"} & {term.lower() for term in terms}


def test_keywords_ranked_by_frequency_then_first_appearance():
    body = "Zebra apple mango. Apple mango. Mango!"
    keywords = extract_keywords(body)

    assert [keyword.term for keyword in keywords] == ["mango", "apple", "Zebra"]
    assert [keyword.score for keyword in keywords] == [3, 2, 1]


def test_keywords_keep_most_common_casing():
    body = "SaaS pricing matters. Every SaaS team knows saas pricing."
    terms = keyword_terms(extract_keywords(body))
    assert terms[0] == "SaaS"
    assert terms.count("SaaS") == 1


def test_keywords_respect_limit_and_uniqueness():
    body = " ".join(f"term{index} Term{index}" for index in range(30))
    terms = keyword_terms(extract_keywords(body, limit=10))

    assert len(terms) == 10
    assert len({term.lower() for term in terms}) == len(terms)


def test_keywords_accept_custom_stop_words_and_empty_input():
    assert extract_keywords("") == []
    terms = keyword_terms(extract_keywords("growth growth marketing", stop_words=["growth"]))
    assert terms == ["marketing"]


def test_keywords_skip_numbers():
    assert keyword_terms(extract_keywords("2024 2024 2024 roadmap")) == ["roadmap"]


def test_curly_apostrophe_contractions_are_stop_words():
    body = "We’re sure you’re right. We’re here, it’s fine. You’re welcome, it’s launch day."
    terms = keyword_terms(extract_keywords(body))

    assert "launch" in terms
    assert not {"we're", "you're", "it's"} & {term.lower().replace("’", "'") for term in terms}
