from social_share.text import derive_title, normalize_whitespace, split_sentences, truncate_words


def test_normalize_whitespace_collapses_runs_and_drops_control_characters():
    assert normalize_whitespace("  Hello\t\tworld\n\nagain\x00 ") == "Hello world again"
    assert normalize_whitespace("bell\x07ring") == "bellring"
    assert normalize_whitespace("") == ""
    assert normalize_whitespace(None) == ""


def test_split_sentences_keeps_terminators_attached():
    assert list(split_sentences("One. Two! Three? Four")) == ["One.", "Two!", "Three?", "Four"]


def test_split_sentences_without_punctuation_returns_whole_text():
    assert list(split_sentences("  no punctuation here  ")) == ["no punctuation here"]
    assert list(split_sentences("")) == []


def test_split_sentences_can_be_restarted():
    text = "First one. Second one."
    assert list(split_sentences(text)) == list(split_sentences(text)) == ["First one.", "Second one."]


def test_derive_title_uses_first_sentence_capped_at_120_chars():
    assert derive_title("Short opener. Then more.") == "Short opener."
    long_sentence = "word " * 60
    assert len(derive_title(long_sentence)) == 120
    assert derive_title("   ") is None


def test_truncate_words_cuts_on_word_boundary():
    assert truncate_words("hello world foo", 10) == "hello…"
    assert truncate_words("hello world foo", 12) == "hello world…"
    assert truncate_words("short", 10) == "short"


def test_normalize_whitespace_drops_invisible_format_characters():
    assert normalize_whitespace("zero\u200bwidth\ufeff mark") == "zerowidth mark"
    assert normalize_whitespace("\u200b\ufeff") == ""
