"""Unit tests for whitelist normalization."""

from profanity_backend.core.classification.normalizer import count_words, normalize


def test_normalize_drops_whitelisted_tokens_case_insensitively():
    assert normalize("I SWEAR this is fine", ["swear"]) == "I this is fine"


def test_normalize_collapses_whitespace():
    assert normalize("  hello \t  world\n", []) == "hello world"


def test_normalize_with_empty_whitelist_is_noop_for_single_spaced_text():
    assert normalize("hello there world", []) == "hello there world"


def test_normalize_returns_empty_when_every_token_is_whitelisted():
    assert normalize("Swear swear SWEAR", ["swear"]) == ""


def test_normalize_whitelist_entries_are_matched_regardless_of_case():
    assert normalize("heck yes", ["HECK"]) == "yes"


def test_normalize_only_drops_whole_tokens():
    assert normalize("swearing swear", ["swear"]) == "swearing"


def test_count_words_ignores_repeated_whitespace():
    assert count_words("one  two\tthree\n") == 3
    assert count_words("") == 0
