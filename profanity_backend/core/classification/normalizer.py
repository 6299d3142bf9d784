"""
Whitelist normalization.

Dependencies: None
System role: First stage of the classification pipeline
"""

from collections.abc import Iterable


def count_words(text: str) -> int:
    """Number of whitespace-delimited tokens."""
    return len(text.split())


def normalize(text: str, whitelist: Iterable[str]) -> str:
    """
    Drop whitelisted tokens and rejoin the rest with single spaces.

    Args:
        text: Raw message text
        whitelist: Tokens to drop, compared case-insensitively

    Returns:
        str: Normalized text, empty if every token was whitelisted
    """
    allowed = {word.lower() for word in whitelist}
    return " ".join(token for token in text.split() if token.lower() not in allowed)
