"""
String utility functions for the newsletter subscription service.

This module provides the validation applied to untrusted strings before they
are used as lookup keys or stored, and random string generation for
subscription tokens.

Lengths are measured in grapheme clusters (user-perceived characters) rather
than code points or bytes, so a flag emoji or a letter followed by combining
marks counts once.
"""

import secrets

import regex

# Import centralized constants
from core.utils.core_utils_constants import (
    FORBIDDEN_INPUT_CHARACTERS,
    GRAPHEME_PATTERN,
    DEFAULT_RANDOM_STRING_LENGTH,
    DEFAULT_RANDOM_STRING_CHARS,
)

# Compiled regexes for better performance
GRAPHEME_REGEX = regex.compile(GRAPHEME_PATTERN)


def count_graphemes(text: str) -> int:
    """
    Count the user-perceived characters in a string.

    Args:
        text: String to measure

    Returns:
        Number of extended grapheme clusters in ``text``
    """
    return sum(1 for _ in GRAPHEME_REGEX.finditer(text))


def contains_forbidden_characters(text: str) -> bool:
    """Return True if ``text`` contains any of ``/ ( ) " < > \\ { }``."""
    return any(char in FORBIDDEN_INPUT_CHARACTERS for char in text)


def is_valid_input_string(text: str, max_length: int) -> bool:
    """
    Check whether an untrusted string is acceptable as a lookup key.

    A string is rejected when it is empty or whitespace only, when it is longer
    than ``max_length`` grapheme clusters, or when it contains a forbidden
    character. Never raises.

    Args:
        text: User-supplied string
        max_length: Maximum number of grapheme clusters

    Returns:
        True if the string may be used, False otherwise
    """
    if not isinstance(text, str):
        return False

    if not text.strip():
        return False

    if count_graphemes(text) > max_length:
        return False

    return not contains_forbidden_characters(text)


def generate_random_string(length: int = DEFAULT_RANDOM_STRING_LENGTH,
                           chars: str = DEFAULT_RANDOM_STRING_CHARS) -> str:
    """
    Generate a random string of specified length.

    Args:
        length: Length of the random string (default from core_utils_constants)
        chars: Character set to use (default from core_utils_constants)

    Returns:
        Random string
    """
    # Use cryptographically strong random generation
    return ''.join(secrets.choice(chars) for _ in range(length))
