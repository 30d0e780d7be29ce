"""
Core Utility Constants for the newsletter subscription service.

This module centralizes constants used across utility modules within the core/utils
package, providing consistent values for input validation and random string
generation.
"""

from typing import Final, FrozenSet

# ============================================================================
# Input Validation Constants
# ============================================================================

# Characters never accepted in user-supplied lookup keys and names
FORBIDDEN_INPUT_CHARACTERS: Final[FrozenSet[str]] = frozenset('/()"<>\\{}')

# Extended grapheme cluster (user-perceived character)
GRAPHEME_PATTERN: Final[str] = r'\X'

# ============================================================================
# String Generation Constants
# ============================================================================

ASCII_LOWERCASE: Final[str] = 'abcdefghijklmnopqrstuvwxyz'
ASCII_UPPERCASE: Final[str] = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
ASCII_LETTERS: Final[str] = ASCII_LOWERCASE + ASCII_UPPERCASE
DIGITS: Final[str] = '0123456789'

DEFAULT_RANDOM_STRING_LENGTH: Final[int] = 25
DEFAULT_RANDOM_STRING_CHARS: Final[str] = ASCII_LETTERS + DIGITS
