"""
Core utility functions for the newsletter subscription service.

Key modules:
- string: Input validation and random string generation
"""

from .string import (
    count_graphemes,
    contains_forbidden_characters,
    is_valid_input_string,
    generate_random_string
)

__all__ = [
    'count_graphemes',
    'contains_forbidden_characters',
    'is_valid_input_string',
    'generate_random_string'
]
