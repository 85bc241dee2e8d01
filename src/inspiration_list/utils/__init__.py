"""Utility modules for inspiration-list."""

from .ids import generate_id
from .text import (
    contains_cjk,
    count_words,
    detect_language,
    normalize_whitespace,
    tokenize,
    truncate,
)

__all__ = [
    "generate_id",
    "contains_cjk",
    "count_words",
    "detect_language",
    "normalize_whitespace",
    "tokenize",
    "truncate",
]
