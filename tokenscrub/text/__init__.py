"""Token text transforms, predicates, and upstream token sources.

This package provides the pure building blocks used by the stream filters.
"""

from .gate import has_letter_or_digit
from .normalizer import TokenNormalizer, normalize_token_text
from .token_source import iter_file_tokens, iter_text_tokens, tokens_from_strings

__all__ = [
    "TokenNormalizer",
    "has_letter_or_digit",
    "iter_file_tokens",
    "iter_text_tokens",
    "normalize_token_text",
    "tokens_from_strings",
]
