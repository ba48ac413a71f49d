"""Streaming token filters.

Filters consume an upstream iterable of `Token` records and are themselves
iterators of `Token`, so they nest into chains of any length.
"""

from .filters import (
    FilterState,
    PunctuationTokenFilter,
    TokenFilter,
    chain_filters,
    filter_tokens,
    scrub_texts,
)

__all__ = [
    "FilterState",
    "PunctuationTokenFilter",
    "TokenFilter",
    "chain_filters",
    "filter_tokens",
    "scrub_texts",
]
