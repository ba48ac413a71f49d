"""Shared typed data models for Tokenscrub.

This package contains dataclasses exchanged between token sources, filters,
and the file pipeline.
"""

from .datatypes import FilterStats, ScrubReport, Token

__all__ = [
    "FilterStats",
    "ScrubReport",
    "Token",
]
