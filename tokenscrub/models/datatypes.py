"""Core datatypes shared across Tokenscrub modules.

Responsibilities:
- Represent token records passed between producers and filters.
- Track per-filter counters and per-run results.

Key types:
- `Token`, `FilterStats`, and `ScrubReport`.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Token:
    """One lexical unit emitted by an upstream producer.

    Attributes:
        text: Token text.
        start_offset: Inclusive character offset in the source text.
        end_offset: Exclusive character offset in the source text.
        position: 0-based token ordinal assigned by the producer.
    """

    text: str
    start_offset: int = 0
    end_offset: int = 0
    position: int = 0


@dataclass(slots=True)
class FilterStats:
    """Running counters for one filter instance.

    Attributes:
        pulled: Tokens taken from the upstream producer.
        emitted: Tokens forwarded downstream.
        dropped: Tokens discarded by the filter.
    """

    pulled: int = 0
    emitted: int = 0
    dropped: int = 0

    def as_metadata(self) -> dict[str, str]:
        """Return counters as string metadata for logs and summaries."""

        return {
            "tokens_pulled": str(self.pulled),
            "tokens_emitted": str(self.emitted),
            "tokens_dropped": str(self.dropped),
        }


@dataclass(frozen=True, slots=True)
class ScrubReport:
    """Result of one file-level scrub run."""

    input_path: Path
    output_path: Path
    tokens_read: int
    tokens_kept: int
    tokens_dropped: int
