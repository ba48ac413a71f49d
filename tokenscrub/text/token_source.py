"""Upstream token producers for feeding stream filters.

Responsibilities:
- Wrap already-split strings or whitespace-delimited text as `Token` records.
- Read files lazily so arbitrarily large inputs stream through the filters.

These adapters only split on whitespace; linguistic segmentation is left to a
real tokenizer placed in front of the filters.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path
import re

from ..models.datatypes import Token

_NON_WHITESPACE_RE = re.compile(r"\S+")


def tokens_from_strings(texts: Iterable[str]) -> Iterator[Token]:
    """Yield tokens for pre-split strings with offsets of a space-joined text."""

    offset = 0
    for position, text in enumerate(texts):
        yield Token(
            text=text,
            start_offset=offset,
            end_offset=offset + len(text),
            position=position,
        )
        offset += len(text) + 1


def iter_text_tokens(
    text: str,
    *,
    base_offset: int = 0,
    base_position: int = 0,
) -> Iterator[Token]:
    """Yield maximal non-whitespace runs of `text` as tokens.

    Args:
        text: Source text.
        base_offset: Offset added to every start/end offset.
        base_position: Position assigned to the first yielded token.
    """

    for index, match in enumerate(_NON_WHITESPACE_RE.finditer(text)):
        yield Token(
            text=match.group(),
            start_offset=base_offset + match.start(),
            end_offset=base_offset + match.end(),
            position=base_position + index,
        )


def iter_file_tokens(path: Path, encoding: str = "utf-8") -> Iterator[Token]:
    """Yield whitespace-delimited tokens from a file, one line at a time.

    Offsets are character offsets from the start of the file. Open and decode
    failures propagate to the caller.
    """

    offset = 0
    position = 0
    with path.open("r", encoding=encoding, newline="") as handle:
        for line in handle:
            for token in iter_text_tokens(line, base_offset=offset, base_position=position):
                position = token.position + 1
                yield token
            offset += len(line)
