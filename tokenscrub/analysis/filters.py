"""Pull-based token filters.

Responsibilities:
- Drive an upstream token iterator one token at a time, forwarding only
  accepted tokens in their original order.
- Provide the punctuation filter that normalizes token text and drops tokens
  without letters or digits.

Key types:
- `FilterState`: driver state reported between pulls.
- `TokenFilter`: base class implementing the pull loop.
- `PunctuationTokenFilter`: normalize-then-gate filter.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import replace
from enum import Enum

from ..models.datatypes import FilterStats, Token
from ..text.gate import has_letter_or_digit
from ..text.normalizer import normalize_token_text
from ..text.token_source import tokens_from_strings

FilterFactory = Callable[[Iterable[Token]], Iterator[Token]]


class FilterState(Enum):
    """Lifecycle states of a token filter."""

    PULLING = "pulling"
    EMITTING = "emitting"
    EXHAUSTED = "exhausted"


class TokenFilter:
    """Base class for single-use, forward-only token filters.

    Subclasses implement `accept`. Each `next()` call pulls upstream tokens
    until one is accepted or the upstream ends. Upstream exceptions propagate
    unchanged; afterwards the filter reports end-of-stream without pulling
    again.
    """

    def __init__(self, upstream: Iterable[Token]) -> None:
        """Wrap an upstream token iterable."""

        self._upstream = iter(upstream)
        self.state = FilterState.PULLING
        self.stats = FilterStats()

    def accept(self, token: Token) -> Token | None:
        """Return the token to forward, or `None` to drop it."""

        raise NotImplementedError

    def __iter__(self) -> TokenFilter:
        return self

    def __next__(self) -> Token:
        if self.state is FilterState.EXHAUSTED:
            raise StopIteration

        self.state = FilterState.PULLING
        while True:
            try:
                token = next(self._upstream)
            except StopIteration:
                self.state = FilterState.EXHAUSTED
                raise StopIteration from None
            except BaseException:
                self.state = FilterState.EXHAUSTED
                raise

            self.stats.pulled += 1
            accepted = self.accept(token)
            if accepted is None:
                self.stats.dropped += 1
                continue

            self.stats.emitted += 1
            self.state = FilterState.EMITTING
            return accepted


class PunctuationTokenFilter(TokenFilter):
    """Strip dots, parentheses, brackets, and wrapping quotes; drop empty tokens.

    Examples: `"a.u.b."` -> `"aub"`, `"bel(len)"` -> `"bellen"`,
    `"'x'"` -> `"x"`; `"-"` and `"..."` are dropped.
    """

    @staticmethod
    def process(text: str) -> str:
        """Return normalized token text without applying the letter/digit check."""

        return normalize_token_text(text)

    def accept(self, token: Token) -> Token | None:
        """Normalize the token text and keep it only when it has a letter or digit."""

        normalized = normalize_token_text(token.text)
        if not has_letter_or_digit(normalized):
            return None
        return replace(token, text=normalized)


def chain_filters(
    upstream: Iterable[Token],
    factories: Sequence[FilterFactory],
) -> Iterator[Token]:
    """Wrap `upstream` with each filter factory in order and return the last stage."""

    stream: Iterator[Token] = iter(upstream)
    for factory in factories:
        stream = factory(stream)
    return stream


def filter_tokens(tokens: Iterable[Token]) -> Iterator[Token]:
    """Lazily yield tokens surviving the punctuation filter."""

    return PunctuationTokenFilter(tokens)


def scrub_texts(texts: Iterable[str]) -> list[str]:
    """Return surviving normalized texts for a sequence of raw token strings."""

    return [token.text for token in PunctuationTokenFilter(tokens_from_strings(texts))]
