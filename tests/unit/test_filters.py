"""Unit tests for the pull-based punctuation token filter."""

from __future__ import annotations

from collections.abc import Iterator
import itertools

import pytest

from tokenscrub.analysis.filters import (
    FilterState,
    PunctuationTokenFilter,
    TokenFilter,
    chain_filters,
    filter_tokens,
    scrub_texts,
)
from tokenscrub.models.datatypes import Token
from tokenscrub.text.token_source import tokens_from_strings


class _CountingUpstream:
    """Iterator over fixed texts that counts pulls and can fail on one of them."""

    def __init__(
        self,
        texts: list[str],
        fail_on_pull: int | None = None,
        error: BaseException | None = None,
    ) -> None:
        self._texts = list(texts)
        self._fail_on_pull = fail_on_pull
        self.error = error if error is not None else OSError("upstream read failed")
        self.pulls = 0

    def __iter__(self) -> _CountingUpstream:
        return self

    def __next__(self) -> Token:
        self.pulls += 1
        if self.pulls == self._fail_on_pull:
            raise self.error
        if not self._texts:
            raise StopIteration
        return Token(text=self._texts.pop(0), position=self.pulls - 1)


def test_filter_yields_surviving_tokens_in_order() -> None:
    """Drops `-` and `...`, normalizes the rest, and keeps the upstream order."""

    upstream = ["a.u.b.", "-", "bel(len)", "'x'", "123", "..."]

    assert scrub_texts(upstream) == ["aub", "bellen", "x", "123"]


def test_filter_copies_position_metadata_through_unchanged() -> None:
    """Only token text is replaced; offsets and positions stay as produced."""

    token_filter = PunctuationTokenFilter([Token("(a.b)", 7, 12, 3)])

    assert next(token_filter) == Token("ab", 7, 12, 3)


def test_filter_skips_a_run_of_dropped_tokens_within_one_pull() -> None:
    """A single pull consumes dropped tokens until a survivor is found."""

    upstream = _CountingUpstream(["-", "...", "()", "'", "ok."])
    token_filter = PunctuationTokenFilter(upstream)

    assert next(token_filter).text == "ok"
    assert upstream.pulls == 5
    assert token_filter.stats.pulled == 5
    assert token_filter.stats.dropped == 4
    assert token_filter.stats.emitted == 1


def test_filter_reports_exhaustion_forever_without_pulling_again() -> None:
    """After upstream exhaustion every later pull ends immediately."""

    upstream = _CountingUpstream(["x", "-"])
    token_filter = PunctuationTokenFilter(upstream)

    assert [token.text for token in token_filter] == ["x"]
    pulls_at_end = upstream.pulls
    assert token_filter.state is FilterState.EXHAUSTED

    for _ in range(3):
        with pytest.raises(StopIteration):
            next(token_filter)
    assert upstream.pulls == pulls_at_end


def test_filter_propagates_upstream_failure_unchanged_and_stops() -> None:
    """The Nth filter pull raises the upstream's own exception object."""

    upstream = _CountingUpstream(["a", "b", "c"], fail_on_pull=2)
    token_filter = PunctuationTokenFilter(upstream)

    assert next(token_filter).text == "a"
    with pytest.raises(OSError) as exc_info:
        next(token_filter)

    assert exc_info.value is upstream.error
    assert token_filter.state is FilterState.EXHAUSTED
    with pytest.raises(StopIteration):
        next(token_filter)
    assert upstream.pulls == 2


def test_filter_stops_after_interrupt_raised_by_upstream() -> None:
    """Non-`Exception` failures also end the stream without further pulls."""

    upstream = _CountingUpstream(["a", "b"], fail_on_pull=1, error=KeyboardInterrupt())
    token_filter = PunctuationTokenFilter(upstream)

    with pytest.raises(KeyboardInterrupt):
        next(token_filter)

    assert token_filter.state is FilterState.EXHAUSTED
    with pytest.raises(StopIteration):
        next(token_filter)
    assert upstream.pulls == 1


def test_filter_state_moves_from_pulling_to_emitting_to_exhausted() -> None:
    """State reflects the last transition of the driver."""

    token_filter = PunctuationTokenFilter(tokens_from_strings(["a"]))
    assert token_filter.state is FilterState.PULLING

    next(token_filter)
    assert token_filter.state is FilterState.EMITTING

    with pytest.raises(StopIteration):
        next(token_filter)
    assert token_filter.state is FilterState.EXHAUSTED


def test_filter_is_lazy_over_unbounded_upstream() -> None:
    """Survivors can be taken from an endless producer without materializing it."""

    endless = (
        Token(text="..." if index % 2 else f"w.{index}")
        for index in itertools.count()
    )

    taken = [token.text for token in itertools.islice(filter_tokens(endless), 3)]

    assert taken == ["w0", "w2", "w4"]


def test_filter_handles_empty_upstream() -> None:
    """An empty producer yields an empty stream."""

    assert list(PunctuationTokenFilter([])) == []


def test_process_matches_normalization_without_dropping() -> None:
    """The static helper only normalizes; dropping is the filter's job."""

    assert PunctuationTokenFilter.process("a.u.b.") == "aub"
    assert PunctuationTokenFilter.process("-") == "-"


def test_base_filter_requires_accept_override() -> None:
    """The base class does not decide which tokens pass."""

    with pytest.raises(NotImplementedError):
        next(TokenFilter([Token("a")]))


def test_chain_filters_composes_stages_in_order() -> None:
    """Filters nest transparently with other token iterators."""

    def _lowercase(tokens: Iterator[Token]) -> Iterator[Token]:
        for token in tokens:
            yield Token(token.text.lower(), token.start_offset, token.end_offset, token.position)

    stream = chain_filters(
        tokens_from_strings(["A.B", "-", "'C'", "(.)"]),
        [PunctuationTokenFilter, _lowercase, PunctuationTokenFilter],
    )

    assert [token.text for token in stream] == ["ab", "c"]


def test_chain_filters_without_factories_returns_upstream_stream() -> None:
    """An empty chain passes tokens through untouched."""

    tokens = list(tokens_from_strings(["a.b", "-"]))

    assert list(chain_filters(tokens, [])) == tokens
