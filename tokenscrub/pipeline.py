"""File-level scrub pipeline.

Responsibilities:
- Stream tokens from an input file through `PunctuationTokenFilter`.
- Write surviving tokens to the output file, one per line, replacing it only
  after a complete run.
- Emit stage telemetry and map I/O failures to stage-scoped errors.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from .analysis.filters import PunctuationTokenFilter
from .config import ScrubConfig
from .errors import PipelineStageError
from .models.datatypes import ScrubReport, Token
from .telemetry.logger import RunLogger
from .text.token_source import iter_file_tokens

_STAGE_NAME = "scrub"


def format_token_row(token: Token, with_offsets: bool) -> str:
    """Render one output line for a surviving token, including the newline."""

    if not with_offsets:
        return f"{token.text}\n"
    return f"{token.text}\t{token.start_offset}\t{token.end_offset}\t{token.position}\n"


def _read_stage_errors(tokens: Iterable[Token], input_path: Path) -> Iterator[Token]:
    """Re-raise input read/decode failures as `read` stage errors."""

    iterator = iter(tokens)
    while True:
        try:
            token = next(iterator)
        except StopIteration:
            return
        except UnicodeDecodeError as exc:
            raise PipelineStageError(
                stage="read",
                detail=f"Failed to decode input `{input_path}`: {exc.reason}.",
                hint="Pass the file's codec via `--encoding`.",
            ) from exc
        except OSError as exc:
            raise PipelineStageError(
                stage="read",
                detail=f"Failed to read input `{input_path}`: {exc.strerror or exc}.",
                hint="Verify the input file exists and is readable.",
            ) from exc
        yield token


def _is_same_file(first: Path, second: Path) -> bool:
    """Return whether two paths name the same file, following symlinks."""

    if first.exists() and second.exists():
        return first.samefile(second)
    return first.resolve() == second.resolve()


class ScrubPipeline:
    """Run the punctuation filter over a text file."""

    def __init__(self, run_logger: RunLogger | None = None) -> None:
        self._run_logger = run_logger

    def run(self, config: ScrubConfig) -> ScrubReport:
        """Filter `config.input_path` into `config.output_path` and report counts."""

        config.validate()
        if _is_same_file(config.input_path, config.output_path):
            raise PipelineStageError(
                stage="config",
                detail=f"Output path `{config.output_path}` is the input file.",
                hint="Write survivors to a different file via `--out`.",
            )
        if self._run_logger is not None:
            self._run_logger.log_stage_start(_STAGE_NAME, input=config.input_path)

        token_filter = PunctuationTokenFilter(
            iter_file_tokens(config.input_path, config.encoding)
        )
        try:
            self._write_tokens(_read_stage_errors(token_filter, config.input_path), config)
        except Exception as exc:
            if self._run_logger is not None:
                self._run_logger.log_stage_failure(_STAGE_NAME, type(exc).__name__)
            raise

        stats = token_filter.stats
        if self._run_logger is not None:
            self._run_logger.log_stage_complete(_STAGE_NAME, **stats.as_metadata())
        return ScrubReport(
            input_path=config.input_path,
            output_path=config.output_path,
            tokens_read=stats.pulled,
            tokens_kept=stats.emitted,
            tokens_dropped=stats.dropped,
        )

    @staticmethod
    def _write_tokens(tokens: Iterable[Token], config: ScrubConfig) -> None:
        """Write token rows through a sibling `.part` file moved into place on success.

        A failed run leaves `config.output_path` untouched.
        """

        output_path = config.output_path
        partial_path = output_path.with_name(f"{output_path.name}.part")
        completed = False
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with partial_path.open("w", encoding=config.encoding, newline="\n") as handle:
                for token in tokens:
                    handle.write(format_token_row(token, config.with_offsets))
            partial_path.replace(output_path)
            completed = True
        except OSError as exc:
            raise PipelineStageError(
                stage="write",
                detail=f"Failed to write output `{output_path}`: {exc.strerror or exc}.",
                hint="Verify the output directory is writable.",
            ) from exc
        finally:
            if not completed and partial_path.exists():
                partial_path.unlink()
