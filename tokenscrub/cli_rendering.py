"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics
and run summaries.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import PipelineStageError
from .models.datatypes import ScrubReport


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, PipelineStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_scrub_summary(report: ScrubReport) -> None:
    """Print token counters and output location for a finished run."""

    typer.echo(f"Tokens read: {report.tokens_read}")
    typer.echo(f"Tokens kept: {report.tokens_kept}")
    typer.echo(f"Tokens dropped: {report.tokens_dropped}")
    typer.echo(f"Output: {report.output_path}")


def echo_normalized_rows(rows: list[tuple[str, str, bool]]) -> None:
    """Print `raw<TAB>normalized<TAB>keep|drop` rows in input order."""

    for raw, normalized, kept in rows:
        typer.echo(f"{raw}\t{normalized}\t{'keep' if kept else 'drop'}")
