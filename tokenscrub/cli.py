"""Command-line interface for Tokenscrub.

Responsibilities:
- Expose the file scrub run and a token inspection command.
- Convert CLI arguments and optional YAML defaults into `ScrubConfig`.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_normalized_rows, echo_scrub_summary, exit_with_command_error
from .config import ConfigLoader, ScrubConfig
from .errors import PipelineStageError
from .pipeline import ScrubPipeline
from .telemetry.logger import RunLogger
from .text.gate import has_letter_or_digit
from .text.normalizer import normalize_token_text

app = typer.Typer(
    name="tokenscrub",
    no_args_is_help=True,
    help="Tokenscrub CLI.",
)


def _load_yaml_config(config_path: Path | None) -> ScrubConfig | None:
    """Load a YAML config file when requested and map failures to stage errors."""

    if config_path is None:
        return None

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc


def _resolve_config(
    config_file: Path | None,
    input_path: Path | None,
    out: Path | None,
    encoding: str | None,
    with_offsets: bool | None,
) -> ScrubConfig:
    """Resolve effective config from YAML defaults and explicit CLI overrides."""

    loaded = _load_yaml_config(config_file)
    if loaded is None:
        if input_path is None:
            raise PipelineStageError(
                stage="config",
                detail="Input path is required when `--config` is not provided.",
                hint="Pass `<input.txt>` or use `--config <path.yaml>` with `input_path`.",
            )
        config = ScrubConfig(input_path=input_path, output_path=Path("tokens.txt"))
    else:
        config = loaded

    if input_path is not None:
        config.input_path = input_path
    if out is not None:
        config.output_path = out
    if encoding is not None:
        config.encoding = encoding
    if with_offsets is not None:
        config.with_offsets = with_offsets

    try:
        config.validate()
    except ValueError as exc:
        raise PipelineStageError(
            stage="config",
            detail=str(exc),
            hint="Use a codec name Python recognizes, e.g. `utf-8` or `latin-1`.",
        ) from exc
    return config


@app.command("filter")
def filter_command(
    input_path: Annotated[
        Path | None,
        typer.Argument(help="Text file to scrub. Required unless provided by `--config`."),
    ] = None,
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Output file (overrides config file value)."),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file with command defaults."),
    ] = None,
    encoding: Annotated[
        str | None,
        typer.Option("--encoding", help="Input/output codec (default `utf-8`)."),
    ] = None,
    with_offsets: Annotated[
        bool | None,
        typer.Option(
            "--offsets/--no-offsets",
            help="Write `text<TAB>start<TAB>end<TAB>position` rows.",
        ),
    ] = None,
) -> None:
    """Scrub whitespace-delimited tokens of a file and write the survivors."""

    try:
        config = _resolve_config(config_file, input_path, out, encoding, with_offsets)
        report = ScrubPipeline(run_logger=RunLogger()).run(config)
    except Exception as exc:
        exit_with_command_error("filter", exc)

    echo_scrub_summary(report)


@app.command("normalize")
def normalize_command(
    tokens: Annotated[list[str], typer.Argument(help="Raw tokens to inspect.")],
) -> None:
    """Show the normalized form of each token and whether it would be kept."""

    rows = []
    for raw in tokens:
        normalized = normalize_token_text(raw)
        rows.append((raw, normalized, has_letter_or_digit(normalized)))
    echo_normalized_rows(rows)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
