"""Configuration model and loaders for Tokenscrub runs.

Responsibilities:
- Define file-run settings as a typed dataclass.
- Provide loader entry points for YAML- and environment-based configuration.

The removable punctuation set and the letter/digit check are fixed and are
not part of the configuration.

Key types:
- `ScrubConfig`: settings for one file-level scrub run.
- `ConfigLoader`: static construction helpers for `ScrubConfig`.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

_DEFAULT_ENCODING = "utf-8"
_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})


def normalize_optional_string(value: object) -> str | None:
    """Return a stripped string, or `None` for `None` and blank values."""

    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_boolean(value: object, field_name: str) -> bool:
    """Parse `true`/`false`, `1`/`0`, `yes`/`no`, `on`/`off` case-insensitively.

    Raises:
        ValueError: If the value is not one of the accepted tokens.
    """

    if isinstance(value, bool):
        return value
    token = (normalize_optional_string(value) or "").lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    raise ValueError(
        f"`{field_name}` must be a boolean value (`true`/`false`, `1`/`0`, `yes`/`no`)."
    )


@dataclass(slots=True)
class ScrubConfig:
    """Settings for one scrub run.

    Attributes:
        input_path: Text file to read tokens from.
        output_path: File receiving surviving tokens, one per line.
        encoding: Codec used for both reading and writing.
        with_offsets: Write `text<TAB>start<TAB>end<TAB>position` rows instead of bare text.
    """

    input_path: Path
    output_path: Path
    encoding: str = _DEFAULT_ENCODING
    with_offsets: bool = False

    def validate(self) -> None:
        """Validate settings before a run."""

        if not isinstance(self.encoding, str) or not self.encoding.strip():
            raise ValueError("`encoding` must be a non-empty string.")
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"Unknown `encoding` value `{self.encoding}`.") from exc


class ConfigLoader:
    """Factory methods for creating `ScrubConfig` from external sources."""

    _REQUIRED_YAML_KEYS = frozenset({"input_path", "output_path"})
    _SUPPORTED_YAML_KEYS = frozenset({"input_path", "output_path", "encoding", "with_offsets"})

    @staticmethod
    def from_yaml(path: Path) -> ScrubConfig:
        """Create a validated config from a YAML file."""

        try:
            payload = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` could not be parsed: {exc}") from exc
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> ScrubConfig:
        """Create a validated config from `TOKENSCRUB_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        input_path = normalize_optional_string(env_map.get("TOKENSCRUB_INPUT_PATH"))
        if input_path is None:
            raise ValueError("Environment variable `TOKENSCRUB_INPUT_PATH` is required.")
        output_path = normalize_optional_string(env_map.get("TOKENSCRUB_OUTPUT_PATH"))
        encoding = normalize_optional_string(env_map.get("TOKENSCRUB_ENCODING"))
        offsets_raw = normalize_optional_string(env_map.get("TOKENSCRUB_WITH_OFFSETS"))

        config = ScrubConfig(
            input_path=Path(input_path),
            output_path=Path(output_path) if output_path else Path("tokens.txt"),
            encoding=encoding or _DEFAULT_ENCODING,
            with_offsets=(
                parse_boolean(offsets_raw, "TOKENSCRUB_WITH_OFFSETS")
                if offsets_raw is not None
                else False
            ),
        )
        config.validate()
        return config

    @staticmethod
    def _build_config_from_mapping(payload: Mapping[str, Any], source_label: str) -> ScrubConfig:
        """Build a validated config from a mapping payload."""

        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            raise ValueError(f"{source_label} includes unsupported key(s): {', '.join(unknown)}.")
        missing = sorted(key for key in ConfigLoader._REQUIRED_YAML_KEYS if key not in payload)
        if missing:
            raise ValueError(f"{source_label} is missing required key(s): {', '.join(missing)}.")

        input_path = ConfigLoader._required_path(payload, "input_path", source_label)
        output_path = ConfigLoader._required_path(payload, "output_path", source_label)
        encoding = normalize_optional_string(payload.get("encoding")) or _DEFAULT_ENCODING
        with_offsets = (
            parse_boolean(payload["with_offsets"], "with_offsets")
            if payload.get("with_offsets") is not None
            else False
        )

        config = ScrubConfig(
            input_path=input_path,
            output_path=output_path,
            encoding=encoding,
            with_offsets=with_offsets,
        )
        config.validate()
        return config

    @staticmethod
    def _required_path(payload: Mapping[str, Any], key: str, source_label: str) -> Path:
        """Read a required non-empty path-like field from a payload."""

        value = normalize_optional_string(payload.get(key))
        if value is None:
            raise ValueError(f"{source_label} requires non-empty `{key}`.")
        return Path(value)
