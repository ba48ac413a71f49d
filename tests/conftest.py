"""Shared pytest fixtures for the full Tokenscrub test suite."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def sample_text_path(tmp_path: Path) -> Path:
    """Write a small two-line input with dropped and surviving tokens."""

    path = tmp_path / "input.txt"
    path.write_text("Zie a.u.b. - bel(len) 'x' 123 ...\nnog iets (.)\n", encoding="utf-8")
    return path
