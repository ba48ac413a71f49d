"""Module entrypoint for running Tokenscrub as ``python -m tokenscrub``."""

from __future__ import annotations

from tokenscrub.cli import main


if __name__ == "__main__":
    main()
