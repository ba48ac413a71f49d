"""Run logging for scrub pipeline stages."""

from .logger import RunLogger

__all__ = ["RunLogger"]
