"""Top-level package for Tokenscrub.

This package provides a streaming token filter that strips abbreviation dots,
brackets, and wrapping quotes from tokens and drops tokens without any letter
or digit. The main entry points are `PunctuationTokenFilter` and
`ScrubPipeline`.
"""

from .analysis.filters import PunctuationTokenFilter
from .pipeline import ScrubPipeline

__all__ = ["PunctuationTokenFilter", "ScrubPipeline", "__version__"]

__version__ = "0.1.0"
