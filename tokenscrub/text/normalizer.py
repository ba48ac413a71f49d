"""Token text normalization.

Responsibilities:
- Remove abbreviation dots, parentheses, and square brackets anywhere in a token.
- Remove one apostrophe at the very start and one at the very end of a token.

The transform performs no case folding, trimming, or Unicode normalization.
"""

from __future__ import annotations

import re

REMOVABLE_CHARACTERS = frozenset(".()[]")
QUOTE_CHARACTER = "'"

# \A and \Z anchor to the absolute string ends; `$` would also match before a
# trailing newline.
_REMOVE_RE = re.compile(
    rf"[{re.escape(''.join(sorted(REMOVABLE_CHARACTERS)))}]"
    rf"|\A{re.escape(QUOTE_CHARACTER)}|{re.escape(QUOTE_CHARACTER)}\Z"
)


def normalize_token_text(text: str) -> str:
    """Return `text` without removable punctuation and without wrapping quotes.

    Only the first and last character are eligible for quote removal, judged
    on the original input: `"don't"` is unchanged and `"'quote'"` becomes
    `"quote"`.
    """

    return _REMOVE_RE.sub("", text)


class TokenNormalizer:
    """Normalize token text into its indexable form."""

    def normalize(self, text: str) -> str:
        """Apply the fixed punctuation and quote removal."""

        return normalize_token_text(text)
