"""Letter/digit presence check for normalized tokens."""

from __future__ import annotations


def has_letter_or_digit(text: str) -> bool:
    """Return whether `text` holds at least one Unicode letter or ASCII digit.

    Letters are characters in general category L* (`str.isalpha`) in any
    script. Digits are `0`-`9` only: Arabic-Indic, fullwidth, superscript,
    and fraction characters do not count. The scan stops at the first match.
    """

    return any(character.isalpha() or "0" <= character <= "9" for character in text)
