"""Input normalisation — map raw characters onto the cipher alphabet.

Every cipher in the pipeline works on upper-case ``A``-``Z`` only.
Characters are normalised before they ever reach a cipher:

* letters are upper-cased;
* digits are spelled out (``7`` → ``SEVEN``);
* everything else (whitespace, punctuation, accented letters) is dropped.
"""

from __future__ import annotations

from collections.abc import Iterable

_DIGIT_WORDS: dict[str, str] = {
    "0": "ZERO",
    "1": "ONE",
    "2": "TWO",
    "3": "THREE",
    "4": "FOUR",
    "5": "FIVE",
    "6": "SIX",
    "7": "SEVEN",
    "8": "EIGHT",
    "9": "NINE",
}


def transform_char(in_char: str) -> str:
    """Return the cipher-alphabet rendering of one character, or ``""``."""
    if in_char.isascii() and in_char.isalpha():
        return in_char.upper()
    return _DIGIT_WORDS.get(in_char, "")


def transform_text(chars: Iterable[str]) -> str:
    """Normalise every character of *chars* and join the results."""
    return "".join(transform_char(ch) for ch in chars)
