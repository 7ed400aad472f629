"""Vigenère cipher — a Caesar shift that changes with every character.

The shift for the character at index *i* is the alphabet position of
key letter ``i mod len(key)``.  Because the shift depends on *i*, the
cipher is not position independent: splitting text into chunks would
restart the key phase at every chunk boundary.
"""

from __future__ import annotations

from typing import ClassVar

from mpags_cipher.core.caesar_cipher import ALPHABET
from mpags_cipher.core.models import CipherMode
from mpags_cipher.exceptions import InvalidKeyError


class VigenereCipher:
    """Polyalphabetic shift cipher keyed by a word."""

    position_independent: ClassVar[bool] = False

    def __init__(self, key: str) -> None:
        cleaned = "".join(ch.upper() for ch in key if ch.isascii() and ch.isalpha())
        if not cleaned:
            raise InvalidKeyError(
                f"Vigenere cipher requires a key containing at least one letter, got '{key}'",
            )
        self._key: str = cleaned
        self._shifts: tuple[int, ...] = tuple(ALPHABET.index(ch) for ch in cleaned)

    @property
    def key(self) -> str:
        """The key after upper-casing and removal of non-letters."""
        return self._key

    def apply(self, text: str, mode: CipherMode) -> str:
        sign = 1 if mode is CipherMode.ENCRYPT else -1
        period = len(self._shifts)
        out: list[str] = []
        for i, ch in enumerate(text):
            index = ALPHABET.find(ch)
            if index < 0:
                out.append(ch)
                continue
            shift = self._shifts[i % period]
            out.append(ALPHABET[(index + sign * shift) % len(ALPHABET)])
        return "".join(out)
