"""Playfair cipher — digraph substitution on a keyed 5x5 square.

The square holds the 25 letters ``A``-``Z`` without ``J`` (which is
folded into ``I``), starting with the key's letters in first-seen order.

Before encrypting, the text is split into digraphs: an ``X`` is
inserted between a repeated pair (``Q`` if the pair is ``XX``) and an
odd-length text is padded with ``Z`` (``X`` if it already ends in
``Z``).  Decryption reverses the substitution only; inserted letters
and padding are left in place.
"""

from __future__ import annotations

from typing import ClassVar

from mpags_cipher.core.caesar_cipher import ALPHABET
from mpags_cipher.core.models import CipherMode
from mpags_cipher.exceptions import TransformFailedError

_SIZE: int = 5


class PlayfairCipher:
    """Digraph cipher keyed by a word; any key, even empty, is valid."""

    position_independent: ClassVar[bool] = False

    def __init__(self, key: str) -> None:
        self._square: str = self._build_square(key)
        self._coords: dict[str, tuple[int, int]] = {
            letter: divmod(index, _SIZE) for index, letter in enumerate(self._square)
        }

    @property
    def square(self) -> str:
        """The 25 square letters, row by row."""
        return self._square

    @staticmethod
    def _build_square(key: str) -> str:
        seen: list[str] = []
        for ch in key.upper() + ALPHABET:
            if not ("A" <= ch <= "Z"):
                continue
            if ch == "J":
                ch = "I"
            if ch not in seen:
                seen.append(ch)
        return "".join(seen)

    # ------------------------------------------------------------------
    # Digraph preparation
    # ------------------------------------------------------------------

    @staticmethod
    def _prepare(text: str) -> str:
        """Fold J into I, split repeated pairs, and pad to even length."""
        letters = text.replace("J", "I")
        prepared: list[str] = []
        i = 0
        while i < len(letters):
            first = letters[i]
            if i + 1 == len(letters):
                prepared += [first, "X" if first == "Z" else "Z"]
                i += 1
            elif letters[i + 1] == first:
                prepared += [first, "Q" if first == "X" else "X"]
                i += 1
            else:
                prepared += [first, letters[i + 1]]
                i += 2
        return "".join(prepared)

    def _check_alphabet(self, text: str) -> None:
        for ch in text:
            if ch not in self._coords:
                raise TransformFailedError(
                    f"Playfair cipher cannot process character '{ch}'",
                    hint="Playfair input must contain only the letters A-Z.",
                )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def apply(self, text: str, mode: CipherMode) -> str:
        if mode is CipherMode.ENCRYPT:
            text = self._prepare(text)
            step = 1
        else:
            if len(text) % 2:
                raise TransformFailedError(
                    f"Playfair ciphertext must have an even number of letters, got {len(text)}",
                )
            step = -1
        self._check_alphabet(text)

        out: list[str] = []
        for i in range(0, len(text), 2):
            row1, col1 = self._coords[text[i]]
            row2, col2 = self._coords[text[i + 1]]
            if row1 == row2:
                col1, col2 = (col1 + step) % _SIZE, (col2 + step) % _SIZE
            elif col1 == col2:
                row1, row2 = (row1 + step) % _SIZE, (row2 + step) % _SIZE
            else:
                col1, col2 = col2, col1
            out.append(self._square[row1 * _SIZE + col1])
            out.append(self._square[row2 * _SIZE + col2])
        return "".join(out)
