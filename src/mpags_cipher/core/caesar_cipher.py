"""Caesar cipher — shift every letter by a fixed amount."""

from __future__ import annotations

from typing import ClassVar

from mpags_cipher.core.models import CipherMode
from mpags_cipher.exceptions import InvalidKeyError

ALPHABET: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


class CaesarCipher:
    """Shift cipher over ``A``-``Z``; other characters pass through.

    The key is a non-negative decimal integer.  An empty key means a
    shift of zero, i.e. the text is left unchanged.
    """

    position_independent: ClassVar[bool] = True

    def __init__(self, key: str) -> None:
        self._shift: int = self._parse_key(key) % len(ALPHABET)

    @property
    def shift(self) -> int:
        return self._shift

    @staticmethod
    def _parse_key(key: str) -> int:
        if key == "":
            return 0
        if not (key.isascii() and key.isdigit()):
            raise InvalidKeyError(
                f"Caesar cipher requires a non-negative integer key, got '{key}'",
            )
        return int(key)

    def apply(self, text: str, mode: CipherMode) -> str:
        shift = self._shift if mode is CipherMode.ENCRYPT else -self._shift
        out: list[str] = []
        for ch in text:
            index = ALPHABET.find(ch)
            if index < 0:
                out.append(ch)
            else:
                out.append(ALPHABET[(index + shift) % len(ALPHABET)])
        return "".join(out)
