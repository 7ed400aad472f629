"""Cipher construction — turn a :class:`CipherSpec` into a ready cipher."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from mpags_cipher.core.caesar_cipher import CaesarCipher
from mpags_cipher.core.models import CipherSpec, CipherType
from mpags_cipher.core.playfair_cipher import PlayfairCipher
from mpags_cipher.core.protocols import Cipher
from mpags_cipher.core.vigenere_cipher import VigenereCipher
from mpags_cipher.utils.logging_utils import get_logger

logger = get_logger(__name__)

_CONSTRUCTORS: dict[CipherType, Callable[[str], Cipher]] = {
    CipherType.CAESAR: CaesarCipher,
    CipherType.PLAYFAIR: PlayfairCipher,
    CipherType.VIGENERE: VigenereCipher,
}


def make_cipher(cipher_type: CipherType, key: str) -> Cipher:
    """Construct the cipher for *cipher_type* keyed with *key*.

    Raises
    ------
    InvalidKeyError
        If the chosen cipher rejects *key*.
    """
    logger.debug("Constructing %s cipher", cipher_type.value)
    return _CONSTRUCTORS[cipher_type](key)


def make_ciphers(specs: Iterable[CipherSpec]) -> list[Cipher]:
    """Construct one cipher per spec, preserving order."""
    return [make_cipher(spec.cipher_type, spec.key) for spec in specs]
