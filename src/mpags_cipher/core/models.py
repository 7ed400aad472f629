"""Domain models for mpags-cipher.

All models are **frozen** dataclasses or enums — immutable value
objects with no behaviour beyond data access.  They carry zero I/O and
zero dependencies on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class CipherType(enum.Enum):
    """The closed set of supported classical ciphers.

    Member values are the names accepted by the ``-c`` flag.
    """

    CAESAR = "caesar"
    PLAYFAIR = "playfair"
    VIGENERE = "vigenere"


class CipherMode(enum.Enum):
    """Direction in which a cipher is applied."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


# ---------------------------------------------------------------------------
# Pipeline stage description
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CipherSpec:
    """One stage of the pipeline: which cipher, and with which key."""

    cipher_type: CipherType

    key: str
    """Opaque key string; validated by the cipher's own constructor."""


# ---------------------------------------------------------------------------
# Parsed command line
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ProgramSettings:
    """Validated configuration produced by the command-line parser.

    After a parse that was not cut short by ``--help`` or ``--version``,
    ``cipher_types`` and ``cipher_keys`` have equal length and their
    order is the order in which ciphers are applied when encrypting.
    """

    help_requested: bool = False
    version_requested: bool = False

    input_file: str = ""
    """Path to read from; empty means standard input."""

    output_file: str = ""
    """Path to write to; empty means standard output."""

    cipher_types: tuple[CipherType, ...] = ()
    cipher_keys: tuple[str, ...] = ()
    cipher_mode: CipherMode = CipherMode.ENCRYPT

    @property
    def cipher_specs(self) -> tuple[CipherSpec, ...]:
        """Pair each cipher type with its key, in application order."""
        return tuple(
            CipherSpec(cipher_type=cipher_type, key=key)
            for cipher_type, key in zip(self.cipher_types, self.cipher_keys)
        )
