"""Custom exception hierarchy for mpags-cipher.

Every error condition the user can trigger maps to a subclass of
:class:`MpagsCipherError`.  Errors are raised where they are detected
and travel unhandled to the CLI error boundary
(:func:`mpags_cipher.cli.app.cli`), which renders them and chooses the
exit code.

Hierarchy
---------
MpagsCipherError
├── MissingArgumentError
├── InvalidArgumentError
├── InvalidKeyError
├── InputOutputError
└── TransformFailedError
"""

from __future__ import annotations


class MpagsCipherError(Exception):
    """Base exception for all mpags-cipher errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ----------------------------------------------------------

class MissingArgumentError(MpagsCipherError):
    """Raised when a flag that needs a value is the last token."""


class InvalidArgumentError(MpagsCipherError):
    """Raised when a flag or its value is present but unusable.

    Covers unknown flags, unknown cipher names, a malformed
    ``--multi-cipher`` count, and cipher/key count mismatches.
    """


# --- Cipher construction / application -------------------------------------

class InvalidKeyError(MpagsCipherError):
    """Raised by a cipher constructor that rejects its key."""


class TransformFailedError(MpagsCipherError):
    """Raised when applying a cipher to a chunk of text fails."""


# --- Streams ---------------------------------------------------------------

class InputOutputError(MpagsCipherError):
    """Raised when a named input or output file cannot be opened."""
