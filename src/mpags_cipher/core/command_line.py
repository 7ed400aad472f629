"""Command-line token scanner — tokens in, :class:`ProgramSettings` out.

The scanner walks the token list once, left to right, skipping the
zeroth token (the program name).  Every token must be a recognised
flag; flags that take a value consume the token that follows them.

Guarantees
----------
* Pure — no I/O and no global state; identical tokens always yield an
  identical :class:`ProgramSettings`.
* Fails with :class:`MissingArgumentError` or
  :class:`InvalidArgumentError` rather than returning partial results.
* ``-h``/``--help`` and ``--version`` stop the scan immediately; later
  tokens are never looked at and the cipher/key count check is skipped.
"""

from __future__ import annotations

from collections.abc import Sequence

from mpags_cipher.core.models import CipherMode, CipherType, ProgramSettings
from mpags_cipher.exceptions import InvalidArgumentError, MissingArgumentError
from mpags_cipher.utils.constants import DEFAULT_CIPHER_COUNT, MAX_CIPHER_COUNT
from mpags_cipher.utils.logging_utils import get_logger

logger = get_logger(__name__)

_CIPHER_NAMES: dict[str, CipherType] = {
    cipher_type.value: cipher_type for cipher_type in CipherType
}


# ---------------------------------------------------------------------------
# Value parsers (pure)
# ---------------------------------------------------------------------------

def parse_cipher_count(value: str) -> int:
    """Convert a ``--multi-cipher`` value to a non-negative integer.

    Only plain ASCII digits are accepted: no sign, no whitespace, no
    underscores.

    Raises
    ------
    InvalidArgumentError
        If *value* is empty, non-numeric, or above ``MAX_CIPHER_COUNT``.
    """
    message = "--multi-cipher requires a non-negative integer argument"
    if not (value.isascii() and value.isdigit()):
        raise InvalidArgumentError(f"{message}, got '{value}'")
    count = int(value)
    if count > MAX_CIPHER_COUNT:
        raise InvalidArgumentError(
            f"{message}, got '{value}'",
            hint=f"The largest supported value is {MAX_CIPHER_COUNT}.",
        )
    return count


def parse_cipher_type(name: str) -> CipherType:
    """Map a ``-c`` value to its :class:`CipherType`.

    Raises
    ------
    InvalidArgumentError
        If *name* is not one of ``caesar``, ``playfair``, ``vigenere``.
    """
    try:
        return _CIPHER_NAMES[name]
    except KeyError:
        raise InvalidArgumentError(
            f"unknown cipher '{name}'",
            hint=f"Choose one of: {', '.join(_CIPHER_NAMES)}.",
        ) from None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def process_command_line(tokens: Sequence[str]) -> ProgramSettings:
    """Scan *tokens* and return the validated program settings.

    Parameters
    ----------
    tokens:
        The full argument vector, program name included at index 0.

    Raises
    ------
    MissingArgumentError
        When a flag that needs a value is the final token.
    InvalidArgumentError
        For unknown flags, unknown cipher names, malformed cipher
        counts, or when the number of ciphers or keys differs from the
        expected count.
    """
    help_requested = False
    version_requested = False
    input_file = ""
    output_file = ""
    cipher_types: list[CipherType] = []
    cipher_keys: list[str] = []
    cipher_mode = CipherMode.ENCRYPT
    expected_ciphers = DEFAULT_CIPHER_COUNT

    n_tokens = len(tokens)

    def _value_for(index: int, requirement: str) -> str:
        if index == n_tokens - 1:
            raise MissingArgumentError(f"{tokens[index]} requires {requirement}")
        return tokens[index + 1]

    i = 1
    while i < n_tokens:
        token = tokens[i]
        if token in ("-h", "--help"):
            help_requested = True
            break
        elif token == "--version":
            version_requested = True
            break
        elif token == "--multi-cipher":
            expected_ciphers = parse_cipher_count(
                _value_for(i, "a non-negative integer argument"),
            )
            i += 1
        elif token == "-i":
            input_file = _value_for(i, "a filename argument")
            i += 1
        elif token == "-o":
            output_file = _value_for(i, "a filename argument")
            i += 1
        elif token == "-k":
            cipher_keys.append(_value_for(i, "a key argument"))
            i += 1
        elif token == "-c":
            cipher_types.append(parse_cipher_type(_value_for(i, "a cipher name argument")))
            i += 1
        elif token == "--encrypt":
            cipher_mode = CipherMode.ENCRYPT
        elif token == "--decrypt":
            cipher_mode = CipherMode.DECRYPT
        else:
            raise InvalidArgumentError(
                f"unknown argument '{token}'",
                hint="Run with --help to list the accepted options.",
            )
        i += 1

    if not (help_requested or version_requested):
        # A single cipher may omit its type (Caesar) and/or its key (null key).
        if expected_ciphers == 1:
            if not cipher_types:
                cipher_types.append(CipherType.CAESAR)
            if not cipher_keys:
                cipher_keys.append("")

        n_types = len(cipher_types)
        n_keys = len(cipher_keys)
        if n_types != expected_ciphers or n_keys != expected_ciphers:
            raise InvalidArgumentError(
                f"expected types and keys for {expected_ciphers} ciphers "
                f"but received {n_types} types and {n_keys} keys",
            )

    settings = ProgramSettings(
        help_requested=help_requested,
        version_requested=version_requested,
        input_file=input_file,
        output_file=output_file,
        cipher_types=tuple(cipher_types),
        cipher_keys=tuple(cipher_keys),
        cipher_mode=cipher_mode,
    )
    logger.debug("Parsed command line: %s", settings)
    return settings
