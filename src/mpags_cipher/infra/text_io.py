"""Text input/output for the cipher pipeline.

Input is read in full from standard input or a named file and
normalised with :func:`~mpags_cipher.core.transform_char.transform_text`
before it reaches any cipher.  Output is written to standard output or
a named file, followed by a single newline.
"""

from __future__ import annotations

import sys
from typing import TextIO

from mpags_cipher.core.transform_char import transform_text
from mpags_cipher.exceptions import InputOutputError
from mpags_cipher.utils.logging_utils import get_logger

logger = get_logger(__name__)


def read_input(input_file: str, *, stdin: TextIO | None = None) -> str:
    """Read and normalise all text from *input_file* (or stdin if empty).

    Raises
    ------
    InputOutputError
        If *input_file* names a file that cannot be opened for reading.
    """
    if not input_file:
        stream = stdin if stdin is not None else sys.stdin
        logger.debug("Reading input from stdin")
        # Decode raw bytes ourselves so undecodable input is replaced, as for files.
        buffer = getattr(stream, "buffer", None)
        if buffer is not None:
            return transform_text(buffer.read().decode("utf-8", errors="replace"))
        return transform_text(stream.read())

    try:
        with open(input_file, encoding="utf-8", errors="replace") as handle:
            raw = handle.read()
    except OSError as exc:
        raise InputOutputError(
            f"failed to create istream on file '{input_file}'",
            hint=exc.strerror,
        ) from exc
    logger.debug("Read %d characters from %s", len(raw), input_file)
    return transform_text(raw)


def write_output(output_file: str, text: str, *, stdout: TextIO | None = None) -> None:
    """Write *text* plus a newline to *output_file* (or stdout if empty).

    Raises
    ------
    InputOutputError
        If *output_file* names a file that cannot be opened for writing.
    """
    if not output_file:
        stream = stdout if stdout is not None else sys.stdout
        stream.write(text + "\n")
        stream.flush()
        return

    try:
        with open(output_file, "w", encoding="utf-8") as handle:
            handle.write(text + "\n")
    except OSError as exc:
        raise InputOutputError(
            f"failed to create ostream on file '{output_file}'",
            hint=exc.strerror,
        ) from exc
    logger.debug("Wrote %d characters to %s", len(text), output_file)
