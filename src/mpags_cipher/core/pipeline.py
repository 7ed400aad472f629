"""Pipeline executor — apply an ordered cipher sequence to text.

Execution order (enforced by :func:`run_pipeline`):

1. **Order** — construction order to encrypt, exact reverse to decrypt,
   so that decryption undoes the last-applied cipher first.
2. **Partition** — split the text into contiguous chunks that
   concatenate back to the original exactly.
3. **Apply** — one worker per chunk runs the whole ordered sequence
   over its chunk; outputs are joined in chunk order, never in
   completion order.

Chunking is only used when every cipher in the pipeline is
position independent.  A pipeline containing a cipher whose output at
index *i* depends on *i* (Vigenère key phase, Playfair digraphs) is run
as a single chunk, which gives the same result as sequential
processing.
"""

from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from mpags_cipher.core.models import CipherMode
from mpags_cipher.core.protocols import Cipher
from mpags_cipher.exceptions import MpagsCipherError, TransformFailedError
from mpags_cipher.utils.constants import PARTITION_COUNT
from mpags_cipher.utils.logging_utils import get_logger

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# 1. Order
# ---------------------------------------------------------------------------

def order_ciphers(ciphers: Sequence[Cipher], mode: CipherMode) -> tuple[Cipher, ...]:
    """Return the application order for *mode* without touching *ciphers*."""
    if mode is CipherMode.DECRYPT:
        return tuple(reversed(ciphers))
    return tuple(ciphers)


# ---------------------------------------------------------------------------
# 2. Partition
# ---------------------------------------------------------------------------

def partition_text(text: str, parts: int) -> list[str]:
    """Split *text* into *parts* contiguous chunks.

    Every chunk holds ``len(text) // parts`` characters except the last,
    which also takes the remainder.  ``"".join(result) == text`` for
    every input, including the empty string.

    Raises
    ------
    ValueError
        If *parts* is less than one.
    """
    if parts < 1:
        raise ValueError(f"parts must be at least 1, got {parts}")
    size = len(text) // parts
    chunks = [text[i * size:(i + 1) * size] for i in range(parts - 1)]
    chunks.append(text[(parts - 1) * size:])
    return chunks


def chunk_count_for(ciphers: Sequence[Cipher]) -> int:
    """Number of chunks a pipeline made of *ciphers* can safely use."""
    if all(cipher.position_independent for cipher in ciphers):
        return PARTITION_COUNT
    return 1


# ---------------------------------------------------------------------------
# 3. Apply
# ---------------------------------------------------------------------------

def apply_ciphers(ciphers: Sequence[Cipher], mode: CipherMode, text: str) -> str:
    """Apply *ciphers* to *text* one after another, in the given order."""
    result = text
    for cipher in ciphers:
        result = cipher.apply(result, mode)
    return result


def run_pipeline(ciphers: Sequence[Cipher], mode: CipherMode, text: str) -> str:
    """Run the full order → partition → apply pipeline over *text*.

    All workers are awaited before any failure is reported; if one or
    more fail, the earliest failing chunk's error is raised and every
    partial result is discarded.

    Raises
    ------
    MpagsCipherError
        Re-raised unchanged when a cipher fails with one of ours.
    TransformFailedError
        When a cipher fails with any other exception.
    """
    ordered = order_ciphers(ciphers, mode)
    chunks = partition_text(text, chunk_count_for(ordered))
    logger.debug(
        "Applying %d cipher(s) in %s mode over %d chunk(s) of %d characters",
        len(ordered),
        mode.value,
        len(chunks),
        len(text),
    )

    with ThreadPoolExecutor(max_workers=PARTITION_COUNT) as pool:
        futures = [pool.submit(apply_ciphers, ordered, mode, chunk) for chunk in chunks]

    outputs: list[str] = []
    for index, future in enumerate(futures):
        exc = future.exception()
        if exc is None:
            outputs.append(future.result())
            continue
        logger.debug("Chunk %d failed: %r", index, exc)
        if isinstance(exc, MpagsCipherError):
            raise exc
        raise TransformFailedError(
            f"Unexpected error while applying ciphers: {exc}",
        ) from exc

    return "".join(outputs)
