"""Logging helpers shared by every layer.

Modules obtain their logger through :func:`get_logger` at import time;
that never touches global logging state.  Handlers and the root level
are installed only by :func:`setup_logging`, which the CLI error
boundary calls once per process.
"""

from __future__ import annotations

import logging
import os

from mpags_cipher.utils.constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR


_CONFIGURED = False


def setup_logging(level: str | None = None) -> None:
    """Configure root logging once with a consistent, readable format.

    Parameters
    ----------
    level:
        Optional log level name (e.g. ``"INFO"``, ``"DEBUG"``).  When
        omitted, ``MPAGS_CIPHER_LOG_LEVEL`` is read, falling back to
        ``WARNING`` so ciphered output on stdout is never interleaved
        with chatter on stderr.  Unknown names also fall back to
        ``WARNING``.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    level_name = (level or os.getenv(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL).upper()
    log_level = getattr(logging, level_name, logging.WARNING)
    if not isinstance(log_level, int):
        log_level = logging.WARNING

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for *name* without configuring anything."""
    return logging.getLogger(name)
