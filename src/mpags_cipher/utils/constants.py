"""Tunable constants shared across layers."""

from __future__ import annotations

PARTITION_COUNT: int = 4
"""Number of chunks (and worker threads) a pipeline run splits text into."""

DEFAULT_CIPHER_COUNT: int = 1
"""Expected cipher count when ``--multi-cipher`` is not given."""

MAX_CIPHER_COUNT: int = 2**64 - 1
"""Largest accepted ``--multi-cipher`` value (an unsigned 64-bit long)."""

LOG_LEVEL_ENV_VAR: str = "MPAGS_CIPHER_LOG_LEVEL"
"""Environment variable read once to pick the root log level."""

DEFAULT_LOG_LEVEL: str = "WARNING"
