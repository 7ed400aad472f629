"""Infrastructure layer — standard streams and the filesystem.

Every ``OSError`` raised while opening a named file is caught here and
re-raised as :class:`~mpags_cipher.exceptions.InputOutputError`.

Rules
-----
* No imports from ``cli``.
* No user-facing rendering (no Rich).
"""

from mpags_cipher.infra.text_io import read_input, write_output

__all__: list[str] = [
    "read_input",
    "write_output",
]
