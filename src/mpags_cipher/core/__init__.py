"""Core / service layer — pure parsing, cipher and pipeline logic.

Rules
-----
* No ``print()`` calls.
* No filesystem or stream I/O.
* No imports from ``cli`` or ``infra``.
"""

from mpags_cipher.core.cipher_factory import make_cipher, make_ciphers
from mpags_cipher.core.command_line import process_command_line
from mpags_cipher.core.models import CipherMode, CipherSpec, CipherType, ProgramSettings
from mpags_cipher.core.pipeline import run_pipeline
from mpags_cipher.core.protocols import Cipher

__all__: list[str] = [
    "Cipher",
    "CipherMode",
    "CipherSpec",
    "CipherType",
    "ProgramSettings",
    "make_cipher",
    "make_ciphers",
    "process_command_line",
    "run_pipeline",
]
