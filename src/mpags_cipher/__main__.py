"""Allow ``python -m mpags_cipher`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m mpags_cipher`` behaves identically to the
``mpags-cipher`` console script.
"""

from __future__ import annotations

from mpags_cipher.cli.app import cli

if __name__ == "__main__":
    cli()
