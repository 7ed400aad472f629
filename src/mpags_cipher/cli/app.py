"""CLI application entry point and run orchestration for mpags-cipher.

This module is the **sole error boundary** for the entire application.
It catches :class:`~mpags_cipher.exceptions.MpagsCipherError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — parsing, cipher construction and the
  pipeline live in ``core``; stream handling lives in ``infra``.
* Help and version go to stdout; every error goes to stderr.
* :class:`~mpags_cipher.exceptions.MissingArgumentError` gets its own
  message prefix so a forgotten value reads differently from a wrong
  one.
"""

from __future__ import annotations

import sys

from mpags_cipher.cli import exit_codes
from mpags_cipher.cli.console import console, escape, stdout
from mpags_cipher.core.cipher_factory import make_ciphers
from mpags_cipher.core.command_line import process_command_line
from mpags_cipher.core.models import ProgramSettings
from mpags_cipher.core.pipeline import run_pipeline
from mpags_cipher.exceptions import MissingArgumentError, MpagsCipherError
from mpags_cipher.infra.text_io import read_input, write_output
from mpags_cipher.utils.logging_utils import get_logger, setup_logging
from mpags_cipher.version import __version__

logger = get_logger(__name__)

PROG: str = "mpags-cipher"

HELP_TEXT: str = f"""\
Usage: {PROG} [-h/--help] [--version] [-i <file>] [-o <file>]
                    [--multi-cipher <N>] [-c <cipher>] [-k <key>]
                    [--encrypt/--decrypt]

Encrypts/Decrypts input alphanumeric text using classical ciphers

Available options:

  -h|--help        Print this help message and exit

  --version        Print version information

  -i FILE          Read text to be processed from FILE
                   Stdin will be used if not supplied

  -o FILE          Write processed text to FILE
                   Stdout will be used if not supplied

  --multi-cipher N Specify the number of ciphers to be used in sequence
                   N should be a non-negative integer - defaults to 1

  -c CIPHER        Specify the cipher used to encrypt/decrypt
                   CIPHER can be caesar, playfair, or vigenere
                   caesar is the default; repeat once per cipher

  -k KEY           Specify the cipher KEY
                   A null key, i.e. no encryption, is used if not supplied
                   Repeat once per cipher, in the same order as -c

  --encrypt        Will use the cipher to encrypt the input text (default)

  --decrypt        Will use the cipher to decrypt the input text"""


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_run(settings: ProgramSettings) -> int:
    """Read, transform and write the text described by *settings*.

    Flow:
    1. Construct every cipher (fails fast on a bad key, before any I/O).
    2. Read and normalise the input.
    3. Run the pipeline in the requested mode.
    4. Write the result.
    """
    ciphers = make_ciphers(settings.cipher_specs)
    text = read_input(settings.input_file)
    result = run_pipeline(ciphers, settings.cipher_mode, text)
    write_output(settings.output_file, result)
    logger.info(
        "%s complete: %d ciphers, %d characters in, %d out",
        settings.cipher_mode.value.capitalize(),
        len(ciphers),
        len(text),
        len(result),
    )
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the mpags-cipher CLI.

    Parameters
    ----------
    argv:
        Explicit argument list, *without* the program name.  When
        ``None`` (default), ``sys.argv[1:]`` is used.  Accepting *argv*
        enables deterministic testing without monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    args = sys.argv[1:] if argv is None else argv
    settings = process_command_line([PROG, *args])

    if settings.help_requested:
        stdout.print(HELP_TEXT, markup=False)
        return exit_codes.SUCCESS

    if settings.version_requested:
        stdout.print(__version__, markup=False)
        return exit_codes.SUCCESS

    return _handle_run(settings)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _print_hint(exc: MpagsCipherError) -> None:
    if exc.hint:
        console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.  Logging is
    configured here, once, rather than on import.
    """
    setup_logging()
    try:
        code = main()
        sys.exit(code)
    except MissingArgumentError as exc:
        console.print(f"[bold red]Missing argument:[/bold red] {escape(str(exc))}")
        _print_hint(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except MpagsCipherError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        _print_hint(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
