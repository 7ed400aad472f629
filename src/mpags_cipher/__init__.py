"""mpags-cipher — chained classical ciphers on the command line.

Text is normalised, passed through an ordered pipeline of Caesar,
Playfair and Vigenère ciphers, and written back out.
"""

from mpags_cipher.version import __version__

__all__: list[str] = ["__version__"]
