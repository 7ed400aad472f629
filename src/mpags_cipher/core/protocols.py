"""Protocols (interfaces) consumed by the core layer.

The pipeline executor depends ONLY on these protocols — never on the
concrete cipher classes — so any object with the right shape can be
slotted into a pipeline.
"""

from __future__ import annotations

from typing import ClassVar, Protocol

from mpags_cipher.core.models import CipherMode


class Cipher(Protocol):
    """Contract for a constructed, ready-to-apply cipher.

    Implementations must hold no state that changes between calls to
    :meth:`apply`: one instance is shared read-only by every worker of
    a pipeline run.
    """

    position_independent: ClassVar[bool]
    """Whether the output for a character depends only on that character.

    Only pipelines made entirely of position-independent ciphers are
    split into chunks; anything else is applied to the whole text at
    once.
    """

    def apply(self, text: str, mode: CipherMode) -> str:
        """Encrypt or decrypt *text* according to *mode*.

        Raises
        ------
        TransformFailedError
            When *text* cannot be processed by this cipher.
        """
        ...  # pragma: no cover
