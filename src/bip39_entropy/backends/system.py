"""System entropy backend using ``os.urandom()``.

This is the default backend. It reads the operating system CSPRNG
(``getrandom(2)`` on Linux, ``BCryptGenRandom`` on Windows) and may block
briefly at boot until the kernel pool is initialised.
"""

from __future__ import annotations

import os
from typing import ClassVar

from bip39_entropy.backends.base import EntropyBackend
from bip39_entropy.exceptions import RandomSourceError


class SystemEntropyBackend(EntropyBackend):
    """``os.urandom()`` wrapper, cryptographically secure."""

    cryptographically_secure: ClassVar[bool] = True

    @property
    def name(self) -> str:
        """Return ``'system'``."""
        return "system"

    @property
    def is_available(self) -> bool:
        """Always ``True``; failures surface from ``get_random_bytes()``."""
        return True

    def get_random_bytes(self, n: int) -> bytes:
        """Return *n* bytes from the OS CSPRNG.

        Args:
            n: Number of random bytes to generate.

        Returns:
            Exactly *n* bytes of entropy from ``os.urandom()``.

        Raises:
            RandomSourceError: If the OS source fails.
        """
        try:
            return os.urandom(n)
        except OSError as exc:
            raise RandomSourceError(f"OS random source failed: {exc}") from exc

    def close(self) -> None:
        """No-op; no resources to release."""
