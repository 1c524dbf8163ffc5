"""Abstract base class for all entropy backends.

A backend is the raw byte primitive beneath :class:`~bip39_entropy.secure.SecureEntropySource`:
the OS CSPRNG in production, a seeded generator in tests and simulations.
Subclasses must implement the four abstract members: ``name``,
``is_available``, ``get_random_bytes()``, and ``close()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar


class EntropyBackend(ABC):
    """Abstract base for all entropy backends.

    Implementations must return exactly the requested number of bytes or
    raise :class:`~bip39_entropy.exceptions.RandomSourceError`.
    """

    cryptographically_secure: ClassVar[bool] = False
    """Whether the backend may seed real wallets. Set only by OS-grade sources."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable backend identifier (e.g., ``'system'``)."""

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """Whether the backend can currently provide bytes."""

    @abstractmethod
    def get_random_bytes(self, n: int) -> bytes:
        """Return exactly *n* random bytes.

        Args:
            n: Number of random bytes to generate.

        Returns:
            Exactly *n* bytes of entropy.

        Raises:
            RandomSourceError: If the backend cannot provide bytes.
        """

    @abstractmethod
    def close(self) -> None:
        """Release resources (file handles, devices)."""

    def health_check(self) -> dict[str, Any]:
        """Return a status dictionary for this backend.

        Returns:
            Dictionary with at least ``'backend'`` and ``'healthy'`` keys.
        """
        return {"backend": self.name, "healthy": self.is_available}
