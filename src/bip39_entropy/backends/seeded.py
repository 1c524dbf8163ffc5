"""Seeded deterministic backend for tests and reproducible simulations.

Draws uniform bytes from a numpy ``Generator``. Never use it for real
wallet material: anyone holding the seed can reproduce every byte.
"""

from __future__ import annotations

import numpy as np

from bip39_entropy.backends.base import EntropyBackend


class SeededEntropyBackend(EntropyBackend):
    """Reproducible uniform byte backend.

    Args:
        seed: Optional RNG seed. ``None`` seeds from the OS, which makes the
            output non-reproducible but still not cryptographically secure.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._rng = np.random.default_rng(seed)

    @property
    def name(self) -> str:
        """Return ``'seeded'``."""
        return "seeded"

    @property
    def is_available(self) -> bool:
        """Always returns ``True``."""
        return True

    def get_random_bytes(self, n: int) -> bytes:
        """Generate *n* uniformly distributed bytes.

        Args:
            n: Number of random bytes to generate.

        Returns:
            Exactly *n* bytes.
        """
        return self._rng.integers(0, 256, size=n, dtype=np.uint8).tobytes()

    def close(self) -> None:
        """No-op; no resources to release."""

    def health_check(self) -> dict[str, object]:
        """Return health status including the configured seed."""
        return {"backend": self.name, "healthy": True, "seed": self._seed}
