"""One-shot secure entropy generation.

:class:`SecureEntropySource` validates the requested size and draws the
bytes from an :class:`~bip39_entropy.backends.base.EntropyBackend` in a
single call. Failures are never retried here.
"""

from __future__ import annotations

from bip39_entropy.backends.base import EntropyBackend
from bip39_entropy.backends.system import SystemEntropyBackend
from bip39_entropy.exceptions import EntropyError, RandomSourceError
from bip39_entropy.sizes import validate_bit_size


class SecureEntropySource:
    """Size-checked wrapper around an entropy backend.

    Args:
        backend: Byte primitive to draw from. Defaults to
            :class:`SystemEntropyBackend`.
    """

    def __init__(self, backend: EntropyBackend | None = None) -> None:
        self._backend = backend if backend is not None else SystemEntropyBackend()

    @property
    def backend(self) -> str:
        """Name of the underlying backend."""
        return self._backend.name

    def generate(self, bit_size: int) -> bytes:
        """Return ``bit_size // 8`` fresh random bytes.

        Args:
            bit_size: Entropy length in bits.

        Returns:
            The backend's bytes, verbatim.

        Raises:
            InvalidSizeError: If *bit_size* is not allowed. No bytes are drawn.
            RandomSourceError: If the backend fails or returns a short read.
        """
        validate_bit_size(bit_size)
        n = bit_size // 8
        try:
            data = self._backend.get_random_bytes(n)
        except EntropyError:
            raise
        except Exception as exc:  # Custom backends may raise anything
            raise RandomSourceError(
                f"Entropy backend {self._backend.name!r} failed: {exc}"
            ) from exc
        if len(data) != n:
            raise RandomSourceError(
                f"Entropy backend {self._backend.name!r} returned {len(data)} bytes, expected {n}"
            )
        return bytes(data)

    def close(self) -> None:
        """Close the underlying backend."""
        self._backend.close()


def generate_entropy(bit_size: int) -> bytes:
    """Draw ``bit_size // 8`` bytes straight from the OS CSPRNG.

    Suitable for occasional use. For issuing many values in a row, see
    :class:`~bip39_entropy.cumulative.CumulativeEntropyGenerator`.

    Raises:
        InvalidSizeError: If *bit_size* is not a multiple of 32 in [128, 256].
        RandomSourceError: If the OS source fails.
    """
    return SecureEntropySource().generate(bit_size)
