"""Cumulative entropy generator for bulk issuance.

Drawing from the OS CSPRNG on every call is the expensive part of bulk
wallet provisioning. :class:`CumulativeEntropyGenerator` draws one secure
seed per *run* and issues successive values by incrementing it as a
big-endian integer, so consecutive values within a run differ by exactly
one. A run ends, and the next call reseeds, when either:

- ``threshold`` values have been issued since the last reseed, or
- the integer's minimal big-endian encoding no longer has ``bit_size // 8``
  bytes (a leading zero byte in the seed, or overflow past the top byte).

Every call runs its whole check-reseed-return-advance sequence under one
``threading.Lock``, so instances are safe to share between threads.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from bip39_entropy.exceptions import ConfigValidationError
from bip39_entropy.secure import SecureEntropySource
from bip39_entropy.sizes import validate_bit_size
from bip39_entropy.types import GeneratorStats

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger("bip39_entropy")

DEFAULT_RESEED_THRESHOLD: int = 2**11


def _minimal_bytes(value: int) -> bytes:
    """Big-endian encoding of *value* without leading zero bytes."""
    return value.to_bytes((value.bit_length() + 7) // 8, "big")


class CumulativeEntropyGenerator:
    """Amortised entropy generator: one secure draw per run of values.

    Args:
        bit_size: Entropy length in bits; a multiple of 32 in [128, 256].
        threshold: Maximum values issued per run before a mandatory reseed.
        source: Secure source used for the initial seed and every reseed.
            Defaults to a :class:`SecureEntropySource` over the OS CSPRNG.

    Raises:
        InvalidSizeError: If *bit_size* is not allowed. Nothing is drawn.
        ConfigValidationError: If *threshold* is not a positive integer.
        RandomSourceError: If the initial seed cannot be drawn.
    """

    def __init__(
        self,
        bit_size: int,
        threshold: int = DEFAULT_RESEED_THRESHOLD,
        source: SecureEntropySource | None = None,
    ) -> None:
        validate_bit_size(bit_size)
        if isinstance(threshold, bool) or not isinstance(threshold, int) or threshold < 1:
            raise ConfigValidationError(
                f"Reseed threshold must be a positive integer, got {threshold!r}"
            )

        self._bit_size = bit_size
        self._threshold = threshold
        self._n_bytes = bit_size // 8
        self._source = source if source is not None else SecureEntropySource()

        # Guarded by _lock.
        self._lock = threading.Lock()
        self._value = int.from_bytes(self._source.generate(bit_size), "big")
        self._count = 0
        self._issued = 0
        self._reseeds = 0

    @property
    def bit_size(self) -> int:
        """Entropy length in bits."""
        return self._bit_size

    @property
    def threshold(self) -> int:
        """Maximum values issued per run."""
        return self._threshold

    def next(self) -> bytes:
        """Issue the next entropy value.

        Returns the current run's value, or a freshly drawn seed if the run
        is exhausted. In both cases the run counter and the integer advance
        by one afterwards, so the call after a reseed returns ``seed + 1``.

        Returns:
            Exactly ``bit_size // 8`` bytes.

        Raises:
            RandomSourceError: If a required reseed fails. The generator's
                state is left untouched and the next call reseeds again.
        """
        with self._lock:
            entropy = _minimal_bytes(self._value)
            bad_shape = len(entropy) != self._n_bytes
            if bad_shape or self._count >= self._threshold:
                fresh = self._source.generate(self._bit_size)
                logger.debug(
                    "Reseeding %d-bit generator after %d values (cause=%s)",
                    self._bit_size,
                    self._count,
                    "shape" if bad_shape else "threshold",
                )
                self._value = int.from_bytes(fresh, "big")
                self._count = 0
                self._reseeds += 1
                entropy = fresh

            self._count += 1
            self._value += 1
            self._issued += 1
            return entropy

    def take(self, n: int) -> list[bytes]:
        """Issue *n* values in order."""
        return [self.next() for _ in range(n)]

    def __iter__(self) -> Iterator[bytes]:
        while True:
            yield self.next()

    def stats(self) -> GeneratorStats:
        """Return a consistent snapshot of the generator's counters."""
        with self._lock:
            return GeneratorStats(
                bit_size=self._bit_size,
                threshold=self._threshold,
                count=self._count,
                issued=self._issued,
                reseeds=self._reseeds,
            )

    def close(self) -> None:
        """Close the underlying secure source."""
        self._source.close()

    def __enter__(self) -> CumulativeEntropyGenerator:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(bit_size={self._bit_size}, "
            f"threshold={self._threshold}, backend={self._source.backend!r})"
        )


def new_cumulative_generator(
    bit_size: int,
    threshold: int = DEFAULT_RESEED_THRESHOLD,
) -> CumulativeEntropyGenerator:
    """Build a :class:`CumulativeEntropyGenerator` over the OS CSPRNG.

    Args:
        bit_size: Entropy length in bits.
        threshold: Values per run before a mandatory reseed.
    """
    return CumulativeEntropyGenerator(bit_size, threshold)
