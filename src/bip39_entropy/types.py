"""Data types shared across bip39-entropy."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GeneratorStats:
    """Point-in-time snapshot of a cumulative generator's counters.

    Attributes:
        bit_size: Entropy length in bits, fixed at construction.
        threshold: Maximum values issued per run before a mandatory reseed.
        count: Values issued since the last reseed.
        issued: Values issued over the generator's lifetime.
        reseeds: Reseeds performed after the initial seed.
    """

    bit_size: int
    threshold: int
    count: int
    issued: int
    reseeds: int
