"""bip39-entropy: raw entropy for BIP39 mnemonic and wallet-key generation.

Two strategies are provided: :func:`generate_entropy` for a direct draw from
the OS CSPRNG, and :class:`CumulativeEntropyGenerator` for issuing many
values in rapid succession with one secure draw per run.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("bip39-entropy")
except PackageNotFoundError:
    __version__ = "0.0.0"

from bip39_entropy.config import EntropyConfig, create_generator
from bip39_entropy.cumulative import (
    DEFAULT_RESEED_THRESHOLD,
    CumulativeEntropyGenerator,
    new_cumulative_generator,
)
from bip39_entropy.exceptions import (
    ConfigValidationError,
    EntropyError,
    InvalidSizeError,
    RandomSourceError,
)
from bip39_entropy.secure import SecureEntropySource, generate_entropy
from bip39_entropy.sizes import VALID_BIT_SIZES, is_valid_bit_size, validate_bit_size
from bip39_entropy.types import GeneratorStats

__all__ = [
    "DEFAULT_RESEED_THRESHOLD",
    "VALID_BIT_SIZES",
    "ConfigValidationError",
    "CumulativeEntropyGenerator",
    "EntropyConfig",
    "EntropyError",
    "GeneratorStats",
    "InvalidSizeError",
    "RandomSourceError",
    "SecureEntropySource",
    "__version__",
    "create_generator",
    "generate_entropy",
    "is_valid_bit_size",
    "new_cumulative_generator",
    "validate_bit_size",
]
