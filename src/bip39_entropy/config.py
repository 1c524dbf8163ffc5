"""Configuration system for bip39-entropy.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (BIP39_ENTROPY_*) -> .env file -> field defaults.

:func:`create_generator` turns a config into a ready
:class:`~bip39_entropy.cumulative.CumulativeEntropyGenerator`. Only the OS
CSPRNG is accepted unless ``allow_insecure_backend`` is set explicitly.
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bip39_entropy.backends.base import EntropyBackend
from bip39_entropy.backends.seeded import SeededEntropyBackend
from bip39_entropy.backends.system import SystemEntropyBackend
from bip39_entropy.cumulative import DEFAULT_RESEED_THRESHOLD, CumulativeEntropyGenerator
from bip39_entropy.exceptions import ConfigValidationError
from bip39_entropy.secure import SecureEntropySource
from bip39_entropy.sizes import is_valid_bit_size

logger = logging.getLogger("bip39_entropy")

BACKENDS: dict[str, type[EntropyBackend]] = {
    "system": SystemEntropyBackend,
    "seeded": SeededEntropyBackend,
}


class EntropyConfig(BaseSettings):
    """Configuration for bip39-entropy.

    Resolution order: init kwargs -> env vars (BIP39_ENTROPY_*) -> .env file -> defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="BIP39_ENTROPY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    bit_size: int = Field(
        default=256,
        description="Entropy length in bits: 128, 160, 192, 224 or 256",
    )
    reseed_threshold: int = Field(
        default=DEFAULT_RESEED_THRESHOLD,
        description="Values issued per run before the cumulative generator reseeds",
    )
    backend: str = Field(
        default="system",
        description="Entropy backend: 'system' (OS CSPRNG) or 'seeded' (reproducible, insecure)",
    )
    backend_seed: int | None = Field(
        default=None,
        description="Seed for the 'seeded' backend; ignored by other backends",
    )
    allow_insecure_backend: bool = Field(
        default=False,
        description="Permit a non-cryptographic backend; never set for real wallet material",
    )

    @field_validator("bit_size")
    @classmethod
    def _check_bit_size(cls, value: int) -> int:
        if not is_valid_bit_size(value):
            raise ValueError(f"bit_size must be a multiple of 32 in [128, 256], got {value}")
        return value

    @field_validator("reseed_threshold")
    @classmethod
    def _check_threshold(cls, value: int) -> int:
        if value < 1:
            raise ValueError(f"reseed_threshold must be positive, got {value}")
        return value


def build_backend(config: EntropyConfig) -> EntropyBackend:
    """Instantiate the backend named by *config*.

    Raises:
        ConfigValidationError: If the name is unknown, or names an insecure
            backend without ``allow_insecure_backend``.
    """
    backend_cls = BACKENDS.get(config.backend)
    if backend_cls is None:
        available = ", ".join(sorted(BACKENDS))
        raise ConfigValidationError(
            f"Unknown entropy backend: {config.backend!r}. Available: {available}"
        )

    if not backend_cls.cryptographically_secure:
        if not config.allow_insecure_backend:
            raise ConfigValidationError(
                f"Backend {config.backend!r} is not cryptographically secure; "
                f"set allow_insecure_backend=True to use it"
            )
        logger.warning(
            "Using insecure entropy backend %r; output is reproducible and must not "
            "seed real wallets",
            config.backend,
        )

    if backend_cls is SeededEntropyBackend:
        return SeededEntropyBackend(seed=config.backend_seed)
    return backend_cls()


def create_generator(config: EntropyConfig | None = None) -> CumulativeEntropyGenerator:
    """Build a cumulative generator from *config*.

    Args:
        config: Settings to use. ``None`` loads them from the environment.

    Returns:
        A seeded generator that owns its backend.

    Raises:
        ConfigValidationError: If the backend is unknown or insecure without opt-in.
        RandomSourceError: If the initial seed cannot be drawn.
    """
    if config is None:
        config = EntropyConfig()

    return CumulativeEntropyGenerator(
        config.bit_size,
        config.reseed_threshold,
        source=SecureEntropySource(build_backend(config)),
    )
