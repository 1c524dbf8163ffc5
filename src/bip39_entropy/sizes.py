"""Entropy bit-size validation shared by every generator."""

from __future__ import annotations

from bip39_entropy.exceptions import InvalidSizeError

MIN_BIT_SIZE: int = 128
MAX_BIT_SIZE: int = 256
BIT_SIZE_STEP: int = 32

VALID_BIT_SIZES: tuple[int, ...] = tuple(range(MIN_BIT_SIZE, MAX_BIT_SIZE + 1, BIT_SIZE_STEP))


def is_valid_bit_size(bit_size: object) -> bool:
    """Return ``True`` if *bit_size* is an allowed entropy size."""
    if isinstance(bit_size, bool) or not isinstance(bit_size, int):
        return False
    return bit_size % BIT_SIZE_STEP == 0 and MIN_BIT_SIZE <= bit_size <= MAX_BIT_SIZE


def validate_bit_size(bit_size: int) -> None:
    """Check that *bit_size* is a multiple of 32 within [128, 256].

    Args:
        bit_size: Requested entropy length in bits.

    Raises:
        InvalidSizeError: If the size is not allowed.
    """
    if not is_valid_bit_size(bit_size):
        raise InvalidSizeError(
            f"Entropy bit size must be a multiple of {BIT_SIZE_STEP} in "
            f"[{MIN_BIT_SIZE}, {MAX_BIT_SIZE}], got {bit_size!r}"
        )
