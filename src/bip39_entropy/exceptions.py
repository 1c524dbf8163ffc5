"""Exception hierarchy for bip39-entropy.

All exceptions derive from EntropyError, enabling broad catch patterns
at the application boundary while allowing fine-grained handling internally.
"""


class EntropyError(Exception):
    """Base exception for all bip39-entropy errors."""


class InvalidSizeError(EntropyError, ValueError):
    """Requested entropy bit size is not allowed.

    Raised before any randomness is drawn when the size is not a multiple
    of 32 within the inclusive range [128, 256].
    """


class RandomSourceError(EntropyError):
    """The underlying secure random source failed.

    Not retried internally: a failing system entropy source is a systemic
    condition and retry policy belongs to the caller.
    """


class ConfigValidationError(EntropyError):
    """Configuration field validation failed.

    Raised for a non-positive reseed threshold or an unknown backend name.
    """
