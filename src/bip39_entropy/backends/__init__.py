"""Entropy backend subsystem for bip39-entropy.

Re-exports the ABC and the built-in backend implementations::

    from bip39_entropy.backends import EntropyBackend, SystemEntropyBackend
"""

from bip39_entropy.backends.base import EntropyBackend
from bip39_entropy.backends.seeded import SeededEntropyBackend
from bip39_entropy.backends.system import SystemEntropyBackend

__all__ = [
    "EntropyBackend",
    "SeededEntropyBackend",
    "SystemEntropyBackend",
]
