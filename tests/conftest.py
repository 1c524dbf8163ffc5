"""Shared pytest fixtures for bip39-entropy tests.

Provides instrumented entropy backends whose draws can be counted,
scripted, or made to fail, so generator behaviour is deterministic.
"""

from __future__ import annotations

from collections.abc import Iterable

import pytest

from bip39_entropy.backends.base import EntropyBackend
from bip39_entropy.exceptions import RandomSourceError
from bip39_entropy.secure import SecureEntropySource


class CountingBackend(EntropyBackend):
    """Test double: counts draws and returns distinct, full-width seeds.

    Draw *k* (0-based) returns ``0xF0 - k`` followed by zero bytes, so every
    seed keeps a non-zero leading byte and runs never overlap.
    """

    def __init__(self) -> None:
        self.draws = 0
        self.closed = False

    @property
    def name(self) -> str:
        return "counting"

    @property
    def is_available(self) -> bool:
        return True

    def get_random_bytes(self, n: int) -> bytes:
        lead = 0xF0 - self.draws
        self.draws += 1
        return bytes([lead]) + bytes(n - 1)

    def close(self) -> None:
        self.closed = True


class ScriptedBackend(CountingBackend):
    """Test double: returns queued payloads first, then counting seeds."""

    def __init__(self, payloads: Iterable[bytes]) -> None:
        super().__init__()
        self._payloads = list(payloads)

    @property
    def name(self) -> str:
        return "scripted"

    def get_random_bytes(self, n: int) -> bytes:
        if self._payloads:
            self.draws += 1
            return self._payloads.pop(0)
        return super().get_random_bytes(n)


class FlakyBackend(CountingBackend):
    """Test double: raises RandomSourceError while ``fail`` is set."""

    def __init__(self) -> None:
        super().__init__()
        self.fail = False
        self.failures = 0

    @property
    def name(self) -> str:
        return "flaky"

    def get_random_bytes(self, n: int) -> bytes:
        if self.fail:
            self.failures += 1
            raise RandomSourceError("entropy pool unavailable")
        return super().get_random_bytes(n)


@pytest.fixture
def counting_backend() -> CountingBackend:
    """Return a fresh CountingBackend."""
    return CountingBackend()


@pytest.fixture
def counting_source(counting_backend: CountingBackend) -> SecureEntropySource:
    """Return a SecureEntropySource drawing from ``counting_backend``."""
    return SecureEntropySource(counting_backend)


@pytest.fixture
def flaky_backend() -> FlakyBackend:
    """Return a FlakyBackend that succeeds until ``fail`` is set."""
    return FlakyBackend()


@pytest.fixture
def scripted_backend() -> type[ScriptedBackend]:
    """Return the ScriptedBackend class for tests that queue payloads."""
    return ScriptedBackend
