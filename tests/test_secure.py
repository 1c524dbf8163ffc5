"""Tests for SecureEntropySource and the one-shot generate_entropy()."""

from __future__ import annotations

import os

import pytest

from bip39_entropy.backends.base import EntropyBackend
from bip39_entropy.exceptions import InvalidSizeError, RandomSourceError
from bip39_entropy.secure import SecureEntropySource, generate_entropy
from bip39_entropy.sizes import VALID_BIT_SIZES

INVALID_SIZES = (100, 129, 300, 0, -128)


class _ShortReadBackend(EntropyBackend):
    """Test double: returns one byte fewer than requested."""

    @property
    def name(self) -> str:
        return "short_read"

    @property
    def is_available(self) -> bool:
        return True

    def get_random_bytes(self, n: int) -> bytes:
        return b"\x01" * (n - 1)

    def close(self) -> None:
        pass


class _OSErrorBackend(_ShortReadBackend):
    """Test double: fails like a raw OS call."""

    @property
    def name(self) -> str:
        return "os_error"

    def get_random_bytes(self, n: int) -> bytes:
        raise OSError("getrandom failed")


class _RuntimeErrorBackend(_ShortReadBackend):
    """Test double: a custom backend failing with an arbitrary exception."""

    @property
    def name(self) -> str:
        return "runtime_error"

    def get_random_bytes(self, n: int) -> bytes:
        raise RuntimeError("device unplugged")


class TestGenerateEntropy:
    @pytest.mark.parametrize("bit_size", VALID_BIT_SIZES)
    def test_returns_bit_size_over_eight_bytes(self, bit_size: int) -> None:
        data = generate_entropy(bit_size)
        assert isinstance(data, bytes)
        assert len(data) == bit_size // 8

    def test_consecutive_calls_differ(self) -> None:
        # Statistically near-impossible for 32 random bytes to repeat.
        assert generate_entropy(256) != generate_entropy(256)

    @pytest.mark.parametrize("bit_size", INVALID_SIZES)
    def test_invalid_size_draws_nothing(self, bit_size: int, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[int] = []

        def spy(n: int) -> bytes:
            calls.append(n)
            return b"\x00" * n

        monkeypatch.setattr(os, "urandom", spy)
        with pytest.raises(InvalidSizeError):
            generate_entropy(bit_size)
        assert calls == []

    def test_os_failure_raises_random_source_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def broken(n: int) -> bytes:
            raise OSError("entropy pool not initialised")

        monkeypatch.setattr(os, "urandom", broken)
        with pytest.raises(RandomSourceError) as excinfo:
            generate_entropy(128)
        assert isinstance(excinfo.value.__cause__, OSError)


class TestSecureEntropySource:
    def test_returns_backend_bytes_verbatim(self, counting_backend, counting_source) -> None:
        data = counting_source.generate(160)
        assert data == bytes([0xF0]) + bytes(19)
        assert counting_backend.draws == 1

    @pytest.mark.parametrize("bit_size", INVALID_SIZES)
    def test_invalid_size_draws_nothing(self, bit_size: int, counting_backend, counting_source) -> None:
        with pytest.raises(InvalidSizeError):
            counting_source.generate(bit_size)
        assert counting_backend.draws == 0

    def test_backend_error_propagates_without_retry(self, flaky_backend) -> None:
        flaky_backend.fail = True
        source = SecureEntropySource(flaky_backend)
        with pytest.raises(RandomSourceError, match="unavailable"):
            source.generate(128)
        assert flaky_backend.failures == 1

    def test_oserror_is_wrapped(self) -> None:
        source = SecureEntropySource(_OSErrorBackend())
        with pytest.raises(RandomSourceError, match="os_error") as excinfo:
            source.generate(128)
        assert isinstance(excinfo.value.__cause__, OSError)

    def test_arbitrary_backend_error_is_wrapped(self) -> None:
        source = SecureEntropySource(_RuntimeErrorBackend())
        with pytest.raises(RandomSourceError, match="device unplugged") as excinfo:
            source.generate(128)
        assert isinstance(excinfo.value.__cause__, RuntimeError)

    def test_entropy_errors_pass_through_unwrapped(self, flaky_backend) -> None:
        flaky_backend.fail = True
        with pytest.raises(RandomSourceError) as excinfo:
            SecureEntropySource(flaky_backend).generate(128)
        assert excinfo.value.__cause__ is None

    def test_short_read_is_a_source_failure(self) -> None:
        source = SecureEntropySource(_ShortReadBackend())
        with pytest.raises(RandomSourceError, match="returned 15 bytes, expected 16"):
            source.generate(128)

    def test_default_backend_is_system(self) -> None:
        assert SecureEntropySource().backend == "system"

    def test_close_closes_backend(self, counting_backend, counting_source) -> None:
        counting_source.close()
        assert counting_backend.closed is True
