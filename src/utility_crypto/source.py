"""Cryptographically secure byte sources."""

from __future__ import annotations

import secrets
from abc import ABC, abstractmethod


class EntropySourceError(RuntimeError):
    """Raised when secure random bytes cannot be produced."""


class SecureByteSource(ABC):
    """Abstract base class for cryptographically secure byte sources.

    Implementations must be safe to call from several threads at once and
    must raise rather than return low-quality or zero-filled data.
    """

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def fill(self, buffer: bytearray) -> None:
        """Overwrite every byte of *buffer* with secure random data."""
        ...

    def random_bytes(self, count: int) -> bytes:
        buffer = bytearray(count)
        self.fill(buffer)
        return bytes(buffer)


class SystemByteSource(SecureByteSource):
    """Operating system CSPRNG, reached through `secrets`."""

    def fill(self, buffer: bytearray) -> None:
        size = len(buffer)
        try:
            data = secrets.token_bytes(size)
        except (OSError, NotImplementedError) as e:
            raise EntropySourceError(f"System entropy source unavailable: {e}") from e
        if len(data) != size:
            raise EntropySourceError(
                f"System entropy source returned {len(data)} bytes, expected {size}"
            )
        buffer[:] = data
