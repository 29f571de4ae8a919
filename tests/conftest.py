"""Shared test fixtures."""

import pytest

from utility_crypto import RandomNumberHelper
from utility_crypto.source import EntropySourceError, SecureByteSource


class ScriptedByteSource(SecureByteSource):
    """Replays pre-recorded byte chunks, one chunk per fill() call."""

    def __init__(self, chunks: list[bytes] | None = None):
        self.chunks = list(chunks or [])
        self.calls = 0

    def fill(self, buffer: bytearray) -> None:
        self.calls += 1
        if not self.chunks:
            raise AssertionError("ScriptedByteSource ran out of chunks")
        chunk = self.chunks.pop(0)
        assert len(chunk) == len(buffer), f"requested {len(buffer)} bytes, scripted {len(chunk)}"
        buffer[:] = chunk


class FailingByteSource(SecureByteSource):
    """Always reports the entropy source as unavailable."""

    def fill(self, buffer: bytearray) -> None:
        raise EntropySourceError("entropy pool unavailable")


def raw_sample(value: int) -> bytes:
    """Encode a 64-bit raw sample the way the helper decodes it."""
    return value.to_bytes(8, "little")


def chi_square(counts: list[int], expected: float) -> float:
    return sum((c - expected) ** 2 / expected for c in counts)


@pytest.fixture
def helper():
    """Provide a helper backed by the system entropy source."""
    return RandomNumberHelper()


@pytest.fixture
def scripted():
    """Provide a factory for helpers that replay fixed raw samples."""

    def make(*chunks: bytes) -> tuple[RandomNumberHelper, ScriptedByteSource]:
        source = ScriptedByteSource(list(chunks))
        return RandomNumberHelper(source), source

    return make
