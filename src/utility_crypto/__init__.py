"""Cryptographically secure random numbers and strings without modulo-bias guesswork."""

from __future__ import annotations

import threading

from utility_crypto.helper import (
    MAX_BASE64_CHARS,
    MIN_BASE64_CHARS,
    RAW_SAMPLE_BYTES,
    RandomNumberHelper,
)
from utility_crypto.range_mapper import (
    INT8,
    INT16,
    INT32,
    INT64,
    INT_TYPES,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    BiasReport,
    IntType,
    map_signed,
    map_to_range,
    map_unsigned,
    modulo_bias,
)
from utility_crypto.source import EntropySourceError, SecureByteSource, SystemByteSource

__all__ = [
    "BiasReport",
    "EntropySourceError",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "INT_TYPES",
    "IntType",
    "MAX_BASE64_CHARS",
    "MIN_BASE64_CHARS",
    "RAW_SAMPLE_BYTES",
    "RandomNumberHelper",
    "SecureByteSource",
    "SystemByteSource",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "generate_int8",
    "generate_int16",
    "generate_int32",
    "generate_int64",
    "generate_random_bytes",
    "generate_random_number",
    "generate_uint8",
    "generate_uint16",
    "generate_uint32",
    "generate_uint64",
    "get_default_helper",
    "get_random_base64_string",
    "map_signed",
    "map_to_range",
    "map_unsigned",
    "modulo_bias",
]

_default_helper: RandomNumberHelper | None = None
_default_lock = threading.Lock()


def get_default_helper() -> RandomNumberHelper:
    """Return the shared helper backed by the system entropy source."""
    global _default_helper
    if _default_helper is None:
        with _default_lock:
            if _default_helper is None:
                _default_helper = RandomNumberHelper()
    return _default_helper


def generate_random_bytes(count: int) -> bytes:
    return get_default_helper().generate_random_bytes(count)


def generate_random_number(
    min_value: int | None = None,
    max_value: int | None = None,
    int_type: IntType = UINT64,
) -> int:
    return get_default_helper().generate_random_number(min_value, max_value, int_type)


def get_random_base64_string(char_count: int) -> str:
    return get_default_helper().get_random_base64_string(char_count)


def generate_uint8(min_value: int | None = None, max_value: int | None = None) -> int:
    return get_default_helper().generate_uint8(min_value, max_value)


def generate_uint16(min_value: int | None = None, max_value: int | None = None) -> int:
    return get_default_helper().generate_uint16(min_value, max_value)


def generate_uint32(min_value: int | None = None, max_value: int | None = None) -> int:
    return get_default_helper().generate_uint32(min_value, max_value)


def generate_uint64(min_value: int | None = None, max_value: int | None = None) -> int:
    return get_default_helper().generate_uint64(min_value, max_value)


def generate_int8(min_value: int | None = None, max_value: int | None = None) -> int:
    return get_default_helper().generate_int8(min_value, max_value)


def generate_int16(min_value: int | None = None, max_value: int | None = None) -> int:
    return get_default_helper().generate_int16(min_value, max_value)


def generate_int32(min_value: int | None = None, max_value: int | None = None) -> int:
    return get_default_helper().generate_int32(min_value, max_value)


def generate_int64(min_value: int | None = None, max_value: int | None = None) -> int:
    return get_default_helper().generate_int64(min_value, max_value)
