"""Secure random numbers and strings built on an injected byte source."""

from __future__ import annotations

import base64
import logging

from utility_crypto.range_mapper import (
    INT8,
    INT16,
    INT32,
    INT64,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    IntType,
    check_bounds,
    check_range,
    map_to_range,
)
from utility_crypto.source import SecureByteSource, SystemByteSource

logger = logging.getLogger(__name__)

RAW_SAMPLE_BYTES = 8
MIN_BASE64_CHARS = 4
MAX_BASE64_CHARS = 1024


class RandomNumberHelper:
    """Random bytes, bounded integers and base64 strings.

    Uses a `SystemByteSource` unless another source is injected, e.g. a
    scripted fake in tests.
    """

    def __init__(self, source: SecureByteSource | None = None):
        self._source = source if source is not None else SystemByteSource()
        logger.debug("RandomNumberHelper using %s", self._source.name)

    @property
    def source(self) -> SecureByteSource:
        return self._source

    def generate_random_bytes(self, count: int) -> bytes:
        """Return *count* cryptographically random bytes."""
        if not isinstance(count, int) or isinstance(count, bool) or count < 1:
            raise ValueError(f"count is {count!r}: it must be a positive integer.")
        return self._source.random_bytes(count)

    def generate_random_number(
        self,
        min_value: int | None = None,
        max_value: int | None = None,
        int_type: IntType = UINT64,
    ) -> int:
        """Return a random integer in ``[min_value, max_value]``.

        Omitted bounds default to the limits of *int_type*. The result is
        slightly biased when the span is not a power of two; see
        `utility_crypto.range_mapper.modulo_bias`.

        Raises:
            ValueError: a non-integer bound, max_value <= min_value, or a bound
                outside *int_type*.
        """
        if min_value is None:
            min_value = int_type.min_value
        if max_value is None:
            max_value = int_type.max_value
        # Reject before consuming entropy.
        check_range(min_value, max_value)
        check_bounds(int_type, min_value, max_value)
        raw = int.from_bytes(self._source.random_bytes(RAW_SAMPLE_BYTES), "little")
        return map_to_range(raw, min_value, max_value, int_type)

    def generate_uint8(self, min_value: int | None = None, max_value: int | None = None) -> int:
        return self.generate_random_number(min_value, max_value, UINT8)

    def generate_uint16(self, min_value: int | None = None, max_value: int | None = None) -> int:
        return self.generate_random_number(min_value, max_value, UINT16)

    def generate_uint32(self, min_value: int | None = None, max_value: int | None = None) -> int:
        return self.generate_random_number(min_value, max_value, UINT32)

    def generate_uint64(self, min_value: int | None = None, max_value: int | None = None) -> int:
        return self.generate_random_number(min_value, max_value, UINT64)

    def generate_int8(self, min_value: int | None = None, max_value: int | None = None) -> int:
        return self.generate_random_number(min_value, max_value, INT8)

    def generate_int16(self, min_value: int | None = None, max_value: int | None = None) -> int:
        return self.generate_random_number(min_value, max_value, INT16)

    def generate_int32(self, min_value: int | None = None, max_value: int | None = None) -> int:
        return self.generate_random_number(min_value, max_value, INT32)

    def generate_int64(self, min_value: int | None = None, max_value: int | None = None) -> int:
        return self.generate_random_number(min_value, max_value, INT64)

    def get_random_base64_string(self, char_count: int) -> str:
        """Return a random base64 string of exactly *char_count* characters.

        *char_count* must be a multiple of 4 so the encoding never needs
        ``=`` padding, which would skew the character distribution.
        """
        if (
            not isinstance(char_count, int)
            or isinstance(char_count, bool)
            or not MIN_BASE64_CHARS <= char_count <= MAX_BASE64_CHARS
            or char_count % 4 != 0
        ):
            raise ValueError(
                f"char_count is {char_count!r}: it must be between {MIN_BASE64_CHARS} and "
                f"{MAX_BASE64_CHARS} inclusive and divisible by 4."
            )
        data = self.generate_random_bytes(char_count // 4 * 3)
        return base64.b64encode(data).decode("ascii")
