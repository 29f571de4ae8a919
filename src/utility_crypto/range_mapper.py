"""Map uniform 64-bit samples onto inclusive integer ranges.

A raw sample is reduced with ``raw % span + min``. When ``span`` does not
divide 2**64 the reduction carries a small modulo bias: the first
``2**64 % span`` residues are drawn once more often than the rest. The
relative skew is ``(span - 2**64 % span) / 2**64``, bounded by
``span / 2**64``. This is accepted in exchange for a single draw per call
instead of rejection sampling; `modulo_bias` reports the exact figures.

Signed ranges are shifted to start at zero, mapped with the unsigned
reduction and shifted back, so they carry exactly the unsigned bias of the
shifted span. Python integers do not overflow, so the intermediate
subtraction and addition are exact.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction

RAW_BITS = 64
RAW_DOMAIN = 1 << RAW_BITS
U64_MAX = RAW_DOMAIN - 1


@dataclass(frozen=True)
class IntType:
    """A fixed-width integer type: bit width and signedness."""

    name: str
    bits: int
    signed: bool

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    @property
    def mask(self) -> int:
        return (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    def narrow(self, value: int) -> int:
        """Truncate *value* to this width, reinterpreting the sign bit for signed types."""
        value &= self.mask
        if self.signed and value > self.max_value:
            value -= 1 << self.bits
        return value

    def __str__(self) -> str:
        return self.name


UINT8 = IntType("uint8", 8, False)
UINT16 = IntType("uint16", 16, False)
UINT32 = IntType("uint32", 32, False)
UINT64 = IntType("uint64", 64, False)
INT8 = IntType("int8", 8, True)
INT16 = IntType("int16", 16, True)
INT32 = IntType("int32", 32, True)
INT64 = IntType("int64", 64, True)

INT_TYPES: dict[str, IntType] = {
    t.name: t for t in (UINT8, UINT16, UINT32, UINT64, INT8, INT16, INT32, INT64)
}


@dataclass(frozen=True)
class BiasReport:
    """Exact modulo bias of reducing a 64-bit sample into ``span`` values.

    Attributes:
        span: Number of values in the target range.
        favoured_count: How many residues (``0 .. favoured_count - 1``) are
            drawn with ``high_probability``; the rest get ``low_probability``.
        high_probability: Probability of each favoured residue.
        low_probability: Probability of each remaining residue.
    """

    span: int
    favoured_count: int
    high_probability: Fraction
    low_probability: Fraction

    @property
    def is_uniform(self) -> bool:
        return self.favoured_count == 0

    @property
    def relative_skew(self) -> Fraction:
        """How far a favoured residue exceeds ``1 / span``, relative to it."""
        if self.is_uniform:
            return Fraction(0)
        return self.high_probability * self.span - 1


def modulo_bias(span: int) -> BiasReport:
    """Describe the bias of ``raw % span`` for a uniform 64-bit ``raw``.

    Args:
        span: Range size, between 1 and 2**64 inclusive.

    Returns:
        A BiasReport holding exact probabilities.
    """
    if not 1 <= span <= RAW_DOMAIN:
        raise ValueError(f"span {span} must be between 1 and 2**64 inclusive")
    quotient, remainder = divmod(RAW_DOMAIN, span)
    if remainder == 0:
        probability = Fraction(quotient, RAW_DOMAIN)
        return BiasReport(span, 0, probability, probability)
    return BiasReport(
        span=span,
        favoured_count=remainder,
        high_probability=Fraction(quotient + 1, RAW_DOMAIN),
        low_probability=Fraction(quotient, RAW_DOMAIN),
    )


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def check_range(min_value: int, max_value: int) -> None:
    """Reject non-integer bounds, empty ranges and single-value ranges."""
    for label, value in (("min_value", min_value), ("max_value", max_value)):
        if not _is_int(value):
            raise ValueError(f"{label} {value!r} must be an integer")
    if max_value <= min_value:
        raise ValueError(f"max_value {max_value} must be greater than min_value {min_value}")


def _check_raw(raw: int) -> None:
    if not _is_int(raw) or not 0 <= raw <= U64_MAX:
        raise ValueError(f"raw sample {raw!r} is not an unsigned 64-bit value")


def check_bounds(int_type: IntType, min_value: int, max_value: int) -> None:
    for label, value in (("min_value", min_value), ("max_value", max_value)):
        if not int_type.contains(value):
            raise ValueError(
                f"{label} {value} is outside the {int_type} range "
                f"[{int_type.min_value}, {int_type.max_value}]"
            )


def map_unsigned(raw: int, min_value: int = 0, max_value: int = U64_MAX) -> int:
    """Map a raw 64-bit sample into ``[min_value, max_value]``.

    The full 64-bit range returns ``raw`` unchanged. Every other range uses
    ``raw % span + min_value`` and is biased unless ``span`` is a power of
    two (see `modulo_bias`). A range ending at 2**64 - 1 with a non-zero
    minimum is handled exactly; its span is ``2**64 - min_value``.

    Args:
        raw: Uniform sample in ``[0, 2**64)``.
        min_value, max_value: Inclusive unsigned 64-bit bounds, max > min.

    Returns:
        An integer in ``[min_value, max_value]``.
    """
    check_range(min_value, max_value)
    check_bounds(UINT64, min_value, max_value)
    _check_raw(raw)
    if min_value == 0 and max_value == U64_MAX:
        return raw
    span = max_value - min_value + 1
    return raw % span + min_value


def map_signed(raw: int, min_value: int = INT64.min_value, max_value: int = INT64.max_value) -> int:
    """Map a raw 64-bit sample into the signed range ``[min_value, max_value]``.

    The range is shifted to ``[0, max_value - min_value]``, mapped with
    `map_unsigned` and shifted back. The full signed 64-bit range becomes
    the full unsigned range and takes the unbiased fast path.
    """
    # Validate before the subtraction below.
    check_range(min_value, max_value)
    check_bounds(INT64, min_value, max_value)
    shifted_max = max_value - min_value
    return map_unsigned(raw, 0, shifted_max) + min_value


def map_to_range(raw: int, min_value: int, max_value: int, int_type: IntType = UINT64) -> int:
    """Map a raw sample into ``[min_value, max_value]`` for a fixed-width type.

    Bounds are checked against *int_type*, widened to 64 bits, mapped with
    the unsigned or signed reduction and narrowed back to ``int_type.bits``.
    """
    check_range(min_value, max_value)
    check_bounds(int_type, min_value, max_value)
    if int_type.signed:
        result = map_signed(raw, min_value, max_value)
    else:
        result = map_unsigned(raw, min_value, max_value)
    return int_type.narrow(result)
