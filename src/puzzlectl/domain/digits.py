"""Arbitrary-precision non-negative decimal values.

A DecimalValue stores its canonical digit string: ASCII digits only, no
leading zeros, zero written as ``"0"``. Equal digit strings are equal values,
so ordering needs no arithmetic at all.

INVARIANT: every DecimalValue is canonical. ``parse`` is the only way to
accept untrusted text; the constructor rejects anything non-canonical.
"""

from __future__ import annotations

from dataclasses import dataclass

from puzzlectl.domain.errors import MalformedNumber
from puzzlectl.domain.types import Ordering


def is_digit_string(text: str) -> bool:
    """Return True if *text* is a non-empty run of ASCII digits."""
    return bool(text) and text.isascii() and text.isdigit()


def canonicalize(text: str) -> str:
    """Strip leading zeros from a digit string, keeping a single ``"0"``.

    Examples:
        >>> canonicalize("007")
        '7'
        >>> canonicalize("000")
        '0'
    """
    return text.lstrip("0") or "0"


@dataclass(frozen=True, slots=True)
class DecimalValue:
    """A non-negative integer of unbounded length held as decimal digits."""

    digits: str

    def __post_init__(self) -> None:
        if not is_digit_string(self.digits):
            raise MalformedNumber(f"not a decimal digit string: {self.digits!r}")
        if self.digits != canonicalize(self.digits):
            raise MalformedNumber(f"non-canonical decimal value: {self.digits!r}")

    @classmethod
    def parse(cls, text: str) -> DecimalValue:
        """Parse a digit string, dropping leading zeros.

        Raises:
            MalformedNumber: *text* is empty or contains a non-digit.
        """
        if not is_digit_string(text):
            raise MalformedNumber(f"expected decimal digits, got {text!r}")
        return cls(canonicalize(text))

    @classmethod
    def from_int(cls, value: int) -> DecimalValue:
        if value < 0:
            raise MalformedNumber(f"negative values are not representable: {value}")
        return cls(str(value))

    @property
    def is_zero(self) -> bool:
        return self.digits == "0"

    def compare(self, other: DecimalValue) -> Ordering:
        return compare(self, other)

    def __lt__(self, other: DecimalValue) -> bool:
        return compare(self, other) is Ordering.LESS

    def __le__(self, other: DecimalValue) -> bool:
        return compare(self, other) is not Ordering.GREATER

    def __gt__(self, other: DecimalValue) -> bool:
        return compare(self, other) is Ordering.GREATER

    def __ge__(self, other: DecimalValue) -> bool:
        return compare(self, other) is not Ordering.LESS

    def __len__(self) -> int:
        return len(self.digits)

    def __int__(self) -> int:
        return int(self.digits)

    def __str__(self) -> str:
        return self.digits


ZERO = DecimalValue("0")


def compare(a: DecimalValue, b: DecimalValue) -> Ordering:
    """Total order over canonical decimal values.

    A shorter digit string is the smaller value. Equal lengths are decided
    by the first differing digit, left to right.
    """
    if len(a.digits) != len(b.digits):
        return Ordering.LESS if len(a.digits) < len(b.digits) else Ordering.GREATER
    for da, db in zip(a.digits, b.digits, strict=True):
        if da != db:
            return Ordering.LESS if da < db else Ordering.GREATER
    return Ordering.EQUAL
