"""Positional arithmetic over DecimalValue.

Every operation works digit by digit, so operand length is bounded only by
memory. Modulo reduces as it folds digits in: the running remainder never
grows past ``10 * base``.
"""

from __future__ import annotations

from itertools import zip_longest

from puzzlectl.domain.digits import ZERO, DecimalValue, canonicalize, compare, is_digit_string
from puzzlectl.domain.errors import ArithmeticDomainError, MalformedNumber
from puzzlectl.domain.types import Ordering

DIAL_BASE = 100

_DIGIT_VALUES: dict[str, DecimalValue] = {d: DecimalValue(d) for d in "0123456789"}


def add(a: DecimalValue, b: DecimalValue) -> DecimalValue:
    """Return ``a + b``; the result has at most ``max(len(a), len(b)) + 1`` digits."""
    out: list[str] = []
    carry = 0
    for da, db in zip_longest(reversed(a.digits), reversed(b.digits), fillvalue="0"):
        total = int(da) + int(db) + carry
        carry, digit = divmod(total, 10)
        out.append(str(digit))
    if carry:
        out.append(str(carry))
    return DecimalValue("".join(reversed(out)))


def subtract(a: DecimalValue, b: DecimalValue) -> DecimalValue:
    """Return ``a - b`` exactly.

    Raises:
        ArithmeticDomainError: ``b > a``. Use :func:`modular_subtract` when
            wraparound is wanted.
    """
    if compare(a, b) is Ordering.LESS:
        raise ArithmeticDomainError(f"cannot subtract {b} from smaller value {a}")
    out: list[str] = []
    borrow = 0
    for da, db in zip_longest(reversed(a.digits), reversed(b.digits), fillvalue="0"):
        diff = int(da) - int(db) - borrow
        borrow = 1 if diff < 0 else 0
        out.append(str(diff + 10 * borrow))
    return DecimalValue(canonicalize("".join(reversed(out))))


def multiply_by_ten(a: DecimalValue) -> DecimalValue:
    if a.is_zero:
        return ZERO
    return DecimalValue(a.digits + "0")


def _reduce_once(value: DecimalValue, base: DecimalValue) -> DecimalValue:
    # value < 10 * base here, so this loops at most nine times
    while compare(value, base) is not Ordering.LESS:
        value = subtract(value, base)
    return value


def _base_value(base: int) -> DecimalValue:
    if base < 1:
        raise ArithmeticDomainError(f"modulo base must be positive, got {base}")
    return DecimalValue.from_int(base)


def _fold_mod(digits: str, base: DecimalValue) -> DecimalValue:
    acc = ZERO
    for ch in digits:
        acc = _reduce_once(add(multiply_by_ten(acc), _DIGIT_VALUES[ch]), base)
    return acc


def modulo(a: DecimalValue, base: int) -> DecimalValue:
    """Return ``a mod base`` as a value in ``[0, base)``."""
    return _fold_mod(a.digits, _base_value(base))


def modulo_100(a: DecimalValue) -> DecimalValue:
    return modulo(a, DIAL_BASE)


def parse_and_reduce(digits: str, base: int = DIAL_BASE) -> int:
    """Parse *digits* and reduce mod *base* one digit at a time.

    Computes ``acc = (acc * 10 + digit) mod base`` left to right, so huge
    magnitudes never materialize.

    Raises:
        MalformedNumber: *digits* is empty or contains a non-digit.
    """
    if not is_digit_string(digits):
        raise MalformedNumber(f"expected decimal digits, got {digits!r}")
    return int(_fold_mod(digits, _base_value(base)))


def parse_and_reduce_mod100(digits: str) -> int:
    return parse_and_reduce(digits, DIAL_BASE)


def modular_add(position: int, amount: int, base: int = DIAL_BASE) -> int:
    """Rotate *position* forward by *amount* on a ring of *base* slots."""
    return (position + amount % base) % base


def modular_subtract(position: int, amount: int, base: int = DIAL_BASE) -> int:
    """Rotate *position* backward by *amount* on a ring of *base* slots.

    When the step overshoots zero, the overshoot is taken from *base*
    instead: ``base - (amount - position)``.
    """
    amount %= base
    if amount > position:
        return (base - (amount - position)) % base
    return (position - amount) % base
