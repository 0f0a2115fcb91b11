"""Tests for positional arithmetic over DecimalValue."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from puzzlectl.domain.arithmetic import (
    add,
    modular_add,
    modular_subtract,
    modulo,
    modulo_100,
    multiply_by_ten,
    parse_and_reduce,
    parse_and_reduce_mod100,
    subtract,
)
from puzzlectl.domain.digits import ZERO, DecimalValue
from puzzlectl.domain.errors import ArithmeticDomainError, MalformedNumber


def d(value: int | str) -> DecimalValue:
    return DecimalValue.parse(str(value))


naturals = st.integers(min_value=0, max_value=10**80)


class TestAdd:
    def test_small(self) -> None:
        assert add(d(2), d(3)) == d(5)

    def test_identity(self) -> None:
        assert add(d(2), ZERO) == d(2)

    def test_carry_grows_length(self) -> None:
        result = add(d(999), d(1))
        assert result == d(1000)
        assert len(result) == 4

    def test_uneven_lengths(self) -> None:
        assert add(d(7), d(123456789)) == d(123456796)

    @given(naturals, naturals)
    def test_matches_int(self, a: int, b: int) -> None:
        result = add(d(a), d(b))
        assert int(result) == a + b
        assert len(result) <= max(len(str(a)), len(str(b))) + 1


class TestSubtract:
    def test_small(self) -> None:
        assert subtract(d(5), d(3)) == d(2)

    def test_zero_operand(self) -> None:
        assert subtract(d(5), ZERO) == d(5)

    def test_result_is_canonical(self) -> None:
        assert subtract(d(1000), d(999)).digits == "1"
        assert subtract(d(42), d(42)) == ZERO

    def test_undefined_when_b_greater(self) -> None:
        with pytest.raises(ArithmeticDomainError):
            subtract(d(3), d(5))

    @given(naturals, naturals)
    def test_matches_int(self, a: int, b: int) -> None:
        hi, lo = max(a, b), min(a, b)
        assert int(subtract(d(hi), d(lo))) == hi - lo


class TestMultiplyByTen:
    def test_five(self) -> None:
        assert multiply_by_ten(d(5)) == d(50)

    def test_zero(self) -> None:
        assert multiply_by_ten(ZERO) == ZERO


class TestModulo:
    def test_sum_wraps(self) -> None:
        assert modulo_100(add(d(99), d(50))) == d(49)

    def test_below_base_unchanged(self) -> None:
        assert modulo_100(d(99)) == d(99)

    def test_exact_multiple(self) -> None:
        assert modulo_100(d(1200)) == ZERO

    def test_other_base(self) -> None:
        assert modulo(d(17), 5) == d(2)

    def test_rejects_non_positive_base(self) -> None:
        with pytest.raises(ArithmeticDomainError):
            modulo(d(17), 0)

    @given(naturals, st.integers(min_value=1, max_value=1000))
    def test_matches_int(self, a: int, base: int) -> None:
        assert int(modulo(d(a), base)) == a % base


class TestParseAndReduce:
    def test_mod100(self) -> None:
        assert parse_and_reduce_mod100("12345") == 45

    def test_leading_zeros(self) -> None:
        assert parse_and_reduce_mod100("0007") == 7

    def test_huge_magnitude(self) -> None:
        assert parse_and_reduce_mod100("9" * 1000) == 99

    @pytest.mark.parametrize("text", ["", "1x", "-1"])
    def test_malformed(self, text: str) -> None:
        with pytest.raises(MalformedNumber):
            parse_and_reduce_mod100(text)

    @given(naturals, st.integers(min_value=1, max_value=500))
    def test_incremental_equals_final_reduction(self, a: int, base: int) -> None:
        assert parse_and_reduce(str(a), base) == int(modulo(d(a), base)) == a % base


class TestModularRotation:
    def test_add_wraps(self) -> None:
        assert modular_add(98, 5) == 3

    def test_subtract_direct(self) -> None:
        assert modular_subtract(5, 3) == 2

    def test_subtract_wraps(self) -> None:
        assert modular_subtract(3, 5) == 98

    def test_subtract_to_zero(self) -> None:
        assert modular_subtract(0, 100) == 0
        assert modular_subtract(0, 0) == 0

    @given(st.integers(0, 99), st.integers(0, 10**6))
    def test_remainder_formulation_matches_euclidean(self, position: int, amount: int) -> None:
        assert modular_subtract(position, amount) == (position - amount) % 100
        assert modular_add(position, amount) == (position + amount) % 100
