"""Tests for the puzzle error taxonomy."""

from puzzlectl.domain.errors import (
    ArithmeticDomainError,
    MalformedInput,
    MalformedNumber,
    MalformedRange,
    PuzzleError,
)


class TestPuzzleError:
    def test_codes(self) -> None:
        assert MalformedNumber("x").code == "MALFORMED_NUMBER"
        assert MalformedRange("x").code == "MALFORMED_RANGE"
        assert MalformedInput("x").code == "MALFORMED_INPUT"
        assert ArithmeticDomainError("x").code == "ARITHMETIC_DOMAIN"

    def test_hierarchy(self) -> None:
        for cls in (MalformedNumber, MalformedRange, MalformedInput, ArithmeticDomainError):
            assert issubclass(cls, PuzzleError)

    def test_at_sets_location(self) -> None:
        exc = MalformedNumber("bad").at(3, "Lx")
        assert exc.line_number == 3
        assert exc.line == "Lx"
        assert str(exc) == "line 3: bad"
        assert exc.to_detail() == {"line_number": 3, "line": "Lx"}

    def test_at_keeps_existing_location(self) -> None:
        exc = MalformedNumber("bad", line="inner", line_number=1).at(9, "outer")
        assert exc.line_number == 1
        assert exc.line == "inner"

    def test_without_location(self) -> None:
        exc = MalformedRange("no dash")
        assert str(exc) == "no dash"
        assert exc.to_detail() == {}
