"""Puzzle error taxonomy.

Every error is fatal to the run that raised it. The service layer turns a
PuzzleError into a ServiceError carrying ``code`` and the offending line.
"""

from __future__ import annotations

from typing import Any


class PuzzleError(Exception):
    """Base class for malformed-input and arithmetic-domain failures."""

    code = "PUZZLE_ERROR"

    def __init__(
        self,
        message: str,
        *,
        line: str | None = None,
        line_number: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.line_number = line_number

    def at(self, line_number: int, line: str) -> PuzzleError:
        """Attach the 1-based line position, keeping an earlier one if set."""
        if self.line_number is None:
            self.line_number = line_number
        if self.line is None:
            self.line = line
        return self

    def to_detail(self) -> dict[str, Any]:
        detail: dict[str, Any] = {}
        if self.line_number is not None:
            detail["line_number"] = self.line_number
        if self.line is not None:
            detail["line"] = self.line
        return detail

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return f"line {self.line_number}: {self.message}"


class MalformedNumber(PuzzleError):
    """A value expected to be a decimal digit string is empty or has non-digits."""

    code = "MALFORMED_NUMBER"


class MalformedRange(PuzzleError):
    """A range line has no ``-`` separator, or its minimum exceeds its maximum."""

    code = "MALFORMED_RANGE"


class MalformedInput(PuzzleError):
    """The input text does not have the block structure a puzzle expects."""

    code = "MALFORMED_INPUT"


class ArithmeticDomainError(PuzzleError):
    """An operation was called outside the domain where it is defined."""

    code = "ARITHMETIC_DOMAIN"
