"""Inclusive-range freshness checker.

Input is a block of ``min-max`` range lines, one blank line, then a block of
ID lines. An ID is fresh when no range contains it; the answer is how many
IDs are fresh.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import TypeVar

from puzzlectl.domain.digits import DecimalValue, compare
from puzzlectl.domain.errors import MalformedRange, PuzzleError
from puzzlectl.domain.text import split_blocks
from puzzlectl.domain.types import Ordering

_T = TypeVar("_T")


@dataclass(frozen=True)
class IdRange:
    """Inclusive ``[start, end]`` interval. INVARIANT: ``start <= end``."""

    start: DecimalValue
    end: DecimalValue

    def __post_init__(self) -> None:
        if compare(self.start, self.end) is Ordering.GREATER:
            raise MalformedRange(f"range start {self.start} exceeds end {self.end}")

    def __contains__(self, value: object) -> bool:
        return isinstance(value, DecimalValue) and in_range(value, self)

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


@dataclass(frozen=True)
class FreshnessReport:
    """Outcome of a freshness run. ``fresh`` is the puzzle answer."""

    fresh: int
    total_ids: int
    total_ranges: int


def parse_range(line: str) -> IdRange:
    """Parse ``min-max``, splitting on the first ``-``.

    Raises:
        MalformedRange: no ``-`` in the line, or min exceeds max.
        MalformedNumber: either bound is not a digit string.
    """
    start, sep, end = line.partition("-")
    if not sep:
        raise MalformedRange(f"range has no '-' separator: {line!r}")
    return IdRange(DecimalValue.parse(start), DecimalValue.parse(end))


def in_range(value: DecimalValue, id_range: IdRange) -> bool:
    return (
        compare(id_range.start, value) is not Ordering.GREATER
        and compare(value, id_range.end) is not Ordering.GREATER
    )


def is_fresh(value: DecimalValue, ranges: Iterable[IdRange]) -> bool:
    """True when *value* lies in none of *ranges*; stops at the first hit."""
    return not any(in_range(value, r) for r in ranges)


def count_fresh(ids: Iterable[DecimalValue], ranges: Sequence[IdRange]) -> int:
    return sum(1 for value in ids if is_fresh(value, ranges))


def _parse_lines(lines: Iterable[tuple[int, str]], parse: Callable[[str], _T]) -> list[_T]:
    parsed: list[_T] = []
    for number, line in lines:
        try:
            parsed.append(parse(line))
        except PuzzleError as exc:
            raise exc.at(number, line) from None
    return parsed


def parse_ranges(lines: Iterable[tuple[int, str]]) -> list[IdRange]:
    """Parse numbered range lines, tagging any error with its line."""
    return _parse_lines(lines, parse_range)


def parse_ids(lines: Iterable[tuple[int, str]]) -> list[DecimalValue]:
    return _parse_lines(lines, DecimalValue.parse)


def check_freshness(text: str) -> FreshnessReport:
    """Parse both blocks of *text* and count the fresh IDs."""
    range_lines, id_lines = split_blocks(text)
    ranges = parse_ranges(range_lines)
    ids = parse_ids(id_lines)
    return FreshnessReport(
        fresh=count_fresh(ids, ranges),
        total_ids=len(ids),
        total_ranges=len(ranges),
    )


def solve_freshness(text: str) -> int:
    return check_freshness(text).fresh
