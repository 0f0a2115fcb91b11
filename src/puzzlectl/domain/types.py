"""Classification enums shared across layers."""

from __future__ import annotations

from enum import StrEnum


class Puzzle(StrEnum):
    """Puzzles the CLI knows how to solve."""

    DIAL = "dial"
    FRESH = "fresh"


class Ordering(StrEnum):
    """Result of comparing two decimal values."""

    LESS = "less"
    EQUAL = "equal"
    GREATER = "greater"


class Direction(StrEnum):
    """Rotation direction of a dial command, keyed by its line prefix."""

    LEFT = "L"
    RIGHT = "R"
