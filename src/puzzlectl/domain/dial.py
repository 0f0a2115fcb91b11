"""Circular dial simulator.

The dial has ``size`` positions (100 by default) and starts at 50. Each
``L<n>`` / ``R<n>`` line rotates it; the password is the number of lines
after which the dial rests on 0.

Lines that start with neither ``L`` nor ``R`` leave the dial where it is.
They still count toward the password check, so a no-op while resting on 0
scores again. An ``L`` or ``R`` with a missing or non-digit magnitude is a
MalformedNumber, never a no-op.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from puzzlectl.domain.arithmetic import DIAL_BASE, modular_add, modular_subtract, modulo
from puzzlectl.domain.digits import DecimalValue
from puzzlectl.domain.errors import PuzzleError
from puzzlectl.domain.text import iter_lines
from puzzlectl.domain.types import Direction

logger = logging.getLogger(__name__)

DIAL_START = 50


@dataclass(frozen=True)
class RotationCommand:
    """One parsed rotation line."""

    direction: Direction
    magnitude: DecimalValue

    def apply(self, position: int, size: int = DIAL_BASE) -> int:
        if self.direction is Direction.RIGHT:
            return rotate_right(position, self.magnitude, size)
        return rotate_left(position, self.magnitude, size)


@dataclass(frozen=True)
class DialReport:
    """Outcome of a dial run. ``password`` is the puzzle answer."""

    password: int
    final_position: int
    commands: int
    skipped: int


def parse_command(line: str) -> RotationCommand | None:
    """Parse ``L<digits>`` or ``R<digits>``; return None for any other line.

    Raises:
        MalformedNumber: the line starts with ``L``/``R`` but the rest is
            empty or not all digits.
    """
    head, rest = line[:1], line[1:]
    if head == Direction.LEFT:
        return RotationCommand(Direction.LEFT, DecimalValue.parse(rest))
    if head == Direction.RIGHT:
        return RotationCommand(Direction.RIGHT, DecimalValue.parse(rest))
    return None


def rotate_right(position: int, amount: DecimalValue, size: int = DIAL_BASE) -> int:
    return modular_add(position, int(modulo(amount, size)), size)


def rotate_left(position: int, amount: DecimalValue, size: int = DIAL_BASE) -> int:
    return modular_subtract(position, int(modulo(amount, size)), size)


class DialSimulator:
    """Fold rotation lines over a single dial position.

    Each instance owns its state; build a new one per run.
    """

    def __init__(self, *, start_position: int = DIAL_START, size: int = DIAL_BASE) -> None:
        if size < 1:
            raise ValueError(f"dial size must be positive, got {size}")
        if not 0 <= start_position < size:
            raise ValueError(f"start position {start_position} is outside [0, {size})")
        self.size = size
        self.position = start_position
        self.password = 0
        self.commands = 0
        self.skipped = 0

    def step(self, line: str) -> int:
        """Apply one line and return the new position."""
        command = parse_command(line)
        if command is None:
            self.skipped += 1
            logger.debug("Ignoring unrecognized dial line: %r", line)
        else:
            self.commands += 1
            self.position = command.apply(self.position, self.size)
        if self.position == 0:
            self.password += 1
        return self.position

    def run(self, lines: Iterable[tuple[int, str]]) -> DialReport:
        for number, line in lines:
            try:
                self.step(line)
            except PuzzleError as exc:
                raise exc.at(number, line) from None
        return self.report()

    def report(self) -> DialReport:
        return DialReport(
            password=self.password,
            final_position=self.position,
            commands=self.commands,
            skipped=self.skipped,
        )


def simulate_dial(
    text: str,
    *,
    start_position: int = DIAL_START,
    size: int = DIAL_BASE,
) -> DialReport:
    """Run a fresh dial over every line of *text*."""
    simulator = DialSimulator(start_position=start_position, size=size)
    return simulator.run(iter_lines(text))


def solve_dial(text: str) -> int:
    """Return the password for *text* on the standard 100-position dial."""
    return simulate_dial(text).password
