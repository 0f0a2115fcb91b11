"""Line and block splitting for puzzle input text."""

from __future__ import annotations

from collections.abc import Iterator

from puzzlectl.domain.errors import MalformedInput


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def iter_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, trimmed_line)`` pairs, numbered from 1.

    A single trailing newline does not produce an extra empty line.
    """
    lines = normalize_newlines(text).split("\n")
    if lines and not lines[-1].strip():
        lines.pop()
    for number, line in enumerate(lines, start=1):
        yield number, line.strip()


def split_blocks(text: str) -> tuple[list[tuple[int, str]], list[tuple[int, str]]]:
    """Split text at its first blank line into two blocks of numbered lines.

    Empty lines inside either block are dropped. Line numbers refer to the
    original text so errors can point at the offending line.

    Raises:
        MalformedInput: the text has no blank line separating two blocks.
    """
    first: list[tuple[int, str]] = []
    second: list[tuple[int, str]] = []
    current = first
    seen_content = False
    for number, line in iter_lines(text):
        if not line:
            if current is first and seen_content:
                current = second
            continue
        seen_content = True
        current.append((number, line))
    if current is first:
        raise MalformedInput("expected two blocks separated by a blank line")
    return first, second
