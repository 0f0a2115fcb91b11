"""Tests for line and block splitting."""

import pytest

from puzzlectl.domain.errors import MalformedInput
from puzzlectl.domain.text import iter_lines, split_blocks


class TestIterLines:
    def test_numbers_from_one_and_trims(self) -> None:
        assert list(iter_lines(" a \nb")) == [(1, "a"), (2, "b")]

    def test_single_trailing_newline_dropped(self) -> None:
        assert list(iter_lines("a\n")) == [(1, "a")]

    def test_inner_blank_lines_kept(self) -> None:
        assert list(iter_lines("a\n\nb")) == [(1, "a"), (2, ""), (3, "b")]

    def test_crlf(self) -> None:
        assert list(iter_lines("a\r\nb\r\n")) == [(1, "a"), (2, "b")]

    def test_empty(self) -> None:
        assert list(iter_lines("")) == []


class TestSplitBlocks:
    def test_two_blocks(self) -> None:
        first, second = split_blocks("1-2\n3-4\n\n5\n6\n")
        assert first == [(1, "1-2"), (2, "3-4")]
        assert second == [(4, "5"), (5, "6")]

    def test_empty_second_block(self) -> None:
        first, second = split_blocks("1-2\n\n")
        assert first == [(1, "1-2")]
        assert second == []

    def test_no_separator(self) -> None:
        with pytest.raises(MalformedInput):
            split_blocks("1-2\n3")
