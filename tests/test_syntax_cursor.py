"""Tests for syntax.cursor: immutable scanning cursor."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from msgformatter.syntax import Cursor


class TestCursor:
    """Cursor navigation and EOF handling."""

    def test_current_and_advance(self) -> None:
        cursor = Cursor("ab", 0)
        assert cursor.current == "a"
        assert cursor.advance().current == "b"
        assert cursor.pos == 0

    def test_eof_current_raises(self) -> None:
        with pytest.raises(EOFError, match="position 2"):
            _ = Cursor("hi", 2).current

    def test_advance_clamps_at_eof(self) -> None:
        assert Cursor("hi", 1).advance(10).pos == 2

    def test_peek(self) -> None:
        cursor = Cursor("abc", 0)
        assert cursor.peek() == "a"
        assert cursor.peek(2) == "c"
        assert cursor.peek(3) is None

    def test_slice_to(self) -> None:
        assert Cursor("hello world", 6).slice_to(11) == "world"

    def test_skip_whitespace(self) -> None:
        cursor = Cursor(" \t\n one", 0).skip_whitespace()
        assert cursor.pos == 4
        assert cursor.current == "o"

    def test_skip_whitespace_at_eof(self) -> None:
        assert Cursor("  ", 0).skip_whitespace().is_eof

    @given(source=st.text(max_size=30), steps=st.integers(min_value=0, max_value=40))
    def test_advance_never_passes_eof(self, source: str, steps: int) -> None:
        """PROPERTY: position stays within [0, len(source)]."""
        cursor = Cursor(source, 0)
        for _ in range(steps):
            cursor = cursor.advance()
        assert 0 <= cursor.pos <= len(source)
        assert cursor.is_eof == (cursor.pos == len(source))
