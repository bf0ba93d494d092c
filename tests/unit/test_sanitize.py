"""Tests for source sanitization and text capping."""

from __future__ import annotations

import pytest

from nodetext.text.sanitize import ELLIPSIS, cap_text, sanitize_source


class TestSanitizeSource:
    """Tests for sanitize_source()."""

    def test_crlf_unified(self) -> None:
        assert sanitize_source("a\r\nb\r\n") == "a\nb"

    def test_blank_runs_collapse(self) -> None:
        assert sanitize_source("a\n\n\n\nb") == "a\n\nb"

    def test_single_blank_line_kept(self) -> None:
        assert sanitize_source("a\n\nb") == "a\n\nb"

    def test_trailing_whitespace_removed_indent_kept(self) -> None:
        raw = "def f():   \n    return 1\t\n"
        assert sanitize_source(raw) == "def f():\n    return 1"

    def test_outer_trim(self) -> None:
        assert sanitize_source("\n\n   x = 1\n\n") == "x = 1"

    def test_whitespace_only_lines_collapse(self) -> None:
        """Lines holding only spaces count as blank when collapsing."""
        assert sanitize_source("a\n\n   \n\nb") == "a\n\nb"

    def test_whitespace_only_input(self) -> None:
        assert sanitize_source(" \r\n\t \n") == ""

    @pytest.mark.parametrize(
        "raw",
        [
            "a\n\n\n\nb",
            "a\n\n   \n\nb",
            "  lead\r\n\r\n\r\n  \r\ntrail  \r\n",
            "x\r\r\ny",
            "\tfoo()\n\n\n\n\n\tbar()  ",
        ],
    )
    def test_idempotent(self, raw: str) -> None:
        once = sanitize_source(raw)
        assert sanitize_source(once) == once


class TestCapText:
    """Tests for cap_text()."""

    def test_short_text_unchanged(self) -> None:
        assert cap_text("hello", 10) == "hello"

    def test_exact_fit_unchanged(self) -> None:
        """No ellipsis when the text is exactly the budget."""
        assert cap_text("hello", 5) == "hello"

    def test_cuts_at_late_word_boundary(self) -> None:
        # Space at index 9 of the 10-char prefix, past 80% of the budget
        text = "aaaaaaaaa bbbbbbbbbb"
        assert cap_text(text, 10) == "aaaaaaaaa" + ELLIPSIS

    def test_hard_cut_when_boundary_too_early(self) -> None:
        # Only space is at index 1, well before 80% of the budget
        text = "a bbbbbbbbbbbbbbbbbb"
        assert cap_text(text, 10) == "a bbbbbbbb" + ELLIPSIS

    def test_boundary_at_exactly_80_percent_is_hard_cut(self) -> None:
        """The space must be strictly past 80% of the budget."""
        text = "aaaaaaaa bbbbbbbbbbb"  # space at index 8, budget 10
        assert cap_text(text, 10) == "aaaaaaaa b" + ELLIPSIS

    def test_no_space_hard_cut(self) -> None:
        assert cap_text("x" * 50, 20) == "x" * 20 + ELLIPSIS

    def test_zero_budget(self) -> None:
        assert cap_text("abc", 0) == ELLIPSIS

    def test_negative_budget_does_not_raise(self) -> None:
        assert cap_text("abc def ghi", -5) == ELLIPSIS

    def test_empty_text_zero_budget(self) -> None:
        assert cap_text("", 0) == ""

    @pytest.mark.parametrize("budget", [0, 1, 5, 9, 10, 11, 37, 100])
    def test_length_bound(self, budget: int) -> None:
        text = "the quick brown fox jumps over the lazy dog " * 3
        assert len(cap_text(text, budget)) <= budget + len(ELLIPSIS)
