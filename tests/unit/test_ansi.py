"""Tests for ANSI-aware measuring and padding."""

import pytest

from verynicetable.ansi import (
    align,
    align_center,
    align_left,
    align_right,
    strip_ansi_colors,
    visible_len,
)
from verynicetable.models import Alignment

GREEN_FOO = "\x1b[92mfoo\x1b[0m"


class TestStripAnsiColors:
    """Tests for strip_ansi_colors."""

    @pytest.mark.parametrize(
        ("colored", "expected"),
        [
            ("\x1b[0;90mhello\x1b[0m", "hello"),
            ("\u001b[0;91mhello\u001b[0m", "hello"),
            ("\x1b[38;5;82mHello\x1b[0m", "Hello"),
            ("hello \x1b[31mworld\x1b[0m!", "hello world!"),
            ("\x1b[0;90m\x1b[0m", ""),
        ],
    )
    def test_strips_color_sequences(self, colored: str, expected: str) -> None:
        """Well-formed sequences are removed."""
        assert strip_ansi_colors(colored) == expected

    def test_plain_strings_unchanged(self) -> None:
        """Strings without sequences come back as is."""
        assert strip_ansi_colors("hello world") == "hello world"
        assert strip_ansi_colors("") == ""

    def test_plain_string_is_not_copied(self) -> None:
        """The same object is returned when there is nothing to strip."""
        value = "".join(["no", " colors ", "here"])
        assert strip_ansi_colors(value) is value

    def test_esc_without_bracket_is_not_a_sequence(self) -> None:
        """ESC must be followed by '[' to start a sequence."""
        value = "\x1b0;92mhello\x1b0m"
        assert strip_ansi_colors(value) == value
        assert strip_ansi_colors(value) is value

    def test_trailing_esc_is_kept(self) -> None:
        """A lone ESC at the end is a regular character."""
        assert strip_ansi_colors("text\x1b") == "text\x1b"

    def test_esc_without_bracket_kept_next_to_sequence(self) -> None:
        """A bare ESC is kept even when a real sequence is stripped."""
        assert strip_ansi_colors("\x1bx\x1b[31my\x1b[0m") == "\x1bxy"

    def test_missing_terminator_swallows_rest(self) -> None:
        """An unterminated sequence drops everything after the ESC."""
        assert strip_ansi_colors("\x1b[31hello") == ""
        assert strip_ansi_colors("text\x1b[") == "text"

    def test_sequence_ends_at_first_m(self) -> None:
        """Stripping stops at the first 'm', wherever it is."""
        assert strip_ansi_colors("text with \x1b[no escape\x1b[0m") == "text with "

    def test_unclosed_color(self) -> None:
        """Opening sequence without a reset is still stripped."""
        assert strip_ansi_colors("\x1b[31mHello") == "Hello"

    def test_consecutive_sequences(self) -> None:
        """Back-to-back sequences are all stripped."""
        assert strip_ansi_colors("\x1b[0;90m\x1b[1;92mhello\x1b[0m") == "hello"
        assert strip_ansi_colors("\x1b[31m\x1b[32mtext\x1b[0m") == "text"


class TestVisibleLen:
    """Tests for visible_len."""

    def test_colors_not_counted(self) -> None:
        """Only visible characters count."""
        assert visible_len("\x1b[0;90mfoo\x1b[0m") == 3

    def test_counts_code_points(self) -> None:
        """Length is in code points, not bytes."""
        assert visible_len("héllo") == 5
        assert visible_len("日本") == 2

    def test_empty(self) -> None:
        """Empty string has no length."""
        assert visible_len("") == 0


class TestAlign:
    """Tests for padding helpers."""

    def test_align_left(self) -> None:
        """Padding goes to the right."""
        assert align_left("foo", 6) == "foo   "
        assert align_left(GREEN_FOO, 6) == GREEN_FOO + "   "

    def test_align_right(self) -> None:
        """Padding goes to the left."""
        assert align_right("foo", 6) == "   foo"
        assert align_right(GREEN_FOO, 6) == "   " + GREEN_FOO

    def test_align_center_even(self) -> None:
        """Even padding is split evenly."""
        assert align_center("hi", 6) == "  hi  "

    def test_align_center_odd_favors_right(self) -> None:
        """Odd padding puts the extra space on the right."""
        assert align_center("foo", 6) == " foo  "
        assert align_center(GREEN_FOO, 6) == " " + GREEN_FOO + "  "

    def test_matches_str_formatting_without_colors(self) -> None:
        """Without colors, helpers behave like str formatting."""
        assert align_left("ab", 5) == f"{'ab':<5}"
        assert align_right("ab", 5) == f"{'ab':>5}"
        assert align_center("ab", 5) == f"{'ab':^5}"

    @pytest.mark.parametrize("helper", [align_left, align_right, align_center])
    def test_no_padding_returns_same_object(self, helper) -> None:
        """Values already at width are returned untouched."""
        value = "".join(["bar", "baz"])
        assert helper(value, 6) is value
        assert helper(value, 2) is value

    def test_align_dispatch(self) -> None:
        """align() dispatches on the Alignment member."""
        assert align("x", 3, Alignment.LEFT) == "x  "
        assert align("x", 3, Alignment.RIGHT) == "  x"
        assert align("x", 3, Alignment.CENTER) == " x "
