"""
ANSI-aware measuring and padding of cell values.

Cells may carry color escape sequences (``\\x1b[...m``). Those sequences
take no room on the terminal, so they are ignored when measuring a cell,
but they are kept verbatim in the rendered output: padding is computed
from the stripped value and added around the original one.
"""

from __future__ import annotations

from .models import Alignment

ESC = "\x1b"
SEQUENCE_START = ESC + "["
SEQUENCE_END = "m"


def strip_ansi_colors(string: str) -> str:
    """
    Remove ANSI color sequences from a string.

    Any run starting with ``\\x1b[`` up to and including the next ``m`` is
    considered a color sequence. Validity is not checked: ``\\x1b[`` starts
    stripping and ``m`` ends it. An unterminated sequence swallows the rest
    of the string. An ESC that is not followed by ``[`` is kept as a
    regular character.

    The input object itself is returned when it holds no sequence, so the
    common uncolored case does not build a new string.

    Args:
        string: Value to strip

    Returns:
        The value without color sequences
    """
    if SEQUENCE_START not in string:
        return string

    out: list[str] = []
    in_sequence = False
    i = 0
    end = len(string)
    while i < end:
        char = string[i]
        if in_sequence:
            if char == SEQUENCE_END:
                in_sequence = False
        elif char == ESC and string.startswith("[", i + 1):
            in_sequence = True
            i += 1  # skip the bracket too
        else:
            out.append(char)
        i += 1
    return "".join(out)


def visible_len(string: str) -> int:
    """Number of code points left once color sequences are removed."""
    return len(strip_ansi_colors(string))


def _padding(string: str, width: int) -> int:
    return max(0, width - visible_len(string))


def align_left(string: str, width: int) -> str:
    """
    Left-align a string, ignoring ANSI color sequences.

    Without colors, it is equivalent to ``f"{string:<{width}}"``.
    """
    padding = _padding(string, width)
    if padding == 0:
        return string
    return string + " " * padding


def align_right(string: str, width: int) -> str:
    """
    Right-align a string, ignoring ANSI color sequences.

    Without colors, it is equivalent to ``f"{string:>{width}}"``.
    """
    padding = _padding(string, width)
    if padding == 0:
        return string
    return " " * padding + string


def align_center(string: str, width: int) -> str:
    """
    Center a string, ignoring ANSI color sequences.

    When the padding is odd, the extra space goes to the right.
    """
    padding = _padding(string, width)
    if padding == 0:
        return string
    left = padding // 2
    right = padding - left
    return " " * left + string + " " * right


_ALIGNERS = {
    Alignment.LEFT: align_left,
    Alignment.RIGHT: align_right,
    Alignment.CENTER: align_center,
}


def align(string: str, width: int, alignment: Alignment) -> str:
    """Pad a string to ``width`` according to ``alignment``."""
    return _ALIGNERS[alignment](string, width)
