"""Core models for verynicetable."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DEFAULT_COLUMN_SEPARATOR = "  "
"""Separator placed between columns when none is configured."""

ELLIPSIS = "..."
"""Cell value of the placeholder row inserted by row elision."""


class Alignment(Enum):
    """Horizontal alignment of the cells of a column."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"

    @classmethod
    def parse(cls, value: Alignment | str) -> Alignment:
        """
        Coerce a value into an Alignment.

        Accepts members, their values ("left", "right", "center") and the
        one-letter shorthands "l", "r" and "c" (case-insensitive).

        Raises:
            ValueError: If the value does not name an alignment
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key in (member.value, member.value[0]):
                    return member
        raise ValueError(f"Invalid alignment: {value!r}")


DEFAULT_ALIGNMENT = Alignment.LEFT
"""Alignment applied to every column when none are configured."""


@dataclass(frozen=True)
class TableBlueprint:
    """
    Ready-to-render table.

    A ``Table`` can hold incomplete state while it is being built, and
    leaves out fields that have defaults. A blueprint is the opposite:
    every field is resolved and checked for consistency, data rows are
    already elided, and the width of each column is known.

    Attributes:
        headers: One header per column (empty strings when none were set)
        alignments: One alignment per column
        data: Rows to render, each with one cell per column
        columns_width: Visible width of each column
        column_separator: String placed between adjacent columns
    """

    headers: tuple[str, ...]
    alignments: tuple[Alignment, ...]
    data: tuple[tuple[str, ...], ...]
    columns_width: tuple[int, ...]
    column_separator: str = DEFAULT_COLUMN_SEPARATOR

    @property
    def nb_columns(self) -> int:
        """Number of columns."""
        return len(self.headers)

    @property
    def has_headers(self) -> bool:
        """Whether at least one header is non-empty."""
        return any(self.headers)
