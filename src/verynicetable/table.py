"""
Table builder.

Example:
    from verynicetable import Alignment, Table

    table = (
        Table()
        .set_headers(["COMMAND", "PID", "USER"])
        .set_alignments([Alignment.LEFT, Alignment.RIGHT, Alignment.LEFT])
        .set_data([["rapportd", "449", "Quentin"], ["Python", "22396", "Quentin"]])
    )
    print(table, end="")
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Protocol

from .blueprint import compile_blueprint
from .models import Alignment, TableBlueprint
from .renderer import render_blueprint


class SupportsWrite(Protocol):
    """Text stream accepted by ``Table.write``."""

    def write(self, s: str, /) -> Any: ...


@dataclass
class Table:
    """
    Table builder.

    Every field is optional while building; a ``Table`` may hold
    incomplete or inconsistent state. Everything is checked when the
    table is rendered, by compiling it into a ``TableBlueprint``.

    Setters copy their arguments, so later changes to the caller's lists
    do not leak into the table. Each setter replaces the previous value
    and returns the table, allowing calls to be chained.

    Attributes:
        headers: One header per column; empty headers by default
        alignments: One alignment per column; left-aligned by default
        data: Rows of cells; required to render
        max_rows: Maximum number of data rows to show
        column_separator: String between columns; two spaces by default
    """

    headers: tuple[str, ...] | None = None
    alignments: tuple[Alignment, ...] | None = None
    data: tuple[tuple[str, ...], ...] | None = None
    max_rows: int | None = None
    column_separator: str | None = None

    def set_headers(self, headers: Iterable[object]) -> Table:
        """Set the column headers."""
        self.headers = tuple(str(header) for header in headers)
        return self

    def set_alignments(self, alignments: Iterable[Alignment | str]) -> Table:
        """
        Set the alignment of each column.

        Args:
            alignments: ``Alignment`` members, or their names as strings
                ("left"/"l", "right"/"r", "center"/"c")

        Raises:
            ValueError: If a value does not name an alignment
        """
        self.alignments = tuple(Alignment.parse(alignment) for alignment in alignments)
        return self

    def set_data(self, data: Iterable[Iterable[object]]) -> Table:
        """Set the data rows."""
        self.data = tuple(tuple(str(cell) for cell in row) for row in data)
        return self

    def set_max_rows(self, max_rows: int) -> Table:
        """
        Limit the number of data rows shown.

        When there are more rows, rows in the middle are replaced with a
        single ``...`` row. Rows at the end are favored.

        Raises:
            TypeError: If max_rows is not an integer
            ValueError: If max_rows is negative
        """
        if isinstance(max_rows, bool) or not isinstance(max_rows, int):
            raise TypeError(f"max_rows must be an integer, got {type(max_rows).__name__}")
        if max_rows < 0:
            raise ValueError("max_rows must be non-negative")
        self.max_rows = max_rows
        return self

    def set_column_separator(self, separator: object) -> Table:
        """Set the string placed between adjacent columns."""
        self.column_separator = str(separator)
        return self

    def blueprint(self) -> TableBlueprint:
        """
        Compile the table into a ready-to-render blueprint.

        Raises:
            TableConfigurationError: If the configuration is inconsistent
        """
        return compile_blueprint(self)

    def render(self) -> str:
        """
        Render the table.

        Returns:
            The table as text, each line terminated by a newline

        Raises:
            TableConfigurationError: If the configuration is inconsistent
        """
        return render_blueprint(self.blueprint())

    def write(self, stream: SupportsWrite) -> None:
        """Render the table into a text stream."""
        stream.write(self.render())

    def __str__(self) -> str:
        return self.render()
