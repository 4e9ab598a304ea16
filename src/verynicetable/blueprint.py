"""
Blueprint compiler.

Turns the (possibly partial) state of a ``Table`` into a ``TableBlueprint``:
defaults are filled in, consistency is checked, rows are elided to honor
``max_rows`` and column widths are measured.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from .ansi import visible_len
from .exceptions import (
    AlignmentMismatchError,
    ColumnMismatchError,
    EmptyTableError,
    MissingDataError,
)
from .models import (
    DEFAULT_ALIGNMENT,
    DEFAULT_COLUMN_SEPARATOR,
    ELLIPSIS,
    Alignment,
    TableBlueprint,
)

if TYPE_CHECKING:
    from .table import Table

logger = logging.getLogger(__name__)

Row = tuple[str, ...]


def compile_blueprint(table: Table) -> TableBlueprint:
    """
    Build a ready-to-render blueprint from a table configuration.

    Args:
        table: Table configuration (left untouched)

    Returns:
        Fully resolved blueprint

    Raises:
        EmptyTableError: If neither headers nor data rows are available
        MissingDataError: If headers are set but data is not
        AlignmentMismatchError: If headers and alignments differ in count
        ColumnMismatchError: If a data row does not have one cell per header
    """
    nb_cols = determine_nb_columns(table.headers, table.data)

    headers = table.headers if table.headers is not None else ("",) * nb_cols
    alignments = (
        table.alignments if table.alignments is not None else (DEFAULT_ALIGNMENT,) * nb_cols
    )
    if table.data is None:
        raise MissingDataError()
    data: tuple[Row, ...] = table.data

    ensure_data_consistency(headers, alignments, data)

    if table.max_rows is not None:
        data = apply_max_rows(data, table.max_rows, nb_cols)

    column_separator = (
        table.column_separator
        if table.column_separator is not None
        else DEFAULT_COLUMN_SEPARATOR
    )

    logger.debug(
        "Compiled table blueprint: %d columns, %d rows (default headers=%s, "
        "default alignments=%s)",
        nb_cols,
        len(data),
        table.headers is None,
        table.alignments is None,
    )

    return TableBlueprint(
        headers=headers,
        alignments=alignments,
        data=data,
        columns_width=determine_columns_width(headers, data),
        column_separator=column_separator,
    )


def determine_nb_columns(headers: Sequence[str] | None, data: Sequence[Row] | None) -> int:
    """
    Resolve the number of columns.

    Headers win when set (even if empty). Otherwise the first data row
    decides.

    Raises:
        EmptyTableError: If there are no headers and no data rows
    """
    if headers is not None:
        return len(headers)
    if data:
        return len(data[0])
    raise EmptyTableError()


def ensure_data_consistency(
    headers: Sequence[str],
    alignments: Sequence[Alignment],
    data: Sequence[Row],
) -> None:
    """
    Ensure data is consistent.

    "Consistent" means the number of headers matches the number of
    alignments, and the number of cells in every data row.

    Raises:
        AlignmentMismatchError: If headers and alignments differ in count
        ColumnMismatchError: On the first row with the wrong cell count
    """
    if len(headers) != len(alignments):
        raise AlignmentMismatchError(len(headers), len(alignments))
    for index, row in enumerate(data):
        if len(row) != len(headers):
            raise ColumnMismatchError(len(headers), len(row), index)


def apply_max_rows(data: tuple[Row, ...], max_rows: int, nb_cols: int) -> tuple[Row, ...]:
    """
    Drop rows in the middle to conform to the 'max rows' setting.

    Dropped rows are replaced by a single placeholder row. When rows must
    be split between head and tail, the tail gets the extra one, so the
    most recent rows are favored.

    Args:
        data: All data rows
        max_rows: Maximum number of data rows to keep
        nb_cols: Number of columns, to size the placeholder row

    Returns:
        ``data`` itself if it fits, else ``max_rows + 1`` rows
        (a single placeholder row when ``max_rows`` is 0)
    """
    if len(data) <= max_rows:
        return data

    placeholder = (ELLIPSIS,) * nb_cols

    if max_rows == 0:
        elided = (placeholder,)
    elif max_rows == 1:
        elided = (data[0], placeholder)
    else:
        nb_head = max_rows // 2
        nb_tail = max_rows - nb_head
        elided = data[:nb_head] + (placeholder,) + data[-nb_tail:]

    logger.debug("Elided %d of %d rows (max_rows=%d)", len(data) - max_rows, len(data), max_rows)
    return elided


def determine_columns_width(headers: Sequence[str], data: Sequence[Row]) -> tuple[int, ...]:
    """
    Determine the width of each column.

    The width of a column is the visible length of its longest value,
    header included. Color sequences do not count.
    """
    return tuple(
        max(visible_len(cell) for cell in (header, *(row[i] for row in data)))
        for i, header in enumerate(headers)
    )
