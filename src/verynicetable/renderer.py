"""Line emission from a compiled table blueprint."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from .ansi import align
from .models import DEFAULT_COLUMN_SEPARATOR, TableBlueprint


def render_blueprint(blueprint: TableBlueprint) -> str:
    """
    Render a blueprint as a block of text.

    Every line, including the last one, ends with a newline.

    Args:
        blueprint: Compiled table

    Returns:
        Rendered table
    """
    return "".join(iter_lines(blueprint))


def iter_lines(blueprint: TableBlueprint) -> Iterator[str]:
    """
    Yield the rendered lines of a blueprint, newline included.

    Without data rows, only the headers are emitted, joined by the default
    separator and without any padding. Otherwise the header line is
    emitted unless all headers are empty, followed by one line per row.
    """
    if not blueprint.data:
        yield DEFAULT_COLUMN_SEPARATOR.join(blueprint.headers) + "\n"
        return

    if blueprint.has_headers:
        yield render_row(blueprint, blueprint.headers)

    for row in blueprint.data:
        yield render_row(blueprint, row)


def render_row(blueprint: TableBlueprint, row: Sequence[str]) -> str:
    """
    Render a single row.

    The last column is never padded, so lines carry no trailing
    whitespace.
    """
    last = len(row) - 1
    cells = [
        cell if i == last else align(cell, blueprint.columns_width[i], blueprint.alignments[i])
        for i, cell in enumerate(row)
    ]
    return blueprint.column_separator.join(cells) + "\n"
