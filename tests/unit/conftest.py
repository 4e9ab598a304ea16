"""Unit test fixtures."""

import pytest

from verynicetable import Table


@pytest.fixture
def numbered_rows() -> list[list[str]]:
    """Seven rows, two of them wider than the others."""
    return [
        ["1.", "---", "---"],
        ["2.", "---", "---"],
        ["3.", "------------", "------------"],
        ["4.", "------------", "------------"],
        ["5.", "---", "---"],
        ["6.", "---", "---"],
        ["7.", "---", "---"],
    ]


@pytest.fixture
def numbered_table() -> Table:
    """Table with headers and a right-aligned last column, but no data."""
    return (
        Table()
        .set_headers(["#", "COLUMN 1", "COLUMN 2"])
        .set_alignments(["left", "left", "right"])
    )
