"""
verynicetable: Very basic and lightweight table builder for terminals.

This library renders tabular data as fixed-width plain text with:
- Per-column left, right or center alignment
- ANSI color sequences that do not count toward column widths
- Optional row limit, eliding rows in the middle
- Custom column separator

Example:
    from verynicetable import Alignment, Table

    ports = [
        ["rapportd", "449", "Quentin", "*:61165"],
        ["Python", "22396", "Quentin", "*:8000"],
        ["foo", "108", "root", "*:1337"],
    ]

    table = (
        Table()
        .set_headers(["COMMAND", "PID", "USER", "HOST:PORTS"])
        .set_alignments([Alignment.LEFT, Alignment.RIGHT, Alignment.LEFT, Alignment.LEFT])
        .set_data(ports)
        .set_max_rows(2)
    )
    print(table, end="")
"""

from .exceptions import (
    AlignmentMismatchError,
    ColumnMismatchError,
    EmptyTableError,
    MissingDataError,
    TableConfigurationError,
    VeryNiceTableError,
)
from .models import (
    DEFAULT_COLUMN_SEPARATOR,
    ELLIPSIS,
    Alignment,
    TableBlueprint,
)
from .table import Table

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Main classes
    "Table",
    "Alignment",
    "TableBlueprint",
    # Constants
    "DEFAULT_COLUMN_SEPARATOR",
    "ELLIPSIS",
    # Exceptions
    "VeryNiceTableError",
    "TableConfigurationError",
    "EmptyTableError",
    "MissingDataError",
    "AlignmentMismatchError",
    "ColumnMismatchError",
]
