"""Exceptions for verynicetable."""

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class VeryNiceTableError(Exception):
    """
    Base exception for all verynicetable errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Category Exceptions
# ---------------------------------------------------------------------------


class TableConfigurationError(VeryNiceTableError, ValueError):
    """
    Base exception for inconsistent table configurations.

    A ``Table`` may hold incomplete state while it is being built. These
    errors are raised when that state is compiled for rendering and turns
    out to be unusable. They signal a caller bug: nothing is rendered.
    """

    pass


# ---------------------------------------------------------------------------
# Configuration Exceptions
# ---------------------------------------------------------------------------


class EmptyTableError(TableConfigurationError):
    """Raised when neither headers nor data rows are available."""

    def __init__(self) -> None:
        super().__init__("headers and data cannot both be empty")


class MissingDataError(TableConfigurationError):
    """Raised when headers are set but data was never provided."""

    def __init__(self) -> None:
        super().__init__("data is required")


class AlignmentMismatchError(TableConfigurationError):
    """
    Raised when the number of headers differs from the number of alignments.

    Attributes:
        headers: Number of headers (explicit or defaulted)
        alignments: Number of alignments supplied
    """

    def __init__(self, headers: int, alignments: int) -> None:
        self.headers = headers
        self.alignments = alignments
        super().__init__(
            f"number of headers must match alignments "
            f"(headers={headers}, alignments={alignments})"
        )


class ColumnMismatchError(TableConfigurationError):
    """
    Raised when a data row does not have one cell per header.

    Attributes:
        expected: Number of headers
        actual: Number of cells in the offending row
        row_index: Index of the offending row in the data
    """

    def __init__(self, expected: int, actual: int, row_index: int) -> None:
        self.expected = expected
        self.actual = actual
        self.row_index = row_index
        super().__init__(
            f"number of headers must match columns in data "
            f"(row {row_index} has {actual} cells, expected {expected})"
        )
