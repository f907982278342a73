"""Exception taxonomy for table rendering.

All errors are raised synchronously at render time and indicate caller
misconfiguration. A failed render never yields a partial RenderModel.
"""

from __future__ import annotations


class TableError(Exception):
    """Base exception for table rendering errors."""

    pass


class ConfigurationError(TableError):
    """Raised when a column spec, dataset shape, or table config is malformed."""

    pass


class UnknownColumnError(TableError):
    """Raised when a column directive references a column that does not exist."""

    def __init__(self, column: str, available: tuple[str, ...] | list[str] = ()) -> None:
        """Initialize with the missing column name.

        Args:
            column: Name of the column that could not be found
            available: Columns that were available at lookup time

        """
        self.column = column
        self.available = tuple(available)
        message = f"Unknown column: {column!r}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class FootnoteTargetError(TableError):
    """Raised when a footnote targets a cell outside the rendered table."""

    def __init__(self, message: str, column: str, row: int, location: str) -> None:
        """Initialize with the offending footnote target.

        Args:
            message: Human-readable description of the problem
            column: Column the footnote was attached to
            row: Row index the footnote was attached to
            location: Either "header" or "body"

        """
        self.column = column
        self.row = row
        self.location = location
        super().__init__(message)
