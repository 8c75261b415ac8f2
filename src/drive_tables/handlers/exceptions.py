"""Table handler exceptions."""

from __future__ import annotations


class TableError(Exception):
    """Base exception for table handler errors."""

    pass


class InvalidInputError(TableError, ValueError):
    """Raised for caller input rejected before any remote call."""

    pass


class InvalidPathError(InvalidInputError):
    """Raised when a table path is missing a segment or has the wrong type."""

    def __init__(self, operation: str, expected: str, path: list[str] | None = None):
        self.operation = operation
        self.expected = expected
        self.path = path
        super().__init__(f"Invalid path for {operation}. Expected {expected}, got {path!r}")


class InvalidFileIdError(InvalidInputError):
    """Raised when a file identifier is empty, too long or malformed."""

    pass


class InvalidSheetNameError(InvalidInputError):
    """Raised when a sheet name is missing or not a string."""

    pass


class ContentTooLargeError(InvalidInputError):
    """Raised when file content exceeds the configured size limit."""

    def __init__(self, size: int, max_size: int):
        self.size = size
        self.max_size = max_size
        super().__init__(
            f"JSON content is {size} bytes, exceeds maximum allowed size of {max_size} bytes"
        )


class InvalidContentError(InvalidInputError):
    """Raised when file content does not have a table shape."""

    pass
