"""Input validation run before any remote call."""

from __future__ import annotations

import re
from dataclasses import dataclass

from drive_tables.handlers.exceptions import InvalidFileIdError, InvalidPathError

MAX_FILE_ID_LENGTH = 100

_FILE_ID_RE = re.compile(r"[A-Za-z0-9_-]+")


@dataclass(frozen=True)
class TablePath:
    """Parsed table path."""

    resource_type: str
    file_id: str
    sheet_name: str | None = None


def validate_file_id(file_id: str) -> None:
    """Reject file IDs that could not have come from Drive.

    Raises:
        InvalidFileIdError: If the ID is empty, too long or has other characters.
    """
    if not file_id or not isinstance(file_id, str):
        raise InvalidFileIdError("File ID is required")
    if len(file_id) > MAX_FILE_ID_LENGTH:
        raise InvalidFileIdError(
            f"File ID exceeds maximum length of {MAX_FILE_ID_LENGTH} characters"
        )
    if not _FILE_ID_RE.fullmatch(file_id):
        raise InvalidFileIdError(f"Invalid file ID format: {file_id!r}")


def parse_path(
    path: list[str] | None,
    resource_types: tuple[str, ...],
    operation: str,
    require_sheet: bool = False,
) -> TablePath:
    """Split a table path into its segments.

    Args:
        path: [resource_type, file_id] or [resource_type, file_id, sheet_name].
        resource_types: Tags the calling handler accepts.
        operation: Operation name, used in error messages.
        require_sheet: Whether the sheet name segment is mandatory.

    Raises:
        InvalidPathError: If a segment is missing or the type is not accepted.
        InvalidFileIdError: If the file ID is malformed.
    """
    expected = f"[{resource_types[0]!r}, file_id" + (", sheet_name]" if require_sheet else "]")

    if not path or path[0] not in resource_types:
        raise InvalidPathError(operation, expected, path)

    file_id = path[1] if len(path) > 1 else None
    sheet_name = path[2] if len(path) > 2 else None

    if not file_id:
        raise InvalidPathError(operation, expected, path)
    if require_sheet and not sheet_name:
        raise InvalidPathError(operation, expected, path)

    validate_file_id(file_id)
    return TablePath(resource_type=path[0], file_id=file_id, sheet_name=sheet_name)
