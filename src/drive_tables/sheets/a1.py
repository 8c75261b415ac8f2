"""A1 notation helpers.

A range has the form ``'<sheet>'!<start col><start row>:<end col><end row>``.
Columns are lettered A, B, ... Z, AA, AB, ... and both rows and columns are
1-based. Sheet titles are always quoted so that spaces and quotes in a title
cannot change the meaning of the range.
"""

from __future__ import annotations

from drive_tables.handlers.exceptions import InvalidSheetNameError


def escape_sheet_name(sheet_name: str) -> str:
    """Quote a sheet title for use in a range.

    Embedded single quotes are doubled, then the title is wrapped in quotes:
    ``Bob's data`` becomes ``'Bob''s data'``.

    Raises:
        InvalidSheetNameError: If the name is empty or not a string.
    """
    if not sheet_name or not isinstance(sheet_name, str):
        raise InvalidSheetNameError("Sheet name is required")
    escaped = sheet_name.replace("'", "''")
    return f"'{escaped}'"


def column_letter(index: int) -> str:
    """Translate a 1-based column index to its letters.

    1 -> A, 26 -> Z, 27 -> AA, 702 -> ZZ, 703 -> AAA.
    """
    if index < 1:
        raise ValueError(f"Column index must be 1 or greater, got {index}")

    letters = ""
    while index > 0:
        remainder = (index - 1) % 26
        letters = chr(remainder + 65) + letters
        index = (index - remainder - 1) // 26
    return letters


def column_index(letters: str) -> int:
    """Translate column letters back to a 1-based index (A -> 1)."""
    if not letters or not letters.isalpha():
        raise ValueError(f"Invalid column letters: {letters!r}")

    index = 0
    for char in letters.upper():
        index = index * 26 + (ord(char) - 64)
    return index


def a1_range(sheet_name: str, start: str | None = None, end: str | None = None) -> str:
    """Build a range for a sheet.

    Args:
        sheet_name: Unquoted sheet title.
        start: Start cell (e.g. "A1"). Omit to address the whole sheet.
        end: End cell (e.g. "ZZ1").

    Returns:
        Range such as ``'Sheet1'``, ``'Sheet1'!C1`` or ``'Sheet1'!A2:ZZ2``.
    """
    sheet = escape_sheet_name(sheet_name)
    if not start:
        return sheet
    if end:
        return f"{sheet}!{start}:{end}"
    return f"{sheet}!{start}"
