"""Row identity, key validation and header growth."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from drive_tables.handlers.codec import to_text
from drive_tables.handlers.models import Key, Row, Table


def find_row_index(rows: Sequence[Mapping[str, Any]], key: Key) -> int:
    """Find the first row whose values match every key entry.

    Values are compared by their text form, so ``{"id": 5}`` matches a stored
    ``"5"``. A missing value compares like an empty cell.

    Returns:
        Index of the first matching row, or -1 if none matches.
    """
    for index, row in enumerate(rows):
        if all(to_text(row.get(name)) == to_text(expected) for name, expected in key.items()):
            return index
    return -1


def key_fields(table: Table) -> list[str]:
    """Names of the key fields of a table, in schema order."""
    return table.key_fields


def has_valid_keys(row: Mapping[str, Any], fields: Sequence[str]) -> bool:
    """Check that every key field holds a non-blank value.

    A table without key fields accepts every row.
    """
    for name in fields:
        value = row.get(name)
        if value is None or to_text(value).strip() == "":
            return False
    return True


def header_superset(headers: Iterable[str], row: Mapping[str, Any]) -> list[str]:
    """Existing headers followed by any new row keys, in order."""
    merged = list(headers)
    seen = set(merged)
    for name in row:
        if name not in seen:
            merged.append(name)
            seen.add(name)
    return merged


def merge_rows(existing: Mapping[str, Any], update: Mapping[str, Any]) -> Row:
    """Shallow merge where the update wins."""
    return {**existing, **update}
