"""Conversion between wire values and typed values.

The wire form is what a backing file stores: text cells for sheets and
delimited files, native JSON values for JSON files. Fields declared as JSON
are stringified on write and parsed on read; everything else passes through.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from drive_tables.handlers.models import FieldType, RowWarning, TableField

logger = logging.getLogger(__name__)


def _dump_json(value: Any) -> str:
    """Compact JSON text, matching what other Drive clients write."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def serialize(value: Any, field: TableField | None) -> Any:
    """Convert a typed value to its wire form.

    Args:
        value: Value from a caller-supplied row.
        field: Declared field, or None when the column is not in the schema.

    Returns:
        Empty string for None, JSON text for dicts and lists (whatever the
        declared type), otherwise the value unchanged.
    """
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        return _dump_json(value)
    return value


def deserialize(
    value: Any,
    field: TableField | None,
    warnings: list[RowWarning] | None = None,
    row_index: int = -1,
) -> Any:
    """Convert a wire value to its typed form.

    Only text stored in a JSON field is decoded. Text that fails to parse is
    returned unchanged so one bad cell does not abort the whole read; the
    failure is recorded in ``warnings`` when a list is given.
    """
    if field is None or field.type != FieldType.JSON or not isinstance(value, str):
        return value

    try:
        return json.loads(value)
    except (json.JSONDecodeError, RecursionError) as e:
        logger.debug(f"Keeping raw text for JSON field {field.name!r} in row {row_index}: {e}")
        if warnings is not None:
            warnings.append(RowWarning(row_index=row_index, field=field.name, message=str(e)))
        return value


def to_text(value: Any) -> str:
    """String coercion used for key matching and delimited output.

    Text backends only ever return strings, so numbers and booleans are
    rendered the way they would read back from a sheet or CSV file.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return _dump_json(value)
    return str(value)
