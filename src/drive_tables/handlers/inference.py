"""Default schema inference from sample rows.

Callers that own a richer inference step pass it to the handler instead;
this one only classifies values well enough for the codec to work: JSON
fields must be recognized so they are parsed on read.
"""

from __future__ import annotations

import json
import re
from collections.abc import Sequence
from datetime import date, datetime
from typing import Any

from drive_tables.handlers.codec import to_text
from drive_tables.handlers.models import FieldType, InferredTable, Row, TableField

_NUMBER_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_BOOLEANS = ("true", "false")

KEY_FIELD_NAME = "id"


def _is_date(value: str) -> bool:
    if not _DATE_RE.match(value):
        return False
    try:
        date.fromisoformat(value)
        return True
    except ValueError:
        return False


def _is_datetime(value: str) -> bool:
    if "T" not in value:
        return False
    try:
        datetime.fromisoformat(value.replace("Z", "+00:00"))
        return True
    except ValueError:
        return False


def _is_json_text(value: str) -> bool:
    if not value.startswith(("{", "[")):
        return False
    try:
        return isinstance(json.loads(value), (dict, list))
    except json.JSONDecodeError:
        return False


def infer_value_type(value: Any) -> FieldType:
    """
    Classify a single non-blank value.

    Native JSON values are classified by their Python type, text by pattern.
    """
    if isinstance(value, bool):
        return FieldType.BOOLEAN
    if isinstance(value, (int, float)):
        return FieldType.NUMBER
    if isinstance(value, (dict, list)):
        return FieldType.JSON

    text = str(value).strip()
    if text.lower() in _BOOLEANS:
        return FieldType.BOOLEAN
    if _NUMBER_RE.match(text):
        return FieldType.NUMBER
    if _is_date(text):
        return FieldType.DATE
    if _is_datetime(text):
        return FieldType.DATETIME
    if _is_json_text(text):
        return FieldType.JSON
    return FieldType.TEXT


def infer_field_type(values: Sequence[Any]) -> FieldType:
    """A column's type is the type all of its non-blank values agree on."""
    types = {infer_value_type(v) for v in values if v is not None and to_text(v).strip()}
    if len(types) == 1:
        return types.pop()
    return FieldType.TEXT


def infer_table(name: str, path: list[str], rows: Sequence[Row]) -> InferredTable:
    """
    Infer a table schema from sample rows.

    Args:
        name: Table name (usually the file or sheet name).
        path: Table path the schema belongs to.
        rows: Sample rows.

    Returns:
        InferredTable whose fields follow first appearance in the sample. A
        field named "id" (any case) is the key; otherwise no key is declared.
    """
    columns: dict[str, list[Any]] = {}
    for row in rows:
        for field_name, value in row.items():
            columns.setdefault(field_name, []).append(value)

    fields = [
        TableField(
            name=field_name,
            type=infer_field_type(values),
            is_key=field_name.lower() == KEY_FIELD_NAME,
        )
        for field_name, values in columns.items()
    ]
    return InferredTable(name=name, path=list(path), fields=fields)
