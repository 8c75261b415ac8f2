"""Table, field and row models shared by all handlers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# A row maps field names to values. Wire rows hold what the backing file
# stores; typed rows hold values after schema-driven decoding.
Row = dict[str, Any]
Key = dict[str, Any]


class FieldType(str, Enum):
    """Declared type of a table field."""

    TEXT = "text"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"
    JSON = "json"


@dataclass
class TableField:
    """A single column of a table schema."""

    name: str
    type: FieldType = FieldType.TEXT
    is_key: bool = False


@dataclass
class Table:
    """A table addressed by path: [resource_type, file_id, sheet_name?]."""

    id: str
    name: str
    path: list[str]
    fields: list[TableField] = field(default_factory=list)

    def field(self, name: str) -> TableField | None:
        """Get a field by name."""
        for f in self.fields:
            if f.name == name:
                return f
        return None

    @property
    def key_fields(self) -> list[str]:
        """Names of the fields that identify a row."""
        return [f.name for f in self.fields if f.is_key]


@dataclass
class InferredTable:
    """Schema inferred from sample rows of a backing file."""

    name: str
    path: list[str]
    fields: list[TableField] = field(default_factory=list)

    def to_table(self, table_id: str | None = None) -> Table:
        """Build a Table from the inferred schema."""
        return Table(
            id=table_id or self.name,
            name=self.name,
            path=list(self.path),
            fields=list(self.fields),
        )


@dataclass
class RowWarning:
    """A value that could not be decoded and was kept as raw text."""

    row_index: int
    field: str
    message: str


@dataclass
class DataResult:
    """Rows returned by get_data plus any decode warnings."""

    rows: list[Row] = field(default_factory=list)
    warnings: list[RowWarning] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.rows)
