"""Sheets inside a Google Spreadsheet.

Row 1 holds the headers and every following row is a data row, so data row
``i`` (0-based) lives on sheet row ``i + 2``. Writes target single ranges
instead of rewriting the sheet.

Deleting a row clears its cells but leaves the empty row in place. Other
rows keep their row numbers; the gap is skipped on read because its key
fields are blank.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from drive_tables.handlers.base import BaseHandler
from drive_tables.handlers.codec import deserialize
from drive_tables.handlers.models import DataResult, InferredTable, Key, Row, RowWarning, Table
from drive_tables.handlers.rows import find_row_index, has_valid_keys, key_fields, merge_rows
from drive_tables.handlers.validation import parse_path, validate_file_id
from drive_tables.sheets.a1 import a1_range, column_letter, escape_sheet_name
from drive_tables.sheets.client import RAW, USER_ENTERED

if TYPE_CHECKING:
    from drive_tables.google.clients import GoogleClients

logger = logging.getLogger(__name__)

# Sheet row of the first data row
FIRST_DATA_ROW = 2


def rows_to_dicts(headers: list[str], values: list[list[Any]]) -> list[Row]:
    """Map value rows onto headers by position; missing cells become None."""
    return [
        {name: row[i] if i < len(row) else None for i, name in enumerate(headers)}
        for row in values
    ]


def split_header(values: list[list[Any]]) -> tuple[list[str], list[Row]]:
    """Split sheet values into header names and wire rows."""
    if not values:
        return [], []
    headers = [str(h) for h in values[0]]
    return headers, rows_to_dicts(headers, values[1:])


class SpreadsheetHandler(BaseHandler):
    """Table handler for a named sheet of a spreadsheet."""

    resource_types = ("spreadsheet",)

    async def _read_sheet(
        self, file_id: str, sheet_name: str, clients: GoogleClients
    ) -> tuple[list[str], list[Row]]:
        values = await clients.sheets.get_values(file_id, a1_range(sheet_name))
        return split_header(values)

    async def _add_columns(
        self,
        file_id: str,
        sheet_name: str,
        headers: list[str],
        row: Row,
        clients: GoogleClients,
    ) -> list[str]:
        """Write any new field names after the last header.

        Returns:
            Headers including the new columns.
        """
        new_columns = [name for name in row if name not in headers]
        if not new_columns:
            return headers

        start = f"{column_letter(len(headers) + 1)}1"
        await clients.sheets.update_values(
            file_id, a1_range(sheet_name, start), [new_columns], RAW
        )
        logger.info(f"Added columns {new_columns} to {file_id} {escape_sheet_name(sheet_name)}")
        return [*headers, *new_columns]

    async def get_table(
        self,
        file_id: str,
        clients: GoogleClients,
        sheet_name: str | None = None,
    ) -> InferredTable:
        validate_file_id(file_id)
        escape_sheet_name(sheet_name)
        _, rows = await self._read_sheet(file_id, sheet_name, clients)
        return self.infer(sheet_name, ["spreadsheet", file_id, sheet_name], rows)

    async def get_data(self, table: Table, clients: GoogleClients) -> DataResult:
        path = parse_path(table.path, self.resource_types, "get_data", require_sheet=True)
        _, wire_rows = await self._read_sheet(path.file_id, path.sheet_name, clients)
        keys = key_fields(table)

        result = DataResult()
        for index, wire_row in enumerate(wire_rows):
            row_warnings: list[RowWarning] = []
            typed = {
                name: deserialize(value, table.field(name), row_warnings, index)
                for name, value in wire_row.items()
            }
            if has_valid_keys(typed, keys):
                result.rows.append(typed)
                result.warnings.extend(row_warnings)
        return result

    async def add_row(self, table: Table, row: Row, clients: GoogleClients) -> None:
        path = parse_path(table.path, self.resource_types, "add_row", require_sheet=True)

        header_range = a1_range(path.sheet_name, "A1", f"{self.config.header_end_column}1")
        values = await clients.sheets.get_values(path.file_id, header_range)
        headers = [str(h) for h in values[0]] if values else []

        headers = await self._add_columns(path.file_id, path.sheet_name, headers, row, clients)

        await clients.sheets.append_values(
            path.file_id,
            a1_range(path.sheet_name),
            [self._serialize_row(row, headers, table)],
            USER_ENTERED,
        )

    async def update_row(self, table: Table, key: Key, row: Row, clients: GoogleClients) -> None:
        path = parse_path(table.path, self.resource_types, "update_row", require_sheet=True)
        headers, wire_rows = await self._read_sheet(path.file_id, path.sheet_name, clients)
        if not headers:
            logger.debug(f"Sheet {path.sheet_name!r} in {path.file_id} is empty, nothing to update")
            return

        index = find_row_index(wire_rows, key)
        if index == -1:
            logger.debug(f"No row matching {key} in {path.file_id}, nothing to update")
            return

        headers = await self._add_columns(path.file_id, path.sheet_name, headers, row, clients)
        merged = merge_rows(wire_rows[index], row)

        await clients.sheets.update_values(
            path.file_id,
            a1_range(path.sheet_name, f"A{index + FIRST_DATA_ROW}"),
            [self._serialize_row(merged, headers, table)],
            USER_ENTERED,
        )

    async def delete_row(self, table: Table, key: Key, clients: GoogleClients) -> None:
        path = parse_path(table.path, self.resource_types, "delete_row", require_sheet=True)
        headers, wire_rows = await self._read_sheet(path.file_id, path.sheet_name, clients)
        if not headers:
            logger.debug(f"Sheet {path.sheet_name!r} in {path.file_id} is empty, nothing to delete")
            return

        index = find_row_index(wire_rows, key)
        if index == -1:
            logger.debug(f"No row matching {key} in {path.file_id}, nothing to delete")
            return

        row_number = index + FIRST_DATA_ROW
        await clients.sheets.clear_values(
            path.file_id,
            a1_range(path.sheet_name, f"A{row_number}", f"{self.config.clear_end_column}{row_number}"),
        )
