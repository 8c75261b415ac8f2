"""JSON files stored on Drive.

The file holds either an array of objects or a single object, which is
treated as a one-row table. Like delimited files, every write re-uploads the
whole document.
"""

from __future__ import annotations

import json
import logging
import re
from typing import TYPE_CHECKING

from drive_tables.config import DEFAULT_MAX_JSON_BYTES
from drive_tables.handlers.base import BaseHandler
from drive_tables.handlers.exceptions import ContentTooLargeError, InvalidContentError
from drive_tables.handlers.models import DataResult, InferredTable, Key, Row, Table
from drive_tables.handlers.rows import find_row_index, has_valid_keys, key_fields, merge_rows
from drive_tables.handlers.validation import parse_path, validate_file_id

if TYPE_CHECKING:
    from drive_tables.google.clients import GoogleClients

logger = logging.getLogger(__name__)

JSON_MIME_TYPE = "application/json"

_EXTENSION_RE = re.compile(r"\.json$", re.IGNORECASE)


def parse_json_rows(content: str, max_bytes: int = DEFAULT_MAX_JSON_BYTES) -> list[Row]:
    """Parse a JSON document into rows.

    Args:
        content: File content.
        max_bytes: Largest UTF-8 size accepted; checked before parsing.

    Returns:
        List of row objects.

    Raises:
        ContentTooLargeError: If the content is larger than max_bytes.
        InvalidContentError: If the content is not JSON, its top level is not
            an object or array, or the array holds anything but objects.
    """
    size = len(content.encode("utf-8"))
    if size > max_bytes:
        raise ContentTooLargeError(size, max_bytes)

    try:
        parsed = json.loads(content)
    except (json.JSONDecodeError, RecursionError) as e:
        raise InvalidContentError(f"Invalid JSON content: {e}") from e

    if isinstance(parsed, dict):
        return [parsed]
    if not isinstance(parsed, list):
        raise InvalidContentError("JSON must be an object or array")

    for index, item in enumerate(parsed):
        if not isinstance(item, dict):
            raise InvalidContentError(
                f"JSON array must contain only objects, item {index} is {type(item).__name__}"
            )
    return parsed


def dump_json_rows(rows: list[Row], indent: int = 2) -> str:
    """Serialize rows as an indented JSON array."""
    return json.dumps(rows, indent=indent, ensure_ascii=False)


class JsonHandler(BaseHandler):
    """Table handler for JSON files."""

    resource_types = ("json",)

    async def _read(self, file_id: str, clients: GoogleClients) -> list[Row]:
        content = await clients.drive.read_content(file_id)
        return parse_json_rows(content, self.config.max_json_bytes)

    async def _write(self, file_id: str, rows: list[Row], clients: GoogleClients) -> None:
        await clients.drive.write_content(
            file_id, dump_json_rows(rows, self.config.json_indent), JSON_MIME_TYPE
        )

    async def get_table(
        self,
        file_id: str,
        clients: GoogleClients,
        sheet_name: str | None = None,
    ) -> InferredTable:
        validate_file_id(file_id)
        rows = await self._read(file_id, clients)
        name = _EXTENSION_RE.sub("", await clients.drive.get_file_name(file_id))
        return self.infer(name, ["json", file_id], rows)

    async def get_data(self, table: Table, clients: GoogleClients) -> DataResult:
        path = parse_path(table.path, self.resource_types, "get_data")
        rows = await self._read(path.file_id, clients)
        keys = key_fields(table)
        return DataResult(rows=[row for row in rows if has_valid_keys(row, keys)])

    async def add_row(self, table: Table, row: Row, clients: GoogleClients) -> None:
        path = parse_path(table.path, self.resource_types, "add_row")
        rows = await self._read(path.file_id, clients)
        rows.append(dict(row))
        await self._write(path.file_id, rows, clients)

    async def update_row(self, table: Table, key: Key, row: Row, clients: GoogleClients) -> None:
        path = parse_path(table.path, self.resource_types, "update_row")
        rows = await self._read(path.file_id, clients)

        index = find_row_index(rows, key)
        if index == -1:
            logger.debug(f"No row matching {key} in {path.file_id}, nothing to update")
            return

        rows[index] = merge_rows(rows[index], row)
        await self._write(path.file_id, rows, clients)

    async def delete_row(self, table: Table, key: Key, clients: GoogleClients) -> None:
        path = parse_path(table.path, self.resource_types, "delete_row")
        rows = await self._read(path.file_id, clients)

        index = find_row_index(rows, key)
        if index == -1:
            logger.debug(f"No row matching {key} in {path.file_id}, nothing to delete")
            return

        del rows[index]
        await self._write(path.file_id, rows, clients)
