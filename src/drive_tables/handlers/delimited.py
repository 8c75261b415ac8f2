"""CSV and TSV files stored on Drive.

Every operation downloads the whole file, changes it in memory and uploads
the whole file again. Concurrent writers to the same file race and the
later upload wins.
"""

from __future__ import annotations

import csv
import io
import logging
import re
import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from drive_tables.handlers.base import BaseHandler
from drive_tables.handlers.codec import deserialize, to_text
from drive_tables.handlers.models import (
    DataResult,
    InferredTable,
    Key,
    Row,
    RowWarning,
    Table,
)
from drive_tables.handlers.rows import (
    find_row_index,
    has_valid_keys,
    header_superset,
    key_fields,
    merge_rows,
)
from drive_tables.handlers.validation import parse_path, validate_file_id

if TYPE_CHECKING:
    from drive_tables.google.clients import GoogleClients

logger = logging.getLogger(__name__)

COMMA = ","
TAB = "\t"

CSV_MIME_TYPE = "text/csv"
TSV_MIME_TYPE = "text/tab-separated-values"

_EXTENSION_RE = re.compile(r"\.(csv|tsv)$", re.IGNORECASE)

# Cells may hold large JSON documents
csv.field_size_limit(sys.maxsize)


@dataclass
class ParsedFile:
    """Header line, data rows and delimiter of a delimited file."""

    headers: list[str] = field(default_factory=list)
    rows: list[Row] = field(default_factory=list)
    delimiter: str = COMMA


def detect_delimiter(content: str) -> str:
    """Pick tab or comma from the first line.

    Tab is chosen only when the line has strictly more tabs than commas.
    """
    first_line = re.split(r"\r\n|\r|\n", content, maxsplit=1)[0]
    return TAB if first_line.count(TAB) > first_line.count(COMMA) else COMMA


def mime_type_for(delimiter: str) -> str:
    """MIME type written back to Drive for a delimiter."""
    return TSV_MIME_TYPE if delimiter == TAB else CSV_MIME_TYPE


def parse_delimited(content: str, delimiter: str | None = None) -> ParsedFile:
    """Parse delimited text into rows keyed by the header line.

    Header names are stripped and blank lines skipped. Records may end in
    LF, CRLF or a lone CR. Cells stay text; short records leave their
    missing fields as None and extra trailing fields are dropped.
    """
    if content.startswith("\ufeff"):
        content = content[1:]
    delimiter = delimiter or detect_delimiter(content)

    reader = csv.reader(io.StringIO(content, newline=""), delimiter=delimiter)
    records = [record for record in reader if record]
    if not records:
        return ParsedFile(delimiter=delimiter)

    headers = [name.strip() for name in records[0]]
    rows = [
        {name: record[i] if i < len(record) else None for i, name in enumerate(headers)}
        for record in records[1:]
    ]
    return ParsedFile(headers=headers, rows=rows, delimiter=delimiter)


def to_delimited(rows: list[Row], delimiter: str, headers: list[str]) -> str:
    """Write rows under a header line, with no trailing newline."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, delimiter=delimiter, lineterminator="\n")
    writer.writerow(headers)
    for row in rows:
        writer.writerow([to_text(row.get(name)) for name in headers])

    text = buffer.getvalue()
    return text[:-1] if text.endswith("\n") else text


class DelimitedHandler(BaseHandler):
    """Table handler for CSV and TSV files."""

    resource_types = ("csv", "tsv")

    def _storage_row(self, row: Row, headers: list[str], table: Table) -> Row:
        return dict(zip(headers, self._serialize_row(row, headers, table)))

    async def _read(self, file_id: str, clients: GoogleClients) -> ParsedFile:
        return parse_delimited(await clients.drive.read_content(file_id))

    async def _write(
        self, file_id: str, parsed: ParsedFile, headers: list[str], clients: GoogleClients
    ) -> None:
        await clients.drive.write_content(
            file_id,
            to_delimited(parsed.rows, parsed.delimiter, headers),
            mime_type_for(parsed.delimiter),
        )

    async def get_table(
        self,
        file_id: str,
        clients: GoogleClients,
        sheet_name: str | None = None,
    ) -> InferredTable:
        validate_file_id(file_id)
        parsed = await self._read(file_id, clients)
        name = _EXTENSION_RE.sub("", await clients.drive.get_file_name(file_id))
        resource_type = "tsv" if parsed.delimiter == TAB else "csv"
        return self.infer(name, [resource_type, file_id], parsed.rows)

    async def get_data(self, table: Table, clients: GoogleClients) -> DataResult:
        path = parse_path(table.path, self.resource_types, "get_data")
        parsed = await self._read(path.file_id, clients)
        keys = key_fields(table)

        result = DataResult()
        for index, wire_row in enumerate(parsed.rows):
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
        path = parse_path(table.path, self.resource_types, "add_row")
        parsed = await self._read(path.file_id, clients)

        headers = header_superset(parsed.headers, row)
        parsed.rows.append(self._storage_row(row, headers, table))

        await self._write(path.file_id, parsed, headers, clients)

    async def update_row(self, table: Table, key: Key, row: Row, clients: GoogleClients) -> None:
        path = parse_path(table.path, self.resource_types, "update_row")
        parsed = await self._read(path.file_id, clients)

        index = find_row_index(parsed.rows, key)
        if index == -1:
            logger.debug(f"No row matching {key} in {path.file_id}, nothing to update")
            return

        headers = header_superset(parsed.headers, row)
        parsed.rows[index] = self._storage_row(merge_rows(parsed.rows[index], row), headers, table)

        await self._write(path.file_id, parsed, headers, clients)

    async def delete_row(self, table: Table, key: Key, clients: GoogleClients) -> None:
        path = parse_path(table.path, self.resource_types, "delete_row")
        parsed = await self._read(path.file_id, clients)

        index = find_row_index(parsed.rows, key)
        if index == -1:
            logger.debug(f"No row matching {key} in {path.file_id}, nothing to delete")
            return

        del parsed.rows[index]

        # Header shrinks to what the remaining rows still hold
        headers: list[str] = []
        for remaining in parsed.rows:
            headers = header_superset(headers, remaining)

        await self._write(path.file_id, parsed, headers, clients)
