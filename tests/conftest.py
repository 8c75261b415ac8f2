"""Shared fixtures: in-memory Drive and Sheets clients that record every call."""

import re

import pytest

from drive_tables.google.clients import GoogleClients
from drive_tables.handlers.models import FieldType, Table, TableField
from drive_tables.sheets.a1 import column_index

_CELL_RE = re.compile(r"^([A-Z]+)(\d+)$")


class FakeDriveClient:
    """Drive client backed by a dict of file contents."""

    def __init__(self, files=None, names=None):
        self.files = dict(files or {})
        self.names = dict(names or {})
        self.calls = []

    @property
    def writes(self):
        return [c for c in self.calls if c[0] == "write"]

    async def read_content(self, file_id):
        self.calls.append(("read", file_id))
        return self.files[file_id]

    async def write_content(self, file_id, content, mime_type):
        self.calls.append(("write", file_id, content, mime_type))
        self.files[file_id] = content

    async def get_file_name(self, file_id):
        self.calls.append(("name", file_id))
        return self.names.get(file_id, "Unknown")


class FakeSheetsClient:
    """Sheets client backed by a single grid of values."""

    def __init__(self, grid=None):
        self.grid = [list(row) for row in grid or []]
        self.calls = []

    @property
    def writes(self):
        return [c for c in self.calls if c[0] != "get"]

    @staticmethod
    def _cells(range_notation):
        """Return (start, end) cells of a range, or None for a whole sheet."""
        if "!" not in range_notation:
            return None
        cells = range_notation.rsplit("!", 1)[1].split(":")
        return cells[0], cells[1] if len(cells) > 1 else None

    @staticmethod
    def _position(cell):
        letters, row = _CELL_RE.match(cell).groups()
        return int(row) - 1, column_index(letters) - 1

    def _set(self, row_index, col_index, value):
        while len(self.grid) <= row_index:
            self.grid.append([])
        row = self.grid[row_index]
        while len(row) <= col_index:
            row.append("")
        row[col_index] = value

    def _trimmed(self):
        rows = [list(row) for row in self.grid]
        for row in rows:
            while row and row[-1] == "":
                row.pop()
        while rows and not rows[-1]:
            rows.pop()
        return rows

    async def get_values(self, spreadsheet_id, range_notation, value_render_option=None):
        self.calls.append(("get", range_notation))
        rows = self._trimmed()
        cells = self._cells(range_notation)
        if cells is None:
            return rows
        first_row, _ = self._position(cells[0])
        last_row = self._position(cells[1])[0] if cells[1] else first_row
        return rows[first_row : last_row + 1]

    async def update_values(self, spreadsheet_id, range_notation, values, value_input_option):
        self.calls.append(("update", range_notation, values, value_input_option))
        start_row, start_col = self._position(self._cells(range_notation)[0])
        for r, row in enumerate(values):
            for c, value in enumerate(row):
                self._set(start_row + r, start_col + c, value)
        return sum(len(row) for row in values)

    async def append_values(self, spreadsheet_id, range_notation, values, value_input_option):
        self.calls.append(("append", range_notation, values, value_input_option))
        start_row = len(self._trimmed())
        for r, row in enumerate(values):
            for c, value in enumerate(row):
                self._set(start_row + r, c, value)
        return len(values)

    async def clear_values(self, spreadsheet_id, range_notation):
        self.calls.append(("clear", range_notation))
        row_index, _ = self._position(self._cells(range_notation)[0])
        if row_index < len(self.grid):
            self.grid[row_index] = []


@pytest.fixture
def drive():
    return FakeDriveClient()


@pytest.fixture
def sheets():
    return FakeSheetsClient()


@pytest.fixture
def clients(drive, sheets):
    return GoogleClients(drive=drive, sheets=sheets)


@pytest.fixture
def file_id():
    return "1AbCdEf_gHiJ-kLmN"


def make_table(path, fields=None):
    """Build a table with an "id" key field unless fields are given."""
    if fields is None:
        fields = [TableField("id", FieldType.TEXT, is_key=True), TableField("name")]
    return Table(id="people", name="people", path=path, fields=fields)


@pytest.fixture
def table_factory():
    return make_table
