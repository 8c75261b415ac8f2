"""
Table handlers for files stored on Google Drive.

One handler per storage format, all implementing BaseHandler:
- DelimitedHandler: CSV and TSV files
- JsonHandler: JSON array (or single object) files
- SpreadsheetHandler: a named sheet of a Google Spreadsheet
"""

from drive_tables.handlers.base import BaseHandler
from drive_tables.handlers.delimited import DelimitedHandler
from drive_tables.handlers.exceptions import (
    ContentTooLargeError,
    InvalidContentError,
    InvalidFileIdError,
    InvalidInputError,
    InvalidPathError,
    InvalidSheetNameError,
    TableError,
)
from drive_tables.handlers.json_array import JsonHandler
from drive_tables.handlers.models import (
    DataResult,
    FieldType,
    InferredTable,
    RowWarning,
    Table,
    TableField,
)
from drive_tables.handlers.spreadsheet import SpreadsheetHandler

__all__ = [
    "BaseHandler",
    "DelimitedHandler",
    "JsonHandler",
    "SpreadsheetHandler",
    "DataResult",
    "FieldType",
    "InferredTable",
    "RowWarning",
    "Table",
    "TableField",
    "TableError",
    "InvalidInputError",
    "InvalidPathError",
    "InvalidFileIdError",
    "InvalidSheetNameError",
    "ContentTooLargeError",
    "InvalidContentError",
]
