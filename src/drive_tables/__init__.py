"""Read and write Drive files as tables.

Google Sheets, CSV/TSV files and JSON files are exposed through one CRUD
contract: get_table, get_data, add_row, update_row, delete_row.

Usage:
    from drive_tables import GoogleClients, TableConnector, load_credentials

    clients = GoogleClients.from_credentials(load_credentials("key.json"))
    connector = TableConnector(clients)

    table = (await connector.get_table(["spreadsheet", spreadsheet_id, "Sheet1"])).to_table()
    result = await connector.get_data(table)
    await connector.add_row(table, {"id": 2, "name": "Bob"})
"""

from drive_tables.config import DEFAULT_CONFIG, HandlerConfig
from drive_tables.connector import HANDLERS, TableConnector, get_handler
from drive_tables.google import GoogleClients, load_credentials
from drive_tables.handlers import (
    DataResult,
    FieldType,
    InferredTable,
    InvalidInputError,
    RowWarning,
    Table,
    TableError,
    TableField,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "HANDLERS",
    "DataResult",
    "FieldType",
    "GoogleClients",
    "HandlerConfig",
    "InferredTable",
    "InvalidInputError",
    "RowWarning",
    "Table",
    "TableConnector",
    "TableError",
    "TableField",
    "get_handler",
    "load_credentials",
]
