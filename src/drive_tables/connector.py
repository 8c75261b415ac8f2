"""
Route table operations to the handler for a path's resource type.
"""

from drive_tables.config import DEFAULT_CONFIG, HandlerConfig
from drive_tables.google.clients import GoogleClients
from drive_tables.handlers.base import BaseHandler, InferTable
from drive_tables.handlers.delimited import DelimitedHandler
from drive_tables.handlers.exceptions import InvalidPathError
from drive_tables.handlers.json_array import JsonHandler
from drive_tables.handlers.models import DataResult, InferredTable, Key, Row, Table
from drive_tables.handlers.spreadsheet import SpreadsheetHandler

# Handler registry, keyed by path[0]
HANDLERS: dict[str, type[BaseHandler]] = {
    "spreadsheet": SpreadsheetHandler,
    "csv": DelimitedHandler,
    "tsv": DelimitedHandler,
    "json": JsonHandler,
}


def get_handler(
    resource_type: str,
    config: HandlerConfig | None = None,
    infer: InferTable | None = None,
) -> BaseHandler:
    """
    Create the handler for a resource type.

    Raises:
        InvalidPathError: If no handler is registered for the type.
    """
    if resource_type not in HANDLERS:
        raise InvalidPathError(
            "dispatch", f"one of {sorted(HANDLERS)} as the resource type", [resource_type]
        )
    return HANDLERS[resource_type](config=config, infer=infer)


class TableConnector:
    """
    Uniform table access across sheets, CSV/TSV and JSON files.

    Example:
        >>> clients = GoogleClients.from_credentials(load_credentials("key.json"))
        >>> connector = TableConnector(clients)
        >>> inferred = await connector.get_table(["csv", "1AbC..."])
        >>> table = inferred.to_table()
        >>> result = await connector.get_data(table)
        >>> await connector.update_row(table, {"id": "1"}, {"email": "a@x.com"})
    """

    def __init__(
        self,
        clients: GoogleClients,
        config: HandlerConfig | None = None,
        infer: InferTable | None = None,
    ):
        """
        Initialize the connector.

        Args:
            clients: Authenticated Drive and Sheets clients.
            config: Handler settings. Defaults to DEFAULT_CONFIG.
            infer: Schema inference function passed to every handler.
        """
        self.clients = clients
        self.config = config or DEFAULT_CONFIG
        self._handlers = {
            resource_type: handler_class(config=self.config, infer=infer)
            for resource_type, handler_class in HANDLERS.items()
        }

    def handler_for(self, path: list[str]) -> BaseHandler:
        """Get the handler for a table path."""
        if not path or path[0] not in self._handlers:
            raise InvalidPathError(
                "dispatch", f"path starting with one of {sorted(self._handlers)}", path
            )
        return self._handlers[path[0]]

    async def get_table(self, path: list[str]) -> InferredTable:
        """Infer the schema of the file at ``[type, file_id, sheet_name?]``."""
        handler = self.handler_for(path)
        file_id = path[1] if len(path) > 1 else ""
        sheet_name = path[2] if len(path) > 2 else None
        return await handler.get_table(file_id, self.clients, sheet_name)

    async def get_data(self, table: Table) -> DataResult:
        return await self.handler_for(table.path).get_data(table, self.clients)

    async def add_row(self, table: Table, row: Row) -> None:
        await self.handler_for(table.path).add_row(table, row, self.clients)

    async def update_row(self, table: Table, key: Key, row: Row) -> None:
        await self.handler_for(table.path).update_row(table, key, row, self.clients)

    async def delete_row(self, table: Table, key: Key) -> None:
        await self.handler_for(table.path).delete_row(table, key, self.clients)

    @classmethod
    def get_resource_types(cls) -> list[str]:
        """Return the list of supported resource types."""
        return list(HANDLERS.keys())
