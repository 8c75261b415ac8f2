"""
Abstract base class for table handlers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

from drive_tables.config import DEFAULT_CONFIG, HandlerConfig
from drive_tables.handlers.codec import serialize
from drive_tables.handlers.inference import infer_table
from drive_tables.handlers.models import DataResult, InferredTable, Key, Row, Table

if TYPE_CHECKING:
    from drive_tables.google.clients import GoogleClients

InferTable = Callable[[str, list[str], Sequence[Row]], InferredTable]


class BaseHandler(ABC):
    """Uniform CRUD contract over one kind of backing file.

    Handlers keep no state between calls: every operation fetches what it
    needs, so calls are independent. Writes are read-modify-write with no
    locking; two concurrent writers to the same file race and the later
    write wins.
    """

    resource_types: tuple[str, ...]

    def __init__(
        self,
        config: HandlerConfig | None = None,
        infer: InferTable | None = None,
    ):
        """
        Initialize the handler.

        Args:
            config: Handler settings. Defaults to DEFAULT_CONFIG.
            infer: Schema inference function. Defaults to the built-in inference.
        """
        self.config = config or DEFAULT_CONFIG
        self._infer = infer or infer_table

    def infer(self, name: str, path: list[str], rows: Sequence[Row]) -> InferredTable:
        """Run schema inference on at most ``inference_sample_size`` rows."""
        return self._infer(name, path, list(rows[: self.config.inference_sample_size]))

    @abstractmethod
    async def get_table(
        self,
        file_id: str,
        clients: GoogleClients,
        sheet_name: str | None = None,
    ) -> InferredTable:
        """
        Infer the schema of a file.

        Args:
            file_id: Drive file or spreadsheet ID.
            clients: Authenticated API clients.
            sheet_name: Sheet title, for spreadsheets.

        Returns:
            InferredTable with name, path and fields.
        """
        pass

    @abstractmethod
    async def get_data(self, table: Table, clients: GoogleClients) -> DataResult:
        """
        Read all rows whose key fields are filled in.

        Returns:
            DataResult with typed rows and any decode warnings.

        Raises:
            InvalidInputError: If the table path is malformed.
        """
        pass

    @abstractmethod
    async def add_row(self, table: Table, row: Row, clients: GoogleClients) -> None:
        """Append a row, adding columns for any new field names."""
        pass

    @abstractmethod
    async def update_row(self, table: Table, key: Key, row: Row, clients: GoogleClients) -> None:
        """Merge ``row`` onto the first row matching ``key``; no-op if none matches."""
        pass

    @abstractmethod
    async def delete_row(self, table: Table, key: Key, clients: GoogleClients) -> None:
        """Remove the first row matching ``key``; no-op if none matches."""
        pass

    def _serialize_row(self, row: Row, headers: list[str], table: Table) -> list[Any]:
        """Serialize a row's values in header order."""
        return [serialize(row.get(header), table.field(header)) for header in headers]
