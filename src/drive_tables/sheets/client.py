"""Google Sheets values client."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from drive_tables.handlers.validation import validate_file_id

logger = logging.getLogger(__name__)

RAW = "RAW"
USER_ENTERED = "USER_ENTERED"


class SheetsClient:
    """Range-addressed reads and writes on a spreadsheet.

    Wraps a Sheets v4 service built by ``googleapiclient.discovery.build``.
    Requests run in a worker thread so the methods are awaitable.

    Usage:
        service = build("sheets", "v4", credentials=creds)
        client = SheetsClient(service)

        # Read values
        values = await client.get_values(spreadsheet_id, "'Sheet1'")

        # Write values
        await client.update_values(spreadsheet_id, "'Sheet1'!A1", [["Name", "Age"]])

        # Append rows
        await client.append_values(spreadsheet_id, "'Sheet1'", [["Bob", 25]])

    Errors from the API propagate as-is.
    """

    def __init__(self, service: Any) -> None:
        """Initialize Sheets client.

        Args:
            service: Authenticated Sheets v4 service resource.
        """
        self._service = service

    def _values(self) -> Any:
        return self._service.spreadsheets().values()

    # =========================================================================
    # Reading Data
    # =========================================================================

    async def get_values(
        self,
        spreadsheet_id: str,
        range_notation: str,
        value_render_option: str = "FORMATTED_VALUE",
    ) -> list[list[Any]]:
        """Read values from a range.

        Args:
            spreadsheet_id: Spreadsheet ID.
            range_notation: A1 notation (e.g., "'Sheet1'!A1:C10").
            value_render_option: How to render values ("FORMATTED_VALUE", "UNFORMATTED_VALUE", "FORMULA").

        Returns:
            2D list of cell values. Trailing empty cells and rows are omitted.
        """
        validate_file_id(spreadsheet_id)
        request = self._values().get(
            spreadsheetId=spreadsheet_id,
            range=range_notation,
            valueRenderOption=value_render_option,
        )
        result = await asyncio.to_thread(request.execute)
        values = result.get("values", [])
        logger.debug(f"Read {len(values)} rows from {spreadsheet_id} {range_notation}")
        return values

    # =========================================================================
    # Writing Data
    # =========================================================================

    async def update_values(
        self,
        spreadsheet_id: str,
        range_notation: str,
        values: list[list[Any]],
        value_input_option: str = USER_ENTERED,
    ) -> int:
        """Write values to a range.

        Args:
            spreadsheet_id: Spreadsheet ID.
            range_notation: A1 notation of the top-left cell or full range.
            values: 2D list of values to write.
            value_input_option: How to interpret input ("RAW" or "USER_ENTERED").

        Returns:
            Number of cells updated.
        """
        validate_file_id(spreadsheet_id)
        request = self._values().update(
            spreadsheetId=spreadsheet_id,
            range=range_notation,
            valueInputOption=value_input_option,
            body={"values": values},
        )
        result = await asyncio.to_thread(request.execute)
        logger.info(f"Updated {range_notation} in {spreadsheet_id} ({value_input_option})")
        return result.get("updatedCells", 0)

    async def append_values(
        self,
        spreadsheet_id: str,
        range_notation: str,
        values: list[list[Any]],
        value_input_option: str = USER_ENTERED,
    ) -> int:
        """Append rows after the last used row of a range.

        Args:
            spreadsheet_id: Spreadsheet ID.
            range_notation: Range that identifies the table, usually the sheet.
            values: 2D list of rows to append.
            value_input_option: How to interpret input.

        Returns:
            Number of rows appended.
        """
        validate_file_id(spreadsheet_id)
        request = self._values().append(
            spreadsheetId=spreadsheet_id,
            range=range_notation,
            valueInputOption=value_input_option,
            insertDataOption="INSERT_ROWS",
            body={"values": values},
        )
        result = await asyncio.to_thread(request.execute)
        logger.info(f"Appended {len(values)} rows to {range_notation} in {spreadsheet_id}")
        return result.get("updates", {}).get("updatedRows", 0)

    async def clear_values(self, spreadsheet_id: str, range_notation: str) -> None:
        """Clear values from a range, leaving the cells in place.

        Args:
            spreadsheet_id: Spreadsheet ID.
            range_notation: A1 notation (e.g., "'Sheet1'!A3:ZZ3").
        """
        validate_file_id(spreadsheet_id)
        request = self._values().clear(spreadsheetId=spreadsheet_id, range=range_notation, body={})
        await asyncio.to_thread(request.execute)
        logger.info(f"Cleared {range_notation} in {spreadsheet_id}")
