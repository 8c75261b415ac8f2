"""Google Sheets range access and A1 notation helpers.

Usage:
    from drive_tables.sheets import SheetsClient, a1_range

    client = SheetsClient(build("sheets", "v4", credentials=creds))

    # Read a whole sheet
    values = await client.get_values(spreadsheet_id, a1_range("Sheet1"))

    # Write a header cell
    await client.update_values(spreadsheet_id, a1_range("Sheet1", "C1"), [["tag"]], "RAW")
"""

from __future__ import annotations

from drive_tables.sheets.a1 import a1_range, column_index, column_letter, escape_sheet_name
from drive_tables.sheets.client import RAW, USER_ENTERED, SheetsClient

__all__ = [
    "SheetsClient",
    "RAW",
    "USER_ENTERED",
    "a1_range",
    "column_index",
    "column_letter",
    "escape_sheet_name",
]
