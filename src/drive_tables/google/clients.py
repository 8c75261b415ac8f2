"""Bundle of authenticated Google API clients handed to table handlers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from googleapiclient.discovery import build

from drive_tables.drive.client import DriveClient
from drive_tables.sheets.client import SheetsClient


@dataclass
class GoogleClients:
    """Drive and Sheets clients sharing one set of credentials."""

    drive: DriveClient
    sheets: SheetsClient

    @classmethod
    def from_credentials(cls, credentials: Any) -> GoogleClients:
        """Build both API services with the given credentials.

        Args:
            credentials: ``google.auth`` credentials with Drive and Sheets scopes.

        Returns:
            GoogleClients ready to pass to a handler.
        """
        drive_service = build("drive", "v3", credentials=credentials, cache_discovery=False)
        sheets_service = build("sheets", "v4", credentials=credentials, cache_discovery=False)
        return cls(drive=DriveClient(drive_service), sheets=SheetsClient(sheets_service))
