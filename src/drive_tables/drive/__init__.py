"""Google Drive file content access.

Read and replace whole-file content of Drive files by ID.

Usage:
    from drive_tables.drive import DriveClient

    client = DriveClient(build("drive", "v3", credentials=creds))

    content = await client.read_content(file_id)
    await client.write_content(file_id, content, "text/csv")
"""

from __future__ import annotations

from drive_tables.drive.client import DriveClient

__all__ = ["DriveClient"]
