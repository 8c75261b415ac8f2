"""Google Drive file content client."""

from __future__ import annotations

import asyncio
import io
import logging
from typing import Any

from googleapiclient.http import MediaIoBaseDownload, MediaIoBaseUpload

from drive_tables.handlers.exceptions import InvalidContentError
from drive_tables.handlers.validation import validate_file_id

logger = logging.getLogger(__name__)


class DriveClient:
    """Read and replace the content of Drive files.

    Wraps a Drive v3 service built by ``googleapiclient.discovery.build``.
    The API client is blocking, so each request runs in a worker thread and
    the methods are awaitable.

    Usage:
        service = build("drive", "v3", credentials=creds)
        client = DriveClient(service)

        content = await client.read_content(file_id)
        await client.write_content(file_id, content, "text/csv")

    Errors from the API (``googleapiclient.errors.HttpError``) propagate as-is.
    """

    def __init__(self, service: Any) -> None:
        """Initialize Drive client.

        Args:
            service: Authenticated Drive v3 service resource.
        """
        self._service = service

    # =========================================================================
    # Content
    # =========================================================================

    async def read_content(self, file_id: str) -> str:
        """Download a file's content as text.

        Args:
            file_id: Drive file ID.

        Returns:
            File content decoded as UTF-8.

        Raises:
            InvalidContentError: If the content is not UTF-8 text.
        """
        validate_file_id(file_id)
        logger.debug(f"Downloading content of {file_id}")
        data = await asyncio.to_thread(self._download, file_id)
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidContentError(f"File {file_id} is not UTF-8 text: {e}") from e

    def _download(self, file_id: str) -> bytes:
        request = self._service.files().get_media(fileId=file_id)
        fh = io.BytesIO()
        downloader = MediaIoBaseDownload(fh, request)

        done = False
        while not done:
            _, done = downloader.next_chunk()

        return fh.getvalue()

    async def write_content(self, file_id: str, content: str, mime_type: str) -> None:
        """Replace a file's content.

        Args:
            file_id: Drive file ID.
            content: New file content.
            mime_type: MIME type of the content.
        """
        validate_file_id(file_id)
        media = MediaIoBaseUpload(
            io.BytesIO(content.encode("utf-8")), mimetype=mime_type, resumable=False
        )
        request = self._service.files().update(fileId=file_id, media_body=media)
        await asyncio.to_thread(request.execute)
        logger.info(f"Wrote {len(content)} characters to {file_id} ({mime_type})")

    # =========================================================================
    # Metadata
    # =========================================================================

    async def get_file_name(self, file_id: str) -> str:
        """Get a file's display name.

        Args:
            file_id: Drive file ID.

        Returns:
            File name, or "Unknown" if Drive returns none.
        """
        validate_file_id(file_id)
        request = self._service.files().get(fileId=file_id, fields="name")
        result = await asyncio.to_thread(request.execute)
        return result.get("name") or "Unknown"
