"""Load Google credentials from a key or token file.

Two file formats are accepted:
- Service account key (``"type": "service_account"``), for server-to-server
  access. Files must be shared with the service account email.
- Authorized user token (``"type": "authorized_user"`` or a token file
  written by an OAuth flow), for access as a user.

Running the OAuth consent flow itself is out of scope; use any tool that
writes an authorized user file.

Example:
    >>> creds = load_credentials("service_account_key.json")
    >>> clients = GoogleClients.from_credentials(creds)
"""

import json
import logging
from pathlib import Path

from google.oauth2 import credentials as user_credentials
from google.oauth2 import service_account

from drive_tables.google.exceptions import CredentialsNotFoundError, InvalidCredentialsError

logger = logging.getLogger(__name__)


# Scopes needed by the table handlers
SCOPES = {
    "drive": "https://www.googleapis.com/auth/drive",
    "drive_readonly": "https://www.googleapis.com/auth/drive.readonly",
    "drive_file": "https://www.googleapis.com/auth/drive.file",
    "sheets": "https://www.googleapis.com/auth/spreadsheets",
    "sheets_readonly": "https://www.googleapis.com/auth/spreadsheets.readonly",
}

DEFAULT_SCOPES = ["drive", "sheets"]


def resolve_scopes(scopes: list[str]) -> list[str]:
    """Resolve scope names to full URLs."""
    resolved = []
    for scope in scopes:
        if scope.startswith("https://"):
            resolved.append(scope)
        elif scope in SCOPES:
            resolved.append(SCOPES[scope])
        else:
            raise ValueError(
                f"Unknown scope: {scope}. Use full URL or one of: {list(SCOPES.keys())}"
            )
    return resolved


def load_credentials(path: str | Path, scopes: list[str] | None = None):
    """Load credentials from a service account key or authorized user file.

    Args:
        path: Path to the JSON credentials file.
        scopes: Scope names or URLs. Defaults to ["drive", "sheets"].

    Returns:
        ``google.auth`` credentials usable with ``GoogleClients.from_credentials``.

    Raises:
        CredentialsNotFoundError: If the file does not exist.
        InvalidCredentialsError: If the file is not valid JSON or has an unknown format.
    """
    path = Path(path)
    if not path.exists():
        raise CredentialsNotFoundError(str(path))

    resolved = resolve_scopes(scopes or DEFAULT_SCOPES)

    try:
        with open(path) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidCredentialsError(f"Invalid JSON in credentials file: {e}") from e

    if data.get("type") == "service_account":
        creds = service_account.Credentials.from_service_account_info(data, scopes=resolved)
        logger.info(f"Loaded service account credentials: {data.get('client_email', '')}")
        return creds

    if data.get("type") == "authorized_user" or "refresh_token" in data:
        creds = user_credentials.Credentials.from_authorized_user_info(data, scopes=resolved)
        logger.info("Loaded authorized user credentials")
        return creds

    raise InvalidCredentialsError(
        f"Unsupported credentials file: expected type 'service_account' or "
        f"'authorized_user', got {data.get('type')!r}"
    )
