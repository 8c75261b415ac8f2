"""Google credentials and API client wiring."""

from drive_tables.google.clients import GoogleClients
from drive_tables.google.credentials import SCOPES, load_credentials
from drive_tables.google.exceptions import (
    CredentialsNotFoundError,
    GoogleAuthError,
    InvalidCredentialsError,
)

__all__ = [
    "GoogleClients",
    "SCOPES",
    "load_credentials",
    "GoogleAuthError",
    "CredentialsNotFoundError",
    "InvalidCredentialsError",
]
