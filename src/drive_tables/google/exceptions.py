"""Google credential exceptions."""


class GoogleAuthError(Exception):
    """Base exception for Google credential errors."""

    pass


class CredentialsNotFoundError(GoogleAuthError):
    """Raised when the credentials file is not found."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(
            f"Credentials file not found at {path}. "
            "Provide a service account key or an authorized user token file."
        )


class InvalidCredentialsError(GoogleAuthError):
    """Raised when a credentials file has an unsupported format."""

    pass
