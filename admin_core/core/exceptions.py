"""
Core Exceptions

Error taxonomy shared by the SDK and the editor sessions.
Every failure is terminal for the attempt that raised it; callers keep
their last-known-good state and may retry.
"""

from typing import Any


class AdminError(Exception):
    """Base class for all spaces-admin errors."""

    def __init__(self, message: str = "Request failed"):
        self.message = message
        super().__init__(self.message)


class TransportError(AdminError):
    """
    Raised when the request never produced a response.

    Wraps httpx transport failures (connection refused, DNS, reset).
    """


class ApiError(AdminError):
    """
    Raised for non-2xx responses.

    The message is the backend's ``{"error": "..."}`` text when the body
    can be parsed, otherwise a generic fallback.
    """

    def __init__(
        self,
        status_code: int,
        message: str = "Request failed",
        payload: Any = None,
    ):
        self.status_code = status_code
        self.payload = payload
        super().__init__(message)

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


class ClientValidationError(AdminError):
    """
    Raised when local validation blocks an action.

    No network call is issued when this is raised.
    """

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


class InvalidImportError(AdminError):
    """Raised when an imported file is not valid JSON."""

    def __init__(self, message: str = "Invalid JSON"):
        super().__init__(message)


class SchemaImportError(AdminError):
    """Raised when an imported JSON document does not match the branding schema."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        self.errors = errors or []
        super().__init__(message)


class SaveInProgressError(AdminError):
    """Raised when Save is triggered while a previous Save is still in flight."""

    def __init__(self, message: str = "A save is already in progress"):
        super().__init__(message)


class InvalidResponseError(AdminError):
    """
    Raised when a successful response does not carry the expected document.

    Typically an HTML page served by a proxy or login redirect in place of
    the JSON object.
    """

    def __init__(self, message: str = "Unexpected response from server", payload: Any = None):
        self.payload = payload
        super().__init__(message)
