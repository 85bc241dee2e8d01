"""Error taxonomy shared by the record store, providers and HTTP layer.

Every error carries the HTTP status it maps to and a client-safe message.
The API converts them to ``{"error": <label>, "message": <message>}``.
"""

from typing import Any


class InspirationError(Exception):
    """Base class for all application errors"""

    status_code: int = 500
    error: str = "Internal Server Error"

    def __init__(self, message: str = "An unexpected error occurred"):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.error, "message": self.message}


class ValidationError(InspirationError):
    """Bad or missing input"""

    status_code = 400
    error = "Bad Request"

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.errors = errors or [message]


class NotFoundError(InspirationError):
    """Unknown record id"""

    status_code = 404
    error = "Not Found"


class ServiceUnavailableError(InspirationError):
    """Backing store unreachable or not configured"""

    status_code = 503
    error = "Service Unavailable"


class UpstreamError(InspirationError):
    """Enrichment call failed.

    Never surfaced to clients: the enrichment client converts it to
    fallback content.
    """

    status_code = 502
    error = "Bad Gateway"


class InternalError(InspirationError):
    """Anything unexpected; carries a generic message only"""
