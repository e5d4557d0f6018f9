"""
Exception hierarchy for the directory service.

Each exception carries the HTTP status the API layer answers with. Request
shape errors are not part of this hierarchy: they surface as FastAPI's
``RequestValidationError`` and are rendered by the handler in ``main``.
"""

from typing import Any, Optional


class DirectoryError(Exception):
    """Base exception for all directory errors."""

    status_code: int = 500

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class Unauthenticated(DirectoryError):
    """No valid caller identity. The client should authenticate again."""

    status_code = 401

    def __init__(self, message: str = "Not authenticated", details: Optional[dict[str, Any]] = None):
        super().__init__(message, details)


class Forbidden(DirectoryError):
    """Caller is authenticated but does not own the target record."""

    status_code = 403


class NotFound(DirectoryError):
    """The requested record does not exist."""

    status_code = 404

    def __init__(self, resource: str, identifier: Any):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found", {"id": identifier})


class StoreFailure(DirectoryError):
    """
    The database rejected or failed an operation.

    Retryable by the client. The public message is generic; the original
    exception is kept as ``__cause__`` for the logs only.
    """

    status_code = 500

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Failed to {operation}")


class Conflict(DirectoryError):
    """The request clashes with an existing record. Not retryable as sent."""

    status_code = 409
