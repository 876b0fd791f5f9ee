"""
Application error taxonomy.
Services raise these; handlers in app.main turn them into JSON responses.
"""

from fastapi import status


class AppError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail: str = "Server Error"

    def __init__(self, detail: str | None = None, status_code: int | None = None):
        if detail is not None:
            self.detail = detail
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.detail)


class ConflictError(AppError):
    """Duplicate business key (client name, email, gstin...)."""

    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Resource already exists"


class NotFoundError(AppError):
    """Parent or sub-entity identity does not resolve."""

    status_code = status.HTTP_404_NOT_FOUND
    detail = "Resource not found"


class StoreError(AppError):
    """Persistence failure. Details are logged, never returned."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Server Error"
