"""Custom exceptions."""
from typing import Any, Optional
from fastapi import HTTPException, status
from taskboard.localization.helpers import get_translation


class NotFoundError(HTTPException):
    """Resource not found exception (absent or soft-deleted)."""

    def __init__(self, detail: Optional[str] = None, locale: str = "en"):
        if detail is None:
            detail = get_translation("errors.resource_not_found", locale)
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ValidationError(HTTPException):
    """Validation exception.

    ``detail`` may be a message or a list of per-field errors.
    """

    def __init__(self, detail: Optional[Any] = None, locale: str = "en"):
        if detail is None:
            detail = get_translation("errors.validation_error", locale)
        super().__init__(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=detail)


class StoreError(HTTPException):
    """Underlying persistence failure.

    ``operation`` is ``fetch`` or ``write``.
    """

    def __init__(
        self,
        operation: str = "write",
        detail: Optional[str] = None,
        locale: str = "en",
    ):
        if detail is None:
            key = "errors.fetch_failed" if operation == "fetch" else "errors.write_failed"
            detail = get_translation(key, locale)
        super().__init__(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=detail)
        self.operation = operation
