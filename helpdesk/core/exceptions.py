"""Errors raised by the service layer.

All of them are ``HTTPException`` subclasses, so the application's
exception handlers render them as ``{"detail": ...}`` with the right status.
"""

from __future__ import annotations

from fastapi import HTTPException, status


class InvalidInputError(HTTPException):
    """A required field is missing or a value is not acceptable."""

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class NotFoundError(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DuplicateEmailError(HTTPException):
    def __init__(self, detail: str = "Email already exists"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class UploadRejectedError(HTTPException):
    """Uploaded file violates the size cap or the MIME allow-list."""

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
