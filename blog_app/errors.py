"""
Store-level exceptions for the Blog List API.

Stores raise these; the API blueprint turns each one into a JSON
``{"error": "..."}`` body with the status code carried by the exception.
"""

from __future__ import annotations


class StoreError(Exception):
    """Base class for errors raised by the blog and user stores."""

    status_code: int = 400

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(StoreError):
    """A required field is missing or a field has the wrong type."""

    status_code = 400


class ConflictError(StoreError):
    """A unique field collides with an existing record."""

    # Duplicate usernames are reported as 400, not 409
    status_code = 400


class NotFoundError(StoreError):
    """No record matches the requested id."""

    status_code = 404
