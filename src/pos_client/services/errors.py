"""Errors raised by the API access layer."""

from __future__ import annotations

from typing import Optional


class ApiError(Exception):
    """A request against a backend collection failed.

    Attributes:
        table: Collection name the request addressed.
        operation: "fetch", "save", "update" or "delete".
        status: HTTP status code, or None for transport failures.
        message: Human-readable cause.
    """

    operation = "request"

    def __init__(self, table: str, status: Optional[int] = None, message: str = "") -> None:
        self.table = table
        self.status = status
        self.message = message
        super().__init__(str(self))

    def __str__(self) -> str:
        cause = f"HTTP {self.status}" if self.status is not None else "request failed"
        if self.message:
            cause = f"{cause}: {self.message}"
        return f"{self.operation} {self.table}: {cause}"


class FetchError(ApiError):
    """Reading a collection failed (non-2xx status or transport error)."""

    operation = "fetch"


class SaveError(ApiError):
    """A bulk save failed after exhausting its retries."""

    operation = "save"


class UpdateError(ApiError):
    operation = "update"


class DeleteError(ApiError):
    operation = "delete"
