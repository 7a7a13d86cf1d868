"""Errors raised by the task store client.

Each operation has its own error type so callers can tell a failed list
apart from a failed create. The original transport, decode or validation
failure is kept as ``cause`` (and chained as ``__cause__``).
"""

from __future__ import annotations

from typing import Optional


class TaskStoreError(Exception):
    """Base class for every failure talking to the remote task store."""

    operation = "request"

    def __init__(
        self,
        message: str,
        *,
        cause: Optional[BaseException] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.cause = cause
        self.status_code = status_code

    def __str__(self) -> str:
        base = super().__str__()
        if self.status_code is not None:
            return f"{base} (HTTP {self.status_code})"
        return base


class FetchError(TaskStoreError):
    """Listing tasks failed."""

    operation = "list"


class CreateError(TaskStoreError):
    """Creating a task failed."""

    operation = "create"


class UpdateError(TaskStoreError):
    """Toggling a task failed, or the store does not know the id."""

    operation = "toggle"


class DeleteError(TaskStoreError):
    """Deleting a task failed, or the store does not know the id."""

    operation = "delete"
