# ecwid_catalog/core/errors.py
from __future__ import annotations
from typing import Optional

"""
Error hierarchy for the Ecwid catalog client.

    EcwidError
    ├── TransportError        network failure or unexpected HTTP status
    │   ├── NotFoundError     404, resource id absent
    │   │   └── UpdateCountError   update touched no rows
    │   └── ValidationError   400/409/422, payload rejected by the server
    ├── DecodeError           body is not the JSON we expect
    ├── PaginationError       server paging metadata cannot advance
    └── CancellationError     consumer stopped a stream
"""


class EcwidError(Exception):
    """Root of every error raised by this package."""


class TransportError(EcwidError):
    """
    The request did not produce a usable 2xx response.
    status_code is None when no response was received at all.
    """
    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        body: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.body = body

    def __str__(self) -> str:
        parts = [self.message]
        if self.status_code is not None:
            parts.append(f"status={self.status_code}")
        if self.error_code:
            parts.append(f"code={self.error_code}")
        return " ".join(parts)


class NotFoundError(TransportError):
    pass


class UpdateCountError(NotFoundError):
    """Server accepted the update but reported zero updated rows."""
    def __init__(self, message: str, *, update_count: int = 0, **kwargs):
        super().__init__(message, **kwargs)
        self.update_count = update_count


class ValidationError(TransportError):
    pass


class DecodeError(EcwidError):
    pass


class PaginationError(EcwidError):
    pass


class CancellationError(EcwidError):
    def __init__(self, message: str = "stream cancelled"):
        super().__init__(message)
