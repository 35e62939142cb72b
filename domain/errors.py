"""
Domain: error taxonomy for the transaction engine.

- DataUnavailable: the Record Store could not be reached or timed out.
  Recoverable; callers may retry.
- InvalidPage: the caller asked for page < 1 or page_size < 1. Not retried.
- InvalidMonth: the caller asked for a month outside 1..12.

An empty result set is never an error.
"""

from __future__ import annotations

from typing import Optional


class TransactionEngineError(Exception):
    """Base class for errors raised by the transaction engine."""
    pass


class DataUnavailable(TransactionEngineError):
    """Raised when the Record Store is unreachable or timed out."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(message)


class InvalidPage(TransactionEngineError):
    """Raised when a page request is out of range (page < 1 or page_size < 1)."""

    def __init__(self, page: int, page_size: int):
        self.page = page
        self.page_size = page_size
        super().__init__(
            f"Invalid page request: page={page}, page_size={page_size}. "
            "Both must be >= 1"
        )


class InvalidMonth(TransactionEngineError, ValueError):
    """Raised when a month is not in 1..12 (and is not the all-months sentinel)."""

    def __init__(self, month: object):
        self.month = month
        super().__init__(f"month must be an integer in 1..12, got {month!r}")


__all__ = [
    "TransactionEngineError",
    "DataUnavailable",
    "InvalidPage",
    "InvalidMonth",
]
