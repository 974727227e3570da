"""Document error types.

All document failures derive from DocumentError so callers can catch them
together. Errors are raised synchronously and never retried internally.
"""

from __future__ import annotations


class DocumentError(Exception):
    """Base class for document read and write failures."""

    def __init__(self, message: str, key: str | None = None):
        super().__init__(message)
        self.key = key


class EncodeError(DocumentError):
    """Encoder failed or did not produce a str. Nothing was written."""


class DecodeError(DocumentError):
    """A chunk held a non-str value, or decoding the joined value failed."""


class SizeError(DocumentError):
    """Encoded value exceeds the property size limit while chunking is disabled."""

    def __init__(self, message: str, key: str | None = None, size: int = 0, limit: int = 0):
        super().__init__(message, key)
        self.size = size
        self.limit = limit
