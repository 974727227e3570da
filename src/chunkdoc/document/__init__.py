"""Chunked documents and the per-owner document registry."""

from chunkdoc.document.document import Document
from chunkdoc.document.errors import DecodeError, DocumentError, EncodeError, SizeError
from chunkdoc.document.registry import DocumentRegistry

__all__ = [
    "Document",
    "DocumentRegistry",
    "DocumentError",
    "EncodeError",
    "DecodeError",
    "SizeError",
]
