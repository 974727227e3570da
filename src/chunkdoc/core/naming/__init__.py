"""Chunk property naming: building, matching, and ordering chunk names."""

from chunkdoc.core.naming.operations import (
    DEFAULT_SEPARATOR,
    chunk_name,
    chunk_pattern,
    chunk_sort_key,
    parse_chunk_name,
)

__all__ = [
    "DEFAULT_SEPARATOR",
    "chunk_name",
    "chunk_pattern",
    "chunk_sort_key",
    "parse_chunk_name",
]
