"""Pure functions for splitting encoded values into chunks and back.

These are stateless and perform no I/O, so they can be tested without a
property store. The default JSON codec lives here as well.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from typing import Any


def _check_chunk_size(max_chunk_size: int) -> None:
    if isinstance(max_chunk_size, bool) or not isinstance(max_chunk_size, int):
        raise TypeError(f"max_chunk_size must be an int, got {type(max_chunk_size).__name__}")
    if max_chunk_size < 1:
        raise ValueError(f"max_chunk_size must be at least 1, got {max_chunk_size}")


def iter_chunks(value: str, max_chunk_size: int) -> Iterator[str]:
    """Lazily slice a string into consecutive chunks.

    Validation happens on the first ``next()``, like any generator.

    Args:
        value: Encoded value to slice.
        max_chunk_size: Maximum length of each chunk.

    Yields:
        Non-overlapping slices of ``value`` in original order, each at most
        ``max_chunk_size`` long. An empty ``value`` yields nothing.

    Raises:
        TypeError: If value is not a str.
        ValueError: If max_chunk_size is less than 1.
    """
    if not isinstance(value, str):
        raise TypeError(f"Can only split str values, got {type(value).__name__}")
    _check_chunk_size(max_chunk_size)

    for start in range(0, len(value), max_chunk_size):
        yield value[start : start + max_chunk_size]


def split(value: str, max_chunk_size: int) -> list[str]:
    """Split a string into an ordered list of bounded-size chunks.

    Example:
        >>> split("0123456789ABCDE", 10)
        ['0123456789', 'ABCDE']
        >>> split("", 10)
        []
    """
    return list(iter_chunks(value, max_chunk_size))


def join(chunks: Iterable[str]) -> str:
    """Concatenate chunks in the given order.

    Inverse of ``split``: ``join(split(v, n)) == v`` for every n >= 1.
    """
    return "".join(chunks)


def chunk_count(length: int, max_chunk_size: int) -> int:
    """Number of chunks ``split`` produces for a value of the given length."""
    _check_chunk_size(max_chunk_size)
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    return -(-length // max_chunk_size)


# Default codec


def encode_json(value: Any, key: str) -> str:
    """Encode a value as compact JSON.

    NaN and infinities are rejected since they are not valid JSON and other
    readers of the raw store could not parse them.
    """
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"), allow_nan=False)


def decode_json(encoded: str, key: str) -> Any:
    """Parse a JSON string produced by ``encode_json`` (or any JSON text)."""
    return json.loads(encoded)
