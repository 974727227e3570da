"""Chunk property naming.

A value stored under logical key ``key`` occupies raw properties
``key_0, key_1, ..., key_{N-1}``. These helpers build and recognize those
names. The separator is configurable but defaults to ``"_"``.
"""

from __future__ import annotations

import re

DEFAULT_SEPARATOR = "_"


def chunk_name(key: str, index: int, separator: str = DEFAULT_SEPARATOR) -> str:
    """Raw property name for chunk ``index`` of ``key``."""
    if index < 0:
        raise ValueError(f"Chunk index must be non-negative, got {index}")
    return f"{key}{separator}{index}"


def chunk_pattern(key: str, separator: str = DEFAULT_SEPARATOR) -> re.Pattern[str]:
    """Compile a matcher for the chunk names of exactly ``key``.

    Anchored on both ends so key ``"a"`` never matches ``"ab_0"`` and key
    ``"a"`` never matches ``"a_1_0"`` (a chunk of key ``"a_1"``). The key is
    escaped, so keys containing regex metacharacters match literally.

    The index is captured as group 1.
    """
    return re.compile(rf"^{re.escape(key)}{re.escape(separator)}([0-9]+)\Z")


def parse_chunk_name(name: str, separator: str = DEFAULT_SEPARATOR) -> tuple[str, int] | None:
    """Split a raw property name into (logical key, chunk index).

    Splits on the last separator. Returns None when the name has no
    separator or its suffix is not a decimal index, i.e. the property was
    not written by a document.

    Example:
        >>> parse_chunk_name("inventory_12")
        ('inventory', 12)
        >>> parse_chunk_name("player_name_0")
        ('player_name', 0)
        >>> parse_chunk_name("legacy") is None
        True
    """
    key, sep, suffix = name.rpartition(separator)
    if not sep or not suffix.isdigit() or not suffix.isascii():
        return None
    return key, int(suffix)


def chunk_sort_key(name: str, separator: str = DEFAULT_SEPARATOR) -> int:
    """Numeric index of a chunk name, for ordering.

    Plain string sorting puts ``key_10`` before ``key_9``, which would
    corrupt any value of more than ten chunks.
    """
    parsed = parse_chunk_name(name, separator)
    if parsed is None:
        raise ValueError(f"{name!r} is not a chunk property name")
    return parsed[1]
