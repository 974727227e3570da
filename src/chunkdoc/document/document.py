"""Document: chunked key/value storage on top of an owner's property store.

Values are encoded to strings (JSON by default), split into chunks no
longer than the store's property size limit, and written as properties
``key_0 .. key_{N-1}``. Reads collect the chunks of a key, order them by
index, join and decode.

Usage:
    registry = DocumentRegistry(world)
    doc = registry.document_for(player)

    doc.set("inventory", {"sword": 1, "arrows": 64})
    doc.get("inventory")  # {"sword": 1, "arrows": 64}
    "inventory" in doc  # True
    doc.delete("inventory")

    for key, value in doc.entries():
        ...
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any, Generic, TypeVar, cast

from chunkdoc.config import DocumentSettings
from chunkdoc.core.codec import Decoder, Encoder, decode_json, encode_json, iter_chunks
from chunkdoc.core.naming import chunk_name, chunk_pattern, chunk_sort_key, parse_chunk_name
from chunkdoc.document.errors import DecodeError, DocumentError, EncodeError, SizeError
from chunkdoc.storage.protocol import PropertyOwner, PropertyStore

if TYPE_CHECKING:
    from chunkdoc.document.registry import DocumentRegistry

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MISSING: Any = object()


class Document(Generic[T]):
    """Per-owner view of chunked key/value data.

    Prefer ``DocumentRegistry.document_for`` (or ``Document.from_owner``)
    over constructing documents directly: the registry guarantees one
    document per owner.

    All operations on one document are serialized by a reentrant lock.
    Enumeration (``keys``/``values``/``entries``) is lazy and reads the
    store as elements are produced.

    Args:
        owner: World or entity whose properties hold the document.
        settings: Chunk size, separator and chunking switch.
    """

    def __init__(self, owner: PropertyOwner, settings: DocumentSettings | None = None):
        self._owner = owner
        self._settings = settings or DocumentSettings()
        self._lock = threading.RLock()

    @classmethod
    def from_owner(cls, owner: PropertyOwner, registry: DocumentRegistry) -> Document[Any]:
        """Get the document for a world or entity, creating it if needed."""
        return registry.document_for(owner)

    @property
    def owner(self) -> PropertyOwner:
        """The world or entity whose properties are being accessed."""
        return self._owner

    @property
    def settings(self) -> DocumentSettings:
        return self._settings

    @property
    def max_chunk_size(self) -> int:
        """Effective chunk length: the smaller of the configured and store limits."""
        return min(self._settings.max_property_size, self._store.max_property_size)

    @property
    def _store(self) -> PropertyStore:
        return self._owner.properties

    # Raw chunk access

    def chunk_names(self, key: str) -> list[str]:
        """Raw property names holding ``key``, in chunk index order."""
        _check_key(key)
        separator = self._settings.separator
        pattern = chunk_pattern(key, separator)
        with self._lock:
            names = [name for name in self._store.property_names() if pattern.match(name)]
        return sorted(names, key=lambda name: chunk_sort_key(name, separator))

    def _get_encoded(self, key: str) -> str | None:
        with self._lock:
            names = self.chunk_names(key)
            if not names:
                return None

            chunks: list[str] = []
            for name in names:
                raw = self._store.get_property(name)
                if not isinstance(raw, str):
                    raise DecodeError(
                        f"Expected a str value in property {name!r}, got {type(raw).__name__}",
                        key,
                    )
                chunks.append(raw)
            return "".join(chunks)

    def _set_encoded(self, key: str, encoded: str) -> int:
        limit = self.max_chunk_size
        if not self._settings.chunking and len(encoded) > limit:
            raise SizeError(
                f"Encoded value for {key!r} is {len(encoded)} characters long, "
                f"limit is {limit} and chunking is disabled",
                key,
                size=len(encoded),
                limit=limit,
            )

        with self._lock:
            # Old chunks go first; a shorter value would otherwise leave the
            # tail of the previous one behind.
            self._delete_chunks(key)
            count = 0
            for index, chunk in enumerate(iter_chunks(encoded, limit)):
                self._store.set_property(chunk_name(key, index, self._settings.separator), chunk)
                count += 1
        logger.debug("Wrote %r as %d chunk(s) of at most %d", key, count, limit)
        return count

    def _delete_chunks(self, key: str) -> int:
        with self._lock:
            names = self.chunk_names(key)
            for name in names:
                self._store.set_property(name, None)
        return len(names)

    # Public interface

    def _read(self, key: str, decoder: Decoder | None) -> Any:
        encoded = self._get_encoded(key)
        if encoded is None:
            return _MISSING
        decode = decoder or decode_json
        try:
            return decode(encoded, key)
        except Exception as e:
            raise DecodeError(f"Could not decode value of {key!r}: {e}", key) from e

    def get(self, key: str, decoder: Decoder | None = None, *, default: Any = None) -> T | Any:
        """Return the value stored under a key.

        Args:
            key: Logical key.
            decoder: ``(encoded, key) -> value``. Defaults to JSON.
            default: Returned when the key has no chunks.

        Returns:
            Decoded value, or ``default`` if absent.

        Raises:
            DecodeError: If a chunk is not a str or decoding fails.
        """
        value = self._read(key, decoder)
        return default if value is _MISSING else cast(T, value)

    def set(self, key: str, value: T, encoder: Encoder | None = None) -> None:
        """Store a value under a key, replacing every chunk of the old value.

        An empty encoded value writes no chunks, so afterwards the key reads
        as absent.

        Args:
            key: Logical key.
            value: Value to store.
            encoder: ``(value, key) -> str``. Defaults to JSON.

        Raises:
            EncodeError: If encoding fails or does not produce a str.
            SizeError: If chunking is disabled and the value is too long.
        """
        _check_key(key)
        encode = encoder or encode_json
        try:
            encoded = encode(value, key)
        except Exception as e:
            raise EncodeError(f"Could not encode value of {key!r}: {e}", key) from e

        if not isinstance(encoded, str):
            raise EncodeError(
                f"The encoded value must be a str, got {type(encoded).__name__}", key
            )

        self._set_encoded(key, encoded)

    def has(self, key: str) -> bool:
        """Check whether a key holds a value that decodes with the default decoder.

        Absent and unreadable keys both return False.
        """
        try:
            return self._read(key, None) is not _MISSING
        except DocumentError:
            return False

    def delete(self, key: str) -> int:
        """Remove a key and all of its chunks.

        Returns:
            Number of chunk properties removed (0 if the key was absent).
        """
        removed = self._delete_chunks(key)
        if removed:
            logger.debug("Deleted %r (%d chunk(s))", key, removed)
        return removed

    def keys(self) -> Iterator[str]:
        """Yield every logical key once, in store enumeration order.

        Properties whose names do not end in ``<separator><index>`` are not
        part of any document and are skipped.
        """
        separator = self._settings.separator
        seen: set[str] = set()
        with self._lock:
            names = list(self._store.property_names())
        for name in names:
            parsed = parse_chunk_name(name, separator)
            if parsed is None:
                continue
            key = parsed[0]
            if key in seen:
                continue
            seen.add(key)
            yield key

    def values(self) -> Iterator[T | None]:
        """Yield the value of every key, read when each element is produced."""
        for key in self.keys():
            yield self.get(key)

    def entries(self) -> Iterator[tuple[str, T | None]]:
        """Yield ``(key, value)`` pairs, read when each element is produced."""
        for key in self.keys():
            yield key, self.get(key)

    def clear(self) -> int:
        """Delete every key. Returns the number of keys removed."""
        with self._lock:
            keys = list(self.keys())
            for key in keys:
                self._delete_chunks(key)
        return len(keys)

    # Mapping-style access

    def __getitem__(self, key: str) -> T:
        value = self._read(key, None)
        if value is _MISSING:
            raise KeyError(key)
        return cast(T, value)

    def __setitem__(self, key: str, value: T) -> None:
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        if not self.delete(key):
            raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    def __iter__(self) -> Iterator[str]:
        return self.keys()

    def __repr__(self) -> str:
        return f"Document(owner={self._owner!r})"


def _check_key(key: object) -> None:
    if not isinstance(key, str):
        raise TypeError(f"Document keys must be str, got {type(key).__name__}")
