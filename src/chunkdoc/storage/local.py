"""Local in-memory property store.

Simple dict-based storage suitable for single-process use and testing.
Enforces the same per-property size limit a real host would, so chunking
behaviour can be exercised with small limits.

Usage:
    store = LocalPropertyStore(max_property_size=10)
    store.set_property("k_0", "0123456789")
    store.set_property("k_1", "0123456789A")  # ValueError: too long
"""

from __future__ import annotations

import copy as cp
from collections.abc import Iterator

from chunkdoc.storage.protocol import DEFAULT_MAX_PROPERTY_SIZE, PropertyValue

_VALUE_TYPES = (str, int, float, bool)


class LocalPropertyStore:
    """In-memory property store backed by an insertion-ordered dict.

    Structure:
        _properties[name] = value

    Enumeration order is insertion order. Overwriting an existing name keeps
    its position; deleting and re-setting moves it to the end.

    Args:
        max_property_size: Maximum length of a string value (default 32767).
    """

    def __init__(self, max_property_size: int = DEFAULT_MAX_PROPERTY_SIZE):
        """Initialize an empty store.

        Args:
            max_property_size: Maximum length of a string value.

        Raises:
            ValueError: If max_property_size is less than 1.
        """
        if max_property_size < 1:
            raise ValueError(f"max_property_size must be at least 1, got {max_property_size}")
        self._max_property_size = max_property_size
        self._properties: dict[str, PropertyValue] = {}

    @property
    def max_property_size(self) -> int:
        """Maximum length of a single string property value."""
        return self._max_property_size

    def set_property(self, name: str, value: PropertyValue | None) -> None:
        """Set or delete a property.

        Args:
            name: Property name.
            value: New value, or None to delete the property.

        Raises:
            TypeError: If name is not a str or value is not a supported type.
            ValueError: If a str value exceeds max_property_size.
        """
        if not isinstance(name, str):
            raise TypeError(f"Property name must be a str, got {type(name).__name__}")
        if value is None:
            self._properties.pop(name, None)
            return
        if not isinstance(value, _VALUE_TYPES):
            raise TypeError(f"Unsupported property value type {type(value).__name__}")
        if isinstance(value, str) and len(value) > self._max_property_size:
            raise ValueError(
                f"Property {name!r} is {len(value)} characters long, "
                f"limit is {self._max_property_size}"
            )
        self._properties[name] = value

    def get_property(self, name: str) -> PropertyValue | None:
        """Get a property value, or None if not set."""
        return self._properties.get(name)

    def property_names(self) -> Iterator[str]:
        """Iterate property names in insertion order.

        Iterates over a copy so callers may set or delete properties while
        iterating.
        """
        yield from list(self._properties)

    def clear(self) -> None:
        """Remove every property."""
        self._properties.clear()

    def __len__(self) -> int:
        return len(self._properties)

    def __contains__(self, name: object) -> bool:
        return name in self._properties

    def snapshot(self) -> dict[str, PropertyValue]:
        """Copy of the raw property mapping, for inspection and tests."""
        return cp.copy(self._properties)

    def restore(self, data: dict[str, PropertyValue]) -> None:
        """Replace all properties with a previous snapshot.

        Values are validated like ``set_property``.
        """
        self._properties = {}
        for name, value in data.items():
            self.set_property(name, value)
