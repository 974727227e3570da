"""Property store protocol: the raw key/value layer documents are built on.

A property store maps string names to small scalar values and enforces a
maximum length per string value. Hosts provide one per owner (the world and
each entity). Documents never assume more than this interface.

Usage:
    store = LocalPropertyStore(max_property_size=32767)
    store.set_property("score_0", "42")
    store.get_property("score_0")  # "42"
    store.set_property("score_0", None)  # deletes
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, runtime_checkable

PropertyValue = str | int | float | bool
"""Raw values a property store can hold. Documents only ever write str."""

DEFAULT_MAX_PROPERTY_SIZE = 32767
"""Per-property string length limit of the reference host."""


@runtime_checkable
class PropertyStore(Protocol):
    """Abstract property storage. Implementations hold the actual data."""

    @property
    def max_property_size(self) -> int:
        """Maximum length of a single string property value."""
        ...

    def set_property(self, name: str, value: PropertyValue | None) -> None:
        """Set a property. ``None`` deletes it."""
        ...

    def get_property(self, name: str) -> PropertyValue | None:
        """Get a property value, or None if not set."""
        ...

    def property_names(self) -> Iterator[str]:
        """Iterate the names of all properties currently set."""
        ...


@runtime_checkable
class PropertyOwner(Protocol):
    """Anything that owns a property store (the world or an entity)."""

    @property
    def properties(self) -> PropertyStore:
        """The owner's property store."""
        ...
