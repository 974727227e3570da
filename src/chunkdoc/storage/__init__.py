"""Property storage backends."""

from chunkdoc.storage.allocator import EntityAllocator
from chunkdoc.storage.local import LocalPropertyStore
from chunkdoc.storage.protocol import (
    DEFAULT_MAX_PROPERTY_SIZE,
    PropertyOwner,
    PropertyStore,
    PropertyValue,
)

__all__ = [
    "PropertyStore",
    "PropertyOwner",
    "PropertyValue",
    "DEFAULT_MAX_PROPERTY_SIZE",
    "LocalPropertyStore",
    "EntityAllocator",
]
