"""chunkdoc: chunked key/value documents on size-limited property stores.

Usage:
    from chunkdoc import DocumentRegistry, World

    world = World()
    registry = DocumentRegistry(world)

    player = world.spawn()
    doc = registry.document_for(player)
    doc.set("journal", ["entry"] * 10_000)  # split over as many properties as needed
    doc.get("journal")

    world.destroy(player)  # the player's document is evicted
"""

__version__ = "0.1.0"

# Configuration
from chunkdoc.config import DocumentSettings

# Core primitives
from chunkdoc.core import (
    JSON_CODEC,
    Codec,
    EntityId,
    SystemEntity,
    join,
    model_codec,
    split,
)

# Documents
from chunkdoc.document import (
    DecodeError,
    Document,
    DocumentError,
    DocumentRegistry,
    EncodeError,
    SizeError,
)

# Storage
from chunkdoc.storage import (
    LocalPropertyStore,
    PropertyOwner,
    PropertyStore,
)

# World
from chunkdoc.world import (
    Entity,
    EntityRemovedEvent,
    EventSignal,
    World,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "EntityId",
    "SystemEntity",
    "Codec",
    "JSON_CODEC",
    "model_codec",
    "split",
    "join",
    # Documents
    "Document",
    "DocumentRegistry",
    "DocumentError",
    "EncodeError",
    "DecodeError",
    "SizeError",
    # Storage
    "PropertyStore",
    "PropertyOwner",
    "LocalPropertyStore",
    # World
    "World",
    "Entity",
    "EntityRemovedEvent",
    "EventSignal",
    # Config
    "DocumentSettings",
]
