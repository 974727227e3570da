"""World state and entity lifecycle.

Architecture Note:
    world/ plays the host: it owns property stores, spawns and removes
    entities, and announces removals. Documents only depend on it through
    the ``PropertyOwner`` protocol and the ``entity_removed`` signal.
"""

from chunkdoc.world.entity import Entity
from chunkdoc.world.events import EntityRemovedEvent, EventSignal
from chunkdoc.world.world import World

__all__ = [
    "World",
    "Entity",
    "EntityRemovedEvent",
    "EventSignal",
]
