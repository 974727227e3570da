"""World: the host that owns property stores and entity lifecycles.

Usage:
    world = World()

    # World-scoped properties
    world.properties.set_property("motd_0", '"hello"')

    # Entities, each with their own property store
    player = world.spawn()
    player.properties.set_property("hp_0", "20")

    # Removal notifications
    world.entity_removed.subscribe(lambda event: print(event.removed_entity_id))
    world.destroy(player)
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from chunkdoc.core.identity import EntityId, SystemEntity
from chunkdoc.storage.allocator import EntityAllocator
from chunkdoc.storage.local import LocalPropertyStore
from chunkdoc.storage.protocol import DEFAULT_MAX_PROPERTY_SIZE
from chunkdoc.world.entity import Entity
from chunkdoc.world.events import EntityRemovedEvent, EventSignal

logger = logging.getLogger(__name__)


class World:
    """Central owner of world-scoped properties and entities.

    Every store created by a world shares the same max_property_size.

    Args:
        max_property_size: Per-property string length limit (default 32767).
        shard: Shard number for entity allocation (default 0 for local).
    """

    def __init__(self, max_property_size: int = DEFAULT_MAX_PROPERTY_SIZE, shard: int = 0):
        self._max_property_size = max_property_size
        self._properties = LocalPropertyStore(max_property_size)
        self._allocator = EntityAllocator(shard=shard)
        self._entities: dict[EntityId, Entity] = {}
        self.entity_removed: EventSignal[EntityRemovedEvent] = EventSignal("entity_removed")

    @property
    def id(self) -> str:
        """Stable string id of the world singleton."""
        return SystemEntity.WORLD.key

    @property
    def properties(self) -> LocalPropertyStore:
        """World-scoped property store."""
        return self._properties

    @property
    def max_property_size(self) -> int:
        return self._max_property_size

    def spawn(self) -> Entity:
        """Create an entity with an empty property store."""
        entity_id = self._allocator.allocate()
        entity = Entity(self, entity_id, LocalPropertyStore(self._max_property_size))
        self._entities[entity_id] = entity
        return entity

    def destroy(self, entity: Entity | EntityId) -> None:
        """Remove an entity and its properties, then emit ``entity_removed``.

        Args:
            entity: Entity handle or ID to remove.

        Raises:
            ValueError: If the entity does not exist in this world.
        """
        entity_id = entity.entity_id if isinstance(entity, Entity) else entity
        handle = self._entities.pop(entity_id, None)
        if handle is None:
            raise ValueError(f"Entity {entity_id} does not exist")

        handle.properties.clear()
        self._allocator.deallocate(entity_id)
        logger.debug("Destroyed entity %s", entity_id)
        self.entity_removed.emit(EntityRemovedEvent(removed_entity_id=entity_id.key))

    def entity_exists(self, entity: Entity | EntityId) -> bool:
        entity_id = entity.entity_id if isinstance(entity, Entity) else entity
        return entity_id in self._entities

    def get_entity(self, entity_id: EntityId | str) -> Entity | None:
        """Look up a live entity by ID or stable string id."""
        if isinstance(entity_id, str):
            entity_id = EntityId.parse(entity_id)
        return self._entities.get(entity_id)

    def entities(self) -> Iterator[Entity]:
        """Iterate all live entities in spawn order."""
        yield from list(self._entities.values())

    def __len__(self) -> int:
        return len(self._entities)

    def __repr__(self) -> str:
        return f"World(entities={len(self._entities)})"
