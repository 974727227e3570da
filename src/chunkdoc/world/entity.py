"""Entity handle: an owner of properties inside a world."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chunkdoc.core.identity import EntityId
from chunkdoc.storage.local import LocalPropertyStore

if TYPE_CHECKING:
    from chunkdoc.world.world import World


class Entity:
    """Handle to a spawned entity and its property store.

    Handles are created by ``World.spawn`` and stay usable as identities
    after removal, but their properties are gone with them.
    """

    __slots__ = ("_world", "_entity_id", "_properties")

    def __init__(self, world: World, entity_id: EntityId, properties: LocalPropertyStore):
        self._world = world
        self._entity_id = entity_id
        self._properties = properties

    @property
    def id(self) -> str:
        """Stable string id (``"shard:index:generation"``)."""
        return self._entity_id.key

    @property
    def entity_id(self) -> EntityId:
        return self._entity_id

    @property
    def world(self) -> World:
        return self._world

    @property
    def properties(self) -> LocalPropertyStore:
        return self._properties

    def is_valid(self) -> bool:
        """Check whether the entity is still part of its world."""
        return self._world.entity_exists(self._entity_id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self._world is other._world and self._entity_id == other._entity_id

    def __hash__(self) -> int:
        return hash((id(self._world), self._entity_id))

    def __repr__(self) -> str:
        return f"Entity({self.id!r})"
