"""Entity allocation service.

EntityAllocator is a stateful service that hands out entity IDs for the
world. Document caches are keyed by the full ID string, generation
included, so a recycled index never resurrects a removed entity's document.
"""

from __future__ import annotations

from chunkdoc.core.identity import EntityId, SystemEntity


class EntityAllocator:
    """Allocates entity IDs with generation tracking for recycling.

    Freed indices are reused with an incremented generation. Allocation
    starts after the reserved system entities.

    Args:
        shard: Shard number for this allocator (default 0 for local).
    """

    def __init__(self, shard: int = 0):
        self._shard = shard
        self._next_index = SystemEntity._RESERVED_COUNT
        self._free_list: list[tuple[int, int]] = []  # (index, generation)
        self._generations: dict[int, int] = {}

    def allocate(self) -> EntityId:
        """Allocate a new entity ID, preferring recycled indices."""
        if self._free_list:
            index, gen = self._free_list.pop()
            return EntityId(shard=self._shard, index=index, generation=gen)

        index = self._next_index
        self._next_index += 1
        self._generations[index] = 0
        return EntityId(shard=self._shard, index=index, generation=0)

    def deallocate(self, entity: EntityId) -> None:
        """Return an entity ID for reuse under the next generation.

        Raises:
            ValueError: If entity is from a different shard or already freed.
        """
        if entity.shard != self._shard:
            raise ValueError(
                f"Cannot deallocate entity from shard {entity.shard} on shard {self._shard}"
            )
        if not self.is_alive(entity):
            raise ValueError(f"Entity {entity} is not alive")

        new_gen = entity.generation + 1
        self._generations[entity.index] = new_gen
        self._free_list.append((entity.index, new_gen))

    def is_alive(self, entity: EntityId) -> bool:
        """Check if entity ID is still valid (not freed or recycled)."""
        if entity.shard != self._shard:
            return False
        return self._generations.get(entity.index, -1) == entity.generation
