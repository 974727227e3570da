"""Owner identity models.

Usage:
    entity = EntityId(shard=0, index=42, generation=1)
    entity.key  # "0:42:1"
    EntityId.parse("0:42:1") == entity
    world = SystemEntity.WORLD
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EntityId:
    """Lightweight entity identifier with generation for safe handle reuse.

    The string form (``key``) is the stable id documents are cached under.
    Because the generation is part of it, a recycled index never maps back
    to the document of the entity that previously held it.
    """

    shard: int = 0  # 0 = local, >0 = remote shard
    index: int = 0
    generation: int = 0

    def __hash__(self) -> int:
        return hash((self.shard, self.index, self.generation))

    def __str__(self) -> str:
        return self.key

    @property
    def key(self) -> str:
        """Stable string id, ``"shard:index:generation"``."""
        return f"{self.shard}:{self.index}:{self.generation}"

    @classmethod
    def parse(cls, key: str) -> EntityId:
        """Inverse of ``key``.

        Raises:
            ValueError: If key is not three colon-separated integers.
        """
        parts = key.split(":")
        if len(parts) != 3:
            raise ValueError(f"Malformed entity id {key!r}")
        shard, index, generation = (int(part) for part in parts)
        return cls(shard=shard, index=index, generation=generation)

    def is_local(self) -> bool:
        """Check if this entity belongs to the local shard."""
        return self.shard == 0


class SystemEntity:
    """Reserved entity IDs for singletons. Always on shard 0."""

    WORLD = EntityId(shard=0, index=0, generation=0)

    _RESERVED_COUNT = 1000  # First 1000 indices reserved
