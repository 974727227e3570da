"""Owner identity: lightweight entity IDs and the world singleton."""

from chunkdoc.core.identity.models import EntityId, SystemEntity

__all__ = [
    "EntityId",
    "SystemEntity",
]
