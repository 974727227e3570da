"""DocumentRegistry: one document per owner, evicted when its entity goes away.

The registry replaces a process-wide cache with an explicit object. Create
one per world at startup and pass it wherever documents are needed. It
subscribes to the world's ``entity_removed`` signal so entity documents
never outlive their entity.

Usage:
    with DocumentRegistry(world) as registry:
        world_doc = registry.world_document
        player_doc = registry.document_for(player)
        assert registry.document_for(player) is player_doc

        world.destroy(player)  # evicts player_doc
"""

from __future__ import annotations

import logging
import threading
from types import TracebackType
from typing import Any

from chunkdoc.config import DocumentSettings
from chunkdoc.document.document import Document
from chunkdoc.world.entity import Entity
from chunkdoc.world.events import EntityRemovedEvent
from chunkdoc.world.world import World

logger = logging.getLogger(__name__)


class DocumentRegistry:
    """Cache of documents keyed by owner identity.

    Invariants:
        - The world document is created once, on first access, and never evicted.
        - Each live entity id maps to at most one document.
        - An entity's entry is removed as soon as the world reports its removal.

    A single lock guards the mapping; documents carry their own locks.

    Args:
        world: World whose entities' documents are cached.
        settings: Settings passed to every document created here.
    """

    def __init__(self, world: World, settings: DocumentSettings | None = None):
        self._world = world
        self._settings = settings or DocumentSettings()
        self._lock = threading.Lock()
        self._documents: dict[str, Document[Any]] = {}
        self._world_document: Document[Any] | None = None
        self._closed = False
        world.entity_removed.subscribe(self._on_entity_removed)

    @property
    def world(self) -> World:
        return self._world

    @property
    def settings(self) -> DocumentSettings:
        return self._settings

    @property
    def world_document(self) -> Document[Any]:
        """The world's document, created on first access."""
        with self._lock:
            if self._world_document is None:
                self._world_document = Document(self._world, self._settings)
            return self._world_document

    def document_for(self, owner: World | Entity) -> Document[Any]:
        """Get the document for a world or entity, creating it if needed.

        Args:
            owner: This registry's world, or a live entity in it.

        Returns:
            The cached document for the owner.

        Raises:
            ValueError: If the owner belongs to a different world, or the
                entity has already been removed.
            TypeError: If owner is neither a World nor an Entity.
        """
        if isinstance(owner, World):
            if owner is not self._world:
                raise ValueError("Owner belongs to a different world")
            return self.world_document

        if not isinstance(owner, Entity):
            raise TypeError(f"Expected a World or Entity, got {type(owner).__name__}")
        if owner.world is not self._world:
            raise ValueError(f"Entity {owner.id} belongs to a different world")
        # A removed entity will never emit another removal, so caching it would leak.
        if not owner.is_valid():
            raise ValueError(f"Entity {owner.id} has been removed")

        with self._lock:
            self._check_open()
            document = self._documents.get(owner.id)
            if document is None:
                document = Document(owner, self._settings)
                self._documents[owner.id] = document
            return document

    def evict(self, entity_id: str) -> bool:
        """Drop a cached entity document. Returns True if one was cached."""
        with self._lock:
            removed = self._documents.pop(entity_id, None) is not None
        if removed:
            logger.debug("Evicted document for entity %s", entity_id)
        return removed

    def _on_entity_removed(self, event: EntityRemovedEvent) -> None:
        self.evict(event.removed_entity_id)

    def _check_open(self) -> None:
        if self._closed:
            raise RuntimeError("DocumentRegistry is closed")

    def close(self) -> None:
        """Unsubscribe from the world and forget every cached document."""
        if self._closed:
            return
        self._world.entity_removed.unsubscribe(self._on_entity_removed)
        with self._lock:
            self._closed = True
            self._documents.clear()

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> DocumentRegistry:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __len__(self) -> int:
        """Number of cached entity documents (the world document is not counted)."""
        with self._lock:
            return len(self._documents)

    def __contains__(self, entity_id: object) -> bool:
        with self._lock:
            return entity_id in self._documents
