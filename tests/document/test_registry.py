"""Tests for DocumentRegistry caching and eviction.

Critical Invariants:
- One document per owner identity
- The world document is created once and never evicted
- Entity documents are evicted when the entity is removed
"""

import threading

import pytest

from chunkdoc import Document, DocumentRegistry, DocumentSettings, World


def test_same_entity_same_document(registry, small_world):
    """CRITICAL: two lookups for one entity return the same instance."""
    entity = small_world.spawn()

    first = registry.document_for(entity)
    second = Document.from_owner(entity, registry)

    assert first is second
    assert entity.id in registry


def test_different_entities_different_documents(registry, small_world):
    a = registry.document_for(small_world.spawn())
    b = registry.document_for(small_world.spawn())
    assert a is not b


def test_world_document_is_singleton(registry, small_world):
    doc = registry.document_for(small_world)

    assert doc is registry.world_document
    assert doc is Document.from_owner(small_world, registry)
    assert doc.owner is small_world
    assert len(registry) == 0  # the world is not an entity entry


def test_removal_evicts_document(registry, small_world):
    """CRITICAL: after the removal event, the cache no longer holds the entity."""
    entity = small_world.spawn()
    old = registry.document_for(entity)

    small_world.destroy(entity)

    assert entity.id not in registry
    assert len(registry) == 0
    replacement = registry.document_for(small_world.spawn())
    assert replacement is not old


def test_removal_does_not_touch_other_entries(registry, small_world):
    keep = small_world.spawn()
    drop = small_world.spawn()
    kept_doc = registry.document_for(keep)
    registry.document_for(drop)

    small_world.destroy(drop)

    assert registry.document_for(keep) is kept_doc
    assert len(registry) == 1


def test_world_document_survives_entity_removal(registry, small_world):
    world_doc = registry.world_document
    world_doc.set("motd", "hi")
    small_world.destroy(small_world.spawn())

    assert registry.world_document is world_doc
    assert world_doc.get("motd") == "hi"


def test_removed_entity_is_not_cached(registry, small_world):
    """A removed entity will never fire again, so caching it would leak."""
    entity = small_world.spawn()
    small_world.destroy(entity)

    with pytest.raises(ValueError, match="has been removed"):
        registry.document_for(entity)
    assert len(registry) == 0


def test_foreign_owners_rejected(registry):
    other = World()

    with pytest.raises(ValueError, match="different world"):
        registry.document_for(other)
    with pytest.raises(ValueError, match="different world"):
        registry.document_for(other.spawn())
    with pytest.raises(TypeError):
        registry.document_for(object())  # type: ignore[arg-type]


def test_documents_use_registry_settings(small_world):
    settings = DocumentSettings(max_property_size=4)
    with DocumentRegistry(small_world, settings) as registry:
        doc = registry.document_for(small_world.spawn())
        assert doc.settings is settings
        assert doc.max_chunk_size == 4


def test_evict(registry, small_world):
    entity = small_world.spawn()
    registry.document_for(entity)

    assert registry.evict(entity.id)
    assert not registry.evict(entity.id)


def test_close_unsubscribes():
    world = World()
    registry = DocumentRegistry(world)
    registry.document_for(world.spawn())
    assert len(world.entity_removed) == 1

    registry.close()
    registry.close()

    assert registry.closed
    assert len(world.entity_removed) == 0
    assert len(registry) == 0
    with pytest.raises(RuntimeError, match="closed"):
        registry.document_for(world.spawn())


def test_concurrent_lookups_share_one_document(registry, small_world):
    entity = small_world.spawn()
    results = []
    barrier = threading.Barrier(8)

    def lookup():
        barrier.wait()
        results.append(registry.document_for(entity))

    threads = [threading.Thread(target=lookup) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(results) == 8
    assert all(doc is results[0] for doc in results)
