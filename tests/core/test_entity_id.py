"""Tests for entity identity."""

import pytest

from chunkdoc.core.identity import EntityId, SystemEntity


def test_key_includes_generation():
    """Ids differing only in generation must not share a document."""
    assert EntityId(0, 1000, 0).key != EntityId(0, 1000, 1).key


def test_parse_inverts_key():
    entity = EntityId(shard=2, index=1042, generation=7)
    assert EntityId.parse(entity.key) == entity
    assert str(entity) == "2:1042:7"


@pytest.mark.parametrize("key", ["", "1:2", "a:b:c", "1:2:3:4"])
def test_parse_rejects_malformed(key):
    with pytest.raises(ValueError):
        EntityId.parse(key)


def test_world_is_reserved():
    assert SystemEntity.WORLD.index < SystemEntity._RESERVED_COUNT
    assert SystemEntity.WORLD.is_local()
