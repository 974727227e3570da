"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from chunkdoc import Codec, DocumentRegistry, DocumentSettings, World


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    """Keep CHUNKDOC_* variables from the host out of settings."""
    for name in ("CHUNKDOC_MAX_PROPERTY_SIZE", "CHUNKDOC_SEPARATOR", "CHUNKDOC_CHUNKING"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def world():
    """Fresh World with the default property size limit."""
    return World()


@pytest.fixture
def small_world():
    """World whose stores only accept 10 characters per property."""
    return World(max_property_size=10)


@pytest.fixture
def registry(small_world):
    """Registry over small_world; closed after the test."""
    with DocumentRegistry(small_world, DocumentSettings(max_property_size=10)) as reg:
        yield reg


@pytest.fixture
def doc(registry, small_world):
    """Document of a fresh entity, chunked at 10 characters."""
    return registry.document_for(small_world.spawn())


@pytest.fixture
def identity():
    """Codec that stores str values as-is."""
    return Codec(encoder=lambda value, key: value, decoder=lambda encoded, key: encoded)
