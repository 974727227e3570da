"""Tests for DocumentSettings."""

import pytest
from pydantic import ValidationError

from chunkdoc.config import DocumentSettings


def test_defaults():
    settings = DocumentSettings()

    assert settings.max_property_size == 32767
    assert settings.separator == "_"
    assert settings.chunking is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CHUNKDOC_MAX_PROPERTY_SIZE", "128")
    monkeypatch.setenv("CHUNKDOC_CHUNKING", "false")

    settings = DocumentSettings()

    assert settings.max_property_size == 128
    assert settings.chunking is False


def test_explicit_values_win_over_environment(monkeypatch):
    monkeypatch.setenv("CHUNKDOC_MAX_PROPERTY_SIZE", "128")
    assert DocumentSettings(max_property_size=64).max_property_size == 64


@pytest.mark.parametrize("size", [0, -5])
def test_rejects_non_positive_size(size):
    with pytest.raises(ValidationError):
        DocumentSettings(max_property_size=size)


@pytest.mark.parametrize("separator", ["", "_1", "9"])
def test_rejects_bad_separator(separator):
    """Digits in the separator would make chunk indices ambiguous."""
    with pytest.raises(ValidationError):
        DocumentSettings(separator=separator)


def test_settings_are_frozen():
    settings = DocumentSettings()
    with pytest.raises(ValidationError):
        settings.chunking = False
