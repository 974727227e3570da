"""Configuration module using Pydantic Settings.

Usage:
    from chunkdoc.config import DocumentSettings

    settings = DocumentSettings(max_property_size=1024, chunking=False)
"""

from chunkdoc.config.settings import DocumentSettings

__all__ = [
    "DocumentSettings",
]
