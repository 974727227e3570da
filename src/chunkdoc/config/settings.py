"""Configuration settings using Pydantic Settings.

Provides typed document configuration with environment variable support.

Usage:
    from chunkdoc.config import DocumentSettings

    # Load from environment variables (CHUNKDOC_*)
    settings = DocumentSettings()

    # Or override with explicit values
    settings = DocumentSettings(max_property_size=10)
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from chunkdoc.core.naming import DEFAULT_SEPARATOR
from chunkdoc.storage.protocol import DEFAULT_MAX_PROPERTY_SIZE


class DocumentSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for documents.

    Attributes:
        max_property_size: Maximum chunk length. Should not exceed the
            store's own limit; documents use the smaller of the two.
        separator: Text between a logical key and its chunk index.
        chunking: Split long values over several properties. When False,
            values longer than max_property_size are rejected with SizeError.

    Environment Variables:
        CHUNKDOC_MAX_PROPERTY_SIZE
        CHUNKDOC_SEPARATOR
        CHUNKDOC_CHUNKING
    """

    model_config = SettingsConfigDict(
        env_prefix="CHUNKDOC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    max_property_size: int = Field(default=DEFAULT_MAX_PROPERTY_SIZE, ge=1)
    separator: str = Field(default=DEFAULT_SEPARATOR, min_length=1)
    chunking: bool = True

    @field_validator("separator")
    @classmethod
    def _separator_has_no_digits(cls, value: str) -> str:
        # A digit in the separator would make chunk indices ambiguous.
        if any(ch.isdigit() for ch in value):
            raise ValueError("separator must not contain digits")
        return value
