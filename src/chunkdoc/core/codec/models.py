"""Codec models: encoder/decoder pairs used by documents.

Usage:
    from chunkdoc.core.codec import JSON_CODEC, model_codec

    doc.set("settings", settings, encoder=model_codec(Settings).encoder)
    settings = doc.get("settings", decoder=model_codec(Settings).decoder)
"""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from chunkdoc.core.codec.operations import decode_json, encode_json

T = TypeVar("T")
M = TypeVar("M")

Encoder = Callable[[Any, str], str]
"""Signature: (value, key) -> encoded string"""

Decoder = Callable[[str, str], Any]
"""Signature: (encoded string, key) -> value"""


@dataclass(frozen=True, slots=True)
class Codec(Generic[T]):
    """Pair of functions translating values to and from strings.

    Both receive the logical key so one codec can vary its format per key.
    """

    encoder: Callable[[T, str], str]
    decoder: Callable[[str, str], T]


JSON_CODEC: Codec[Any] = Codec(encoder=encode_json, decoder=decode_json)


def _is_pydantic_model(cls: type[Any]) -> bool:
    """Check if class is a Pydantic model."""
    return isinstance(cls, type) and issubclass(cls, BaseModel)


def _is_dataclass(cls: type) -> bool:
    """Check if class is a dataclass."""
    return dataclasses.is_dataclass(cls) and isinstance(cls, type)


def model_codec(cls: type[M]) -> Codec[M]:
    """Build a codec for a Pydantic model or dataclass type.

    Pydantic models use ``model_dump_json``/``model_validate_json``, so field
    validation runs on decode. Dataclasses go through ``dataclasses.asdict``
    and are rebuilt with ``cls(**data)``; nested dataclasses come back as dicts.

    Args:
        cls: Pydantic ``BaseModel`` subclass or dataclass type.

    Returns:
        Codec whose decoder returns instances of ``cls``.

    Raises:
        TypeError: If cls is neither a Pydantic model nor a dataclass.
    """
    if _is_pydantic_model(cls):

        def encode_model(value: M, key: str) -> str:
            if not isinstance(value, cls):
                raise TypeError(f"Expected {cls.__name__}, got {type(value).__name__}")
            return value.model_dump_json()  # type: ignore[attr-defined, no-any-return]

        def decode_model(encoded: str, key: str) -> M:
            return cls.model_validate_json(encoded)  # type: ignore[attr-defined, no-any-return]

        return Codec(encoder=encode_model, decoder=decode_model)

    if _is_dataclass(cls):

        def encode_dataclass(value: M, key: str) -> str:
            if not isinstance(value, cls):
                raise TypeError(f"Expected {cls.__name__}, got {type(value).__name__}")
            return encode_json(dataclasses.asdict(value), key)  # type: ignore[call-overload]

        def decode_dataclass(encoded: str, key: str) -> M:
            data = json.loads(encoded)
            if not isinstance(data, dict):
                raise TypeError(f"Expected a JSON object for {cls.__name__}")
            return cls(**data)

        return Codec(encoder=encode_dataclass, decoder=decode_dataclass)

    raise TypeError(f"{cls!r} is not a Pydantic model or dataclass")
