"""Tests for the chunk codec.

Critical Invariants:
- join(split(v, n)) == v for every n >= 1
- Chunks never exceed max_chunk_size and keep original order
- The empty string splits into zero chunks
"""

from dataclasses import dataclass

import pytest
from pydantic import BaseModel, ValidationError

from chunkdoc.core.codec import (
    JSON_CODEC,
    chunk_count,
    decode_json,
    encode_json,
    iter_chunks,
    join,
    model_codec,
    split,
)


def test_split_concrete_scenario():
    """15 characters at size 10 split into a full chunk and a 5 character tail."""
    assert split("0123456789ABCDE", 10) == ["0123456789", "ABCDE"]


def test_split_exact_multiple_has_no_empty_tail():
    assert split("abcdef", 3) == ["abc", "def"]


def test_split_empty_yields_no_chunks():
    """CRITICAL: "" produces zero chunks, so an empty value writes nothing.

    Why: Documents read zero chunks as absent; this ambiguity is intentional.
    """
    assert split("", 10) == []
    assert chunk_count(0, 10) == 0


@pytest.mark.parametrize("size", [1, 2, 7, 64])
def test_join_inverts_split(size):
    """CRITICAL: join(split(v, n)) == v."""
    value = "héllo wörld " * 13 + "🙂"
    chunks = split(value, size)

    assert join(chunks) == value
    assert all(0 < len(chunk) <= size for chunk in chunks)
    assert len(chunks) == chunk_count(len(value), size)


def test_split_is_deterministic():
    value = "x" * 95
    assert split(value, 10) == split(value, 10)


def test_iter_chunks_is_lazy():
    chunks = iter_chunks("abcdefgh", 3)
    assert next(chunks) == "abc"
    assert list(chunks) == ["def", "gh"]


@pytest.mark.parametrize("size", [0, -1])
def test_split_rejects_non_positive_size(size):
    with pytest.raises(ValueError, match="at least 1"):
        split("abc", size)


def test_split_rejects_non_str():
    with pytest.raises(TypeError, match="str"):
        split(b"abc", 2)  # type: ignore[arg-type]


def test_chunk_count_rounds_up():
    assert chunk_count(15, 10) == 2
    assert chunk_count(10, 10) == 1
    assert chunk_count(11, 10) == 2


def test_json_codec_is_compact():
    assert encode_json({"a": [1, 2]}, "k") == '{"a":[1,2]}'
    assert decode_json('{"a":[1,2]}', "k") == {"a": [1, 2]}
    assert JSON_CODEC.decoder(JSON_CODEC.encoder("ü", "k"), "k") == "ü"


def test_json_codec_rejects_nan():
    """NaN is not JSON; other readers of the raw store could not parse it."""
    with pytest.raises(ValueError):
        encode_json(float("nan"), "k")


class Profile(BaseModel):
    name: str
    level: int


@dataclass
class Position:
    x: float
    y: float


def test_model_codec_pydantic():
    codec = model_codec(Profile)
    encoded = codec.encoder(Profile(name="steve", level=3), "profile")

    assert codec.decoder(encoded, "profile") == Profile(name="steve", level=3)


def test_model_codec_pydantic_validates_on_decode():
    codec = model_codec(Profile)
    with pytest.raises(ValidationError):
        codec.decoder('{"name": "steve", "level": "high"}', "profile")


def test_model_codec_dataclass():
    codec = model_codec(Position)
    encoded = codec.encoder(Position(1.5, -2.0), "pos")

    assert codec.decoder(encoded, "pos") == Position(1.5, -2.0)


def test_model_codec_rejects_wrong_instance():
    codec = model_codec(Position)
    with pytest.raises(TypeError, match="Expected Position"):
        codec.encoder({"x": 1, "y": 2}, "pos")


def test_model_codec_rejects_plain_types():
    with pytest.raises(TypeError, match="not a Pydantic model or dataclass"):
        model_codec(dict)
