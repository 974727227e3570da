"""Chunk codec: splitting encoded values into bounded chunks and default codecs."""

from chunkdoc.core.codec.models import JSON_CODEC, Codec, Decoder, Encoder, model_codec
from chunkdoc.core.codec.operations import (
    chunk_count,
    decode_json,
    encode_json,
    iter_chunks,
    join,
    split,
)

__all__ = [
    # Models
    "Codec",
    "Encoder",
    "Decoder",
    "JSON_CODEC",
    "model_codec",
    # Operations
    "split",
    "iter_chunks",
    "join",
    "chunk_count",
    "encode_json",
    "decode_json",
]
