"""Core functionalities: stateless primitives.

Architecture Note:
    core/ contains pure, stateless functionalities: identity, the chunk
    codec, and chunk naming. None of it touches a property store.
    For stateful services, see world/, storage/, and document/.
"""

from chunkdoc.core.codec import (
    JSON_CODEC,
    Codec,
    Decoder,
    Encoder,
    chunk_count,
    decode_json,
    encode_json,
    iter_chunks,
    join,
    model_codec,
    split,
)
from chunkdoc.core.identity import EntityId, SystemEntity
from chunkdoc.core.naming import (
    DEFAULT_SEPARATOR,
    chunk_name,
    chunk_pattern,
    chunk_sort_key,
    parse_chunk_name,
)

__all__ = [
    # Identity
    "EntityId",
    "SystemEntity",
    # Codec
    "Codec",
    "Encoder",
    "Decoder",
    "JSON_CODEC",
    "model_codec",
    "split",
    "iter_chunks",
    "join",
    "chunk_count",
    "encode_json",
    "decode_json",
    # Naming
    "DEFAULT_SEPARATOR",
    "chunk_name",
    "chunk_pattern",
    "chunk_sort_key",
    "parse_chunk_name",
]
