"""Primitives - Fixed-width encodings that the proof codec is built from."""

from primitives.encoding import (
    decode_element,
    encode_element,
)
from primitives.errors import (
    CodecError,
    EncodingOverflowError,
    TrailingBytesError,
    TruncatedBufferError,
)
from primitives.field import (
    FF,
    GOLDILOCKS_PRIME,
    as_int,
    element_size,
)
from primitives.hash import (
    get_hash_digest_size,
    resolve_digest_size,
)
from primitives.merkle_proof import (
    MerkleProof,
    decode_merkle_proof,
    encode_merkle_proof,
    size_of_merkle_proof,
)
from primitives.records import (
    COUNT_SIZE,
    decode_array,
    decode_matrix,
    encode_array,
    encode_matrix,
    size_of_array,
    size_of_matrix,
)

__all__ = [
    # Field
    "FF",
    "GOLDILOCKS_PRIME",
    "as_int",
    "element_size",
    # Elements
    "encode_element",
    "decode_element",
    # Errors
    "CodecError",
    "EncodingOverflowError",
    "TruncatedBufferError",
    "TrailingBytesError",
    # Hash
    "get_hash_digest_size",
    "resolve_digest_size",
    # Records
    "COUNT_SIZE",
    "encode_array",
    "decode_array",
    "encode_matrix",
    "decode_matrix",
    "size_of_array",
    "size_of_matrix",
    # Merkle proofs
    "MerkleProof",
    "encode_merkle_proof",
    "decode_merkle_proof",
    "size_of_merkle_proof",
]
