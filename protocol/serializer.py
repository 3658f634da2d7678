"""Binary proof serialization.

Byte layout (all integers big-endian, D = digest width):

    evaluations
        root                      D bytes
        bpc                       u8
        depth                     u8
        values                    array, record = value_size(bpc)
        nodes                     matrix, record = D
    degree
        root                      D bytes
        lc_proof                  merkle proof
        component count           u8
        components[i]             column_root (D), column_proof, poly_proof
        remainder                 array, record = D

Arrays and matrices use the count prefixes from primitives.records; a merkle
proof is its values array followed by its nodes matrix, both D-byte records.
"""

import logging

from primitives.encoding import encode_uint, ensure_available, read_bytes, read_uint
from primitives.errors import CodecError, TrailingBytesError
from primitives.hash import resolve_digest_size
from primitives.merkle_proof import decode_merkle_proof, encode_merkle_proof
from primitives.records import (
    COUNT_SIZE,
    decode_array,
    decode_matrix,
    encode_array,
    encode_matrix,
)
from protocol.config import CodecConfig
from protocol.proof import (
    DegreeBlock,
    EvaluationBlock,
    FriComponent,
    Proof,
    ProofSize,
    size_of,
)
from protocol.rows import EvaluationRow, RowColumns, merge_row, split_row

logger = logging.getLogger(__name__)

# Smallest possible encoding of one FRI component, excluding its root:
# two merkle proofs, each an empty array and an empty matrix
_MIN_COMPONENT_PROOFS_SIZE = 4 * COUNT_SIZE


def _digest(value: bytes, node_size: int, name: str) -> bytes:
    if len(value) != node_size:
        raise CodecError(f"{name} is {len(value)} bytes, expected {node_size}")
    return bytes(value)


def _write(buffer: bytearray, offset: int, chunk: bytes) -> int:
    end = offset + len(chunk)
    buffer[offset:end] = chunk
    return end


# --- Serialization ---

def serialize_proof(config: CodecConfig, proof: Proof, hash_algorithm: str | int) -> bytes:
    """Serialize a proof to bytes.

    The output buffer is sized from the proof's shape and allocated once.

    Reference: Serializer.serializeProof() in bin/lib/Serializer.js

    Args:
        config: Codec configuration
        proof: Fully built proof
        hash_algorithm: Hash algorithm name or digest width in bytes

    Raises:
        EncodingOverflowError: If bpc, depth or the component count exceed one byte
        CodecError: If a digest or record has the wrong width
    """
    node_size = resolve_digest_size(hash_algorithm)
    ev = proof.evaluations
    dg = proof.degree

    header = (
        _digest(ev.root, node_size, "evaluations.root")
        + encode_uint(ev.bpc, 1, "evaluations.bpc")
        + encode_uint(ev.depth, 1, "evaluations.depth")
    )
    value_size = config.value_size(ev.bpc)
    size = size_of(proof, value_size, node_size)

    # Every chunk below is width-checked, so the writes fill the buffer exactly
    buffer = bytearray(size.total)
    offset = _write(buffer, 0, header)
    offset = _write(buffer, offset, encode_array(ev.values, value_size))
    offset = _write(buffer, offset, encode_matrix(ev.nodes, node_size))

    offset = _write(buffer, offset, _digest(dg.root, node_size, "degree.root"))
    offset = _write(buffer, offset, encode_merkle_proof(dg.lc_proof, node_size))
    offset = _write(buffer, offset, encode_uint(len(dg.components), 1, "component count"))
    for i, component in enumerate(dg.components):
        column_root = _digest(component.column_root, node_size, f"degree.components[{i}].column_root")
        offset = _write(buffer, offset, column_root)
        offset = _write(buffer, offset, encode_merkle_proof(component.column_proof, node_size))
        offset = _write(buffer, offset, encode_merkle_proof(component.poly_proof, node_size))
    _write(buffer, offset, encode_array(dg.remainder, node_size))

    logger.debug(
        "Serialized proof: %d bytes (evaluations=%d, degree=%d, components=%d)",
        size.total, size.evaluations, size.degree, len(dg.components),
    )
    return bytes(buffer)


# --- Parsing ---

def parse_proof(config: CodecConfig, data: bytes, hash_algorithm: str | int) -> Proof:
    """Parse bytes produced by serialize_proof.

    Reference: Serializer.parseProof() in bin/lib/Serializer.js

    Raises:
        TruncatedBufferError: If any field, or any declared count, runs past the buffer
        TrailingBytesError: If bytes remain after the remainder array
    """
    node_size = resolve_digest_size(hash_algorithm)
    offset = 0

    # Evaluations
    e_root, offset = read_bytes(data, offset, node_size, "evaluations.root")
    bpc, offset = read_uint(data, offset, 1, "evaluations.bpc")
    depth, offset = read_uint(data, offset, 1, "evaluations.depth")
    value_size = config.value_size(bpc)
    values, offset = decode_array(data, offset, value_size, "evaluations.values")
    nodes, offset = decode_matrix(data, offset, node_size, "evaluations.nodes")

    # Degree
    d_root, offset = read_bytes(data, offset, node_size, "degree.root")
    lc_proof, offset = decode_merkle_proof(data, offset, node_size, name="degree.lc_proof")
    component_count, offset = read_uint(data, offset, 1, "degree.component count")
    ensure_available(
        data, offset, component_count * (node_size + _MIN_COMPONENT_PROOFS_SIZE), "degree.components"
    )
    components = []
    for i in range(component_count):
        name = f"degree.components[{i}]"
        column_root, offset = read_bytes(data, offset, node_size, f"{name}.column_root")
        column_proof, offset = decode_merkle_proof(data, offset, node_size, name=f"{name}.column_proof")
        poly_proof, offset = decode_merkle_proof(data, offset, node_size, name=f"{name}.poly_proof")
        components.append(FriComponent(column_root, column_proof, poly_proof))
    remainder, offset = decode_array(data, offset, node_size, "degree.remainder")

    if offset != len(data):
        raise TrailingBytesError(offset, len(data))

    logger.debug(
        "Parsed proof: %d bytes, bpc=%d, depth=%d, %d value(s), %d component(s)",
        len(data), bpc, depth, len(values), component_count,
    )
    return Proof(
        evaluations=EvaluationBlock(root=e_root, bpc=bpc, depth=depth, values=values, nodes=nodes),
        degree=DegreeBlock(root=d_root, lc_proof=lc_proof, components=components, remainder=remainder),
    )


# --- Serializer ---

class Serializer:
    """Row and proof codec bound to one configuration.

    Usage:
        serializer = Serializer(CodecConfig(32, state_width=2, constraint_count=1))
        leaf = serializer.merge_row(columns, b_count=1, position=0)
        data = serializer.serialize_proof(proof, "sha256")
        proof = serializer.parse_proof(data, "sha256")
    """

    def __init__(self, config: CodecConfig) -> None:
        self.config = config

    def merge_row(self, columns: RowColumns, b_count: int, position: int) -> bytes:
        return merge_row(self.config, columns, b_count, position)

    def split_row(self, data: bytes, b_count: int) -> EvaluationRow:
        return split_row(self.config, data, b_count)

    def size_of(self, proof: Proof, hash_algorithm: str | int) -> ProofSize:
        value_size = self.config.value_size(proof.evaluations.bpc)
        return size_of(proof, value_size, resolve_digest_size(hash_algorithm))

    def serialize_proof(self, proof: Proof, hash_algorithm: str | int) -> bytes:
        return serialize_proof(self.config, proof, hash_algorithm)

    def parse_proof(self, data: bytes, hash_algorithm: str | int) -> Proof:
        return parse_proof(self.config, data, hash_algorithm)
