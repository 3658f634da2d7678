"""Batch Merkle authentication data and its binary encoding."""

from dataclasses import dataclass, field

from primitives.records import (
    decode_array,
    decode_matrix,
    encode_array,
    encode_matrix,
    size_of_array,
    size_of_matrix,
)


@dataclass
class MerkleProof:
    """Opened leaves and the sibling paths needed to recompute one root.

    Attributes:
        values: Leaf values, one fixed-width record per opened leaf
        nodes: Sibling hashes, one row per opened leaf (rows may differ in length)
    """
    values: list[bytes] = field(default_factory=list)
    nodes: list[list[bytes]] = field(default_factory=list)


def size_of_merkle_proof(proof: MerkleProof, node_size: int, leaf_size: int | None = None) -> int:
    """Encoded length of a Merkle proof."""
    if leaf_size is None:
        leaf_size = node_size
    return size_of_array(proof.values, leaf_size) + size_of_matrix(proof.nodes, node_size)


def encode_merkle_proof(proof: MerkleProof, node_size: int, leaf_size: int | None = None) -> bytes:
    """Encode leaf values as an array followed by sibling paths as a matrix.

    Leaf values default to node width, which is what every proof in the
    degree block uses.
    """
    if leaf_size is None:
        leaf_size = node_size
    return encode_array(proof.values, leaf_size) + encode_matrix(proof.nodes, node_size)


def decode_merkle_proof(
    data: bytes,
    offset: int,
    node_size: int,
    leaf_size: int | None = None,
    name: str = "merkle_proof",
) -> tuple[MerkleProof, int]:
    """Decode a Merkle proof, returning (proof, new_offset)."""
    if leaf_size is None:
        leaf_size = node_size
    values, offset = decode_array(data, offset, leaf_size, f"{name}.values")
    nodes, offset = decode_matrix(data, offset, node_size, f"{name}.nodes")
    return MerkleProof(values=values, nodes=nodes), offset
