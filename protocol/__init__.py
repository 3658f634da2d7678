"""Protocol - Proof structures, evaluation rows and the proof serializer."""

from protocol.config import CodecConfig
from protocol.proof import (
    DegreeBlock,
    Digest,
    EvaluationBlock,
    FriComponent,
    Proof,
    ProofSize,
    size_of,
)
from protocol.rows import (
    EvaluationRow,
    RowColumns,
    encode_row,
    merge_row,
    row_at,
    split_row,
)
from protocol.serializer import Serializer, parse_proof, serialize_proof

__all__ = [
    # Configuration
    "CodecConfig",
    # Proof structures
    "Digest",
    "EvaluationBlock",
    "FriComponent",
    "DegreeBlock",
    "Proof",
    "ProofSize",
    "size_of",
    # Rows
    "EvaluationRow",
    "RowColumns",
    "row_at",
    "encode_row",
    "merge_row",
    "split_row",
    # Serializer
    "Serializer",
    "serialize_proof",
    "parse_proof",
]
