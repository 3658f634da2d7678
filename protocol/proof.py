"""Proof data structures and their encoded sizes."""

from dataclasses import dataclass, field

from primitives.merkle_proof import MerkleProof, size_of_merkle_proof
from primitives.records import size_of_array, size_of_matrix

# --- Type Aliases ---
Digest = bytes  # Merkle root or node, digest width bytes


# --- Proof Data Structures ---

@dataclass
class EvaluationBlock:
    """Evaluation openings against the trace commitment.

    Attributes:
        root: Root of the evaluation tree
        bpc: Boundary values folded into every leaf at build time
        depth: Depth of the evaluation tree
        values: Opened leaves, each (state_width + constraint_count + bpc) elements
        nodes: Sibling paths for the opened leaves
    """
    root: Digest = b""
    bpc: int = 0
    depth: int = 0
    values: list[bytes] = field(default_factory=list)
    nodes: list[list[Digest]] = field(default_factory=list)


@dataclass
class FriComponent:
    """One folding round of the low-degree proof."""
    column_root: Digest = b""
    column_proof: MerkleProof = field(default_factory=MerkleProof)
    poly_proof: MerkleProof = field(default_factory=MerkleProof)


@dataclass
class DegreeBlock:
    """Low-degree proof: linear combination opening, FRI rounds, remainder."""
    root: Digest = b""
    lc_proof: MerkleProof = field(default_factory=MerkleProof)
    components: list[FriComponent] = field(default_factory=list)
    remainder: list[Digest] = field(default_factory=list)


@dataclass
class Proof:
    """Complete proof: evaluation openings plus the low-degree proof."""
    evaluations: EvaluationBlock = field(default_factory=EvaluationBlock)
    degree: DegreeBlock = field(default_factory=DegreeBlock)


# --- Sizes ---

@dataclass(frozen=True)
class ProofSize:
    """Byte breakdown of an encoded proof.

    `evaluations` and `degree` include their roots and one-byte headers;
    the remaining fields are the encoded sizes of the named parts.
    """
    evaluation_values: int
    evaluation_nodes: int
    evaluations: int
    lc_proof: int
    components: int
    remainder: int
    degree: int

    @property
    def total(self) -> int:
        return self.evaluations + self.degree


def size_of(proof: Proof, value_size: int, node_size: int) -> ProofSize:
    """Compute the encoded size of a proof from its shape alone."""
    ev = proof.evaluations
    evaluation_values = size_of_array(ev.values, value_size)
    evaluation_nodes = size_of_matrix(ev.nodes, node_size)
    # root, bpc byte, depth byte
    evaluations = node_size + 2 + evaluation_values + evaluation_nodes

    dg = proof.degree
    lc_proof = size_of_merkle_proof(dg.lc_proof, node_size)
    components = 1  # component count
    for component in dg.components:
        components += node_size
        components += size_of_merkle_proof(component.column_proof, node_size)
        components += size_of_merkle_proof(component.poly_proof, node_size)
    remainder = size_of_array(dg.remainder, node_size)
    degree = node_size + lc_proof + components + remainder

    return ProofSize(
        evaluation_values=evaluation_values,
        evaluation_nodes=evaluation_nodes,
        evaluations=evaluations,
        lc_proof=lc_proof,
        components=components,
        remainder=remainder,
        degree=degree,
    )
