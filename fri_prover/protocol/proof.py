"""FRI proof data structures and serialization."""

from dataclasses import dataclass, field
from typing import Any, List

import numpy as np

from ..primitives.field import FieldType, element_byte_length
from ..primitives.merkle_tree import BatchMerkleProof


# --- Proof Data Structures ---

@dataclass
class FriProofLayer:
    """Openings of one committed FRI layer.

    Attributes:
        values: Queried rows, shape (num_positions, folding_factor), in the
                order of the folded positions
        merkle_proof: One batched authentication proof for all queried rows
    """
    values: np.ndarray
    merkle_proof: BatchMerkleProof = field(default_factory=BatchMerkleProof)


@dataclass
class FriProof:
    """FRI query-phase output.

    Attributes:
        layers: One entry per non-remainder layer, in commit order
        remainder: Last layer's evaluations in natural (un-transposed) order
        folding_factor: Folding factor the layers were built with
    """
    layers: List[FriProofLayer] = field(default_factory=list)
    remainder: Any = None
    folding_factor: int = 4

    @property
    def num_layers(self) -> int:
        return len(self.layers)

    def size_in_bytes(self, field_type: FieldType) -> int:
        """Approximate serialized size: field elements plus Merkle digests."""
        elem = element_byte_length(field_type)
        total = len(self.remainder) * elem
        for layer in self.layers:
            total += layer.values.size * elem
            total += sum(len(d) for level in layer.merkle_proof.nodes for d in level)
        return total


# --- JSON Serialization ---

def proof_to_json(proof: FriProof) -> dict[str, Any]:
    """Convert FRI proof to JSON-serializable dictionary."""
    return {
        "foldingFactor": proof.folding_factor,
        "layers": [
            {
                "values": [[str(int(v)) for v in row] for row in layer.values],
                "depth": layer.merkle_proof.depth,
                "nodes": [[d.hex() for d in level] for level in layer.merkle_proof.nodes],
            }
            for layer in proof.layers
        ],
        "remainder": [str(int(v)) for v in proof.remainder],
    }


def proof_from_json(data: dict[str, Any], field_type: FieldType) -> FriProof:
    """Rebuild FRI proof from proof_to_json output."""
    folding_factor = int(data["foldingFactor"])
    layers = []
    for layer in data["layers"]:
        rows = [[int(v) for v in row] for row in layer["values"]]
        values = field_type(rows) if rows else field_type.Zeros((0, folding_factor))
        merkle_proof = BatchMerkleProof(
            depth=int(layer["depth"]),
            nodes=[[bytes.fromhex(d) for d in level] for level in layer["nodes"]],
        )
        layers.append(FriProofLayer(values=values, merkle_proof=merkle_proof))

    return FriProof(
        layers=layers,
        remainder=field_type([int(v) for v in data["remainder"]]),
        folding_factor=folding_factor,
    )
