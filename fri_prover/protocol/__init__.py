"""Protocol - FRI options, folding, prover and proof structures."""

from .folding import (
    apply_drp,
    fold_positions,
    interpolate_rows,
    transpose_evaluations,
    untranspose_evaluations,
)
from .options import FriOptions
from .proof import FriProof, FriProofLayer, proof_from_json, proof_to_json
from .prover import (
    SUPPORTED_FOLDING_FACTORS,
    FriLayer,
    FriProver,
    hash_values,
    query_layer,
)

__all__ = [
    # Folding
    "apply_drp",
    "fold_positions",
    "interpolate_rows",
    "transpose_evaluations",
    "untranspose_evaluations",
    # Options
    "FriOptions",
    # Proof
    "FriProof",
    "FriProofLayer",
    "proof_from_json",
    "proof_to_json",
    # Prover
    "SUPPORTED_FOLDING_FACTORS",
    "FriLayer",
    "FriProver",
    "hash_values",
    "query_layer",
]
