"""
FRI Prover

The prover side of FRI (Fast Reed-Solomon Interactive Oracle Proof of
Proximity): commits to a vector of evaluations layer by layer, folding it with
transcript-derived challenges, then opens every layer at query positions.

This package provides:
- Prime field arithmetic (via galois), Goldilocks by default
- hashlib-backed row hashing and binary Merkle trees with batched proofs
- Fiat-Shamir prover channel
- Degree-respecting projection and position folding
- FRI prover (commit and query phases)

Usage:
    from fri_prover import FriOptions, FriProver, ProverChannel

    options = FriOptions(folding_factor=4, max_remainder_size=16)
    prover = FriProver(options)
    channel = ProverChannel(seed=b"public inputs")
    prover.build_layers(channel, evaluations)
    positions = channel.draw_query_positions(32, len(evaluations))
    proof = prover.build_proof(positions)
"""

from .primitives import (
    FF,
    GOLDILOCKS_PRIME,
    BatchMerkleProof,
    Hasher,
    MerkleTree,
    ProverChannel,
    get_root_of_unity,
)
from .protocol import (
    SUPPORTED_FOLDING_FACTORS,
    FriLayer,
    FriOptions,
    FriProof,
    FriProofLayer,
    FriProver,
    apply_drp,
    fold_positions,
    proof_from_json,
    proof_to_json,
)

__version__ = "0.1.0"
__all__ = [
    # Field
    "FF",
    "GOLDILOCKS_PRIME",
    "get_root_of_unity",
    # Hash / Merkle
    "Hasher",
    "MerkleTree",
    "BatchMerkleProof",
    # Transcript
    "ProverChannel",
    # FRI
    "SUPPORTED_FOLDING_FACTORS",
    "FriOptions",
    "FriLayer",
    "FriProver",
    "FriProof",
    "FriProofLayer",
    "apply_drp",
    "fold_positions",
    "proof_to_json",
    "proof_from_json",
]
