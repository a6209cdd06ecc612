"""Primitives - fields, hashing, Merkle commitments and the Fiat-Shamir channel."""

from .field import (
    FF,
    GOLDILOCKS_PRIME,
    FieldType,
    batch_inverse,
    element_byte_length,
    get_root_of_unity,
    is_field_array,
    powers,
)
from .hashing import Digest, Hasher, SUPPORTED_HASHES
from .merkle_tree import BatchMerkleProof, MerkleRoot, MerkleTree
from .transcript import ProverChannel

__all__ = [
    # Field
    "FF",
    "GOLDILOCKS_PRIME",
    "FieldType",
    "batch_inverse",
    "element_byte_length",
    "get_root_of_unity",
    "is_field_array",
    "powers",
    # Hash
    "Digest",
    "Hasher",
    "SUPPORTED_HASHES",
    # Merkle Tree
    "BatchMerkleProof",
    "MerkleRoot",
    "MerkleTree",
    # Transcript
    "ProverChannel",
]
