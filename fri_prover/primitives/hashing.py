"""Hash functions for Merkle commitments and the transcript.

Field elements are encoded little-endian with a fixed width per field, so a
row of F elements always hashes the same bytes regardless of its values.
"""

import hashlib
from typing import Iterable

from .field import FieldType, element_byte_length

Digest = bytes

SUPPORTED_HASHES = ("sha3_256", "blake2s", "sha256")


class Hasher:
    """Thin wrapper around a hashlib algorithm producing fixed-size digests."""

    def __init__(self, name: str = "sha3_256"):
        if name not in SUPPORTED_HASHES:
            raise ValueError(f"hash must be one of {SUPPORTED_HASHES}, got {name!r}")
        self.name = name
        self.digest_size = hashlib.new(name).digest_size

    def __repr__(self) -> str:
        return f"Hasher({self.name!r})"

    def hash(self, data: bytes) -> Digest:
        """Hash raw bytes."""
        return hashlib.new(self.name, data).digest()

    def hash_elements(self, values: Iterable, field: FieldType) -> Digest:
        """Hash a sequence of field elements (a Merkle leaf row)."""
        width = element_byte_length(field)
        h = hashlib.new(self.name)
        for v in values:
            h.update(int(v).to_bytes(width, "little"))
        return h.digest()

    def merge(self, left: Digest, right: Digest) -> Digest:
        """Hash two child digests into their parent."""
        return hashlib.new(self.name, left + right).digest()
