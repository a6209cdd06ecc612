"""Binary Merkle tree commitment with batched authentication proofs."""

from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from .hashing import Digest, Hasher

# --- Type Aliases ---

MerkleRoot = Digest


# --- Data Classes ---

@dataclass
class BatchMerkleProof:
    """Authentication proof for several leaves of one tree.

    Attributes:
        depth: Tree depth (log2 of the number of leaves)
        nodes: Sibling digests per level, from the leaves up to the root.
               A level only lists the siblings the verifier cannot recompute
               from the opened leaves or from digests derived at the level below.
    """
    depth: int = 0
    nodes: List[List[Digest]] = field(default_factory=list)

    def num_digests(self) -> int:
        """Total number of sibling digests in the proof."""
        return sum(len(level) for level in self.nodes)


# --- Merkle Tree ---

class MerkleTree:
    """Binary Merkle tree over a power-of-two number of leaf digests."""

    def __init__(self, leaves: Sequence[Digest], hasher: Hasher):
        n = len(leaves)
        if n == 0 or n & (n - 1) != 0:
            raise ValueError(f"number of leaves must be a power of two, got {n}")

        self.hasher = hasher
        self.leaf_count = n
        self.depth = n.bit_length() - 1
        self.levels: List[List[Digest]] = []
        self._merkelize(list(leaves))

    # --- Core Operations ---

    def _merkelize(self, leaves: List[Digest]) -> None:
        """Build all levels bottom-up; levels[0] are the leaves, levels[-1] the root."""
        self.levels = [leaves]
        current = leaves
        while len(current) > 1:
            current = [
                self.hasher.merge(current[i], current[i + 1])
                for i in range(0, len(current), 2)
            ]
            self.levels.append(current)

    def get_root(self) -> MerkleRoot:
        """Return the Merkle root commitment."""
        return self.levels[-1][0]

    def get_leaf(self, idx: int) -> Digest:
        self._check_index(idx)
        return self.levels[0][idx]

    def get_group_proof(self, idx: int) -> List[Digest]:
        """Generate the authentication path (siblings only) for one leaf."""
        self._check_index(idx)
        proof: List[Digest] = []
        for level in self.levels[:-1]:
            proof.append(level[idx ^ 1])
            idx >>= 1
        return proof

    def prove_batch(self, indexes: Sequence[int]) -> BatchMerkleProof:
        """Generate a single authentication proof covering all indexes.

        Shared ancestors are included at most once, and siblings that are
        themselves opened (or derivable) are omitted.

        Raises:
            ValueError: If indexes is empty, has duplicates or is out of range
        """
        if len(indexes) == 0:
            raise ValueError("at least one leaf index is required")
        current = sorted(indexes)
        if len(set(current)) != len(current):
            raise ValueError("leaf indexes must be unique")
        for idx in current:
            self._check_index(idx)

        nodes: List[List[Digest]] = []
        for level in self.levels[:-1]:
            present = set(current)
            nodes.append([level[idx ^ 1] for idx in current if idx ^ 1 not in present])
            current = sorted({idx >> 1 for idx in current})

        return BatchMerkleProof(depth=self.depth, nodes=nodes)

    # --- Verification ---

    @staticmethod
    def verify_group_proof(
        root: MerkleRoot,
        idx: int,
        leaf: Digest,
        proof: List[Digest],
        hasher: Hasher,
    ) -> bool:
        """Verify a single-leaf authentication path."""
        if idx < 0 or idx >= 1 << len(proof):
            return False
        computed = leaf
        for sibling in proof:
            if idx & 1:
                computed = hasher.merge(sibling, computed)
            else:
                computed = hasher.merge(computed, sibling)
            idx >>= 1
        return computed == root

    @staticmethod
    def verify_batch(
        root: MerkleRoot,
        indexes: Sequence[int],
        leaves: Sequence[Digest],
        proof: BatchMerkleProof,
        hasher: Hasher,
    ) -> bool:
        """Verify a batched proof for leaves opened at indexes."""
        if len(indexes) == 0 or len(indexes) != len(leaves):
            return False
        if len(proof.nodes) != proof.depth:
            return False

        known: Dict[int, Digest] = dict(zip(indexes, leaves))
        if len(known) != len(indexes):
            return False
        if any(idx < 0 or idx >= 1 << proof.depth for idx in known):
            return False

        for siblings in proof.nodes:
            supplied = iter(siblings)
            parents: Dict[int, Digest] = {}
            for idx in sorted(known):
                if idx >> 1 in parents:
                    continue
                sibling = known.get(idx ^ 1)
                if sibling is None:
                    sibling = next(supplied, None)
                    if sibling is None:
                        return False
                if idx & 1:
                    parents[idx >> 1] = hasher.merge(sibling, known[idx])
                else:
                    parents[idx >> 1] = hasher.merge(known[idx], sibling)
            if next(supplied, None) is not None:
                return False
            known = parents

        return known.get(0) == root

    # --- Internal Helpers ---

    def _check_index(self, idx: int) -> None:
        if idx < 0 or idx >= self.leaf_count:
            raise ValueError(f"Leaf index {idx} out of range [0, {self.leaf_count})")
