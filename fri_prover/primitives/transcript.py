"""
Fiat-Shamir transcript for the FRI prover.

The channel absorbs layer commitments and produces folding challenges and
query positions in a deterministic, pseudorandom manner. The state is a hash
chain: every absorbed commitment replaces the state with H(state || data),
and every squeeze hashes the state together with a counter.
"""

import logging
from typing import List, Optional

from .field import FF, FieldType, element_byte_length
from .hashing import Digest, Hasher

logger = logging.getLogger(__name__)


class ProverChannel:
    """
    Fiat-Shamir channel used during the FRI commit phase.

    A challenge may only be drawn after a commitment has been absorbed since
    the previous draw, so no challenge can precede the data it binds to.

    Attributes:
        field: galois field class challenges are sampled from
        hasher: Hash function driving the sponge
        layer_commitments: Roots absorbed via commit(), in order
    """

    def __init__(self, seed: bytes = b"", field: FieldType = FF, hasher: Optional[Hasher] = None):
        self.field = field
        self.hasher = hasher or Hasher()
        self.layer_commitments: List[Digest] = []
        self.state: Digest = self.hasher.hash(b"FRI|" + bytes(seed))
        self.counter = 0
        self.num_challenges = 0

    # --- Absorb ---

    def commit(self, root: Digest) -> None:
        """Absorb a layer's Merkle root into the transcript."""
        self.layer_commitments.append(root)
        self._reseed(root)

    def _reseed(self, data: bytes) -> None:
        self.state = self.hasher.hash(self.state + data)
        self.counter = 0

    # --- Squeeze ---

    def _next_bytes(self) -> Digest:
        self.counter += 1
        return self.hasher.hash(self.state + self.counter.to_bytes(8, "little"))

    def draw_challenge(self):
        """
        Draw a pseudorandom field element for the most recent commitment.

        Elements are sampled by rejection: the low bits of each squeezed digest
        are masked to the bit length of the field order and retried until the
        value is a canonical element.

        Raises:
            RuntimeError: If no commitment was absorbed since the last draw
        """
        if self.num_challenges >= len(self.layer_commitments):
            raise RuntimeError("a challenge cannot be drawn before the layer it binds to is committed")
        self.num_challenges += 1

        n_bytes = element_byte_length(self.field)
        mask = (1 << (self.field.order - 1).bit_length()) - 1
        while True:
            candidate = int.from_bytes(self._next_bytes()[:n_bytes], "little") & mask
            if candidate < self.field.order:
                return self.field(candidate)

    def draw_query_positions(self, num_queries: int, domain_size: int) -> List[int]:
        """
        Draw distinct pseudorandom positions in [0, domain_size).

        Args:
            num_queries: Number of positions to generate
            domain_size: Domain size (power of two)

        Returns:
            List of unique positions in the order they were drawn
        """
        if domain_size <= 0 or domain_size & (domain_size - 1) != 0:
            raise ValueError(f"domain_size must be a power of two, got {domain_size}")
        if num_queries <= 0 or num_queries > domain_size:
            raise ValueError(f"num_queries must be in [1, {domain_size}], got {num_queries}")

        mask = domain_size - 1
        positions: List[int] = []
        seen = set()
        while len(positions) < num_queries:
            value = int.from_bytes(self._next_bytes()[:8], "little") & mask
            if value not in seen:
                seen.add(value)
                positions.append(value)

        logger.debug("drew %d query positions over a domain of %d", num_queries, domain_size)
        return positions

    def get_state(self) -> Digest:
        """Return the current sponge state."""
        return self.state
