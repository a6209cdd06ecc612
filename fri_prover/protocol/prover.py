"""FRI prover: commit phase (layer building) and query phase (proof extraction)."""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..primitives.field import get_root_of_unity, is_field_array
from ..primitives.hashing import Digest, Hasher
from ..primitives.merkle_tree import MerkleTree
from ..primitives.transcript import ProverChannel
from .folding import apply_drp, fold_positions, transpose_evaluations, untranspose_evaluations
from .options import FriOptions
from .proof import FriProof, FriProofLayer

logger = logging.getLogger(__name__)

SUPPORTED_FOLDING_FACTORS = (4, 8, 16)


# --- Layers ---

@dataclass
class FriLayer:
    """One committed round: Merkle tree over rows and the transposed evaluations.

    evaluations is flattened row-major; row i (leaf i) is
    evaluations[i * F:(i + 1) * F].
    """
    tree: MerkleTree
    evaluations: np.ndarray

    def rows(self, folding_factor: int) -> np.ndarray:
        return self.evaluations.reshape(-1, folding_factor)


def hash_values(rows: np.ndarray, hasher: Hasher) -> List[Digest]:
    """Hash each row of a transposed layer into a Merkle leaf."""
    field = type(rows)
    return [hasher.hash_elements(row, field) for row in rows]


def query_layer(layer: FriLayer, positions: Sequence[int], folding_factor: int) -> FriProofLayer:
    """
    Build a proof layer by querying a committed layer at row positions.

    Since evaluations are stored transposed, a position refers to the
    folding_factor values committed in a single leaf.
    """
    proof = layer.tree.prove_batch(positions)
    values = layer.rows(folding_factor)[list(positions)]
    return FriProofLayer(values=values, merkle_proof=proof)


# --- Prover ---

class FriProver:
    """
    FRI prover.

    Usage:
        prover = FriProver(FriOptions(folding_factor=4, max_remainder_size=16))
        prover.build_layers(channel, evaluations)
        proof = prover.build_proof(positions)

    The prover holds its layers between build_layers() and build_proof();
    build_proof() (or reset()) returns it to the idle state.
    """

    def __init__(self, options: FriOptions, hasher: Optional[Hasher] = None):
        self.options = options
        self.hasher = hasher or Hasher()
        self._layers: List[FriLayer] = []

    # --- Accessors ---

    @property
    def folding_factor(self) -> int:
        return self.options.folding_factor

    @property
    def domain_offset(self):
        """Offset of the domain the first layer is evaluated over."""
        return self.options.domain_offset

    @property
    def layers(self) -> Tuple[FriLayer, ...]:
        return tuple(self._layers)

    def num_layers(self) -> int:
        """Number of layers built by the last build_layers() call (0 when idle)."""
        return len(self._layers)

    def reset(self) -> None:
        """Drop all stored layers."""
        self._layers.clear()

    # --- Commit Phase ---

    def build_layers(self, channel: ProverChannel, evaluations) -> None:
        """
        Execute the commit phase.

        The degree of the function implied by evaluations is reduced by
        folding_factor at every round until the remaining evaluations fit into
        max_remainder_size. Each round's evaluations are committed to with a
        Merkle tree whose root is absorbed by the channel before the round's
        folding challenge is drawn.

        Args:
            channel: Fiat-Shamir channel receiving commitments and producing challenges
            evaluations: Evaluations over the full domain (options.field elements)

        Raises:
            RuntimeError: If layers from a previous cycle are still held
            NotImplementedError: If the folding factor is not supported
            TypeError: If evaluations belong to a different field
            ValueError: If the evaluation count does not fit the options or
                has no matching root of unity in options.field
        """
        if self._layers:
            raise RuntimeError("a prior proof generation request has not been completed yet")

        evaluations = self._check_evaluations(evaluations)
        num_rounds = self.options.num_fri_layers(len(evaluations)) + 1
        folding_factor = self.folding_factor
        if len(evaluations) % folding_factor ** num_rounds != 0:
            raise ValueError(
                f"{len(evaluations)} evaluations cannot be folded {num_rounds} times "
                f"by a factor of {folding_factor}"
            )

        logger.debug(
            "building %d FRI layers for %d evaluations (folding factor %d)",
            num_rounds, len(evaluations), folding_factor,
        )

        # reduce the degree by folding_factor at each round; + 1 is for the remainder
        domain_offset = self.domain_offset
        for _ in range(num_rounds):
            evaluations = self._build_layer(channel, evaluations, domain_offset)
            domain_offset = domain_offset ** folding_factor

        remainder_size = len(self._layers[-1].evaluations)
        assert remainder_size <= self.options.max_remainder_size, (
            f"last FRI layer cannot exceed {self.options.max_remainder_size} elements, "
            f"but was {remainder_size} elements"
        )
        assert remainder_size % folding_factor == 0, (
            f"last FRI layer must be a multiple of {folding_factor} elements, "
            f"but was {remainder_size} elements"
        )

    def _build_layer(self, channel: ProverChannel, evaluations, domain_offset):
        """Commit to one layer, draw its challenge and return the folded evaluations."""
        if self.folding_factor not in SUPPORTED_FOLDING_FACTORS:
            raise NotImplementedError(f"folding factor {self.folding_factor} is not supported")

        # commit by transposing into rows of folding_factor values and hashing
        # each row into a leaf, so that all values folded together open with
        # a single authentication path
        transposed = transpose_evaluations(evaluations, self.folding_factor)
        tree = MerkleTree(hash_values(transposed, self.hasher), self.hasher)
        channel.commit(tree.get_root())

        # the challenge is drawn only after the commitment it binds to
        alpha = channel.draw_challenge()
        folded = apply_drp(transposed, domain_offset, alpha)

        self._layers.append(FriLayer(tree=tree, evaluations=transposed.reshape(-1)))
        logger.debug(
            "committed FRI layer %d: %d evaluations, root %s",
            len(self._layers) - 1, len(evaluations), tree.get_root().hex()[:16],
        )
        return folded

    def _check_evaluations(self, evaluations):
        field = self.options.field
        if is_field_array(evaluations):
            if type(evaluations) is not field:
                raise TypeError(
                    f"evaluations belong to {type(evaluations).name}, expected {field.name}"
                )
        else:
            evaluations = field(evaluations)

        if evaluations.ndim != 1:
            raise ValueError(f"evaluations must be one-dimensional, got shape {evaluations.shape}")
        n = len(evaluations)
        if n == 0 or n & (n - 1) != 0:
            raise ValueError(f"number of evaluations must be a power of two, got {n}")
        # every later domain divides this one, so one root check covers all rounds
        get_root_of_unity(field, n)
        return evaluations

    # --- Query Phase ---

    def build_proof(self, positions: Sequence[int]) -> FriProof:
        """
        Execute the query phase.

        For every layer but the last, the positions are folded into the
        layer's row space and the layer is opened there with one batched
        Merkle proof. The last layer is sent directly as the remainder. The
        stored layers are cleared afterwards.

        Args:
            positions: Query positions in the first layer's domain

        Raises:
            RuntimeError: If build_layers() has not been run
            ValueError: If positions is empty or a position is outside the
                first layer's domain
        """
        if not self._layers:
            raise RuntimeError("FRI layers have not been built yet")
        if len(positions) == 0:
            raise ValueError("at least one query position is required")

        domain_size = len(self._layers[0].evaluations)
        bad = [p for p in positions if p < 0 or p >= domain_size]
        if bad:
            raise ValueError(f"query positions {bad} out of range [0, {domain_size})")

        folding_factor = self.folding_factor
        positions = list(positions)
        layers: List[FriProofLayer] = []
        for layer in self._layers[:-1]:
            positions = fold_positions(positions, domain_size, folding_factor)
            layers.append(query_layer(layer, positions, folding_factor))
            domain_size //= folding_factor

        # last layer values hold the remainder in transposed form
        remainder = untranspose_evaluations(self._layers[-1].evaluations, folding_factor)

        logger.debug(
            "built FRI proof: %d layers queried, remainder of %d elements",
            len(layers), len(remainder),
        )

        # clear layers so that another proof can be generated
        self.reset()

        return FriProof(layers=layers, remainder=remainder, folding_factor=folding_factor)
