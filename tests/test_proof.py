"""Tests for FRI proof structure, size accounting and JSON export."""

import json

import numpy as np
import pytest

from fri_prover.primitives.transcript import ProverChannel
from fri_prover.protocol.options import FriOptions
from fri_prover.protocol.proof import FriProof, proof_from_json, proof_to_json
from fri_prover.protocol.prover import FriProver


def make_proof(field, folding_factor: int, max_remainder: int, n: int, positions) -> FriProof:
    options = FriOptions(folding_factor=folding_factor, max_remainder_size=max_remainder, field=field)
    prover = FriProver(options)
    prover.build_layers(ProverChannel(b"proof", field=field), field(list(range(n))))
    return prover.build_proof(positions)


class TestFriProof:
    """Shape and size of query-phase output."""

    def test_value_shapes(self, toy_field) -> None:
        proof = make_proof(toy_field, 4, 4, 64, [0, 17, 33, 63])
        assert proof.num_layers == 2
        # 64 -> rows [0, 1, 15] of 16; 16 -> rows [0, 1, 3] of 4
        assert proof.layers[0].values.shape == (3, 4)
        assert proof.layers[1].values.shape == (3, 4)
        assert proof.layers[0].merkle_proof.depth == 4
        assert proof.layers[1].merkle_proof.depth == 2

    def test_no_folding_rounds(self, toy_field) -> None:
        """A domain that already fits the remainder yields no proof layers."""
        proof = make_proof(toy_field, 4, 16, 16, [3])
        assert proof.num_layers == 0
        assert [int(v) for v in proof.remainder] == list(range(16))

    def test_size_in_bytes(self, toy_field) -> None:
        """Remainder and row values at 2 bytes each, plus one 32-byte sibling."""
        proof = make_proof(toy_field, 4, 4, 16, [0, 5, 9])
        assert proof.layers[0].merkle_proof.num_digests() == 1
        assert proof.size_in_bytes(toy_field) == 4 * 2 + 8 * 2 + 32

    def test_size_grows_with_field_width(self, toy_field) -> None:
        proof = make_proof(toy_field, 4, 4, 16, [0, 5, 9])
        assert proof.size_in_bytes(toy_field) < proof.size_in_bytes(FriOptions().field)


class TestProofJson:
    """JSON export and import."""

    @pytest.mark.parametrize("folding_factor,max_remainder,n", [(4, 4, 64), (8, 8, 64), (4, 16, 16)])
    def test_round_trip(self, toy_field, folding_factor: int, max_remainder: int, n: int) -> None:
        proof = make_proof(toy_field, folding_factor, max_remainder, n, [2, 11, n - 1])
        restored = proof_from_json(json.loads(json.dumps(proof_to_json(proof))), toy_field)

        assert restored.folding_factor == proof.folding_factor
        assert restored.num_layers == proof.num_layers
        assert np.array_equal(restored.remainder, proof.remainder)
        for ours, theirs in zip(restored.layers, proof.layers):
            assert np.array_equal(ours.values, theirs.values)
            assert ours.merkle_proof == theirs.merkle_proof

    def test_json_layout(self, toy_field) -> None:
        proof = make_proof(toy_field, 4, 4, 16, [0, 5, 9])
        data = proof_to_json(proof)

        assert data["foldingFactor"] == 4
        assert data["layers"][0]["values"][1] == ["1", "5", "9", "13"]
        assert data["layers"][0]["depth"] == 2
        assert [len(level) for level in data["layers"][0]["nodes"]] == [0, 1]
        assert data["remainder"] == [str(int(v)) for v in proof.remainder]
