"""Tests for the hashlib-backed hasher."""

import hashlib

import pytest

from fri_prover.primitives.hashing import SUPPORTED_HASHES, Hasher


class TestHasher:

    @pytest.mark.parametrize("name", SUPPORTED_HASHES)
    def test_matches_hashlib(self, name: str) -> None:
        hasher = Hasher(name)
        assert hasher.hash(b"abc") == hashlib.new(name, b"abc").digest()
        assert hasher.merge(b"ab", b"c") == hasher.hash(b"abc")
        assert hasher.digest_size == 32

    def test_unknown_hash_rejected(self) -> None:
        with pytest.raises(ValueError):
            Hasher("md5")

    def test_elements_are_fixed_width(self, toy_field, hasher) -> None:
        """GF(257) elements take two little-endian bytes each."""
        row = toy_field([1, 256, 0, 7])
        expected = hasher.hash(b"\x01\x00" b"\x00\x01" b"\x00\x00" b"\x07\x00")
        assert hasher.hash_elements(row, toy_field) == expected

    def test_element_order_matters(self, goldilocks, hasher) -> None:
        a = hasher.hash_elements(goldilocks([1, 2, 3, 4]), goldilocks)
        b = hasher.hash_elements(goldilocks([4, 3, 2, 1]), goldilocks)
        assert a != b
