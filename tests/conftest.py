"""Shared fixtures for fri_prover tests."""

import pytest

from fri_prover.primitives.field import FF
from fri_prover.primitives.hashing import Hasher
from tests.polys import GF257


@pytest.fixture
def toy_field():
    return GF257


@pytest.fixture
def goldilocks():
    return FF


@pytest.fixture
def hasher() -> Hasher:
    return Hasher("sha3_256")
