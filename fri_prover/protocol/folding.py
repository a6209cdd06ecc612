"""FRI folding: degree-respecting projection and evaluation layout helpers."""

from functools import lru_cache
from typing import Iterable, List

import numpy as np

from ..primitives.field import FieldType, batch_inverse, get_root_of_unity, powers

# --- Layout ---

def transpose_evaluations(values: np.ndarray, folding_factor: int) -> np.ndarray:
    """Reshape evaluations into rows of folding_factor elements.

    Row i gathers positions i, i + rows, i + 2*rows, ... so the values that
    fold into one element of the next layer share a single Merkle leaf.

    Returns:
        Field array of shape (len(values) // folding_factor, folding_factor)
    """
    n = len(values)
    if n % folding_factor != 0:
        raise ValueError(f"{n} evaluations cannot be split into rows of {folding_factor}")
    rows = n // folding_factor
    return values.reshape(folding_factor, rows).T.copy()


def untranspose_evaluations(values: np.ndarray, folding_factor: int) -> np.ndarray:
    """Restore natural order from a flattened transposed buffer.

    Transposed index i * folding_factor + j maps to natural index i + n * j,
    where n = len(values) // folding_factor.
    """
    n = len(values) // folding_factor
    return values.reshape(n, folding_factor).T.reshape(-1)


# --- Positions ---

def fold_positions(positions: Iterable[int], domain_size: int, folding_factor: int) -> List[int]:
    """Map positions in a domain of domain_size to rows of the folded domain.

    Returns:
        Sorted, de-duplicated row indexes in [0, domain_size // folding_factor)
    """
    target = domain_size // folding_factor
    return sorted({int(p) % target for p in positions})


# --- Degree-Respecting Projection ---

@lru_cache(maxsize=None)
def _inv_dft_matrix(field: FieldType, n: int) -> np.ndarray:
    """Inverse DFT matrix of size n: m[j, t] = w^(-j*t) / n."""
    w_inv = get_root_of_unity(field, n) ** -1
    n_inv = field(n % field.characteristic) ** -1
    m = field.Zeros((n, n))
    for j in range(n):
        m[j, :] = powers(w_inv ** j, n) * n_inv
    return m


def interpolate_rows(rows: np.ndarray) -> np.ndarray:
    """Convert each row of evaluations over <w> into polynomial coefficients."""
    field = type(rows)
    height, width = rows.shape
    m = _inv_dft_matrix(field, width)
    coeffs = field.Zeros((height, width))
    for t in range(width):
        acc = field.Zeros(height)
        for j in range(width):
            acc = acc + rows[:, j] * m[j, t]
        coeffs[:, t] = acc
    return coeffs


def apply_drp(rows: np.ndarray, domain_offset, alpha) -> np.ndarray:
    """
    Fold each row of evaluations into a single value using challenge alpha.

    Row i holds f(x_i * w^j) for j in [0, F), where x_i = domain_offset * g^i,
    g is a primitive (rows * F)-th root of unity and w = g^rows. Writing
    f(x) = sum_t x^t f_t(x^F), the row interpolates to c_t = x_i^t f_t(x_i^F)
    and the folded value is sum_t alpha^t f_t(x_i^F) = sum_t c_t (alpha / x_i)^t.

    The folded vector is the evaluation of a polynomial of degree < deg(f) / F
    over the domain domain_offset^F * <g^F>.

    Args:
        rows: Field array of shape (R, F)
        domain_offset: Coset shift of the domain the rows were evaluated on
        alpha: Folding challenge

    Returns:
        Field array of length R
    """
    field = type(rows)
    height, width = rows.shape
    coeffs = interpolate_rows(rows)

    # row points x_i = domain_offset * g^i, inverted together
    g = get_root_of_unity(field, height * width)
    x = powers(g, height) * field(int(domain_offset))
    z = batch_inverse(x) * field(int(alpha))

    # Horner evaluation of every row polynomial at its own point z_i
    result = coeffs[:, width - 1].copy()
    for t in range(width - 2, -1, -1):
        result = result * z + coeffs[:, t]
    return result
