"""Polynomial helpers for building low-degree test inputs."""

import galois

from fri_prover.primitives.field import get_root_of_unity, powers

# Toy field: 256 = 2^8 divides p - 1, so domains up to 256 points exist
TOY_PRIME = 257
GF257 = galois.GF(TOY_PRIME)


def coset_domain(field, offset, n: int):
    """Return offset * <g> in natural order, g a primitive n-th root of unity."""
    return powers(get_root_of_unity(field, n), n) * field(int(offset))


def evaluate_on_coset(poly: galois.Poly, offset, n: int):
    """Evaluate poly over offset * <g> where g is a primitive n-th root of unity."""
    return poly(coset_domain(poly.field, offset, n))


def random_poly(field, degree_bound: int, seed: int = 0) -> galois.Poly:
    """Random polynomial of degree < degree_bound."""
    coeffs = field.Random(degree_bound, seed=seed)
    return galois.Poly(coeffs, field=field, order="asc")


def fold_poly(poly: galois.Poly, folding_factor: int, alpha) -> galois.Poly:
    """Reference fold: sum_t alpha^t f_t(x) where f(x) = sum_t x^t f_t(x^F)."""
    field = poly.field
    coeffs = list(poly.coeffs[::-1])  # ascending
    n_out = (len(coeffs) + folding_factor - 1) // folding_factor
    alpha_powers = powers(field(int(alpha)), folding_factor)
    folded = field.Zeros(max(n_out, 1))
    for k, c in enumerate(coeffs):
        folded[k // folding_factor] = folded[k // folding_factor] + c * alpha_powers[k % folding_factor]
    return galois.Poly(folded, field=field, order="asc")


def interpolate(field, xs, ys) -> galois.Poly:
    """Lagrange interpolation through (xs, ys)."""
    return galois.lagrange_poly(field(xs), field(ys))
