"""Prime fields for FRI using the galois library.

FF is the Goldilocks field used by default. Any galois prime field class can be
used instead; the class itself is the field tag carried through the prover.
"""

from typing import Type

import galois
import numpy as np

# --- Field Construction ---

GOLDILOCKS_PRIME = 0xFFFFFFFF00000001

FF = galois.GF(GOLDILOCKS_PRIME)
"""Base field GF(p) - Goldilocks prime field."""

FieldType = Type[galois.FieldArray]


def is_field_array(values) -> bool:
    """Return True if values is a galois FieldArray (of any field)."""
    return isinstance(values, galois.FieldArray)


def element_byte_length(field: FieldType) -> int:
    """Number of bytes needed to encode one element of field."""
    return ((field.order - 1).bit_length() + 7) // 8


# --- Roots of Unity ---

def get_root_of_unity(field: FieldType, n: int):
    """
    Get a primitive n-th root of unity in field.

    The root is derived from the field's primitive element, so roots for
    nested power-of-two sizes are consistent: get_root_of_unity(field, n) ** k
    equals get_root_of_unity(field, n // k).

    Args:
        field: galois prime field class
        n: Order of the root (must divide order - 1)

    Returns:
        A primitive n-th root of unity
    """
    if n <= 0 or (field.order - 1) % n != 0:
        raise ValueError(f"field of order {field.order} has no primitive {n}-th root of unity")
    return field.primitive_element ** ((field.order - 1) // n)


def powers(base, n: int) -> np.ndarray:
    """Return [1, base, base^2, ..., base^(n-1)] as a field array."""
    field = type(base)
    result = field.Ones(n)
    for i in range(1, n):
        result[i] = result[i - 1] * base
    return result


# --- Batch Inversion ---

def batch_inverse(values):
    """Invert every element of a field array using a single field inversion.

    prefix[i] holds the product of the first i values; walking back from the
    inverse of the full product peels one factor off per element.

    Raises:
        ZeroDivisionError: If any element is zero
    """
    field = type(values)
    n = len(values)
    prefix = field.Ones(n + 1)
    for i in range(n):
        prefix[i + 1] = prefix[i] * values[i]
    if prefix[n] == 0:
        raise ZeroDivisionError("cannot invert a zero field element")

    acc = prefix[n] ** -1
    result = field.Zeros(n)
    for i in range(n - 1, -1, -1):
        result[i] = acc * prefix[i]
        acc = acc * values[i]
    return result
