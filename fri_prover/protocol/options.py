"""FRI protocol options."""

from dataclasses import dataclass, field as dataclass_field
from typing import Any, Optional

from ..primitives.field import FF, FieldType


def _is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


@dataclass
class FriOptions:
    """
    FRI parameters shared by the prover and the surrounding protocol.

    Attributes:
        folding_factor: Number of evaluations combined into one per round
        max_remainder_size: Largest evaluation vector sent directly as the remainder
        blowup_factor: Low-degree extension blowup of the committed domain
        field: galois field class all evaluations belong to
        domain_offset: Coset shift of the evaluation domain; defaults to the
            field's primitive element
    """
    folding_factor: int = 4
    max_remainder_size: int = 256
    blowup_factor: int = 8
    field: FieldType = FF
    domain_offset: Optional[Any] = dataclass_field(default=None)

    def __post_init__(self) -> None:
        if not _is_power_of_two(self.folding_factor) or self.folding_factor < 2:
            raise ValueError(f"folding_factor must be a power of two >= 2, got {self.folding_factor}")
        if not _is_power_of_two(self.max_remainder_size):
            raise ValueError(f"max_remainder_size must be a power of two, got {self.max_remainder_size}")
        if self.max_remainder_size < self.folding_factor:
            raise ValueError(
                f"max_remainder_size ({self.max_remainder_size}) cannot be smaller than "
                f"folding_factor ({self.folding_factor})"
            )
        if not _is_power_of_two(self.blowup_factor):
            raise ValueError(f"blowup_factor must be a power of two, got {self.blowup_factor}")

        if self.domain_offset is None:
            self.domain_offset = self.field.primitive_element
        else:
            self.domain_offset = self.field(int(self.domain_offset))
        if self.domain_offset == 0:
            raise ValueError("domain_offset must be nonzero")

    def num_fri_layers(self, domain_size: int) -> int:
        """Number of folding rounds before domain_size fits into the remainder."""
        result = 0
        while domain_size > self.max_remainder_size:
            domain_size //= self.folding_factor
            result += 1
        return result

    def remainder_size(self, domain_size: int) -> int:
        """Length of the remainder layer for an initial domain of domain_size."""
        return domain_size // self.folding_factor ** self.num_fri_layers(domain_size)
