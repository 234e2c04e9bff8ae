"""
Field Configurations for STARK Arithmetic.

This module defines the constants that pin down a prime field: the modulus
and a generator of its multiplicative group. Nothing here is computed; the
generator is stored for downstream protocols (evaluation domains, cosets)
that need one.

Predefined Fields:
    - STARK field: p = 3 * 2^30 + 1 (fits in 32 bits, 2-adicity 30)
    - Small test field: p = 97 (easy to verify by hand)
    - Goldilocks: p = 2^64 - 2^32 + 1 (fast on 64-bit CPUs)

Example:
    >>> config = create_stark_config()
    >>> config.modulus
    3221225473
    >>> config.bits
    32
"""

from __future__ import annotations
from dataclasses import dataclass


STARK_MODULUS = 3 * (1 << 30) + 1
STARK_GENERATOR = 5

SMALL_TEST_MODULUS = 97
SMALL_TEST_GENERATOR = 5

GOLDILOCKS_MODULUS = (1 << 64) - (1 << 32) + 1
GOLDILOCKS_GENERATOR = 7


@dataclass(frozen=True)
class FieldConfig:
    """
    Constants describing one prime field.

    Attributes:
        name: Label used in reprs and demo output
        modulus: The prime modulus p (primality is not checked)
        generator: Generator of the multiplicative group, 0 <= g < p

    Example:
        >>> FieldConfig(name="tiny", modulus=17, generator=3)
        FieldConfig(name='tiny', modulus=17, generator=3)
    """

    name: str = "stark"
    modulus: int = STARK_MODULUS
    generator: int = STARK_GENERATOR

    def __post_init__(self):
        """Validate configuration."""
        if self.modulus < 2:
            raise ValueError("modulus must be at least 2")
        if not 0 <= self.generator < self.modulus:
            raise ValueError(
                f"generator must lie in [0, {self.modulus}), got {self.generator}"
            )

    @property
    def bits(self) -> int:
        """Bit length of the modulus."""
        return self.modulus.bit_length()

    def summary(self) -> str:
        """Return configuration summary string."""
        return (
            f"FieldConfig '{self.name}':\n"
            f"  Modulus: {self.modulus} ({self.bits} bits)\n"
            f"  Generator: {self.generator}"
        )


# =============================================================================
# PREDEFINED CONFIGURATIONS
# =============================================================================

def create_stark_config() -> FieldConfig:
    """
    The default STARK field, p = 3 * 2^30 + 1.

    p - 1 = 3 * 2^30, so the field has multiplicative subgroups of every
    power-of-two order up to 2^30.
    """
    return FieldConfig(name="stark", modulus=STARK_MODULUS, generator=STARK_GENERATOR)


def create_small_test_config() -> FieldConfig:
    """Tiny field for hand-checkable examples."""
    return FieldConfig(
        name="small-test",
        modulus=SMALL_TEST_MODULUS,
        generator=SMALL_TEST_GENERATOR,
    )


def create_goldilocks_config() -> FieldConfig:
    """
    Goldilocks field, p = 2^64 - 2^32 + 1.

    Products of two residues no longer fit in 64 bits, so vectorized
    evaluation falls back to Python integers for this field.
    """
    return FieldConfig(
        name="goldilocks",
        modulus=GOLDILOCKS_MODULUS,
        generator=GOLDILOCKS_GENERATOR,
    )
