"""
Finite Field Arithmetic for STARK Computations.

This module implements modular arithmetic over prime fields, which is the
foundation of polynomial commitments and STARK arithmetization. The default
field uses p = 3 * 2^30 + 1, a 32-bit prime whose multiplicative group has
a subgroup of order 2^30.

Key Concepts:
    - All arithmetic is done modulo a prime p
    - Addition: (a + b) mod p
    - Multiplication: (a * b) mod p
    - Subtraction: (a - b) mod p (Euclidean, never negative)
    - Division: a * b^(-1) mod p (multiply by modular inverse)
    - Inversion: Find b such that a * b = 1 mod p (extended Euclid)

Field Identity:
    A FieldElement keeps a reference to the PrimeField that created it.
    Two fields are the same field only if they are the same object:
    PrimeField(97) and another PrimeField(97) do not mix. Operations across
    fields raise CrossFieldError instead of silently coercing.

Example:
    >>> field = PrimeField(97)
    >>> a = field.new_element(45)
    >>> b = field.new_element(67)
    >>> a + b  # (45 + 67) mod 97 = 15
    FieldElement(15, mod 97)
    >>> field.new_element(-1)
    FieldElement(96, mod 97)
"""

from __future__ import annotations
from dataclasses import dataclass, field as dataclass_field
from operator import index
from typing import Iterable, List, Union
import logging
import random

import numpy as np

from .config import FieldConfig, STARK_GENERATOR, create_stark_config
from .errors import (
    CrossFieldError,
    FieldDivisionByZeroError,
    InversePostconditionError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class FieldElement:
    """
    An element of a prime field Z_p.

    Elements are immutable values. Every operation returns a new element,
    reduced into [0, p).

    Attributes:
        value: The canonical residue (always in range [0, p-1])
        field: Reference to the parent PrimeField

    Example:
        >>> field = PrimeField(97)
        >>> a = FieldElement(45, field)
        >>> b = FieldElement(67, field)
        >>> print(a * b)  # 45 * 67 = 3015 → 3015 mod 97 = 7
        7
    """
    value: int
    field: "PrimeField"

    def __post_init__(self):
        """Ensure value is reduced modulo p."""
        # Python's % is floored, so negative inputs land in [0, p) too
        object.__setattr__(self, "value", index(self.value) % self.field.modulus)

    def __repr__(self) -> str:
        return f"FieldElement({self.value}, mod {self.field.modulus})"

    def __str__(self) -> str:
        return str(self.value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FieldElement):
            return self.field is other.field and self.value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.value, id(self.field)))

    def __int__(self) -> int:
        return self.value

    def __bool__(self) -> bool:
        return self.value != 0

    def _coerce(self, other: Union[FieldElement, int]) -> FieldElement:
        """Return ``other`` as an element of this field, rejecting foreign elements."""
        if isinstance(other, FieldElement):
            if other.field is not self.field:
                raise CrossFieldError(
                    f"Cross-field operation: {self.field!r} and {other.field!r} "
                    f"are different fields"
                )
            return other
        return self.field.new_element(other)

    # Arithmetic Operations

    def add(self, other: Union[FieldElement, int]) -> FieldElement:
        """Addition in the field: (a + b) mod p"""
        other = self._coerce(other)
        return FieldElement(self.value + other.value, self.field)

    def sub(self, other: Union[FieldElement, int]) -> FieldElement:
        """Subtraction in the field: (a - b) mod p"""
        other = self._coerce(other)
        return FieldElement(self.value - other.value, self.field)

    def neg(self) -> FieldElement:
        """Negation: (0 - a) mod p"""
        return FieldElement(self.field.zero_value - self.value, self.field)

    def mul(self, other: Union[FieldElement, int]) -> FieldElement:
        """
        Multiplication in the field: (a * b) mod p

        Python integers are unbounded, so the full product is formed before
        it is reduced.
        """
        other = self._coerce(other)
        return FieldElement(self.value * other.value, self.field)

    def div(self, other: Union[FieldElement, int]) -> FieldElement:
        """Division in the field: a * b^(-1) mod p"""
        other = self._coerce(other)
        return self.mul(other.inverse())

    def pow(self, exp: int) -> FieldElement:
        """
        Exponentiation using square-and-multiply.

        Time complexity: O(log exp) multiplications. ``x ** 0`` is one for
        every x, including zero.

        A negative exponent computes (a^(-1))^n, so it fails for zero.
        """
        exp = index(exp)
        if exp < 0:
            return self.inverse().pow(-exp)

        result = self.field.one()
        base = self

        while exp > 0:
            if exp & 1:  # If least significant bit is 1
                result = result.mul(base)
            base = base.mul(base)
            exp >>= 1

        return result

    def inverse(self) -> FieldElement:
        """
        Compute modular inverse using Extended Euclidean Algorithm.

        Finds b such that a * b ≡ 1 (mod p) by tracking the Bézout
        coefficient of ``value`` over the remainder sequence of (p, value).

        Raises:
            FieldDivisionByZeroError: If self.value is 0 (no inverse exists)
            InversePostconditionError: If the result is not an inverse,
                which means the modulus is not prime

        Returns:
            FieldElement b such that self * b = 1
        """
        if self.value == 0:
            raise FieldDivisionByZeroError("Cannot invert zero")

        modulus = self.field.modulus
        t, new_t = 0, 1
        r, new_r = modulus, self.value

        while new_r != 0:
            quotient = r // new_r
            t, new_t = new_t, t - quotient * new_t
            r, new_r = new_r, r - quotient * new_r

        if r != 1:
            raise InversePostconditionError(
                f"No inverse of {self.value} exists (gcd = {r}); "
                f"modulus {modulus} is not prime"
            )

        inverse = FieldElement(t, self.field)
        if (self.value * inverse.value) % modulus != 1:
            raise InversePostconditionError(
                f"{self.value} * {inverse.value} is not 1 mod {modulus}"
            )
        return inverse

    def is_zero(self) -> bool:
        """Check if this element is zero."""
        return self.value == self.field.zero_value

    def is_one(self) -> bool:
        """Check if this element is one."""
        return self.value == self.field.one_value

    # Operator overloads delegate to the named methods

    def __add__(self, other):
        if not isinstance(other, (FieldElement, int)):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, (FieldElement, int)):
            return NotImplemented
        return self.sub(other)

    def __rsub__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return self.field.new_element(other).sub(self)

    def __mul__(self, other):
        if not isinstance(other, (FieldElement, int)):
            return NotImplemented
        return self.mul(other)

    def __rmul__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return self.mul(other)

    def __truediv__(self, other):
        if not isinstance(other, (FieldElement, int)):
            return NotImplemented
        return self.div(other)

    def __rtruediv__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return self.field.new_element(other).div(self)

    def __neg__(self) -> FieldElement:
        return self.neg()

    def __pow__(self, exp: int) -> FieldElement:
        return self.pow(exp)


@dataclass(frozen=True, eq=False)
class PrimeField:
    """
    A prime field Z_p for modular arithmetic.

    This class represents the mathematical structure where all STARK
    computations take place. It provides factory methods for creating
    field elements. Fields are immutable and compared by identity, so one
    instance can be shared freely, across threads as well.

    Attributes:
        modulus: The prime modulus p
        generator_value: Generator of the multiplicative group (stored, not computed).
            Defaults to 5, so moduli of 5 or less must pass it explicitly.
        name: Label used in demo output
        zero_value: The additive identity, 0
        one_value: The multiplicative identity, 1

    Example:
        >>> field = PrimeField(97)
        >>> a = field.new_element(45)
        >>> b = field.random()
        >>> field.generator()
        FieldElement(5, mod 97)
    """

    modulus: int
    generator_value: int = STARK_GENERATOR
    name: str = "custom"
    zero_value: int = dataclass_field(default=0, init=False)
    one_value: int = dataclass_field(default=1, init=False)

    def __post_init__(self):
        """
        Validate the field constants.

        The modulus should be prime for correct behavior. Primality is not
        verified; a composite modulus surfaces as InversePostconditionError
        the first time a non-invertible element is inverted.
        """
        if self.modulus < 2:
            raise ValueError("Modulus must be at least 2")
        for label, value in (("zero", self.zero_value), ("one", self.one_value),
                             ("generator", self.generator_value)):
            if not 0 <= value < self.modulus:
                raise ValueError(
                    f"{label} must lie in [0, {self.modulus}), got {value}"
                )
        logger.debug("Created field %s with modulus %d", self.name, self.modulus)

    @classmethod
    def from_config(cls, config: FieldConfig) -> PrimeField:
        """Build a field from a FieldConfig."""
        return cls(config.modulus, generator_value=config.generator, name=config.name)

    def __repr__(self) -> str:
        return f"PrimeField({self.modulus})"

    def new_element(self, value: int) -> FieldElement:
        """
        Create a field element from any integer.

        Negative inputs are reduced into the same residue class as their
        positive counterparts: new_element(-1) is p - 1.
        """
        return FieldElement(value, self)

    element = new_element

    def new_elements(self, values: Union[Iterable[int], np.ndarray]) -> List[FieldElement]:
        """
        Reduce a batch of integers into field elements.

        Integer numpy arrays are reduced with ``np.mod`` (floored, so never
        negative). Any other iterable, an object array of Python integers,
        or an array whose dtype cannot hold the modulus goes through an
        object array of Python integers. Float and bool arrays raise
        ``TypeError``.

        Example:
            >>> field = PrimeField(97)
            >>> [e.value for e in field.new_elements(np.array([-1, 98, 5]))]
            [96, 1, 5]
        """
        if isinstance(values, np.ndarray):
            if values.dtype.kind == "O":
                reduced = np.array([index(v) for v in values.ravel()], dtype=object) % self.modulus
            elif values.dtype.kind not in "iu":
                raise TypeError(f"Expected an integer array, got dtype {values.dtype}")
            elif self.modulus <= np.iinfo(values.dtype).max:
                reduced = np.mod(values, values.dtype.type(self.modulus))
            else:
                reduced = values.astype(object) % self.modulus
        else:
            reduced = np.array([index(v) for v in values], dtype=object) % self.modulus
        return [FieldElement(int(v), self) for v in reduced.ravel()]

    def zero(self) -> FieldElement:
        """Return the additive identity (0)."""
        return FieldElement(self.zero_value, self)

    def one(self) -> FieldElement:
        """Return the multiplicative identity (1)."""
        return FieldElement(self.one_value, self)

    def generator(self) -> FieldElement:
        """Return the stored multiplicative generator."""
        return FieldElement(self.generator_value, self)

    def random(self, exclude_zero: bool = False) -> FieldElement:
        """
        Generate a random field element.

        Args:
            exclude_zero: If True, never returns zero (useful for testing inverses)

        Returns:
            A random FieldElement in [0, p-1] or [1, p-1]
        """
        if exclude_zero:
            return FieldElement(random.randint(1, self.modulus - 1), self)
        return FieldElement(random.randint(0, self.modulus - 1), self)

    @property
    def accumulator_dtype(self):
        """
        Numpy dtype wide enough for one unreduced product plus the modulus.

        For p = 3 * 2^30 + 1, (p-1)^2 + p is below 2^64 and uint64 suffices.
        Larger moduli (Goldilocks, 255-bit curves) fall back to Python
        integers in an object array.
        """
        if (self.modulus - 1) ** 2 + self.modulus < (1 << 64):
            return np.uint64
        return object


class BatchInverter:
    """
    Batch modular inversion using Montgomery's trick.

    Computing n inverses costs 1 inversion plus 3(n-1) multiplications
    instead of n inversions.

    Algorithm:
        1. Compute partial products: P[i] = a[0] * a[1] * ... * a[i]
        2. Invert final product: I = P[n-1]^(-1)
        3. Recover individual inverses by "peeling off" elements

    Example:
        >>> field = PrimeField(97)
        >>> inverter = BatchInverter(field)
        >>> elements = [field.new_element(i) for i in range(1, 11)]
        >>> inverses = inverter.invert_batch(elements)
        >>> all((e * inv).is_one() for e, inv in zip(elements, inverses))
        True
    """

    def __init__(self, field: PrimeField):
        """
        Initialize batch inverter.

        Args:
            field: The prime field to operate in
        """
        self.field = field

    def invert_batch(self, elements: List[FieldElement]) -> List[FieldElement]:
        """
        Compute inverses of all elements in a batch.

        Args:
            elements: List of field elements to invert

        Returns:
            List of inverses in the same order

        Raises:
            CrossFieldError: If an element is not from this inverter's field
            FieldDivisionByZeroError: If any element is zero
        """
        if not elements:
            return []

        n = len(elements)

        for i, e in enumerate(elements):
            if e.field is not self.field:
                raise CrossFieldError(f"Element {i} is not from {self.field!r}")
            if e.is_zero():
                raise FieldDivisionByZeroError(f"Cannot invert zero (element {i})")

        # products[i] = elements[0] * elements[1] * ... * elements[i]
        products = [elements[0]]
        for i in range(1, n):
            products.append(products[i - 1] * elements[i])

        inv = products[n - 1].inverse()

        inverses = [self.field.zero()] * n
        for i in range(n - 1, 0, -1):
            # inv = (a[0]*...*a[i])^(-1), so inv * products[i-1] = a[i]^(-1)
            inverses[i] = inv * products[i - 1]
            inv = inv * elements[i]

        inverses[0] = inv

        return inverses

    def invert_batch_raw(self, values: Iterable[int]) -> List[int]:
        """
        Batch inversion on raw integers.

        Args:
            values: Integers to invert (must be non-zero mod p)

        Returns:
            List of inverse integers
        """
        inverses = self.invert_batch(self.field.new_elements(values))
        return [inv.value for inv in inverses]


def create_stark_field() -> PrimeField:
    """The default STARK field, p = 3 * 2^30 + 1 with generator 5."""
    return PrimeField.from_config(create_stark_config())


# Example usage
if __name__ == "__main__":
    print("=" * 60)
    print("FINITE FIELD ARITHMETIC DEMO")
    print("=" * 60)

    field = create_stark_field()
    print(f"\nField: Z_{field.modulus}")

    a = field.new_element(-317544001)
    b = field.new_element(12)
    print(f"\na = {a.value}, b = {b.value}")
    print(f"a + b = {(a + b).value}")
    print(f"a - b = {(a - b).value}")
    print(f"a * b = {(a * b).value}")
    print(f"a^(-1) = {a.inverse().value}")
    print(f"2^30 * 3 + 1 = {(field.new_element(2) ** 30 * 3 + 1).value}")
