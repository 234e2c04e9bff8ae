"""
Univariate Polynomials over a Prime Field.

This module provides the polynomial layer used by STARK-style
arithmetization: trace polynomials are interpolated from execution traces,
composed with transition constraints, and divided by vanishing polynomials.

Representation:
    A polynomial is a tuple of FieldElement coefficients in ascending power
    order: coefficients[i] multiplies x^i. The tuple never ends in a zero,
    so the zero polynomial is the empty tuple and has degree -1.

    p(x) = 1 + 2x + 3x^2   <->   (1, 2, 3)

Operations:
    - Ring operations: add, sub, neg, mul (schoolbook convolution)
    - Euclidean division: divide_with_remainder, exact_divide
    - Composition: compose(p, q) = p(q(x)) via Horner's rule
    - Construction: identity (x), monomial, constant, interpolate (Lagrange)
    - Evaluation: evaluate at one point, evaluate_many over a numpy batch

Every binary operation requires both operands to share the same PrimeField
instance and the same indeterminate label.

Example:
    >>> field = PrimeField(97)
    >>> p = Polynomial.from_values([1, 2, 3], field)
    >>> q = Polynomial.from_values([2, 3, 4, 5, 6], field)
    >>> print(p + q)
    3 + 5x + 7x^2 + 5x^3 + 6x^4
"""

from __future__ import annotations
from operator import index
from typing import Iterable, Iterator, List, Sequence, Tuple, Union
import logging

import numpy as np

from .errors import (
    CrossFieldError,
    DuplicateSamplePointError,
    EmptySampleSetError,
    MixedFieldCoefficientsError,
    MixedFieldSamplesError,
    NotEvenlyDivisibleError,
    PolynomialDivisionByZeroError,
    PolynomialDomainMismatchError,
    SampleLengthMismatchError,
    VariableNameMismatchError,
)
from .field import BatchInverter, FieldElement, PrimeField
from .utils import trim_trailing, zip_combine

logger = logging.getLogger(__name__)

Scalar = Union[FieldElement, int]


class Polynomial:
    """
    A polynomial with coefficients in one PrimeField.

    Polynomials are immutable: every operation returns a new polynomial.
    Trailing zero coefficients are trimmed on construction.

    Attributes:
        coefficients: Tuple of FieldElement, index = power
        field: The PrimeField every coefficient belongs to
        var: Display name of the indeterminate (e.g. "x")

    Example:
        >>> field = PrimeField(97)
        >>> x = Polynomial.identity(field)
        >>> (x * x - Polynomial.constant(field.one(), field)).degree
        2
    """

    def __init__(self, coefficients: Iterable[FieldElement], field: PrimeField,
                 var: str = "x"):
        """
        Build a polynomial from ascending-power coefficients.

        Raises:
            TypeError: If a coefficient is not a FieldElement
            MixedFieldCoefficientsError: If a coefficient belongs to another
                field than ``field`` or than the first coefficient
        """
        coefficients = list(coefficients)
        for i, coeff in enumerate(coefficients):
            if not isinstance(coeff, FieldElement):
                raise TypeError(
                    f"Coefficient {i} must be a FieldElement, got {type(coeff).__name__}"
                )
            if coeff.field is not coefficients[0].field or coeff.field is not field:
                raise MixedFieldCoefficientsError(
                    f"Coefficient {i} ({coeff!r}) is not an element of {field!r}"
                )

        self._coefficients: Tuple[FieldElement, ...] = tuple(
            trim_trailing(coefficients, field.zero())
        )
        self._field = field
        self._var = var

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def from_coefficients(cls, coefficients: Iterable[FieldElement],
                          field: PrimeField, var: str = "x") -> Polynomial:
        """Same as the constructor."""
        return cls(coefficients, field, var)

    @classmethod
    def from_values(cls, values: Iterable[int], field: PrimeField,
                    var: str = "x") -> Polynomial:
        """Build a polynomial from raw integers, reducing each into ``field``."""
        return cls(field.new_elements(values), field, var)

    @classmethod
    def identity(cls, field: PrimeField, var: str = "x") -> Polynomial:
        """The polynomial ``x``: coefficients [0, 1]."""
        return cls([field.zero(), field.one()], field, var)

    x = identity

    @classmethod
    def constant(cls, coefficient: Scalar, field: PrimeField,
                 var: str = "x") -> Polynomial:
        """A degree-0 polynomial (or the zero polynomial for a zero coefficient)."""
        if not isinstance(coefficient, FieldElement):
            coefficient = field.new_element(coefficient)
        return cls([coefficient], field, var)

    @classmethod
    def monomial(cls, degree: int, coefficient: Scalar, field: PrimeField,
                 var: str = "x") -> Polynomial:
        """
        Build ``coefficient * x^degree``.

        A zero coefficient gives the zero polynomial.

        Example:
            >>> field = PrimeField(97)
            >>> print(Polynomial.monomial(3, 5, field))
            5x^3
        """
        degree = index(degree)
        if degree < 0:
            raise ValueError(f"Monomial degree must be non-negative, got {degree}")
        if not isinstance(coefficient, FieldElement):
            coefficient = field.new_element(coefficient)
        return cls([field.zero()] * degree + [coefficient], field, var)

    @classmethod
    def empty_like(cls, other: Polynomial) -> Polynomial:
        """The zero polynomial with ``other``'s field and variable name."""
        return cls([], other.field, other.var)

    @classmethod
    def from_like(cls, coefficients: Iterable[FieldElement],
                  other: Polynomial) -> Polynomial:
        """A polynomial reusing ``other``'s field and variable name."""
        return cls(coefficients, other.field, other.var)

    @classmethod
    def zerofier(cls, points: Iterable[Scalar], field: PrimeField,
                 var: str = "x") -> Polynomial:
        """
        The vanishing polynomial prod(x - p_i) over ``points``.

        It is zero exactly on ``points``; dividing a constraint polynomial by
        it checks that the constraint holds on the whole domain. An empty
        point set gives the constant 1.
        """
        x = cls.identity(field, var)
        result = cls.constant(field.one(), field, var)
        for point in points:
            result = result * (x - cls.constant(point, field, var))
        return result

    @classmethod
    def interpolate(cls, xs: Sequence[FieldElement], ys: Sequence[FieldElement],
                    var: str = "x") -> Polynomial:
        """
        Lagrange interpolation through the points (xs[i], ys[i]).

        For each i the basis polynomial

            L_i(x) = prod_{j != i} (x - xs[j]) / (xs[i] - xs[j])

        is 1 at xs[i] and 0 at every other sample point, so
        sum_i ys[i] * L_i(x) passes through every sample. The result has
        degree at most len(xs) - 1. The n denominators are inverted together
        with BatchInverter.

        Args:
            xs: Distinct sample points
            ys: Values at those points
            var: Variable name of the result

        Raises:
            SampleLengthMismatchError: If xs and ys differ in length
            EmptySampleSetError: If there are no samples
            MixedFieldSamplesError: If the samples span more than one field
            DuplicateSamplePointError: If an x value repeats
        """
        xs, ys = list(xs), list(ys)
        if len(xs) != len(ys):
            raise SampleLengthMismatchError(
                f"Got {len(xs)} sample points but {len(ys)} values"
            )
        if not xs:
            raise EmptySampleSetError("Cannot interpolate an empty sample set")

        for sample in xs + ys:
            if not isinstance(sample, FieldElement):
                raise TypeError(
                    f"Samples must be FieldElements, got {type(sample).__name__}"
                )

        field = xs[0].field
        for sample in xs + ys:
            if sample.field is not field:
                raise MixedFieldSamplesError(
                    f"Sample {sample!r} is not an element of {field!r}"
                )

        seen = {}
        for i, point in enumerate(xs):
            if point.value in seen:
                raise DuplicateSamplePointError(
                    f"Sample point {point.value} appears at indices {seen[point.value]} and {i}"
                )
            seen[point.value] = i

        logger.debug("Interpolating %d points over %r", len(xs), field)

        x = cls.identity(field, var)
        numerators = []
        denominators = []
        for i, xi in enumerate(xs):
            numerator = cls.constant(field.one(), field, var)
            denominator = field.one()
            for j, xj in enumerate(xs):
                if j == i:
                    continue
                numerator = numerator * (x - cls.constant(xj, field, var))
                denominator = denominator * (xi - xj)
            numerators.append(numerator)
            denominators.append(denominator)

        inverses = BatchInverter(field).invert_batch(denominators)

        result = cls([], field, var)
        for numerator, inverse, y in zip(numerators, inverses, ys):
            result = result + numerator.scale(y * inverse)
        return result

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def coefficients(self) -> Tuple[FieldElement, ...]:
        return self._coefficients

    @property
    def field(self) -> PrimeField:
        return self._field

    @property
    def var(self) -> str:
        return self._var

    @property
    def degree(self) -> int:
        """len(coefficients) - 1; the zero polynomial has degree -1."""
        return len(self._coefficients) - 1

    @property
    def leading_coefficient(self) -> FieldElement:
        """Coefficient of the highest power (zero for the zero polynomial)."""
        if not self._coefficients:
            return self._field.zero()
        return self._coefficients[-1]

    def is_zero(self) -> bool:
        return not self._coefficients

    def coefficient_values(self) -> np.ndarray:
        """Raw coefficient values as a numpy array, lowest power first."""
        dtype = np.uint64 if self._field.modulus <= (1 << 64) else object
        return np.array([c.value for c in self._coefficients], dtype=dtype)

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def _check_compatible(self, other: Polynomial) -> None:
        """Both operands must share the field instance and the variable name."""
        if not isinstance(other, Polynomial):
            raise TypeError(f"Expected a Polynomial, got {type(other).__name__}")
        if self._field is not other._field:
            raise PolynomialDomainMismatchError(
                f"Polynomials are built over different fields: "
                f"{self._field!r} and {other._field!r}"
            )
        if self._var != other._var:
            raise VariableNameMismatchError(
                f"Polynomials have different variable names: "
                f"{self._var!r} and {other._var!r}"
            )

    def add(self, other: Polynomial) -> Polynomial:
        self._check_compatible(other)
        return self.from_like(
            zip_combine(self._coefficients, other._coefficients,
                        FieldElement.add, self._field.zero()),
            self,
        )

    def sub(self, other: Polynomial) -> Polynomial:
        self._check_compatible(other)
        return self.from_like(
            zip_combine(self._coefficients, other._coefficients,
                        FieldElement.sub, self._field.zero()),
            self,
        )

    def neg(self) -> Polynomial:
        return self.empty_like(self).sub(self)

    def scale(self, scalar: Scalar) -> Polynomial:
        """Multiply every coefficient by a scalar of the same field."""
        if not isinstance(scalar, FieldElement):
            scalar = self._field.new_element(scalar)
        return self.from_like([c.mul(scalar) for c in self._coefficients], self)

    def mul(self, other: Polynomial) -> Polynomial:
        """
        Schoolbook multiplication.

        Every pair (i, j) contributes lhs[i] * rhs[j] to power i + j, so the
        cost is O(len(lhs) * len(rhs)) field multiplications.
        """
        self._check_compatible(other)
        if self.is_zero() or other.is_zero():
            return self.empty_like(self)

        result = [self._field.zero()] * (self.degree + other.degree + 1)
        for i, lhs in enumerate(self._coefficients):
            for j, rhs in enumerate(other._coefficients):
                result[i + j] = result[i + j] + lhs * rhs
        return self.from_like(result, self)

    def pow(self, exponent: int) -> Polynomial:
        """Repeated squaring; p ** 0 is the constant 1."""
        exponent = index(exponent)
        if exponent < 0:
            raise ValueError("Polynomial exponent must be non-negative")

        result = self.constant(self._field.one(), self._field, self._var)
        base = self
        while exponent > 0:
            if exponent & 1:
                result = result * base
            base = base * base
            exponent >>= 1
        return result

    def divide_with_remainder(self, divisor: Polynomial) -> Tuple[Polynomial, Polynomial]:
        """
        Polynomial long division.

        Returns (quotient, remainder) with

            self == quotient * divisor + remainder
            remainder.degree < divisor.degree

        Each step cancels the leading term of the running remainder and then
        re-trims it, because interior cancellations can drop the degree by
        more than one.

        Raises:
            PolynomialDivisionByZeroError: If divisor is the zero polynomial
        """
        self._check_compatible(divisor)
        if divisor.is_zero():
            raise PolynomialDivisionByZeroError("Division by zero polynomial")

        zero = self._field.zero()
        divisor_coeffs = divisor._coefficients
        remainder = list(self._coefficients)
        quotient = [zero] * max(len(remainder) - len(divisor_coeffs) + 1, 0)
        lead_inverse = divisor.leading_coefficient.inverse()

        logger.debug("Dividing degree %d by degree %d", self.degree, divisor.degree)

        while len(remainder) >= len(divisor_coeffs):
            shift = len(remainder) - len(divisor_coeffs)
            ratio = remainder[-1] * lead_inverse
            quotient[shift] = ratio
            for i, coeff in enumerate(divisor_coeffs):
                remainder[shift + i] = remainder[shift + i] - ratio * coeff
            remainder = trim_trailing(remainder, zero)

        return self.from_like(quotient, self), self.from_like(remainder, self)

    def exact_divide(self, divisor: Polynomial) -> Polynomial:
        """
        Division that must leave no remainder.

        Raises:
            NotEvenlyDivisibleError: If the remainder is non-zero
        """
        quotient, remainder = self.divide_with_remainder(divisor)
        if not remainder.is_zero():
            raise NotEvenlyDivisibleError(
                f"{self} is not divisible by {divisor} (remainder {remainder})"
            )
        return quotient

    def compose(self, inner: Polynomial) -> Polynomial:
        """
        Evaluate this polynomial at the polynomial ``inner``: self(inner(x)).

        Horner's rule from the highest coefficient down,
        result = result * inner + c, costs deg(self) polynomial
        multiplications.
        """
        self._check_compatible(inner)
        result = self.empty_like(self)
        for coeff in reversed(self._coefficients):
            result = result * inner + self.constant(coeff, self._field, self._var)
        return result

    def derivative(self) -> Polynomial:
        """Formal derivative: sum i * c_i * x^(i-1)."""
        return self.from_like(
            [coeff.mul(power) for power, coeff in enumerate(self._coefficients)][1:],
            self,
        )

    # =========================================================================
    # Evaluation
    # =========================================================================

    def _point(self, point: Scalar) -> FieldElement:
        if isinstance(point, FieldElement):
            if point.field is not self._field:
                raise CrossFieldError(f"{point!r} is not an element of {self._field!r}")
            return point
        return self._field.new_element(point)

    def evaluate(self, point: Scalar) -> FieldElement:
        """Evaluate at a single point using Horner's method."""
        point = self._point(point)
        result = self._field.zero()
        for coeff in reversed(self._coefficients):
            result = result * point + coeff
        return result

    def evaluate_many(self, points: Iterable[Scalar]) -> List[FieldElement]:
        """
        Evaluate at a batch of points with vectorized Horner steps.

        The running accumulator uses the field's accumulator dtype: uint64
        when a product of two residues plus the modulus fits in 64 bits,
        Python integers otherwise.
        """
        field = self._field
        dtype = field.accumulator_dtype
        values = [self._point(p).value for p in points]

        xs = np.array(values, dtype=dtype)
        acc = np.zeros(len(values), dtype=dtype)
        if dtype is object:
            to_scalar = int
        else:
            to_scalar = np.uint64
        modulus = to_scalar(field.modulus)

        for coeff in reversed(self._coefficients):
            acc = (acc * xs + to_scalar(coeff.value)) % modulus

        return [FieldElement(int(v), field) for v in acc]

    # =========================================================================
    # Python protocol
    # =========================================================================

    def __call__(self, arg: Union[Polynomial, Scalar]):
        """p(q) composes for a polynomial argument and evaluates otherwise."""
        if isinstance(arg, Polynomial):
            return self.compose(arg)
        return self.evaluate(arg)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Polynomial):
            return self._coefficients == other._coefficients
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._coefficients)

    def __len__(self) -> int:
        return len(self._coefficients)

    def __iter__(self) -> Iterator[FieldElement]:
        return iter(self._coefficients)

    def __add__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.sub(other)

    def __neg__(self) -> Polynomial:
        return self.neg()

    def __mul__(self, other):
        if isinstance(other, Polynomial):
            return self.mul(other)
        if isinstance(other, (FieldElement, int)):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (FieldElement, int)):
            return self.scale(other)
        return NotImplemented

    def __pow__(self, exponent: int) -> Polynomial:
        return self.pow(exponent)

    def __divmod__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.divide_with_remainder(other)

    def __floordiv__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.divide_with_remainder(other)[0]

    def __mod__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.divide_with_remainder(other)[1]

    def __truediv__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.exact_divide(other)

    def __repr__(self) -> str:
        values = ", ".join(str(c.value) for c in self._coefficients)
        return f"Polynomial([{values}], mod {self._field.modulus}, var={self._var!r})"

    def __str__(self) -> str:
        terms = []
        for power, coeff in enumerate(self._coefficients):
            if coeff.is_zero():
                continue
            if power == 0:
                terms.append(str(coeff))
                continue
            prefix = "" if coeff.is_one() else str(coeff)
            suffix = self._var if power == 1 else f"{self._var}^{power}"
            terms.append(prefix + suffix)
        return " + ".join(terms) if terms else "0"


# Example usage
if __name__ == "__main__":
    from .field import create_stark_field

    print("=" * 60)
    print("POLYNOMIAL ARITHMETIC DEMO")
    print("=" * 60)

    field = create_stark_field()
    p = Polynomial.from_values([1, 2, 3], field)
    q = Polynomial.from_values([2, 3, 4, 5, 6], field)
    print(f"\np(x) = {p}")
    print(f"q(x) = {q}")
    print(f"p + q = {p + q}")
    print(f"p * q = {p * q}")
    quotient, remainder = divmod(q, p)
    print(f"q = ({quotient}) * p + ({remainder})")
