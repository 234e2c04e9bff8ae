"""
STARK Algebra
=============

Exact arithmetic over a prime field and over univariate polynomials with
coefficients in that field: the algebraic substrate of STARK-style
arithmetization and polynomial commitments.

Modules:
    - field: PrimeField, FieldElement, batch inversion
    - polynomial: Polynomial (ring operations, division, composition,
      Lagrange interpolation)
    - config: predefined field constants
    - errors: error taxonomy
    - utils: coefficient-sequence helpers

Quick Start:
    >>> from stark_algebra import create_stark_field, Polynomial
    >>> field = create_stark_field()
    >>> p = Polynomial.from_values([1, 2, 3], field)
    >>> p.evaluate(2).value
    17
"""

import logging

__version__ = "0.1.0"
__author__ = "Your Name"

from .config import (
    FieldConfig,
    create_stark_config,
    create_small_test_config,
    create_goldilocks_config,
)
from .errors import (
    FieldArithmeticError,
    CrossFieldError,
    MixedFieldCoefficientsError,
    PolynomialDomainMismatchError,
    VariableNameMismatchError,
    FieldDivisionByZeroError,
    PolynomialDivisionByZeroError,
    NotEvenlyDivisibleError,
    InversePostconditionError,
    InterpolationError,
    EmptySampleSetError,
    SampleLengthMismatchError,
    MixedFieldSamplesError,
    DuplicateSamplePointError,
)
from .field import PrimeField, FieldElement, BatchInverter, create_stark_field
from .polynomial import Polynomial
from .utils import trim_trailing, zip_combine

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "FieldConfig",
    "create_stark_config",
    "create_small_test_config",
    "create_goldilocks_config",
    "PrimeField",
    "FieldElement",
    "BatchInverter",
    "create_stark_field",
    "Polynomial",
    "trim_trailing",
    "zip_combine",
    # Errors
    "FieldArithmeticError",
    "CrossFieldError",
    "MixedFieldCoefficientsError",
    "PolynomialDomainMismatchError",
    "VariableNameMismatchError",
    "FieldDivisionByZeroError",
    "PolynomialDivisionByZeroError",
    "NotEvenlyDivisibleError",
    "InversePostconditionError",
    "InterpolationError",
    "EmptySampleSetError",
    "SampleLengthMismatchError",
    "MixedFieldSamplesError",
    "DuplicateSamplePointError",
]
