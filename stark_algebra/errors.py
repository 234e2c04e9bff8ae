"""
Error Taxonomy for Field and Polynomial Arithmetic.

Every failure in this package is a usage error: the caller mixed fields,
divided by zero, or handed interpolation a malformed sample set. None of
them is retried and none of them returns a partial result.

Each error also derives from the builtin that a plain arithmetic library
would raise (ValueError, ZeroDivisionError, ArithmeticError), so callers
that only know the builtins still catch them.

Hierarchy:
    FieldArithmeticError
    ├── CrossFieldError (ValueError)
    │   ├── MixedFieldCoefficientsError
    │   ├── PolynomialDomainMismatchError
    │   └── MixedFieldSamplesError (also InterpolationError)
    ├── VariableNameMismatchError (ValueError)
    ├── FieldDivisionByZeroError (ZeroDivisionError)
    ├── PolynomialDivisionByZeroError (ZeroDivisionError)
    ├── NotEvenlyDivisibleError (ArithmeticError)
    ├── InversePostconditionError (ArithmeticError)
    └── InterpolationError (ValueError)
        ├── EmptySampleSetError
        ├── SampleLengthMismatchError
        ├── MixedFieldSamplesError
        └── DuplicateSamplePointError
"""


class FieldArithmeticError(Exception):
    """Base class for all errors raised by stark_algebra."""


class CrossFieldError(FieldArithmeticError, ValueError):
    """Operands belong to different PrimeField instances."""


class MixedFieldCoefficientsError(CrossFieldError):
    """A polynomial was built from coefficients of more than one field."""


class PolynomialDomainMismatchError(CrossFieldError):
    """Polynomial operands are defined over different fields."""


class VariableNameMismatchError(FieldArithmeticError, ValueError):
    """Polynomial operands use different indeterminate labels."""


class FieldDivisionByZeroError(FieldArithmeticError, ZeroDivisionError):
    """Zero has no multiplicative inverse."""


class PolynomialDivisionByZeroError(FieldArithmeticError, ZeroDivisionError):
    """Division by the zero polynomial."""


class NotEvenlyDivisibleError(FieldArithmeticError, ArithmeticError):
    """Exact polynomial division left a non-zero remainder."""


class InversePostconditionError(FieldArithmeticError, ArithmeticError):
    """
    Extended Euclid produced something that is not an inverse.

    This only happens when the modulus is not prime (the gcd is not 1)
    or on an internal bug. The computation is aborted instead of returning
    a wrong value.
    """


class InterpolationError(FieldArithmeticError, ValueError):
    """Malformed interpolation sample set."""


class EmptySampleSetError(InterpolationError):
    """No sample points were given."""


class SampleLengthMismatchError(InterpolationError):
    """Point and value sequences have different lengths."""


class MixedFieldSamplesError(InterpolationError, CrossFieldError):
    """Sample points or values belong to more than one field."""


class DuplicateSamplePointError(InterpolationError):
    """The same x appears twice in the sample set."""
