"""
Coefficient-sequence helpers shared by the polynomial layer.

Coefficient vectors are stored in ascending power order, so the
"high-degree end" of a sequence is its tail.
"""

from __future__ import annotations
from itertools import zip_longest
from typing import Callable, List, Sequence, TypeVar

T = TypeVar("T")


def trim_trailing(sequence: Sequence[T], zero_value: T) -> List[T]:
    """
    Drop ``zero_value`` items from the high-index end of ``sequence``.

    Low-order zeros are kept: ``[0, 1, 0, 0]`` becomes ``[0, 1]``.

    Example:
        >>> trim_trailing([0, 1, 0, 0], 0)
        [0, 1]
        >>> trim_trailing([0, 0], 0)
        []
    """
    end = len(sequence)
    while end > 0 and sequence[end - 1] == zero_value:
        end -= 1
    return list(sequence[:end])


def zip_combine(lhs: Sequence[T], rhs: Sequence[T],
                operator: Callable[[T, T], T], fill_value: T) -> List[T]:
    """
    Apply ``operator`` pairwise across two sequences of possibly different length.

    The shorter sequence is padded with ``fill_value``, so positions past its
    end are computed as ``operator(lhs_i, fill_value)`` or
    ``operator(fill_value, rhs_i)``. The result has the length of the longer
    input.

    Example:
        >>> zip_combine([1, 2, 3], [10, 20], lambda a, b: a - b, 0)
        [-9, -18, 3]
        >>> zip_combine([1], [10, 20], lambda a, b: a - b, 0)
        [-9, -20]
    """
    return [operator(a, b) for a, b in zip_longest(lhs, rhs, fillvalue=fill_value)]
