"""
LSD radix sort for non-negative integers, one decimal digit per pass.

Each pass is a stable counting sort keyed on the digit selected by ``exp``
(1 = units, 10 = tens, ...). Negative values are outside the contract.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)

# Decimal digits 0-9
BASE = 10

PassCallback = Callable[[int, List[int]], None]


def digit_at(value: int, exp: int) -> int:
    return (value // exp) % BASE


def count_sort(A: List[int], exp: int) -> None:
    """Stable counting sort of ``A`` by the digit at ``exp``, in place."""
    n = len(A)
    C = [0] * BASE
    output = [0] * n

    # 1) Count frequency of each digit
    for v in A:
        C[digit_at(v, exp)] += 1

    # 2) Convert count to cumulative count: C[d] is one past the last slot of d
    for i in range(1, BASE):
        C[i] += C[i - 1]

    # 3) Place from the right so equal digits keep their input order
    for v in reversed(A):
        digit = digit_at(v, exp)
        output[C[digit] - 1] = v
        C[digit] -= 1

    A[:] = output


def count_passes(max_value: int) -> int:
    """Number of digit passes ``radix_sort`` runs for a given maximum."""
    passes = 0
    exp = 1
    while max_value // exp > 0:
        passes += 1
        exp *= BASE
    return passes


def is_sorted(A: List[int]) -> bool:
    return all(A[i] <= A[i + 1] for i in range(len(A) - 1))


def radix_sort(A: List[int], on_pass: Optional[PassCallback] = None) -> List[int]:
    """
    Sort ``A`` ascending in place and return it.

    ``on_pass(exp, snapshot)`` is called after every pass with the divisor
    used and a copy of the sequence at that point. An all-zero sequence runs
    no passes at all.
    """
    if not A:
        return A

    max_value = max(A)
    exp = 1
    while max_value // exp > 0:
        count_sort(A, exp)
        logger.debug("pass exp=%d done (n=%d)", exp, len(A))
        if on_pass is not None:
            on_pass(exp, list(A))
        exp *= BASE
    return A
