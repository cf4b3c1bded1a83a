"""LSD radix sort for non-negative integers."""

from .sequential_radix import count_passes, count_sort, digit_at, is_sorted, radix_sort

__all__ = [
    "count_passes",
    "count_sort",
    "digit_at",
    "is_sorted",
    "radix_sort",
]
