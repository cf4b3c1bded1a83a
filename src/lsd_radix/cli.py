"""
Interactive front end: collects values from an operator, validates them and
narrates each radix pass.

Run with something like:
    lsd-radix                     # prompts for a count, then each element
    lsd-radix --values 170 45 75  # non-interactive
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, List, Optional

from .sequential_radix import radix_sort

logger = logging.getLogger(__name__)


class InputError(ValueError):
    """Operator input that must never reach the sort."""


def parse_int(raw: str) -> int:
    """Plain decimal integer with an optional sign; ValueError otherwise."""
    text = raw.strip()
    digits = text[1:] if text.startswith(("+", "-")) else text
    if not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"not an integer: {raw!r}")
    return int(text)


def read_count(raw: str) -> int:
    try:
        size = parse_int(raw)
    except ValueError:
        raise InputError("Invalid input. The element count must be an integer.") from None
    if size <= 0:
        raise InputError("The element count must be greater than zero.")
    return size


def read_element(raw: str) -> int:
    try:
        value = parse_int(raw)
    except ValueError:
        raise InputError("Invalid input. Elements must be non-negative integers.") from None
    if value < 0:
        raise InputError("Only non-negative integers can be sorted.")
    return value


def prompt_values(ask: Optional[Callable[[str], str]] = None) -> List[int]:
    """Ask for a count, then that many elements. Stops at the first bad entry."""
    if ask is None:
        ask = input
    size = read_count(ask("Number of elements to sort: "))
    print(f"\nEnter the {size} elements (non-negative integers only):")
    return [read_element(ask(f"Element {i + 1}: ")) for i in range(size)]


def print_pass(exp: int, snapshot: List[int]) -> None:
    print(f"  -> after pass exp={exp}: {snapshot}")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="LSD radix sort of non-negative integers")
    parser.add_argument("--values", nargs="+", metavar="N", help="Values to sort instead of prompting for them.")
    parser.add_argument("--quiet", action="store_true", help="Do not print the array after each pass.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    print("--- Radix Sort ---")
    try:
        if args.values:
            data = [read_element(v) for v in args.values]
        else:
            data = prompt_values()
    except InputError as exc:
        print(exc, file=sys.stderr)
        return 1
    except EOFError:
        print("Input ended before all elements were read.", file=sys.stderr)
        return 1

    logger.info("sorting %d values", len(data))
    print(f"\nOriginal array: {data}")

    print("\n--- Radix sort passes ---")
    radix_sort(data, on_pass=None if args.quiet else print_pass)

    print("\n--- Result ---")
    print(f"Sorted array: {data}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
