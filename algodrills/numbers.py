"""Number drills: Fibonacci numbers, factorials and sorting by frequency."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from functools import lru_cache
from math import prod
from typing import Iterable, Iterator, Optional, Sequence

MODULUS = 1_000_000_007
FREQUENCY_LIMIT = 100


@lru_cache(maxsize=None)
def _shifted_fib(n: int) -> int:
    """Fibonacci number ``n + 1`` modulo ``MODULUS``, by the doubling identities."""
    if n < 2:
        return 1
    k = n // 2
    if n % 2 == 0:
        return (_shifted_fib(k) ** 2 + _shifted_fib(k - 1) ** 2) % MODULUS
    return (_shifted_fib(k) * _shifted_fib(k + 1) + _shifted_fib(k - 1) * _shifted_fib(k)) % MODULUS


def fibonacci_mod(n: int) -> int:
    """Return the ``n``-th Fibonacci number modulo 1000000007 in O(log n) steps."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return 0
    return _shifted_fib(n - 1)


def fibonacci_recursive(limit: int) -> list[int]:
    """Return 0, 1 and then every Fibonacci number up to and including ``limit``."""

    def extend(a: int, b: int) -> list[int]:
        total = a + b
        if total > limit:
            return []
        return [total, *extend(b, total)]

    return [0, 1, *extend(0, 1)]


def fibonacci_iterative(limit: int) -> list[int]:
    """Return 0 and then every Fibonacci number strictly below ``limit``."""
    values = [0]
    a, b, total = 0, 1, 1
    while total < limit:
        values.append(total)
        total = a + b
        a, b = b, total
    return values


def big_factorial(n: int) -> str:
    """Return ``n!`` as a decimal string; 1 for ``n`` below 2."""
    return str(prod(range(2, n + 1), start=1))


def factorial_recursive(n: int) -> int:
    """Return ``n!`` by plain (non-tail) recursion; 1 for ``n`` below 2."""
    if n <= 1:
        return 1
    return n * factorial_recursive(n - 1)


def factorial_iterative(n: int) -> int:
    """Return ``n!`` with a loop; 1 for ``n`` below 2."""
    result = 1
    for factor in range(n, 1, -1):
        result *= factor
    return result


def frequency_sort(values: Iterable[int]) -> list[int]:
    """Order values by frequency, most frequent first; ties put the larger value first.

    Values must lie in the range 0..99.
    """
    counts = Counter(values)
    for value in counts:
        if not 0 <= value < FREQUENCY_LIMIT:
            raise ValueError(f"value {value} outside 0..{FREQUENCY_LIMIT - 1}")
    ranked = sorted(((count, value) for value, count in counts.items()), reverse=True)
    return [value for count, value in ranked for _ in range(count)]


def _stdin_numbers() -> Iterator[int]:
    for token in sys.stdin.read().split():
        try:
            yield int(token)
        except ValueError:
            return


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the Fibonacci number modulo 1000000007 for each given or read ``n``."""
    parser = argparse.ArgumentParser(
        prog="algodrills-fibonacci",
        description="Print Fibonacci numbers modulo 1000000007.",
    )
    parser.add_argument("n", nargs="*", type=int, help="indices; read from stdin if omitted")
    args = parser.parse_args(argv)
    numbers: Iterable[int] = args.n if args.n else _stdin_numbers()
    for n in numbers:
        try:
            print(fibonacci_mod(n))
        except ValueError as error:
            print(f"error: {error}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())