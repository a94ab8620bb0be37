"""Number theory: divisors, modular powers, Josephus order and inclusion-exclusion."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import combinations

MOD = 1_000_000_007


def max_common_divisor(values: Iterable[int]) -> int:
    """Return the largest number dividing at least two of the values."""
    values = list(values)
    if len(values) < 2:
        raise ValueError("at least two values are needed")
    if any(value < 1 for value in values):
        raise ValueError("values must be positive")

    top = max(values)
    frequency = [0] * (top + 1)
    for value in values:
        frequency[value] += 1
    for divisor in range(top, 0, -1):
        if sum(frequency[divisor::divisor]) >= 2:
            return divisor
    raise AssertionError("unreachable: 1 divides every value")


def divisor_counts(limit: int) -> list[int]:
    """Return a list whose entry ``x`` is the number of divisors of ``x`` for ``0 <= x <= limit``."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    counts = [0] * (limit + 1)
    for divisor in range(1, limit + 1):
        for multiple in range(divisor, limit + 1, divisor):
            counts[multiple] += 1
    return counts


def divisor_analysis(factors: Iterable[tuple[int, int]]) -> tuple[int, int, int]:
    """Return the count, sum and product of divisors of a factored number, modulo ``MOD``.

    ``factors`` holds ``(prime, exponent)`` pairs of distinct primes.
    """
    count = total = product = 1
    count_exponent = 1  # divisor count so far, reduced modulo MOD - 1
    for prime, exponent in factors:
        if prime < 2:
            raise ValueError("primes must be at least 2")
        if exponent < 0:
            raise ValueError("exponents must not be negative")

        count = count * (exponent + 1) % MOD

        numerator = (pow(prime, exponent + 1, MOD) - 1) % MOD
        inverse = pow(prime - 1, MOD - 2, MOD)
        total = total * (numerator * inverse % MOD) % MOD

        half = exponent * (exponent + 1) // 2 % (MOD - 1)
        product = (
            pow(product, exponent + 1, MOD)
            * pow(pow(prime, half, MOD), count_exponent, MOD)
            % MOD
        )
        count_exponent = count_exponent * (exponent + 1) % (MOD - 1)
    return count, total, product


def power_mod(base: int, exponent: int, modulus: int = MOD) -> int:
    """Return ``base ** exponent`` modulo ``modulus``; a zero exponent always gives 1."""
    if modulus < 1:
        raise ValueError("modulus must be positive")
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    if exponent == 0:
        return 1
    return pow(base, exponent, modulus)


def power_tower(a: int, b: int, c: int) -> int:
    """Return ``a ** (b ** c)`` modulo ``MOD``."""
    return power_mod(a, power_mod(b, c, MOD - 1), MOD)


def _josephus(n: int, k: int) -> int:
    if n == 1:
        return 1
    first_round = (n + 1) // 2
    if k <= first_round:
        return 2 * k % n if 2 * k > n else 2 * k
    rest = _josephus(n // 2, k - first_round)
    return 2 * rest + 1 if n % 2 else 2 * rest - 1


def josephus_kth(n: int, k: int) -> int:
    """Return the child removed ``k``-th when every second of ``n`` children in a circle leaves."""
    if not 1 <= k <= n:
        raise ValueError("k must lie in 1..n")
    return _josephus(n, k)


def count_prime_multiples(limit: int, primes: Iterable[int]) -> int:
    """Count the numbers in ``1..limit`` divisible by at least one of the primes."""
    primes = list(primes)
    if any(prime < 2 for prime in primes):
        raise ValueError("primes must be at least 2")
    if limit < 0:
        raise ValueError("limit must not be negative")

    result = 0
    for size in range(1, len(primes) + 1):
        sign = 1 if size % 2 else -1
        for chosen in combinations(primes, size):
            product = 1
            for prime in chosen:
                if product > limit // prime:
                    break
                product *= prime
            else:
                result += sign * (limit // product)
    return result


def sum_of_divisors(n: int) -> int:
    """Return the sum of sigma(k) for ``k`` in ``1..n``, modulo ``MOD``."""
    if n < 0:
        raise ValueError("n must not be negative")
    total = 0
    low = 1
    while low <= n:
        quotient = n // low
        high = n // quotient
        block = (low + high) * (high - low + 1) // 2
        total = (total + quotient % MOD * (block % MOD)) % MOD
        low = high + 1
    return total