"""Counting and optimisation problems solved with dynamic programming."""

from __future__ import annotations

from collections.abc import Iterable

MOD = 1_000_000_007
_UNREACHABLE = 10**9


def count_arrays(values: Iterable[int], upper: int) -> int:
    """Count ways to fill the zeros so adjacent values differ by at most one.

    Every value must lie in ``1..upper``; a zero marks an unknown value.
    The result is taken modulo ``MOD``.
    """
    values = list(values)
    if not values:
        raise ValueError("values must not be empty")
    if upper < 1:
        raise ValueError("upper must be at least 1")
    for value in values:
        if not 0 <= value <= upper:
            raise ValueError(f"value {value} is outside 0..{upper}")

    # Padding on both ends keeps the neighbour lookups in range.
    ways = [0] * (upper + 2)
    first = values[0]
    if first == 0:
        ways[1 : upper + 1] = [1] * upper
    else:
        ways[first] = 1

    for value in values[1:]:
        following = [0] * (upper + 2)
        targets = range(1, upper + 1) if value == 0 else (value,)
        for j in targets:
            following[j] = (ways[j - 1] + ways[j] + ways[j + 1]) % MOD
        ways = following

    return sum(ways) % MOD


def max_pages(budget: int, prices: Iterable[int], pages: Iterable[int]) -> int:
    """Return the most pages obtainable from books whose total price is at most ``budget``."""
    prices = list(prices)
    pages = list(pages)
    if len(prices) != len(pages):
        raise ValueError("prices and pages must have the same length")
    if budget < 0:
        raise ValueError("budget must not be negative")
    if any(price < 0 for price in prices):
        raise ValueError("prices must not be negative")

    best = [0] * (budget + 1)
    for price, gain in zip(prices, pages):
        for cost in range(budget, 0, -1):
            if price <= cost:
                best[cost] = max(best[cost], gain + best[cost - price])
    return best[budget]


def count_coin_orderings(coins: Iterable[int], target: int) -> int:
    """Count ordered sequences of coins summing to ``target``, modulo ``MOD``."""
    coins = list(coins)
    if any(coin <= 0 for coin in coins):
        raise ValueError("coins must be positive")
    if target < 0:
        raise ValueError("target must not be negative")

    ways = [1] + [0] * target
    for amount in range(1, target + 1):
        ways[amount] = sum(ways[amount - coin] for coin in coins if coin <= amount) % MOD
    return ways[target]


def count_towers(height: int) -> int:
    """Count the ways to build a tower of width two and the given height, modulo ``MOD``."""
    if height < 1:
        raise ValueError("height must be at least 1")
    split, joined = 1, 1
    for _ in range(height - 1):
        split, joined = (2 * split + joined) % MOD, (split + 4 * joined) % MOD
    return (split + joined) % MOD


def count_dice_sums(total: int) -> int:
    """Count ordered dice throws (faces 1..6) summing to ``total``, modulo ``MOD``."""
    if total < 0:
        raise ValueError("total must not be negative")
    ways = [1] + [0] * total
    for value in range(1, total + 1):
        ways[value] = sum(ways[value - face] for face in range(1, min(6, value) + 1)) % MOD
    return ways[total]


def count_grid_paths(grid: Iterable[str]) -> int:
    """Count right/down paths through a square grid of '.' and '*' cells, modulo ``MOD``."""
    rows = list(grid)
    size = len(rows)
    if size == 0:
        raise ValueError("grid must not be empty")
    if any(len(row) != size for row in rows):
        raise ValueError("grid must be square")
    if rows[0][0] == "*" or rows[-1][-1] == "*":
        return 0

    previous = [0] * (size + 1)
    for row_number, row in enumerate(rows):
        current = [0] * (size + 1)
        for column, cell in enumerate(row, start=1):
            if row_number == 0 and column == 1:
                current[1] = 1
            elif cell == ".":
                current[column] = (previous[column] + current[column - 1]) % MOD
        previous = current
    return previous[size]


def min_coins(coins: Iterable[int], target: int) -> int:
    """Return the fewest coins summing to ``target``, or -1 when no sum is possible."""
    coins = list(coins)
    if any(coin < 0 for coin in coins):
        raise ValueError("coins must not be negative")
    if target < 0:
        raise ValueError("target must not be negative")

    best = [0] + [_UNREACHABLE] * target
    for amount in range(1, target + 1):
        best[amount] = min(
            [best[amount]] + [best[amount - coin] + 1 for coin in coins if coin <= amount]
        )
    return -1 if best[target] == _UNREACHABLE else best[target]


def min_digit_removals(number: int) -> int:
    """Return the fewest steps to reach zero, each step subtracting one of the number's digits."""
    if number < 0:
        raise ValueError("number must not be negative")
    steps = [0] * (number + 1)
    for value in range(1, number + 1):
        steps[value] = min(steps[value - int(digit)] for digit in str(value) if digit != "0") + 1
    return steps[number]