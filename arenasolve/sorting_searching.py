"""Greedy and search problems over sorted data."""

from __future__ import annotations

from collections.abc import Iterable

from sortedcontainers import SortedList


def assign_apartments(desired: Iterable[int], sizes: Iterable[int], tolerance: int) -> int:
    """Return how many applicants get an apartment within ``tolerance`` of their desired size."""
    if tolerance < 0:
        raise ValueError("tolerance must not be negative")
    wants = sorted(desired)
    flats = sorted(sizes)
    i = j = matched = 0
    while i < len(wants) and j < len(flats):
        if flats[j] < wants[i] - tolerance:
            j += 1
        elif flats[j] > wants[i] + tolerance:
            i += 1
        else:
            matched += 1
            i += 1
            j += 1
    return matched


def min_gondolas(weights: Iterable[int], limit: int) -> int:
    """Return the fewest gondolas holding at most two children and ``limit`` weight each."""
    ordered = sorted(weights)
    if ordered and ordered[-1] > limit:
        raise ValueError("every child must fit in a gondola alone")
    light, heavy = 0, len(ordered) - 1
    gondolas = 0
    while light <= heavy:
        if ordered[light] + ordered[heavy] <= limit:
            light += 1
        heavy -= 1
        gondolas += 1
    return gondolas


def sell_tickets(prices: Iterable[int], offers: Iterable[int]) -> list[int]:
    """Sell each customer the dearest remaining ticket within their offer, or -1 for none."""
    tickets = SortedList(prices)
    sold = []
    for offer in offers:
        index = tickets.bisect_right(offer)
        if index == 0:
            sold.append(-1)
        else:
            sold.append(tickets.pop(index - 1))
    return sold


def burning_time(blocks: Iterable[int]) -> int:
    """Return how many rounds it takes to burn away stacks of blocks from the outside in."""
    heights = list(blocks)
    if not heights:
        return 0
    left = []
    for height in heights:
        left.append(min((left[-1] if left else 0) + 1, height))
    right = []
    for height in reversed(heights):
        right.append(min((right[-1] if right else 0) + 1, height))
    right.reverse()
    return max(max(min(a, b) for a, b in zip(left, right)), 0)


def enough_qualifiers(scores: Iterable[int], threshold: int, needed: int) -> bool:
    """Tell whether at least ``needed`` scores (and at least one) reach ``threshold``."""
    qualified = sum(1 for score in scores if score >= threshold)
    return qualified > 0 and qualified >= needed