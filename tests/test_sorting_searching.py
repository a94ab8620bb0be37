import pytest

from arenasolve.sorting_searching import (
    assign_apartments,
    burning_time,
    enough_qualifiers,
    min_gondolas,
    sell_tickets,
)


def test_apartments_example():
    assert assign_apartments([60, 45, 80, 60], [30, 60, 75], 5) == 2


def test_apartments_wide_tolerance_matches_all_possible():
    desired = [10, 20, 30, 40]
    sizes = [1, 2, 3]
    assert assign_apartments(desired, sizes, 10**9) == min(len(desired), len(sizes))


def test_apartments_bounded_and_order_free():
    desired = [5, 9, 13, 2, 7]
    sizes = [8, 3, 14, 6]
    result = assign_apartments(desired, sizes, 1)
    assert result <= min(len(desired), len(sizes))
    assert result == assign_apartments(desired[::-1], sizes[::-1], 1)


def test_apartments_rejects_negative_tolerance():
    with pytest.raises(ValueError):
        assign_apartments([1], [1], -1)


def test_gondolas_example():
    assert min_gondolas([7, 2, 3, 9], 10) == 3


def test_gondolas_bounds():
    weights = [4, 8, 1, 6, 3, 9, 2]
    result = min_gondolas(weights, 10)
    assert (len(weights) + 1) // 2 <= result <= len(weights)


def test_gondolas_heavy_children_ride_alone():
    weights = [6, 7, 8, 9]
    assert min_gondolas(weights, 10) == len(weights)


def test_gondolas_rejects_overweight_child():
    with pytest.raises(ValueError):
        min_gondolas([11], 10)


def test_tickets_example():
    assert sell_tickets([5, 3, 7, 8, 5], [4, 8, 3]) == [3, 8, -1]


def test_tickets_sold_within_offer_and_once():
    prices = [5, 5, 2, 9, 4]
    offers = [6, 6, 6, 10, 1, 3]
    sold = sell_tickets(prices, offers)
    assert len(sold) == len(offers)
    remaining = list(prices)
    for offer, price in zip(offers, sold):
        if price != -1:
            assert price <= offer
            remaining.remove(price)


def test_tickets_none_available():
    assert sell_tickets([], [1, 2]) == [-1, -1]


def test_burning_time_symmetric_and_bounded():
    blocks = [3, 1, 4, 1, 5, 9, 2, 6]
    result = burning_time(blocks)
    assert result == burning_time(blocks[::-1])
    assert result <= max(blocks)
    assert result <= (len(blocks) + 1) // 2


def test_burning_time_pyramid():
    assert burning_time([1, 2, 3, 2, 1]) == 3


def test_burning_time_empty():
    assert burning_time([]) == 0


def test_enough_qualifiers():
    assert enough_qualifiers([5, 6, 7], 5, 3) is True
    assert enough_qualifiers([5, 6, 7], 5, 4) is False


def test_enough_qualifiers_requires_one():
    assert enough_qualifiers([1, 2], 5, 0) is False
    assert enough_qualifiers([1, 6], 5, 0) is True