# arenasolve

Solvers for well-known competitive-programming problems. Each solver is a
plain function: it takes Python values such as integers, lists, strings and
edge lists, and returns the answer. Invalid input (negative sizes, edges
outside the node range, a grid without a start or end, and so on) raises
`ValueError`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `arenasolve.dynamic_programming`

Counting results are reduced modulo `MOD` (10^9 + 7).

- `count_arrays(values, upper)`: ways to replace the zeros in `values` with
  numbers in `1..upper` so that neighbours differ by at most one.
- `max_pages(budget, prices, pages)`: most pages from books whose total price
  stays within `budget`, each book bought at most once.
- `count_coin_orderings(coins, target)`: ordered coin sequences summing to
  `target`.
- `count_towers(height)`: ways to build a tower of width two and the given
  height.
- `count_dice_sums(total)`: ordered dice throws summing to `total`.
- `count_grid_paths(grid)`: right/down paths through a square grid of `.`
  and `*` (blocked) cells.
- `min_coins(coins, target)`: fewest coins summing to `target`, or `-1`.
- `min_digit_removals(number)`: fewest steps to reach zero, each step
  subtracting one of the current number's digits.

### `arenasolve.strings`

- `prefix_function(text)`: the prefix-function table of `text`.
- `border_lengths(text)`: lengths of all proper borders, increasing.
- `count_occurrences(text, pattern)`: overlapping occurrences of `pattern`.
- `regex_match(text, pattern)`: whole-string match with `.` and `*`.

### `arenasolve.number_theory`

- `max_common_divisor(values)`: largest number dividing at least two values.
- `divisor_counts(limit)`: list of divisor counts for `0..limit`.
- `divisor_analysis(factors)`: `(count, sum, product)` of the divisors of a
  number given as `(prime, exponent)` pairs, modulo `MOD`.
- `power_mod(base, exponent, modulus=MOD)`: modular power; a zero exponent
  gives 1.
- `power_tower(a, b, c)`: `a ** (b ** c)` modulo `MOD`.
- `josephus_kth(n, k)`: the child removed `k`-th when every second child of
  `n` leaves the circle.
- `count_prime_multiples(limit, primes)`: numbers in `1..limit` divisible by
  at least one of the primes.
- `sum_of_divisors(n)`: sum of sigma(k) for `k` in `1..n`, modulo `MOD`.

### `arenasolve.graphs`

Nodes are numbered from 1; edges are `(u, v)` pairs.

- `find_labyrinth_path(grid)`: shortest `U`/`D`/`L`/`R` route from `A` to
  `B` avoiding `#`, or `None`.
- `new_roads(n, edges)`: roads to add so every city is connected.
- `assign_teams(n, edges)`: team 1 or 2 for each pupil so friends differ, or
  `None` if impossible.
- `company_queries(n, bosses, queries)`: the `k`-th boss of an employee, or
  `-1`; `bosses` lists the boss of employees `2..n`.
- `count_rooms(grid)`: connected regions of `.` cells.
- `message_route(n, edges)`: a shortest route from 1 to `n`, or `None`.
- `round_trip(n, edges)`: a cycle starting and ending at the same city, or
  `None`.
- `subordinate_counts(n, bosses)`: number of subordinates of each employee.
- `tree_diameter(n, edges)`: edges on the longest path of a tree.
- `max_distances(n, edges)`: distance from each node to its farthest node.
- `distance_sums(n, edges)`: sum of distances from each node to all others.
- `max_matching(n, edges)`: largest set of disjoint edges in a tree.

### `arenasolve.sorting_searching`

- `assign_apartments(desired, sizes, tolerance)`: applicants who get an
  apartment within `tolerance` of their desired size.
- `min_gondolas(weights, limit)`: fewest gondolas holding at most two
  children and `limit` weight each.
- `sell_tickets(prices, offers)`: for each customer, the dearest remaining
  ticket within their offer, or `-1`.
- `burning_time(blocks)`: rounds needed to burn stacks of blocks from the
  outside in.
- `enough_qualifiers(scores, threshold, needed)`: whether at least `needed`
  scores, and at least one, reach `threshold`.

## Example

```python
from arenasolve.dynamic_programming import count_dice_sums, min_coins
from arenasolve.sorting_searching import sell_tickets

count_dice_sums(3)                        # 4
min_coins([1, 5, 7], 11)                  # 3
sell_tickets([5, 3, 7, 8, 5], [4, 8, 3])  # [3, 8, -1]
```

## What it does not do

The package is a library only. It has no command-line program and does not
read problem input from standard input or print answers; parsing input and
formatting output is left to the caller.