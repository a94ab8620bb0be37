"""Graph and tree problems: grid searches, components, bipartition, cycles and tree metrics."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

_MOVES = ((-1, 0, "U"), (1, 0, "D"), (0, -1, "L"), (0, 1, "R"))

Edge = tuple[int, int]


def _adjacency(n: int, edges: Iterable[Edge]) -> list[list[int]]:
    if n < 1:
        raise ValueError("n must be at least 1")
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) has an endpoint outside 1..{n}")
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def _tree_adjacency(n: int, edges: Iterable[Edge]) -> list[list[int]]:
    edges = list(edges)
    if len(edges) != n - 1:
        raise ValueError("a tree on n nodes has exactly n - 1 edges")
    return _adjacency(n, edges)


def _bfs(adjacency: Sequence[Sequence[int]], source: int) -> tuple[list[int], list[int], list[int]]:
    """Return distances (-1 when unreachable), parents and the visiting order from ``source``."""
    distance = [-1] * len(adjacency)
    parent = [0] * len(adjacency)
    distance[source] = 0
    order = [source]
    queue = deque(order)
    while queue:
        node = queue.popleft()
        for neighbour in adjacency[node]:
            if distance[neighbour] == -1:
                distance[neighbour] = distance[node] + 1
                parent[neighbour] = node
                order.append(neighbour)
                queue.append(neighbour)
    return distance, parent, order


def _farthest(distance: Sequence[int]) -> int:
    return max(range(1, len(distance)), key=distance.__getitem__)


def find_labyrinth_path(grid: Iterable[str]) -> str | None:
    """Return a shortest U/D/L/R route from 'A' to 'B' avoiding '#', or None if there is none."""
    rows = list(grid)
    start = end = None
    for r, row in enumerate(rows):
        for c, cell in enumerate(row):
            if cell == "A":
                start = (r, c)
            elif cell == "B":
                end = (r, c)
    if start is None or end is None:
        raise ValueError("grid must contain both 'A' and 'B'")

    came_from: dict[tuple[int, int], tuple[tuple[int, int], str]] = {}
    seen = {start}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        if cell == end:
            break
        r, c = cell
        for dr, dc, step in _MOVES:
            nr, nc = r + dr, c + dc
            if 0 <= nr < len(rows) and 0 <= nc < len(rows[nr]) and rows[nr][nc] != "#":
                nxt = (nr, nc)
                if nxt not in seen:
                    seen.add(nxt)
                    came_from[nxt] = (cell, step)
                    queue.append(nxt)
    else:
        return None

    steps = []
    cell = end
    while cell != start:
        cell, step = came_from[cell]
        steps.append(step)
    return "".join(reversed(steps))


def new_roads(n: int, edges: Iterable[Edge]) -> list[Edge]:
    """Return the roads to add so every city is reachable, joining components in order."""
    adjacency = _adjacency(n, edges)
    visited = [False] * (n + 1)
    representatives = []
    for city in range(1, n + 1):
        if visited[city]:
            continue
        representatives.append(city)
        visited[city] = True
        stack = [city]
        while stack:
            node = stack.pop()
            for neighbour in adjacency[node]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append(neighbour)
    return list(zip(representatives, representatives[1:]))


def assign_teams(n: int, edges: Iterable[Edge]) -> list[int] | None:
    """Split pupils 1..n into teams 1 and 2 so friends differ, or return None if impossible."""
    adjacency = _adjacency(n, edges)
    team = [0] * (n + 1)
    for root in range(1, n + 1):
        if team[root]:
            continue
        team[root] = 1
        queue = deque([root])
        while queue:
            node = queue.popleft()
            other = 3 - team[node]
            for neighbour in adjacency[node]:
                if team[neighbour] == 0:
                    team[neighbour] = other
                    queue.append(neighbour)
                elif team[neighbour] != other:
                    return None
    return team[1:]


def company_queries(n: int, bosses: Sequence[int], queries: Iterable[Edge]) -> list[int]:
    """Answer (employee, k) queries with the k-th boss up the chain, or -1 when there is none.

    ``bosses`` lists the direct boss of employees 2..n; employee 1 is the head.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    if len(bosses) != n - 1:
        raise ValueError("bosses must list one boss for each employee 2..n")
    parent = [0, 0, *bosses]
    if any(not 1 <= boss <= n for boss in bosses):
        raise ValueError(f"bosses must lie in 1..{n}")

    # Only employees below the head have a chain of bosses.
    children: list[list[int]] = [[] for _ in range(n + 1)]
    for employee in range(2, n + 1):
        children[parent[employee]].append(employee)
    reachable = [False] * (n + 1)
    reachable[1] = True
    stack = [1]
    while stack:
        node = stack.pop()
        for child in children[node]:
            if not reachable[child]:
                reachable[child] = True
                stack.append(child)
    base = [parent[v] if reachable[v] else 0 for v in range(n + 1)]

    jumps = [base]
    for _ in range(max(1, n.bit_length())):
        previous = jumps[-1]
        jumps.append([previous[previous[v]] for v in range(n + 1)])

    answers = []
    for employee, k in queries:
        if not 1 <= employee <= n:
            raise ValueError(f"employee {employee} is outside 1..{n}")
        if k < 1:
            raise ValueError("k must be at least 1")
        if k >= n:
            answers.append(-1)
            continue
        node = employee
        for level, table in enumerate(jumps):
            if k >> level & 1:
                node = table[node]
                if node == 0:
                    break
        answers.append(node if node else -1)
    return answers


def count_rooms(grid: Iterable[str]) -> int:
    """Count the connected regions of '.' cells in a map where '#' is wall."""
    rows = list(grid)
    seen: set[tuple[int, int]] = set()
    rooms = 0
    for r, row in enumerate(rows):
        for c, cell in enumerate(row):
            if cell != "." or (r, c) in seen:
                continue
            rooms += 1
            seen.add((r, c))
            stack = [(r, c)]
            while stack:
                cr, cc = stack.pop()
                for dr, dc, _ in _MOVES:
                    nr, nc = cr + dr, cc + dc
                    if (
                        0 <= nr < len(rows)
                        and 0 <= nc < len(rows[nr])
                        and rows[nr][nc] == "."
                        and (nr, nc) not in seen
                    ):
                        seen.add((nr, nc))
                        stack.append((nr, nc))
    return rooms


def message_route(n: int, edges: Iterable[Edge]) -> list[int] | None:
    """Return a shortest route of computers from 1 to ``n``, or None if ``n`` is unreachable."""
    adjacency = _adjacency(n, edges)
    distance, parent, _ = _bfs(adjacency, 1)
    if distance[n] == -1:
        return None
    route = [n]
    while route[-1] != 1:
        route.append(parent[route[-1]])
    return route[::-1]


def round_trip(n: int, edges: Iterable[Edge]) -> list[int] | None:
    """Return a cycle of cities starting and ending at the same city, or None if there is none."""
    adjacency = _adjacency(n, edges)
    visited = [False] * (n + 1)
    parent = [0] * (n + 1)
    for root in range(1, n + 1):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(adjacency[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour == parent[node]:
                    continue
                if visited[neighbour]:
                    trip = [neighbour]
                    current = node
                    while current != neighbour:
                        trip.append(current)
                        current = parent[current]
                    trip.append(neighbour)
                    return trip
                visited[neighbour] = True
                parent[neighbour] = node
                stack.append((neighbour, iter(adjacency[neighbour])))
                break
            else:
                stack.pop()
    return None


def subordinate_counts(n: int, bosses: Sequence[int]) -> list[int]:
    """Return, for employees 1..n, how many employees are below each one."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if len(bosses) != n - 1:
        raise ValueError("bosses must list one boss for each employee 2..n")
    children: list[list[int]] = [[] for _ in range(n + 1)]
    for employee, boss in enumerate(bosses, start=2):
        if not 1 <= boss <= n:
            raise ValueError(f"bosses must lie in 1..{n}")
        children[boss].append(employee)

    order = [1]
    for node in order:
        order.extend(children[node])
    counts = [0] * (n + 1)
    for node in reversed(order):
        for child in children[node]:
            counts[node] += counts[child] + 1
    return counts[1:]


def tree_diameter(n: int, edges: Iterable[Edge]) -> int:
    """Return the number of edges on the longest path of the tree."""
    adjacency = _tree_adjacency(n, edges)
    first, _, _ = _bfs(adjacency, 1)
    second, _, _ = _bfs(adjacency, _farthest(first))
    return max(second[1:])


def max_distances(n: int, edges: Iterable[Edge]) -> list[int]:
    """Return, for nodes 1..n, the distance to the farthest node of the tree."""
    adjacency = _tree_adjacency(n, edges)
    first, _, _ = _bfs(adjacency, 1)
    from_a, _, _ = _bfs(adjacency, _farthest(first))
    from_b, _, _ = _bfs(adjacency, _farthest(from_a))
    return [max(a, b) for a, b in zip(from_a[1:], from_b[1:])]


def distance_sums(n: int, edges: Iterable[Edge]) -> list[int]:
    """Return, for nodes 1..n, the sum of distances to every other node of the tree."""
    adjacency = _tree_adjacency(n, edges)
    depth, parent, order = _bfs(adjacency, 1)
    size = [1] * (n + 1)
    for node in reversed(order[1:]):
        size[parent[node]] += size[node]
    sums = [0] * (n + 1)
    sums[1] = sum(depth[1:])
    for node in order[1:]:
        sums[node] = sums[parent[node]] + n - 2 * size[node]
    return sums[1:]


def max_matching(n: int, edges: Iterable[Edge]) -> int:
    """Return the largest number of disjoint edges that can be chosen in the tree."""
    adjacency = _tree_adjacency(n, edges)
    _, parent, order = _bfs(adjacency, 1)
    matched = [False] * (n + 1)
    pairs = 0
    for node in reversed(order[1:]):
        up = parent[node]
        if not matched[node] and not matched[up]:
            matched[node] = matched[up] = True
            pairs += 1
    return pairs