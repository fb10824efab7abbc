"""Graph algorithms: longest paths, articulation points, reachability and walks."""

from __future__ import annotations

from collections import defaultdict, deque
from itertools import count
from typing import Hashable, Iterable, Mapping, Sequence


def _undirected(edges: Iterable[tuple[int, int]]) -> dict[int, list[int]]:
    graph: dict[int, list[int]] = defaultdict(list)
    for a, b in edges:
        graph[a].append(b)
        graph[b].append(a)
    return graph


def longest_path_from(edges: Iterable[tuple[int, int]], start: int) -> tuple[int, int]:
    """Return ``(length, end)`` of the longest path from ``start`` in a directed acyclic graph.

    Among ends at the same distance the smallest node wins. With no outgoing
    edges the result is ``(0, start)``.
    """
    graph: dict[int, list[int]] = defaultdict(list)
    for p, q in edges:
        graph[p].append(q)

    level: dict[int, int] = defaultdict(int)
    queue = deque([start])
    best, dest = 0, start
    while queue:
        u = queue.popleft()
        for v in graph[u]:
            if level[u] + 1 > level[v]:
                level[v] = level[u] + 1
                queue.append(v)
                if level[v] > best:
                    best, dest = level[v], v
                elif level[v] == best and v < dest:
                    dest = v
    return best, dest


def _articulation_points(
    graph: Mapping[Hashable, Sequence[Hashable]], roots: Iterable[Hashable]
) -> list[Hashable]:
    """Articulation points found by depth-first search from each unvisited root, in finishing order."""
    start: dict[Hashable, int] = {}
    low: dict[Hashable, int] = {}
    children: dict[Hashable, int] = {}
    cut: dict[Hashable, bool] = {}
    timer = count(1)
    found: list[Hashable] = []

    def enter(node: Hashable) -> None:
        start[node] = low[node] = next(timer)
        children[node] = 0
        cut[node] = False

    for root in roots:
        if root in start:
            continue
        enter(root)
        stack = [(root, iter(graph.get(root, ())))]
        while stack:
            u, neighbours = stack[-1]
            descended = False
            for v in neighbours:
                if v not in start:
                    enter(v)
                    stack.append((v, iter(graph.get(v, ()))))
                    descended = True
                    break
                low[u] = min(low[u], start[v])
            if descended:
                continue
            stack.pop()
            if (u == root and children[u] > 1) or (u != root and cut[u]):
                found.append(u)
            if stack:
                parent = stack[-1][0]
                children[parent] += 1
                low[parent] = min(low[parent], low[u])
                if low[u] >= start[parent]:
                    cut[parent] = True
    return found


def camera_cities(names: Sequence[str], routes: Iterable[tuple[str, str]]) -> list[str]:
    """Return, sorted, the cities whose removal disconnects the road map."""
    index = {name: i for i, name in enumerate(names, start=1)}
    by_index = {i: name for name, i in index.items()}
    try:
        graph = _undirected((index[a], index[b]) for a, b in routes)
    except KeyError as exc:
        raise ValueError(f"unknown city {exc.args[0]!r}") from None
    points = _articulation_points(graph, range(1, len(names) + 1))
    return sorted(by_index[p] for p in points)


def count_articulation_points(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Count critical nodes of an undirected network of nodes ``1..n``, searched from node 1."""
    if n < 1:
        return 0
    graph = _undirected(edges)
    return len(_articulation_points(graph, [1]))


def most_reachable_node(n: int, adjacency: Sequence[Iterable[int]]) -> int:
    """Return the node in ``1..n`` that reaches the most nodes, the smallest on ties.

    ``adjacency[i - 1]`` lists the successors of node ``i``. Returns 0 when ``n`` is 0.
    """
    graph = {i: list(succ) for i, succ in enumerate(adjacency[:n], start=1)}
    best_count, best_node = 0, 0
    for node in range(1, n + 1):
        seen = {node}
        stack = [node]
        while stack:
            u = stack.pop()
            for v in graph.get(u, ()):
                if v not in seen:
                    seen.add(v)
                    stack.append(v)
        if len(seen) > best_count:
            best_count, best_node = len(seen), node
    return best_node


def is_bipartite(n: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Tell whether the undirected graph on nodes ``1..n`` can be two-coloured."""
    graph = _undirected(edges)
    colour: dict[int, int] = {}
    for root in range(1, n + 1):
        if root in colour:
            continue
        colour[root] = 0
        queue = deque([root])
        while queue:
            u = queue.popleft()
            for v in graph[u]:
                if v not in colour:
                    colour[v] = 1 - colour[u]
                    queue.append(v)
                elif colour[v] == colour[u]:
                    return False
    return True


def longest_chain(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Return the number of nodes on the longest downward chain in a directed graph on ``1..n``.

    A node with no successors has height 1. A node met again while still being
    explored counts with height 0.
    """
    graph: dict[int, list[int]] = defaultdict(list)
    for u, v in edges:
        graph[u].append(v)

    height: dict[int, int] = {}
    visited: set[int] = set()
    result = 0
    for root in range(1, n + 1):
        if root in visited:
            continue
        visited.add(root)
        stack = [[root, iter(graph[root]), 0]]
        while stack:
            frame = stack[-1]
            u, successors = frame[0], frame[1]
            descended = False
            for v in successors:
                if v in visited:
                    frame[2] = max(frame[2], 1 + height.get(v, 0))
                else:
                    visited.add(v)
                    stack.append([v, iter(graph[v]), 0])
                    descended = True
                    break
            if descended:
                continue
            stack.pop()
            height[u] = frame[2] if graph[u] else 1
            if stack:
                stack[-1][2] = max(stack[-1][2], 1 + height[u])
        result = max(result, height[root])
    return result


def can_travel(edges: Iterable[tuple[int, int]], start: int, end: int, days: int) -> bool:
    """Tell whether a walk of exactly ``days`` roads leads from ``start`` to ``end``."""
    graph = _undirected(edges)
    here = {start}
    for _ in range(days):
        here = {v for u in here for v in graph[u]}
        if not here:
            return False
    return end in here


def max_trip_profit(
    costs: Sequence[Sequence[int]], start: int, ends: Iterable[int], days: int
) -> int:
    """Return the best profit of a ``days``-long trip from ``start`` whose last day ends in ``ends``.

    ``costs[i - 1][j - 1]`` is the profit of travelling from city ``i`` to city ``j``.
    Cities are numbered from 1.
    """
    if days <= 0:
        return 0
    cities = len(costs)
    finals = set(ends)
    best = [
        max([0] + [costs[u][v - 1] for v in finals if 1 <= v <= cities])
        for u in range(cities)
    ]
    for _ in range(days - 1):
        best = [
            max([0] + [costs[u][v] + best[v] for v in range(cities)])
            for u in range(cities)
        ]
    return best[start - 1]