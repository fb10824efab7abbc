"""Flood fills over square and hexagonal character grids."""

from __future__ import annotations

from typing import Iterable, Sequence

_SQUARE_STEPS = ((0, 1), (0, -1), (1, 0), (-1, 0))
_HEX_STEPS = ((-1, -1), (-1, 0), (0, -1), (0, 1), (1, 0), (1, 1))


def _flood(
    rows: Sequence[str],
    seeds: Iterable[tuple[int, int]],
    passable: set[str],
    steps: Sequence[tuple[int, int]],
    seen: set[tuple[int, int]],
) -> set[tuple[int, int]]:
    """Return the cells reachable from ``seeds`` through ``passable`` characters, marking them seen."""
    stack = [cell for cell in seeds if cell not in seen]
    seen.update(stack)
    region = set(stack)
    while stack:
        i, j = stack.pop()
        for di, dj in steps:
            ni, nj = i + di, j + dj
            if 0 <= ni < len(rows) and 0 <= nj < len(rows[ni]):
                if (ni, nj) not in seen and rows[ni][nj] in passable:
                    seen.add((ni, nj))
                    region.add((ni, nj))
                    stack.append((ni, nj))
    return region


def count_ships(grid: Sequence[str]) -> int:
    """Count ships still afloat: connected groups of non-``'.'`` cells holding at least one ``'x'``.

    ``'@'`` marks a hit part of a ship; groups made only of hits are sunk.
    """
    rows = list(grid)
    seen: set[tuple[int, int]] = set()
    ships = 0
    for i, row in enumerate(rows):
        for j, cell in enumerate(row):
            if cell == "x" and (i, j) not in seen:
                _flood(rows, [(i, j)], {"x", "@"}, _SQUARE_STEPS, seen)
                ships += 1
    return ships


def hex_winner(board: Sequence[str]) -> str:
    """Return ``'B'`` if black stones join the top row to the bottom row, else ``'W'``."""
    rows = list(board)
    if not rows:
        return "W"
    seeds = [(0, j) for j, cell in enumerate(rows[0]) if cell == "b"]
    region = _flood(rows, seeds, {"b"}, _HEX_STEPS, set())
    last = len(rows) - 1
    return "B" if any(i == last for i, _ in region) else "W"