"""Dynamic-programming counts and optimisations: knapsacks, coin change, pebbles, prime sums."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from functools import cache
from typing import Iterable, Sequence

_CENT_COINS = (1, 5, 10, 25, 50)


@dataclass(frozen=True)
class DivePlan:
    """The gold a dive recovers and the ``(depth, gold)`` treasures it picks up, in input order."""

    gold: int
    treasures: tuple[tuple[int, int], ...]


def super_sale(items: Sequence[tuple[int, int]], capacities: Iterable[int]) -> int:
    """Return the total price that people of the given carrying capacities can take.

    ``items`` holds ``(price, weight)`` pairs; each person picks each item at most once.
    """
    limits = list(capacities)
    if any(c < 0 for c in limits):
        raise ValueError("capacities must not be negative")
    if not limits:
        return 0
    top = max(limits)
    best = [0] * (top + 1)
    for price, weight in items:
        if weight < 0:
            raise ValueError("item weights must not be negative")
        for w in range(top, weight - 1, -1):
            best[w] = max(best[w], best[w - weight] + price)
    return sum(best[c] for c in limits)


def min_pebbles(board: str) -> int:
    """Return the fewest pebbles left on a board of ``'o'`` and ``'-'`` after jumping.

    A pebble may jump over a neighbouring pebble into an empty cell beyond it,
    removing the pebble jumped over.
    """
    if set(board) - {"o", "-"}:
        raise ValueError(f"board may hold only 'o' and '-', got {board!r}")
    size = len(board)
    start = sum(1 << i for i, cell in enumerate(board) if cell == "o")

    @cache
    def solve(mask: int) -> int:
        best = bin(mask).count("1")
        for i in range(size - 2):
            window = (mask >> i) & 0b111
            if window == 0b110:
                best = min(best, solve(mask & ~(0b111 << i) | (0b001 << i)))
            elif window == 0b011:
                best = min(best, solve(mask & ~(0b111 << i) | (0b100 << i)))
        return best

    return solve(start)


def _count_ways(coins: Iterable[int], amount: int) -> int:
    if amount < 0:
        raise ValueError("amount must not be negative")
    ways = [1] + [0] * amount
    for coin in coins:
        for value in range(coin, amount + 1):
            ways[value] += ways[value - coin]
    return ways[amount]


def cubic_coin_ways(amount: int) -> int:
    """Count the ways to pay ``amount`` with coins worth the cubes 1, 8, 27, ..."""
    cubes = []
    side = 1
    while side**3 <= max(amount, 0):
        cubes.append(side**3)
        side += 1
    return _count_ways(cubes, amount)


def coin_change_ways(amount: int) -> int:
    """Count the ways to pay ``amount`` cents with 1, 5, 10, 25 and 50 cent coins."""
    return _count_ways(_CENT_COINS, amount)


def _primes_up_to(limit: int) -> list[int]:
    if limit < 2:
        return []
    sieve = bytearray([1]) * (limit + 1)
    sieve[0] = sieve[1] = 0
    for p in range(2, int(limit**0.5) + 1):
        if sieve[p]:
            sieve[p * p :: p] = bytes(len(range(p * p, limit + 1, p)))
    return [p for p, flag in enumerate(sieve) if flag]


def prime_sum_ways(n: int, k: int) -> int:
    """Count the ways to write ``n`` as a sum of ``k`` distinct primes."""
    if n < 0 or k < 0:
        raise ValueError("n and k must not be negative")
    ways = [[0] * (n + 1) for _ in range(k + 1)]
    ways[0][0] = 1
    for p in _primes_up_to(n):
        for j in range(k, 0, -1):
            previous, row = ways[j - 1], ways[j]
            for total in range(n, p - 1, -1):
                row[total] += previous[total - p]
    return ways[k][n]


def max_interceptions(heights: Iterable[int]) -> int:
    """Return the length of the longest strictly decreasing subsequence of ``heights``."""
    tails: list[int] = []
    for h in heights:
        pos = bisect_left(tails, -h)
        if pos == len(tails):
            tails.append(-h)
        else:
            tails[pos] = -h
    return len(tails)


def treasure_dive(
    total_time: int, coefficient: int, treasures: Sequence[tuple[int, int]]
) -> DivePlan:
    """Choose treasures to recover within ``total_time``.

    Each ``(depth, gold)`` treasure costs ``3 * depth * coefficient`` time. A
    treasure is taken only when that is strictly better than leaving it.
    """
    if total_time < 0 or coefficient < 0:
        raise ValueError("time and coefficient must not be negative")
    if any(depth < 0 for depth, _ in treasures):
        raise ValueError("depths must not be negative")
    items = [tuple(t) for t in treasures]
    span = total_time + 1
    best = [[0] * span for _ in range(len(items) + 1)]

    def take_value(i: int, t: int) -> int:
        depth, gold = items[i]
        cost = 3 * depth * coefficient
        return gold + best[i + 1][t + cost] if t + cost <= total_time else 0

    for i in reversed(range(len(items))):
        following = best[i + 1]
        best[i] = [max(take_value(i, t), following[t]) for t in range(span)]

    chosen = []
    t = 0
    for i, (depth, gold) in enumerate(items):
        if take_value(i, t) > best[i + 1][t]:
            chosen.append((depth, gold))
            t += 3 * depth * coefficient
    return DivePlan(gold=best[0][0], treasures=tuple(chosen))