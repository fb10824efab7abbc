"""Numeric searches and counting: bisection, sliding windows, partitions, permutations."""

from __future__ import annotations

import math
from typing import Sequence

_MOD = 1_000_000_007
_BISECTION_STEPS = 100


def solve_equation(p: int, q: int, r: int, s: int, t: int, u: int) -> float | None:
    """Find x in [0, 1] with p*e^-x + q*sin x + r*cos x + s*tan x + t*x^2 + u = 0.

    Returns None when f(0) and f(1) share a sign.
    """

    def f(x: float) -> float:
        return (
            p * math.exp(-x)
            + q * math.sin(x)
            + r * math.cos(x)
            + s * math.tan(x)
            + t * x * x
            + u
        )

    if f(0.0) * f(1.0) > 0:
        return None
    lo, hi = 0.0, 1.0
    for _ in range(_BISECTION_STEPS):
        mid = (lo + hi) / 2
        if f(mid) * f(lo) > 0:
            lo = mid
        else:
            hi = mid
    return (lo + hi) / 2


def crossed_ladders_width(x: float, y: float, c: float) -> float:
    """Return the street width where ladders of lengths ``x`` and ``y`` cross at height ``c``."""
    lo, hi = 0.0, min(x, y)
    for _ in range(_BISECTION_STEPS):
        wide = (lo + hi) / 2
        h1 = math.sqrt(x * x - wide * wide)
        h2 = math.sqrt(y * y - wide * wide)
        if (h1 * h2) / (h1 + h2) <= c:
            hi = wide
        else:
            lo = wide
    return (lo + hi) / 2


def shortest_subsequence_length(values: Sequence[int], target: int) -> int:
    """Return the length of the shortest contiguous run summing to at least ``target``, or 0."""
    items = list(values) + [0]
    n = len(values)
    lo = hi = 0
    total = 0
    best = n + 5
    while hi <= n:
        if total >= target:
            best = min(best, hi - lo + 1)
        if total >= target and lo < hi:
            total -= items[lo]
            lo += 1
        else:
            total += items[hi]
            hi += 1
    best -= 1
    return 0 if best > n else best


def _containers_needed(vessels: Sequence[int], capacity: int) -> int:
    used, load = 0, None
    for v in vessels:
        if load is None or load + v > capacity:
            used += 1
            load = v
        else:
            load += v
    return used


def min_max_capacity(vessels: Sequence[int], containers: int) -> int:
    """Return the smallest container capacity that fills ``vessels``, in order, into ``containers``."""
    amounts = list(vessels)
    total = sum(amounts)
    lo, hi = max(amounts, default=0), total
    best = total
    while lo <= hi:
        mid = (lo + hi) // 2
        if amounts and _containers_needed(amounts, mid) <= containers:
            best = min(best, mid)
            hi = mid - 1
        else:
            lo = mid + 1
    return best


def team_sum(n: int) -> int:
    """Return the sum over all non-empty teams of ``n`` people of the team size, modulo 10^9+7."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return 0
    return n * pow(2, n - 1, _MOD) % _MOD


def kth_permutation(s: str, n: int) -> str:
    """Return the ``n``-th (from 0) permutation of the sorted characters of ``s``."""
    letters = sorted(s)
    if not 0 <= n < math.factorial(len(letters)):
        raise ValueError(f"index {n} out of range for {len(letters)} characters")
    out = []
    while letters:
        block = math.factorial(len(letters) - 1)
        index, n = divmod(n, block)
        out.append(letters.pop(index))
    return "".join(out)