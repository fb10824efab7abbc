"""Breadth-first searches over lock states and word ladders."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Sequence

Lock = tuple[int, int, int, int]


def _as_lock(state: Iterable[int]) -> Lock:
    digits = tuple(state)
    if len(digits) != 4 or any(not 0 <= d <= 9 for d in digits):
        raise ValueError(f"lock state must be four digits 0-9, got {digits!r}")
    return digits  # type: ignore[return-value]


def _turns(state: Lock) -> Iterable[Lock]:
    for wheel in range(4):
        for step in (1, -1):
            digits = list(state)
            digits[wheel] = (digits[wheel] + step) % 10
            yield tuple(digits)  # type: ignore[misc]


def min_lock_presses(
    start: Iterable[int], target: Iterable[int], forbidden: Iterable[Iterable[int]] = ()
) -> int:
    """Return the fewest wheel turns from ``start`` to ``target``, or -1 if impossible.

    Forbidden states are never turned from, though reaching the target itself
    always ends the search.
    """
    begin = _as_lock(start)
    goal = _as_lock(target)
    if begin == goal:
        return 0
    blocked = {_as_lock(f) for f in forbidden}
    if begin in blocked:
        return -1
    seen = {begin}
    queue = deque([(begin, 0)])
    while queue:
        state, cost = queue.popleft()
        for nxt in _turns(state):
            if nxt == goal:
                return cost + 1
            if nxt in seen or nxt in blocked:
                continue
            seen.add(nxt)
            queue.append((nxt, cost + 1))
    return -1


def one_char_difference(a: str, b: str) -> bool:
    """Tell whether two words of equal length differ in exactly one position."""
    if len(a) != len(b):
        return False
    return sum(x != y for x, y in zip(a, b)) == 1


def word_ladder_distance(dictionary: Sequence[str], source: str, target: str) -> int:
    """Return the fewest one-letter changes through dictionary words from ``source`` to ``target``.

    Raises ValueError when ``target`` cannot be reached.
    """
    used: set[int] = set()
    queue = deque([(source, 0)])
    while queue:
        word, level = queue.popleft()
        if word == target:
            return level
        for i, candidate in enumerate(dictionary):
            if i not in used and one_char_difference(candidate, word):
                used.add(i)
                queue.append((candidate, level + 1))
    raise ValueError(f"no ladder from {source!r} to {target!r}")