"""String algorithms: prefix functions, periodicity, palindromes and keyboard fingering."""

from __future__ import annotations

from typing import Iterable, Sequence

_KEYBOARD_ROWS = {
    1: "qaz",
    2: "wsx",
    3: "edc",
    4: "rfvtgb",
    7: "yhnujm",
    8: "ik,",
    9: "ol.",
    10: "p;/",
}
_FINGER_OF = {key: finger for finger, keys in _KEYBOARD_ROWS.items() for key in keys}


def prefix_function(s: str) -> list[int]:
    """Return the prefix function of ``s``.

    Entry ``i`` is the length of the longest proper prefix of ``s[: i + 1]``
    that is also its suffix.
    """
    pi = [0] * len(s)
    j = 0
    for i, ch in enumerate(s[1:], start=1):
        while j > 0 and ch != s[j]:
            j = pi[j - 1]
        if ch == s[j]:
            j += 1
        pi[i] = j
    return pi


def power_of_string(s: str) -> int:
    """Return how many times the shortest border-derived period fits into ``s``."""
    if not s:
        raise ValueError("string must not be empty")
    period = len(s) - prefix_function(s)[-1]
    return len(s) // period


def extend_to_palindrome(s: str) -> str:
    """Append the fewest characters to ``s`` that make it a palindrome."""
    if not s:
        return s
    reverse = s[::-1]
    pi = prefix_function(reverse)
    j = 0
    for ch in s:
        while j > 0 and ch != reverse[j]:
            j = pi[j - 1]
        if ch == reverse[j]:
            j += 1
    return s + reverse[j:]


def finger_for(char: str) -> int | None:
    """Return the finger (1-10) that types ``char``, or None if no finger is assigned."""
    return _FINGER_OF.get(char)


def longest_typeable_words(lost_fingers: Iterable[int], words: Sequence[str]) -> list[str]:
    """Return, sorted, the longest words typeable without the lost fingers.

    Typeable words where one is a prefix of another are merged, keeping the
    longer one.
    """
    lost = set(lost_fingers)
    bad = [f for f in lost if not 1 <= f <= 10]
    if bad:
        raise ValueError(f"fingers must be numbered 1-10, got {sorted(bad)!r}")

    kept: list[str] = []
    for word in words:
        if any(finger_for(ch) in lost for ch in word):
            continue
        for pos, other in enumerate(kept):
            if other.startswith(word) or word.startswith(other):
                if len(word) > len(other):
                    kept[pos] = word
                break
        else:
            kept.append(word)

    if not kept:
        return []
    longest = max(len(w) for w in kept)
    return sorted(w for w in kept if len(w) == longest)