from __future__ import annotations

from typing import Iterable, Optional

from .catalog import known_kinds

MAX_SUGGEST_DISTANCE = 3


def levenshtein(a: str, b: str) -> int:
    """Edit distance between two strings (single-row Wagner-Fischer)."""

    if not a:
        return len(b)
    if not b:
        return len(a)

    row = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        prev = row[0]
        row[0] = i
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            current = min(row[j] + 1, row[j - 1] + 1, prev + cost)
            prev = row[j]
            row[j] = current
    return row[-1]


def suggest_kind(name: str, candidates: Optional[Iterable[str]] = None) -> Optional[str]:
    """Closest known kind for a mistyped name, or None.

    A match is only offered when it differs from the input and sits within
    ``min(3, len(name) // 2)`` edits. Comparison is case-insensitive.
    """

    if not name:
        return None

    lowered = name.lower()
    best: Optional[str] = None
    best_dist = None
    for known in candidates if candidates is not None else known_kinds():
        dist = levenshtein(lowered, known.lower())
        if best_dist is None or dist < best_dist:
            best, best_dist = known, dist

    threshold = min(MAX_SUGGEST_DISTANCE, len(lowered) // 2)
    if best_dist is not None and 0 < best_dist <= threshold:
        return best
    return None
