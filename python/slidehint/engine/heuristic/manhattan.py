"""Manhattan-distance heuristic for N×N sliding puzzles."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache


@lru_cache(maxsize=None)
def goal_positions(size: int) -> tuple[tuple[int, int], ...]:
    """Return the goal ``(row, col)`` of every tile value, indexed by value.

    Value ``v`` belongs at index ``v - 1``; the blank (0) belongs at the
    last index.  Built once per size and shared read-only.
    """
    count = size * size
    table: list[tuple[int, int]] = [(0, 0)] * count
    for i in range(count):
        table[(i + 1) % count] = divmod(i, size)
    return tuple(table)


def manhattan(tiles: Sequence[int], size: int) -> int:
    """Sum of L1 distances from each tile to its goal cell (blank excluded)."""
    goal = goal_positions(size)
    h = 0
    for i, v in enumerate(tiles):
        if v == 0:
            continue
        r, c = divmod(i, size)
        gr, gc = goal[v]
        h += abs(r - gr) + abs(c - gc)
    return h
