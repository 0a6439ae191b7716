"""Shared fixtures: a brute-force distance oracle and seeded scrambles."""

from __future__ import annotations

import random
from collections.abc import Callable

import pytest

from slidehint.engine.gamegenerator import GameGenerator
from slidehint.models.board import Board


def _bfs_distance(tiles: list[int], size: int, limit: int = 31) -> int:
    """Exact number of moves to the goal, by breadth-first search."""
    start = tuple(tiles)
    goal = tuple([*range(1, size * size), 0])
    if start == goal:
        return 0

    frontier = [start]
    seen = {start}
    for depth in range(1, limit + 1):
        nxt: list[tuple[int, ...]] = []
        for state in frontier:
            z = state.index(0)
            r, c = divmod(z, size)
            for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
                nr, nc = r + dr, c + dc
                if not (0 <= nr < size and 0 <= nc < size):
                    continue
                cells = list(state)
                ni = nr * size + nc
                cells[z], cells[ni] = cells[ni], cells[z]
                child = tuple(cells)
                if child == goal:
                    return depth
                if child not in seen:
                    seen.add(child)
                    nxt.append(child)
        frontier = nxt
    raise AssertionError(f"goal not reached within {limit} moves")


def _scrambled(size: int, steps: int, seed: int) -> Board:
    board = GameGenerator.solved(size)
    GameGenerator.scramble(board, steps, random.Random(seed))
    return board


@pytest.fixture
def bfs_distance() -> Callable[..., int]:
    return _bfs_distance


@pytest.fixture
def scrambled() -> Callable[[int, int, int], Board]:
    return _scrambled
