"""Sliding puzzle solver — time-bounded IDA* with a Manhattan heuristic.

Each round is a depth-first pass bounded by ``f = g + h``; the next
round's bound is the smallest ``f`` rejected in the previous one.  The
search works on a single board buffer that every move applies to and
undoes again, and it reports outcomes through return values:

  - ``FOUND``      the goal was reached (path stored on the context)
  - ``TIMED_OUT``  the wall-clock deadline passed
  - a number       the smallest over-bound ``f`` seen (``inf`` if none)

When the budget runs out the best partial prefix seen so far is returned
instead of a solution.
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable, Sequence

from slidehint.engine.gameplay.moves import Move, target_index
from slidehint.engine.heuristic.manhattan import manhattan
from slidehint.models.board import Board, Direction, validate_board
from slidehint.models.budget import SearchBudget, SearchResult

logger = logging.getLogger(__name__)

FOUND = object()
TIMED_OUT = object()

Clock = Callable[[], float]


class _SearchContext:
    """Mutable state owned by exactly one ``solve`` call."""

    __slots__ = (
        "tiles", "size", "blank", "path", "max_depth", "budget_s",
        "clock", "started", "nodes", "solution", "best", "best_score",
    )

    def __init__(self, tiles: list[int], blank: int, size: int,
                 budget: SearchBudget, clock: Clock) -> None:
        self.tiles = tiles
        self.size = size
        self.blank = blank
        self.path: list[Direction] = []
        self.max_depth = budget.max_depth
        self.budget_s = budget.time_budget_ms / 1000.0
        self.clock = clock
        self.started = clock()
        self.nodes = 0
        self.solution: list[Direction] | None = None
        self.best: list[Direction] | None = None
        self.best_score: tuple[int, int] | None = None

    def push(self, move: Move) -> None:
        self.blank = move.apply(self.tiles)
        self.path.append(move.direction)

    def pop(self, move: Move) -> None:
        self.path.pop()
        self.blank = move.undo(self.tiles)

    def expired(self) -> bool:
        return self.clock() - self.started > self.budget_s

    def offer_partial(self, f: int, h: int) -> None:
        # Scored on the candidate's own board: lower f, then lower h.
        score = (f, h)
        if self.best_score is None or score < self.best_score:
            self.best = self.path[:]
            self.best_score = score

    def partial(self) -> list[Direction]:
        return self.best[:] if self.best is not None else []


def _search(ctx: _SearchContext, g: int, bound: int,
            prev: Direction | None) -> object | float:
    h = manhattan(ctx.tiles, ctx.size)
    f = g + h
    if f > bound:
        ctx.offer_partial(f, h)
        return f
    if h == 0:
        ctx.solution = ctx.path[:]
        return FOUND
    if g >= ctx.max_depth:
        return math.inf
    if ctx.expired():
        return TIMED_OUT

    minimum: float = math.inf
    for direction in Direction:
        if prev is not None and direction is prev.opposite:
            continue  # no 180s
        ni = target_index(ctx.size, ctx.blank, direction)
        if ni is None:
            continue

        move = Move(direction, ctx.blank, ni)
        ctx.push(move)
        ctx.nodes += 1
        t = _search(ctx, g + 1, bound, direction)
        ctx.pop(move)

        if t is FOUND or t is TIMED_OUT:
            return t
        if t < minimum:
            minimum = t
    return minimum


def solve(
    board: Sequence[int],
    blank_index: int,
    budget: SearchBudget | None = None,
    *,
    clock: Clock = time.perf_counter,
) -> SearchResult:
    """Search for a shortest blank-move path from *board* to the goal.

    *board* is a flat row-major permutation of ``0..N²-1`` and is never
    mutated.  Raises ``InvalidInputError`` if it is malformed or the blank
    is not at *blank_index*.  Running out of time or depth is not an
    error: the result then carries the best partial path, with
    ``timed_out`` set if the deadline was the cause.
    """
    budget = budget or SearchBudget()
    size = validate_board(board, blank_index)
    ctx = _SearchContext(list(board), blank_index, size, budget, clock)

    bound = manhattan(ctx.tiles, size)
    rounds = 0
    while True:
        rounds += 1
        logger.debug("IDA* round %d: bound=%d nodes=%d", rounds, bound, ctx.nodes)
        t = _search(ctx, 0, bound, None)
        if t is FOUND:
            result = SearchResult(ctx.solution or [], ctx.nodes, False)
            outcome = "solved"
            break
        if t is TIMED_OUT:
            result = SearchResult(ctx.partial(), ctx.nodes, True)
            outcome = "timed out"
            break
        if t == math.inf:
            result = SearchResult(ctx.partial(), ctx.nodes, False)
            outcome = "depth exhausted"
            break
        bound = int(t)

    logger.info(
        "%d×%d search %s: %d moves, %d nodes, %d rounds, %.1f ms",
        size, size, outcome, result.moves, result.nodes_expanded, rounds,
        (clock() - ctx.started) * 1000.0,
    )
    return result


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(board: Board, budget: SearchBudget | None = None) -> SearchResult:
        """Run the search on a ``Board``."""
        return solve(board.tiles, board.blank, budget)

    @staticmethod
    def hint(board: Board, budget: SearchBudget | None = None) -> Direction | None:
        """Return the next blank move, or ``None`` if solved / nothing useful found."""
        if board.is_solved():
            return None
        result = Solver.solve(board, budget)
        return result.path[0] if result.path else None
