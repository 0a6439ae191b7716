"""Turns solver output into human-facing hints."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from slidehint.engine.gameplay.moves import first_move_tile_and_direction
from slidehint.engine.gamesolver.solver import solve
from slidehint.models.board import Board, Direction
from slidehint.models.budget import SearchBudget
from slidehint.models.errors import InvalidInputError

logger = logging.getLogger(__name__)

HINT_TYPES = ("direct", "strategic")
PLAN_PREVIEW = 12


@dataclass
class Hint:
    type: str
    message: str
    tile: int | None = None
    direction: Direction | None = None  # where the tile slides
    path: list[Direction] = field(default_factory=list)


def _strategic_focus(board: Board) -> str:
    """Describe the next sub-goal: rows from the top, then the last two rows by column."""
    n = board.size
    for r in range(n - 2):
        if not all(board.is_tile_correct(r, c) for c in range(n)):
            first = r * n + 1
            return f"Focus on placing tiles {first}-{first + n - 1} across row {r + 1}."
    for c in range(n - 1):
        if not (board.is_tile_correct(n - 2, c) and board.is_tile_correct(n - 1, c)):
            upper = (n - 2) * n + c + 1
            return (
                f"Focus on pairing tiles {upper} and {upper + n} "
                f"in column {c + 1}."
            )
    return "Rotate the last corner into place."


class HintAdvisor:
    """Computes direct and strategic hints, cached per board for its lifetime."""

    def __init__(self, budget: SearchBudget | None = None) -> None:
        self.budget = budget or SearchBudget()
        self._cache: dict[str, Hint] = {}

    def hint(self, board: Board, hint_type: str = "direct") -> Hint:
        if hint_type not in HINT_TYPES:
            raise InvalidInputError(
                f"Unknown hint type {hint_type!r}; choose from {', '.join(HINT_TYPES)}."
            )
        key = f"{hint_type}|{board.serialize()}"
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("hint cache hit for %s", key)
            return cached

        result = self._build(board, hint_type)
        self._cache[key] = result
        return result

    def clear(self) -> None:
        self._cache.clear()

    # -- helpers --------------------------------------------------------------

    def _build(self, board: Board, hint_type: str) -> Hint:
        if board.is_solved():
            return Hint(type=hint_type, message="Already solved!")

        if hint_type == "strategic":
            return Hint(type="strategic", message=_strategic_focus(board))

        result = solve(board.tiles, board.blank, self.budget)
        plan = result.path[:PLAN_PREVIEW]
        if not result.path:
            return Hint(type="direct", message="Hint unavailable. Try again.")

        tile, tile_dir = first_move_tile_and_direction(
            board.tiles, board.blank, result.path[0], board.size
        )
        return Hint(
            type="direct",
            message=f"Move tile {tile} {tile_dir}.",
            tile=tile,
            direction=tile_dir,
            path=plan,
        )
