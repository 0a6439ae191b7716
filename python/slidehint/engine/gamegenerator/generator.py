"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import random

from slidehint.engine.gameplay.moves import apply_move, neighbors
from slidehint.models.board import Board
from slidehint.models.errors import InvalidInputError

# Number of random blank moves per difficulty.
PRESETS: dict[str, int] = {
    "almost": 1,
    "easy": 10,
    "medium": 30,
    "hard": 60,
    "expert": 120,
    "diabolical": 200,
}


class GameGenerator:
    """Creates solvable puzzles by random walks from the solved state."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.solved(size)

    @staticmethod
    def scramble(board: Board, steps: int, rng: random.Random | None = None) -> None:
        """Scramble *board* in-place with *steps* random blank moves.

        The blank never steps straight back to the cell it just left.
        """
        rng = rng or random.Random()
        prev: int | None = None

        for _ in range(steps):
            candidates = neighbors(board.size, board.blank)
            if prev in candidates and len(candidates) > 1:
                candidates.remove(prev)
            target = rng.choice(candidates)
            prev = board.blank
            apply_move(board.tiles, board.blank, target)
            board.blank = target

    @staticmethod
    def generate(size: int, preset: str = "medium",
                 rng: random.Random | None = None) -> Board:
        """Return a random *solvable* board scrambled per *preset*."""
        if preset not in PRESETS:
            raise InvalidInputError(
                f"Unknown preset {preset!r}; choose from {', '.join(PRESETS)}."
            )
        if size < 2:
            raise InvalidInputError(f"Board size must be at least 2, got {size}.")
        board = GameGenerator.solved(size)
        GameGenerator.scramble(board, PRESETS[preset], rng)
        return board
