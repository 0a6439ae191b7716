"""Board model for the sliding puzzle solver."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from slidehint.models.errors import InvalidInputError


class Direction(StrEnum):
    """Direction the *blank* moves. Member order is the search order."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def validate_board(tiles: Sequence[int], blank_index: int) -> int:
    """Check that *tiles* is a square permutation with the blank at *blank_index*.

    Returns the grid size N.  Raises ``InvalidInputError`` otherwise.
    """
    count = len(tiles)
    size = math.isqrt(count)
    if count == 0 or size * size != count:
        raise InvalidInputError(
            f"Board has {count} cells, which is not a square grid."
        )
    if sorted(tiles) != list(range(count)):
        raise InvalidInputError(
            f"Board is not a permutation of 0..{count - 1}."
        )
    if not 0 <= blank_index < count or tiles[blank_index] != 0:
        raise InvalidInputError(
            f"Blank index {blank_index} does not hold the blank "
            f"(blank is at {list(tiles).index(0)})."
        )
    return size


@dataclass
class Board:
    """Represents the sliding puzzle board.

    Tiles are stored as a flat row-major list of ints. 0 represents the
    blank space and ``blank`` is its index.
    """

    size: int
    tiles: list[int]
    blank: int

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != size * size:
            raise InvalidInputError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        tiles = list(flat)
        blank = tiles.index(0) if 0 in tiles else -1
        validate_board(tiles, blank)
        return cls(size=size, tiles=tiles, blank=blank)

    @classmethod
    def from_csv(cls, text: str, size: int | None = None) -> Board:
        """Parse a comma-joined board such as ``"1,2,3,4,5,6,7,0,8"``."""
        try:
            flat = [int(part) for part in text.replace(" ", "").split(",") if part]
        except ValueError as exc:
            raise InvalidInputError(f"Board {text!r} is not a list of integers.") from exc
        if size is None:
            size = math.isqrt(len(flat))
        return cls.from_flat(size, flat)

    @classmethod
    def solved(cls, size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        count = size * size
        return cls(size=size, tiles=[*range(1, count), 0], blank=count - 1)

    # -- queries --------------------------------------------------------------

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row * self.size + col]

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        from slidehint.engine.gameplay.moves import is_goal

        return is_goal(self.tiles)

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.get_tile(row, col)
        if val == 0:
            return row == self.size - 1 and col == self.size - 1
        return row * self.size + col == val - 1

    def rows(self) -> list[list[int]]:
        n = self.size
        return [self.tiles[r * n : (r + 1) * n] for r in range(n)]

    def serialize(self) -> str:
        return ",".join(str(v) for v in self.tiles)

    def copy(self) -> Board:
        return Board(size=self.size, tiles=self.tiles[:], blank=self.blank)
