"""Move model — neighbor generation, reversible swaps, and path replay.

Boards here are plain flat lists (row-major, 0 = blank) so the search can
mutate a single buffer in place.  Directions always describe where the
*blank* goes; ``first_move_tile_and_direction`` converts that to the tile
that actually slides.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from slidehint.models.board import Direction
from slidehint.models.errors import InvalidInputError


def target_index(size: int, index: int, direction: Direction) -> int | None:
    """Return the cell next to *index* in *direction*, or ``None`` off-grid."""
    r, c = divmod(index, size)
    dr, dc = direction.delta
    nr, nc = r + dr, c + dc
    if 0 <= nr < size and 0 <= nc < size:
        return nr * size + nc
    return None


def neighbors(size: int, blank_index: int) -> list[int]:
    """Valid orthogonal neighbors of the blank, in search order."""
    out: list[int] = []
    for direction in Direction:
        ni = target_index(size, blank_index, direction)
        if ni is not None:
            out.append(ni)
    return out


def apply_move(tiles: list[int], from_index: int, to_index: int) -> None:
    """Swap two cells in place."""
    tiles[from_index], tiles[to_index] = tiles[to_index], tiles[from_index]


@dataclass(frozen=True)
class Move:
    """A single blank move that can be applied and undone on a buffer."""

    direction: Direction
    blank: int
    target: int

    def apply(self, tiles: list[int]) -> int:
        apply_move(tiles, self.blank, self.target)
        return self.target

    def undo(self, tiles: list[int]) -> int:
        apply_move(tiles, self.target, self.blank)
        return self.blank


def is_goal(tiles: Sequence[int]) -> bool:
    """True iff *tiles* equals ``[1, 2, ..., N²-1, 0]``."""
    last = len(tiles) - 1
    for i, v in enumerate(tiles):
        if v != (i + 1 if i < last else 0):
            return False
    return True


def first_move_tile_and_direction(
    tiles: Sequence[int],
    blank_index: int,
    blank_direction: Direction,
    size: int,
) -> tuple[int | None, Direction | None]:
    """Translate a blank move into ``(tile, tile_direction)``.

    E.g. moving the blank ``LEFT`` slides the tile on its left to the
    ``RIGHT``.  Returns ``(None, None)`` if the move would leave the grid.
    """
    ti = target_index(size, blank_index, blank_direction)
    if ti is None:
        return None, None
    return tiles[ti], blank_direction.opposite


def apply_path(
    tiles: Sequence[int],
    blank_index: int,
    path: Sequence[Direction],
    size: int,
) -> tuple[list[int], int]:
    """Replay *path* on a copy of *tiles*.

    Returns the resulting board and blank index.  Raises
    ``InvalidInputError`` if any step would push the blank off the grid.
    """
    board = list(tiles)
    blank = blank_index
    for i, direction in enumerate(path):
        ni = target_index(size, blank, Direction(direction))
        if ni is None:
            raise InvalidInputError(
                f"Step {i} ({Direction(direction).value}) moves the blank "
                f"off the grid at index {blank}."
            )
        apply_move(board, blank, ni)
        blank = ni
    return board, blank
