"""Move model tests — neighbors, reversible moves, tile translation, replay."""

from __future__ import annotations

import pytest

from slidehint.engine.gameplay.moves import (
    Move,
    apply_move,
    apply_path,
    first_move_tile_and_direction,
    is_goal,
    neighbors,
    target_index,
)
from slidehint.models.board import Direction
from slidehint.models.errors import InvalidInputError


@pytest.mark.parametrize(
    "blank, expected",
    [
        (0, [3, 1]),          # top-left corner: down, right
        (2, [5, 1]),          # top-right corner: down, left
        (4, [1, 7, 3, 5]),    # centre: all four
        (7, [4, 6, 8]),       # bottom edge
    ],
)
def test_neighbors_3x3(blank: int, expected: list[int]) -> None:
    assert neighbors(3, blank) == expected


def test_target_index_off_grid() -> None:
    assert target_index(4, 3, Direction.RIGHT) is None
    assert target_index(4, 12, Direction.DOWN) is None
    assert target_index(4, 5, Direction.UP) == 1


def test_apply_move_swaps_in_place() -> None:
    tiles = [1, 2, 3, 0]
    apply_move(tiles, 3, 1)

    assert tiles == [1, 0, 3, 2]


def test_move_undo_restores_board() -> None:
    tiles = [1, 2, 3, 4, 5, 6, 7, 8, 0]
    move = Move(Direction.UP, blank=8, target=5)

    assert move.apply(tiles) == 5
    assert tiles == [1, 2, 3, 4, 5, 0, 7, 8, 6]
    assert move.undo(tiles) == 8
    assert tiles == [1, 2, 3, 4, 5, 6, 7, 8, 0]


def test_is_goal() -> None:
    assert is_goal([1, 2, 3, 0])
    assert not is_goal([1, 2, 0, 3])
    assert not is_goal([0, 1, 2, 3])


# -- tile translation ---------------------------------------------------------


def test_blank_right_slides_tile_left() -> None:
    tiles = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 0, 15]

    assert first_move_tile_and_direction(tiles, 14, Direction.RIGHT, 4) == (
        15, Direction.LEFT,
    )


@pytest.mark.parametrize(
    "blank_dir, tile, tile_dir",
    [
        (Direction.UP, 2, Direction.DOWN),
        (Direction.DOWN, 8, Direction.UP),
        (Direction.LEFT, 4, Direction.RIGHT),
        (Direction.RIGHT, 6, Direction.LEFT),
    ],
)
def test_tile_translation_from_centre(blank_dir, tile, tile_dir) -> None:
    tiles = [1, 2, 3, 4, 0, 6, 7, 8, 5]

    assert first_move_tile_and_direction(tiles, 4, blank_dir, 3) == (tile, tile_dir)


def test_tile_translation_off_grid() -> None:
    assert first_move_tile_and_direction([1, 2, 3, 0], 3, Direction.DOWN, 2) == (
        None, None,
    )


# -- path replay --------------------------------------------------------------


def test_apply_path_does_not_touch_input() -> None:
    tiles = [1, 2, 3, 4, 5, 6, 7, 0, 8]

    board, blank = apply_path(tiles, 7, [Direction.RIGHT], 3)

    assert is_goal(board)
    assert blank == 8
    assert tiles == [1, 2, 3, 4, 5, 6, 7, 0, 8]


def test_apply_path_rejects_off_grid_step() -> None:
    with pytest.raises(InvalidInputError):
        apply_path([1, 2, 3, 0], 3, [Direction.UP, Direction.UP], 2)
