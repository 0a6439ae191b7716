"""Hint advisor tests."""

from __future__ import annotations

import pytest

from slidehint.engine.hints import HintAdvisor
from slidehint.models.board import Board, Direction
from slidehint.models.budget import SearchBudget
from slidehint.models.errors import InvalidInputError

ONE_MOVE = Board.from_flat(4, [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 0, 15])


@pytest.fixture
def advisor() -> HintAdvisor:
    return HintAdvisor(SearchBudget(time_budget_ms=5_000))


def test_direct_hint_names_tile_and_direction(advisor: HintAdvisor) -> None:
    hint = advisor.hint(ONE_MOVE)

    assert hint.type == "direct"
    assert hint.tile == 15
    assert hint.direction is Direction.LEFT
    assert hint.message == "Move tile 15 left."
    assert hint.path == [Direction.RIGHT]


@pytest.mark.parametrize("hint_type", ["direct", "strategic"])
def test_solved_board(advisor: HintAdvisor, hint_type: str) -> None:
    hint = advisor.hint(Board.solved(3), hint_type)

    assert hint.message == "Already solved!"
    assert hint.tile is None


def test_hints_are_cached_per_board_and_type(advisor: HintAdvisor) -> None:
    first = advisor.hint(ONE_MOVE)

    assert advisor.hint(ONE_MOVE) is first
    assert advisor.hint(ONE_MOVE, "strategic") is not first

    advisor.clear()
    assert advisor.hint(ONE_MOVE) is not first


def test_no_budget_for_a_move() -> None:
    advisor = HintAdvisor(SearchBudget(max_depth=0))

    hint = advisor.hint(ONE_MOVE)

    assert hint.message == "Hint unavailable. Try again."
    assert hint.tile is None


def test_strategic_points_at_first_unfinished_row(advisor: HintAdvisor) -> None:
    board = Board.from_flat(4, [2, 1, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 0])

    hint = advisor.hint(board, "strategic")

    assert hint.message == "Focus on placing tiles 1-4 across row 1."


def test_strategic_switches_to_columns_for_last_rows(advisor: HintAdvisor) -> None:
    hint = advisor.hint(ONE_MOVE, "strategic")

    assert hint.message == "Focus on pairing tiles 11 and 15 in column 3."


def test_unknown_hint_type(advisor: HintAdvisor) -> None:
    with pytest.raises(InvalidInputError):
        advisor.hint(ONE_MOVE, "cryptic")
