"""Command-line interface.

Usage::

    slidehint solve 1,2,3,4,5,6,7,0,8          # solve a 3×3 board
    slidehint solve 5,1,2,4,0,3,7,8,6 --json   # machine-readable result
    slidehint hint 1,2,3,0,4,6,7,5,8 --type strategic
    slidehint scramble -s 4 --preset hard --seed 7
"""

import json
import logging
import random
from enum import StrEnum
from typing import Optional

import typer
from rich.align import Align
from rich.console import Console
from rich.logging import RichHandler

from slidehint.cli.render import render_board, render_hint, render_result
from slidehint.engine.gamegenerator import PRESETS, GameGenerator
from slidehint.engine.gamesolver import Solver
from slidehint.engine.hints import HintAdvisor
from slidehint.models.board import Board
from slidehint.models.budget import MAX_SEARCH_DEPTH, SearchBudget
from slidehint.models.errors import InvalidInputError

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(add_completion=False, help="Time-bounded sliding puzzle solver.")

Preset = StrEnum("Preset", {name: name for name in PRESETS})


class HintType(StrEnum):
    direct = "direct"
    strategic = "strategic"


# -- helpers ------------------------------------------------------------------


def setup_logging(level: int = logging.WARNING) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _parse_board(text: str) -> Board:
    try:
        return Board.from_csv(text)
    except InvalidInputError as exc:
        raise typer.BadParameter(str(exc), param_hint="BOARD") from exc


def _budget(time_ms: float, max_depth: int) -> SearchBudget:
    try:
        return SearchBudget(time_budget_ms=time_ms, max_depth=max_depth)
    except InvalidInputError as exc:
        raise typer.BadParameter(str(exc)) from exc


_BOARD_ARG = typer.Argument(..., help="Comma-joined tiles, row-major, 0 = blank.")
_TIME_OPT = typer.Option(
    800.0, "--time-ms", envvar="SLIDEHINT_TIME_MS",
    help="Wall-clock search budget in milliseconds.",
)
_DEPTH_OPT = typer.Option(
    128, "--max-depth", envvar="SLIDEHINT_MAX_DEPTH",
    min=0, max=MAX_SEARCH_DEPTH,
    help="Hard ceiling on path length.",
)


# -- commands -----------------------------------------------------------------


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log each search round.",
    ),
) -> None:
    """Time-bounded sliding puzzle solver."""
    setup_logging(logging.DEBUG if verbose else logging.WARNING)


@app.command("solve")
def solve_cmd(
    board: str = _BOARD_ARG,
    time_ms: float = _TIME_OPT,
    max_depth: int = _DEPTH_OPT,
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
) -> None:
    """Search for a shortest move sequence (blank directions)."""
    parsed = _parse_board(board)
    result = Solver.solve(parsed, _budget(time_ms, max_depth))

    if as_json:
        typer.echo(json.dumps({"board": parsed.tiles, "size": parsed.size,
                               **result.to_dict()}))
        return
    console.print(Align.center(render_result(parsed, result)))


@app.command("hint")
def hint_cmd(
    board: str = _BOARD_ARG,
    hint_type: HintType = typer.Option(HintType.direct, "--type", help="Hint flavour."),
    time_ms: float = _TIME_OPT,
    max_depth: int = _DEPTH_OPT,
    as_json: bool = typer.Option(False, "--json", help="Print the hint as JSON."),
) -> None:
    """Suggest the next tile to slide, or the next sub-goal."""
    parsed = _parse_board(board)
    advisor = HintAdvisor(_budget(time_ms, max_depth))
    hint = advisor.hint(parsed, hint_type.value)

    if as_json:
        typer.echo(json.dumps({
            "type": hint.type,
            "message": hint.message,
            "tile": hint.tile,
            "direction": hint.direction.value if hint.direction else None,
            "path": [d.value for d in hint.path],
        }))
        return
    console.print(Align.center(render_hint(parsed, hint)))


@app.command("scramble")
def scramble_cmd(
    size: int = typer.Option(4, "-s", "--size", min=3, max=8, help="Grid size (3-8)."),
    preset: Preset = typer.Option(Preset("medium"), "-p", "--preset", help="Scramble depth."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed."),
    csv: bool = typer.Option(False, "--csv", help="Print only the comma-joined board."),
) -> None:
    """Print a random solvable board."""
    board = GameGenerator.generate(size, preset.value, random.Random(seed))
    if csv:
        typer.echo(board.serialize())
        return
    console.print(Align.center(render_board(board)))
    console.print(Align.center(board.serialize()))
