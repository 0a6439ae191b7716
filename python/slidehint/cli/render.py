"""Rich renderables for boards, search results and hints."""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from slidehint.engine.hints import Hint
from slidehint.models.board import Board
from slidehint.models.budget import SearchResult


def cell_markup(board: Board, index: int, highlight: int | None = None) -> str:
    """Markup for one cell: blank dimmed, hinted tile cyan, placed tiles green."""
    val = board.tiles[index]
    width = len(str(len(board.tiles) - 1))
    if val == 0:
        return "[dim]·[/dim]"
    if val == highlight:
        style = "bold black on cyan"
    elif board.is_tile_correct(*divmod(index, board.size)):
        style = "bold green"
    else:
        style = "bold white"
    return f"[{style}]{val:>{width}}[/{style}]"


def render_board(board: Board, highlight: int | None = None) -> Table:
    """Return a Rich Table of the grid, optionally marking the *highlight* tile."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    n = board.size
    for r in range(n):
        table.add_row(*(cell_markup(board, r * n + c, highlight) for c in range(n)))
    return table


def render_result(board: Board, result: SearchResult) -> Panel:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(result.moves), style="bold yellow")
    stats.append("    Nodes: ", style="dim")
    stats.append(str(result.nodes_expanded), style="bold yellow")
    if result.timed_out:
        stats.append("    timed out", style="bold red")

    path = Text()
    path.append("  Path: ", style="dim")
    path.append(" > ".join(d.value for d in result.path) or "none", style="cyan")

    title_style = "bold yellow" if result.timed_out else "bold green"
    size = board.size
    return Panel(
        Group(Align.center(render_board(board)), Text(""), stats, path),
        title=f"[{title_style}]Solve  {size}×{size}[/{title_style}]",
        border_style="bright_blue",
        padding=(1, 2),
    )


def render_hint(board: Board, hint: Hint) -> Panel:
    body = Text()
    body.append("  Hint: ", style="bold cyan")
    body.append(hint.message)
    size = board.size
    return Panel(
        Group(Align.center(render_board(board, hint.tile)), Text(""), body),
        title=f"[bold cyan]{hint.type.capitalize()} hint  {size}×{size}[/bold cyan]",
        border_style="cyan",
        padding=(1, 2),
    )
