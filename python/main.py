#!/usr/bin/env python3
"""Eight Puzzle Solver.

Usage::

    python main.py solve 123456708        # shortest path to the goal
    python main.py solve 0,1,2,3,4,5,6,7,8 --goal 123456780
    python main.py hint 123405786         # which tile to slide next
    python main.py stats                  # size of the state graph
    python main.py play                   # Rich terminal game
"""

import sys
from pathlib import Path
from typing import Optional

import rich.box
import typer
from rich.console import Console
from rich.table import Table

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from eightpuzzle.config import DEFAULT_LOG_LEVEL, GOAL, LOG_LEVEL_ENVVAR  # noqa: E402
from eightpuzzle.engine.gamesolver import PuzzleSolver, directions_from_path  # noqa: E402
from eightpuzzle.engine.statecodec import StateCodec, StateKey  # noqa: E402
from eightpuzzle.errors import InvalidBoardError  # noqa: E402
from eightpuzzle.utils import get_level_from_string, setup_logger  # noqa: E402

console = Console()


# -- helpers ------------------------------------------------------------------


def _build_solver() -> PuzzleSolver:
    """Build the state graph once for this process."""
    with console.status("Enumerating all 362,880 states…"):
        return PuzzleSolver.create()


def _parse_key(value: str, param: str) -> StateKey:
    try:
        return StateCodec.from_text(value)
    except InvalidBoardError as exc:
        raise typer.BadParameter(str(exc), param_hint=param) from exc


def _grid_text(key: StateKey) -> str:
    text = StateCodec.to_text(key)
    return "/".join(text[i : i + 3] for i in range(0, 9, 3))


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, help="Optimal solver for the 3×3 sliding puzzle.")


@app.callback()
def main(
    log_level: str = typer.Option(
        DEFAULT_LOG_LEVEL, "--log-level",
        envvar=LOG_LEVEL_ENVVAR,
        help="debug, info, warning, error or critical.",
    ),
) -> None:
    """Eight Puzzle Solver."""
    setup_logger("eightpuzzle", get_level_from_string(log_level))


@app.command()
def solve(
    board: str = typer.Argument(..., help="Start board, row-major, 0 = blank."),
    goal: str = typer.Option(
        StateCodec.to_text(GOAL), "-g", "--goal",
        help="Goal board.",
    ),
) -> None:
    """Print a shortest sequence of boards from BOARD to the goal."""
    start_key = _parse_key(board, "BOARD")
    goal_key = _parse_key(goal, "--goal")

    path = _build_solver().solve_keys(start_key, goal_key)
    if path is None:
        console.print(
            f"[red]No solution:[/red] {_grid_text(goal_key)} is unreachable "
            f"from {_grid_text(start_key)}."
        )
        raise typer.Exit(code=1)

    moves = directions_from_path(path)
    table = Table(box=rich.box.SIMPLE, header_style="bold cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Board")
    table.add_column("Tile moved", style="yellow")
    for i, key in enumerate(path):
        moved = ""
        if i:
            tile = path[i - 1][StateCodec.blank_position(key)]
            moved = f"{tile} {moves[i - 1].value}"
        table.add_row(str(i), _grid_text(key), moved)

    console.print(table)
    console.print(f"[bold green]Solved in {len(path) - 1} moves.[/bold green]")


@app.command()
def hint(
    board: str = typer.Argument(..., help="Current board, row-major, 0 = blank."),
) -> None:
    """Name the tile to slide into the blank next."""
    key = _parse_key(board, "BOARD")
    if key == GOAL:
        console.print("[green]Already solved![/green]")
        return

    solver = _build_solver()
    tile = solver.hint_tile(StateCodec.to_board(key))
    if tile is None:
        console.print("[red]No solution found.[/red]")
        raise typer.Exit(code=1)
    console.print(f"[cyan]Hint:[/cyan] move tile [bold]{tile}[/bold] into the blank space.")


@app.command()
def stats() -> None:
    """Show the size and degree distribution of the state graph."""
    topology = _build_solver().topology

    table = Table(title="State graph", box=rich.box.ROUNDED, title_style="bold cyan")
    table.add_column("Measure")
    table.add_column("Value", justify="right", style="yellow")
    table.add_row("States", f"{len(topology):,}")
    table.add_row("Directed edges", f"{topology.edge_count:,}")
    for degree, count in topology.degree_histogram().items():
        table.add_row(f"States with degree {degree}", f"{count:,}")
    console.print(table)


@app.command()
def play(
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed the shuffle for a reproducible game.",
    ),
) -> None:
    """Play in the Rich terminal frontend."""
    from frontend.cli.rich.app import run

    run(_build_solver(), seed=seed)


if __name__ == "__main__":
    app()
