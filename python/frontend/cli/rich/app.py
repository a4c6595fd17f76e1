"""Rich terminal frontend.

Consumes the core only through :class:`PuzzleSolver`: the board is turned
into a state key for hints and auto-solve, and the returned path is replayed
as tile moves.
"""

from __future__ import annotations

import random
import sys
import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from eightpuzzle.engine.gamegenerator import GameGenerator
from eightpuzzle.engine.gameplay import GamePlay
from eightpuzzle.engine.gamesolver import PuzzleSolver
from eightpuzzle.models.board import Board, Direction
from frontend.cli.input_handler import get_key

console = Console()

_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=2, justify="center")

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val}[/bold green]")
            else:
                cells.append(f"[bold white]{val}[/bold white]")
        table.add_row(*cells)

    return table


# -- solver helpers -----------------------------------------------------------


def hint_message(solver: PuzzleSolver, game: GamePlay) -> str:
    if game.is_won:
        return "[green]Already solved![/green]"
    tile = solver.hint_tile(game.board)
    if tile is None:
        return "[red]No solution found.[/red]"
    return f"[cyan]Hint:[/cyan] move tile [bold]{tile}[/bold] into the blank space."


def auto_solve(solver: PuzzleSolver, game: GamePlay, delay: float = 0.15) -> str:
    """Replay a shortest solution on *game*, redrawing after every move."""
    moves = solver.solve_moves(game.board)
    if moves is None:
        return "[red]Board is unsolvable.[/red]"
    if not moves:
        return "[green]Already solved![/green]"

    for i, direction in enumerate(moves):
        game.move(direction)
        if delay:
            progress = Text()
            progress.append(f"  Solving… move {i + 1}/{len(moves)} ", style="bold cyan")
            progress.append(f"({direction.value})", style="dim")
            _draw(game, "Auto-Solve", "cyan", progress)
            sys.stdout.flush()
            time.sleep(delay)

    return f"[bold green]Solved in {len(moves)} moves![/bold green]"


# -- screens ------------------------------------------------------------------


def _controls(study: bool) -> Text:
    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("R", style="bold yellow")
    controls.append("  scramble   " if study else "  reset   ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append("  hint   ", style="dim")
    controls.append("V", style="bold cyan")
    controls.append("  solve   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  back", style="dim")
    return controls


def _draw(game: GamePlay, title: str, colour: str, *footer: Text) -> None:
    console.clear()
    panel = Panel(
        Align.center(render_board(game.board)),
        title=f"[bold {colour}]{title}  3×3[/bold {colour}]",
        border_style=colour,
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    for line in footer:
        console.print(Align.center(line))


def _draw_win(game: GamePlay) -> None:
    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("CONGRATULATIONS!", style="bold green")
    congrats.append("  You solved it!  ", style="green")
    congrats.append("★\n", style="bold yellow")

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.moves), style="bold yellow")

    console.clear()
    panel = Panel(
        Group(Align.center(render_board(game.board)), Align.center(congrats), Align.center(stats)),
        title="[bold green]Eight Puzzle[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(Text("\n  Press R to play again, Q to go back.\n", style="dim")))


def _draw_menu() -> None:
    opts = Text()
    opts.append("  1", style="bold cyan")
    opts.append("  Play    ")
    opts.append("2", style="bold yellow")
    opts.append("  Study    ")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    console.clear()
    panel = Panel(
        Group(Text(""), Align.center(opts), Text("")),
        title="[bold]E I G H T   P U Z Z L E[/bold]",
        border_style="bright_blue",
        padding=(1, 4),
    )
    console.print()
    console.print(Align.center(panel))


# -- game loop ----------------------------------------------------------------


def _session(solver: PuzzleSolver, rng: random.Random, study: bool) -> None:
    """Play mode starts shuffled; study mode starts solved and scrambles on R."""
    game = GamePlay(GameGenerator.solved() if study else GameGenerator.shuffle(rng))
    title, colour = ("Study", "yellow") if study else ("Eight Puzzle", "bright_blue")
    status = ""

    while True:
        moves = Text.assemble(("  Moves: ", "dim"), (str(game.moves), "bold yellow"))
        footer = [moves]
        if status:
            footer.append(Text.from_markup(f"  {status}"))
        footer.append(_controls(study))
        _draw(game, title, colour, *footer)
        status = ""

        key = get_key()
        if key in _DIRECTIONS:
            game.move(_DIRECTIONS[key])
        elif key == "hint":
            status = hint_message(solver, game)
        elif key == "solve":
            status = auto_solve(solver, game)
        elif key == "reset":
            board = GameGenerator.generate(rng) if study else GameGenerator.shuffle(rng)
            game = GamePlay(board)
            status = "[yellow]Scrambled![/yellow]" if study else ""
        elif key == "quit":
            return

        if game.is_won and not study:
            _draw_win(game)
            while True:
                key = get_key()
                if key == "reset":
                    game = GamePlay(GameGenerator.shuffle(rng))
                    break
                if key == "quit":
                    return


# -- public entry point -------------------------------------------------------


def run(solver: PuzzleSolver, seed: int | None = None) -> None:
    """Launch the Rich CLI with its menu."""
    rng = random.Random(seed)
    while True:
        _draw_menu()
        key = get_key()
        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        if key in ("1", "enter"):
            _session(solver, rng, study=False)
        elif key == "2":
            _session(solver, rng, study=True)
