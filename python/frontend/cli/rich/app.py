"""Rich terminal frontend: the board as a styled table.

The player types the number shown on a tile to slide it into the blank.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.engine.gamestate import SIZE, TILE_COUNT, PuzzleState

console = Console()


# -- board rendering ----------------------------------------------------------


def _render_board(state: PuzzleState) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(TILE_COUNT))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(SIZE):
        table.add_column(width=width + 1, justify="center")

    for row in state.rows():
        cells: list[str] = []
        for tile in row:
            if tile.is_blank:
                cells.append("[dim]·[/dim]")
            else:
                cells.append(f"[bold white]{tile.label:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _draw_game(game: GamePlay, status: str = "") -> None:
    console.clear()

    panel = Panel(
        Align.center(_render_board(game.state)),
        title="[bold cyan]Fifteen Puzzle[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.moves), style="bold yellow")
    if game.strict:
        stats.append("    strict", style="dim")

    controls = Text()
    controls.append("  1-16", style="bold cyan")
    controls.append("  move tile   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(stats))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


# -- input --------------------------------------------------------------------


def _handle(game: GamePlay, raw: str) -> str | None:
    """Apply one line of input; return a status message or None to quit."""
    cmd = raw.strip().lower()
    if cmd in ("q", "quit"):
        return None
    if cmd in ("r", "restart"):
        game.restart()
        return "[cyan]Board reset.[/cyan]"
    if not cmd.isdecimal():
        return f"[red]Unknown input:[/red] {raw.strip()!r}"
    if game.move_label(str(int(cmd))):
        return ""
    if game.strict and game.state.find(str(int(cmd))) is not None:
        return f"[yellow]Tile {int(cmd)} is not next to the blank.[/yellow]"
    return f"[yellow]No tile shows {cmd}.[/yellow]"


# -- entry point --------------------------------------------------------------


def run(blank: int = TILE_COUNT, strict: bool = False) -> None:
    """Play in the terminal until the player quits."""
    game = GamePlay(blank, strict=strict)
    status = ""
    while True:
        _draw_game(game, status)
        try:
            raw = Prompt.ask("  Tile", console=console)
        except (EOFError, KeyboardInterrupt):
            console.print()
            return
        result = _handle(game, raw)
        if result is None:
            return
        status = result
