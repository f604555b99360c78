"""Rich terminal frontend: tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the solve
helper with the vanilla CLI.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from nineteen.engine.gamesolver import NoPathFound, Solver
from nineteen.frontend.cli.runner import plural, timed_solve
from nineteen.models.board import SIZE, State

console = Console()


# -- board rendering ----------------------------------------------------------


def _render_board(state: State) -> Table:
    """Return a Rich Table representing the cross-shaped grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.SIMPLE_HEAVY,
        border_style="bright_blue",
        padding=(0, 0),
    )
    for _ in range(SIZE):
        table.add_column(width=3, justify="right")

    for r in range(SIZE):
        cells: list[str] = []
        for c in range(SIZE):
            if not State.in_bounds(r, c):
                cells.append("")
                continue
            val = state.get_tile(r, c)
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif state.is_tile_correct(r, c):
                cells.append(f"[bold green]{val}[/bold green]")
            else:
                cells.append(f"[bold white]{val}[/bold white]")
        table.add_row(*cells)

    return table


def _step_panel(state: State, title: str, style: str = "bright_blue") -> Panel:
    return Panel(
        Align.center(_render_board(state)),
        title=title,
        border_style=style,
        padding=(0, 1),
    )


# -- entry point --------------------------------------------------------------


def run(name: str, start: State) -> bool:
    """Solve *start* and print the path.  Returns True if a path was found."""
    console.print()
    console.print(_step_panel(start, f"[bold cyan]Board {name}[/bold cyan]", "cyan"))

    with console.status("[cyan]Searching…[/cyan]"):
        result, stats = timed_solve(start)

    timing = Text()
    timing.append("  Took ", style="dim")
    timing.append(f"{stats.elapsed:.3f}s", style="bold yellow")
    timing.append(
        f"  ({stats.expanded} expanded, {stats.generated} generated, "
        f"{stats.replaced} re-queued, peak frontier {stats.peak_frontier})",
        style="dim",
    )

    if isinstance(result, NoPathFound):
        console.print(
            f"[red]Frontier empty; no goal states found ({result.reason}).[/red]"
        )
        console.print(timing)
        return False

    directions = Solver.directions(result)
    panels = [
        _step_panel(state, f"{i}. {directions[i - 1].value}")
        for i, state in enumerate(result[1:], 1)
    ]
    if panels:
        console.print(Columns(panels))

    summary = Text()
    summary.append("  Goal achieved in ", style="green")
    summary.append(plural(len(directions), "move"), style="bold green")
    summary.append("!", style="green")
    console.print(Group(summary, timing))
    return True
