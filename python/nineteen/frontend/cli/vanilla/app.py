"""Vanilla terminal frontend: stdlib only.

Prints every state of the solution path with ANSI colours, followed by the
move count and timing.
"""

from __future__ import annotations

from nineteen.engine.gamesolver import NoPathFound, Solver
from nineteen.frontend.cli.runner import plural, timed_solve
from nineteen.models.board import SIZE, State


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset


# -- board rendering ----------------------------------------------------------


def _render_board(state: State) -> str:
    """Return an ANSI-coloured text representation of the cross."""
    lines: list[str] = []
    for r in range(SIZE):
        cells: list[str] = []
        for c in range(SIZE):
            if not State.in_bounds(r, c):
                cells.append("   ")
                continue
            val = state.get_tile(r, c)
            if val == 0:
                cells.append(f"{_DIM}{'·':>3}{_R}")
            elif state.is_tile_correct(r, c):
                cells.append(f"{_G}{val:>3}{_R}")
            else:
                cells.append(f"{val:>3}")
        lines.append("  " + "".join(cells))
    return "\n".join(lines)


# -- entry point --------------------------------------------------------------


def run(name: str, start: State) -> bool:
    """Solve *start* and print the path.  Returns True if a path was found."""
    print(f"  {_C}=== Board {name} ==={_R}")
    print()
    print(_render_board(start))
    print()

    result, stats = timed_solve(start)

    if isinstance(result, NoPathFound):
        print(f"  {_Y}Frontier empty; no goal states found ({result.reason}).{_R}")
        print(f"  Took {stats.elapsed:.3f} seconds.")
        return False

    print("  Goal path:")
    directions = Solver.directions(result)
    for i, state in enumerate(result[1:], 1):
        print()
        print(f"  Move {i}/{len(directions)}  ({directions[i - 1].value})")
        print(_render_board(state))
    print()
    print(f"  {_G}Goal achieved in {plural(len(result) - 1, 'move')}!{_R}")
    print(
        f"  Took {stats.elapsed:.3f} seconds "
        f"({stats.expanded} expanded, {stats.generated} generated)."
    )
    return True
