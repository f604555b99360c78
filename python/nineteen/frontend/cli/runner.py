"""Shared solve-and-time helper for the CLI frontends."""

from __future__ import annotations

from time import perf_counter

from nineteen.engine.gamesolver import NoPathFound, SearchEngine, SearchStats, Solver
from nineteen.models.board import State


def timed_solve(start: State) -> tuple[list[State] | NoPathFound, SearchStats]:
    """Solve *start* with a fresh engine and return the result and its stats.

    ``stats.elapsed`` covers the whole call, parity check included.
    """
    engine = SearchEngine()
    t0 = perf_counter()
    result = Solver.solve(start, engine=engine)
    engine.stats.elapsed = perf_counter() - t0
    return result, engine.stats


def plural(n: int, word: str) -> str:
    return f"{n} {word}" if n == 1 else f"{n} {word}s"
