"""A* solver for the nineteen puzzle.

The engine keeps every node it creates in an arena (a list).  A single
``State -> handle`` map serves as both the open and the closed set; the
node's ``status`` tells them apart.  The frontier is an indexed min-heap
holding arena handles, keyed by ``f = g + h``, with equal keys broken by
ascending creation number.

When a cheaper path to a still-open state turns up, a replacement node is
appended to the arena under the original creation number and the heap
entry is decreased in place.  Closed nodes are never reopened: with a
consistent heuristic the first expansion of a state is already optimal.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from time import perf_counter
from typing import Callable

from nineteen.engine.gamesolver.node import Membership, SearchNode
from nineteen.engine.heuristic import Manhattan
from nineteen.engine.pqueue import IndexedMinPQ
from nineteen.models.board import GOAL, Direction, State

logger = logging.getLogger(__name__)


@dataclass
class SearchStats:
    """Counters for one search.

    ``elapsed`` is set by :meth:`SearchEngine.run`; a caller that times a
    wider span (such as the whole ``Solver.solve`` call) may overwrite it.
    """

    expanded: int = 0
    generated: int = 0
    replaced: int = 0
    peak_frontier: int = 0
    elapsed: float = 0.0


@dataclass(frozen=True)
class NoPathFound:
    """Result returned when the goal cannot be reached.

    ``reason`` is ``"unsolvable"`` when the parity check rejects the board
    up front and ``"exhausted"`` when the frontier ran dry.
    """

    reason: str
    stats: SearchStats | None = None


class SearchEngine:
    """One A* run.  Create a fresh engine per search."""

    def __init__(
        self,
        goal: State = GOAL,
        heuristic: Callable[[State], int] | None = None,
    ) -> None:
        self.goal = goal
        self.heuristic = heuristic or Manhattan(goal)
        self.stats = SearchStats()
        self._numbers = itertools.count(1)
        self._arena: list[SearchNode] = []
        self._index: dict[State, int] = {}
        self._frontier: IndexedMinPQ[int] = IndexedMinPQ()

    def run(self, start: State) -> list[State] | NoPathFound:
        """Return the root-first optimal path to the goal, or ``NoPathFound``."""
        if self._arena:
            raise RuntimeError("SearchEngine instances are single-use.")
        t0 = perf_counter()
        self._open(start, g=0, parent=None)
        logger.debug("A* search started, h(start)=%d", self._arena[0].h)

        result = self._search()

        self.stats.elapsed = perf_counter() - t0
        if isinstance(result, NoPathFound):
            logger.debug("Frontier exhausted after %d expansions", self.stats.expanded)
        else:
            logger.debug(
                "Solved in %d moves: %d expanded, %d generated, %.3fs",
                len(result) - 1,
                self.stats.expanded,
                self.stats.generated,
                self.stats.elapsed,
            )
        return result

    def node(self, state: State) -> SearchNode | None:
        """Best node recorded for *state*, if it was discovered."""
        handle = self._index.get(state)
        return None if handle is None else self._arena[handle]

    # -- search loop ----------------------------------------------------------

    def _search(self) -> list[State] | NoPathFound:
        frontier = self._frontier
        stats = self.stats
        while not frontier.is_empty():
            stats.peak_frontier = max(stats.peak_frontier, len(frontier))
            handle = frontier.extract_min()
            node = self._arena[handle]
            if node.state == self.goal:
                return self._path(handle)

            node.close()
            stats.expanded += 1

            g = node.g + 1
            for succ in node.state.successors():
                stats.generated += 1
                known = self._index.get(succ)
                if known is None:
                    self._open(succ, g, handle)
                    continue
                seen = self._arena[known]
                if seen.status is Membership.CLOSED:
                    continue
                # h depends only on the state, so seen.h is h(succ).
                if g + seen.h < seen.f:
                    self._replace(seen, g, handle)

        return NoPathFound(reason="exhausted", stats=stats)

    # -- helpers --------------------------------------------------------------

    def _open(self, state: State, g: int, parent: int | None) -> None:
        node = SearchNode(state, g, self.heuristic(state), parent, next(self._numbers))
        handle = len(self._arena)
        self._arena.append(node)
        self._index[state] = handle
        self._frontier.insert(node.number, node.f, handle)

    def _replace(self, seen: SearchNode, g: int, parent: int) -> None:
        node = SearchNode(seen.state, g, seen.h, parent, seen.number)
        handle = len(self._arena)
        self._arena.append(node)
        self._index[seen.state] = handle
        self._frontier.decrease_key(node.number, node.f, handle)
        self.stats.replaced += 1

    def _path(self, handle: int | None) -> list[State]:
        path: list[State] = []
        while handle is not None:
            node = self._arena[handle]
            path.append(node.state)
            handle = node.parent
        path.reverse()
        return path


class Solver:
    """Stateless facade; all methods are static."""

    @staticmethod
    def solve(
        state: State, engine: SearchEngine | None = None
    ) -> list[State] | NoPathFound:
        """Return the optimal path from *state* to the goal, start included.

        Pass an *engine* to search toward a different goal or to read its
        statistics afterwards.
        """
        engine = engine or SearchEngine()
        if state == engine.goal:
            return [state]
        if not Solver.is_solvable(state, engine.goal):
            logger.debug("Parity check rejected %r", state.tiles)
            return NoPathFound(reason="unsolvable", stats=engine.stats)
        return engine.run(state)

    @staticmethod
    def hint(state: State) -> Direction | None:
        """Return the first move of an optimal solution, or ``None``."""
        path = Solver.solve(state)
        if isinstance(path, NoPathFound) or len(path) < 2:
            return None
        return Solver.directions(path)[0]

    @staticmethod
    def directions(path: list[State]) -> list[Direction]:
        """Translate consecutive states into the direction each tile slid."""
        return [a.direction_to(b.blank) for a, b in zip(path, path[1:])]

    @staticmethod
    def is_solvable(state: State, goal: State = GOAL) -> bool:
        """Return True if *state* can reach *goal*.

        The cross is bipartite and 2-connected, so every permutation whose
        parity matches the parity of the blank's displacement is reachable
        and no other one is.
        """
        goal_slot = {tile: i for i, tile in enumerate(goal.tiles)}
        perm = [goal_slot[tile] for tile in state.tiles]
        seen = [False] * len(perm)
        cycles = 0
        for i in range(len(perm)):
            if seen[i]:
                continue
            cycles += 1
            j = i
            while not seen[j]:
                seen[j] = True
                j = perm[j]
        (br, bc), (gr, gc) = state.blank, goal.blank
        return (len(perm) - cycles) % 2 == (abs(br - gr) + abs(bc - gc)) % 2
