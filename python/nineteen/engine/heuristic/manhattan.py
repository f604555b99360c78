"""Manhattan-distance heuristic."""

from __future__ import annotations

from nineteen.models.board import BLANK, CELLS, GOAL, Coord, State


class Manhattan:
    """Sum of row and column offsets of every tile from its goal cell.

    The blank is not counted, so one move changes the total by exactly
    one.  That keeps the estimate admissible and consistent.
    """

    def __init__(self, goal: State = GOAL) -> None:
        self.goal = goal
        self._goal_pos: dict[int, Coord] = {
            tile: cell for cell, tile in zip(CELLS, goal.tiles)
        }

    def __call__(self, state: State) -> int:
        dist = 0
        for (r, c), tile in zip(CELLS, state.tiles):
            if tile == BLANK:
                continue
            gr, gc = self._goal_pos[tile]
            dist += abs(r - gr) + abs(c - gc)
        return dist


_default = Manhattan()


def manhattan(state: State) -> int:
    return _default(state)
