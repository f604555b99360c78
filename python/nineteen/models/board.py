"""Board model for the nineteen puzzle.

The puzzle lives on a 6×6 coordinate grid of which only a cross-shaped
subset is playable::

          0  1
          2  3
    4  5  6  7  8  9
   10 11 12 13 14 15
         16 17
         18 19

Coordinates are always ``(row, col)``.  Off-cross cells hold the
``INVALID`` sentinel in grid literals and are never stored in a ``State``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Sequence

SIZE = 6
TILE_COUNT = 20
BLANK = 0
INVALID = -1

Coord = tuple[int, int]


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class MalformedStateError(ValueError):
    """A grid that does not describe a legal nineteen-puzzle configuration."""


class InvalidMoveError(ValueError):
    """A swap that targets a cell not adjacent to the blank."""


# -- topology -----------------------------------------------------------------


def in_bounds(row: int, col: int) -> bool:
    """Return True if ``(row, col)`` is a playable cell of the cross."""
    if row in (2, 3) and 0 <= col < SIZE:
        return True
    return col in (2, 3) and 0 <= row < SIZE


def are_adjacent(first: Coord, second: Coord) -> bool:
    """Return True if both cells are playable and share an edge."""
    (r1, c1), (r2, c2) = first, second
    if not (in_bounds(r1, c1) and in_bounds(r2, c2)):
        return False
    return abs(r1 - r2) + abs(c1 - c2) == 1


CELLS: tuple[Coord, ...] = tuple(
    (r, c) for r in range(SIZE) for c in range(SIZE) if in_bounds(r, c)
)
_SLOT: dict[Coord, int] = {cell: i for i, cell in enumerate(CELLS)}

# Blank moves are generated in the order up, down, left, right.
_NEIGHBORS: dict[Coord, tuple[Coord, ...]] = {
    (r, c): tuple(
        (r + dr, c + dc)
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1))
        if in_bounds(r + dr, c + dc)
    )
    for r, c in CELLS
}

# Offset from blank to target -> direction the target tile slides.
_SLIDES: dict[Coord, Direction] = {
    (1, 0): Direction.UP,
    (-1, 0): Direction.DOWN,
    (0, 1): Direction.LEFT,
    (0, -1): Direction.RIGHT,
}


# -- state --------------------------------------------------------------------


@dataclass(frozen=True)
class State:
    """One configuration of the puzzle.

    ``tiles`` holds the contents of the playable cells in ``CELLS`` order,
    so equality and hashing only ever see playable cells.  Instances are
    immutable; :meth:`move` returns a new state.
    """

    tiles: tuple[int, ...]
    blank: Coord = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        tiles = tuple(self.tiles)
        bad = [v for v in tiles if type(v) is not int]
        if bad:
            raise MalformedStateError(f"Tiles must be integers, got {bad!r}.")
        if len(tiles) != TILE_COUNT:
            raise MalformedStateError(
                f"Expected {TILE_COUNT} playable tiles, got {len(tiles)}."
            )
        if sorted(tiles) != list(range(TILE_COUNT)):
            missing = sorted(set(range(TILE_COUNT)) - set(tiles))
            raise MalformedStateError(
                f"Tiles must be a permutation of 0..{TILE_COUNT - 1}; "
                f"missing {missing}."
            )
        object.__setattr__(self, "tiles", tiles)
        object.__setattr__(self, "blank", CELLS[tiles.index(BLANK)])

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[int]]) -> State:
        """Create a state from a 6×6 literal with ``-1`` in off-cross cells.

        Example::

            State.from_grid(GOAL_GRID)
        """
        if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
            raise MalformedStateError(f"Expected a {SIZE}×{SIZE} grid.")
        for r, row in enumerate(grid):
            for c, val in enumerate(row):
                if not in_bounds(r, c) and val != INVALID:
                    raise MalformedStateError(
                        f"Cell ({r}, {c}) lies outside the cross but holds {val}."
                    )
        return cls(tuple(grid[r][c] for r, c in CELLS))

    def to_grid(self) -> list[list[int]]:
        grid = [[INVALID] * SIZE for _ in range(SIZE)]
        for (r, c), val in zip(CELLS, self.tiles):
            grid[r][c] = val
        return grid

    # -- queries --------------------------------------------------------------

    in_bounds = staticmethod(in_bounds)
    are_adjacent = staticmethod(are_adjacent)

    def get_tile(self, row: int, col: int) -> int:
        if not in_bounds(row, col):
            raise IndexError(f"({row}, {col}) is not a playable cell.")
        return self.tiles[_SLOT[(row, col)]]

    def position_of(self, tile: int) -> Coord:
        if not 0 <= tile < TILE_COUNT:
            raise ValueError(f"No tile numbered {tile}.")
        return CELLS[self.tiles.index(tile)]

    def is_goal(self, goal: State | None = None) -> bool:
        return self == (GOAL if goal is None else goal)

    def is_tile_correct(self, row: int, col: int, goal: State | None = None) -> bool:
        """Check if the tile at ``(row, col)`` sits where the goal has it."""
        target = GOAL if goal is None else goal
        return self.get_tile(row, col) == target.get_tile(row, col)

    # -- moves ----------------------------------------------------------------

    def legal_moves(self) -> tuple[Coord, ...]:
        """Cells whose tile may slide into the blank."""
        return _NEIGHBORS[self.blank]

    def move(self, target: Coord) -> State:
        """Slide the tile at *target* into the blank and return the new state."""
        if not are_adjacent(self.blank, target):
            raise InvalidMoveError(
                f"Cannot move {target} into the blank at {self.blank}."
            )
        tiles = list(self.tiles)
        b, t = _SLOT[self.blank], _SLOT[target]
        tiles[b], tiles[t] = tiles[t], tiles[b]
        return State(tuple(tiles))

    def successors(self) -> list[State]:
        return [self.move(target) for target in self.legal_moves()]

    def direction_to(self, target: Coord) -> Direction:
        """Direction the tile at *target* slides when moved into the blank."""
        if not are_adjacent(self.blank, target):
            raise InvalidMoveError(
                f"Cannot move {target} into the blank at {self.blank}."
            )
        br, bc = self.blank
        return _SLIDES[(target[0] - br, target[1] - bc)]

    def __str__(self) -> str:
        lines: list[str] = []
        for r in range(SIZE):
            line = ""
            for c in range(SIZE):
                line += f"{self.get_tile(r, c):>3}" if in_bounds(r, c) else "   "
            lines.append(line.rstrip())
        return "\n".join(lines)


GOAL_GRID: tuple[tuple[int, ...], ...] = (
    (-1, -1, 0, 1, -1, -1),
    (-1, -1, 2, 3, -1, -1),
    (4, 5, 6, 7, 8, 9),
    (10, 11, 12, 13, 14, 15),
    (-1, -1, 16, 17, -1, -1),
    (-1, -1, 18, 19, -1, -1),
)

GOAL = State.from_grid(GOAL_GRID)
