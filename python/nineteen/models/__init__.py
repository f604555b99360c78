from nineteen.models.board import (
    GOAL,
    Coord,
    Direction,
    InvalidMoveError,
    MalformedStateError,
    State,
)
from nineteen.models.samples import load_boards

__all__ = [
    "GOAL",
    "Coord",
    "Direction",
    "InvalidMoveError",
    "MalformedStateError",
    "State",
    "load_boards",
]
