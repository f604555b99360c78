"""Search-tree nodes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from nineteen.models.board import State


class Membership(StrEnum):
    OPEN = "open"
    CLOSED = "closed"


@dataclass(slots=True)
class SearchNode:
    """A state reached at path cost ``g`` with heuristic estimate ``h``.

    ``parent`` is a handle into the engine's node arena (``None`` for the
    root).  ``number`` is the creation sequence number; a replacement node
    found through a cheaper path keeps the number of the node it replaces.
    Only ``status`` changes after construction.
    """

    state: State
    g: int
    h: int
    parent: int | None
    number: int
    status: Membership = Membership.OPEN

    @property
    def f(self) -> int:
        return self.g + self.h

    def close(self) -> None:
        if self.status is Membership.CLOSED:
            raise RuntimeError(f"Node {self.number} was already expanded.")
        self.status = Membership.CLOSED
