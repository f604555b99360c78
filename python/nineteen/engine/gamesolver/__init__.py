from nineteen.engine.gamesolver.node import Membership, SearchNode
from nineteen.engine.gamesolver.solver import (
    NoPathFound,
    SearchEngine,
    SearchStats,
    Solver,
)

__all__ = [
    "Membership",
    "NoPathFound",
    "SearchEngine",
    "SearchNode",
    "SearchStats",
    "Solver",
]
