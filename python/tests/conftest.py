"""Shared helpers: random scrambles and a breadth-first distance oracle."""

from __future__ import annotations

import random
from collections import deque
from pathlib import Path

import pytest

from nineteen.models.board import GOAL, State

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"


def _random_walk(k: int, seed: int) -> State:
    """Walk *k* random legal moves away from the goal, never undoing a move."""
    rng = random.Random(seed)
    state = GOAL
    prev = None
    for _ in range(k):
        moves = [m for m in state.legal_moves() if m != prev]
        prev = state.blank
        state = state.move(rng.choice(moves))
    return state


def _bfs_distance(start: State, goal: State = GOAL, limit: int = 8) -> int | None:
    """Exact move distance from *start* to *goal*, or None beyond *limit*."""
    if start == goal:
        return 0
    seen = {start}
    queue = deque([(start, 0)])
    while queue:
        state, depth = queue.popleft()
        if depth == limit:
            continue
        for succ in state.successors():
            if succ == goal:
                return depth + 1
            if succ not in seen:
                seen.add(succ)
                queue.append((succ, depth + 1))
    return None


@pytest.fixture
def random_walk():
    return _random_walk


@pytest.fixture
def bfs_distance():
    return _bfs_distance


@pytest.fixture
def fixtures_path() -> Path:
    return FIXTURES_DIR / "boards.json"
