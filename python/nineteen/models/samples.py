"""Sample board literals stored as JSON fixtures."""

from __future__ import annotations

import json
from pathlib import Path

from nineteen.models.board import State


def load_boards(path: Path) -> dict[str, State]:
    """Load ``[{"id": ..., "tiles": [[...], ...]}, ...]`` from *path*.

    Raises ``MalformedStateError`` for the first record whose grid is not
    a legal configuration.
    """
    with open(path) as f:
        records = json.load(f)
    return {rec["id"]: State.from_grid(rec["tiles"]) for rec in records}
