"""A* solver for the cross-shaped nineteen sliding puzzle."""

__version__ = "0.1.0"
