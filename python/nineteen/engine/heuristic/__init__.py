from nineteen.engine.heuristic.manhattan import Manhattan, manhattan

__all__ = ["Manhattan", "manhattan"]
