from nineteen.engine.pqueue.indexed_heap import IndexedMinPQ

__all__ = ["IndexedMinPQ"]
