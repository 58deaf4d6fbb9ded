"""Search trees, a min-heap, a B-tree, maze search, shortest paths and spanning trees."""

__version__ = "0.1.0"