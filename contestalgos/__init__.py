"""Contest algorithms: graphs, searches, dynamic programming, grids, strings and numerics."""

__version__ = "0.1.0"
__all__ = ["dp", "graphs", "grids", "numeric", "search", "strings"]