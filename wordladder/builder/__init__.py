from .core import build_graph, DEFAULT_WORKERS, DEFAULT_SCANNER

__all__ = ["build_graph", "DEFAULT_WORKERS", "DEFAULT_SCANNER"]
