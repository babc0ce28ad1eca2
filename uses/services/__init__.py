"""Services built on top of the dependency graph."""

from .graph_export import build_digraph, ensure_acyclic, find_cycles

__all__ = ["build_digraph", "ensure_acyclic", "find_cycles"]
