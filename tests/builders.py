"""Builder helpers to express test inputs succinctly."""

from __future__ import annotations

from uses.domain.graph import DependencyGraph


def make_graph(*edges: tuple[str, str]) -> DependencyGraph:
    """Build a graph from ``(source, destination)`` pairs in the given order."""

    graph = DependencyGraph()
    for source, destination in edges:
        graph.add_edge(source, destination, destination.lower())
    return graph
