"""Export the dependency graph to NetworkX and audit it for committed cycles."""

from __future__ import annotations

from typing import Hashable, List

import networkx as nx

from ..application.reporting import render_message
from ..domain.graph import DependencyGraph
from ..errors import CircularDependencyError


def build_digraph(graph: DependencyGraph) -> nx.DiGraph:
    """Create a NetworkX ``DiGraph`` mirroring ``graph``.

    Edges point from the owner to the class it uses and carry the generated
    accessor name as the ``accessor`` attribute.
    """

    digraph = nx.DiGraph()
    for node in graph.nodes():
        digraph.add_node(node, participant=True)

    for source, destination, accessor_name in graph.edges():
        if destination not in digraph:
            digraph.add_node(destination, participant=False)
        digraph.add_edge(source, destination, accessor=accessor_name)

    return digraph


def find_cycles(graph: DependencyGraph) -> List[List[Hashable]]:
    """Return every elementary cycle committed under a non-fatal policy."""

    return [list(cycle) for cycle in nx.simple_cycles(build_digraph(graph))]


def ensure_acyclic(graph: DependencyGraph) -> None:
    """Raise ``CircularDependencyError`` describing a cycle if ``graph`` has one."""

    digraph = build_digraph(graph)
    if nx.is_directed_acyclic_graph(digraph):
        return

    cycle = [source for source, _ in nx.find_cycle(digraph)]
    # The last hop closes the loop: cycle[-1] depends on cycle[0].
    source, destination = cycle[-1], cycle[0]
    path = cycle[:-1] if len(cycle) > 2 else []
    raise CircularDependencyError(render_message(source, destination, path))


__all__ = ["build_digraph", "ensure_acyclic", "find_cycles"]
