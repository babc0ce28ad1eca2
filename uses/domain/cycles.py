"""Incremental detection of dependency cycles before an edge is committed."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Iterator, Protocol, Sequence, Union, runtime_checkable

Node = Hashable


@runtime_checkable
class DependencyGraphView(Protocol):
    """Read-only adjacency surface the detector walks."""

    def is_participant(self, node: Node) -> bool:
        """Return whether ``node`` has a dependency entry in the graph."""

    def outgoing_edges(self, node: Node) -> Sequence[Node]:
        """Return the direct dependencies of ``node`` in declaration order."""


@dataclass(frozen=True, slots=True)
class NoCycle:
    """The prospective edge keeps the graph acyclic."""

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Cycle:
    """The prospective edge closes a cycle.

    ``path`` is the chain of dependencies walked from the destination towards
    the source, excluding the source. It is empty for a self-dependency and for
    a destination that depends on the source directly.
    """

    path: tuple[Node, ...] = ()

    def __bool__(self) -> bool:
        return True


CycleResult = Union[NoCycle, Cycle]

NO_CYCLE = NoCycle()


def detect(source: Node, destination: Node, graph: DependencyGraphView) -> CycleResult:
    """Return whether declaring ``source -> destination`` would close a cycle.

    ``graph`` must not yet contain the prospective edge. Dependencies are explored
    depth first in declaration order and the first route back to ``source`` wins.
    """

    if source == destination:
        return Cycle()
    if not graph.is_participant(destination):
        return NO_CYCLE

    # Edges committed under a non-fatal policy can already form cycles.
    visited = {destination}
    stack: list[tuple[Node, Iterator[Node]]] = [
        (destination, iter(graph.outgoing_edges(destination)))
    ]
    while stack:
        _, dependencies = stack[-1]
        for dependency in dependencies:
            if dependency == source:
                return Cycle(path=_chain(stack))
            if dependency in visited or not graph.is_participant(dependency):
                continue
            visited.add(dependency)
            stack.append((dependency, iter(graph.outgoing_edges(dependency))))
            break
        else:
            stack.pop()
    return NO_CYCLE


def _chain(stack: list[tuple[Node, Iterator[Node]]]) -> tuple[Node, ...]:
    if len(stack) == 1:
        return ()
    return tuple(node for node, _ in stack)


__all__ = ["Cycle", "CycleResult", "DependencyGraphView", "NO_CYCLE", "NoCycle", "detect"]
