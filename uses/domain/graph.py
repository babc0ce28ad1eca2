"""Append-only registry of "owner depends on dependency" declarations."""

from __future__ import annotations

import threading
from typing import Hashable, Iterator

Node = Hashable


class DependencyGraph:
    """Owned adjacency mapping from each participant to its declared dependencies.

    Every participant maps to an insertion-ordered ``{dependency: accessor_name}``
    dictionary. A node is a participant once it has been registered, even when
    it has not declared anything yet. Edges are never removed.
    """

    def __init__(self) -> None:
        self._adjacency: dict[Node, dict[Node, str]] = {}
        self.lock = threading.RLock()

    def register(self, node: Node) -> None:
        """Make ``node`` a participant with an empty dependency entry."""

        self._adjacency.setdefault(node, {})

    def is_participant(self, node: Node) -> bool:
        return node in self._adjacency

    def outgoing_edges(self, node: Node) -> tuple[Node, ...]:
        """Return the dependencies of ``node`` in declaration order."""

        return tuple(self._adjacency.get(node, ()))

    def accessor_name(self, owner: Node, dependency: Node) -> str | None:
        return self._adjacency.get(owner, {}).get(dependency)

    def dependencies_of(self, owner: Node) -> dict[Node, str]:
        """Return a copy of the ``{dependency: accessor_name}`` mapping for ``owner``."""

        return dict(self._adjacency.get(owner, {}))

    def add_edge(self, source: Node, destination: Node, accessor_name: str) -> None:
        """Record that ``source`` depends on ``destination``.

        Re-declaring an existing pair overwrites the accessor name in place.
        """

        self._adjacency.setdefault(source, {})[destination] = accessor_name

    def nodes(self) -> tuple[Node, ...]:
        return tuple(self._adjacency)

    def edges(self) -> Iterator[tuple[Node, Node, str]]:
        for source, dependencies in self._adjacency.items():
            for destination, accessor_name in dependencies.items():
                yield source, destination, accessor_name

    def __contains__(self, node: object) -> bool:
        return node in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        edge_count = sum(len(deps) for deps in self._adjacency.values())
        return f"DependencyGraph(nodes={len(self._adjacency)}, edges={edge_count})"
