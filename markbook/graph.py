"""A directed graph over a fixed number of nodes, stored as an adjacency matrix."""

from __future__ import annotations

from collections.abc import Hashable, Iterable


class InvalidNodeError(IndexError):
    """A node index outside the graph was used."""

    def __init__(self, value: int, maximum: int) -> None:
        super().__init__(value, maximum)
        self.value = value
        self.max = maximum

    def __str__(self) -> str:
        return f"Invalid Node Index (value {self.value}, max {self.max})"


class Graph:
    """Directed graph with ``node_count`` nodes numbered from zero."""

    def __init__(self, node_count: int = 0) -> None:
        if node_count < 0:
            raise ValueError("node_count must not be negative")
        self._node_count = node_count
        self._edges = [False] * (node_count * node_count)

    @classmethod
    def from_nodes(cls, nodes: Iterable[tuple[Hashable, Iterable[Hashable]]]) -> Graph:
        """Build a graph from ``(identifier, child_identifiers)`` pairs.

        Node ``i`` is the ``i``-th pair; an edge goes from a node to every child
        whose identifier names a node. Unknown children are skipped, and when an
        identifier repeats, the later node claims it.
        """
        nodes = [(ident, list(children)) for ident, children in nodes]
        graph = cls(len(nodes))
        positions = {ident: index for index, (ident, _) in enumerate(nodes)}
        for index, (_, children) in enumerate(nodes):
            for child in children:
                target = positions.get(child)
                if target is not None:
                    graph.set_edge(index, target, True)
        return graph

    @property
    def node_count(self) -> int:
        """Number of nodes in the graph."""
        return self._node_count

    def _slot(self, source: int, target: int) -> int:
        for node in (source, target):
            if not 0 <= node < self._node_count:
                raise InvalidNodeError(node, self._node_count)
        return source * self._node_count + target

    def is_edge(self, source: int, target: int) -> bool:
        """Whether there is an edge from ``source`` to ``target``."""
        return self._edges[self._slot(source, target)]

    def set_edge(self, source: int, target: int, value: bool) -> None:
        """Add or remove the edge from ``source`` to ``target``."""
        self._edges[self._slot(source, target)] = bool(value)

    def __len__(self) -> int:
        return self._node_count

    def __repr__(self) -> str:
        edges = [
            (source, target)
            for source in range(self._node_count)
            for target in range(self._node_count)
            if self._edges[source * self._node_count + target]
        ]
        return f"Graph(node_count={self._node_count}, edges={edges!r})"