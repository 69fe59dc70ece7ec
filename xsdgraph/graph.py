"""An owning container of nodes and the edges that connect them."""

from __future__ import annotations

from typing import Any, TypeVar

T = TypeVar("T")


class Graph:
    """Creates nodes and edges and keeps track of them.

    Edges are expected to provide ``connect(left, right)`` together with
    ``left`` and ``right``; nodes are expected to provide
    ``add_edge_left``, ``add_edge_right`` and ``remove_edge``.
    """

    def __init__(self) -> None:
        super().__init__()
        # Dicts keep insertion order and give constant-time membership.
        self._nodes: dict[Any, None] = {}
        self._edges: dict[Any, None] = {}

    def new_node(self, cls: type[T], *args: Any) -> T:
        """Create a node of class ``cls`` from ``args`` and register it."""
        node = cls(*args)
        self._nodes[node] = None
        return node

    def delete_node(self, node: Any) -> None:
        """Remove ``node`` and every edge that touches it."""
        if node not in self._nodes:
            raise KeyError(f"node {node!r} does not belong to this graph")
        incident = [e for e in self._edges if e.left is node or e.right is node]
        for edge in incident:
            self._detach(edge)
        del self._nodes[node]

    def new_edge(self, cls: type[T], left: Any, right: Any, *args: Any) -> T:
        """Create an edge of class ``cls`` from ``args`` joining ``left`` to ``right``."""
        edge = cls(*args)
        edge.connect(left, right)
        left.add_edge_left(edge)
        right.add_edge_right(edge)
        self._edges[edge] = None
        return edge

    def delete_edge(self, edge: Any) -> None:
        """Disconnect ``edge`` from both of its nodes and forget it."""
        if edge not in self._edges:
            raise KeyError(f"edge {edge!r} does not belong to this graph")
        self._detach(edge)

    def nodes(self) -> list[Any]:
        """Return the registered nodes in creation order."""
        return list(self._nodes)

    def edges(self) -> list[Any]:
        """Return the registered edges in creation order."""
        return list(self._edges)

    def _detach(self, edge: Any) -> None:
        edge.left.remove_edge(edge)
        if edge.right is not edge.left:
            edge.right.remove_edge(edge)
        del self._edges[edge]