"""Namespaces, schema files and the edges that tie schema files together."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional, TypeVar, Union

from .elements import Contains, Container, Edge, Names, Scope
from .graph import Graph

T = TypeVar("T")

PathLike = Union[str, "os.PathLike[str]"]


class Namespace(Scope):
    """A target namespace of a schema file."""


class _FileContains(Contains):
    def __init__(self, file: PathLike) -> None:
        super().__init__()
        self._file = Path(file)

    @property
    def file(self) -> Path:
        """The schema file behind this edge."""
        return self._file


class Implies(_FileContains):
    """Ties a schema to a schema that is present without being named."""


class Sources(_FileContains):
    """Ties a schema to an included schema that takes over its namespace."""


class Includes(_FileContains):
    """Ties a schema to a schema it includes."""


class Imports(_FileContains):
    """Ties a schema to a schema it imports."""


class Schema(Container, Scope):
    """A schema file: holds namespaces and other schemas, and owns a graph."""

    def __init__(self) -> None:
        super().__init__()
        self._contained: Optional[Contains] = None
        self._graph = Graph()

    # Ownership of nodes and edges.

    def new_node(self, cls: type[T], *args: Any) -> T:
        """Create a node of class ``cls`` from ``args`` owned by this schema."""
        return self._graph.new_node(cls, *args)

    def delete_node(self, node: Any) -> None:
        """Remove ``node`` and every edge that touches it."""
        self._graph.delete_node(node)

    def new_edge(self, cls: type[T], left: Any, right: Any, *args: Any) -> T:
        """Create an edge of class ``cls`` joining ``left`` to ``right``."""
        return self._graph.new_edge(cls, left, right, *args)

    def delete_edge(self, edge: Any) -> None:
        """Disconnect ``edge`` and forget it."""
        self._graph.delete_edge(edge)

    def nodes(self) -> list[Any]:
        """The nodes owned by this schema, in creation order."""
        return self._graph.nodes()

    def edges(self) -> list[Any]:
        """The edges owned by this schema, in creation order."""
        return self._graph.edges()

    # Containment.

    def is_contained(self) -> bool:
        """True when another schema holds this one."""
        return self._contained is not None

    def contained(self) -> Contains:
        """The edge by which another schema holds this one."""
        if self._contained is None:
            raise LookupError("schema is not contained in another schema")
        return self._contained

    def add_edge_left(self, edge: Edge) -> None:
        super().add_edge_left(edge)

    def add_edge_right(self, edge: Edge) -> None:
        if isinstance(edge, Contains):
            self._contained = edge
        super().add_edge_right(edge)

    def remove_edge(self, edge: Edge) -> None:
        if self._contained is edge:
            self._contained = None
        super().remove_edge(edge)

    def find(self, name: str) -> list[Names]:
        """Names equal to ``name`` here and in every schema held, own names first.

        The schema hierarchy is searched as if it were flat.
        """
        found = Scope.find(self, name)
        for edge in self.contains():
            held = edge.element()
            if not isinstance(held, Schema):
                raise TypeError(
                    f"schema holds a {type(held).__name__}, not a Schema"
                )
            found.extend(held.find(name))
        return found