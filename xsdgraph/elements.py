"""Core node and edge kinds of the schema semantic graph."""

from __future__ import annotations

from typing import Optional

from .context import Context


class Edge:
    """A directed connection between a left and a right node."""

    def __init__(self) -> None:
        super().__init__()
        self.context = Context()
        self._left: Optional[Node] = None
        self._right: Optional[Node] = None

    @property
    def left(self) -> Optional[Node]:
        return self._left

    @property
    def right(self) -> Optional[Node]:
        return self._right

    def connect(self, left: Node, right: Node) -> None:
        """Attach the edge to its two end nodes."""
        self._left = left
        self._right = right

    @staticmethod
    def _require(node: object, kind: type, side: str, edge: Edge) -> None:
        if not isinstance(node, kind):
            raise TypeError(
                f"{type(edge).__name__} needs a {kind.__name__} on the {side}, "
                f"got {type(node).__name__}"
            )


class Node:
    """A vertex of the semantic graph."""

    def __init__(self) -> None:
        super().__init__()
        self.context = Context()
        self._edges: list[Edge] = []

    def add_edge_left(self, edge: Edge) -> None:
        """Record an edge that starts at this node."""
        self._edges.append(edge)

    def add_edge_right(self, edge: Edge) -> None:
        """Record an edge that ends at this node."""
        self._edges.append(edge)

    def remove_edge(self, edge: Edge) -> None:
        """Forget every reference to ``edge``."""
        self._edges = [e for e in self._edges if e is not edge]


class Names(Edge):
    """Gives a name to a nameable node inside a scope."""

    def __init__(self, name: str, anonymous: bool = False) -> None:
        super().__init__()
        self._name = name
        self._anonymous = bool(anonymous)

    @property
    def name(self) -> str:
        return self._name

    @property
    def anonymous(self) -> bool:
        return self._anonymous

    def connect(self, left: Node, right: Node) -> None:
        self._require(left, Scope, "left", self)
        self._require(right, Nameable, "right", self)
        super().connect(left, right)

    def scope(self) -> Scope:
        """The scope that holds the name."""
        return self._left  # type: ignore[return-value]

    def named(self) -> Nameable:
        """The node that carries the name."""
        return self._right  # type: ignore[return-value]


class Nameable(Node):
    """A node that may be named by one or more scopes."""

    def __init__(self) -> None:
        super().__init__()
        self._named: list[Names] = []

    def add_edge_right(self, edge: Edge) -> None:
        if isinstance(edge, Names):
            self._named.append(edge)
        super().add_edge_right(edge)

    def remove_edge(self, edge: Edge) -> None:
        self._named = [e for e in self._named if e is not edge]
        super().remove_edge(edge)

    def is_named(self) -> bool:
        """True when the first name given to the node is not anonymous."""
        return bool(self._named) and not self._named[0].anonymous

    def name(self) -> str:
        """The first name given to the node."""
        return self._first_names().name

    def scope(self) -> Scope:
        """The scope of the first name given to the node."""
        return self._first_names().scope()

    def _first_names(self) -> Names:
        if not self._named:
            raise LookupError(f"{type(self).__name__} has no name")
        return self._named[0]


class Scope(Nameable):
    """A nameable node that names other nodes."""

    def __init__(self) -> None:
        super().__init__()
        self._names: list[Names] = []
        self._names_map: dict[str, list[Names]] = {}

    def add_edge_left(self, edge: Edge) -> None:
        if isinstance(edge, Names):
            self._names.append(edge)
            self._names_map.setdefault(edge.name, []).append(edge)
        super().add_edge_left(edge)

    def remove_edge(self, edge: Edge) -> None:
        if isinstance(edge, Names) and edge.name in self._names_map:
            remaining = [e for e in self._names_map[edge.name] if e is not edge]
            if remaining:
                self._names_map[edge.name] = remaining
            else:
                del self._names_map[edge.name]
        self._names = [e for e in self._names if e is not edge]
        super().remove_edge(edge)

    def names(self) -> list[Names]:
        """All names in this scope, in the order they were added."""
        return list(self._names)

    def find(self, name: str) -> list[Names]:
        """The names in this scope that equal ``name``, in order."""
        return list(self._names_map.get(name, ()))


class Type(Nameable):
    """A nameable node that classifies instances."""

    def __init__(self) -> None:
        super().__init__()
        self._classifies: list[Belongs] = []

    def add_edge_right(self, edge: Edge) -> None:
        if isinstance(edge, Belongs):
            self._classifies.append(edge)
        super().add_edge_right(edge)

    def remove_edge(self, edge: Edge) -> None:
        self._classifies = [e for e in self._classifies if e is not edge]
        super().remove_edge(edge)

    def classifies(self) -> list[Belongs]:
        """The belongs edges of the instances of this type."""
        return list(self._classifies)


class Instance(Nameable):
    """A nameable node that may belong to a type."""

    def __init__(self) -> None:
        super().__init__()
        self._belongs: Optional[Belongs] = None

    def add_edge_left(self, edge: Edge) -> None:
        if isinstance(edge, Belongs):
            self._belongs = edge
        super().add_edge_left(edge)

    def remove_edge(self, edge: Edge) -> None:
        if self._belongs is edge:
            self._belongs = None
        super().remove_edge(edge)

    def typed(self) -> bool:
        """True once the instance has been given a type."""
        return self._belongs is not None

    def belongs(self) -> Belongs:
        """The edge that ties the instance to its type."""
        if self._belongs is None:
            raise LookupError(f"{type(self).__name__} is not typed")
        return self._belongs

    def type(self) -> Type:
        """The type of the instance."""
        return self.belongs().type()


class Belongs(Edge):
    """Ties an instance to its type."""

    def connect(self, left: Node, right: Node) -> None:
        self._require(left, Instance, "left", self)
        self._require(right, Type, "right", self)
        super().connect(left, right)

    def instance(self) -> Instance:
        return self._left  # type: ignore[return-value]

    def type(self) -> Type:
        return self._right  # type: ignore[return-value]


class Inherits(Edge):
    """Ties a derived type to its base type."""

    def connect(self, left: Node, right: Node) -> None:
        self._require(left, Type, "left", self)
        self._require(right, Type, "right", self)
        super().connect(left, right)

    def inheritor(self) -> Type:
        return self._left  # type: ignore[return-value]

    def inheritee(self) -> Type:
        return self._right  # type: ignore[return-value]


class Contains(Edge):
    """Ties a container to a node it holds."""

    def connect(self, left: Node, right: Node) -> None:
        self._require(left, Container, "left", self)
        self._require(right, Node, "right", self)
        super().connect(left, right)

    def container(self) -> Container:
        return self._left  # type: ignore[return-value]

    def element(self) -> Node:
        return self._right  # type: ignore[return-value]


class Container(Node):
    """A node that holds other nodes through contains edges."""

    def __init__(self) -> None:
        super().__init__()
        self._contains: list[Contains] = []

    def add_edge_left(self, edge: Edge) -> None:
        if isinstance(edge, Contains):
            self._contains.append(edge)
        super().add_edge_left(edge)

    def remove_edge(self, edge: Edge) -> None:
        self._contains = [e for e in self._contains if e is not edge]
        super().remove_edge(edge)

    def contains(self) -> list[Contains]:
        """The contains edges leaving this container, in order."""
        return list(self._contains)