"""Complex types and enumerations in the schema semantic graph."""

from __future__ import annotations

from .elements import Edge, Inherits, Instance, Scope, Type


class Complex(Type, Scope):
    """A type that is also a scope for its elements and attributes."""

    def __init__(self) -> None:
        super().__init__()
        self._inherits: list[Inherits] = []

    def inherits(self) -> list[Inherits]:
        """The inherits edges leaving this type, in the order they were added."""
        return list(self._inherits)

    def add_edge_left(self, edge: Edge) -> None:
        if isinstance(edge, Inherits):
            self._inherits.append(edge)
        super().add_edge_left(edge)

    def add_edge_right(self, edge: Edge) -> None:
        super().add_edge_right(edge)

    def remove_edge(self, edge: Edge) -> None:
        self._inherits = [e for e in self._inherits if e is not edge]
        super().remove_edge(edge)


class Enumeration(Complex):
    """A restriction of a simple type to a fixed set of values."""


class Enumerator(Instance):
    """One value of an enumeration."""