"""Attribute declarations in the schema semantic graph."""

from __future__ import annotations

from .elements import Instance


class Attribute(Instance):
    """An xsd:attribute: an instance that may be optional and qualified."""

    def __init__(self, optional: bool, qualified: bool) -> None:
        super().__init__()
        self._optional = bool(optional)
        self._qualified = bool(qualified)

    @property
    def optional(self) -> bool:
        """True unless the attribute is required."""
        return self._optional

    @property
    def qualified(self) -> bool:
        """True when the attribute name must carry its namespace."""
        return self._qualified

    def __repr__(self) -> str:
        return (
            f"Attribute(optional={self._optional}, qualified={self._qualified})"
        )