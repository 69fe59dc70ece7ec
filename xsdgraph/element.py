"""Element declarations in the schema semantic graph."""

from __future__ import annotations

from .elements import Instance


class Element(Instance):
    """An xsd:element with its cardinality and qualification."""

    def __init__(self, min: int, max: int, qualified: bool) -> None:
        super().__init__()
        self._min = min
        self._max = max
        self._qualified = bool(qualified)
        self._href = False

    @property
    def min(self) -> int:
        """The minimum number of occurrences."""
        return self._min

    @property
    def max(self) -> int:
        """The maximum number of occurrences."""
        return self._max

    @property
    def qualified(self) -> bool:
        """True when the element name must carry its namespace."""
        return self._qualified

    @property
    def href(self) -> bool:
        """True when the element may be given as an XMI href reference."""
        return self._href

    def __repr__(self) -> str:
        return (
            f"Element(min={self._min}, max={self._max}, "
            f"qualified={self._qualified})"
        )