"""Per-node and per-edge property bags used while building the semantic graph."""

from __future__ import annotations

from typing import Any, Iterator


class NotFound(KeyError):
    """Raised when a context key is not present."""


class ContextTypeError(TypeError):
    """Raised when a context value is replaced by a value of another type."""


class Context:
    """A string-keyed map of values whose type is fixed once a key is set."""

    __slots__ = ("_values",)

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def count(self, key: str) -> int:
        """Return how many values are stored under ``key`` (0 or 1)."""
        if not isinstance(key, str):
            raise TypeError(f"context keys are strings, not {type(key).__name__}")
        return int(key in self._values)

    def get(self, key: str, *args: Any) -> Any:
        """Return the value stored under ``key``.

        An optional single default is returned when the key is missing;
        without one, :class:`NotFound` is raised.
        """
        if len(args) > 1:
            raise TypeError(f"get() takes at most one default, got {len(args)}")
        try:
            return self._values[key]
        except KeyError:
            if args:
                return args[0]
            raise NotFound(key) from None

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``.

        Replacing an existing value with one of a different type raises
        :class:`ContextTypeError`.
        """
        if key in self._values:
            current = self._values[key]
            if type(current) is not type(value):
                raise ContextTypeError(
                    f"context key {key!r} holds {type(current).__name__}, "
                    f"not {type(value).__name__}"
                )
        self._values[key] = value

    def remove(self, key: str) -> None:
        """Delete ``key``; raise :class:`NotFound` if it is absent."""
        try:
            del self._values[key]
        except KeyError:
            raise NotFound(key) from None

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Context({self._values!r})"