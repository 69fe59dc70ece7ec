"""Name lookup across schemas and the pass that resolves deferred references."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from .complex import Complex, Enumeration
from .element import Element
from .elements import Belongs, Inherits, Instance, Names, Nameable, Scope, Type
from .schema import Namespace, Schema

logger = logging.getLogger(__name__)

T = TypeVar("T")


class NotNamespace(LookupError):
    """No namespace of the requested name is known."""

    def __init__(self, ns_name: str) -> None:
        super().__init__(f"unable to resolve namespace `{ns_name}'")
        self.ns_name = ns_name


class NotName(LookupError):
    """The namespaces exist but none of them holds the requested name."""

    def __init__(self, ns_name: str, uq_name: str) -> None:
        super().__init__(
            f"unable to resolve name `{uq_name}' inside namespace `{ns_name}'"
        )
        self.ns_name = ns_name
        self.uq_name = uq_name


def resolve(ns_name: str, uq_name: str, schema: Schema, kind: type[T]) -> T:
    """Find the node named ``uq_name`` in namespace ``ns_name`` of ``schema``.

    Raises :class:`NotNamespace` or :class:`NotName` when the lookup fails and
    :class:`TypeError` when the node found is not a ``kind``.
    """
    spaces = schema.find(ns_name)
    if not spaces:
        raise NotNamespace(ns_name)

    for edge in spaces:
        ns = edge.named()
        if not isinstance(ns, Namespace):
            raise TypeError(f"`{ns_name}' names a {type(ns).__name__}, not a namespace")
        found = ns.find(uq_name)
        if found:
            node = found[0].named()
            if not isinstance(node, kind):
                raise TypeError(
                    f"`{ns_name}#{uq_name}' is a {type(node).__name__}, "
                    f"not a {kind.__name__}"
                )
            logger.debug("successfully resolved `%s#%s'", ns_name, uq_name)
            return node

    raise NotName(ns_name, uq_name)


def copy_group_elements(
    graph: Schema, target: Scope, group: Scope, grp_min: int, grp_max: int
) -> list[Element]:
    """Copy the elements of a model group into ``target``.

    A zero ``grp_min`` or ``grp_max`` overrides the corresponding bound of
    every copied element; otherwise the element keeps its own.  Types that are
    not yet known are carried over as deferred references.
    """
    copies: list[Element] = []
    for edge in group.names():
        proto = edge.named()
        if not isinstance(proto, Element):
            raise TypeError(f"group member is a {type(proto).__name__}, not an element")

        copy = graph.new_node(
            Element,
            grp_min if grp_min == 0 else proto.min,
            grp_max if grp_max == 0 else proto.max,
            proto.qualified,
        )
        graph.new_edge(Names, target, copy, proto.name())

        ctx = proto.context
        if proto.typed():
            graph.new_edge(Belongs, copy, proto.type())
        elif "type-ns-name" in ctx:
            copy.context.set("type-ns-name", ctx.get("type-ns-name"))
            copy.context.set("type-uq-name", ctx.get("type-uq-name"))
        elif "instance-ns-name" in ctx:
            copy.context.set("instance-ns-name", ctx.get("instance-ns-name"))
            copy.context.set("instance-uq-name", ctx.get("instance-uq-name"))
        else:
            logger.debug("element `%s' is in unexpected condition", edge.name)
        copies.append(copy)
    return copies


class Resolver:
    """Second pass over a parsed schema that resolves deferred types and references."""

    def __init__(self, schema: Schema) -> None:
        self._schema = schema

    def run(self) -> None:
        """Resolve every deferred reference reachable from the schema."""
        logger.debug("post-resolution pass #1")
        self._traverse_schema(self._schema)

    def _traverse_schema(self, schema: Schema) -> None:
        for edge in schema.contains():
            held = edge.element()
            if isinstance(held, Schema):
                self._traverse_schema(held)
        for edge in schema.names():
            ns = edge.named()
            if isinstance(ns, Namespace):
                self._traverse_names(ns)

    def _traverse_names(self, scope: Scope) -> None:
        for edge in scope.names():
            self._visit(edge.named())

    def _visit(self, node: Nameable) -> None:
        self._anonymous_type(node)
        self._dispatch(node)

    def _anonymous_type(self, node: Any) -> None:
        if not isinstance(node, Instance) or not node.typed():
            return
        if node.type().is_named() or "seen" in node.context:
            return
        node.context.set("seen", True)
        try:
            self._dispatch(node.type())
        finally:
            node.context.remove("seen")

    def _dispatch(self, node: Any) -> None:
        if isinstance(node, Enumeration):
            return
        if isinstance(node, Complex):
            self._complex(node)
        elif isinstance(node, Instance):
            self._instance(node)
        elif isinstance(node, Scope):
            self._traverse_names(node)

    def _instance(self, inst: Instance) -> None:
        ctx = inst.context
        ns_name = uq_name = ""
        try:
            if "type-ns-name" in ctx:
                ns_name = ctx.get("type-ns-name")
                uq_name = ctx.get("type-uq-name")
                target = resolve(ns_name, uq_name, self._schema, Type)
                self._schema.new_edge(Belongs, inst, target)
                ctx.remove("type-ns-name")
                ctx.remove("type-uq-name")
            elif "instance-ns-name" in ctx:
                ns_name = ctx.get("instance-ns-name")
                uq_name = ctx.get("instance-uq-name")
                ref = resolve(ns_name, uq_name, self._schema, Instance)
                if ref.typed():
                    self._schema.new_edge(Belongs, inst, ref.type())
                    ctx.remove("instance-ns-name")
                    ctx.remove("instance-uq-name")
                else:
                    logger.error(
                        "referenced instance %s#%s is not typed", ns_name, uq_name
                    )
        except NotNamespace:
            logger.error("unable to resolve namespace `%s'", ns_name)
        except NotName:
            logger.error(
                "unable to resolve name `%s' inside namespace `%s'", uq_name, ns_name
            )

    def _complex(self, c: Complex) -> None:
        ctx = c.context
        ns_name = uq_name = ""
        try:
            if "type-ns-name" in ctx:
                ns_name = ctx.get("type-ns-name")
                uq_name = ctx.get("type-uq-name")
                base = resolve(ns_name, uq_name, self._schema, Type)
                self._schema.new_edge(Inherits, c, base)
                ctx.remove("type-ns-name")
                ctx.remove("type-uq-name")
            elif "group-ns-name" in ctx:
                ns_name = ctx.get("group-ns-name")
                uq_name = ctx.get("group-uq-name")
                grp_min = ctx.get("group-min")
                grp_max = ctx.get("group-max")
                group = resolve(ns_name, uq_name, self._schema, Scope)
                copy_group_elements(self._schema, c, group, grp_min, grp_max)
                for key in ("group-ns-name", "group-uq-name", "group-min", "group-max"):
                    ctx.remove(key)
        except NotNamespace:
            logger.error("unable to resolve namespace `%s'", ns_name)
        except NotName:
            logger.error(
                "unable to resolve name `%s' inside namespace `%s'", uq_name, ns_name
            )

        self._traverse_names(c)