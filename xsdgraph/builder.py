"""Builds semantic graph nodes from the content of XML Schema documents."""

from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from .attribute import Attribute
from .complex import Complex, Enumeration, Enumerator
from .element import Element
from .elements import Belongs, Inherits, Names, Node, Scope, Type
from .resolver import NotName, NotNamespace, copy_group_elements, resolve
from .schema import Schema
from .xmlutil import XmlElement, fq_name, ns_name, ns_prefix, uq_name

logger = logging.getLogger(__name__)

XSD_NAMESPACE = "http://www.w3.org/2001/XMLSchema"
XMI_NAMESPACE = "http://www.omg.org/XMI"

# Largest value of an unsigned long; stands for maxOccurs="unbounded".
UNBOUNDED = 2**64 - 1

_LEADING_NUMBER = re.compile(r"\s*\+?(\d+)")


def _parse_count(text: str, default: int) -> int:
    """Read the leading decimal number of ``text``, or return ``default``."""
    match = _LEADING_NUMBER.match(text)
    return int(match.group(1)) if match else default


class _Cursor:
    """Position among the child elements of one schema element."""

    __slots__ = ("children", "index")

    def __init__(self, element: XmlElement) -> None:
        self.children = element.children()
        self.index = 0


class ContentBuilder:
    """Turns schema components (types, elements, attributes, groups) into graph nodes.

    Nodes and edges are created in ``root_schema``; new names go into the
    innermost scope, which ``scope`` starts off when given.
    """

    def __init__(self, root_schema: Optional[Schema] = None, scope: Optional[Scope] = None) -> None:
        self.root_schema = root_schema
        self.qualify_attribute = False
        self.qualify_element = False
        self._scopes: list[Scope] = [] if scope is None else [scope]
        self._cursors: list[_Cursor] = []
        self._cardinalities: list[tuple[int, int]] = []

    # State handling.

    @property
    def _graph(self) -> Schema:
        if self.root_schema is None:
            raise LookupError("no root schema to build into")
        return self.root_schema

    def _scope(self) -> Scope:
        if not self._scopes:
            raise LookupError("no current scope")
        return self._scopes[-1]

    @contextmanager
    def _in_scope(self, scope: Scope) -> Iterator[Scope]:
        self._scopes.append(scope)
        try:
            yield scope
        finally:
            self._scopes.pop()

    @contextmanager
    def _iterating(self, element: XmlElement) -> Iterator[None]:
        self._cursors.append(_Cursor(element))
        try:
            yield
        finally:
            self._cursors.pop()

    def _more(self) -> bool:
        cursor = self._cursors[-1]
        return cursor.index < len(cursor.children)

    def _next(self) -> XmlElement:
        cursor = self._cursors[-1]
        if cursor.index >= len(cursor.children):
            raise ValueError("expected more schema content")
        child = cursor.children[cursor.index]
        cursor.index += 1
        return child

    def _prev(self) -> None:
        cursor = self._cursors[-1]
        if cursor.index:
            cursor.index -= 1

    @contextmanager
    def _cardinality(self, lo: int, hi: int) -> Iterator[None]:
        self._cardinalities.append((lo, hi))
        try:
            yield
        finally:
            self._cardinalities.pop()

    def _min(self) -> int:
        return self._cardinalities[-1][0] if self._cardinalities else 1

    def _max(self) -> int:
        return self._cardinalities[-1][1] if self._cardinalities else 1

    def _resolve(self, ns: str, uq: str, kind: type) -> Node:
        return resolve(ns, uq, self._graph, kind)

    def _name(self, scope: Scope, node: Node, name: str, anonymous: bool = False) -> None:
        self._graph.new_edge(Names, scope, node, name, anonymous)

    @staticmethod
    def _parent_name(element: XmlElement) -> str:
        parent = element.parent()
        return parent["name"] if parent is not None else ""

    def _complex_scope(self) -> Complex:
        scope = self._scope()
        if not isinstance(scope, Complex):
            raise TypeError(f"extension inside a {type(scope).__name__}, not a complex type")
        return scope

    # Components.

    def annotation(self) -> None:
        """Skip a single annotation child, if one comes next."""
        if self._more() and self._next().name() != "annotation":
            self._prev()

    def group(self, g: XmlElement) -> None:
        """Define a model group, or copy the elements of a referenced one."""
        name = g["name"]
        ref = g["ref"]
        if name:
            node = self._graph.new_node(Scope)
            self._name(self._scope(), node, name)
            with self._in_scope(node), self._iterating(g):
                self.annotation()
                e = self._next()
                kind = e.name()
                logger.debug("%s", kind)
                if kind == "all":
                    self.all(e)
                elif kind == "choice":
                    self.choice(e)
                elif kind == "sequence":
                    self.sequence(e)
                else:
                    logger.error("expected `all' or `choice' or `sequence' instead of %s", kind)
        elif ref:
            uq = uq_name(ref)
            ns = ns_name(g, ref)
            lo = 0 if g["minOccurs"] == "0" else self._min()
            hi = 0 if g["maxOccurs"] and g["maxOccurs"] != "1" else self._max()
            logger.debug("group min %d max %d", lo, hi)
            try:
                found = self._resolve(ns, uq, Scope)
            except NotNamespace:
                logger.error("unable to resolve namespace `%s'", ns)
            except NotName:
                logger.debug(
                    "unable to resolve group name `%s' inside namespace `%s'; "
                    "deferring resolution until later", uq, ns,
                )
                ctx = self._scope().context
                ctx.set("group-ns-name", ns)
                ctx.set("group-uq-name", uq)
                ctx.set("group-min", lo)
                ctx.set("group-max", hi)
            else:
                copy_group_elements(self._graph, self._scope(), found, lo, hi)
        else:
            logger.error("`name' or `ref' attribute is missing for group declaration")

    def simple_type(self, t: XmlElement) -> Optional[Type]:
        """Build a simple type; only restrictions are understood."""
        with self._iterating(t):
            self.annotation()
            e = self._next()
            if e.name() == "restriction":
                return self.simple_content_restriction(e)
            logger.error("expected `restriction' instead of %s", e.name())
            return None

    def simple_content_restriction(self, r: XmlElement) -> Type:
        """Build an enumeration, or name the restricted base type itself."""
        base = r["base"]
        logger.debug("restriction base: %s", fq_name(r, base))
        with self._iterating(r):
            self.annotation()
            if self._more():
                e = self._next()
                if e.name() == "enumeration":
                    node = self._graph.new_node(Enumeration)
                    self.set_type(Inherits, base, r, node)
                    name = self._parent_name(r)
                    if name:
                        self._name(self._scope(), node, name)
                    with self._in_scope(node):
                        self.enumeration(e)
                        while self._more():
                            self.enumeration(self._next())
                    return node

            found = self._resolve(ns_name(r, base), uq_name(base), Type)
            name = self._parent_name(r)
            if name:
                self._name(self._scope(), found, name)
            return found

    def complex_content_restriction(self, r: XmlElement) -> None:
        """Complex content restriction is not supported; its content is skipped."""
        logger.error("complex content restriction is not supported yet")
        with self._iterating(r):
            self.annotation()
        return None

    def enumeration(self, e: XmlElement) -> None:
        """Add one enumerator, typed by the enclosing enumeration."""
        value = e["value"]
        logger.debug("enumeration value: %s", value)
        node = self._graph.new_node(Enumerator)
        scope = self._scope()
        self._name(scope, node, value)
        self._graph.new_edge(Belongs, node, scope)

    def complex_type(self, t: XmlElement, anon_name: str = "") -> Optional[Complex]:
        """Build a complex type, anonymous when ``anon_name`` is given."""
        if t["mixed"] == "true":
            logger.error("mixed content model is not supported")
            return None

        node = self._graph.new_node(Complex)
        name = t["name"]
        if anon_name:
            self._name(self._scope(), node, anon_name, True)
        elif name:
            self._name(self._scope(), node, name, False)

        handlers: dict[str, Callable[[XmlElement], object]] = {
            "group": self.group,
            "all": self.all,
            "choice": self.choice,
            "sequence": self.sequence,
            "attributeGroup": self.attribute_group,
            "attribute": self.attribute,
            "simpleContent": self.simple_content,
            "complexContent": self.complex_content,
        }

        with self._in_scope(node), self._iterating(t):
            self.annotation()
            if not self._more():
                return node
            e = self._next()
            kind = e.name()
            logger.debug("%s", kind)
            handler = handlers.get(kind)
            if handler is None:
                logger.error("expected `choice' or `sequence' instead of %s", kind)
                return node
            handler(e)

            while self._more():
                e = self._next()
                if e.name() == "attribute":
                    self.attribute(e)
                elif e.name() == "attributeGroup":
                    self.attribute_group(e)
                else:
                    logger.error("expected `attribute' instead of %s", e.name())
                    return node
        return node

    def all(self, a: XmlElement) -> None:
        """Build the elements of an ``all`` group."""
        with self._iterating(a):
            self.annotation()
            while self._more():
                e = self._next()
                if e.name() == "element":
                    self.element(e)
                else:
                    logger.error("expected `element' instead of %s", e.name())

    def _particle(self, e: XmlElement) -> None:
        kind = e.name()
        if kind == "group":
            self.group(e)
        elif kind == "choice":
            self.choice(e)
        elif kind == "sequence":
            self.sequence(e)
        elif kind == "element":
            self.element(e)
        else:
            logger.error("expected `choice' or `sequence' or `element' instead of %s", kind)

    def choice(self, c: XmlElement) -> None:
        """Build a choice; its members are never required."""
        logger.debug("choice")
        max_text = c["maxOccurs"]
        if max_text == "unbounded":
            hi = UNBOUNDED
        elif max_text:
            hi = _parse_count(max_text, self._max())
        else:
            hi = self._max()

        if max_text and max_text != "1":
            logger.debug("choice cardinality is more than one")
        else:
            logger.debug("choice cardinality is one")

        with self._cardinality(0, hi), self._iterating(c):
            while self._more():
                self._particle(self._next())

    def sequence(self, s: XmlElement) -> None:
        """Build a sequence; a repeated sequence gives its members a zero maximum."""
        lo = 0 if s["minOccurs"] == "0" else self._min()
        hi = 0 if s["maxOccurs"] and s["maxOccurs"] != "1" else self._max()
        with self._cardinality(lo, hi), self._iterating(s):
            while self._more():
                self._particle(self._next())

    def simple_content(self, c: XmlElement) -> None:
        """Build simple content; only extensions are understood."""
        with self._iterating(c):
            e = self._next()
            if e.name() == "extension":
                self.simple_content_extension(e)
            else:
                logger.error("expected `extension' instead of %s", e.name())

    def complex_content(self, c: XmlElement) -> None:
        """Build complex content by extension or restriction."""
        if c["mixed"] == "true":
            logger.error("mixed content model is not supported")
            return
        with self._iterating(c):
            e = self._next()
            if e.name() == "extension":
                self.complex_content_extension(e)
            elif e.name() == "restriction":
                self.complex_content_restriction(e)
            else:
                logger.error("expected `extension' instead of %s", e.name())

    def simple_content_extension(self, e: XmlElement) -> None:
        """Derive the enclosing complex type from a base and add attributes."""
        logger.debug("extension base: %s", fq_name(e, e["base"]))
        self.set_type(Inherits, e["base"], e, self._complex_scope())
        with self._iterating(e):
            while self._more():
                child = self._next()
                if child.name() == "attribute":
                    self.attribute(child)
                else:
                    logger.error("expected `attribute' instead of %s", child.name())

    def complex_content_extension(self, e: XmlElement) -> None:
        """Derive the enclosing complex type from a base and add its content."""
        logger.debug("extension base: %s", fq_name(e, e["base"]))
        self.set_type(Inherits, e["base"], e, self._complex_scope())
        with self._iterating(e):
            while self._more():
                child = self._next()
                kind = child.name()
                if kind == "group":
                    self.group(child)
                elif kind == "all":
                    self.all(child)
                elif kind == "choice":
                    self.choice(child)
                elif kind == "sequence":
                    self.sequence(child)
                elif kind == "attribute":
                    self.attribute(child)
                else:
                    logger.error("expected `attribute' instead of %s", kind)

    def element(self, e: XmlElement, is_global: bool = False) -> None:
        """Declare an element, or a local copy of a referenced global element."""
        lo, hi = self._min(), self._max()
        if e["minOccurs"]:
            lo = _parse_count(e["minOccurs"], lo)
        max_text = e["maxOccurs"]
        if max_text == "unbounded":
            hi = UNBOUNDED
        elif max_text:
            hi = _parse_count(max_text, hi)

        qualified = True if is_global else self.qualify_element
        form = e["form"]
        if form:
            qualified = form == "qualified"

        logger.debug("element min %d max %d qualified %s", lo, hi, qualified)

        name = e["name"]
        ref = e["ref"]
        if name:
            node = self._graph.new_node(Element, lo, hi, qualified)
            self._name(self._scope(), node, name)
            type_name = e["type"]
            if type_name:
                logger.debug("element type %s", fq_name(e, type_name))
                self.set_type(Belongs, type_name, e, node)
                return
            with self._iterating(e):
                self.annotation()
                if self._more():
                    child = self._next()
                    kind = child.name()
                    logger.debug("%s", kind)
                    anonymous: Optional[Type] = None
                    if kind == "simpleType":
                        anonymous = self.simple_type(child)
                    elif kind == "complexType":
                        anonymous = self.complex_type(child, name)
                    else:
                        logger.error(
                            "expected `simpleType' or `complexType' instead of %s", kind
                        )
                    if anonymous is not None:
                        self._graph.new_edge(Belongs, node, anonymous)
                else:
                    pfx = ns_prefix(e, XSD_NAMESPACE)
                    self.set_type(Belongs, f"{pfx}:anyType" if pfx else "anyType", e, node)
        elif ref:
            uq = uq_name(ref)
            ns = ns_name(e, ref)
            node = self._graph.new_node(Element, lo, hi, qualified)
            self._name(self._scope(), node, uq)
            try:
                target = self._resolve(ns, uq, Element)
            except NotNamespace:
                logger.error("unable to resolve namespace `%s'", ns)
            except NotName:
                node.context.set("instance-ns-name", ns)
                node.context.set("instance-uq-name", uq)
                logger.debug(
                    "unable to resolve name `%s' inside namespace `%s'; "
                    "deferring resolution until later", uq, ns,
                )
            else:
                if target.typed():
                    self._graph.new_edge(Belongs, node, target.type())
                elif "type-ns-name" in target.context:
                    node.context.set("type-ns-name", target.context.get("type-ns-name"))
                    node.context.set("type-uq-name", target.context.get("type-uq-name"))
                    logger.debug(
                        "element `%s' is not typed; deferring resolution until later", ref
                    )
                else:
                    logger.debug("element `%s' is in unexpected condition", ref)
        else:
            logger.error("`name' or `ref' attribute is missing for element declaration")

    def attribute(self, a: XmlElement, is_global: bool = False) -> None:
        """Declare an attribute, or a local copy of a referenced global attribute."""
        name = a["name"]
        ref = a["ref"]
        if not name:
            if not ref:
                logger.error("`name' or `ref' attribute is missing for attribute declaration")
                return
            uq = uq_name(ref)
            ns = ns_name(a, ref)
            try:
                target = self._resolve(ns, uq, Attribute)
            except NotNamespace:
                logger.error("unable to resolve namespace `%s'", ns)
                return
            except NotName:
                logger.error("unable to resolve name `%s' inside namespace `%s'", uq, ns)
                return
            node = self._graph.new_node(Attribute, target.optional, target.qualified)
            self._name(self._scope(), node, uq)
            if target.typed():
                self._graph.new_edge(Belongs, node, target.type())
            else:
                logger.error("unexpected untyped attribute reference.")
            return

        use = a["use"]
        if use == "prohibited":
            return
        optional = use != "required"

        qualified = True if is_global else self.qualify_attribute
        form = a["form"]
        if form:
            qualified = form == "qualified"

        node = self._graph.new_node(Attribute, optional, qualified)
        self._name(self._scope(), node, name)

        type_name = a["type"]
        if not type_name:
            pfx = ns_prefix(a, XSD_NAMESPACE)
            type_name = f"{pfx}:anySimpleType" if pfx else "anySimpleType"
        logger.debug("attribute type %s", fq_name(a, type_name))
        self.set_type(Belongs, type_name, a, node)

    def attribute_group(self, a: XmlElement, is_global: bool = False) -> None:
        """Define an attribute group, or copy the attributes of a referenced one."""
        ref = a["ref"]
        name = a["name"]
        if not ref:
            if not name:
                logger.error("attribute group has both empty name and ref values.")
                return
            node = self._graph.new_node(Scope)
            self._name(self._scope(), node, name)
            with self._in_scope(node), self._iterating(a):
                self.annotation()
                while self._more():
                    e = self._next()
                    kind = e.name()
                    logger.debug("%s", kind)
                    if kind == "attribute":
                        self.attribute(e)
                    elif kind == "attributeGroup":
                        self.attribute_group(e)
                    else:
                        logger.error("expected attribute child, got %s instead.", kind)
            return

        uq = uq_name(ref)
        ns = ns_name(a, ref)
        try:
            group = self._resolve(ns, uq, Scope)
        except NotNamespace:
            logger.error("unable to resolve namespace `%s'", ns)
            return
        except NotName:
            logger.error("unable to resolve group name `%s' inside namespace `%s'", uq, ns)
            return

        for edge in group.names():
            proto = edge.named()
            if not isinstance(proto, Attribute):
                raise TypeError(
                    f"attribute group member is a {type(proto).__name__}, not an attribute"
                )
            copy = self._graph.new_node(Attribute, proto.optional, proto.qualified)
            self._name(self._scope(), copy, proto.name())
            if proto.typed():
                self._graph.new_edge(Belongs, copy, proto.type())
            else:
                logger.error("unexpected untyped attribute")

    def set_type(self, edge_cls: type, type_name: str, e: XmlElement, node: Node) -> None:
        """Join ``node`` to the named type with ``edge_cls``, or defer the lookup."""
        ns = ns_name(e, type_name)
        uq = uq_name(type_name)
        try:
            found = self._resolve(ns, uq, Type)
        except NotNamespace:
            logger.error("unable to resolve namespace `%s'", ns)
        except NotName:
            node.context.set("type-ns-name", ns)
            node.context.set("type-uq-name", uq)
            logger.debug(
                "unable to resolve name `%s' inside namespace `%s'; "
                "deferring resolution until later", uq, ns,
            )
        else:
            self._graph.new_edge(edge_cls, node, found)