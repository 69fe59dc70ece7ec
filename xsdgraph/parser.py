"""Reads XML Schema documents into a semantic graph."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Iterable, Optional, Union

from .builder import XMI_NAMESPACE, XSD_NAMESPACE, ContentBuilder
from .elements import Names
from .fundamental import String, builtin_types
from .resolver import Resolver
from .schema import Imports, Implies, Includes, Namespace, Schema, Sources
from .xmlutil import DocumentLoadError, XmlElement, load_document

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def _add_implied_schemas(root: Schema) -> None:
    """Attach the built-in XML Schema types and the supported XMI features."""
    xsd = root.new_node(Schema)
    root.new_edge(Implies, root, xsd, Path("XMLSchema.xsd"))
    xsd_ns = xsd.new_node(Namespace)
    xsd.new_edge(Names, xsd, xsd_ns, XSD_NAMESPACE)
    for name, cls in builtin_types().items():
        xsd.new_edge(Names, xsd_ns, xsd.new_node(cls), name)

    xmi = root.new_node(Schema)
    root.new_edge(Implies, root, xmi, Path("XMI.xsd"))
    xmi_ns = xmi.new_node(Namespace)
    xmi.new_edge(Names, xmi, xmi_ns, XMI_NAMESPACE)
    xmi.new_edge(Names, xmi_ns, xmi.new_node(String), "href")


class Parser(ContentBuilder):
    """Parses a schema file, together with what it imports and includes.

    ``include_paths`` are the directories searched for schema documents
    that are not found where they are named.
    """

    def __init__(self, trace: bool = False, include_paths: Iterable[PathLike] = ()) -> None:
        super().__init__()
        self.trace = bool(trace)
        self.include_paths: list[PathLike] = list(include_paths)
        self.cur_schema: Optional[Schema] = None
        # Schema locations already read, mapped to their namespace.
        self.file_map: dict[str, str] = {}

    def _trace(self, message: str, *args: object) -> None:
        if self.trace:
            logger.info(message, *args)

    def parse(self, uri: PathLike) -> Schema:
        """Read the schema at ``uri`` and return the resolved semantic graph.

        Raises :class:`DocumentLoadError` when the document cannot be loaded.
        """
        rs = Schema()
        _add_implied_schemas(rs)

        root = load_document(uri, self.include_paths)
        target = root["targetNamespace"]
        self._trace("target namespace: %s", target)
        self.file_map[os.fspath(uri)] = target

        self.root_schema = self.cur_schema = rs
        try:
            with self._in_scope(rs.new_node(Namespace)) as ns:
                rs.new_edge(Names, rs, ns, target)
                self.schema(root)
        finally:
            self.root_schema = self.cur_schema = None

        Resolver(rs).run()
        return rs

    def schema(self, s: XmlElement) -> None:
        """Build every top-level component of a schema element."""
        old_qa, old_qe = self.qualify_attribute, self.qualify_element
        af = s["attributeFormDefault"]
        if af:
            self.qualify_attribute = af == "qualified"
        ef = s["elementFormDefault"]
        if ef:
            self.qualify_element = ef == "qualified"

        handlers: dict[str, Callable[[XmlElement], object]] = {
            "import": self.import_schema,
            "include": self.include,
            "group": self.group,
            "simpleType": self.simple_type,
            "complexType": self.complex_type,
            "element": lambda e: self.element(e, True),
            "attributeGroup": lambda e: self.attribute_group(e, True),
            "attribute": lambda e: self.attribute(e, True),
        }

        try:
            with self._iterating(s):
                while self._more():
                    e = self._next()
                    kind = e.name()
                    self._trace("%s", kind)
                    if kind == "annotation":
                        continue
                    handler = handlers.get(kind)
                    if handler is None:
                        logger.error("unexpected top-level element: %s", kind)
                    else:
                        handler(e)
        finally:
            self.qualify_attribute, self.qualify_element = old_qa, old_qe

    def _load(self, path: str) -> Optional[XmlElement]:
        try:
            return load_document(path, self.include_paths)
        except DocumentLoadError as exc:
            logger.error("%s", exc)
            return None

    def _descend(self, root: XmlElement, schema: Schema, target: str) -> None:
        graph = self._graph
        old = self.cur_schema
        self.cur_schema = schema
        try:
            with self._in_scope(graph.new_node(Namespace)) as ns:
                graph.new_edge(Names, schema, ns, target)
                self.schema(root)
        finally:
            self.cur_schema = old

    def import_schema(self, i: XmlElement) -> None:
        """Read an imported schema document into its own schema node."""
        path = i["schemaLocation"]
        if path in self.file_map:
            return
        self.file_map[path] = i["namespace"]
        self._trace("importing %s", path)

        root = self._load(path)
        if root is None:
            logger.error("error: Unable to successfully parse %s", path)
            return

        graph = self._graph
        s = graph.new_node(Schema)
        graph.new_edge(Imports, self.cur_schema, s, Path(path))
        target = root["targetNamespace"]
        self._trace("target namespace: %s", target)
        self._descend(root, s, target)

    def include(self, i: XmlElement) -> None:
        """Read an included schema document; one without a namespace takes ours."""
        path = i["schemaLocation"]
        if path in self.file_map:
            return
        self.file_map[path] = "not in use right now"
        self._trace("including %s", path)

        root = self._load(path)
        if root is None:
            logger.error("Document construction failed")
            return

        graph = self._graph
        current = self.cur_schema
        if current is None:
            raise LookupError("no current schema to include into")
        s = graph.new_node(Schema)
        target = root["targetNamespace"]
        own_names = current.names()
        cur_ns = own_names[0].name if own_names else ""

        if not target and cur_ns:
            target = cur_ns
            graph.new_edge(Sources, current, s, Path(path))
            self._trace("handling chameleon schema")
        else:
            graph.new_edge(Includes, current, s, Path(path))

        self._trace("target namespace: %s", target)
        self._descend(root, s, target)