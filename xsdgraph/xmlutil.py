"""Helpers for reading XML Schema documents: element wrapper, name handling, loading."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Optional, Union

from lxml import etree

PathLike = Union[str, "os.PathLike[str]"]


class DocumentLoadError(Exception):
    """Raised when a schema document cannot be found, parsed or accepted."""


class XmlElement:
    """A read-only view of an XML element as the schema parser needs it."""

    __slots__ = ("_element",)

    def __init__(self, element: etree._Element) -> None:
        if not isinstance(element.tag, str):
            raise TypeError("XmlElement wraps element nodes only")
        self._element = element

    @property
    def element(self) -> etree._Element:
        """The underlying lxml element."""
        return self._element

    def name(self) -> str:
        """The local name of the element."""
        return etree.QName(self._element).localname

    def namespace(self) -> str:
        """The namespace URI of the element, or an empty string."""
        return etree.QName(self._element).namespace or ""

    def parent(self) -> Optional[XmlElement]:
        """The parent element, or None at the document root."""
        parent = self._element.getparent()
        if parent is None or not isinstance(parent.tag, str):
            return None
        return XmlElement(parent)

    def children(self) -> list[XmlElement]:
        """The child elements, skipping text, comments and processing instructions."""
        return [XmlElement(c) for c in self._element if isinstance(c.tag, str)]

    def __getitem__(self, attribute: str) -> str:
        """The value of an unqualified attribute, or an empty string if absent."""
        return self._element.get(attribute, "")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, XmlElement) and other._element is self._element

    def __hash__(self) -> int:
        return hash(self._element)

    def __repr__(self) -> str:
        return f"XmlElement({self._element.tag!r})"


def prefix(name: str) -> str:
    """The prefix of a qualified name, or an empty string if it has none."""
    head, sep, _ = name.partition(":")
    return head if sep else ""


def uq_name(name: str) -> str:
    """The part of a qualified name after its first colon."""
    _, sep, tail = name.partition(":")
    return tail if sep else name


def ns_name(element: XmlElement, name: str) -> str:
    """The namespace URI that the prefix of ``name`` stands for at ``element``.

    A name without a prefix maps to the default namespace.
    """
    return element.element.nsmap.get(prefix(name) or None) or ""


def ns_prefix(element: XmlElement, namespace: str) -> str:
    """A prefix bound to ``namespace`` at ``element``, or an empty string."""
    for key, uri in element.element.nsmap.items():
        if key is not None and uri == namespace:
            return key
    return ""


def fq_name(element: XmlElement, name: str) -> str:
    """``namespace#local`` for a qualified name, or the local name alone."""
    ns = ns_name(element, name)
    un = uq_name(name)
    return f"{ns}#{un}" if ns else un


def normalize(name: str) -> str:
    """Replace every colon in ``name`` with an underscore."""
    return name.replace(":", "_")


def _locate(path: PathLike, include_paths: Iterable[PathLike]) -> Path:
    candidate = Path(path)
    if candidate.is_file():
        return candidate
    if not candidate.is_absolute():
        for base in include_paths:
            found = Path(base) / candidate
            if found.is_file():
                return found
    raise DocumentLoadError(f"unable to find schema document {os.fspath(path)}")


class _IncludePathResolver(etree.Resolver):
    """Looks up referenced schema documents in a list of directories."""

    def __init__(self, include_paths: Iterable[PathLike]) -> None:
        super().__init__()
        self._paths = tuple(Path(p) for p in include_paths)

    def resolve(self, url, pubid, context):
        if not url:
            return None
        if url.startswith("file://"):
            url = url[len("file://"):]
        elif "://" in url:
            return None
        candidate = Path(url)
        if candidate.is_file():
            return None
        tails = [candidate.name] if candidate.is_absolute() else [candidate, candidate.name]
        for base in self._paths:
            for tail in tails:
                found = base / tail
                if found.is_file():
                    return self.resolve_filename(str(found), context)
        return None


def load_document(path: PathLike, include_paths: Optional[Iterable[PathLike]] = None) -> XmlElement:
    """Parse a schema document, check that it is a valid schema and return its root.

    ``path`` is searched in ``include_paths`` when it is not found as given;
    the same directories are used for documents it refers to.
    """
    paths = list(include_paths or ())
    location = _locate(path, paths)

    parser = etree.XMLParser(remove_comments=True, remove_blank_text=True, no_network=True)
    parser.resolvers.add(_IncludePathResolver(paths))

    try:
        document = etree.parse(str(location), parser)
    except (etree.LxmlError, OSError) as exc:
        raise DocumentLoadError(f"unable to parse {location}: {exc}") from exc

    try:
        etree.XMLSchema(document)
    except etree.LxmlError as exc:
        raise DocumentLoadError(
            f"encountered an error when loading grammar [{location}]: {exc}"
        ) from exc

    return XmlElement(document.getroot())