from pathlib import Path

import pytest

from xsdgraph.element import Element
from xsdgraph.elements import Names
from xsdgraph.fundamental import AnyType, String
from xsdgraph.schema import (
    Implies,
    Imports,
    Includes,
    Namespace,
    Schema,
    Sources,
)


def _schema_with_namespace(root, child, edge_cls, file, ns_name):
    root.new_edge(edge_cls, root, child, file)
    ns = child.new_node(Namespace)
    child.new_edge(Names, child, ns, ns_name)
    return ns


@pytest.mark.parametrize("edge_cls", [Implies, Sources, Includes, Imports])
def test_file_edges_keep_path(edge_cls):
    root = Schema()
    child = root.new_node(Schema)
    edge = root.new_edge(edge_cls, root, child, "XMLSchema.xsd")
    assert edge.file == Path("XMLSchema.xsd")
    assert edge.element() is child
    assert edge.container() is root
    assert child.is_contained()
    assert child.contained() is edge
    assert root.contains() == [edge]


def test_root_not_contained():
    root = Schema()
    assert not root.is_contained()
    with pytest.raises(LookupError):
        root.contained()


def test_nodes_and_edges_owned():
    root = Schema()
    ns = root.new_node(Namespace)
    edge = root.new_edge(Names, root, ns, "urn:a")
    assert root.nodes() == [ns]
    assert root.edges() == [edge]
    root.delete_node(ns)
    assert root.nodes() == []
    assert root.edges() == []
    assert root.find("urn:a") == []


def test_find_own_names_first_then_contained():
    root = Schema()
    own = root.new_node(Namespace)
    own_edge = root.new_edge(Names, root, own, "urn:x")
    implied = root.new_node(Schema)
    implied_ns = _schema_with_namespace(root, implied, Implies, "a.xsd", "urn:x")
    found = root.find("urn:x")
    assert found[0] is own_edge
    assert [n.named() for n in found] == [own, implied_ns]


def test_find_is_recursive_and_flat():
    root = Schema()
    child = root.new_node(Schema)
    _schema_with_namespace(root, child, Includes, "b.xsd", "urn:b")
    grandchild = root.new_node(Schema)
    deep_ns = _schema_with_namespace(child, grandchild, Imports, "c.xsd", "urn:c")
    assert [n.named() for n in root.find("urn:c")] == [deep_ns]
    assert root.find("urn:missing") == []


def test_find_types_in_implied_namespace():
    root = Schema()
    implied = root.new_node(Schema)
    xsd = "http://www.w3.org/2001/XMLSchema"
    ns = _schema_with_namespace(root, implied, Implies, "XMLSchema.xsd", xsd)
    any_type = implied.new_node(AnyType)
    string = implied.new_node(String)
    implied.new_edge(Names, ns, any_type, "anyType")
    implied.new_edge(Names, ns, string, "string")
    (names,) = root.find(xsd)
    namespace = names.named()
    assert [n.named() for n in namespace.find("string")] == [string]
    assert [n.name for n in namespace.names()] == ["anyType", "string"]


def test_delete_contains_edge_clears_containment():
    root = Schema()
    child = root.new_node(Schema)
    edge = root.new_edge(Imports, root, child, "d.xsd")
    root.delete_edge(edge)
    assert not child.is_contained()
    assert root.contains() == []


def test_schema_names_elements():
    root = Schema()
    ns = root.new_node(Namespace)
    root.new_edge(Names, root, ns, "")
    element = root.new_node(Element, 1, 1, True)
    root.new_edge(Names, ns, element, "library")
    (ns_names,) = root.find("")
    assert ns_names.named().find("library")[0].named() is element