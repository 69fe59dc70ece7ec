import pytest

from xsdgraph.element import Element
from xsdgraph.elements import Belongs, Instance, Names
from xsdgraph.fundamental import Int
from xsdgraph.graph import Graph
from xsdgraph.schema import Namespace


def test_cardinality_and_qualification():
    e = Element(0, 5, True)
    assert e.min == 0
    assert e.max == 5
    assert e.qualified is True


def test_href_defaults_false():
    assert Element(1, 1, False).href is False


def test_is_untyped_instance():
    e = Element(1, 1, False)
    assert isinstance(e, Instance)
    assert not e.typed()
    with pytest.raises(LookupError):
        e.belongs()


def test_belongs_and_names():
    graph = Graph()
    ns = graph.new_node(Namespace)
    e = graph.new_node(Element, 1, 1, True)
    t = graph.new_node(Int)
    graph.new_edge(Names, ns, e, "count")
    edge = graph.new_edge(Belongs, e, t)
    assert e.belongs() is edge
    assert e.type() is t
    assert e.name() == "count"
    assert e.is_named()


def test_deleting_type_untypes_element():
    graph = Graph()
    e = graph.new_node(Element, 1, 1, False)
    t = graph.new_node(Int)
    graph.new_edge(Belongs, e, t)
    graph.delete_node(t)
    assert not e.typed()
    assert graph.edges() == []