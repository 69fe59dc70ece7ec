import pytest

from xsdgraph.complex import Complex, Enumeration, Enumerator
from xsdgraph.element import Element
from xsdgraph.elements import Belongs, Inherits, Names, Scope, Type
from xsdgraph.fundamental import String
from xsdgraph.graph import Graph
from xsdgraph.schema import Namespace


def test_complex_is_type_and_scope():
    c = Complex()
    assert isinstance(c, Type)
    assert isinstance(c, Scope)
    assert c.inherits() == []
    assert c.names() == []


def test_inherits_recorded_in_order():
    graph = Graph()
    c = graph.new_node(Complex)
    base1 = graph.new_node(String)
    base2 = graph.new_node(Complex)
    e1 = graph.new_edge(Inherits, c, base1)
    e2 = graph.new_edge(Inherits, c, base2)
    assert c.inherits() == [e1, e2]
    assert e1.inheritor() is c
    assert e1.inheritee() is base1


def test_complex_scopes_elements_and_classifies():
    graph = Graph()
    ns = graph.new_node(Namespace)
    c = graph.new_node(Complex)
    graph.new_edge(Names, ns, c, "Book", False)
    member = graph.new_node(Element, 1, 1, False)
    names = graph.new_edge(Names, c, member, "title")
    typed = graph.new_node(Element, 1, 1, True)
    belongs = graph.new_edge(Belongs, typed, c)
    assert c.name() == "Book"
    assert c.is_named()
    assert c.names() == [names]
    assert c.find("title") == [names]
    assert c.classifies() == [belongs]


def test_anonymous_name():
    graph = Graph()
    ns = graph.new_node(Namespace)
    c = graph.new_node(Complex)
    graph.new_edge(Names, ns, c, "book", True)
    assert not c.is_named()
    assert c.name() == "book"


def test_delete_inherits_edge():
    graph = Graph()
    c = graph.new_node(Complex)
    base = graph.new_node(String)
    edge = graph.new_edge(Inherits, c, base)
    graph.delete_edge(edge)
    assert c.inherits() == []


def test_enumeration_with_enumerators():
    graph = Graph()
    enum = graph.new_node(Enumeration)
    base = graph.new_node(String)
    graph.new_edge(Inherits, enum, base)
    values = []
    for value in ("fiction", "history"):
        node = graph.new_node(Enumerator)
        graph.new_edge(Names, enum, node, value)
        graph.new_edge(Belongs, node, enum)
        values.append(node)
    assert isinstance(enum, Complex)
    assert [n.name() for n in enum.names()] == ["fiction", "history"]
    assert all(v.type() is enum for v in values)
    assert len(enum.classifies()) == len(values)
    assert enum.inherits()[0].inheritee() is base


def test_enumerator_cannot_be_scope():
    graph = Graph()
    node = graph.new_node(Enumerator)
    other = graph.new_node(Enumerator)
    with pytest.raises(TypeError):
        graph.new_edge(Names, node, other, "x")