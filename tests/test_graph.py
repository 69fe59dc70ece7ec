import pytest

from xsdgraph.graph import Graph


class Vertex:
    def __init__(self, label=None):
        self.label = label
        self.outgoing = []
        self.incoming = []

    def add_edge_left(self, edge):
        self.outgoing.append(edge)

    def add_edge_right(self, edge):
        self.incoming.append(edge)

    def remove_edge(self, edge):
        self.outgoing = [e for e in self.outgoing if e is not edge]
        self.incoming = [e for e in self.incoming if e is not edge]


class Link:
    def __init__(self, weight=0):
        self.weight = weight
        self.left = None
        self.right = None

    def connect(self, left, right):
        self.left = left
        self.right = right


def test_new_node_passes_arguments_and_registers():
    g = Graph()
    v = g.new_node(Vertex, "a")
    assert v.label == "a"
    assert g.nodes() == [v]


def test_nodes_keep_creation_order():
    g = Graph()
    a = g.new_node(Vertex, "a")
    b = g.new_node(Vertex, "b")
    c = g.new_node(Vertex, "c")
    assert g.nodes() == [a, b, c]


def test_new_edge_wires_both_ends():
    g = Graph()
    a = g.new_node(Vertex)
    b = g.new_node(Vertex)
    e = g.new_edge(Link, a, b, 4)
    assert e.weight == 4
    assert e.left is a and e.right is b
    assert a.outgoing == [e]
    assert b.incoming == [e]
    assert g.edges() == [e]


def test_delete_edge_detaches_it():
    g = Graph()
    a = g.new_node(Vertex)
    b = g.new_node(Vertex)
    e = g.new_edge(Link, a, b)
    g.delete_edge(e)
    assert a.outgoing == []
    assert b.incoming == []
    assert g.edges() == []


def test_delete_node_removes_incident_edges_only():
    g = Graph()
    a = g.new_node(Vertex)
    b = g.new_node(Vertex)
    c = g.new_node(Vertex)
    ab = g.new_edge(Link, a, b)
    bc = g.new_edge(Link, b, c)
    ac = g.new_edge(Link, a, c)
    g.delete_node(b)
    assert g.nodes() == [a, c]
    assert g.edges() == [ac]
    assert a.outgoing == [ac]
    assert c.incoming == [ac]
    assert ab not in g.edges() and bc not in g.edges()


def test_delete_node_with_self_loop():
    g = Graph()
    a = g.new_node(Vertex)
    g.new_edge(Link, a, a)
    g.delete_node(a)
    assert g.nodes() == []
    assert g.edges() == []


def test_delete_unknown_node_raises():
    g = Graph()
    with pytest.raises(KeyError):
        g.delete_node(Vertex())


def test_delete_unknown_edge_raises():
    g = Graph()
    with pytest.raises(KeyError):
        g.delete_edge(Link())


def test_delete_edge_twice_raises():
    g = Graph()
    a = g.new_node(Vertex)
    b = g.new_node(Vertex)
    e = g.new_edge(Link, a, b)
    g.delete_edge(e)
    with pytest.raises(KeyError):
        g.delete_edge(e)