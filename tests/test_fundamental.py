import pytest

from xsdgraph import fundamental as f
from xsdgraph.elements import Belongs, Instance, Names, Scope, Type
from xsdgraph.graph import Graph


def test_builtin_type_names_in_order():
    names = list(f.builtin_types())
    assert names[:3] == ["anyType", "anySimpleType", "anyURI"]
    assert names[-2:] == ["ID", "IDREF"]
    assert len(names) == 29


@pytest.mark.parametrize(
    "name, cls",
    [
        ("anyType", f.AnyType),
        ("anyURI", f.AnyUri),
        ("unsignedLong", f.UnsignedLong),
        ("string", f.String),
        ("NMTOKEN", f.NMTOKEN),
        ("QName", f.QName),
        ("ID", f.Id),
        ("IDREF", f.IdRef),
    ],
)
def test_builtin_type_classes(name, cls):
    assert f.builtin_types()[name] is cls


def test_every_builtin_is_a_fundamental_type():
    graph = Graph()
    ns = graph.new_node(Scope)
    for name, cls in f.builtin_types().items():
        assert issubclass(cls, f.FundamentalType)
        assert issubclass(cls, Type)
        node = graph.new_node(cls)
        graph.new_edge(Names, ns, node, name)
        assert node.name() == name
        assert [n.named() for n in ns.find(name)] == [node]
    assert len(ns.names()) == 29


def test_builtin_classes_are_distinct():
    classes = list(f.builtin_types().values())
    assert len(set(classes)) == len(classes)


def test_href_and_base_are_not_schema_builtins():
    values = set(f.builtin_types().values())
    assert f.Href not in values
    assert f.FundamentalType not in values
    assert issubclass(f.Href, f.FundamentalType)


def test_builtin_types_returns_fresh_mapping():
    first = f.builtin_types()
    first.pop("string")
    assert "string" in f.builtin_types()


def test_fundamental_type_can_be_named_and_typed():
    graph = Graph()
    ns = graph.new_node(Scope)
    string_type = graph.new_node(f.String)
    graph.new_edge(Names, ns, string_type, "string")

    assert string_type.is_named()
    assert string_type.name() == "string"
    assert string_type.scope() is ns
    assert [n.named() for n in ns.find("string")] == [string_type]

    inst = graph.new_node(Instance)
    edge = graph.new_edge(Belongs, inst, string_type)
    assert inst.typed()
    assert inst.type() is string_type
    assert string_type.classifies() == [edge]


def test_fundamental_type_cannot_be_an_instance():
    graph = Graph()
    t = graph.new_node(f.Int)
    other = graph.new_node(f.Long)
    with pytest.raises(TypeError):
        graph.new_edge(Belongs, t, other)