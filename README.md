# xsdgraph

`xsdgraph` reads XML Schema (`.xsd`) documents and builds a semantic graph of
what they declare. The graph holds namespaces, complex and simple types,
enumerations, elements, attributes, model groups and attribute groups. Its
edges record naming, typing, inheritance, inclusion and import.

A schema compiler or code generator can walk this graph to decide what to
emit.

## Installation

```
pip install xsdgraph
```

The only dependency is `lxml`, which is used to read and check XML.

## Usage

```python
import logging
from pathlib import Path

from xsdgraph.parser import Parser

logging.basicConfig(level=logging.INFO)

parser = Parser(trace=True, include_paths=[Path("schemas")])
schema = parser.parse(Path("library.xsd"))

for names in schema.find("http://www.example.com/Lib"):
    namespace = names.named()
    for entry in namespace.names():
        print(entry.name, type(entry.named()).__name__)
```

`Parser.parse(uri)` returns the root `Schema`. The root holds the following:

- Two implied schemas, joined to it by `Implies` edges. One is named
  `XMLSchema.xsd` and holds the XML Schema built-in types in the
  `http://www.w3.org/2001/XMLSchema` namespace. The other is named `XMI.xsd`
  and holds `href`, a string type, in the `http://www.omg.org/XMI` namespace.
- A `Namespace` node for the target namespace of the parsed document.

Imported documents are attached as child schemas with `Imports` edges.
Included documents are attached with `Includes` edges. An included document
that has no target namespace of its own is attached with a `Sources` edge and
takes the namespace of the schema that includes it.

Each schema location is read only once. When the top document cannot be
found, parsed, or accepted as a schema, `parse` raises
`xsdgraph.xmlutil.DocumentLoadError`. When an imported or included document
fails the same way, the error is logged and parsing goes on.

`Schema.find(name)` returns the `Names` edges that carry `name`. It searches
the schema itself first and then every schema it contains, so a tree of
schemas behaves like one flat set of namespaces.

### Deferred references

Some references cannot be resolved while a document is being read. This
happens when a type, element or group is declared further down the document,
or in a document that is read later. In that case the reference is stored on
the node's `context` under these keys:

- `type-ns-name` / `type-uq-name`
- `instance-ns-name` / `instance-uq-name`
- `group-ns-name` / `group-uq-name` / `group-min` / `group-max`

Once every document has been read, `xsdgraph.resolver.Resolver` runs over the
graph. For each resolved reference it adds the missing `Belongs` or `Inherits`
edge, or the copied group elements, and then removes the keys. A reference
that still cannot be resolved is logged and left on the context.

### Modules

- `xsdgraph.context`: `Context`, the property bag attached to every node and
  edge. `NotFound` is raised for a missing key. `ContextTypeError` is raised
  when a key is given a value of a different type.
- `xsdgraph.graph`: `Graph`, which creates nodes and edges and wires both ends
  of each new edge. It also provides `delete_node`, `delete_edge`, `nodes()`
  and `edges()`.
- `xsdgraph.elements`: the core node and edge kinds `Node`, `Edge`, `Names`,
  `Nameable`, `Scope`, `Type`, `Instance`, `Belongs`, `Inherits`, `Contains`
  and `Container`.
- `xsdgraph.fundamental`: the built-in XML Schema types (`String`, `Int`,
  `AnyType`, and the rest) plus `Href`. `builtin_types()` maps each schema
  name to its class, in schema order.
- `xsdgraph.element`: `Element`, with `min`, `max`, `qualified` and `href`.
- `xsdgraph.attribute`: `Attribute`, with `optional` and `qualified`.
- `xsdgraph.complex`: `Complex`, `Enumeration` and `Enumerator`.
- `xsdgraph.schema`: `Schema`, `Namespace`, and the file edges `Implies`,
  `Sources`, `Includes` and `Imports`, each with a `file` path.
- `xsdgraph.xmlutil`: the following helpers.
  - `XmlElement`, a read-only element view.
  - The qualified-name helpers `prefix`, `uq_name`, `ns_name`, `ns_prefix`,
    `fq_name` and `normalize`.
  - `load_document(path, include_paths)`. It looks for the document as given
    and then in the include paths. It parses the document and checks that it
    is a valid XML Schema.
- `xsdgraph.resolver`:
  - `resolve(ns_name, uq_name, schema, kind)`, which raises `NotNamespace` or
    `NotName` when the lookup fails.
  - `copy_group_elements`.
  - The `Resolver` pass.
- `xsdgraph.builder`: `ContentBuilder`, which turns schema components into
  graph nodes. `Parser` builds on it.
- `xsdgraph.parser`: `Parser`.

### Cardinality

`maxOccurs="unbounded"` is stored as `xsdgraph.builder.UNBOUNDED`, which is
`2**64 - 1`. Members of a `choice` always get a minimum of 0.

### Diagnostics

Diagnostics go through the standard `logging` module, using loggers named
after the modules (`xsdgraph.parser`, `xsdgraph.builder`, `xsdgraph.resolver`).

- Unsupported or malformed constructs are logged at error level.
- With `trace=True`, the parser also logs its progress at info level.
- More detail is logged at debug level.

## What it does not do

- It only builds the graph. It does not generate code, and it does not read
  or write instance documents.
- It has no command-line tool.
- Mixed content and complex content restriction are not supported. They are
  reported and skipped.