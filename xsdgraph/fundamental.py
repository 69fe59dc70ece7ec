"""Built-in XML Schema data types as semantic graph nodes."""

from __future__ import annotations

from .elements import Type


class FundamentalType(Type):
    """Base of every type that XML Schema defines itself."""


class AnyType(FundamentalType):
    """xsd:anyType."""


class AnySimpleType(FundamentalType):
    """xsd:anySimpleType."""


class AnyUri(FundamentalType):
    """xsd:anyURI."""


class Byte(FundamentalType):
    """xsd:byte."""


class UnsignedByte(FundamentalType):
    """xsd:unsignedByte."""


class Short(FundamentalType):
    """xsd:short."""


class UnsignedShort(FundamentalType):
    """xsd:unsignedShort."""


class Int(FundamentalType):
    """xsd:int."""


class UnsignedInt(FundamentalType):
    """xsd:unsignedInt."""


class Long(FundamentalType):
    """xsd:long."""


class UnsignedLong(FundamentalType):
    """xsd:unsignedLong."""


class Decimal(FundamentalType):
    """xsd:decimal."""


class Integer(FundamentalType):
    """xsd:integer."""


class NonPositiveInteger(FundamentalType):
    """xsd:nonPositiveInteger."""


class NonNegativeInteger(FundamentalType):
    """xsd:nonNegativeInteger."""


class PositiveInteger(FundamentalType):
    """xsd:positiveInteger."""


class NegativeInteger(FundamentalType):
    """xsd:negativeInteger."""


class Boolean(FundamentalType):
    """xsd:boolean."""


class Float(FundamentalType):
    """xsd:float."""


class Double(FundamentalType):
    """xsd:double."""


class String(FundamentalType):
    """xsd:string."""


class NormalizedString(FundamentalType):
    """xsd:normalizedString."""


class Token(FundamentalType):
    """xsd:token."""


class Name(FundamentalType):
    """xsd:Name."""


class NMTOKEN(FundamentalType):
    """xsd:NMTOKEN."""


class NCName(FundamentalType):
    """xsd:NCName."""


class QName(FundamentalType):
    """xsd:QName."""


class Id(FundamentalType):
    """xsd:ID."""


class IdRef(FundamentalType):
    """xsd:IDREF."""


class Href(FundamentalType):
    """An XMI href reference."""


_BUILTINS: tuple[tuple[str, type[FundamentalType]], ...] = (
    ("anyType", AnyType),
    ("anySimpleType", AnySimpleType),
    ("anyURI", AnyUri),
    ("byte", Byte),
    ("unsignedByte", UnsignedByte),
    ("short", Short),
    ("unsignedShort", UnsignedShort),
    ("int", Int),
    ("unsignedInt", UnsignedInt),
    ("long", Long),
    ("unsignedLong", UnsignedLong),
    ("decimal", Decimal),
    ("integer", Integer),
    ("nonPositiveInteger", NonPositiveInteger),
    ("nonNegativeInteger", NonNegativeInteger),
    ("positiveInteger", PositiveInteger),
    ("negativeInteger", NegativeInteger),
    ("boolean", Boolean),
    ("float", Float),
    ("double", Double),
    ("string", String),
    ("normalizedString", NormalizedString),
    ("token", Token),
    ("Name", Name),
    ("NMTOKEN", NMTOKEN),
    ("NCName", NCName),
    ("QName", QName),
    ("ID", Id),
    ("IDREF", IdRef),
)


def builtin_types() -> dict[str, type[FundamentalType]]:
    """Map each XML Schema built-in type name to its node class, in schema order."""
    return dict(_BUILTINS)