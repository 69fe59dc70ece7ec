"""Read XML Schema documents into a semantic graph of types, elements and attributes."""

__version__ = "0.1.0"