"""Schema node interface and the descriptor value types."""

from .descriptors import PropertyDescriptor, Requiredness, TypeDescriptor
from .schema_node import SchemaFlags, SchemaNode, SchemaProperty, SimpleSchemaNode

__all__ = [
    "PropertyDescriptor",
    "Requiredness",
    "TypeDescriptor",
    "SchemaFlags",
    "SchemaNode",
    "SchemaProperty",
    "SimpleSchemaNode",
]
