"""Derive requiredness and type descriptors from compiled validation schemas."""

__version__ = "0.1.0"

from .bindings import JoiDescriptionNode, JsonSchemaNode, wrap_schema
from .mapping import (
    describe_properties,
    get_array_type_name,
    get_properties,
    get_property_name,
    get_property_type,
    get_required,
)
from .models import (
    PropertyDescriptor,
    Requiredness,
    SchemaFlags,
    SchemaNode,
    SimpleSchemaNode,
    TypeDescriptor,
)

__all__ = [
    "JoiDescriptionNode",
    "JsonSchemaNode",
    "PropertyDescriptor",
    "Requiredness",
    "SchemaFlags",
    "SchemaNode",
    "SimpleSchemaNode",
    "TypeDescriptor",
    "describe_properties",
    "get_array_type_name",
    "get_properties",
    "get_property_name",
    "get_property_type",
    "get_required",
    "wrap_schema",
]
