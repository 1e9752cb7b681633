"""Pure schema node -> descriptor mapping functions."""

from .array_item_resolver import get_array_item_kind, get_array_type_name
from .property_analyzer import get_property_description, get_property_name, get_required
from .schema_describer import describe_properties, get_properties
from .type_mapper import get_property_type

__all__ = [
    "describe_properties",
    "get_array_item_kind",
    "get_array_type_name",
    "get_properties",
    "get_property_description",
    "get_property_name",
    "get_property_type",
    "get_required",
]
