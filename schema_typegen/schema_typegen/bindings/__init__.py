"""Bindings from validation-library dumps to the SchemaNode interface.

Each binding reads one library's public, JSON-compatible representation of a
compiled schema. Supported dialects:

- ``joi``: output of Joi's ``schema.describe()``
- ``json-schema``: JSON Schema documents
"""

from typing import Any

from ..exceptions import SchemaDialectError
from ..models import SchemaNode
from .joi_description import JoiDescriptionNode
from .json_schema import JsonSchemaNode

JOI_DIALECT = "joi"
JSON_SCHEMA_DIALECT = "json-schema"
AUTO_DIALECT = "auto"
DIALECTS = (AUTO_DIALECT, JOI_DIALECT, JSON_SCHEMA_DIALECT)

_JSON_SCHEMA_MARKERS = ("$schema", "properties", "$defs", "definitions")

__all__ = [
    "AUTO_DIALECT",
    "DIALECTS",
    "JOI_DIALECT",
    "JSON_SCHEMA_DIALECT",
    "JoiDescriptionNode",
    "JsonSchemaNode",
    "detect_dialect",
    "resolve_dialect",
    "wrap_schema",
]


def detect_dialect(data: Any) -> str:
    if isinstance(data, dict) and any(marker in data for marker in _JSON_SCHEMA_MARKERS):
        return JSON_SCHEMA_DIALECT
    return JOI_DIALECT


def resolve_dialect(data: Any, dialect: str = AUTO_DIALECT) -> str:
    """Return the concrete dialect for *data*.

    Raises:
        SchemaDialectError: If *dialect* is not one of DIALECTS
    """
    if dialect not in DIALECTS:
        raise SchemaDialectError(
            f"Unknown schema dialect '{dialect}'. Expected one of: {', '.join(DIALECTS)}"
        )
    if dialect == AUTO_DIALECT:
        return detect_dialect(data)
    return dialect


def wrap_schema(data: Any, dialect: str = AUTO_DIALECT) -> SchemaNode:
    """Wrap a loaded schema dump in the SchemaNode binding for its dialect."""
    if resolve_dialect(data, dialect) == JSON_SCHEMA_DIALECT:
        return JsonSchemaNode.from_document(data)
    return JoiDescriptionNode(data)
