# Copyright 2025 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""SchemaNode binding for JSON Schema documents.

JSON Schema keeps requiredness on the parent (``required: [...]``), so a
child node receives its presence from the parent when the parent lists its
properties. Local ``$ref`` pointers are resolved through ``referencing``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence, Tuple

from referencing import Registry, Resource
from referencing.exceptions import Unresolvable
from referencing.jsonschema import DRAFT202012

from ..models import SchemaFlags, SchemaNode
from ..utils.kind_names import (
    ARRAY_KIND,
    DATE_KIND,
    JSON_SCHEMA_DATE_FORMATS,
    JSON_SCHEMA_KINDS,
    OBJECT_KIND,
    STRING_KIND,
)

logger = logging.getLogger(__name__)

ROOT_URI = "urn:schema-typegen:root"


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _jp_escape(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def _jp_unescape(token: str) -> str:
    return token.replace("~1", "/").replace("~0", "~")


def _as_text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def build_resolver(document: Dict[str, Any]):
    """Build a ``referencing`` resolver rooted at *document*."""
    # An unknown, missing or non-string "$schema" falls back to draft 2020-12
    if isinstance(document.get("$schema"), str):
        resource = Resource.from_contents(document, default_specification=DRAFT202012)
    else:
        resource = DRAFT202012.create_resource(document)
    registry = Registry().with_resource(uri=ROOT_URI, resource=resource)
    return registry.resolver(base_uri=ROOT_URI)


class JsonSchemaNode(SchemaNode):
    """Schema node over one JSON Schema (sub)document."""

    def __init__(
        self,
        schema: Any,
        *,
        resolver=None,
        presence: Optional[str] = None,
        ref_name: Optional[str] = None,
    ):
        schema = _as_dict(schema)
        if resolver is None:
            resolver = build_resolver(schema)
        self._resolver = resolver
        self._presence = presence
        self._ref_name = ref_name
        self._schema = self._dereference(schema)

    @classmethod
    def from_document(cls, document: Any) -> "JsonSchemaNode":
        return cls(document)

    def _dereference(self, schema: Dict[str, Any]) -> Dict[str, Any]:
        seen = set()
        while isinstance(schema.get("$ref"), str):
            ref = schema["$ref"]
            if ref in seen:
                logger.debug(f"Circular $ref '{ref}', leaving node unresolved")
                return {}
            seen.add(ref)
            try:
                resolved = self._resolver.lookup(ref)
            except Unresolvable as exc:
                logger.debug(f"Cannot resolve $ref '{ref}': {exc}")
                return {}
            if self._ref_name is None:
                self._ref_name = _jp_unescape(ref.split("#", 1)[-1].rstrip("/").rsplit("/", 1)[-1]) or None
            # Sibling keywords next to $ref override the target's
            merged = dict(_as_dict(resolved.contents))
            merged.update({k: v for k, v in schema.items() if k != "$ref"})
            schema = merged
        return schema

    @property
    def kind(self) -> Optional[str]:
        schema = self._schema
        declared = schema.get("type")
        if isinstance(declared, list):
            declared = next((t for t in declared if t != "null"), None)

        if isinstance(declared, str):
            kind = JSON_SCHEMA_KINDS.get(declared, declared)
            if kind == STRING_KIND and schema.get("format") in JSON_SCHEMA_DATE_FORMATS:
                return DATE_KIND
            return kind

        if isinstance(schema.get("properties"), dict):
            return OBJECT_KIND
        if "items" in schema or "prefixItems" in schema:
            return ARRAY_KIND
        enum = schema.get("enum")
        if isinstance(enum, list) and enum and all(isinstance(v, str) for v in enum):
            return STRING_KIND
        return None

    @property
    def flags(self) -> SchemaFlags:
        label = _as_text(self._schema.get("title")) or self._ref_name
        return SchemaFlags(
            presence=self._presence,
            label=label,
            description=_as_text(self._schema.get("description")),
        )

    def properties(self) -> Sequence[Tuple[str, SchemaNode]]:
        declared = _as_dict(self._schema.get("properties"))
        required = self._schema.get("required")
        required_keys = set(k for k in required if isinstance(k, str)) if isinstance(required, list) else set()
        return tuple(
            (
                str(key),
                JsonSchemaNode(
                    child,
                    resolver=self._resolver,
                    presence="required" if key in required_keys else "optional",
                ),
            )
            for key, child in declared.items()
        )

    def array_item(self) -> Optional[SchemaNode]:
        items = self._schema.get("items")
        if isinstance(items, list):
            items = items[0] if items else None
        if items is None or items is True or items is False:
            prefix_items = self._schema.get("prefixItems")
            items = prefix_items[0] if isinstance(prefix_items, list) and prefix_items else None
        if not isinstance(items, dict):
            return None
        return JsonSchemaNode(items, resolver=self._resolver)

    def allowed_values(self) -> Sequence[Any]:
        enum = self._schema.get("enum")
        if isinstance(enum, list):
            return tuple(enum)
        return ()

    def definitions(self) -> Sequence[Tuple[str, SchemaNode]]:
        """Named entries under ``$defs`` (or legacy ``definitions``)."""
        for field_name in ("$defs", "definitions"):
            declared = self._schema.get(field_name)
            if isinstance(declared, dict):
                return tuple(
                    (
                        str(name),
                        JsonSchemaNode(
                            {"$ref": f"#/{field_name}/{_jp_escape(str(name))}"},
                            resolver=self._resolver,
                        ),
                    )
                    for name in declared
                )
        return ()

    def __repr__(self) -> str:
        return f"JsonSchemaNode(kind={self.kind!r}, label={self.flags.label!r})"
