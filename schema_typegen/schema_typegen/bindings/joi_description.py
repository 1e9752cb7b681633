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

"""SchemaNode binding for Joi ``schema.describe()`` output.

Joi's description is a JSON-compatible dict::

    {
      "type": "object",
      "flags": {"presence": "required", "label": "Order"},
      "keys": {"id": {"type": "number"}, "tags": {"type": "array", "items": [...]}},
    }

Enumerated values are listed under ``allow`` (Joi 17) or ``valids`` (older
releases).
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..models import SchemaFlags, SchemaNode
from ..utils.kind_names import normalize_kind


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


class JoiDescriptionNode(SchemaNode):
    """Schema node over one Joi description dict."""

    def __init__(self, description: Any):
        self._description = _as_dict(description)

    @property
    def kind(self) -> Optional[str]:
        return normalize_kind(self._description.get("type"))

    @property
    def flags(self) -> SchemaFlags:
        flags = _as_dict(self._description.get("flags"))
        return SchemaFlags(
            presence=_as_text(flags.get("presence")),
            label=_as_text(flags.get("label")),
            description=_as_text(flags.get("description")),
        )

    def properties(self) -> Sequence[Tuple[str, SchemaNode]]:
        keys = _as_dict(self._description.get("keys"))
        return tuple((str(key), JoiDescriptionNode(child)) for key, child in keys.items())

    def array_item(self) -> Optional[SchemaNode]:
        items = self._description.get("items")
        if not isinstance(items, list) or not items:
            return None
        return JoiDescriptionNode(items[0])

    def allowed_values(self) -> Sequence[Any]:
        values: List[Any] = []
        for field_name in ("allow", "valids"):
            declared = self._description.get(field_name)
            if isinstance(declared, list) and declared:
                values.extend(declared)
                break
        return tuple(values)

    def __repr__(self) -> str:
        return f"JoiDescriptionNode(kind={self.kind!r}, label={self.flags.label!r})"
