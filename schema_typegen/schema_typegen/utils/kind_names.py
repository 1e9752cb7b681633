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

from __future__ import annotations

from typing import Any, Dict, Optional


OBJECT_KIND = "object"
ARRAY_KIND = "array"
STRING_KIND = "string"
DATE_KIND = "date"
NUMBER_KIND = "number"
BOOLEAN_KIND = "boolean"

DATE_TYPE_NAME = "Date"

# Raw kind -> display name, consulted before plain pass-through
KIND_DISPLAY_NAMES: Dict[str, str] = {
    DATE_KIND: DATE_TYPE_NAME,
}

# JSON Schema "type" -> kind
JSON_SCHEMA_KINDS: Dict[str, str] = {
    "object": OBJECT_KIND,
    "array": ARRAY_KIND,
    "string": STRING_KIND,
    "number": NUMBER_KIND,
    "integer": NUMBER_KIND,
    "boolean": BOOLEAN_KIND,
    "null": "null",
}
JSON_SCHEMA_DATE_FORMATS = {"date", "date-time"}


def normalize_kind(kind: Any) -> Optional[str]:
    if not isinstance(kind, str):
        return None
    return kind or None


def display_name_for_kind(kind: str) -> str:
    return KIND_DISPLAY_NAMES.get(kind, kind)


def has_display_name(kind: Optional[str]) -> bool:
    return bool(kind) and kind in KIND_DISPLAY_NAMES


def literal_text(value: Any) -> str:
    """Render an allowed value as a single-quoted literal."""
    if value is None:
        return "'null'"
    if isinstance(value, bool):
        return f"'{str(value).lower()}'"
    return f"'{value}'"
