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

"""Maps a property's schema node to a TypeDescriptor.

Branch order: array, enumerated string, kinds with a display name (``date``),
then plain pass-through of the kind. Unmappable nodes yield None.
"""

from typing import Optional

from ..models import SchemaNode, TypeDescriptor
from ..utils.kind_names import (
    ARRAY_KIND,
    STRING_KIND,
    display_name_for_kind,
    has_display_name,
    literal_text,
    normalize_kind,
)
from .array_item_resolver import get_array_item_kind, get_array_type_name


def get_property_type(node: Optional[SchemaNode]) -> Optional[TypeDescriptor]:
    kind = normalize_kind(node.kind) if node is not None else None
    if kind is None:
        return None

    if kind == ARRAY_KIND:
        return _get_array_type(node)

    if kind == STRING_KIND:
        values = list(node.allowed_values() or ())
        if values:
            enumerations = " | ".join(literal_text(value) for value in values)
            return TypeDescriptor(type_name=enumerations, base_type_name=STRING_KIND)

    if has_display_name(kind):
        name = display_name_for_kind(kind)
        return TypeDescriptor(type_name=name, base_type_name=name)

    return TypeDescriptor(type_name=kind, base_type_name=kind)


def _get_array_type(node: SchemaNode) -> Optional[TypeDescriptor]:
    item_name = get_array_type_name(node)
    if not item_name:
        return None

    # Normalized element kinds (e.g. date -> Date) take precedence over labels
    item_kind = get_array_item_kind(node)
    if has_display_name(item_kind):
        item_name = display_name_for_kind(item_kind)

    return TypeDescriptor(type_name=f"{item_name}[]", base_type_name=item_name)
