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

"""Element naming for array schema nodes."""

from typing import Optional

from ..models import SchemaNode
from ..utils.kind_names import normalize_kind


def get_array_item_kind(node: Optional[SchemaNode]) -> Optional[str]:
    """Raw kind of the array's element node, ignoring any label."""
    item = node.array_item() if node is not None else None
    if item is None:
        return None
    return normalize_kind(item.kind)


def get_array_type_name(node: Optional[SchemaNode]) -> Optional[str]:
    """Name of the array's element type.

    A ``label`` on the element wins over its raw kind, so a nested object
    element can carry a meaningful type name.

    Returns:
        The element label, else the element kind, else None
    """
    item = node.array_item() if node is not None else None
    if item is None:
        return None
    label = item.flags.label
    if isinstance(label, str) and label:
        return label
    return normalize_kind(item.kind)
