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

"""Reads the declared properties of an object schema node."""

from typing import List, Optional

from ..models import PropertyDescriptor, SchemaNode, SchemaProperty
from .property_analyzer import get_property_name, get_required


def get_properties(node: Optional[SchemaNode]) -> List[SchemaProperty]:
    """Get the declared properties of an object schema.

    Args:
        node: Object-kind schema node

    Returns:
        ``(key, node)`` pairs in declaration order; empty when the node has
        no declared properties
    """
    properties: List[SchemaProperty] = []

    if node is None:
        return properties

    declared = node.properties()
    if declared:
        properties.extend(declared)

    return properties


def describe_properties(node: Optional[SchemaNode]) -> List[PropertyDescriptor]:
    """Build one PropertyDescriptor per declared property, in declaration order."""
    return [
        PropertyDescriptor(name=get_property_name(prop), required=get_required(prop))
        for prop in get_properties(node)
    ]
