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

"""Per-property flag lookups."""

from typing import Optional

from ..models import Requiredness, SchemaProperty

_PRESENCE_TO_REQUIREDNESS = {
    "required": Requiredness.REQUIRED,
    "optional": Requiredness.OPTIONAL,
}


def get_required(prop: SchemaProperty) -> Requiredness:
    """Map the ``presence`` flag (``.required()`` / ``.optional()``) of a property.

    Anything other than ``required`` or ``optional``, including no flag at
    all, yields :attr:`Requiredness.UNSPECIFIED`.
    """
    _, node = prop
    presence = node.flags.presence if node is not None else None
    if not isinstance(presence, str):
        return Requiredness.UNSPECIFIED
    return _PRESENCE_TO_REQUIREDNESS.get(presence, Requiredness.UNSPECIFIED)


def get_property_name(prop: SchemaProperty) -> str:
    return prop[0]


def get_property_description(prop: SchemaProperty) -> Optional[str]:
    _, node = prop
    if node is None:
        return None
    return node.flags.description
