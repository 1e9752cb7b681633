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

"""Value types produced by the mapping functions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Requiredness(Enum):
    """Presence of a property as declared on its schema node."""

    REQUIRED = "required"
    OPTIONAL = "optional"
    # No presence flag was set; callers apply their own default policy
    UNSPECIFIED = "unspecified"

    def as_bool(self) -> Optional[bool]:
        if self is Requiredness.REQUIRED:
            return True
        if self is Requiredness.OPTIONAL:
            return False
        return None


@dataclass(frozen=True)
class PropertyDescriptor:
    name: str
    required: Requiredness


@dataclass(frozen=True)
class TypeDescriptor:
    """Type of a property.

    Attributes:
        type_name: Full display expression, e.g. ``Widget[]`` or ``'a' | 'b'``
        base_type_name: Underlying scalar kind without array or union decoration
    """

    type_name: str
    base_type_name: str
