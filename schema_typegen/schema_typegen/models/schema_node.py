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

"""Narrow read-only interface over a compiled validation-schema tree.

Mapping code reads schema nodes only through :class:`SchemaNode`. Each
validation library gets a binding (see :mod:`schema_typegen.bindings`) that
implements this interface over the library's public dump format, so the
mapping never depends on a library's private layout.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence, Tuple


@dataclass(frozen=True)
class SchemaFlags:
    """Flags attached to a schema node."""

    presence: Optional[str] = None
    label: Optional[str] = None
    description: Optional[str] = None


class SchemaNode(ABC):
    """One node of an immutable compiled schema tree.

    Implementations must never raise from these accessors: missing or
    malformed fields are reported as ``None`` or an empty sequence.
    """

    @property
    @abstractmethod
    def kind(self) -> Optional[str]:
        """Rule category tag (``object``, ``array``, ``string``, ...)."""

    @property
    @abstractmethod
    def flags(self) -> SchemaFlags:
        """Presence, label and description flags."""

    @abstractmethod
    def properties(self) -> Sequence[Tuple[str, "SchemaNode"]]:
        """Declared ``(key, node)`` pairs of an object node, in declaration order."""

    @abstractmethod
    def array_item(self) -> Optional["SchemaNode"]:
        """Element node of an array node."""

    @abstractmethod
    def allowed_values(self) -> Sequence[Any]:
        """Allowed literal values, in declaration order."""


# A declared property: key and its schema node
SchemaProperty = Tuple[str, SchemaNode]


@dataclass(frozen=True)
class SimpleSchemaNode(SchemaNode):
    """Plain in-memory schema node.

    Useful for building trees by hand, e.g. in tests or when another tool
    already produced the shape.
    """

    node_kind: Optional[str] = None
    node_flags: SchemaFlags = field(default_factory=SchemaFlags)
    keys: Tuple[SchemaProperty, ...] = ()
    item: Optional[SchemaNode] = None
    values: Tuple[Any, ...] = ()

    @property
    def kind(self) -> Optional[str]:
        return self.node_kind

    @property
    def flags(self) -> SchemaFlags:
        return self.node_flags

    def properties(self) -> Sequence[SchemaProperty]:
        return self.keys

    def array_item(self) -> Optional[SchemaNode]:
        return self.item

    def allowed_values(self) -> Sequence[Any]:
        return self.values
