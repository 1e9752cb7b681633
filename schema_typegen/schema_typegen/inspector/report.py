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

"""Result containers for schema inspection."""

from pathlib import Path
from typing import Any, Dict, List, Optional

from ..models import Requiredness, TypeDescriptor


class PropertyReport:
    """Descriptors computed for one declared property."""

    def __init__(
        self,
        name: str,
        required: Requiredness,
        type_descriptor: Optional[TypeDescriptor],
        description: Optional[str] = None,
    ):
        self.name = name
        self.required = required
        self.type_descriptor = type_descriptor
        self.description = description

    @property
    def resolved(self) -> bool:
        return self.type_descriptor is not None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            'name': self.name,
            'required': self.required.as_bool(),
            'type_name': self.type_descriptor.type_name if self.type_descriptor else None,
            'base_type_name': self.type_descriptor.base_type_name if self.type_descriptor else None,
        }
        if self.description is not None:
            data['description'] = self.description
        return data


class InterfaceReport:
    """Properties of one object schema, in declaration order."""

    def __init__(self, name: str):
        self.name = name
        self.properties: List[PropertyReport] = []

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'properties': [p.to_dict() for p in self.properties],
        }


class InspectionResult:
    """Container for inspection results for a single file."""

    def __init__(self, file_path: Path):
        """Initialize inspection result.

        Args:
            file_path: Path to the inspected file
        """
        self.file_path = file_path
        self.interfaces: List[InterfaceReport] = []
        self.errors: List[Dict[str, Any]] = []
        self.warnings: List[Dict[str, Any]] = []

    def add_error(self, message: str, schema_path: Optional[str] = None):
        error = {'message': message}
        if schema_path is not None:
            error['schema_path'] = schema_path
        self.errors.append(error)

    def add_warning(self, message: str, schema_path: Optional[str] = None):
        warning = {'message': message}
        if schema_path is not None:
            warning['schema_path'] = schema_path
        self.warnings.append(warning)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'file': str(self.file_path),
            'interfaces': [i.to_dict() for i in self.interfaces],
            'errors': self.errors,
            'warnings': self.warnings,
        }
