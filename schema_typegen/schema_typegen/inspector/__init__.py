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

"""Inspection of schema dump files: property and type descriptors per object schema."""

import logging
from pathlib import Path
from typing import Any, Iterator, List, Optional, Tuple

from ..bindings import JSON_SCHEMA_DIALECT, JoiDescriptionNode, JsonSchemaNode, resolve_dialect
from ..exceptions import SchemaTypegenError
from ..file_io import SchemaFileLoader
from ..mapping import get_properties, get_property_description, get_property_name, get_property_type, get_required
from ..models import SchemaNode
from ..typegen_config import typegen_config
from ..utils.kind_names import OBJECT_KIND
from .report import InspectionResult, InterfaceReport, PropertyReport

__all__ = [
    'InspectionResult',
    'InterfaceReport',
    'PropertyReport',
    'collect_object_schemas',
    'inspect_files',
    'inspect_schema',
]

logger = logging.getLogger(__name__)


def collect_object_schemas(
    data: Any, dialect: str = 'auto', default_name: str = 'Schema'
) -> Iterator[Tuple[str, SchemaNode]]:
    """Yield ``(name, node)`` for every object schema in a loaded dump.

    JSON Schema: the root document, then each ``$defs`` / ``definitions`` entry.
    Joi: a single description, or a mapping of name -> description.
    """
    if resolve_dialect(data, dialect) == JSON_SCHEMA_DIALECT:
        root = JsonSchemaNode.from_document(data)
        if root.kind == OBJECT_KIND:
            yield root.flags.label or default_name, root
        for name, node in root.definitions():
            if node.kind == OBJECT_KIND:
                yield node.flags.label or name, node
        return

    if not isinstance(data, dict):
        return

    if 'type' in data:
        node = JoiDescriptionNode(data)
        if node.kind == OBJECT_KIND:
            yield node.flags.label or default_name, node
        return

    for name, description in data.items():
        node = JoiDescriptionNode(description)
        if node.kind == OBJECT_KIND:
            yield str(name), node


def inspect_schema(name: str, node: SchemaNode) -> InterfaceReport:
    report = InterfaceReport(name)
    for prop in get_properties(node):
        _, prop_node = prop
        report.properties.append(
            PropertyReport(
                name=get_property_name(prop),
                required=get_required(prop),
                type_descriptor=get_property_type(prop_node),
                description=get_property_description(prop),
            )
        )
    return report


def inspect_files(
    file_paths: List[Path],
    dialect: Optional[str] = None,
    loader: Optional[SchemaFileLoader] = None,
) -> List[InspectionResult]:
    """Inspect a list of schema dump files.

    Args:
        file_paths: Files to inspect
        dialect: Binding dialect; None uses the configured default
        loader: Loader to read files with; a fresh one is created if omitted

    Returns:
        List of InspectionResult objects, one per file
    """
    dialect = dialect or typegen_config.dialect
    loader = loader or SchemaFileLoader()
    results = []

    for file_path in file_paths:
        result = InspectionResult(file_path)
        results.append(result)

        try:
            data = loader.load_file(file_path)
            schemas = list(collect_object_schemas(data, dialect, default_name=_default_name(file_path)))
        except SchemaTypegenError as e:
            logger.error(str(e))
            result.add_error(str(e))
            continue

        if not schemas:
            result.add_warning("No object schema found")

        for name, node in schemas:
            interface = inspect_schema(name, node)
            result.interfaces.append(interface)
            for prop in interface.properties:
                if not prop.resolved:
                    schema_path = f"{name}.{prop.name}"
                    logger.debug(f"{file_path}: cannot resolve type of '{schema_path}'")
                    result.add_warning(f"Cannot resolve type of property '{prop.name}'", schema_path)

    return results


def _default_name(file_path: Path) -> str:
    # "order.schema.json" -> "order"
    return Path(file_path).name.split('.', 1)[0] or 'Schema'
