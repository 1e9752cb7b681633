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

"""Loader for compiled schema dumps stored as YAML or JSON files."""

import json
import yaml
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..exceptions import SchemaLoadError
from ..typegen_config import typegen_config

logger = logging.getLogger(__name__)

SCHEMA_FILE_SUFFIXES = ('.json', '.yaml', '.yml')


class SchemaFileLoader:
    """Reads schema dumps with optional caching.

    ``.json`` files are read with ``json.load``; everything else with
    ``yaml.safe_load``.
    """

    def __init__(self, cache_enabled: Optional[bool] = None):
        """Initialize the loader.

        Args:
            cache_enabled: Whether to cache loaded files. If None, uses global config.
        """
        self.cache_enabled = cache_enabled if cache_enabled is not None else typegen_config.cache_enabled
        self._cache: Dict[Path, Any] = {}

    def load_file(self, file_path: Union[str, Path]) -> Any:
        """Load a schema dump file.

        Args:
            file_path: Path to a YAML or JSON file

        Returns:
            Parsed content; an empty document loads as ``{}``

        Raises:
            SchemaLoadError: If the file is missing or cannot be parsed
        """
        path = Path(file_path)

        if not path.exists():
            raise SchemaLoadError(f"Schema file not found: {path}")

        if not path.is_file():
            raise SchemaLoadError(f"Path is not a file: {path}")

        if self.cache_enabled and path in self._cache:
            logger.debug(f"Loading schema from cache: {path}")
            return self._cache[path]

        try:
            logger.debug(f"Loading schema file: {path}")
            with open(path, 'r', encoding='utf-8') as stream:
                if path.suffix.lower() == '.json':
                    data = json.load(stream)
                else:
                    data = yaml.safe_load(stream)
        except json.JSONDecodeError as exc:
            raise SchemaLoadError(f"Failed to parse schema file {path}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise SchemaLoadError(f"Failed to parse schema file {path}: {exc}") from exc
        except OSError as exc:
            raise SchemaLoadError(f"Failed to read schema file {path}: {exc}") from exc

        if data is None:
            data = {}

        if self.cache_enabled:
            self._cache[path] = data

        return data

    def load_string(self, content: str) -> Any:
        """Load a schema dump from string content.

        Raises:
            SchemaLoadError: If the content cannot be parsed
        """
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise SchemaLoadError(f"Failed to parse schema content: {exc}") from exc
        return {} if data is None else data

    def clear_cache(self) -> None:
        self._cache.clear()
        logger.debug("Schema cache cleared")


def find_schema_files(path: Union[str, Path]):
    """Yield schema dump files under *path* (a file or a directory), sorted."""
    path = Path(path)
    if path.is_file():
        yield path
        return
    if path.is_dir():
        yield from sorted(
            p for p in path.rglob('*') if p.is_file() and p.suffix.lower() in SCHEMA_FILE_SUFFIXES
        )
