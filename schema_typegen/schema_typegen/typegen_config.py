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

"""Configuration management for schema_typegen."""

import os
import logging
from dataclasses import dataclass

from .utils.logging_utils import configure_logging, parse_log_level


@dataclass
class TypegenConfig:
    """Runtime settings, read from SCHEMA_TYPEGEN_* environment variables."""
    log_level: str = "INFO"
    print_level: str = "ERROR"
    cache_enabled: bool = True
    dialect: str = "auto"

    @classmethod
    def from_env(cls) -> 'TypegenConfig':
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv('SCHEMA_TYPEGEN_LOG_LEVEL', 'INFO'),
            print_level=os.getenv('SCHEMA_TYPEGEN_PRINT_LEVEL', 'ERROR'),
            cache_enabled=os.getenv('SCHEMA_TYPEGEN_CACHE_ENABLED', 'true').lower() == 'true',
            dialect=os.getenv('SCHEMA_TYPEGEN_DIALECT', 'auto'),
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        configure_logging(
            level=parse_log_level(self.log_level, logging.INFO),
            print_level=parse_log_level(self.print_level, logging.ERROR),
        )
        return logging.getLogger('schema_typegen')


# Global configuration instance
typegen_config = TypegenConfig.from_env()
