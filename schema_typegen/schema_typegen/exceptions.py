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

"""Custom exceptions for schema_typegen.

The mapping core never raises; these cover loading files and selecting
bindings.
"""


class SchemaTypegenError(Exception):
    """Base exception for schema_typegen related errors."""
    pass


class SchemaLoadError(SchemaTypegenError):
    """Exception raised when a schema file cannot be read or parsed."""
    pass


class SchemaDialectError(SchemaTypegenError):
    """Exception raised for an unknown schema dialect."""
    pass
