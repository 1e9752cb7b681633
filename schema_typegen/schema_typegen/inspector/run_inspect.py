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

"""CLI entry point for inspecting compiled schema dumps."""

import argparse
import json
import sys
from pathlib import Path
from typing import List

from ..bindings import DIALECTS
from ..file_io import find_schema_files
from ..typegen_config import typegen_config
from . import InspectionResult, inspect_files


def find_input_files(paths: List[str]) -> List[Path]:
    """Find all schema dump files in given paths."""
    files = []

    for path_str in paths:
        path = Path(path_str)

        if not path.exists():
            print(f"Warning: Path does not exist: {path}", file=sys.stderr)
            continue

        files.extend(find_schema_files(path))

    return sorted(set(files))


def print_human(results: List[InspectionResult]) -> None:
    for result in results:
        print(f"\n{result.file_path}:")
        for interface in result.interfaces:
            print(f"  {interface.name}")
            for prop in interface.properties:
                type_name = prop.type_descriptor.type_name if prop.type_descriptor else "<unresolved>"
                print(f"    {prop.name}: {type_name} ({prop.required.value})")
        for error in result.errors:
            print(f"  ERROR: {error['message']}")
        for warning in result.warnings:
            location = f" [{warning['schema_path']}]" if 'schema_path' in warning else ""
            print(f"  WARNING{location}: {warning['message']}")


def print_json(results: List[InspectionResult]) -> None:
    output = {
        'files': len(results),
        'errors': sum(len(r.errors) for r in results),
        'warnings': sum(len(r.warnings) for r in results),
        'results': [r.to_dict() for r in results],
    }
    print(json.dumps(output, indent=2))


def main(argv: List[str] | None = None) -> None:
    """Main entry point for the inspector CLI."""
    parser = argparse.ArgumentParser(
        description='Print property and type descriptors of compiled schema dumps',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        'paths',
        nargs='*',
        default=None,
        help='Schema files or directories (default: current directory)',
    )
    parser.add_argument(
        '--dialect',
        choices=DIALECTS,
        default=typegen_config.dialect if typegen_config.dialect in DIALECTS else 'auto',
        help='Schema dump dialect (default: auto-detect)',
    )
    parser.add_argument(
        '--format',
        choices=['human', 'json'],
        default='human',
        help='Output format (default: human)',
    )
    parser.add_argument(
        '--strict',
        action='store_true',
        help='Treat unresolved property types as errors',
    )
    parser.add_argument(
        '--log-level',
        default=None,
        help='Logging level (default: SCHEMA_TYPEGEN_LOG_LEVEL or INFO)',
    )

    args = parser.parse_args(argv)

    if args.log_level:
        typegen_config.log_level = args.log_level
    typegen_config.set_logging()

    if not args.paths:
        args.paths = ['.']

    files = find_input_files(args.paths)

    if not files:
        print("No schema files found.", file=sys.stderr)
        sys.exit(1)

    results = inspect_files(files, dialect=args.dialect)

    if args.format == 'json':
        print_json(results)
    else:
        print_human(results)

    total_errors = sum(len(r.errors) for r in results)
    if args.strict:
        total_errors += sum(
            1 for r in results for i in r.interfaces for p in i.properties if not p.resolved
        )
    sys.exit(1 if total_errors > 0 else 0)


if __name__ == '__main__':
    main()
