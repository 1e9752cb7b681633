"""Reading schema dumps from files."""

from .schema_file_loader import SCHEMA_FILE_SUFFIXES, SchemaFileLoader, find_schema_files

__all__ = ["SCHEMA_FILE_SUFFIXES", "SchemaFileLoader", "find_schema_files"]
