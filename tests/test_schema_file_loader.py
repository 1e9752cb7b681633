"""Tests for reading schema dump files."""

import json

import pytest

from schema_typegen.exceptions import SchemaLoadError
from schema_typegen.file_io import SchemaFileLoader, find_schema_files
from schema_typegen.inspector import inspect_files


def test_load_json_file(data_dir):
    data = SchemaFileLoader(cache_enabled=False).load_file(data_dir / "order.joi.json")

    assert data["type"] == "object"
    assert list(data["keys"])[:2] == ["id", "status"]


def test_load_yaml_file(data_dir):
    data = SchemaFileLoader(cache_enabled=False).load_file(data_dir / "catalog.yaml")

    assert list(data) == ["Widget", "Gadget", "Color"]


def test_cache_returns_same_object(data_dir):
    loader = SchemaFileLoader(cache_enabled=True)

    first = loader.load_file(data_dir / "catalog.yaml")
    assert loader.load_file(data_dir / "catalog.yaml") is first

    loader.clear_cache()
    assert loader.load_file(data_dir / "catalog.yaml") is not first


def test_empty_file_loads_as_empty_mapping(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert SchemaFileLoader().load_file(path) == {}


def test_missing_file(tmp_path):
    with pytest.raises(SchemaLoadError, match="not found"):
        SchemaFileLoader().load_file(tmp_path / "missing.json")


def test_directory_is_not_a_file(tmp_path):
    with pytest.raises(SchemaLoadError, match="not a file"):
        SchemaFileLoader().load_file(tmp_path)


def test_invalid_content(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text('{"type": "object", "keys": [', encoding="utf-8")

    with pytest.raises(SchemaLoadError, match="Failed to parse"):
        SchemaFileLoader().load_file(path)


def test_load_string():
    loader = SchemaFileLoader()

    assert loader.load_string("type: string") == {"type": "string"}
    assert loader.load_string("") == {}
    with pytest.raises(SchemaLoadError):
        loader.load_string("type: [unclosed")


def test_find_schema_files(tmp_path):
    (tmp_path / "nested").mkdir()
    (tmp_path / "b.yaml").write_text("{}", encoding="utf-8")
    (tmp_path / "nested" / "a.json").write_text("{}", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("", encoding="utf-8")

    found = list(find_schema_files(tmp_path))

    assert found == sorted([tmp_path / "b.yaml", tmp_path / "nested" / "a.json"])
    assert list(find_schema_files(tmp_path / "notes.txt")) == [tmp_path / "notes.txt"]


def test_load_tab_indented_json(tmp_path):
    path = tmp_path / "tabbed.schema.json"
    document = {"type": "object", "properties": {"id": {"type": "integer"}}}
    path.write_text(json.dumps(document, indent="\t"), encoding="utf-8")

    assert SchemaFileLoader(cache_enabled=False).load_file(path) == document


def test_inspect_tab_indented_json(tmp_path):
    path = tmp_path / "tabbed.schema.json"
    document = {"title": "Tabbed", "type": "object", "properties": {"id": {"type": "integer"}}}
    path.write_text(json.dumps(document, indent="\t"), encoding="utf-8")

    [result] = inspect_files([path])

    assert result.errors == []
    assert [p.to_dict()["type_name"] for p in result.interfaces[0].properties] == ["number"]
