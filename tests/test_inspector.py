"""Tests for schema file inspection and its CLI."""

import json

import pytest

from schema_typegen.inspector import collect_object_schemas, inspect_files
from schema_typegen.inspector.run_inspect import main
from schema_typegen.models import Requiredness


def test_inspect_json_schema(data_dir):
    [result] = inspect_files([data_dir / "order.schema.json"])

    assert result.errors == []
    assert [i.name for i in result.interfaces] == ["Order", "LineItem"]
    line_item = result.interfaces[1]
    assert [(p.name, p.required) for p in line_item.properties] == [
        ("sku", Requiredness.REQUIRED),
        ("quantity", Requiredness.OPTIONAL),
    ]
    assert result.warnings == [
        {"message": "Cannot resolve type of property 'owner'", "schema_path": "Order.owner"}
    ]


def test_inspect_joi_catalog(data_dir):
    [result] = inspect_files([data_dir / "catalog.yaml"], dialect="joi")

    assert [i.name for i in result.interfaces] == ["Widget", "Gadget"]
    gadget = result.interfaces[1].to_dict()
    assert gadget["properties"] == [
        {"name": "parts", "required": None, "type_name": "Widget[]", "base_type_name": "Widget"}
    ]
    assert result.warnings == []


def test_inspect_missing_file_records_error(tmp_path):
    [result] = inspect_files([tmp_path / "missing.json"])

    assert result.interfaces == []
    assert "not found" in result.errors[0]["message"]


def test_inspect_file_without_objects(tmp_path):
    path = tmp_path / "color.json"
    path.write_text('{"type": "string"}', encoding="utf-8")

    [result] = inspect_files([path])

    assert result.warnings == [{"message": "No object schema found"}]


def test_collect_uses_default_name():
    schemas = list(collect_object_schemas({"type": "object"}, default_name="Thing"))

    assert [name for name, _ in schemas] == ["Thing"]


def test_cli_json_output(data_dir, capsys, restore_root_logging):
    with pytest.raises(SystemExit) as exc:
        main([str(data_dir / "order.joi.json"), "--format", "json"])

    assert exc.value.code == 0
    output = json.loads(capsys.readouterr().out)
    assert output["files"] == 1
    assert output["warnings"] == 1
    properties = output["results"][0]["interfaces"][0]["properties"]
    assert properties[1] == {
        "name": "status",
        "required": False,
        "type_name": "'open' | 'closed'",
        "base_type_name": "string",
        "description": "Lifecycle state",
    }


def test_cli_strict_fails_on_unresolved(data_dir, capsys, restore_root_logging):
    with pytest.raises(SystemExit) as exc:
        main([str(data_dir / "order.joi.json"), "--strict"])

    assert exc.value.code == 1
    assert "extra: <unresolved> (unspecified)" in capsys.readouterr().out


def test_cli_human_output(data_dir, capsys, restore_root_logging):
    with pytest.raises(SystemExit) as exc:
        main([str(data_dir / "catalog.yaml"), "--dialect", "joi"])

    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert "  Widget" in out
    assert "    name: string (required)" in out
    assert "    size: 'small' | 'large' (unspecified)" in out


def test_cli_no_files(tmp_path, capsys, restore_root_logging):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path)])

    assert exc.value.code == 1
    assert "No schema files found." in capsys.readouterr().err
