"""Tests for array element naming."""

from conftest import node

from schema_typegen.mapping import get_array_item_kind, get_array_type_name


def test_label_wins_over_kind():
    schema = node("array", item=node("object", label="Widget"))

    assert get_array_type_name(schema) == "Widget"
    assert get_array_item_kind(schema) == "object"


def test_kind_used_without_label():
    assert get_array_type_name(node("array", item=node("number"))) == "number"


def test_element_without_label_or_kind():
    assert get_array_type_name(node("array", item=node())) is None


def test_array_without_element():
    assert get_array_type_name(node("array")) is None
    assert get_array_item_kind(node("array")) is None


def test_empty_label_falls_back_to_kind():
    assert get_array_type_name(node("array", item=node("string", label=""))) == "string"
