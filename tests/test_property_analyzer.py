"""Tests for per-property flag lookups."""

import pytest
from conftest import node

from schema_typegen.mapping import get_property_description, get_property_name, get_required
from schema_typegen.models import Requiredness


@pytest.mark.parametrize(
    "presence, expected",
    [
        ("required", Requiredness.REQUIRED),
        ("optional", Requiredness.OPTIONAL),
        (None, Requiredness.UNSPECIFIED),
        ("forbidden", Requiredness.UNSPECIFIED),
    ],
)
def test_presence_maps_to_requiredness(presence, expected):
    assert get_required(("field", node("string", presence=presence))) is expected


def test_unspecified_is_not_optional():
    required = get_required(("field", node("string")))

    assert required is not Requiredness.OPTIONAL
    assert required.as_bool() is None


def test_as_bool():
    assert Requiredness.REQUIRED.as_bool() is True
    assert Requiredness.OPTIONAL.as_bool() is False


def test_non_string_presence_is_unspecified():
    assert get_required(("field", node("string", presence=["required"]))) is Requiredness.UNSPECIFIED


def test_property_name_and_description():
    prop = ("email", node("string", description="Contact address"))

    assert get_property_name(prop) == "email"
    assert get_property_description(prop) == "Contact address"
    assert get_property_description(("email", node("string"))) is None
