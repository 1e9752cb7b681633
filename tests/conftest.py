"""Shared fixtures for schema_typegen tests."""

import logging
from pathlib import Path

import pytest

from schema_typegen.models import SchemaFlags, SimpleSchemaNode

DATA_DIR = Path(__file__).parent / "data"


def node(kind=None, presence=None, label=None, description=None, keys=(), item=None, values=()):
    """Build a SimpleSchemaNode with flags in one call."""
    return SimpleSchemaNode(
        node_kind=kind,
        node_flags=SchemaFlags(presence=presence, label=label, description=description),
        keys=tuple(keys),
        item=item,
        values=tuple(values),
    )


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def order_schema():
    return node(
        "object",
        label="Order",
        keys=[
            ("id", node("number", presence="required")),
            ("status", node("string", presence="optional", values=["open", "closed"])),
            ("note", node("string")),
            ("created", node("date", presence="required")),
            ("items", node("array", item=node("object", label="LineItem"))),
        ],
    )


@pytest.fixture
def restore_root_logging():
    """Undo handler changes made by TypegenConfig.set_logging()."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
