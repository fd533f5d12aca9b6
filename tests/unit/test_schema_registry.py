"""Tests for the schema registry."""

import logging

import pytest

from config_schema_validator.exceptions import FileReadError, SchemaParseError
from config_schema_validator.models.schema_registry import (
    SchemaRegistry,
    SchemaSource,
    discover_schemas,
    schema_name_for,
)


def test_register_and_lookup(temp_dir, write_file):
    """Test a registered schema is returned by name."""
    path = write_file(temp_dir / "app.json", {"type": "object"})
    registry = SchemaRegistry()
    registry.register("app", path)

    assert registry.lookup("app") == {"type": "object"}
    assert "app" in registry
    assert len(registry) == 1


def test_lookup_missing_returns_none():
    """Test lookup of an unknown name never fails."""
    assert SchemaRegistry().lookup("missing") is None


def test_lookup_is_case_sensitive(temp_dir, write_file):
    registry = SchemaRegistry()
    registry.register("app", write_file(temp_dir / "app.json", {}))

    assert registry.lookup("App") is None


def test_register_overwrites_existing_name(temp_dir, write_file):
    """Test last registration wins."""
    registry = SchemaRegistry()
    registry.register("app", write_file(temp_dir / "a.json", {"type": "object"}))
    registry.register("app", write_file(temp_dir / "b.json", {"type": "array"}))

    assert registry.lookup("app") == {"type": "array"}
    assert registry.names() == ["app"]


def test_register_missing_file(temp_dir):
    with pytest.raises(FileReadError):
        SchemaRegistry().register("app", temp_dir / "missing.json")


def test_register_invalid_json(temp_dir, write_file):
    path = write_file(temp_dir / "app.json", '{"type": "object",}')

    with pytest.raises(SchemaParseError) as exc_info:
        SchemaRegistry().register("app", path)
    assert str(path) in str(exc_info.value)


def test_registries_do_not_share_state(temp_dir, write_file):
    """Test each registry owns its own mapping."""
    first = SchemaRegistry()
    first.register("app", write_file(temp_dir / "app.json", {}))

    assert SchemaRegistry().lookup("app") is None


@pytest.mark.parametrize(
    "file_name,expected",
    [
        ("application.json", "application"),
        ("application.dev.yaml", "application"),
        ("routes", "routes"),
        (".hidden.json", ""),
    ],
)
def test_schema_name_for(temp_dir, file_name, expected):
    assert schema_name_for(temp_dir / "app" / file_name) == expected


def test_discover_schemas(temp_dir, write_file):
    """Test schema files are discovered in name order."""
    framework = temp_dir / "mojito"
    write_file(framework / "schemas" / "routes.json", {})
    write_file(framework / "schemas" / "application.json", {})
    (framework / "schemas" / "nested").mkdir()

    sources = discover_schemas(framework)

    assert [s.name for s in sources] == ["application", "routes"]
    assert all(isinstance(s, SchemaSource) for s in sources)
    assert sources[0].path.name == "application.json"


def test_discover_schemas_custom_directory(temp_dir, write_file):
    write_file(temp_dir / "mojito" / "conf-schemas" / "app.json", {})

    assert [s.name for s in discover_schemas(temp_dir / "mojito", "conf-schemas")] == ["app"]


def test_discover_schemas_missing_directory(temp_dir, caplog):
    """Test a framework without a schemas directory yields no sources."""
    caplog.set_level(logging.DEBUG)

    assert discover_schemas(temp_dir / "mojito") == []
    assert any(
        r.levelno == logging.DEBUG and "no schemas found at" in r.getMessage()
        for r in caplog.records
    )


def test_from_sources(temp_dir, write_file):
    sources = [
        SchemaSource("app", write_file(temp_dir / "app.json", {"type": "object"})),
        SchemaSource("routes", write_file(temp_dir / "routes.json", {"type": "array"})),
    ]

    registry = SchemaRegistry.from_sources(sources)

    assert registry.names() == ["app", "routes"]
    assert registry.lookup("routes") == {"type": "array"}
