"""Pytest fixtures for config schema validator tests."""

import json
import logging
from pathlib import Path

import pytest

from config_schema_validator.config import ValidatorConfig
from config_schema_validator.models.schema_registry import SchemaRegistry


APP_SCHEMA = {
    "type": "object",
    "required": ["name"],
    "properties": {
        "name": {"type": "string"},
    },
}

ROUTES_SCHEMA = {
    "type": "array",
    "items": {
        "type": "object",
        "properties": {
            "path": {"type": "string", "required": True},
            "verbs": {
                "type": "array",
                "items": {"enum": ["get", "post", "put", "delete"]},
            },
            "port": {"type": "integer", "minimum": 1, "maximum": 65535},
        },
    },
}


def write_file(path: Path, content) -> Path:
    """Write text (or JSON for non-string content) creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    if not isinstance(content, str):
        content = json.dumps(content, indent=2)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def temp_dir(tmp_path):
    """Create a temporary directory for tests."""
    return tmp_path


@pytest.fixture
def project_root(temp_dir):
    """Project with the framework installed under node_modules."""
    root = temp_dir / "project"
    root.mkdir()
    return root


@pytest.fixture
def framework_dir(project_root):
    """Installed framework shipping the app and routes schemas."""
    framework = project_root / "node_modules" / "mojito"
    write_file(framework / "schemas" / "app.json", APP_SCHEMA)
    write_file(framework / "schemas" / "routes.json", ROUTES_SCHEMA)
    return framework


@pytest.fixture
def schema_registry(temp_dir):
    """Registry with the app and routes schemas registered from disk."""
    schema_dir = temp_dir / "schemas"
    registry = SchemaRegistry()
    registry.register("app", write_file(schema_dir / "app.json", APP_SCHEMA))
    registry.register("routes", write_file(schema_dir / "routes.json", ROUTES_SCHEMA))
    return registry


@pytest.fixture
def validator_config():
    """Default configuration, independent of the environment."""
    return ValidatorConfig()


@pytest.fixture
def restore_logging():
    """Restore root logger handlers replaced by the CLI logging setup."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture(name="write_file")
def write_file_fixture():
    """Expose write_file to tests."""
    return write_file
