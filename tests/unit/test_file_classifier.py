"""Tests for matching files to schemas."""

from config_schema_validator.models.file_classifier import ConfigFormat, classify


def test_classify_json(schema_registry, temp_dir):
    config_file = classify(temp_dir / "app.json", schema_registry)

    assert config_file is not None
    assert config_file.schema_name == "app"
    assert config_file.extension == ConfigFormat.JSON
    assert config_file.schema is schema_registry.lookup("app")


def test_classify_yaml_with_environment_suffix(schema_registry, temp_dir):
    """Test the schema name stops at the first dot."""
    config_file = classify(temp_dir / "routes.dev.yaml", schema_registry)

    assert config_file is not None
    assert config_file.schema_name == "routes"
    assert config_file.extension == ConfigFormat.YAML


def test_classify_skips_unknown_extension(schema_registry, temp_dir):
    assert classify(temp_dir / "app.yml", schema_registry) is None
    assert classify(temp_dir / "app.js", schema_registry) is None
    assert classify(temp_dir / "app.JSON", schema_registry) is None


def test_classify_skips_unregistered_name(schema_registry, temp_dir):
    assert classify(temp_dir / "package.json", schema_registry) is None
    assert classify(temp_dir / "App.json", schema_registry) is None


def test_classify_does_not_touch_the_file(schema_registry, temp_dir):
    """Test classification is based on the path only."""
    assert not (temp_dir / "nested" / "app.json").exists()
    assert classify(temp_dir / "nested" / "app.json", schema_registry) is not None
