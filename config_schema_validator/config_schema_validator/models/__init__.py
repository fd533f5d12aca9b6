"""Schema registry, file classification, parsing and schema validation."""
