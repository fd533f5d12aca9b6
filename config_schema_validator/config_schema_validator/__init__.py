"""Validate framework configuration files against the framework's JSON Schemas."""

__version__ = "0.1.0"
