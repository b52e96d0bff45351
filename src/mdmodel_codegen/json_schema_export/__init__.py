"""JSON Schema export exports."""

from .json_schema_exporter import JSON_SCHEMA_DIALECT, export_json_schema, render_json_schema

__all__ = ["JSON_SCHEMA_DIALECT", "export_json_schema", "render_json_schema"]
