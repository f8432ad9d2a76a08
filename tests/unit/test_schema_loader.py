"""Tests for schema document loading."""

import json

import pytest

from dsforge.core.errors import SchemaValidationError
from dsforge.core.schema_loader import dump_schema, load_schema, parse_schema


class TestLoadSchema:
    def test_yaml(self, schema_file):
        schema = load_schema(schema_file)
        assert schema.id == "acme-ds"
        assert schema.component_names() == ["Button", "Stack"]
        assert schema.tokens.semantic["spacing"]["section"] == {"ref": "md"}

    def test_json(self, tmp_path, schema_data):
        path = tmp_path / "acme.json"
        path.write_text(json.dumps(schema_data), encoding="utf-8")
        assert load_schema(path).name == "Acme Design System"

    def test_missing_file(self, tmp_path):
        with pytest.raises(SchemaValidationError) as exc_info:
            load_schema(tmp_path / "missing.yaml")
        assert "Cannot read schema file" in str(exc_info.value)

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("id: [unclosed\n", encoding="utf-8")
        with pytest.raises(SchemaValidationError) as exc_info:
            load_schema(path)
        assert "Cannot parse schema file" in str(exc_info.value)
        assert "broken.yaml" in str(exc_info.value)

    def test_round_trip(self, tmp_path, schema):
        path = tmp_path / "out" / "schema.yaml"
        dump_schema(schema, path)
        assert load_schema(path) == schema


class TestParseSchema:
    def test_structure_errors_become_issues(self, schema_data):
        schema_data["components"]["Button"]["category"] = "widget"
        del schema_data["components"]["Stack"]["accessibility"]
        with pytest.raises(SchemaValidationError) as exc_info:
            parse_schema(schema_data)
        issues = exc_info.value.issues
        assert any(issue.startswith("components.Button.category") for issue in issues)
        assert any(issue.startswith("components.Stack.accessibility") for issue in issues)

    def test_non_mapping_document(self):
        with pytest.raises(SchemaValidationError):
            parse_schema(["not", "a", "schema"])  # type: ignore[arg-type]

    def test_model_passes_through(self, schema):
        assert parse_schema(schema) is schema
