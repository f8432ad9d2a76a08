"""Tests for schema and component validation."""

import pytest

from dsforge.core import ir
from dsforge.core.errors import InvalidSpecificationError, SchemaValidationError
from dsforge.core.schema_loader import parse_schema
from dsforge.core.validator import component_issues, validate_component, validate_schema


def make_spec(**overrides) -> ir.ComponentSpecification:
    data = {
        "name": "Badge",
        "category": "data-display",
        "accessibility": {"role": "status"},
    }
    data.update(overrides)
    return ir.ComponentSpecification.model_validate(data)


class TestValidateSchema:
    def test_sample_schema_is_valid(self, schema):
        validate_schema(schema)

    def test_key_name_mismatch(self, schema_data):
        schema_data["components"]["Button"]["name"] = "PrimaryButton"
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_schema(parse_schema(schema_data))
        assert exc_info.value.issues == [
            "component key 'Button' does not match its name 'PrimaryButton'"
        ]

    def test_names_differing_only_by_case(self, schema_data):
        schema_data["components"]["BUTTON"] = {
            "category": "interactive",
            "accessibility": {"role": "button"},
        }
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_schema(parse_schema(schema_data))
        assert "differ only by case" in exc_info.value.issues[0]

    def test_token_issues_fail_the_schema(self, schema_data):
        schema_data["tokens"]["semantic"]["gap"] = {"ref": "nowhere"}
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_schema(parse_schema(schema_data))
        assert "acme-ds" in str(exc_info.value)
        assert "unknown token 'nowhere'" in str(exc_info.value)


class TestValidateComponent:
    def test_valid_component(self, button):
        assert component_issues(button) == []
        validate_component(button, "react")

    def test_name_must_be_pascal_case(self):
        with pytest.raises(InvalidSpecificationError) as exc_info:
            validate_component(make_spec(name="badge"), "vue")
        assert "[vue] badge" in str(exc_info.value)
        assert "PascalCase" in str(exc_info.value)

    def test_variant_default_must_be_a_value(self):
        spec = make_spec(variants={"simple": {"tone": {"values": ["info", "warn"], "default": "error"}}})
        assert component_issues(spec) == [
            "variant 'tone' default 'error' is not one of ['info', 'warn']"
        ]

    def test_duplicate_variant_values(self):
        spec = make_spec(variants={"simple": {"tone": ["info", "info"]}})
        assert component_issues(spec) == ["variant 'tone' lists duplicate values"]

    def test_compound_variant_references_unknown_prop(self):
        spec = make_spec(
            props={"tone": "string"},
            variants={"compound": [{"conditions": {"size": "lg"}, "className": "badge-lg"}]},
        )
        assert component_issues(spec) == [
            "compound variant #0 (badge-lg) references unknown prop 'size'"
        ]

    def test_required_prop_with_default(self):
        spec = make_spec(props={"label": {"type": "string", "required": True, "default": "x"}})
        assert component_issues(spec) == ["prop 'label' is required but declares a default"]

    def test_issues_are_joined(self):
        spec = make_spec(
            name="badge",
            props={"label": {"type": "string", "required": True, "default": "x"}},
        )
        with pytest.raises(InvalidSpecificationError) as exc_info:
            validate_component(spec)
        assert "; " in exc_info.value.message
