"""Tests for the IR models and descriptor shorthand."""

import pytest
from pydantic import ValidationError

from dsforge.core import ir
from dsforge.core.schema_loader import parse_schema


def prop_type(raw):
    return ir.PropDefinition.model_validate({"type": raw} if not isinstance(raw, dict) else raw).type


class TestDescriptorShorthand:
    """Every accepted spelling normalizes to the canonical tagged union."""

    def test_bare_primitive_name(self):
        d = prop_type("string")
        assert isinstance(d, ir.PrimitiveType)
        assert d.primitive == ir.PrimitiveKind.STRING

    def test_bare_complex_name(self):
        d = prop_type("node")
        assert isinstance(d, ir.ComplexType)
        assert d.complex == ir.ComplexKind.NODE

    def test_unknown_name_is_custom(self):
        d = prop_type("color")
        assert isinstance(d, ir.CustomType)
        assert d.custom == "color"

    def test_prop_level_custom_fields_are_lifted(self):
        prop = ir.PropDefinition.model_validate({"type": "custom", "custom": "size", "default": "md"})
        assert isinstance(prop.type, ir.CustomType)
        assert prop.type.custom == "size"
        assert prop.default == "md"

    def test_prop_level_enum_is_lifted(self):
        prop = ir.PropDefinition.model_validate({"type": "string", "enum": ["a", "b"]})
        assert isinstance(prop.type, ir.PrimitiveType)
        assert prop.type.enum == ["a", "b"]

    def test_union_key_shorthand(self):
        d = prop_type({"type": {"union": ["string", "number"]}})
        assert isinstance(d, ir.UnionType)
        assert [m.primitive for m in d.members] == [ir.PrimitiveKind.STRING, ir.PrimitiveKind.NUMBER]

    def test_object_fields_accept_bare_descriptors(self):
        d = prop_type(
            {
                "type": "object",
                "fields": {"id": "string", "note": {"type": "string", "required": False}},
            }
        )
        assert isinstance(d, ir.ObjectType)
        assert d.fields["id"].required is True
        assert d.fields["note"].required is False
        assert isinstance(d.fields["note"].type, ir.PrimitiveType)

    def test_function_signature(self):
        d = prop_type(
            {
                "type": "function",
                "signature": {"parameters": [{"name": "value", "type": "string"}]},
            }
        )
        assert isinstance(d, ir.ComplexType)
        assert d.signature is not None
        assert d.signature.parameters[0].name == "value"

    def test_default_value_alias(self):
        prop = ir.PropDefinition.model_validate({"type": "boolean", "defaultValue": True})
        assert prop.default is True

    def test_descriptor_kind(self):
        assert ir.descriptor_kind(prop_type("string")) == ir.TypeKind.PRIMITIVE
        assert ir.descriptor_kind(prop_type({"type": "array", "items": "string"})) == ir.TypeKind.ARRAY

    def test_empty_union_rejected(self):
        with pytest.raises(ValidationError):
            prop_type({"type": {"type": "union", "members": []}})


class TestCustomValues:
    def test_default_enumeration(self):
        assert ir.CustomType(custom="size").resolved_values() == ["xs", "sm", "md", "lg", "xl"]

    def test_explicit_values_win(self):
        assert ir.CustomType(custom="size", values=["s", "l"]).resolved_values() == ["s", "l"]

    def test_scalar_custom_has_no_values(self):
        assert ir.CustomType(custom="color").resolved_values() is None


class TestComponentSpecification:
    def test_components_take_their_key_as_name(self, schema):
        assert schema.components["Button"].name == "Button"
        assert schema.component_names() == ["Button", "Stack"]

    def test_required_props(self, button):
        assert button.required_props() == ["label"]

    def test_platform_support(self):
        spec = ir.ComponentSpecification(
            name="Map",
            category="specialized",
            accessibility={"role": "img"},
            platforms=["react", "flutter"],
        )
        assert spec.supports("react")
        assert not spec.supports("ios-swift")

    def test_all_platforms_by_default(self, button):
        assert button.supports("android-kotlin")

    def test_models_are_frozen(self, button):
        with pytest.raises(ValidationError):
            button.name = "Other"

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            ir.ComponentSpecification(name="  ", category="layout", accessibility={"role": "group"})

    def test_compound_variant_class_name_alias(self):
        compound = ir.CompoundVariant.model_validate(
            {"conditions": {"size": "lg"}, "className": "big"}
        )
        assert compound.class_name == "big"


class TestSchemaIdentity:
    def test_fingerprint_is_stable(self, schema_data):
        assert parse_schema(schema_data).fingerprint() == parse_schema(schema_data).fingerprint()

    def test_fingerprint_tracks_token_edits(self, schema_data, schema):
        schema_data["tokens"]["primitive"]["spacing"]["md"] = "1.25rem"
        assert parse_schema(schema_data).fingerprint() != schema.fingerprint()


class TestTransformationOptions:
    def test_feature_order_does_not_change_cache_token(self):
        a = ir.TransformationOptions(features=["b", "a"])
        b = ir.TransformationOptions(features=["a", "b", "a"])
        assert a.cache_token() == b.cache_token()
        assert a.has_feature("a")

    def test_locales_change_cache_token(self):
        assert (
            ir.TransformationOptions(locales=["en"]).cache_token()
            != ir.TransformationOptions(locales=["fr"]).cache_token()
        )

    def test_component_filter(self):
        options = ir.TransformationOptions(components=["Button"])
        assert options.wants("Button")
        assert not options.wants("Stack")
        assert ir.TransformationOptions().wants("Stack")
