"""Tests for cross-platform type mapping."""

import pytest

from dsforge.core import ir
from dsforge.core.errors import UnknownPlatformError, UnmappableTypeError
from dsforge.templates.context import BUILTIN_PLATFORMS
from dsforge.typemap import (
    TypeContext,
    custom_values,
    default_literal,
    get_type_mapper,
    map_type,
    mapped_platforms,
)


def descriptor(raw):
    return ir.PropDefinition.model_validate({"type": raw}).type


SAMPLES = {
    "primitive": "string",
    "complex": {"type": "function"},
    "custom": {"type": "custom", "custom": "size"},
    "union": {"union": ["string", "number"]},
    "array": {"type": "array", "items": "string"},
    "object": {"type": "object", "fields": {"id": "string", "count": "number"}},
}


class TestCompleteness:
    """Every built-in platform maps every descriptor kind."""

    def test_every_builtin_platform_has_a_mapper(self):
        assert sorted(mapped_platforms()) == sorted(BUILTIN_PLATFORMS)

    @pytest.mark.parametrize("platform", BUILTIN_PLATFORMS)
    @pytest.mark.parametrize("kind", list(SAMPLES))
    def test_kind_maps_to_concrete_type(self, platform, kind):
        context = TypeContext(owner="Sample")
        mapped = map_type(descriptor(SAMPLES[kind]), platform, context, hint="SampleValue")
        assert mapped.strip()
        assert mapped.lower() not in ("any", "unknown", "dynamic", "object")

    @pytest.mark.parametrize("platform", BUILTIN_PLATFORMS)
    def test_unknown_custom_type_is_unmappable(self, platform):
        with pytest.raises(UnmappableTypeError) as exc_info:
            map_type(descriptor("mood"), platform)
        assert exc_info.value.platform == platform
        assert exc_info.value.kind == "custom"
        assert f"[{platform}]" in str(exc_info.value)

    @pytest.mark.parametrize("platform", BUILTIN_PLATFORMS)
    def test_unknown_custom_type_with_values_is_mappable(self, platform):
        mood = descriptor({"type": "custom", "custom": "mood", "values": ["calm", "busy"]})
        assert map_type(mood, platform, TypeContext(), hint="Mood")

    def test_unknown_platform(self):
        with pytest.raises(UnknownPlatformError):
            get_type_mapper("gtk4")


class TestTypeScript:
    def test_literal_unions(self):
        assert map_type(descriptor("size"), "react") == "'xs' | 'sm' | 'md' | 'lg' | 'xl'"
        assert map_type(descriptor({"type": "string", "enum": ["a", "b"]}), "vue") == "'a' | 'b'"

    def test_union_members(self):
        assert map_type(descriptor(SAMPLES["union"]), "react") == "string | number"

    def test_array_and_object(self):
        assert map_type(descriptor(SAMPLES["array"]), "svelte") == "ReadonlyArray<string>"
        assert (
            map_type(descriptor(SAMPLES["object"]), "react")
            == "{ readonly id: string; readonly count: number; }"
        )

    def test_framework_node_types(self):
        context = TypeContext()
        assert map_type(descriptor("node"), "react", context) == "React.ReactNode"
        assert context.imports == ["import type * as React from 'react';"]
        assert map_type(descriptor("node"), "svelte") == "Snippet"
        assert map_type(descriptor("node"), "css") == "Node"

    def test_callback_signature(self):
        d = descriptor(
            {
                "type": "complex",
                "complex": "function",
                "signature": {
                    "parameters": [{"name": "value", "type": "string"}],
                    "returns": "boolean",
                },
            }
        )
        assert map_type(d, "react") == "(value: string) => boolean"

    def test_default_literals(self):
        assert default_literal("md", descriptor("size"), "react") == "'md'"
        assert default_literal(["a"], descriptor(SAMPLES["array"]), "react") == "['a']"


class TestNative:
    def test_swift_enum_declaration(self):
        context = TypeContext(owner="Button")
        mapped = map_type(descriptor("size"), "ios-swift", context, hint="ButtonSize")
        assert mapped == "ButtonSize"
        declarations = context.render_declarations()
        assert "enum ButtonSize: String, CaseIterable {" in declarations
        assert '    case md = "md"' in declarations

    def test_kotlin_enum_uses_constant_case(self):
        context = TypeContext()
        map_type(descriptor("size"), "android-kotlin", context, hint="ButtonSize")
        assert '    MD("md")' in context.render_declarations()

    def test_dart_struct_for_strict_object(self):
        context = TypeContext()
        mapped = map_type(descriptor(SAMPLES["object"]), "flutter", context, hint="Item")
        assert mapped == "Item"
        assert "class Item {" in context.render_declarations()

    def test_heterogeneous_union_becomes_sum_type(self):
        context = TypeContext()
        mapped = map_type(descriptor(SAMPLES["union"]), "ios-swift", context, hint="Amount")
        assert mapped == "Amount"
        assert "case string(String)" in context.render_declarations()

    @pytest.mark.parametrize(
        "platform,cases",
        [
            ("ios-swift", ["case string(String)", "case stringArray([String])"]),
            (
                "android-kotlin",
                [
                    "data class OfString(val value: String) : Mixed",
                    "data class OfListString(val value: List<String>) : Mixed",
                ],
            ),
            (
                "flutter",
                ["final class MixedString extends Mixed", "final class MixedListString extends Mixed"],
            ),
        ],
    )
    def test_union_of_value_and_list_gets_distinct_cases(self, platform, cases):
        mixed = ir.UnionType(
            members=[
                ir.PrimitiveType(primitive="string"),
                ir.ArrayType(items=ir.PrimitiveType(primitive="string")),
            ]
        )
        context = TypeContext()
        assert map_type(mixed, platform, context, hint="Mixed") == "Mixed"
        declarations = context.render_declarations()
        for case in cases:
            assert case in declarations

    def test_colliding_enum_cases_get_suffixes(self):
        sizes = ir.PrimitiveType(primitive="string", enum=["md", "MD"])
        context = TypeContext()
        map_type(sizes, "ios-swift", context, hint="Size")
        declarations = context.render_declarations()
        assert '    case md = "md"' in declarations
        assert '    case md2 = "MD"' in declarations
        assert default_literal("MD", sizes, "ios-swift", hint="Size") == ".md2"

    def test_fractional_enum_values_keep_distinct_names(self):
        ratios = ir.PrimitiveType(primitive="number", enum=[15, 1.5])
        context = TypeContext()
        map_type(ratios, "ios-swift", context, hint="Ratio")
        declarations = context.render_declarations()
        assert "    case value15 = 15.0" in declarations
        assert "    case value1Point5 = 1.5" in declarations
        assert default_literal(1.5, ratios, "android-kotlin", hint="Ratio") == "Ratio.VALUE_1_POINT_5"

    def test_unique_case_names(self):
        assert get_type_mapper("ios-swift").unique_case_names(["a", "a", "a2"]) == ["a", "a2", "a22"]
        assert get_type_mapper("android-kotlin").unique_case_names(["MD", "MD"]) == ["MD", "MD_2"]

    def test_enum_default_literals(self):
        size = descriptor("size")
        assert default_literal("lg", size, "ios-swift", hint="ButtonSize") == ".lg"
        assert default_literal("lg", size, "flutter", hint="ButtonSize") == "ButtonSize.lg"
        assert default_literal("lg", size, "android-kotlin", hint="ButtonSize") == "ButtonSize.LG"

    def test_color_literals(self):
        color = descriptor("color")
        assert default_literal("#ff0000", color, "flutter") == "Color(0xFFFF0000)"
        assert default_literal("#ff0000", color, "ios-swift") == "Color(red: 1.0, green: 0.0, blue: 0.0)"

    def test_optional(self):
        swift = get_type_mapper("ios-swift")
        assert swift.optional("String") == "String?"
        assert swift.optional("() -> Void") == "(() -> Void)?"

    def test_identical_redeclaration_is_reused(self):
        context = TypeContext()
        first = map_type(descriptor("size"), "flutter", context, hint="Size")
        second = map_type(descriptor("size"), "flutter", context, hint="Size")
        assert first == second == "Size"
        assert len(context.declarations) == 1

    def test_conflicting_declaration_gets_suffix(self):
        context = TypeContext()
        map_type(descriptor("size"), "flutter", context, hint="Size")
        other = descriptor({"type": "custom", "custom": "size", "values": ["s", "l"]})
        assert map_type(other, "flutter", context, hint="Size") == "Size2"


class TestCustomValues:
    def test_helper(self):
        assert custom_values(ir.CustomType(custom="variant"))[0] == "primary"
