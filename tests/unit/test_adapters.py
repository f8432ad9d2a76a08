"""Tests for the adapter registry and the templated adapter pipeline."""

import pytest

from dsforge.adapters import AdapterRegistry
from dsforge.adapters.builtin import BUILTIN_ADAPTERS
from dsforge.adapters.native import SwiftUIAdapter
from dsforge.adapters.web import ReactAdapter
from dsforge.core import ir
from dsforge.core.errors import DsforgeError, UnknownPlatformError
from dsforge.core.schema_loader import parse_schema
from dsforge.templates import BUILTIN_PLATFORMS, DictTemplateStore


class TestRegistry:
    def test_with_builtins(self):
        registry = AdapterRegistry.with_builtins(DictTemplateStore())
        assert sorted(registry.platforms()) == sorted(BUILTIN_PLATFORMS)
        assert len(BUILTIN_ADAPTERS) == 9

    def test_register_custom_adapter(self, echo_adapter_cls):
        registry = AdapterRegistry()
        adapter = echo_adapter_cls()
        registry.register("echo", adapter)
        assert "echo" in registry
        assert registry.get("echo") is adapter

    def test_duplicate_registration(self, echo_adapter_cls):
        registry = AdapterRegistry()
        registry.register("echo", echo_adapter_cls())
        with pytest.raises(DsforgeError, match="already registered"):
            registry.register("echo", echo_adapter_cls())

    def test_replace(self, echo_adapter_cls):
        registry = AdapterRegistry()
        registry.register("echo", echo_adapter_cls())
        replacement = echo_adapter_cls()
        registry.register("echo", replacement, replace=True)
        assert registry.get("echo") is replacement

    def test_non_adapter_is_rejected(self):
        with pytest.raises(DsforgeError, match="must extend PlatformAdapter"):
            AdapterRegistry().register("echo", object())  # type: ignore[arg-type]

    def test_unknown_platform(self, echo_adapter_cls):
        registry = AdapterRegistry()
        registry.register("echo", echo_adapter_cls())
        with pytest.raises(UnknownPlatformError) as exc_info:
            registry.get("gtk4")
        assert exc_info.value.available == ["echo"]
        assert exc_info.value.platform == "gtk4"


class TestTransform:
    async def test_every_component_generated(self, schema, empty_store):
        result = await ReactAdapter(empty_store).transform(schema)
        assert result.success
        assert list(result.components) == ["Button", "Stack"]
        assert result.skipped == []
        assert result.schema_id == "acme-ds"

    async def test_component_code_is_first_file(self, schema, empty_store):
        result = await SwiftUIAdapter(empty_store).transform(schema)
        component_files = result.files_of_kind(ir.FileKind.COMPONENT)
        assert [f.path for f in component_files] == [
            "Sources/Components/Button.swift",
            "Sources/Components/Stack.swift",
        ]
        assert result.components["Button"] == component_files[0].content

    async def test_partial_failures(self, schema_data, empty_store):
        schema_data["components"]["Mood"] = {
            "category": "feedback",
            "props": {"mood": "mood"},
            "accessibility": {"role": "status"},
        }
        schema_data["components"]["lowercase"] = {
            "category": "layout",
            "accessibility": {"role": "group"},
        }
        schema = parse_schema(schema_data)
        result = await ReactAdapter(empty_store).transform(schema)

        assert not result.success
        assert sorted(result.components) == ["Button", "Stack"]
        failures = {f.component: f for f in result.failures}
        assert failures["Mood"].error_type == "UnmappableTypeError"
        assert failures["lowercase"].error_type == "InvalidSpecificationError"
        assert "[react] lowercase" in failures["lowercase"].message

    async def test_unsupported_components_are_skipped(self, schema_data, empty_store, caplog):
        schema_data["components"]["Stack"]["platforms"] = ["react"]
        schema = parse_schema(schema_data)
        result = await SwiftUIAdapter(empty_store).transform(schema)
        assert result.skipped == ["Stack"]
        assert list(result.components) == ["Button"]
        assert "Skipping Stack: not supported on ios-swift" in caplog.text

    async def test_component_subset(self, schema, empty_store):
        options = ir.TransformationOptions(components=["Stack"])
        result = await ReactAdapter(empty_store).transform(schema, options)
        assert list(result.components) == ["Stack"]
        assert result.skipped == []
        assert result.failures == []

    async def test_template_failure_is_reported(self, schema):
        store = DictTemplateStore({"react/interactive/button.tsx.j2": "{{ nope }}"})
        result = await ReactAdapter(store).transform(schema)
        assert [f.component for f in result.failures] == ["Button"]
        assert result.failures[0].error_type == "TemplateRenderError"
        assert "Stack" in result.components

    async def test_template_is_used_when_present(self, button):
        store = DictTemplateStore({"react/interactive/button.tsx.j2": "// {{ component_name }}\n"})
        generated = await ReactAdapter(store).generate_component_code(button)
        assert generated.used_template == "react/interactive/button.tsx.j2"
        assert not generated.from_fallback
        assert generated.code == "// Button\n"

    async def test_fallback_when_no_template(self, button, empty_store):
        generated = await SwiftUIAdapter(empty_store).generate_component_code(button)
        assert generated.from_fallback
        assert "struct Button: View" in generated.code
        assert "size" in generated.code


class TestTokensAndExtras:
    @pytest.mark.parametrize(
        "platform,key",
        [
            ("react", "typescript"),
            ("vue", "typescript"),
            ("css", "scss"),
            ("tailwind", "tailwind-config"),
            ("ios-swift", "swift"),
            ("flutter", "dart"),
            ("android-kotlin", "kotlin"),
        ],
    )
    async def test_token_outputs(self, schema, empty_store, platform, key):
        registry = AdapterRegistry.with_builtins(empty_store)
        result = await registry.get(platform).transform(schema)
        assert "css-variables" in result.tokens
        assert "json" in result.tokens
        assert result.tokens[key].strip()

    async def test_css_variables(self, schema, empty_store):
        result = await ReactAdapter(empty_store).transform(schema)
        assert "--spacing-md: 1rem;" in result.tokens["css-variables"]

    async def test_react_extras(self, schema, empty_store):
        result = await ReactAdapter(empty_store).transform(schema)
        assert result.theme
        assert result.examples


class TestRecommendations:
    def test_react(self, empty_store):
        recommendations = ReactAdapter(empty_store).get_ai_recommendations()
        assert recommendations.platform == "react"
        assert recommendations.styling == "styled-components"
        assert "form" in recommendations.patterns
        assert "dashboard-layout" in recommendations.layout_patterns

    def test_swift(self, empty_store):
        recommendations = SwiftUIAdapter(empty_store).get_ai_recommendations()
        assert recommendations.accessibility == "ios-accessibility"
        assert recommendations.preferred_components[0] == "Button"

    @pytest.mark.parametrize("platform", BUILTIN_PLATFORMS)
    def test_every_platform_has_canonical_patterns(self, empty_store, platform):
        registry = AdapterRegistry.with_builtins(empty_store)
        patterns = registry.get(platform).get_ai_recommendations().patterns
        assert sorted(patterns) == ["card-list", "dashboard", "form"]
        for snippet in patterns.values():
            assert snippet.template
            assert snippet.components
