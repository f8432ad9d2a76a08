"""Tests for fallback component generation."""

import pytest

from dsforge.core.errors import UnknownPlatformError
from dsforge.fallback import SwiftUIFallback, get_fallback_generator
from dsforge.templates import BUILTIN_PLATFORMS, build_component_context
from dsforge.typemap import get_type_mapper


def context_for(spec, platform):
    return build_component_context(spec, platform, get_type_mapper(platform))


class TestRegistry:
    @pytest.mark.parametrize("platform", BUILTIN_PLATFORMS)
    def test_every_builtin_platform_has_a_generator(self, platform):
        assert get_fallback_generator(platform).profile.platform == platform

    def test_unknown_platform(self):
        with pytest.raises(UnknownPlatformError) as exc_info:
            get_fallback_generator("gtk4")
        assert "react" in exc_info.value.available


class TestStubContents:
    """A stub names every prop and carries a localization hook."""

    @pytest.mark.parametrize("platform", BUILTIN_PLATFORMS)
    def test_stub_contains_every_prop(self, platform, button):
        code = get_fallback_generator(platform).component(context_for(button, platform))
        for prop_name in button.props:
            assert prop_name in code
        assert "button.title" in code or "R.string.button_title" in code

    @pytest.mark.parametrize("platform", BUILTIN_PLATFORMS)
    def test_test_file_names_the_component(self, platform, stack):
        test_code = get_fallback_generator(platform).test_file(context_for(stack, platform))
        assert "Stack" in test_code or "stack" in test_code


class TestSwiftUI:
    def test_button_stub(self, button):
        code = SwiftUIFallback().component(context_for(button, "ios-swift"))
        assert "import SwiftUI" in code
        assert "struct Button: View {" in code
        assert "    var size: ButtonSize = .md" in code
        assert "    let label: String" in code
        assert "    var onClick: (() -> Void)? = nil" in code
        assert ".accessibilityAddTraits(.isButton)" in code

    def test_types_file_declares_enum(self, button):
        types = SwiftUIFallback().types_file(context_for(button, "ios-swift"))
        assert "enum ButtonSize: String, CaseIterable" in types

    def test_slot_is_rendered(self, stack):
        code = SwiftUIFallback().component(context_for(stack, "ios-swift"))
        assert "children ?? AnyView(Text(" in code


class TestWeb:
    def test_react_stub(self, button):
        code = get_fallback_generator("react").component(context_for(button, "react"))
        assert "React.forwardRef<HTMLButtonElement, ButtonProps>" in code
        assert "size = 'md'" in code
        assert "styles[`size-${size}`]" in code

    def test_react_types_file(self, button):
        types = get_fallback_generator("react").types_file(context_for(button, "react"))
        assert types.startswith("// Button (interactive)")
        assert "import type * as React from 'react';" in types
        assert "  readonly size?: 'xs' | 'sm' | 'md' | 'lg' | 'xl';" in types
        assert "  readonly label: string;" in types

    def test_react_story(self, button):
        story = get_fallback_generator("react").story_file(context_for(button, "react"))
        assert "title: 'Interactive/Button'" in story
        assert '"size": "md"' in story

    def test_css_stub_uses_data_attributes(self, button):
        code = get_fallback_generator("css").component(context_for(button, "css"))
        assert '.button[data-size="lg"] {' in code

    def test_tailwind_recipe(self, button):
        code = get_fallback_generator("tailwind").component(context_for(button, "tailwind"))
        assert "export function buttonClasses(" in code
        assert "'text-lg'" in code

    def test_angular_layout(self, stack):
        generator = get_fallback_generator("angular")
        ctx = context_for(stack, "angular")
        assert generator.profile.path(generator.profile.component_path, ctx) == (
            "src/app/components/stack/stack.component.ts"
        )
