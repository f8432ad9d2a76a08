"""
Fallback generators for native targets: Flutter, SwiftUI and Jetpack Compose.

Synthesized enums and structs live in a separate types file, which is only
emitted when the component actually needs declarations.
"""

from __future__ import annotations

from ..naming import pascal_case
from ..templates.context import ComponentContext, PropContext
from .base import FallbackGenerator, PlatformProfile

FLUTTER_WIDGETS = "import 'package:flutter/widgets.dart';"
EASY_LOCALIZATION = "import 'package:easy_localization/easy_localization.dart';"

# Accessibility role to SwiftUI trait
SWIFT_TRAITS = {
    "button": ".isButton",
    "link": ".isLink",
    "heading": ".isHeader",
    "img": ".isImage",
    "image": ".isImage",
    "search": ".isSearchField",
    "tab": ".isButton",
}

# Accessibility role to Compose semantics Role
COMPOSE_ROLES = {
    "button": "Role.Button",
    "checkbox": "Role.Checkbox",
    "switch": "Role.Switch",
    "radio": "Role.RadioButton",
    "tab": "Role.Tab",
    "img": "Role.Image",
    "image": "Role.Image",
    "combobox": "Role.DropdownList",
    "listbox": "Role.DropdownList",
}


def slash_doc(prop: PropContext, indent: str) -> str:
    """Triple-slash doc lines for Dart and Swift."""
    lines = []
    if prop.description:
        lines.append(prop.description)
    if prop.deprecated:
        lines.append(f"Deprecated since {prop.deprecated.since}: {prop.deprecated.reason}")
    return "".join(f"{indent}/// {line}\n" for line in lines)


def first_slot(ctx: ComponentContext) -> PropContext | None:
    slots = ctx.slot_props
    for prop in slots:
        if prop.name in ("children", "child", "content"):
            return prop
    return slots[0] if slots else None


class FlutterFallback(FallbackGenerator):
    profile = PlatformProfile(
        platform="flutter",
        language="dart",
        extension=".dart",
        component_path="lib/components/{snake}.dart",
        types_path="lib/types/{snake}_types.dart",
        test_path="test/{snake}_test.dart",
        locale_path="assets/locales/{locale}/{kebab}.json",
    )

    def component(self, ctx: ComponentContext) -> str:
        params = ["super.key"]
        fields = []
        for prop in ctx.props:
            if prop.default is not None:
                params.append(f"this.{prop.name} = {prop.default}")
            elif prop.required:
                params.append(f"required this.{prop.name}")
            else:
                params.append(f"this.{prop.name}")
            fields.append(f"{slash_doc(prop, '  ')}  final {prop.declared_type} {prop.name};")

        imports = [EASY_LOCALIZATION, FLUTTER_WIDGETS]
        if ctx.types.declarations:
            imports.append(f"import '../types/{ctx.snake}_types.dart';")
        body = self.with_imports(ctx, "", extra=imports).rstrip()

        slot = first_slot(ctx)
        if slot is None:
            child = "const SizedBox.shrink()"
        elif slot.required:
            child = slot.name
        else:
            child = f"{slot.name} ?? const SizedBox.shrink()"
        semantics = ["label: '" + ctx.i18n_key + ".title'.tr()"]
        if ctx.role == "button":
            semantics.append("button: true")
        elif ctx.role in ("heading", "header"):
            semantics.append("header: true")
        elif ctx.role == "link":
            semantics.append("link: true")
        param_lines = "".join(f"    {p},\n" for p in params)
        field_lines = "\n".join(fields)
        semantic_lines = "".join(f"      {s},\n" for s in semantics)
        return (
            f"{self.header(ctx)}\n"
            f"{body}\n\n"
            f"class {ctx.name} extends StatelessWidget {{\n"
            f"  const {ctx.name}({{\n"
            f"{param_lines}"
            f"  }});\n\n"
            f"{field_lines}\n\n"
            f"  @override\n"
            f"  Widget build(BuildContext context) {{\n"
            f"    return Semantics(\n"
            f"{semantic_lines}"
            f"      child: {child},\n"
            f"    );\n"
            f"  }}\n"
            f"}}\n"
        )

    def types_file(self, ctx: ComponentContext) -> str | None:
        declarations = ctx.types.render_declarations()
        if not declarations:
            return None
        return f"{self.header(ctx)}\n" + self.with_imports(ctx, declarations)

    def test_file(self, ctx: ComponentContext) -> str:
        args = ", ".join(
            f"{p.name}: {self._sample(p)}" for p in ctx.props if p.required and p.default is None
        )
        return (
            f"{self.header(ctx)}\n"
            f"import 'package:flutter/widgets.dart';\n"
            f"import 'package:flutter_test/flutter_test.dart';\n\n"
            f"import '../lib/components/{ctx.snake}.dart';\n\n"
            f"void main() {{\n"
            f"  testWidgets('{ctx.name} builds', (tester) async {{\n"
            f"    await tester.pumpWidget(\n"
            f"      Directionality(\n"
            f"        textDirection: TextDirection.ltr,\n"
            f"        child: {ctx.name}({args}),\n"
            f"      ),\n"
            f"    );\n"
            f"    expect(find.byType({ctx.name}), findsOneWidget);\n"
            f"  }});\n"
            f"}}\n"
        )

    @staticmethod
    def _sample(prop: PropContext) -> str:
        if prop.type == "String":
            return f"'{prop.name}'"
        if prop.type == "double":
            return "0"
        if prop.type == "bool":
            return "false"
        if prop.type == "VoidCallback":
            return "() {}"
        if prop.type == "Widget":
            return "const SizedBox.shrink()"
        return "null"


class SwiftUIFallback(FallbackGenerator):
    profile = PlatformProfile(
        platform="ios-swift",
        language="swift",
        extension=".swift",
        component_path="Sources/Components/{name}.swift",
        types_path="Sources/Types/{name}Types.swift",
        test_path="Tests/{name}Tests.swift",
        locale_path="Resources/Locales/{locale}/{kebab}.json",
    )

    def component(self, ctx: ComponentContext) -> str:
        members = []
        for prop in ctx.props:
            doc = slash_doc(prop, "    ")
            if prop.default is not None:
                members.append(f"{doc}    var {prop.name}: {prop.type} = {prop.default}")
            elif prop.required:
                members.append(f"{doc}    let {prop.name}: {prop.type}")
            else:
                members.append(f"{doc}    var {prop.name}: {prop.optional_type} = nil")

        title = f'NSLocalizedString("{ctx.i18n_key}.title", comment: "{ctx.name} title")'
        slot = first_slot(ctx)
        if slot is None:
            content = f"Text({title})"
        elif slot.required:
            content = slot.name
        else:
            content = f"{slot.name} ?? AnyView(Text({title}))"
        modifiers = [f".accessibilityLabel(Text({title}))"]
        trait = SWIFT_TRAITS.get(ctx.role)
        if trait:
            modifiers.append(f".accessibilityAddTraits({trait})")
        modifier_lines = "".join(f"\n            {m}" for m in modifiers)
        member_lines = "\n".join(members)
        body = self.with_imports(ctx, "", extra=["import SwiftUI"]).rstrip()
        return (
            f"{self.header(ctx)}\n"
            f"{body}\n\n"
            f"struct {ctx.name}: View {{\n"
            f"{member_lines}\n\n"
            f"    var body: some View {{\n"
            f"        ZStack {{\n"
            f"            {content}\n"
            f"        }}{modifier_lines}\n"
            f"    }}\n"
            f"}}\n"
        )

    def types_file(self, ctx: ComponentContext) -> str | None:
        declarations = ctx.types.render_declarations()
        if not declarations:
            return None
        return f"{self.header(ctx)}\n" + self.with_imports(ctx, declarations, extra=["import SwiftUI"])

    def test_file(self, ctx: ComponentContext) -> str:
        args = ", ".join(
            f"{p.name}: {self._sample(p)}" for p in ctx.props if p.required and p.default is None
        )
        return (
            f"{self.header(ctx)}\n"
            f"import SwiftUI\n"
            f"import XCTest\n\n"
            f"final class {ctx.name}Tests: XCTestCase {{\n"
            f"    func testBuildsBody() {{\n"
            f"        let view = {ctx.name}({args})\n"
            f"        XCTAssertNotNil(view.body)\n"
            f"    }}\n"
            f"}}\n"
        )

    @staticmethod
    def _sample(prop: PropContext) -> str:
        if prop.type == "String":
            return f'"{prop.name}"'
        if prop.type == "Double":
            return "0"
        if prop.type == "Bool":
            return "false"
        if prop.type == "AnyView":
            return "AnyView(EmptyView())"
        if prop.is_callback:
            arity = 0 if prop.type.startswith("()") else prop.type.split("->")[0].count(",") + 1
            return "{}" if arity == 0 else "{ " + ", ".join(["_"] * arity) + " in }"
        return ".init()"


class ComposeFallback(FallbackGenerator):
    profile = PlatformProfile(
        platform="android-kotlin",
        language="kotlin",
        extension=".kt",
        component_path="src/main/kotlin/components/{name}.kt",
        types_path="src/main/kotlin/components/{name}Types.kt",
        test_path="src/test/kotlin/components/{name}Test.kt",
        locale_path="src/main/assets/locales/{locale}/{kebab}.json",
    )

    PACKAGE = "components"

    def component(self, ctx: ComponentContext) -> str:
        # Compose convention: required params, then modifier, then optional ones
        required = []
        optional = []
        for prop in ctx.props:
            if prop.default is not None:
                optional.append(f"    {prop.name}: {prop.type} = {prop.default},")
            elif prop.required:
                required.append(f"    {prop.name}: {prop.type},")
            else:
                optional.append(f"    {prop.name}: {prop.optional_type} = null,")
        params = required + ["    modifier: Modifier = Modifier,"] + optional

        imports = [
            "import androidx.compose.foundation.layout.Box",
            "import androidx.compose.material3.Text",
            "import androidx.compose.runtime.Composable",
            "import androidx.compose.ui.Modifier",
            "import androidx.compose.ui.res.stringResource",
            "import androidx.compose.ui.semantics.contentDescription",
            "import androidx.compose.ui.semantics.semantics",
        ]
        semantics = ["contentDescription = title"]
        role = COMPOSE_ROLES.get(ctx.role)
        if role:
            imports.append("import androidx.compose.ui.semantics.Role")
            imports.append("import androidx.compose.ui.semantics.role")
            semantics.append(f"role = {role}")
        for line in ctx.types.imports:
            if line not in imports:
                imports.append(line)
        imports.sort()

        slot = first_slot(ctx)
        if slot is None:
            content = "Text(title)"
        elif slot.required:
            content = f"{slot.name}()"
        else:
            content = f"{slot.name}?.invoke() ?: Text(title)"
        resource = f"R.string.{ctx.snake}_title"
        param_lines = "\n".join(params)
        import_lines = "\n".join(imports)
        return (
            f"{self.header(ctx)}\n"
            f"package {self.PACKAGE}\n\n"
            f"{import_lines}\n\n"
            f"@Composable\n"
            f"fun {ctx.name}(\n"
            f"{param_lines}\n"
            f") {{\n"
            f"    val title = stringResource({resource})\n"
            f"    Box(modifier = modifier.semantics {{ {'; '.join(semantics)} }}) {{\n"
            f"        {content}\n"
            f"    }}\n"
            f"}}\n"
        )

    def types_file(self, ctx: ComponentContext) -> str | None:
        declarations = ctx.types.render_declarations()
        if not declarations:
            return None
        head = f"{self.header(ctx)}\npackage {self.PACKAGE}\n\n"
        return head + self.with_imports(ctx, declarations)

    def test_file(self, ctx: ComponentContext) -> str:
        args = ", ".join(
            f"{p.name} = {self._sample(p)}" for p in ctx.props if p.required and p.default is None
        )
        return (
            f"{self.header(ctx)}\n"
            f"package {self.PACKAGE}\n\n"
            f"import androidx.compose.ui.test.junit4.createComposeRule\n"
            f"import androidx.compose.ui.test.onRoot\n"
            f"import org.junit.Rule\n"
            f"import org.junit.Test\n\n"
            f"class {ctx.name}Test {{\n"
            f"    @get:Rule\n"
            f"    val composeRule = createComposeRule()\n\n"
            f"    @Test\n"
            f"    fun renders{pascal_case(ctx.role)}() {{\n"
            f"        composeRule.setContent {{ {ctx.name}({args}) }}\n"
            f"        composeRule.onRoot().assertExists()\n"
            f"    }}\n"
            f"}}\n"
        )

    @staticmethod
    def _sample(prop: PropContext) -> str:
        if prop.type == "String":
            return f'"{prop.name}"'
        if prop.type == "Double":
            return "0.0"
        if prop.type == "Boolean":
            return "false"
        if prop.is_slot:
            return "{}"
        if prop.is_callback:
            return "{}"
        return "TODO()"
