"""
Native adapters: Flutter, SwiftUI (ios-swift) and Jetpack Compose (android-kotlin).

Tokens become typed constants. Colors use the platform color type; px and
rem lengths become numbers in logical pixels (1rem = 16).
"""

from __future__ import annotations

import re
from abc import abstractmethod
from typing import Any

from ..core import ir
from ..core.tokens import TokenEntry, TokenSet
from ..naming import identifier, snake_case
from ..typemap.native import NativeTypeMapper, parse_hex_color
from .base import TemplatedAdapter

REM_PX = 16
LENGTH = re.compile(r"^(-?\d+(?:\.\d+)?)(px|rem)$")


def native_value(value: Any) -> tuple[str, Any]:
    """
    Classify a resolved token value for native output.

    Returns:
        One of ("color", rgba), ("length", float), ("number", int|float),
        ("bool", bool) or ("string", str)
    """
    if isinstance(value, bool):
        return "bool", value
    if isinstance(value, (int, float)):
        return "number", value
    if isinstance(value, (list, tuple)):
        return "string", ", ".join(str(v) for v in value)
    text = str(value)
    rgba = parse_hex_color(text)
    if rgba is not None:
        return "color", rgba
    match = LENGTH.match(text)
    if match:
        number = float(match.group(1))
        return "length", number * REM_PX if match.group(2) == "rem" else number
    return "string", text


def primary_color(tokens: TokenSet) -> TokenEntry | None:
    """The token named like a primary color, else the first color token."""
    colors = [e for e in tokens if native_value(e.resolved)[0] == "color"]
    for entry in colors:
        if "primary" in entry.path:
            return entry
    return colors[0] if colors else None


class NativeAdapter(TemplatedAdapter):
    """Shared token-constant rendering for native targets."""

    mapper: NativeTypeMapper
    tokens_file: str = ""

    @abstractmethod
    def constant(self, entry: TokenEntry) -> str:
        """One token constant declaration."""

    def token_name(self, entry: TokenEntry) -> str:
        return identifier(entry.name, "camel", fallback="token")

    def token_literal(self, entry: TokenEntry) -> str:
        kind, value = native_value(entry.resolved)
        if kind == "color":
            return self.mapper.color_literal(value)
        if kind == "bool":
            return "true" if value else "false"
        if kind in ("length", "number"):
            return self.mapper.number_literal(value, as_float=True)
        return self.mapper.string_literal(value)

    def transform_tokens(self, tokens: TokenSet, schema: ir.UniversalTokenSchema) -> dict[str, str]:
        outputs = super().transform_tokens(tokens, schema)
        outputs[self.mapper.language] = self.tokens_module(tokens)
        return outputs

    @abstractmethod
    def tokens_module(self, tokens: TokenSet) -> str:
        """Source of the token constants file."""

    def generate_utils(self, tokens: TokenSet, schema: ir.UniversalTokenSchema) -> dict[str, str]:
        return {self.tokens_file: self.tokens_module(tokens)}


class FlutterAdapter(NativeAdapter):
    platform = "flutter"
    styling = "material-theme"
    accessibility = "flutter-semantics"
    tokens_file = "lib/theme/design_tokens.dart"
    patterns = {
        "form": ir.PatternSnippet(
            template="Column(children: [Input(label: field), Button(label: 'Submit', onClick: submit)])",
            components=["Input", "Button"],
        ),
        "card-list": ir.PatternSnippet(
            template="ListView(children: [for (final item in items) Card(child: Text(item.title))])",
            components=["Card"],
        ),
        "dashboard": ir.PatternSnippet(
            template="Container(child: Column(children: [GridView.count(crossAxisCount: 4, children: cards)]))",
            components=["Container", "Card"],
        ),
    }

    def constant(self, entry: TokenEntry) -> str:
        kind, _ = native_value(entry.resolved)
        type_name = {"color": "Color", "bool": "bool", "length": "double", "number": "double"}.get(
            kind, "String"
        )
        return f"  static const {type_name} {self.token_name(entry)} = {self.token_literal(entry)};"

    def tokens_module(self, tokens: TokenSet) -> str:
        body = "\n".join(self.constant(e) for e in tokens)
        return (
            "import 'package:flutter/widgets.dart';\n\n"
            "abstract final class DesignTokens {\n"
            f"{body}\n"
            "}\n"
        )

    def generate_theme(self, tokens: TokenSet, schema: ir.UniversalTokenSchema) -> str:
        primary = primary_color(tokens)
        seed = f"DesignTokens.{self.token_name(primary)}" if primary else "const Color(0xFF2563EB)"
        return (
            "import 'package:flutter/material.dart';\n\n"
            "import 'design_tokens.dart';\n\n"
            "ThemeData buildDesignSystemTheme({Brightness brightness = Brightness.light}) {\n"
            "  return ThemeData(\n"
            f"    colorScheme: ColorScheme.fromSeed(seedColor: {seed}, brightness: brightness),\n"
            "    useMaterial3: true,\n"
            "  );\n"
            "}\n"
        )

    def generate_examples(
        self, schema: ir.UniversalTokenSchema, components: list[str]
    ) -> dict[str, str]:
        shown = self.example_components(components)
        if not shown:
            return {}
        imports = "".join(f"import '../components/{snake_case(n)}.dart';\n" for n in shown)
        children = "".join(f"        {n}(),\n" for n in shown)
        return {
            "lib/examples/showcase.dart": (
                "import 'package:flutter/widgets.dart';\n\n"
                f"{imports}\n"
                "class Showcase extends StatelessWidget {\n"
                "  const Showcase({super.key});\n\n"
                "  @override\n"
                "  Widget build(BuildContext context) {\n"
                "    return Column(\n"
                "      children: [\n"
                f"{children}"
                "      ],\n"
                "    );\n"
                "  }\n"
                "}\n"
            )
        }


class SwiftUIAdapter(NativeAdapter):
    platform = "ios-swift"
    styling = "swiftui"
    accessibility = "ios-accessibility"
    tokens_file = "Sources/Theme/DesignTokens.swift"
    patterns = {
        "form": ir.PatternSnippet(
            template='VStack(spacing: 12) { Input(label: field); Button(label: "Submit", onClick: submit) }',
            components=["Input", "Button"],
        ),
        "card-list": ir.PatternSnippet(
            template="List(items) { item in Card { Text(item.title) } }",
            components=["Card"],
        ),
        "dashboard": ir.PatternSnippet(
            template="ScrollView { LazyVGrid(columns: columns) { ForEach(stats) { Card { Text($0.title) } } } }",
            components=["Card"],
        ),
    }

    def constant(self, entry: TokenEntry) -> str:
        kind, _ = native_value(entry.resolved)
        annotation = {"length": ": CGFloat", "number": ": Double"}.get(kind, "")
        return f"    static let {self.token_name(entry)}{annotation} = {self.token_literal(entry)}"

    def tokens_module(self, tokens: TokenSet) -> str:
        body = "\n".join(self.constant(e) for e in tokens)
        return f"import SwiftUI\n\nenum DesignTokens {{\n{body}\n}}\n"

    def generate_theme(self, tokens: TokenSet, schema: ir.UniversalTokenSchema) -> str:
        primary = primary_color(tokens)
        accent = f"DesignTokens.{self.token_name(primary)}" if primary else "Color.accentColor"
        return (
            "import SwiftUI\n\n"
            "struct DesignSystemTheme {\n"
            f"    var accent: Color = {accent}\n"
            "}\n\n"
            "private struct DesignSystemThemeKey: EnvironmentKey {\n"
            "    static let defaultValue = DesignSystemTheme()\n"
            "}\n\n"
            "extension EnvironmentValues {\n"
            "    var designSystem: DesignSystemTheme {\n"
            "        get { self[DesignSystemThemeKey.self] }\n"
            "        set { self[DesignSystemThemeKey.self] = newValue }\n"
            "    }\n"
            "}\n"
        )

    def generate_examples(
        self, schema: ir.UniversalTokenSchema, components: list[str]
    ) -> dict[str, str]:
        shown = self.example_components(components)
        if not shown:
            return {}
        children = "".join(f"            {n}()\n" for n in shown)
        return {
            "Sources/Examples/Showcase.swift": (
                "import SwiftUI\n\n"
                "struct Showcase: View {\n"
                "    var body: some View {\n"
                "        VStack {\n"
                f"{children}"
                "        }\n"
                "    }\n"
                "}\n"
            )
        }


class ComposeAdapter(NativeAdapter):
    platform = "android-kotlin"
    styling = "material-design"
    accessibility = "android-accessibility"
    tokens_file = "src/main/kotlin/theme/DesignTokens.kt"
    patterns = {
        "form": ir.PatternSnippet(
            template='Column { Input(label = field); Button(label = "Submit", onClick = submit) }',
            components=["Input", "Button"],
        ),
        "card-list": ir.PatternSnippet(
            template="LazyColumn { items(items) { item -> Card { Text(item.title) } } }",
            components=["Card"],
        ),
        "dashboard": ir.PatternSnippet(
            template="LazyVerticalGrid(columns = GridCells.Fixed(4)) { items(stats) { Card { Text(it.title) } } }",
            components=["Card"],
        ),
    }

    def token_name(self, entry: TokenEntry) -> str:
        return identifier(entry.name, "pascal", fallback="token")

    def constant(self, entry: TokenEntry) -> str:
        kind, value = native_value(entry.resolved)
        if kind == "length":
            literal = f"{self.mapper.number_literal(value, as_float=True).removesuffix('.0')}.dp"
            return f"    val {self.token_name(entry)} = {literal}"
        return f"    val {self.token_name(entry)} = {self.token_literal(entry)}"

    def tokens_module(self, tokens: TokenSet) -> str:
        body = "\n".join(self.constant(e) for e in tokens)
        return (
            "package theme\n\n"
            "import androidx.compose.ui.graphics.Color\n"
            "import androidx.compose.ui.unit.dp\n\n"
            "object DesignTokens {\n"
            f"{body}\n"
            "}\n"
        )

    def generate_theme(self, tokens: TokenSet, schema: ir.UniversalTokenSchema) -> str:
        primary = primary_color(tokens)
        scheme = (
            f"lightColorScheme(primary = DesignTokens.{self.token_name(primary)})"
            if primary
            else "lightColorScheme()"
        )
        return (
            "package theme\n\n"
            "import androidx.compose.material3.MaterialTheme\n"
            "import androidx.compose.material3.lightColorScheme\n"
            "import androidx.compose.runtime.Composable\n\n"
            "@Composable\n"
            "fun DesignSystemTheme(content: @Composable () -> Unit) {\n"
            f"    MaterialTheme(colorScheme = {scheme}, content = content)\n"
            "}\n"
        )

    def generate_examples(
        self, schema: ir.UniversalTokenSchema, components: list[str]
    ) -> dict[str, str]:
        shown = self.example_components(components)
        if not shown:
            return {}
        children = "".join(f"        {n}()\n" for n in shown)
        return {
            "src/main/kotlin/examples/Showcase.kt": (
                "package examples\n\n"
                "import androidx.compose.foundation.layout.Column\n"
                "import androidx.compose.runtime.Composable\n"
                + "".join(f"import components.{n}\n" for n in shown)
                + "\n@Composable\n"
                "fun Showcase() {\n"
                "    Column {\n"
                f"{children}"
                "    }\n"
                "}\n"
            )
        }
