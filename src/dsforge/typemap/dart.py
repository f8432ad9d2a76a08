"""Dart type mapping for Flutter."""

from __future__ import annotations

from ..core.ir.types import ComplexKind, ComplexType, PrimitiveKind
from .base import TypeContext
from .native import NativeTypeMapper

FLUTTER_WIDGETS = "import 'package:flutter/widgets.dart';"

DART_RESERVED = {
    "assert", "break", "case", "catch", "class", "const", "continue", "default", "do",
    "else", "enum", "extends", "false", "final", "finally", "for", "if", "in", "is",
    "new", "null", "rethrow", "return", "super", "switch", "this", "throw", "true",
    "try", "var", "void", "while", "with", "values", "index",
}  # fmt: skip


def dart_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    escaped = escaped.replace("$", "\\$").replace("\n", "\\n")
    return f"'{escaped}'"


class DartMapper(NativeTypeMapper):
    platform = "flutter"
    language = "dart"

    primitives = {
        PrimitiveKind.STRING: "String",
        PrimitiveKind.NUMBER: "double",
        PrimitiveKind.BOOLEAN: "bool",
    }
    custom_scalars = {
        "color": "Color",
        "email": "String",
        "url": "Uri",
    }
    complex_types = {
        ComplexKind.NODE: "Widget",
        ComplexKind.ELEMENT: "Widget",
        ComplexKind.REF: "GlobalKey",
        ComplexKind.DATE: "DateTime",
        ComplexKind.FILE: "File",
    }
    type_imports = {
        "Widget": FLUTTER_WIDGETS,
        "GlobalKey": FLUTTER_WIDGETS,
        "Color": FLUTTER_WIDGETS,
        "File": "import 'dart:io';",
    }
    integer_type = "int"
    array_template = "List<{}>"
    open_object = "Map<String, Object?>"
    null_literal = "null"
    case_style = "camel"

    def case_name(self, value: object) -> str:
        name = super().case_name(value)
        return f"{name}Value" if name in DART_RESERVED else name

    def render_enum(self, name: str, cases: list[tuple[str, str]], raw_type: str) -> str:
        entries = ",\n".join(f"  {case}({raw})" for case, raw in cases)
        return (
            f"enum {name} {{\n"
            f"{entries};\n\n"
            f"  const {name}(this.value);\n"
            f"  final {raw_type} value;\n"
            f"}}"
        )

    def render_sum(self, name: str, cases: list[tuple[str, str]]) -> str:
        parts = [f"sealed class {name} {{\n  const {name}();\n}}"]
        for case, payload in cases:
            variant = f"{name}{case[:1].upper()}{case[1:]}"
            parts.append(
                f"final class {variant} extends {name} {{\n"
                f"  const {variant}(this.value);\n"
                f"  final {payload} value;\n"
                f"}}"
            )
        return "\n\n".join(parts)

    def render_struct(self, name: str, fields: list[tuple[str, str, bool]]) -> str:
        params = ", ".join(
            f"required this.{field}" if required else f"this.{field}"
            for field, _, required in fields
        )
        members = "\n".join(
            f"  final {ftype if required else self.optional(ftype)} {field};"
            for field, ftype, required in fields
        )
        return (
            f"class {name} {{\n"
            f"  const {name}({{{params}}});\n\n"
            f"{members}\n"
            f"}}"
        )

    def function_type(self, params: list[tuple[str, str, bool]], returns: str | None) -> str:
        if not params and returns is None:
            return "VoidCallback"
        args = ", ".join(
            f"{ptype if required else self.optional(ptype)} {pname}"
            for pname, ptype, required in params
        )
        return f"{returns or 'void'} Function({args})"

    def map_complex(self, d: ComplexType, hint: str, context: TypeContext) -> str:
        mapped = super().map_complex(d, hint, context)
        if mapped == "VoidCallback":
            context.add_import("import 'package:flutter/foundation.dart';")
        return mapped

    def optional(self, type_expr: str) -> str:
        return type_expr if type_expr.endswith("?") else f"{type_expr}?"

    def string_literal(self, value: str) -> str:
        return dart_string(value)

    def enum_member(self, type_name: str, case: str) -> str:
        return f"{type_name}.{case}"

    def color_literal(self, rgba: tuple[int, int, int, int]) -> str:
        r, g, b, a = rgba
        return f"Color(0x{a:02X}{r:02X}{g:02X}{b:02X})"

    def url_literal(self, value: str) -> str:
        return f"Uri.parse({dart_string(value)})"

    def map_literal(self, entries: list[tuple[str, str]]) -> str:
        return "<String, Object?>{" + ", ".join(f"{k}: {v}" for k, v in entries) + "}"
