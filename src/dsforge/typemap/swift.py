"""Swift type mapping for SwiftUI."""

from __future__ import annotations

from ..core.ir.types import ComplexKind, PrimitiveKind
from .native import NativeTypeMapper

SWIFT_RESERVED = {
    "associatedtype", "class", "deinit", "enum", "extension", "func", "import", "init",
    "inout", "internal", "let", "operator", "private", "protocol", "public", "static",
    "struct", "subscript", "typealias", "var", "break", "case", "continue", "default",
    "defer", "do", "else", "fallthrough", "for", "guard", "if", "in", "repeat", "return",
    "switch", "where", "while", "as", "is", "nil", "self", "super", "throw", "throws",
    "true", "false", "try",
}  # fmt: skip


def swift_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'


class SwiftMapper(NativeTypeMapper):
    platform = "ios-swift"
    language = "swift"

    primitives = {
        PrimitiveKind.STRING: "String",
        PrimitiveKind.NUMBER: "Double",
        PrimitiveKind.BOOLEAN: "Bool",
    }
    custom_scalars = {
        "color": "Color",
        "email": "String",
        "url": "URL",
    }
    complex_types = {
        ComplexKind.NODE: "AnyView",
        ComplexKind.ELEMENT: "AnyView",
        ComplexKind.REF: "FocusState<Bool>.Binding",
        ComplexKind.DATE: "Date",
        ComplexKind.FILE: "URL",
    }
    type_imports = {
        "AnyView": "import SwiftUI",
        "Color": "import SwiftUI",
        "FocusState<Bool>.Binding": "import SwiftUI",
        "Date": "import Foundation",
        "URL": "import Foundation",
    }
    integer_type = "Int"
    array_template = "[{}]"
    open_object = "[String: Any]"
    null_literal = "nil"
    case_style = "camel"

    def case_name(self, value: object) -> str:
        name = super().case_name(value)
        return f"`{name}`" if name in SWIFT_RESERVED else name

    def sum_case_name(self, type_expr: str) -> str:
        # [T] and [K: V] carry no type name of their own
        if type_expr.startswith("[") and type_expr.endswith("]"):
            inner = type_expr[1:-1]
            if ":" in inner:
                return f"{self.sum_case_name(inner.split(':', 1)[1].strip())}Dictionary"
            return f"{self.sum_case_name(inner)}Array"
        return super().sum_case_name(type_expr)

    def render_enum(self, name: str, cases: list[tuple[str, str]], raw_type: str) -> str:
        body = "\n".join(f"    case {case} = {raw}" for case, raw in cases)
        return f"enum {name}: {raw_type}, CaseIterable {{\n{body}\n}}"

    def render_sum(self, name: str, cases: list[tuple[str, str]]) -> str:
        body = "\n".join(f"    case {case}({payload})" for case, payload in cases)
        return f"enum {name} {{\n{body}\n}}"

    def render_struct(self, name: str, fields: list[tuple[str, str, bool]]) -> str:
        body = "\n".join(
            f"    let {field}: {ftype if required else self.optional(ftype)}"
            for field, ftype, required in fields
        )
        return f"struct {name} {{\n{body}\n}}"

    def function_type(self, params: list[tuple[str, str, bool]], returns: str | None) -> str:
        args = ", ".join(
            ptype if required else self.optional(ptype) for _, ptype, required in params
        )
        return f"({args}) -> {returns or 'Void'}"

    def optional(self, type_expr: str) -> str:
        if type_expr.endswith("?"):
            return type_expr
        if "->" in type_expr:
            return f"({type_expr})?"
        return f"{type_expr}?"

    def string_literal(self, value: str) -> str:
        return swift_string(value)

    def enum_member(self, type_name: str, case: str) -> str:
        return f".{case.strip('`')}"

    def color_literal(self, rgba: tuple[int, int, int, int]) -> str:
        r, g, b, a = (round(c / 255, 3) for c in rgba)
        if a == 1:
            return f"Color(red: {r}, green: {g}, blue: {b})"
        return f"Color(red: {r}, green: {g}, blue: {b}, opacity: {a})"

    def url_literal(self, value: str) -> str:
        return f"URL(string: {swift_string(value)})!"

    def map_literal(self, entries: list[tuple[str, str]]) -> str:
        if not entries:
            return "[:]"
        return "[" + ", ".join(f"{k}: {v}" for k, v in entries) + "]"
