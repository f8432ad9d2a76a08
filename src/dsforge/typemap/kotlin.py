"""Kotlin type mapping for Jetpack Compose."""

from __future__ import annotations

from ..core.ir.types import ComplexKind, PrimitiveKind
from ..naming import pascal_case
from .native import NativeTypeMapper

COMPOSABLE_SLOT = "@Composable () -> Unit"


def kotlin_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    escaped = escaped.replace("$", "\\$").replace("\n", "\\n")
    return f'"{escaped}"'


class KotlinMapper(NativeTypeMapper):
    platform = "android-kotlin"
    language = "kotlin"

    primitives = {
        PrimitiveKind.STRING: "String",
        PrimitiveKind.NUMBER: "Double",
        PrimitiveKind.BOOLEAN: "Boolean",
    }
    custom_scalars = {
        "color": "Color",
        "email": "String",
        "url": "String",
    }
    complex_types = {
        ComplexKind.NODE: COMPOSABLE_SLOT,
        ComplexKind.ELEMENT: COMPOSABLE_SLOT,
        ComplexKind.REF: "FocusRequester",
        ComplexKind.DATE: "Instant",
        ComplexKind.FILE: "Uri",
    }
    type_imports = {
        COMPOSABLE_SLOT: "import androidx.compose.runtime.Composable",
        "Color": "import androidx.compose.ui.graphics.Color",
        "FocusRequester": "import androidx.compose.ui.focus.FocusRequester",
        "Instant": "import java.time.Instant",
        "Uri": "import android.net.Uri",
    }
    integer_type = "Int"
    array_template = "List<{}>"
    open_object = "Map<String, Any?>"
    null_literal = "null"
    case_style = "constant"

    def render_enum(self, name: str, cases: list[tuple[str, str]], raw_type: str) -> str:
        body = ",\n".join(f"    {case}({raw})" for case, raw in cases)
        return f"enum class {name}(val value: {raw_type}) {{\n{body}\n}}"

    def render_sum(self, name: str, cases: list[tuple[str, str]]) -> str:
        body = "\n".join(
            f"    data class Of{pascal_case(case)}(val value: {payload}) : {name}"
            for case, payload in cases
        )
        return f"sealed interface {name} {{\n{body}\n}}"

    def render_struct(self, name: str, fields: list[tuple[str, str, bool]]) -> str:
        params = ",\n".join(
            f"    val {field}: {ftype}"
            if required
            else f"    val {field}: {self.optional(ftype)} = null"
            for field, ftype, required in fields
        )
        return f"data class {name}(\n{params},\n)"

    def function_type(self, params: list[tuple[str, str, bool]], returns: str | None) -> str:
        args = ", ".join(
            ptype if required else self.optional(ptype) for _, ptype, required in params
        )
        return f"({args}) -> {returns or 'Unit'}"

    def optional(self, type_expr: str) -> str:
        if type_expr.endswith("?"):
            return type_expr
        if "->" in type_expr:
            return f"({type_expr})?"
        return f"{type_expr}?"

    def string_literal(self, value: str) -> str:
        return kotlin_string(value)

    def enum_member(self, type_name: str, case: str) -> str:
        return f"{type_name}.{case}"

    def color_literal(self, rgba: tuple[int, int, int, int]) -> str:
        r, g, b, a = rgba
        return f"Color(0x{a:02X}{r:02X}{g:02X}{b:02X})"

    def list_literal(self, items: list[str]) -> str:
        return "listOf(" + ", ".join(items) + ")"

    def map_literal(self, entries: list[tuple[str, str]]) -> str:
        return "mapOf(" + ", ".join(f"{k} to {v}" for k, v in entries) + ")"
