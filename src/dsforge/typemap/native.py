"""
Shared mapping algorithm for native targets (Dart, Swift, Kotlin).

These languages have no literal types, so enumerations become named enums,
heterogeneous unions become sealed sum types and strict objects become data
classes. Subclasses provide the tables and the rendering of each
declaration form.
"""

from __future__ import annotations

import json
import re
from abc import abstractmethod
from typing import Any

from ..core.ir.types import (
    ArrayType,
    ComplexKind,
    ComplexType,
    CustomType,
    ObjectType,
    PrimitiveKind,
    PrimitiveType,
    UnionType,
)
from ..naming import identifier, pascal_case
from .base import TypeContext, TypeMapper

_HEX_COLOR = re.compile(r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def parse_hex_color(value: str) -> tuple[int, int, int, int] | None:
    """Parse #rgb / #rrggbb / #rrggbbaa into (r, g, b, a) bytes."""
    match = _HEX_COLOR.match(value.strip())
    if not match:
        return None
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    if len(digits) == 6:
        digits += "ff"
    r, g, b, a = (int(digits[i : i + 2], 16) for i in range(0, 8, 2))
    return r, g, b, a


class NativeTypeMapper(TypeMapper):
    """Template-method mapper; subclasses fill in tables and renderers."""

    primitives: dict[PrimitiveKind, str] = {}
    custom_scalars: dict[str, str] = {}
    complex_types: dict[ComplexKind, str] = {}
    # Imports needed when a table entry is used, keyed by the mapped type text
    type_imports: dict[str, str] = {}
    integer_type = "int"
    array_template = "List<{}>"
    open_object = "Map<String, Any?>"
    null_literal = "null"
    case_style = "camel"

    # ------------------------------------------------------------------
    # Renderers
    # ------------------------------------------------------------------

    @abstractmethod
    def render_enum(self, name: str, cases: list[tuple[str, str]], raw_type: str) -> str:
        """Enum declaration from (case identifier, raw value literal) pairs."""

    @abstractmethod
    def render_sum(self, name: str, cases: list[tuple[str, str]]) -> str:
        """Sum type declaration from (case identifier, payload type) pairs."""

    @abstractmethod
    def render_struct(self, name: str, fields: list[tuple[str, str, bool]]) -> str:
        """Data class from (field name, type, required) triples."""

    @abstractmethod
    def function_type(self, params: list[tuple[str, str, bool]], returns: str | None) -> str:
        pass

    @abstractmethod
    def string_literal(self, value: str) -> str:
        pass

    @abstractmethod
    def enum_member(self, type_name: str, case: str) -> str:
        pass

    @abstractmethod
    def color_literal(self, rgba: tuple[int, int, int, int]) -> str:
        pass

    def url_literal(self, value: str) -> str:
        return self.string_literal(value)

    def number_literal(self, value: int | float, as_float: bool) -> str:
        if as_float and isinstance(value, int):
            return f"{value}.0"
        return json.dumps(value)

    def list_literal(self, items: list[str]) -> str:
        return "[" + ", ".join(items) + "]"

    def map_literal(self, entries: list[tuple[str, str]]) -> str:
        return "{" + ", ".join(f"{k}: {v}" for k, v in entries) + "}"

    def case_name(self, value: Any) -> str:
        return identifier(str(value), self.case_style)

    def sum_case_name(self, type_expr: str) -> str:
        return identifier(re.sub(r"[^A-Za-z0-9]+", " ", type_expr), self.case_style)

    def enum_case_names(self, values: list[Any]) -> list[str]:
        """Case identifiers for enum values, in order and unique."""
        if self.primitive_of(values) == PrimitiveKind.NUMBER:
            words = [
                f"value {v}".replace("-", " minus ").replace(".", " point ") for v in values
            ]
            return self.unique_case_names([self.case_name(w) for w in words])
        return self.unique_case_names([self.case_name(v) for v in values])

    def unique_case_names(self, names: list[str]) -> list[str]:
        """Suffix repeated identifiers with 2, 3, ... so every case is distinct."""
        separator = "_" if self.case_style == "constant" else ""
        seen: set[str] = set()
        result = []
        for name in names:
            candidate = name
            counter = 2
            while candidate in seen:
                candidate = f"{name.strip('`')}{separator}{counter}"
                counter += 1
            seen.add(candidate)
            result.append(candidate)
        return result

    # ------------------------------------------------------------------
    # Mapping
    # ------------------------------------------------------------------

    def _table(self, mapped: str, context: TypeContext) -> str:
        imp = self.type_imports.get(mapped)
        if imp:
            context.add_import(imp)
        return mapped

    def _enum(self, hint: str, values: list[Any], context: TypeContext) -> str:
        kind = self.primitive_of(values)
        if kind == PrimitiveKind.BOOLEAN:
            return self.primitives[PrimitiveKind.BOOLEAN]
        if kind == PrimitiveKind.NUMBER:
            integral = all(isinstance(v, int) for v in values)
            raw_type = self.integer_type if integral else self.primitives[kind]
            raws = [json.dumps(v if integral else float(v)) for v in values]
        else:
            raw_type = self.primitives[PrimitiveKind.STRING]
            raws = [self.string_literal(str(v)) for v in values]
        cases = list(zip(self.enum_case_names(values), raws))
        return context.declare(hint, lambda name: self.render_enum(name, cases, raw_type))

    def map_primitive(self, d: PrimitiveType, hint: str, context: TypeContext) -> str:
        if d.enum:
            return self._enum(hint, list(d.enum), context)
        return self.primitives[d.primitive]

    def map_complex(self, d: ComplexType, hint: str, context: TypeContext) -> str:
        if d.complex == ComplexKind.FUNCTION:
            if d.signature is None:
                return self.function_type([], None)
            params = [
                (p.name, self.map(p.type, f"{hint}{pascal_case(p.name)}", context), p.required)
                for p in d.signature.parameters
            ]
            returns = (
                self.map(d.signature.returns, f"{hint}Result", context)
                if d.signature.returns is not None
                else None
            )
            return self.function_type(params, returns)
        mapped = self.complex_types.get(d.complex)
        if mapped is None:
            raise self.unmappable("complex", d.complex.value)
        return self._table(mapped, context)

    def map_custom(self, d: CustomType, hint: str, context: TypeContext) -> str:
        scalar = self.require_custom(d, self.custom_scalars)
        if scalar is not None:
            return self._table(scalar, context)
        return self._enum(hint, d.resolved_values() or [], context)

    def map_union(self, d: UnionType, hint: str, context: TypeContext) -> str:
        mapped: list[str] = []
        for index, member in enumerate(d.members):
            member_type = self.map(member, f"{hint}Option{index + 1}", context)
            if member_type not in mapped:
                mapped.append(member_type)
        if len(mapped) == 1:
            return mapped[0]
        names = self.unique_case_names([self.sum_case_name(t) for t in mapped])
        cases = list(zip(names, mapped))
        return context.declare(hint, lambda name: self.render_sum(name, cases))

    def map_array(self, d: ArrayType, hint: str, context: TypeContext) -> str:
        return self.array_template.format(self.map(d.items, f"{hint}Item", context))

    def map_object(self, d: ObjectType, hint: str, context: TypeContext) -> str:
        if not d.strict or not d.fields:
            return self.open_object
        fields = [
            (name, self.map(f.type, f"{hint}{pascal_case(name)}", context), f.required)
            for name, f in d.fields.items()
        ]
        return context.declare(hint, lambda name: self.render_struct(name, fields))

    # ------------------------------------------------------------------
    # Literals
    # ------------------------------------------------------------------

    def literal(
        self, value: Any, descriptor: Any, hint: str = "Value", context: TypeContext | None = None
    ) -> str:
        if context is None:
            context = TypeContext()
        if value is None:
            return self.null_literal

        values = self.enum_values(descriptor) if descriptor is not None else None
        if values and value in values and self.primitive_of(values) != PrimitiveKind.BOOLEAN:
            type_name = self.map(descriptor, hint, context)
            case = self.enum_case_names(values)[values.index(value)]
            return self.enum_member(type_name, case)

        if isinstance(descriptor, CustomType) and isinstance(value, str):
            if descriptor.custom == "color":
                rgba = parse_hex_color(value)
                if rgba is not None:
                    return self.color_literal(rgba)
            if descriptor.custom == "url":
                return self.url_literal(value)

        return self._plain_literal(value, descriptor)

    def _plain_literal(self, value: Any, descriptor: Any) -> str:
        if value is None:
            return self.null_literal
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            as_float = (
                isinstance(descriptor, PrimitiveType)
                and descriptor.primitive == PrimitiveKind.NUMBER
            )
            return self.number_literal(value, as_float)
        if isinstance(value, str):
            return self.string_literal(value)
        if isinstance(value, (list, tuple)):
            item = descriptor.items if isinstance(descriptor, ArrayType) else None
            return self.list_literal([self._plain_literal(v, item) for v in value])
        if isinstance(value, dict):
            entries = [
                (self.string_literal(str(k)), self._plain_literal(v, None)) for k, v in value.items()
            ]
            return self.map_literal(entries)
        return self.string_literal(str(value))
