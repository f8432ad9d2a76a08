"""
TypeScript type mapping.

Shared by every web target. Framework flavors differ only in how
renderable nodes, elements and refs are typed and which imports that needs.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
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
from ..naming import pascal_case
from .base import TypeContext, TypeMapper

_PRIMITIVES = {
    PrimitiveKind.STRING: "string",
    PrimitiveKind.NUMBER: "number",
    PrimitiveKind.BOOLEAN: "boolean",
}

_CUSTOM_SCALARS = {
    "color": "string",
    "email": "string",
    "url": "string",
}


@dataclass(frozen=True)
class TSFlavor:
    """Framework-specific spellings of the framework-level complex kinds."""

    node: str
    element: str
    ref: str
    imports: tuple[str, ...] = ()


FLAVORS: dict[str, TSFlavor] = {
    "react": TSFlavor(
        node="React.ReactNode",
        element="React.ReactElement",
        ref="React.Ref<HTMLElement>",
        imports=("import type * as React from 'react';",),
    ),
    "vue": TSFlavor(
        node="VNode",
        element="VNode",
        ref="Ref<HTMLElement | null>",
        imports=("import type { Ref, VNode } from 'vue';",),
    ),
    "angular": TSFlavor(
        node="TemplateRef<unknown>",
        element="TemplateRef<unknown>",
        ref="ElementRef<HTMLElement>",
        imports=("import type { ElementRef, TemplateRef } from '@angular/core';",),
    ),
    "svelte": TSFlavor(
        node="Snippet",
        element="Snippet",
        ref="HTMLElement",
        imports=("import type { Snippet } from 'svelte';",),
    ),
    "dom": TSFlavor(node="Node", element="HTMLElement", ref="HTMLElement | null"),
}


def ts_string(value: str) -> str:
    """Single-quoted TypeScript string literal."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'").replace("\n", "\\n")
    return f"'{escaped}'"


def ts_key(name: str) -> str:
    return name if name.isidentifier() else ts_string(name)


class TypeScriptMapper(TypeMapper):
    """TypeScript mapper for one framework flavor."""

    language = "typescript"

    def __init__(self, platform: str, flavor: str | None = None) -> None:
        self.platform = platform
        self.flavor = FLAVORS[flavor or platform]

    def _use_flavor(self, context: TypeContext) -> None:
        for line in self.flavor.imports:
            context.add_import(line)

    def _literal_union(self, values: list[Any]) -> str:
        return " | ".join(self.literal(v, None) for v in values)

    def map_primitive(self, d: PrimitiveType, hint: str, context: TypeContext) -> str:
        if d.enum:
            return self._literal_union(list(d.enum))
        return _PRIMITIVES[d.primitive]

    def map_complex(self, d: ComplexType, hint: str, context: TypeContext) -> str:
        kind = d.complex
        if kind == ComplexKind.FUNCTION:
            return self._function(d, hint, context)
        if kind == ComplexKind.DATE:
            return "Date"
        if kind == ComplexKind.FILE:
            return "File"
        self._use_flavor(context)
        if kind == ComplexKind.NODE:
            return self.flavor.node
        if kind == ComplexKind.ELEMENT:
            return self.flavor.element
        if kind == ComplexKind.REF:
            return self.flavor.ref
        raise self.unmappable("complex", str(kind.value))

    def _function(self, d: ComplexType, hint: str, context: TypeContext) -> str:
        if d.signature is None:
            return "() => void"
        params = []
        for p in d.signature.parameters:
            ptype = self.map(p.type, f"{hint}{pascal_case(p.name)}", context)
            params.append(f"{p.name}{'' if p.required else '?'}: {ptype}")
        returns = (
            self.map(d.signature.returns, f"{hint}Result", context)
            if d.signature.returns is not None
            else "void"
        )
        return f"({', '.join(params)}) => {returns}"

    def map_custom(self, d: CustomType, hint: str, context: TypeContext) -> str:
        scalar = self.require_custom(d, _CUSTOM_SCALARS)
        if scalar is not None:
            return scalar
        return self._literal_union(d.resolved_values() or [])

    def map_union(self, d: UnionType, hint: str, context: TypeContext) -> str:
        parts: list[str] = []
        for member in d.members:
            mapped = self.map(member, hint, context)
            if "=>" in mapped:
                mapped = f"({mapped})"
            if mapped not in parts:
                parts.append(mapped)
        return " | ".join(parts)

    def map_array(self, d: ArrayType, hint: str, context: TypeContext) -> str:
        return f"ReadonlyArray<{self.map(d.items, f'{hint}Item', context)}>"

    def map_object(self, d: ObjectType, hint: str, context: TypeContext) -> str:
        if not d.fields:
            return "Record<string, never>" if d.strict else "Record<string, unknown>"
        members = []
        for name, f in d.fields.items():
            ftype = self.map(f.type, f"{hint}{pascal_case(name)}", context)
            members.append(f"readonly {ts_key(name)}{'' if f.required else '?'}: {ftype};")
        if not d.strict:
            members.append("[key: string]: unknown;")
        return "{ " + " ".join(members) + " }"

    def literal(
        self, value: Any, descriptor: Any, hint: str = "Value", context: TypeContext | None = None
    ) -> str:
        if value is None:
            return "undefined"
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return json.dumps(value)
        if isinstance(value, str):
            return ts_string(value)
        if isinstance(value, (list, tuple)):
            return "[" + ", ".join(self.literal(v, None) for v in value) + "]"
        if isinstance(value, dict):
            body = ", ".join(f"{ts_key(str(k))}: {self.literal(v, None)}" for k, v in value.items())
            return "{ " + body + " }" if body else "{}"
        return ts_string(str(value))

    def optional(self, type_expr: str) -> str:
        return f"{type_expr} | undefined"
