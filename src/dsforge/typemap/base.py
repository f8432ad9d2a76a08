"""
Base class for platform type mappers.

A mapper turns a type descriptor into the source text of a type in one
target language. Targets without literal types synthesize named
declarations (enums, sealed unions, data classes) into a TypeContext, which
generators emit alongside the component.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from ..core.errors import UnmappableTypeError
from ..core.ir.types import (
    ArrayType,
    ComplexType,
    CustomType,
    ObjectType,
    PrimitiveKind,
    PrimitiveType,
    UnionType,
)

logger = logging.getLogger(__name__)


class TypeContext:
    """
    Collects declarations and imports synthesized while mapping.

    One context is used per generated component so that declarations land
    in that component's types file.
    """

    def __init__(self, owner: str = "") -> None:
        self.owner = owner
        self.declarations: dict[str, str] = {}
        self.imports: list[str] = []

    def declare(self, name: str, build: Callable[[str], str]) -> str:
        """
        Register a named declaration and return the name to use.

        ``build`` renders the declaration for a given name. Re-declaring an
        identical source is a no-op; a different source under a taken name
        gets a numeric suffix.
        """
        candidate = name
        suffix = 2
        while True:
            source = build(candidate)
            existing = self.declarations.get(candidate)
            if existing is None:
                self.declarations[candidate] = source
                return candidate
            if existing == source:
                return candidate
            candidate = f"{name}{suffix}"
            suffix += 1

    def add_import(self, line: str) -> None:
        if line not in self.imports:
            self.imports.append(line)

    def render_declarations(self) -> str:
        return "\n\n".join(self.declarations.values())


class TypeMapper(ABC):
    """
    Maps type descriptors to one target language.

    Subclasses implement one ``map_<kind>`` method per descriptor kind and
    ``literal`` for default values. ``map`` dispatches on the kind tag.
    """

    platform: str = ""
    language: str = ""

    def map(self, descriptor: Any, hint: str = "Value", context: TypeContext | None = None) -> str:
        """
        Map a descriptor to a type expression.

        Args:
            descriptor: Any TypeDescriptor model
            hint: PascalCase name used for synthesized declarations
            context: Collects synthesized declarations and imports

        Raises:
            UnmappableTypeError: If the descriptor has no mapping on this target
        """
        if context is None:
            context = TypeContext()
        handler = getattr(self, f"map_{descriptor.type}", None)
        if handler is None:
            raise self.unmappable(str(descriptor.type), str(descriptor.type))
        return handler(descriptor, hint, context)

    @abstractmethod
    def map_primitive(self, d: PrimitiveType, hint: str, context: TypeContext) -> str:
        pass

    @abstractmethod
    def map_complex(self, d: ComplexType, hint: str, context: TypeContext) -> str:
        pass

    @abstractmethod
    def map_custom(self, d: CustomType, hint: str, context: TypeContext) -> str:
        pass

    @abstractmethod
    def map_union(self, d: UnionType, hint: str, context: TypeContext) -> str:
        pass

    @abstractmethod
    def map_array(self, d: ArrayType, hint: str, context: TypeContext) -> str:
        pass

    @abstractmethod
    def map_object(self, d: ObjectType, hint: str, context: TypeContext) -> str:
        pass

    @abstractmethod
    def literal(
        self, value: Any, descriptor: Any, hint: str = "Value", context: TypeContext | None = None
    ) -> str:
        """Render a concrete value of ``descriptor`` in target syntax."""

    def optional(self, type_expr: str) -> str:
        """Nullable form of a type expression."""
        return f"{type_expr}?"

    def unmappable(self, kind: str, detail: str) -> UnmappableTypeError:
        logger.debug(f"No {self.platform} mapping for {kind} '{detail}'")
        return UnmappableTypeError(kind, detail, self.platform)

    def enum_values(self, d: Any) -> list[Any] | None:
        """Enumerated values of a primitive or custom descriptor, if any."""
        if isinstance(d, PrimitiveType):
            return list(d.enum) if d.enum else None
        if isinstance(d, CustomType):
            return d.resolved_values()
        return None

    def require_custom(self, d: CustomType, known: dict[str, str]) -> str | None:
        """
        Look up a custom name in a scalar table.

        Returns None when the name is enumerable (explicit or default values);
        raises when the name is neither in the table nor enumerable.
        """
        if d.custom in known and not d.values:
            return known[d.custom]
        if d.resolved_values():
            return None
        raise self.unmappable("custom", d.custom)

    @staticmethod
    def is_numeric(values: list[Any]) -> bool:
        return all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in values)

    @staticmethod
    def primitive_of(values: list[Any]) -> PrimitiveKind:
        if all(isinstance(v, bool) for v in values):
            return PrimitiveKind.BOOLEAN
        if TypeMapper.is_numeric(values):
            return PrimitiveKind.NUMBER
        return PrimitiveKind.STRING
