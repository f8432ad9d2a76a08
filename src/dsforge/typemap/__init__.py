"""
Cross-platform type mapping.

One mapper per target language family, looked up by platform id:

    react, vue, angular, svelte   TypeScript (framework flavor)
    css, tailwind                 TypeScript (DOM flavor, for .d.ts artifacts)
    flutter                       Dart
    ios-swift                     Swift
    android-kotlin                Kotlin
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..core.errors import UnknownPlatformError
from ..core.ir.types import CustomType
from .base import TypeContext, TypeMapper
from .dart import DartMapper
from .kotlin import KotlinMapper
from .swift import SwiftMapper
from .typescript import TypeScriptMapper

_MAPPERS: dict[str, Callable[[], TypeMapper]] = {
    "react": lambda: TypeScriptMapper("react"),
    "vue": lambda: TypeScriptMapper("vue"),
    "angular": lambda: TypeScriptMapper("angular"),
    "svelte": lambda: TypeScriptMapper("svelte"),
    "css": lambda: TypeScriptMapper("css", flavor="dom"),
    "tailwind": lambda: TypeScriptMapper("tailwind", flavor="dom"),
    "flutter": DartMapper,
    "ios-swift": SwiftMapper,
    "android-kotlin": KotlinMapper,
}


def mapped_platforms() -> list[str]:
    return list(_MAPPERS.keys())


def get_type_mapper(platform: str) -> TypeMapper:
    """
    Get the mapper for a built-in platform.

    Raises:
        UnknownPlatformError: If no mapping table exists for the platform
    """
    factory = _MAPPERS.get(platform)
    if factory is None:
        raise UnknownPlatformError(platform, list(_MAPPERS))
    return factory()


def map_type(
    descriptor: Any, platform: str, context: TypeContext | None = None, hint: str = "Value"
) -> str:
    """
    Map a type descriptor to a platform type expression.

    Raises:
        UnmappableTypeError: If the combination has no mapping
    """
    return get_type_mapper(platform).map(descriptor, hint, context)


def default_literal(
    value: Any,
    descriptor: Any,
    platform: str,
    context: TypeContext | None = None,
    hint: str = "Value",
) -> str:
    """Render a default value in platform syntax."""
    return get_type_mapper(platform).literal(value, descriptor, hint, context)


def custom_values(descriptor: CustomType) -> list[str] | None:
    """Explicit values of a custom type, else its default enumeration."""
    return descriptor.resolved_values()


__all__ = [
    "DartMapper",
    "KotlinMapper",
    "SwiftMapper",
    "TypeContext",
    "TypeMapper",
    "TypeScriptMapper",
    "custom_values",
    "default_literal",
    "get_type_mapper",
    "map_type",
    "mapped_platforms",
]
