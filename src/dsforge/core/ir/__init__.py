"""
Intermediate representation for dsforge.

All IR types are immutable pydantic models. Input documents are validated
into these models once; adapters and generators only ever read them.
"""

from .components import (
    AccessibilitySpec,
    Announcement,
    ComponentCategory,
    ComponentSpecification,
    CompoundVariant,
    Deprecation,
    KeyboardPattern,
    PlatformSupport,
    PropDefinition,
    SimpleVariant,
    VariantDefinitions,
)
from .results import (
    DEFAULT_LOCALES,
    BuildTarget,
    ComponentFailure,
    FileKind,
    GeneratedComponent,
    GeneratedFile,
    PatternSnippet,
    Recommendations,
    TransformationOptions,
    TransformationResult,
    WcagLevel,
)
from .schema import TOKEN_LAYERS, TokenSystem, UniversalTokenSchema
from .types import (
    DEFAULT_CUSTOM_VALUES,
    KNOWN_CUSTOM_TYPES,
    ArrayType,
    ComplexKind,
    ComplexType,
    CustomType,
    FunctionParameter,
    FunctionSignature,
    ObjectField,
    ObjectType,
    PrimitiveKind,
    PrimitiveType,
    TypeDescriptor,
    TypeKind,
    UnionType,
    descriptor_kind,
    normalize_descriptor,
)

__all__ = [
    # Types
    "TypeKind",
    "PrimitiveKind",
    "ComplexKind",
    "PrimitiveType",
    "ComplexType",
    "CustomType",
    "UnionType",
    "ArrayType",
    "ObjectType",
    "ObjectField",
    "FunctionParameter",
    "FunctionSignature",
    "TypeDescriptor",
    "KNOWN_CUSTOM_TYPES",
    "DEFAULT_CUSTOM_VALUES",
    "descriptor_kind",
    "normalize_descriptor",
    # Components
    "ComponentCategory",
    "ComponentSpecification",
    "PropDefinition",
    "Deprecation",
    "SimpleVariant",
    "CompoundVariant",
    "VariantDefinitions",
    "KeyboardPattern",
    "Announcement",
    "AccessibilitySpec",
    "PlatformSupport",
    # Schema
    "TOKEN_LAYERS",
    "TokenSystem",
    "UniversalTokenSchema",
    # Results
    "DEFAULT_LOCALES",
    "BuildTarget",
    "WcagLevel",
    "FileKind",
    "TransformationOptions",
    "GeneratedFile",
    "ComponentFailure",
    "GeneratedComponent",
    "TransformationResult",
    "PatternSnippet",
    "Recommendations",
]
