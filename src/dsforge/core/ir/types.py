"""
Type descriptors for component props.

A type descriptor is a tagged union on ``type``:

    - primitive: string / number / boolean, optionally restricted by ``enum``
    - complex:   function / node / element / ref / date / file
    - custom:    named domain type (color, size, variant, ...) with optional values
    - union:     ordered list of member descriptors
    - array:     element descriptor plus length / uniqueness constraints
    - object:    named fields, strict or open

Input documents may use shorthand; ``normalize_descriptor`` rewrites every
accepted form into the canonical mapping before validation:

    "string"                         -> {"type": "primitive", "primitive": "string"}
    "color"                          -> {"type": "custom", "custom": "color"}
    {"type": "function", ...}        -> {"type": "complex", "complex": "function", ...}
    {"union": [...]}                 -> {"type": "union", "members": [...]}
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


class TypeKind(str, Enum):
    """The six descriptor kinds."""

    PRIMITIVE = "primitive"
    COMPLEX = "complex"
    CUSTOM = "custom"
    UNION = "union"
    ARRAY = "array"
    OBJECT = "object"


class PrimitiveKind(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"


class ComplexKind(str, Enum):
    FUNCTION = "function"
    NODE = "node"
    ELEMENT = "element"
    REF = "ref"
    DATE = "date"
    FILE = "file"


# Custom names every built-in mapper knows without explicit values
KNOWN_CUSTOM_TYPES = ("color", "size", "variant", "breakpoint", "locale", "email", "url")

# Platform-agnostic default enumerations for value-carrying custom types
DEFAULT_CUSTOM_VALUES: dict[str, tuple[str, ...]] = {
    "size": ("xs", "sm", "md", "lg", "xl"),
    "variant": ("primary", "secondary", "success", "warning", "error"),
    "breakpoint": ("mobile", "tablet", "desktop", "wide", "ultra"),
    "locale": ("nb-NO", "nn-NO", "en-US", "fr-FR", "ar-SA"),
}

_PRIMITIVE_NAMES = {k.value for k in PrimitiveKind}
_COMPLEX_NAMES = {k.value for k in ComplexKind}

# Kind name -> canonical field holding its payload, for `{"union": [...]}` style input
_KIND_PAYLOAD_KEYS: dict[str, str | None] = {
    "primitive": None,
    "complex": None,
    "custom": None,
    "union": "members",
    "array": "items",
    "object": "fields",
}


EnumValue = Union[str, int, float, bool]


class PrimitiveType(BaseModel):
    """string / number / boolean, optionally restricted to an enumeration."""

    type: Literal["primitive"] = "primitive"
    primitive: PrimitiveKind
    enum: list[EnumValue] | None = None

    model_config = ConfigDict(frozen=True)


class FunctionParameter(BaseModel):
    name: str
    type: TypeDescriptor
    required: bool = True

    model_config = ConfigDict(frozen=True)


class FunctionSignature(BaseModel):
    """Callback signature. ``returns`` of None means no return value."""

    parameters: list[FunctionParameter] = Field(default_factory=list)
    returns: TypeDescriptor | None = None

    model_config = ConfigDict(frozen=True)


class ComplexType(BaseModel):
    """Framework-level values: callbacks, renderable nodes, refs, dates, files."""

    type: Literal["complex"] = "complex"
    complex: ComplexKind
    signature: FunctionSignature | None = None

    model_config = ConfigDict(frozen=True)


class CustomType(BaseModel):
    """
    Named domain type.

    ``values`` overrides the default enumeration for value-carrying names
    (size, variant, breakpoint, locale) and makes unknown names mappable.
    """

    type: Literal["custom"] = "custom"
    custom: str
    values: list[str] | None = None

    model_config = ConfigDict(frozen=True)

    def resolved_values(self) -> list[str] | None:
        """Explicit values, else the platform-agnostic default, else None."""
        if self.values:
            return list(self.values)
        defaults = DEFAULT_CUSTOM_VALUES.get(self.custom)
        return list(defaults) if defaults else None


class UnionType(BaseModel):
    type: Literal["union"] = "union"
    members: list[TypeDescriptor] = Field(min_length=1)

    model_config = ConfigDict(frozen=True)


class ArrayType(BaseModel):
    type: Literal["array"] = "array"
    items: TypeDescriptor
    min_items: int | None = None
    max_items: int | None = None
    unique_items: bool = False

    model_config = ConfigDict(frozen=True)


class ObjectField(BaseModel):
    type: TypeDescriptor
    required: bool = True
    description: str | None = None

    model_config = ConfigDict(frozen=True)


class ObjectType(BaseModel):
    """Structured value. Non-strict objects accept extra keys."""

    type: Literal["object"] = "object"
    fields: dict[str, ObjectField] = Field(default_factory=dict)
    strict: bool = True

    model_config = ConfigDict(frozen=True)


def _normalize_field(value: Any) -> Any:
    # Object fields may be bare descriptors instead of {type, required}
    if isinstance(value, ObjectField):
        return value
    if isinstance(value, dict) and "type" in value and _looks_like_field(value):
        return value
    return {"type": value}


def _looks_like_field(value: dict[str, Any]) -> bool:
    if not set(value) <= {"type", "required", "description"}:
        return False
    inner = value["type"]
    if isinstance(inner, (dict, BaseModel)):
        return True
    # {"type": "string", "required": False} is a field; {"type": "primitive", ...} is a descriptor
    return inner not in _KIND_PAYLOAD_KEYS


def normalize_descriptor(value: Any) -> Any:
    """
    Rewrite shorthand descriptor input into canonical form.

    Already-built descriptor models pass through untouched. Anything that
    cannot be recognised is returned as-is so pydantic reports the error.
    """
    if isinstance(value, BaseModel):
        return value

    if isinstance(value, str):
        if value in _PRIMITIVE_NAMES:
            return {"type": "primitive", "primitive": value}
        if value in _COMPLEX_NAMES:
            return {"type": "complex", "complex": value}
        if value in _KIND_PAYLOAD_KEYS:
            # Bare "union" / "array" / "object" carry no payload
            return {"type": value}
        return {"type": "custom", "custom": value}

    if not isinstance(value, dict):
        return value

    data = dict(value)
    kind = data.get("type")

    if kind is None:
        for key in _KIND_PAYLOAD_KEYS:
            if key in data:
                kind = key
                data["type"] = key
                break
        else:
            return data
    elif not isinstance(kind, str):
        return data
    elif kind in _PRIMITIVE_NAMES:
        data["type"] = "primitive"
        data["primitive"] = kind
        kind = "primitive"
    elif kind in _COMPLEX_NAMES:
        data["type"] = "complex"
        data["complex"] = kind
        kind = "complex"
    elif kind not in _KIND_PAYLOAD_KEYS:
        data["type"] = "custom"
        data["custom"] = kind
        kind = "custom"

    payload_field = _KIND_PAYLOAD_KEYS[kind]
    if payload_field and kind in data:
        data.setdefault(payload_field, data.pop(kind))

    if kind == "object" and isinstance(data.get("fields"), dict):
        data["fields"] = {name: _normalize_field(f) for name, f in data["fields"].items()}

    return data


TypeDescriptor = Annotated[
    Union[PrimitiveType, ComplexType, CustomType, UnionType, ArrayType, ObjectType],
    BeforeValidator(normalize_descriptor),
]


def descriptor_kind(descriptor: BaseModel) -> TypeKind:
    """Return the kind tag of a descriptor model."""
    return TypeKind(descriptor.type)  # type: ignore[attr-defined]


FunctionParameter.model_rebuild()
FunctionSignature.model_rebuild()
ComplexType.model_rebuild()
UnionType.model_rebuild()
ArrayType.model_rebuild()
ObjectField.model_rebuild()
ObjectType.model_rebuild()
