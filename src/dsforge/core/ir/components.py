"""
Component specification types.

A component specification is the platform-neutral description of one UI
component: its props, variant axes, accessibility contract and the
platforms it supports.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from .types import TypeDescriptor, TypeKind

# Prop-level keys that belong to the descriptor when ``type`` is given as a kind name
_DESCRIPTOR_KEYS = (
    "primitive",
    "complex",
    "custom",
    "enum",
    "values",
    "signature",
    "union",
    "members",
    "array",
    "items",
    "min_items",
    "max_items",
    "unique_items",
    "object",
    "fields",
    "strict",
)


class ComponentCategory(str, Enum):
    """Broad component families. Drives element choice and template folders."""

    LAYOUT = "layout"
    FORM = "form"
    NAVIGATION = "navigation"
    FEEDBACK = "feedback"
    DATA_DISPLAY = "data-display"
    INTERACTIVE = "interactive"
    SPECIALIZED = "specialized"


class Deprecation(BaseModel):
    since: str
    reason: str
    alternative: str | None = None

    model_config = ConfigDict(frozen=True)


class PropDefinition(BaseModel):
    """
    One component prop.

    ``type`` accepts any descriptor shorthand. Descriptor fields may also be
    lifted to the prop itself, e.g. ``{"type": "custom", "custom": "size"}``
    or ``{"type": "string", "enum": ["a", "b"]}``.
    """

    type: TypeDescriptor
    description: str | None = None
    required: bool = False
    default: Any = None
    examples: list[Any] = Field(default_factory=list)
    deprecated: Deprecation | None = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def lift_descriptor_fields(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"type": data}
        if not isinstance(data, dict) or not isinstance(data.get("type"), str):
            return data
        lifted = {k: data[k] for k in _DESCRIPTOR_KEYS if k in data}
        if not lifted:
            return data
        rest = {k: v for k, v in data.items() if k not in lifted}
        rest["type"] = {"type": data["type"], **lifted}
        return rest

    @model_validator(mode="before")
    @classmethod
    def accept_default_value_alias(cls, data: Any) -> Any:
        if isinstance(data, dict) and "defaultValue" in data and "default" not in data:
            data = dict(data)
            data["default"] = data.pop("defaultValue")
        return data

    @property
    def kind(self) -> TypeKind:
        return TypeKind(self.type.type)

    @property
    def has_default(self) -> bool:
        return self.default is not None


class SimpleVariant(BaseModel):
    """One variant axis, e.g. size: [sm, md, lg]."""

    values: list[str] = Field(min_length=1)
    default: str | None = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def accept_bare_list(cls, data: Any) -> Any:
        if isinstance(data, list):
            return {"values": data}
        if isinstance(data, dict) and "defaultValue" in data and "default" not in data:
            data = dict(data)
            data["default"] = data.pop("defaultValue")
        return data


class CompoundVariant(BaseModel):
    """Styling applied when several prop values hold at once."""

    conditions: dict[str, Any]
    class_name: str = Field(validation_alias=AliasChoices("class_name", "className"))
    description: str | None = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class VariantDefinitions(BaseModel):
    simple: dict[str, SimpleVariant] = Field(default_factory=dict)
    compound: list[CompoundVariant] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class KeyboardPattern(BaseModel):
    key: str
    action: str

    model_config = ConfigDict(frozen=True)


class Announcement(BaseModel):
    """Screen-reader announcement fired on a trigger."""

    trigger: str
    message: str
    priority: Literal["polite", "assertive"] = "polite"

    model_config = ConfigDict(frozen=True)


class AccessibilitySpec(BaseModel):
    role: str
    keyboard: list[KeyboardPattern] = Field(default_factory=list)
    announcements: list[Announcement] = Field(default_factory=list)
    focus_trap: bool = False

    model_config = ConfigDict(frozen=True)


class PlatformSupport(BaseModel):
    """Platforms a component targets. Empty means every platform."""

    supported: list[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def accept_bare_list(cls, data: Any) -> Any:
        if isinstance(data, list):
            return {"supported": data}
        return data

    def supports(self, platform: str) -> bool:
        return not self.supported or platform in self.supported


class ComponentSpecification(BaseModel):
    """
    Platform-neutral component description.

    Examples:
        ComponentSpecification(
            name="Button",
            category=ComponentCategory.INTERACTIVE,
            props={"size": {"type": "custom", "custom": "size"}},
            accessibility={"role": "button"},
        )
    """

    name: str
    category: ComponentCategory
    description: str | None = None
    props: dict[str, PropDefinition] = Field(default_factory=dict)
    variants: VariantDefinitions = Field(default_factory=VariantDefinitions)
    accessibility: AccessibilitySpec
    platforms: PlatformSupport = Field(default_factory=PlatformSupport)

    model_config = ConfigDict(frozen=True)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Component name must not be empty")
        return v

    def supports(self, platform: str) -> bool:
        """Whether this component should be generated for ``platform``."""
        return self.platforms.supports(platform)

    def required_props(self) -> list[str]:
        return [name for name, prop in self.props.items() if prop.required]
