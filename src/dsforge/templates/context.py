"""
Template data context.

Everything a template or fallback generator needs about one component on
one platform: names in every case style, mapped props with rendered
defaults, variants, accessibility data, feature and platform flags, and
the type declarations synthesized while mapping.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from ..core.errors import UnmappableTypeError, make_component_error
from ..core.ir.components import ComponentSpecification, Deprecation, KeyboardPattern
from ..core.ir.results import TransformationOptions
from ..core.ir.types import ComplexKind, ComplexType
from ..naming import camel_case, kebab_case, pascal_case, snake_case
from ..typemap.base import TypeContext, TypeMapper

logger = logging.getLogger(__name__)

BUILTIN_PLATFORMS = (
    "react",
    "vue",
    "angular",
    "svelte",
    "flutter",
    "ios-swift",
    "android-kotlin",
    "css",
    "tailwind",
)


@dataclass
class PropContext:
    name: str
    type: str
    optional_type: str
    required: bool
    kind: str
    default: str | None = None
    raw_default: Any = None
    description: str | None = None
    deprecated: Deprecation | None = None
    values: list[Any] | None = None
    type_kind: ComplexKind | None = None

    @property
    def declared_type(self) -> str:
        """Type to declare: nullable unless required or defaulted."""
        return self.type if self.required or self.default is not None else self.optional_type

    @property
    def is_slot(self) -> bool:
        """Renderable content (children, icons, headers)."""
        return self.kind == "complex" and self.type_kind in (ComplexKind.NODE, ComplexKind.ELEMENT)

    @property
    def is_callback(self) -> bool:
        return self.kind == "complex" and self.type_kind == ComplexKind.FUNCTION


@dataclass
class ComponentContext:
    """Per-component, per-platform template data."""

    spec: ComponentSpecification
    platform: str
    options: TransformationOptions
    props: list[PropContext]
    types: TypeContext
    variants: dict[str, list[str]] = field(default_factory=dict)
    variant_defaults: dict[str, str] = field(default_factory=dict)

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def kebab(self) -> str:
        return kebab_case(self.spec.name)

    @property
    def snake(self) -> str:
        return snake_case(self.spec.name)

    @property
    def camel(self) -> str:
        return camel_case(self.spec.name)

    @property
    def category(self) -> str:
        return self.spec.category.value

    @property
    def role(self) -> str:
        return self.spec.accessibility.role

    @property
    def keyboard(self) -> list[KeyboardPattern]:
        return list(self.spec.accessibility.keyboard)

    @property
    def i18n_key(self) -> str:
        return self.kebab

    @property
    def slot_props(self) -> list[PropContext]:
        return [p for p in self.props if p.is_slot]

    @property
    def value_props(self) -> list[PropContext]:
        return [p for p in self.props if not p.is_slot and not p.is_callback]

    def prop(self, name: str) -> PropContext | None:
        for p in self.props:
            if p.name == name:
                return p
        return None

    def template_data(self) -> dict[str, Any]:
        """Top-level variables exposed to Jinja templates."""
        a11y = self.spec.accessibility
        level = self.options.accessibility.value
        data: dict[str, Any] = {
            "ctx": self,
            "name": self.name,
            "component_name": pascal_case(self.name),
            "class_name": self.kebab,
            "kebab_name": self.kebab,
            "snake_name": self.snake,
            "category": self.category,
            "description": self.spec.description or "",
            "props": self.props,
            "variants": self.variants,
            "variant_defaults": self.variant_defaults,
            "compound_variants": list(self.spec.variants.compound),
            "role": a11y.role,
            "keyboard": list(a11y.keyboard),
            "announcements": list(a11y.announcements),
            "focus_trap": a11y.focus_trap,
            "accessibility": {
                "level": level,
                "is_aa": level in ("wcag-aa", "wcag-aaa"),
                "is_aaa": level == "wcag-aaa",
            },
            "features": list(self.options.features),
            "target": self.options.target.value,
            "is_production": self.options.target.value == "production",
            "optimization": self.options.optimization,
            "locales": list(self.options.locales),
            "i18n_key": self.i18n_key,
            "type_imports": list(self.types.imports),
            "type_declarations": self.types.render_declarations(),
            "platform": self.platform,
        }
        for platform in BUILTIN_PLATFORMS:
            data[f"is_{snake_case(platform)}"] = platform == self.platform
        return data


def build_component_context(
    spec: ComponentSpecification,
    platform: str,
    mapper: TypeMapper,
    options: TransformationOptions | None = None,
    overrides: dict[str, Any] | None = None,
) -> ComponentContext:
    """
    Map every prop of ``spec`` for ``platform``.

    Args:
        overrides: Default-value overrides keyed by prop name

    Raises:
        UnmappableTypeError: If a prop type has no mapping on the platform
        InvalidSpecificationError: If an override names an unknown prop
    """
    options = options or TransformationOptions()
    overrides = overrides or {}
    unknown = sorted(set(overrides) - set(spec.props))
    if unknown:
        raise make_component_error(spec.name, f"unknown prop override(s): {unknown}", platform)

    types = TypeContext(owner=spec.name)
    props: list[PropContext] = []
    for prop_name, prop in spec.props.items():
        hint = f"{spec.name}{pascal_case(prop_name)}"
        try:
            mapped = mapper.map(prop.type, hint, types)
            raw_default = overrides.get(prop_name, prop.default)
            default = (
                mapper.literal(raw_default, prop.type, hint, types)
                if raw_default is not None
                else None
            )
        except UnmappableTypeError as e:
            raise UnmappableTypeError(e.kind, e.detail, e.platform, component=spec.name) from e

        descriptor = prop.type
        props.append(
            PropContext(
                name=prop_name,
                type=mapped,
                optional_type=mapper.optional(mapped),
                required=prop.required,
                kind=descriptor.type,
                default=default,
                raw_default=raw_default,
                description=prop.description,
                deprecated=prop.deprecated,
                values=mapper.enum_values(descriptor),
                type_kind=descriptor.complex if isinstance(descriptor, ComplexType) else None,
            )
        )

    variants = {axis: list(v.values) for axis, v in spec.variants.simple.items()}
    variant_defaults = {
        axis: v.default or v.values[0] for axis, v in spec.variants.simple.items()
    }
    logger.debug(f"Built {platform} context for {spec.name} ({len(props)} props)")
    return ComponentContext(
        spec=spec,
        platform=platform,
        options=options,
        props=props,
        types=types,
        variants=variants,
        variant_defaults=variant_defaults,
    )
