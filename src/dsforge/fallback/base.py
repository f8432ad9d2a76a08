"""
Base class for fallback generators.

A fallback generator is the per-platform strategy used when no template
exists for a component. It synthesizes an idiomatic stub (props contract,
base rendering, localization hook) and the supporting sources the
artifact assembler packages: types, styles, tests and stories.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..templates.context import ComponentContext, PropContext


@dataclass(frozen=True)
class PlatformProfile:
    """
    File layout and conventions of one platform.

    Path patterns accept ``{name}`` (PascalCase), ``{kebab}``, ``{snake}``
    and, for locale files, ``{locale}``. A None pattern means the platform
    has no such artifact.
    """

    platform: str
    language: str
    extension: str
    component_path: str
    test_path: str
    locale_path: str
    types_path: str | None = None
    styles_path: str | None = None
    story_path: str | None = None
    comment: str = "//"

    def path(self, pattern: str, ctx: ComponentContext, locale: str | None = None) -> str:
        return pattern.format(name=ctx.name, kebab=ctx.kebab, snake=ctx.snake, locale=locale or "")


class FallbackGenerator(ABC):
    """Per-platform stub and supporting-file generator."""

    profile: PlatformProfile

    @abstractmethod
    def component(self, ctx: ComponentContext) -> str:
        """Idiomatic component stub containing every prop and a localization hook."""

    def types_file(self, ctx: ComponentContext) -> str | None:
        """Types module for the component, or None when there is nothing to declare."""
        declarations = ctx.types.render_declarations()
        if not declarations:
            return None
        return self.with_imports(ctx, declarations)

    def styles_file(self, ctx: ComponentContext) -> str | None:
        return None

    @abstractmethod
    def test_file(self, ctx: ComponentContext) -> str:
        pass

    def story_file(self, ctx: ComponentContext) -> str | None:
        return None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def header(self, ctx: ComponentContext) -> str:
        c = self.profile.comment
        line = f"{c} {ctx.name} ({ctx.category}) generated by dsforge for {ctx.platform}."
        if ctx.spec.description:
            line += f"\n{c} {ctx.spec.description}"
        return line

    def with_imports(self, ctx: ComponentContext, body: str, extra: list[str] | None = None) -> str:
        imports = list(ctx.types.imports)
        for line in extra or []:
            if line not in imports:
                imports.append(line)
        if not imports:
            return body.rstrip() + "\n"
        return "\n".join(imports) + "\n\n" + body.rstrip() + "\n"

    def doc_comment(self, prop: PropContext, indent: str = "  ") -> str:
        """Doc comment for a prop, including deprecation, or an empty string."""
        lines: list[str] = []
        if prop.description:
            lines.append(prop.description)
        if prop.deprecated:
            note = f"@deprecated since {prop.deprecated.since}: {prop.deprecated.reason}"
            if prop.deprecated.alternative:
                note += f" Use {prop.deprecated.alternative} instead."
            lines.append(note)
        if not lines:
            return ""
        if len(lines) == 1:
            return f"{indent}/** {lines[0]} */\n"
        body = "".join(f"{indent} * {line}\n" for line in lines)
        return f"{indent}/**\n{body}{indent} */\n"
