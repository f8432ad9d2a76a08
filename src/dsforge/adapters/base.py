"""
Templated adapter base class.

The shared pipeline behind every built-in adapter:

1. Flatten and resolve tokens, render platform token outputs
2. Partition components into eligible and unsupported
3. Generate eligible components concurrently (template or fallback)
4. Collect per-component failures without aborting the batch
5. Add theme, utilities and usage examples
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, ClassVar

from ..assembler import ArtifactAssembler
from ..core import ir
from ..core.errors import InvalidSpecificationError, TemplateRenderError, UnmappableTypeError
from ..core.tokens import TokenSet
from ..core.validator import validate_component
from ..fallback import get_fallback_generator
from ..templates.context import build_component_context
from ..templates.resolver import TemplateResolver
from ..templates.store import TemplateStore, default_store
from ..typemap import get_type_mapper
from . import PlatformAdapter

logger = logging.getLogger(__name__)

# Errors that fail one component, not the batch
COMPONENT_ERRORS = (InvalidSpecificationError, TemplateRenderError, UnmappableTypeError)


class TemplatedAdapter(PlatformAdapter):
    """
    Base class for adapters that render templates with fallback generation.

    Subclasses set ``platform`` and override the token, theme, utility and
    example hooks. Recommendation metadata lives in class attributes.

    Usage:
        class ReactAdapter(TemplatedAdapter):
            platform = "react"
            styling = "styled-components"

            def generate_theme(self, tokens, schema):
                return "..."
    """

    platform: ClassVar[str]
    styling: ClassVar[str] = "tokens"
    accessibility: ClassVar[str] = "wcag-aa"
    preferred_components: ClassVar[list[str]] = ["Button", "Card", "Input", "Container", "Stack"]
    layout_patterns: ClassVar[list[str]] = ["container-stack", "card-grid", "form-stack"]
    patterns: ClassVar[dict[str, ir.PatternSnippet]] = {}

    def __init__(self, store: TemplateStore | None = None) -> None:
        self.store = store or default_store()
        self.resolver = TemplateResolver(self.store)
        self.mapper = get_type_mapper(self.platform)
        self.generator = get_fallback_generator(self.platform)
        self.assembler = ArtifactAssembler()

    # ------------------------------------------------------------------
    # PlatformAdapter
    # ------------------------------------------------------------------

    async def transform(
        self, schema: ir.UniversalTokenSchema, options: ir.TransformationOptions | None = None
    ) -> ir.TransformationResult:
        options = options or ir.TransformationOptions()
        tokens = TokenSet.from_system(schema.tokens)

        eligible: list[ir.ComponentSpecification] = []
        skipped: list[str] = []
        for name, spec in schema.components.items():
            if not options.wants(name):
                continue
            if not spec.supports(self.platform):
                logger.warning(f"Skipping {name}: not supported on {self.platform}")
                skipped.append(name)
                continue
            eligible.append(spec)

        outcomes = await asyncio.gather(
            *(self.render_component(spec, options) for spec in eligible),
            return_exceptions=True,
        )

        components: dict[str, str] = {}
        files: list[ir.GeneratedFile] = []
        failures: list[ir.ComponentFailure] = []
        for spec, outcome in zip(eligible, outcomes):
            if isinstance(outcome, COMPONENT_ERRORS):
                logger.warning(f"Failed to generate {spec.name} for {self.platform}: {outcome}")
                failures.append(
                    ir.ComponentFailure(
                        component=spec.name,
                        error_type=type(outcome).__name__,
                        message=str(outcome),
                    )
                )
            elif isinstance(outcome, BaseException):
                raise outcome
            else:
                components[spec.name] = outcome.code
                files.extend(outcome.files)

        logger.info(
            f"{self.platform}: generated {len(components)} component(s), "
            f"{len(failures)} failure(s), {len(skipped)} skipped"
        )
        return ir.TransformationResult(
            platform=self.platform,
            schema_id=schema.id,
            tokens=self.transform_tokens(tokens, schema),
            components=components,
            theme=self.generate_theme(tokens, schema),
            utils=self.generate_utils(tokens, schema),
            examples=self.generate_examples(schema, list(components)),
            files=files,
            failures=failures,
            skipped=skipped,
        )

    async def generate_component_code(
        self,
        spec: ir.ComponentSpecification,
        props: dict[str, Any] | None = None,
        options: ir.TransformationOptions | None = None,
    ) -> ir.GeneratedComponent:
        return await self.render_component(spec, options or ir.TransformationOptions(), props)

    def get_ai_recommendations(self) -> ir.Recommendations:
        return ir.Recommendations(
            platform=self.platform,
            preferred_components=list(self.preferred_components),
            layout_patterns=list(self.layout_patterns),
            styling=self.styling,
            accessibility=self.accessibility,
            patterns=dict(self.patterns),
        )

    # ------------------------------------------------------------------
    # Component pipeline
    # ------------------------------------------------------------------

    async def render_component(
        self,
        spec: ir.ComponentSpecification,
        options: ir.TransformationOptions,
        overrides: dict[str, Any] | None = None,
    ) -> ir.GeneratedComponent:
        """
        Validate, map, render (or fall back) and assemble one component.

        A located template that fails to render raises; fallback only
        happens when no template exists.
        """
        validate_component(spec, self.platform)
        ctx = build_component_context(spec, self.platform, self.mapper, options, overrides)

        path = await self.resolver.locate(
            self.platform,
            ctx.category,
            spec.name,
            self.generator.profile.extension,
            options.convention,
        )
        if path is None:
            logger.info(f"No template for {spec.name} on {self.platform}, using fallback")
            code = self.generator.component(ctx)
        else:
            code = await self.resolver.render(path, ctx.template_data(), self.platform, spec.name)

        files = self.assembler.assemble(ctx, code, self.generator)
        return ir.GeneratedComponent(
            platform=self.platform,
            name=spec.name,
            code=files[0].content,
            files=files,
            used_template=path,
        )

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def transform_tokens(self, tokens: TokenSet, schema: ir.UniversalTokenSchema) -> dict[str, str]:
        """Token outputs keyed by format. CSS variables and JSON by default."""
        return {
            "css-variables": tokens.css_block() + "\n",
            "json": tokens.to_json() + "\n",
        }

    def generate_theme(self, tokens: TokenSet, schema: ir.UniversalTokenSchema) -> str:
        return ""

    def generate_utils(self, tokens: TokenSet, schema: ir.UniversalTokenSchema) -> dict[str, str]:
        return {}

    def generate_examples(
        self, schema: ir.UniversalTokenSchema, components: list[str]
    ) -> dict[str, str]:
        return {}

    def example_components(self, components: list[str], limit: int = 4) -> list[str]:
        """Components to showcase: preferred ones first, then schema order."""
        ordered = [name for name in self.preferred_components if name in components]
        ordered += [name for name in components if name not in ordered]
        return ordered[:limit]
