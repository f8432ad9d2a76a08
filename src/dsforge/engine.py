"""
Transformation engine.

The orchestrator callers talk to: resolves adapters from its own registry,
validates schemas, and serves results through the cache.

Usage:
    engine = TransformationEngine()
    result = await engine.transform_to_target(schema, "react")
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from typing import Any

from .adapters import AdapterRegistry, PlatformAdapter
from .cache import TransformationCache, make_cache_key
from .core import ir
from .core.config import EngineConfig
from .core.validator import validate_schema
from .templates.store import TemplateStore, default_store

logger = logging.getLogger(__name__)


class TransformationEngine:
    """
    Multi-platform transformation orchestrator.

    Args:
        registry: Adapter registry; defaults to the built-ins over ``store``
        cache: Result cache; defaults to one sized from ``config``
        store: Template store for the built-in adapters; defaults to the
            configured project template directories plus built-in templates
        config: Engine configuration; defaults to ``EngineConfig()``
    """

    def __init__(
        self,
        registry: AdapterRegistry | None = None,
        cache: TransformationCache | None = None,
        store: TemplateStore | None = None,
        config: EngineConfig | None = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.store = store or default_store(self.config.template_dirs)
        self.registry = registry or AdapterRegistry.with_builtins(self.store)
        self.cache = cache or TransformationCache(self.config.cache_size)

    def default_options(self) -> ir.TransformationOptions:
        return ir.TransformationOptions(locales=list(self.config.locales))

    async def transform_to_target(
        self,
        schema: ir.UniversalTokenSchema,
        platform: str,
        options: ir.TransformationOptions | None = None,
    ) -> ir.TransformationResult:
        """
        Transform a schema for one platform.

        Raises:
            UnknownPlatformError: Before the cache is consulted
            SchemaValidationError: If the schema fails validation
        """
        adapter = self.registry.get(platform)
        validate_schema(schema)
        options = options or self.default_options()
        key = make_cache_key(schema, platform, options)
        return await self.cache.get_or_compute(
            key,
            schema.id,
            schema.version,
            lambda: adapter.transform(schema, options),
        )

    async def transform_all(
        self,
        schema: ir.UniversalTokenSchema,
        platforms: Iterable[str] | None = None,
        options: ir.TransformationOptions | None = None,
    ) -> dict[str, ir.TransformationResult]:
        """
        Transform a schema for several platforms concurrently.

        Unknown platform ids fail the whole call before any work starts.
        """
        targets = list(platforms) if platforms is not None else self.available_platforms()
        for platform in targets:
            self.registry.get(platform)
        results = await asyncio.gather(
            *(self.transform_to_target(schema, p, options) for p in targets)
        )
        return dict(zip(targets, results))

    async def generate_component(
        self,
        spec: ir.ComponentSpecification,
        platform: str,
        props: dict[str, Any] | None = None,
        options: ir.TransformationOptions | None = None,
    ) -> ir.GeneratedComponent:
        """
        Generate a single component. Errors propagate.

        Args:
            props: Default-value overrides keyed by prop name
        """
        adapter = self.registry.get(platform)
        return await adapter.generate_component_code(
            spec, props, options or self.default_options()
        )

    def available_platforms(self) -> list[str]:
        return self.registry.platforms()

    def get_recommendations(self, platform: str) -> ir.Recommendations:
        """
        Raises:
            UnknownPlatformError: If the platform is not registered
        """
        return self.registry.get(platform).get_ai_recommendations()

    def register_adapter(
        self, platform: str, adapter: PlatformAdapter, replace: bool = False
    ) -> None:
        self.registry.register(platform, adapter, replace=replace)
        if replace:
            # results from the replaced adapter are no longer valid
            self.cache.invalidate()
        logger.info(f"Registered adapter for '{platform}'")

    def invalidate(self, schema_id: str | None = None) -> int:
        """Drop cached results for a schema id, or all of them."""
        return self.cache.invalidate(schema_id)
