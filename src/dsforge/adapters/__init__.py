"""
Platform adapter plugin system for dsforge.

Adapters turn a validated UniversalTokenSchema into platform-native code
(tokens, components, theme, utilities and usage examples).
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from ..core import ir
from ..core.errors import DsforgeError, UnknownPlatformError

if TYPE_CHECKING:
    from ..templates.store import TemplateStore

logger = logging.getLogger(__name__)


class PlatformAdapter(ABC):
    """
    Abstract base class for all platform adapters.

    Minimal interface for easy extensibility: a third-party adapter only
    needs these three operations to be registered alongside the built-ins.
    """

    @abstractmethod
    async def transform(
        self, schema: ir.UniversalTokenSchema, options: ir.TransformationOptions | None = None
    ) -> ir.TransformationResult:
        """
        Transform a whole schema for this platform.

        Per-component problems are collected into ``failures``; only
        schema-level problems raise.
        """

    @abstractmethod
    async def generate_component_code(
        self,
        spec: ir.ComponentSpecification,
        props: dict[str, Any] | None = None,
        options: ir.TransformationOptions | None = None,
    ) -> ir.GeneratedComponent:
        """
        Generate one component.

        Args:
            spec: Component specification
            props: Default-value overrides keyed by prop name

        Raises:
            InvalidSpecificationError: If the component is malformed
            UnmappableTypeError: If a prop type has no mapping here
            TemplateRenderError: If the component's template fails to render
        """

    @abstractmethod
    def get_ai_recommendations(self) -> ir.Recommendations:
        """Static guidance for code-generating assistants."""


class AdapterRegistry:
    """
    Registry of platform adapters, keyed by platform id.

    Each engine owns its own registry; there is no module-level singleton.
    """

    def __init__(self) -> None:
        self._adapters: dict[str, PlatformAdapter] = {}

    @classmethod
    def with_builtins(cls, store: TemplateStore | None = None) -> AdapterRegistry:
        """Registry pre-populated with the nine built-in adapters."""
        from .builtin import builtin_adapters

        registry = cls()
        for platform, adapter in builtin_adapters(store).items():
            registry.register(platform, adapter)
        return registry

    def register(self, platform: str, adapter: PlatformAdapter, replace: bool = False) -> None:
        """
        Register an adapter instance.

        Args:
            platform: Platform id (used in CLI: --platform <id>)
            adapter: Adapter instance
            replace: Allow replacing an existing registration

        Raises:
            DsforgeError: If the id is taken and ``replace`` is False, or the
                adapter does not implement PlatformAdapter
        """
        if not isinstance(adapter, PlatformAdapter):
            raise DsforgeError(f"Adapter {type(adapter).__name__} must extend PlatformAdapter")
        if platform in self._adapters and not replace:
            raise DsforgeError(
                f"Platform '{platform}' is already registered. "
                f"Cannot register {type(adapter).__name__}."
            )
        self._adapters[platform] = adapter
        logger.debug(f"Registered adapter {type(adapter).__name__} for '{platform}'")

    def get(self, platform: str) -> PlatformAdapter:
        """
        Get the adapter for a platform id.

        Raises:
            UnknownPlatformError: If no adapter is registered for the id
        """
        try:
            return self._adapters[platform]
        except KeyError:
            raise UnknownPlatformError(platform, self.platforms()) from None

    def platforms(self) -> list[str]:
        """Registered platform ids, in registration order."""
        return list(self._adapters.keys())

    def __contains__(self, platform: object) -> bool:
        return platform in self._adapters


__all__ = ["AdapterRegistry", "PlatformAdapter"]
