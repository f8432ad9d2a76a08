"""
Fallback generation: idiomatic component stubs for platforms without a
matching template.
"""

from ..core.errors import UnknownPlatformError
from .base import FallbackGenerator, PlatformProfile
from .native import ComposeFallback, FlutterFallback, SwiftUIFallback
from .web import (
    AngularFallback,
    CssFallback,
    ReactFallback,
    SvelteFallback,
    TailwindFallback,
    VueFallback,
)

_GENERATORS: dict[str, type[FallbackGenerator]] = {
    "react": ReactFallback,
    "vue": VueFallback,
    "angular": AngularFallback,
    "svelte": SvelteFallback,
    "css": CssFallback,
    "tailwind": TailwindFallback,
    "flutter": FlutterFallback,
    "ios-swift": SwiftUIFallback,
    "android-kotlin": ComposeFallback,
}


def get_fallback_generator(platform: str) -> FallbackGenerator:
    """
    Get the fallback generator for a platform.

    Raises:
        UnknownPlatformError: If no generator exists for the platform
    """
    try:
        return _GENERATORS[platform]()
    except KeyError:
        raise UnknownPlatformError(platform, sorted(_GENERATORS)) from None


__all__ = [
    "FallbackGenerator",
    "PlatformProfile",
    "get_fallback_generator",
    "ReactFallback",
    "VueFallback",
    "AngularFallback",
    "SvelteFallback",
    "CssFallback",
    "TailwindFallback",
    "FlutterFallback",
    "SwiftUIFallback",
    "ComposeFallback",
]
