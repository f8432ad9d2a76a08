"""
dsforge - Retargetable design-system transformation engine.

Turns one platform-neutral Universal Token Schema (design tokens plus
component specifications) into source artifacts for React, Vue, Angular,
Svelte, Flutter, SwiftUI, Jetpack Compose, plain CSS and Tailwind.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import (
    DsforgeError,
    InvalidSpecificationError,
    SchemaValidationError,
    TemplateRenderError,
    UnknownPlatformError,
    UnmappableTypeError,
)
from .engine import TransformationEngine

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "DsforgeError",
    "InvalidSpecificationError",
    "SchemaValidationError",
    "TemplateRenderError",
    "TransformationEngine",
    "UnknownPlatformError",
    "UnmappableTypeError",
]
