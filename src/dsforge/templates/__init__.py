"""
Template resolution for component code.

Templates are Jinja2 files laid out as ``{platform}/{category}/{kebab-name}{ext}.j2``,
optionally under a routing-convention folder. Missing templates fall back to
the platform's fallback generator; broken templates raise.
"""

from .context import BUILTIN_PLATFORMS, ComponentContext, PropContext, build_component_context
from .resolver import TemplateResolver, candidate_paths, create_template_env
from .store import (
    BUILTIN_TEMPLATES_DIR,
    DictTemplateStore,
    FileSystemTemplateStore,
    TemplateStore,
    default_store,
)

__all__ = [
    "BUILTIN_PLATFORMS",
    "BUILTIN_TEMPLATES_DIR",
    "ComponentContext",
    "DictTemplateStore",
    "FileSystemTemplateStore",
    "PropContext",
    "TemplateResolver",
    "TemplateStore",
    "build_component_context",
    "candidate_paths",
    "create_template_env",
    "default_store",
]
