"""
Template location and rendering.

Candidates are tried most specific first:

    {platform}/{convention}/{category}/{kebab-name}{ext}.j2   (when a convention is set)
    {platform}/{category}/{kebab-name}{ext}.j2

A missing template is reported as None so the caller can fall back. A
template that exists but fails to render raises TemplateRenderError and is
never silently replaced by a fallback.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

from jinja2 import Environment, StrictUndefined

from ..core.errors import ErrorContext, TemplateRenderError
from ..naming import camel_case, constant_case, indent, kebab_case, pascal_case, snake_case
from .store import TemplateStore

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".j2"


def _json_filter(value: Any, indent_width: int | None = None) -> str:
    return json.dumps(value, indent=indent_width, ensure_ascii=False, default=str)


def create_template_env(store: TemplateStore) -> Environment:
    """
    Create the Jinja2 environment for code templates.

    Undefined variables raise instead of rendering as empty strings, and
    rendering is async so it can run alongside other component jobs.
    """
    env = Environment(
        loader=store.loader(),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
        enable_async=True,
    )
    env.filters["pascal_case"] = pascal_case
    env.filters["camel_case"] = camel_case
    env.filters["kebab_case"] = kebab_case
    env.filters["snake_case"] = snake_case
    env.filters["constant_case"] = constant_case
    env.filters["json"] = _json_filter
    env.filters["indent_code"] = indent
    return env


def candidate_paths(
    platform: str,
    category: str,
    component: str,
    extension: str,
    convention: str | None = None,
) -> list[str]:
    """Template paths to try, most specific first."""
    filename = f"{kebab_case(component)}{extension}{TEMPLATE_SUFFIX}"
    paths = []
    if convention:
        paths.append(f"{platform}/{convention}/{category}/{filename}")
    paths.append(f"{platform}/{category}/{filename}")
    return paths


class TemplateResolver:
    """Locates and renders component templates from one store."""

    def __init__(self, store: TemplateStore) -> None:
        self.store = store
        self.env = create_template_env(store)

    async def locate(
        self,
        platform: str,
        category: str,
        component: str,
        extension: str,
        convention: str | None = None,
    ) -> str | None:
        """Return the first existing candidate path, or None."""
        for path in candidate_paths(platform, category, component, extension, convention):
            if await asyncio.to_thread(self.store.exists, path):
                logger.debug(f"Template found for {component} on {platform}: {path}")
                return path
        return None

    async def render(
        self,
        path: str,
        data: dict[str, Any],
        platform: str | None = None,
        component: str | None = None,
    ) -> str:
        """
        Render a located template.

        Raises:
            TemplateRenderError: On syntax errors, undefined variables or
                any exception raised while rendering
        """
        context = ErrorContext(platform=platform, component=component, path=path)
        try:
            template = self.env.get_template(path)
            return await template.render_async(**data)
        except Exception as e:
            raise TemplateRenderError(
                f"Template failed to render: {type(e).__name__}: {e}", path, context
            ) from e
