"""
Artifact assembly.

Packages the main component source with its supporting files into a
manifest of GeneratedFile entries, in a fixed order:

    component, types, styles, test, story, locale (one per locale)
"""

from __future__ import annotations

import json
import logging

from .core.ir import BuildTarget, FileKind, GeneratedFile
from .fallback.base import FallbackGenerator
from .templates.context import ComponentContext

logger = logging.getLogger(__name__)

# Line comment openers recognised when stripping generated headers
LINE_COMMENTS = ("//", "#")

# Block comment opener to closer
BLOCK_COMMENTS = {"/*": "*/", "<!--": "-->"}


def strip_header(content: str) -> str:
    """Drop leading comments (the generated-by banner), block comments whole."""
    lines = content.splitlines(keepends=True)
    index = 0
    closer: str | None = None
    while index < len(lines):
        line = lines[index].strip()
        if closer is not None:
            if closer in line:
                closer = None
        else:
            opener = next((o for o in BLOCK_COMMENTS if line.startswith(o)), None)
            if opener is not None:
                if BLOCK_COMMENTS[opener] not in line[len(opener) :]:
                    closer = BLOCK_COMMENTS[opener]
            elif not line.startswith(LINE_COMMENTS):
                break
        index += 1
    return "".join(lines[index:]).lstrip("\n")


def locale_stub(ctx: ComponentContext) -> str:
    """Localization stub: title, description and announcement messages."""
    entry: dict[str, object] = {"title": ctx.name}
    if ctx.spec.description:
        entry["description"] = ctx.spec.description
    announcements = {a.trigger: a.message for a in ctx.spec.accessibility.announcements}
    if announcements:
        entry["announcements"] = announcements
    return json.dumps({ctx.i18n_key: entry}, indent=2, ensure_ascii=False) + "\n"


class ArtifactAssembler:
    """Builds the per-component file manifest for one platform."""

    def assemble(
        self, ctx: ComponentContext, code: str, generator: FallbackGenerator
    ) -> list[GeneratedFile]:
        """
        Assemble every artifact for a component.

        Args:
            ctx: Component context the code was produced from
            code: Main component source (rendered template or fallback stub)
            generator: Platform strategy providing the file layout and
                supporting sources

        Returns:
            Files in manifest order
        """
        profile = generator.profile
        production = ctx.options.target == BuildTarget.PRODUCTION
        files: list[GeneratedFile] = []

        def add(pattern: str | None, content: str | None, kind: FileKind, locale: str | None = None) -> None:
            if pattern is None or content is None:
                return
            if production and kind != FileKind.LOCALE:
                content = strip_header(content)
            files.append(
                GeneratedFile(path=profile.path(pattern, ctx, locale), content=content, kind=kind)
            )

        add(profile.component_path, code, FileKind.COMPONENT)
        add(profile.types_path, generator.types_file(ctx), FileKind.TYPES)
        add(profile.styles_path, generator.styles_file(ctx), FileKind.STYLES)
        add(profile.test_path, generator.test_file(ctx), FileKind.TEST)
        add(profile.story_path, generator.story_file(ctx), FileKind.STORY)

        stub = locale_stub(ctx)
        for locale in ctx.options.locales:
            add(profile.locale_path, stub, FileKind.LOCALE, locale)

        logger.debug(f"Assembled {len(files)} files for {ctx.name} on {ctx.platform}")
        return files
