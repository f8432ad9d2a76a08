"""
Stylesheet adapters: plain CSS and Tailwind.
"""

from __future__ import annotations

import json

from ..core import ir
from ..core.tokens import TokenEntry, TokenSet, format_css_value
from ..naming import camel_case, indent, kebab_case
from .base import TemplatedAdapter

# Token group (first path segment) to Tailwind theme key
TAILWIND_GROUPS = {
    "color": "colors",
    "colors": "colors",
    "spacing": "spacing",
    "space": "spacing",
    "radius": "borderRadius",
    "radii": "borderRadius",
    "borderRadius": "borderRadius",
    "fontSize": "fontSize",
    "fontFamily": "fontFamily",
    "fontWeight": "fontWeight",
    "shadow": "boxShadow",
    "shadows": "boxShadow",
    "breakpoint": "screens",
    "breakpoints": "screens",
}


def tailwind_key(entry: TokenEntry) -> str | None:
    """Tailwind theme section for a token, looking through a typography group."""
    path = list(entry.path)
    if path and path[0] == "typography" and len(path) > 1:
        path = path[1:]
    return TAILWIND_GROUPS.get(path[0]) if path else None


class CssAdapter(TemplatedAdapter):
    platform = "css"
    styling = "css-custom-properties"
    patterns = {
        "form": ir.PatternSnippet(
            template=(
                '<form class="stack" data-direction="vertical" data-gap="md">'
                '<label class="input">{{field}}<input /></label>'
                '<button class="button" type="submit">Submit</button></form>'
            ),
            components=["Stack", "Input", "Button"],
        ),
        "card-list": ir.PatternSnippet(
            template=(
                '<div class="grid" data-cols="3" data-gap="lg"><article class="card">'
                '<h3 class="text" data-variant="h3">{{title}}</h3></article></div>'
            ),
            components=["Grid", "Card", "Text"],
        ),
        "dashboard": ir.PatternSnippet(
            template=(
                '<main class="container">'
                '<div class="stack" data-direction="vertical" data-gap="xl">'
                '<div class="grid" data-cols="4" data-gap="lg">'
                '<section class="card">Stats</section></div></div></main>'
            ),
            components=["Container", "Stack", "Grid", "Card"],
        ),
    }

    def transform_tokens(self, tokens: TokenSet, schema: ir.UniversalTokenSchema) -> dict[str, str]:
        outputs = super().transform_tokens(tokens, schema)
        outputs["scss"] = "".join(
            f"${entry.name}: {format_css_value(entry.resolved)};\n" for entry in tokens
        )
        return outputs

    def generate_theme(self, tokens: TokenSet, schema: ir.UniversalTokenSchema) -> str:
        return "@layer tokens {\n" + indent(tokens.css_block(), 2) + "\n}\n"

    def generate_utils(self, tokens: TokenSet, schema: ir.UniversalTokenSchema) -> dict[str, str]:
        return {
            "css/base.css": (
                "*,\n*::before,\n*::after {\n  box-sizing: border-box;\n}\n\n"
                ":focus-visible {\n  outline: 2px solid var(--color-focus, currentColor);\n}\n\n"
                "@media (prefers-reduced-motion: reduce) {\n"
                "  * {\n    animation: none !important;\n    transition: none !important;\n  }\n"
                "}\n"
            ),
        }

    def generate_examples(
        self, schema: ir.UniversalTokenSchema, components: list[str]
    ) -> dict[str, str]:
        shown = self.example_components(components)
        if not shown:
            return {}
        links = "".join(
            f'    <link rel="stylesheet" href="../css/components/{kebab_case(n)}.css" />\n'
            for n in shown
        )
        body = "".join(
            f'    <div class="{kebab_case(n)}" data-i18n="{kebab_case(n)}.title"></div>\n'
            for n in shown
        )
        return {
            "examples/showcase.html": (
                "<!doctype html>\n<html lang=\"en\">\n  <head>\n"
                "    <meta charset=\"utf-8\" />\n"
                "    <link rel=\"stylesheet\" href=\"../css/theme.css\" />\n"
                f"{links}"
                "  </head>\n  <body>\n"
                f"{body}"
                "  </body>\n</html>\n"
            )
        }


class TailwindAdapter(TemplatedAdapter):
    platform = "tailwind"
    styling = "tailwind"
    patterns = {
        "form": ir.PatternSnippet(
            template=(
                '<form class="flex flex-col gap-md"><label class="flex flex-col gap-sm">{{field}}'
                '<input class="rounded border px-sm" /></label>'
                '<button type="submit" class="rounded bg-primary px-md py-sm">Submit</button></form>'
            ),
            components=["Stack", "Input", "Button"],
        ),
        "card-list": ir.PatternSnippet(
            template=(
                '<div class="grid grid-cols-3 gap-lg"><article class="rounded shadow p-md">'
                '<h3 class="text-lg font-semibold">{{title}}</h3></article></div>'
            ),
            components=["Grid", "Card", "Text"],
        ),
        "dashboard": ir.PatternSnippet(
            template=(
                '<main class="container mx-auto"><div class="flex flex-col gap-xl">'
                '<div class="grid grid-cols-4 gap-lg"><section class="rounded shadow p-md">Stats'
                "</section></div></div></main>"
            ),
            components=["Container", "Stack", "Grid", "Card"],
        ),
    }

    def transform_tokens(self, tokens: TokenSet, schema: ir.UniversalTokenSchema) -> dict[str, str]:
        outputs = super().transform_tokens(tokens, schema)
        outputs["tailwind-config"] = self.tailwind_config(tokens)
        return outputs

    def tailwind_config(self, tokens: TokenSet) -> str:
        """tailwind.config.ts extending the theme with CSS variable references."""
        extend: dict[str, dict[str, str]] = {}
        for entry in tokens:
            if entry.layer == "component":
                continue
            key = tailwind_key(entry)
            if key is None:
                continue
            leaf = entry.path[1:] if entry.path[0] != "typography" else entry.path[2:]
            name = "-".join(leaf) or "DEFAULT"
            extend.setdefault(key, {})[name] = f"var(--{entry.name})"
        body = json.dumps(extend, indent=2, ensure_ascii=False)
        return (
            "import type { Config } from 'tailwindcss';\n\n"
            "export default {\n"
            "  content: ['./src/**/*.{ts,tsx,html}'],\n"
            "  theme: {\n"
            f"    extend: {indent(body, 4).lstrip()},\n"
            "  },\n"
            "} satisfies Config;\n"
        )

    def generate_theme(self, tokens: TokenSet, schema: ir.UniversalTokenSchema) -> str:
        return "@tailwind base;\n@tailwind components;\n@tailwind utilities;\n\n" + tokens.css_block() + "\n"

    def generate_utils(self, tokens: TokenSet, schema: ir.UniversalTokenSchema) -> dict[str, str]:
        return {
            "src/utils/cn.ts": (
                "import { clsx, type ClassValue } from 'clsx';\n"
                "import { twMerge } from 'tailwind-merge';\n\n"
                "export function cn(...inputs: ClassValue[]): string {\n"
                "  return twMerge(clsx(inputs));\n"
                "}\n"
            ),
        }

    def generate_examples(
        self, schema: ir.UniversalTokenSchema, components: list[str]
    ) -> dict[str, str]:
        shown = self.example_components(components)
        if not shown:
            return {}
        imports = "".join(
            f"import {{ {camel_case(n)}Classes }} from '../components/{kebab_case(n)}.classes';\n"
            for n in shown
        )
        usage = "".join(f"  `<div class=\"${{{camel_case(n)}Classes()}}\"></div>`,\n" for n in shown)
        return {
            "src/examples/showcase.ts": (
                f"{imports}\nexport const showcase = [\n{usage}].join('\\n');\n"
            )
        }

