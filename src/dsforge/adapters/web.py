"""
Web framework adapters: React, Vue, Angular and Svelte.
"""

from __future__ import annotations

import json

from ..core import ir
from ..core.tokens import TokenSet
from ..naming import kebab_case, pascal_case
from .base import TemplatedAdapter


def ts_tokens_module(tokens: TokenSet) -> str:
    """Resolved tokens as a typed TypeScript constant."""
    body = json.dumps(tokens.nested(), indent=2, ensure_ascii=False)
    return (
        f"export const tokens = {body} as const;\n\n"
        f"export type Tokens = typeof tokens;\n"
    )


class ReactAdapter(TemplatedAdapter):
    platform = "react"
    styling = "styled-components"
    preferred_components = ["Button", "Card", "Input", "Container", "Stack", "Grid", "Text"]
    layout_patterns = ["container-stack", "card-grid", "form-stack", "dashboard-layout"]
    patterns = {
        "form": ir.PatternSnippet(
            template=(
                '<Stack direction="vertical" gap="md"><Input label="{{field}}" />'
                '<Button type="submit">Submit</Button></Stack>'
            ),
            components=["Stack", "Input", "Button"],
        ),
        "card-list": ir.PatternSnippet(
            template=(
                '<Grid cols="3" gap="lg">{items.map(item => <Card key={item.id}>'
                '<Text variant="h3">{item.title}</Text><Text>{item.description}</Text>'
                "</Card>)}</Grid>"
            ),
            components=["Grid", "Card", "Text"],
        ),
        "dashboard": ir.PatternSnippet(
            template=(
                '<Container><Stack direction="vertical" gap="xl"><Text variant="h1">Dashboard</Text>'
                '<Grid cols="4" gap="lg"><Card>Stats</Card></Grid></Stack></Container>'
            ),
            components=["Container", "Stack", "Text", "Grid", "Card"],
        ),
    }

    def transform_tokens(self, tokens: TokenSet, schema: ir.UniversalTokenSchema) -> dict[str, str]:
        outputs = super().transform_tokens(tokens, schema)
        outputs["typescript"] = ts_tokens_module(tokens)
        return outputs

    def generate_theme(self, tokens: TokenSet, schema: ir.UniversalTokenSchema) -> str:
        return (
            "import * as React from 'react';\n"
            "import { tokens, type Tokens } from './tokens';\n\n"
            "const DesignSystemContext = React.createContext<Tokens | null>(null);\n\n"
            "export function DesignSystemProvider({\n"
            "  children,\n"
            "  theme = tokens,\n"
            "}: {\n"
            "  children: React.ReactNode;\n"
            "  theme?: Tokens;\n"
            "}) {\n"
            "  return <DesignSystemContext.Provider value={theme}>{children}</DesignSystemContext.Provider>;\n"
            "}\n\n"
            "export function useDesignSystem(): Tokens {\n"
            "  const context = React.useContext(DesignSystemContext);\n"
            "  if (!context) {\n"
            "    throw new Error('useDesignSystem must be used within DesignSystemProvider');\n"
            "  }\n"
            "  return context;\n"
            "}\n"
        )

    def generate_utils(self, tokens: TokenSet, schema: ir.UniversalTokenSchema) -> dict[str, str]:
        return {
            "src/utils/cn.ts": (
                "import { clsx, type ClassValue } from 'clsx';\n"
                "import { twMerge } from 'tailwind-merge';\n\n"
                "export function cn(...inputs: ClassValue[]): string {\n"
                "  return twMerge(clsx(inputs));\n"
                "}\n"
            ),
            "src/tokens.ts": ts_tokens_module(tokens),
        }

    def generate_examples(
        self, schema: ir.UniversalTokenSchema, components: list[str]
    ) -> dict[str, str]:
        shown = self.example_components(components)
        if not shown:
            return {}
        imports = "".join(f"import {{ {n} }} from '../components/{n}';\n" for n in shown)
        usage = "".join(f"      <{n} />\n" for n in shown)
        page = pascal_case(schema.name or schema.id)
        return {
            "src/examples/Showcase.tsx": (
                f"{imports}\n"
                f"export function {page}Showcase() {{\n"
                f"  return (\n"
                f"    <main>\n"
                f"{usage}"
                f"    </main>\n"
                f"  );\n"
                f"}}\n"
            )
        }


class VueAdapter(TemplatedAdapter):
    platform = "vue"
    styling = "css-modules"
    patterns = {
        "form": ir.PatternSnippet(
            template=(
                '<Stack direction="vertical" gap="md"><Input :label="field" />'
                '<Button type="submit">Submit</Button></Stack>'
            ),
            components=["Stack", "Input", "Button"],
        ),
        "card-list": ir.PatternSnippet(
            template=(
                '<Grid :cols="3" gap="lg"><Card v-for="item in items" :key="item.id">'
                "{{ item.title }}</Card></Grid>"
            ),
            components=["Grid", "Card"],
        ),
        "dashboard": ir.PatternSnippet(
            template=(
                '<Container><Stack direction="vertical" gap="xl"><Grid :cols="4" gap="lg">'
                "<Card>Stats</Card></Grid></Stack></Container>"
            ),
            components=["Container", "Stack", "Grid", "Card"],
        ),
    }

    def transform_tokens(self, tokens: TokenSet, schema: ir.UniversalTokenSchema) -> dict[str, str]:
        outputs = super().transform_tokens(tokens, schema)
        outputs["typescript"] = ts_tokens_module(tokens)
        return outputs

    def generate_theme(self, tokens: TokenSet, schema: ir.UniversalTokenSchema) -> str:
        return (
            "import { inject, type App, type InjectionKey } from 'vue';\n"
            "import { tokens, type Tokens } from './tokens';\n\n"
            "export const designSystemKey: InjectionKey<Tokens> = Symbol('designSystem');\n\n"
            "export const designSystem = {\n"
            "  install(app: App, theme: Tokens = tokens) {\n"
            "    app.provide(designSystemKey, theme);\n"
            "  },\n"
            "};\n\n"
            "export function useDesignSystem(): Tokens {\n"
            "  const theme = inject(designSystemKey);\n"
            "  if (!theme) {\n"
            "    throw new Error('useDesignSystem requires the designSystem plugin');\n"
            "  }\n"
            "  return theme;\n"
            "}\n"
        )

    def generate_utils(self, tokens: TokenSet, schema: ir.UniversalTokenSchema) -> dict[str, str]:
        return {"src/tokens.ts": ts_tokens_module(tokens)}

    def generate_examples(
        self, schema: ir.UniversalTokenSchema, components: list[str]
    ) -> dict[str, str]:
        shown = self.example_components(components)
        if not shown:
            return {}
        imports = "".join(f"import {n} from '../components/{n}.vue';\n" for n in shown)
        usage = "".join(f"    <{n} />\n" for n in shown)
        return {
            "src/examples/Showcase.vue": (
                f"<script setup lang=\"ts\">\n{imports}</script>\n\n"
                f"<template>\n  <main>\n{usage}  </main>\n</template>\n"
            )
        }


class AngularAdapter(TemplatedAdapter):
    platform = "angular"
    styling = "angular-material"
    patterns = {
        "form": ir.PatternSnippet(
            template=(
                '<ds-stack direction="vertical" gap="md"><ds-input [label]="field"></ds-input>'
                '<ds-button type="submit">Submit</ds-button></ds-stack>'
            ),
            components=["Stack", "Input", "Button"],
        ),
        "card-list": ir.PatternSnippet(
            template=(
                '<ds-grid [cols]="3" gap="lg">@for (item of items; track item.id) {<ds-card>'
                '<ds-text variant="h3">{{ item.title }}</ds-text></ds-card>}</ds-grid>'
            ),
            components=["Grid", "Card", "Text"],
        ),
        "dashboard": ir.PatternSnippet(
            template=(
                '<ds-container><ds-stack direction="vertical" gap="xl">'
                '<ds-grid [cols]="4" gap="lg"><ds-card>Stats</ds-card></ds-grid>'
                "</ds-stack></ds-container>"
            ),
            components=["Container", "Stack", "Grid", "Card"],
        ),
    }

    def transform_tokens(self, tokens: TokenSet, schema: ir.UniversalTokenSchema) -> dict[str, str]:
        outputs = super().transform_tokens(tokens, schema)
        outputs["typescript"] = ts_tokens_module(tokens)
        return outputs

    def generate_theme(self, tokens: TokenSet, schema: ir.UniversalTokenSchema) -> str:
        return (
            "import { Injectable, signal } from '@angular/core';\n"
            "import { tokens, type Tokens } from './tokens';\n\n"
            "@Injectable({ providedIn: 'root' })\n"
            "export class DesignSystemService {\n"
            "  readonly tokens = signal<Tokens>(tokens);\n\n"
            "  setTheme(theme: Tokens): void {\n"
            "    this.tokens.set(theme);\n"
            "  }\n"
            "}\n"
        )

    def generate_utils(self, tokens: TokenSet, schema: ir.UniversalTokenSchema) -> dict[str, str]:
        return {"src/app/tokens.ts": ts_tokens_module(tokens)}

    def generate_examples(
        self, schema: ir.UniversalTokenSchema, components: list[str]
    ) -> dict[str, str]:
        shown = self.example_components(components)
        if not shown:
            return {}
        imports = "".join(
            f"import {{ {n}Component }} from '../components/{kebab_case(n)}/{kebab_case(n)}.component';\n"
            for n in shown
        )
        usage = "".join(f"    <ds-{kebab_case(n)}></ds-{kebab_case(n)}>\n" for n in shown)
        classes = ", ".join(f"{n}Component" for n in shown)
        return {
            "src/app/examples/showcase.component.ts": (
                f"import {{ Component }} from '@angular/core';\n{imports}\n"
                f"@Component({{\n"
                f"  selector: 'ds-showcase',\n"
                f"  standalone: true,\n"
                f"  imports: [{classes}],\n"
                f"  template: `\n  <main>\n{usage}  </main>\n  `,\n"
                f"}})\n"
                f"export class ShowcaseComponent {{}}\n"
            )
        }


class SvelteAdapter(TemplatedAdapter):
    platform = "svelte"
    styling = "svelte-scoped"
    patterns = {
        "form": ir.PatternSnippet(
            template=(
                '<Stack direction="vertical" gap="md"><Input label={field} />'
                '<Button type="submit">Submit</Button></Stack>'
            ),
            components=["Stack", "Input", "Button"],
        ),
        "card-list": ir.PatternSnippet(
            template=(
                '<Grid cols={3} gap="lg">{#each items as item (item.id)}<Card>'
                '<Text variant="h3">{item.title}</Text></Card>{/each}</Grid>'
            ),
            components=["Grid", "Card", "Text"],
        ),
        "dashboard": ir.PatternSnippet(
            template=(
                '<Container><Stack direction="vertical" gap="xl"><Grid cols={4} gap="lg">'
                "<Card>Stats</Card></Grid></Stack></Container>"
            ),
            components=["Container", "Stack", "Grid", "Card"],
        ),
    }

    def transform_tokens(self, tokens: TokenSet, schema: ir.UniversalTokenSchema) -> dict[str, str]:
        outputs = super().transform_tokens(tokens, schema)
        outputs["typescript"] = ts_tokens_module(tokens)
        return outputs

    def generate_theme(self, tokens: TokenSet, schema: ir.UniversalTokenSchema) -> str:
        return (
            "import { getContext, setContext } from 'svelte';\n"
            "import { tokens, type Tokens } from './tokens';\n\n"
            "const KEY = Symbol('designSystem');\n\n"
            "export function provideDesignSystem(theme: Tokens = tokens): void {\n"
            "  setContext(KEY, theme);\n"
            "}\n\n"
            "export function useDesignSystem(): Tokens {\n"
            "  return getContext<Tokens>(KEY) ?? tokens;\n"
            "}\n"
        )

    def generate_utils(self, tokens: TokenSet, schema: ir.UniversalTokenSchema) -> dict[str, str]:
        return {"src/lib/tokens.ts": ts_tokens_module(tokens)}

    def generate_examples(
        self, schema: ir.UniversalTokenSchema, components: list[str]
    ) -> dict[str, str]:
        shown = self.example_components(components)
        if not shown:
            return {}
        imports = "".join(f"  import {n} from '../components/{n}.svelte';\n" for n in shown)
        usage = "".join(f"  <{n} />\n" for n in shown)
        return {
            "src/lib/examples/Showcase.svelte": (
                f"<script lang=\"ts\">\n{imports}</script>\n\n<main>\n{usage}</main>\n"
            )
        }
