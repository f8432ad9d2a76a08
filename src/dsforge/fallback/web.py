"""
Fallback generators for web targets.

React, Vue, Angular and Svelte produce framework components; CSS produces
a stylesheet with a typed data-attribute contract; Tailwind produces a
typed class-recipe module. All share the TypeScript props interface.
"""

from __future__ import annotations

import json

from ..naming import camel_case, kebab_case, pascal_case
from ..templates.context import ComponentContext, PropContext
from .base import FallbackGenerator, PlatformProfile

# Host element per component category
ELEMENT_BY_CATEGORY = {
    "layout": "div",
    "form": "div",
    "navigation": "nav",
    "feedback": "div",
    "data-display": "div",
    "interactive": "button",
    "specialized": "div",
}

DOM_INTERFACE = {
    "div": "HTMLDivElement",
    "nav": "HTMLElement",
    "button": "HTMLButtonElement",
}


def host_element(ctx: ComponentContext) -> str:
    return ELEMENT_BY_CATEGORY.get(ctx.category, "div")


def i18n_title(ctx: ComponentContext) -> str:
    return f"{ctx.i18n_key}.title"


def variant_props(ctx: ComponentContext) -> list[PropContext]:
    """Props that drive a variant class: enumerated value props."""
    return [p for p in ctx.value_props if p.values]


class TypeScriptFallback(FallbackGenerator):
    """Shared pieces for TypeScript-based targets."""

    props_base: str | None = None
    storybook_package = "@storybook/react"

    def props_interface(self, ctx: ComponentContext) -> str:
        lines = []
        for prop in ctx.props:
            optional = "" if prop.required else "?"
            lines.append(f"{self.doc_comment(prop)}  readonly {prop.name}{optional}: {prop.type};")
        head = f"export interface {ctx.name}Props"
        if self.props_base:
            if ctx.props:
                omitted = " | ".join(f"'{p.name}'" for p in ctx.props)
                head += f" extends Omit<{self.props_base}, {omitted}>"
            else:
                head += f" extends {self.props_base}"
        body = "\n".join(lines)
        return f"{head} {{\n{body}\n}}" if body else f"{head} {{}}"

    def types_file(self, ctx: ComponentContext) -> str | None:
        parts: list[str] = []
        declarations = ctx.types.render_declarations()
        if declarations:
            parts.append(declarations)
        parts.append(self.props_interface(ctx))
        return f"{self.header(ctx)}\n" + self.with_imports(ctx, "\n\n".join(parts))

    def destructure(self, ctx: ComponentContext, rest: bool = True, extra: tuple[str, ...] = ()) -> str:
        names = [n for n in extra if ctx.prop(n) is None]
        for prop in ctx.props:
            names.append(f"{prop.name} = {prop.default}" if prop.default is not None else prop.name)
        if rest:
            names.append("...rest")
        return "{ " + ", ".join(names) + " }"

    def story_file(self, ctx: ComponentContext) -> str | None:
        args = {p.name: p.raw_default for p in ctx.props if p.raw_default is not None}
        for prop in ctx.props:
            if prop.required and prop.name not in args and prop.kind == "primitive":
                args[prop.name] = ctx.name if prop.type == "string" else None
        args = {k: v for k, v in args.items() if v is not None}
        arg_types = {
            p.name: {"control": "select", "options": p.values} for p in ctx.props if p.values
        }
        return (
            f"{self.header(ctx)}\n"
            f"import type {{ Meta, StoryObj }} from '{self.storybook_package}';\n"
            f"import {self.story_import(ctx)};\n\n"
            f"const meta = {{\n"
            f"  title: '{pascal_case(ctx.category)}/{ctx.name}',\n"
            f"  component: {self.story_component(ctx)},\n"
            f"  tags: ['autodocs'],\n"
            f"  argTypes: {json.dumps(arg_types)},\n"
            f"}} satisfies Meta<typeof {self.story_component(ctx)}>;\n\n"
            f"export default meta;\n"
            f"type Story = StoryObj<typeof meta>;\n\n"
            f"export const Default: Story = {{\n"
            f"  args: {json.dumps(args)},\n"
            f"}};\n"
        )

    def story_import(self, ctx: ComponentContext) -> str:
        return f"{{ {ctx.name} }} from '../components/{ctx.name}'"

    def story_component(self, ctx: ComponentContext) -> str:
        return ctx.name

    def css_rules(self, ctx: ComponentContext, root: str) -> str:
        rules = [
            f"{root} {{\n"
            f"  display: inline-flex;\n"
            f"  gap: var(--spacing-sm, 0.5rem);\n"
            f"  font-family: var(--typography-font-family, inherit);\n"
            f"}}"
        ]
        for prop in variant_props(ctx):
            for value in prop.values or []:
                rules.append(f"{root}--{kebab_case(prop.name)}-{kebab_case(str(value))} {{\n}}")
        if ctx.spec.accessibility.focus_trap or ctx.category == "interactive":
            rules.append(
                f"{root}:focus-visible {{\n"
                f"  outline: 2px solid var(--color-focus, currentColor);\n"
                f"  outline-offset: 2px;\n"
                f"}}"
            )
        return "\n\n".join(rules) + "\n"


class ReactFallback(TypeScriptFallback):
    profile = PlatformProfile(
        platform="react",
        language="typescript",
        extension=".tsx",
        component_path="src/components/{name}.tsx",
        types_path="src/types/{kebab}.types.ts",
        styles_path="src/components/{name}.module.css",
        test_path="src/__tests__/{name}.test.tsx",
        story_path="src/stories/{name}.stories.tsx",
        locale_path="src/locales/{locale}/{kebab}.json",
    )
    props_base = "React.HTMLAttributes<HTMLElement>"

    def types_file(self, ctx: ComponentContext) -> str | None:
        ctx.types.add_import("import type * as React from 'react';")
        return super().types_file(ctx)

    def component(self, ctx: ComponentContext) -> str:
        element = host_element(ctx)
        dom = DOM_INTERFACE[element]
        classes = ["styles.root"] + [
            f"styles[`{prop.name}-${{{prop.name}}}`]" for prop in variant_props(ctx)
        ]
        # children comes from the HTML attributes base interface
        content = "{children ?? t('" + i18n_title(ctx) + "')}"
        return (
            f"{self.header(ctx)}\n"
            f"import * as React from 'react';\n"
            f"import {{ useTranslation }} from 'react-i18next';\n"
            f"import type {{ {ctx.name}Props }} from '../types/{ctx.kebab}.types';\n"
            f"import styles from './{ctx.name}.module.css';\n\n"
            f"export const {ctx.name} = React.forwardRef<{dom}, {ctx.name}Props>(function {ctx.name}(\n"
            f"  {self.destructure(ctx, extra=('children',))},\n"
            f"  ref,\n"
            f") {{\n"
            f"  const {{ t }} = useTranslation();\n"
            f"  const className = [{', '.join(classes)}, rest.className].filter(Boolean).join(' ');\n\n"
            f"  return (\n"
            f"    <{element}\n"
            f"      {{...rest}}\n"
            f"      ref={{ref}}\n"
            f"      role=\"{ctx.role}\"\n"
            f"      aria-label={{t('{i18n_title(ctx)}')}}\n"
            f"      className={{className}}\n"
            f"    >\n"
            f"      {content}\n"
            f"    </{element}>\n"
            f"  );\n"
            f"}});\n\n"
            f"{ctx.name}.displayName = '{ctx.name}';\n"
        )

    def styles_file(self, ctx: ComponentContext) -> str | None:
        rules = [".root {\n  display: inline-flex;\n  gap: var(--spacing-sm, 0.5rem);\n}"]
        for prop in variant_props(ctx):
            for value in prop.values or []:
                rules.append(f".{prop.name}-{value} {{\n}}")
        return "\n\n".join(rules) + "\n"

    def test_file(self, ctx: ComponentContext) -> str:
        required = " ".join(
            f"{p.name}={{{p.default or self._sample(p)}}}" for p in ctx.props if p.required
        )
        return (
            f"{self.header(ctx)}\n"
            f"import {{ render, screen }} from '@testing-library/react';\n"
            f"import {{ describe, expect, it }} from 'vitest';\n"
            f"import {{ {ctx.name} }} from '../components/{ctx.name}';\n\n"
            f"describe('{ctx.name}', () => {{\n"
            f"  it('renders with role {ctx.role}', () => {{\n"
            f"    render(<{ctx.name} {required} />);\n"
            f"    expect(screen.getByRole('{ctx.role}')).toBeTruthy();\n"
            f"  }});\n"
            f"}});\n"
        ).replace(f"<{ctx.name}  />", f"<{ctx.name} />")

    @staticmethod
    def _sample(prop: PropContext) -> str:
        if prop.values:
            return json.dumps(prop.values[0])
        if prop.type == "number":
            return "0"
        if prop.type == "boolean":
            return "false"
        if prop.is_callback:
            return "() => undefined"
        if prop.is_slot:
            return "null"
        return json.dumps(prop.name)


class VueFallback(TypeScriptFallback):
    profile = PlatformProfile(
        platform="vue",
        language="typescript",
        extension=".vue",
        component_path="src/components/{name}.vue",
        types_path="src/types/{kebab}.types.ts",
        test_path="src/__tests__/{name}.spec.ts",
        story_path="src/stories/{name}.stories.ts",
        locale_path="src/locales/{locale}/{kebab}.json",
    )
    storybook_package = "@storybook/vue3"

    def story_import(self, ctx: ComponentContext) -> str:
        return f"{ctx.name} from '../components/{ctx.name}.vue'"

    def component(self, ctx: ComponentContext) -> str:
        defaults = []
        for prop in ctx.props:
            if prop.default is None:
                continue
            value = prop.default
            if isinstance(prop.raw_default, (list, dict)):
                value = f"() => ({value})"
            defaults.append(f"  {prop.name}: {value},")
        define = f"defineProps<{ctx.name}Props>()"
        if defaults:
            define = f"withDefaults({define}, {{\n" + "\n".join(defaults) + "\n})"
        classes = [f"'{ctx.kebab}'"] + [
            f"`{ctx.kebab}--{kebab_case(p.name)}-${{props.{p.name}}}`" for p in variant_props(ctx)
        ]
        tag = host_element(ctx)
        return (
            f"<!-- {ctx.name} ({ctx.category}) generated by dsforge for vue. -->\n"
            f"<script setup lang=\"ts\">\n"
            f"import {{ useI18n }} from 'vue-i18n';\n"
            f"import type {{ {ctx.name}Props }} from '../types/{ctx.kebab}.types';\n\n"
            f"// Props: {', '.join(p.name for p in ctx.props) or 'none'}\n"
            f"const props = {define};\n"
            f"const {{ t }} = useI18n();\n"
            f"</script>\n\n"
            f"<template>\n"
            f"  <{tag} role=\"{ctx.role}\" :aria-label=\"t('{i18n_title(ctx)}')\" "
            f":class=\"[{', '.join(classes)}]\">\n"
            f"    <slot>{{{{ t('{i18n_title(ctx)}') }}}}</slot>\n"
            f"  </{tag}>\n"
            f"</template>\n\n"
            f"<style scoped>\n"
            f"{self.css_rules(ctx, '.' + ctx.kebab)}"
            f"</style>\n"
        )

    def test_file(self, ctx: ComponentContext) -> str:
        props = {p.name: ReactFallback._sample(p) for p in ctx.props if p.required and p.default is None}
        props_src = ", ".join(f"{k}: {v}" for k, v in props.items())
        return (
            f"{self.header(ctx)}\n"
            f"import {{ mount }} from '@vue/test-utils';\n"
            f"import {{ describe, expect, it }} from 'vitest';\n"
            f"import {ctx.name} from '../components/{ctx.name}.vue';\n\n"
            f"describe('{ctx.name}', () => {{\n"
            f"  it('renders with role {ctx.role}', () => {{\n"
            f"    const wrapper = mount({ctx.name}, {{\n"
            f"      props: {{ {props_src} }},\n"
            f"      global: {{ mocks: {{ t: (key: string) => key }} }},\n"
            f"    }});\n"
            f"    expect(wrapper.attributes('role')).toBe('{ctx.role}');\n"
            f"  }});\n"
            f"}});\n"
        )


class AngularFallback(TypeScriptFallback):
    profile = PlatformProfile(
        platform="angular",
        language="typescript",
        extension=".component.ts",
        component_path="src/app/components/{kebab}/{kebab}.component.ts",
        types_path="src/app/components/{kebab}/{kebab}.types.ts",
        styles_path="src/app/components/{kebab}/{kebab}.component.css",
        test_path="src/app/components/{kebab}/{kebab}.component.spec.ts",
        story_path="src/stories/{name}.stories.ts",
        locale_path="src/assets/i18n/{locale}/{kebab}.json",
    )
    storybook_package = "@storybook/angular"

    @staticmethod
    def _ts_literal(value: object) -> str:
        if isinstance(value, str):
            return f"'{value}'"
        return json.dumps(value)

    def story_import(self, ctx: ComponentContext) -> str:
        return (
            f"{{ {ctx.name}Component }} from "
            f"'../app/components/{ctx.kebab}/{ctx.kebab}.component'"
        )

    def story_component(self, ctx: ComponentContext) -> str:
        return f"{ctx.name}Component"

    def component(self, ctx: ComponentContext) -> str:
        inputs = []
        for prop in ctx.props:
            doc = self.doc_comment(prop)
            if prop.required and prop.default is None:
                inputs.append(f"{doc}  @Input({{ required: true }}) {prop.name}!: {prop.type};")
            elif prop.default is not None:
                inputs.append(f"{doc}  @Input() {prop.name}: {prop.type} = {prop.default};")
            else:
                inputs.append(f"{doc}  @Input() {prop.name}?: {prop.type};")
        host_classes = " ".join(
            f"[class.{ctx.kebab}--{kebab_case(p.name)}-{kebab_case(str(v))}]=\"{p.name} === {self._ts_literal(v)}\""
            for p in variant_props(ctx)
            for v in (p.values or [])
        )
        tag = host_element(ctx)
        title = i18n_title(ctx)
        body = "\n".join(inputs)
        return (
            f"{self.header(ctx)}\n"
            f"import {{ ChangeDetectionStrategy, Component, Input }} from '@angular/core';\n"
            f"import {{ TranslateModule }} from '@ngx-translate/core';\n"
            + "".join(f"{line}\n" for line in ctx.types.imports)
            + f"\n@Component({{\n"
            f"  selector: 'ds-{ctx.kebab}',\n"
            f"  standalone: true,\n"
            f"  imports: [TranslateModule],\n"
            f"  template: `\n"
            f"    <{tag} class=\"{ctx.kebab}\" role=\"{ctx.role}\" "
            f"[attr.aria-label]=\"'{title}' | translate\"{(' ' + host_classes) if host_classes else ''}>\n"
            f"      <ng-content>{{{{ '{title}' | translate }}}}</ng-content>\n"
            f"    </{tag}>\n"
            f"  `,\n"
            f"  styleUrl: './{ctx.kebab}.component.css',\n"
            f"  changeDetection: ChangeDetectionStrategy.OnPush,\n"
            f"}})\n"
            f"export class {ctx.name}Component {{\n"
            f"{body}\n"
            f"}}\n"
        )

    def styles_file(self, ctx: ComponentContext) -> str | None:
        return self.css_rules(ctx, "." + ctx.kebab)

    def test_file(self, ctx: ComponentContext) -> str:
        return (
            f"{self.header(ctx)}\n"
            f"import {{ ComponentFixture, TestBed }} from '@angular/core/testing';\n"
            f"import {{ TranslateModule }} from '@ngx-translate/core';\n"
            f"import {{ {ctx.name}Component }} from './{ctx.kebab}.component';\n\n"
            f"describe('{ctx.name}Component', () => {{\n"
            f"  let fixture: ComponentFixture<{ctx.name}Component>;\n\n"
            f"  beforeEach(async () => {{\n"
            f"    await TestBed.configureTestingModule({{\n"
            f"      imports: [{ctx.name}Component, TranslateModule.forRoot()],\n"
            f"    }}).compileComponents();\n"
            f"    fixture = TestBed.createComponent({ctx.name}Component);\n"
            f"  }});\n\n"
            f"  it('renders with role {ctx.role}', () => {{\n"
            f"    fixture.detectChanges();\n"
            f"    const host = fixture.nativeElement.querySelector('[role=\"{ctx.role}\"]');\n"
            f"    expect(host).toBeTruthy();\n"
            f"  }});\n"
            f"}});\n"
        )


class SvelteFallback(TypeScriptFallback):
    profile = PlatformProfile(
        platform="svelte",
        language="typescript",
        extension=".svelte",
        component_path="src/lib/components/{name}.svelte",
        types_path="src/lib/types/{kebab}.types.ts",
        test_path="src/lib/__tests__/{name}.test.ts",
        story_path="src/stories/{name}.stories.ts",
        locale_path="src/lib/locales/{locale}/{kebab}.json",
    )
    storybook_package = "@storybook/svelte"

    def story_import(self, ctx: ComponentContext) -> str:
        return f"{ctx.name} from '../lib/components/{ctx.name}.svelte'"

    def component(self, ctx: ComponentContext) -> str:
        title = i18n_title(ctx)
        classes = " ".join(
            [ctx.kebab]
            + [f"{ctx.kebab}--{kebab_case(p.name)}-{{{p.name}}}" for p in variant_props(ctx)]
        )
        slot = next((p for p in ctx.slot_props if p.name == "children"), None)
        content = (
            f"{{#if children}}{{@render children()}}{{:else}}{{$t('{title}')}}{{/if}}"
            if slot
            else f"{{$t('{title}')}}"
        )
        tag = host_element(ctx)
        return (
            f"<!-- {ctx.name} ({ctx.category}) generated by dsforge for svelte. -->\n"
            f"<script lang=\"ts\">\n"
            f"  import {{ t }} from 'svelte-i18n';\n"
            f"  import type {{ {ctx.name}Props }} from '../types/{ctx.kebab}.types';\n\n"
            f"  let {self.destructure(ctx)}: {ctx.name}Props = $props();\n"
            f"</script>\n\n"
            f"<{tag} {{...rest}} role=\"{ctx.role}\" aria-label={{$t('{title}')}} class=\"{classes}\">\n"
            f"  {content}\n"
            f"</{tag}>\n\n"
            f"<style>\n"
            f"{self.css_rules(ctx, '.' + ctx.kebab)}"
            f"</style>\n"
        )

    def test_file(self, ctx: ComponentContext) -> str:
        props = {p.name: ReactFallback._sample(p) for p in ctx.props if p.required and p.default is None}
        props_src = ", ".join(f"{k}: {v}" for k, v in props.items())
        return (
            f"{self.header(ctx)}\n"
            f"import {{ render, screen }} from '@testing-library/svelte';\n"
            f"import {{ describe, expect, it }} from 'vitest';\n"
            f"import {ctx.name} from '../components/{ctx.name}.svelte';\n\n"
            f"describe('{ctx.name}', () => {{\n"
            f"  it('renders with role {ctx.role}', () => {{\n"
            f"    render({ctx.name}, {{ props: {{ {props_src} }} }});\n"
            f"    expect(screen.getByRole('{ctx.role}')).toBeTruthy();\n"
            f"  }});\n"
            f"}});\n"
        )


class CssFallback(TypeScriptFallback):
    """
    Plain CSS: the component is a stylesheet keyed by data attributes, and
    the types file declares the attribute contract for DOM consumers.
    """

    profile = PlatformProfile(
        platform="css",
        language="css",
        extension=".css",
        component_path="css/components/{kebab}.css",
        types_path="types/{kebab}.d.ts",
        test_path="tests/{kebab}.test.ts",
        story_path="stories/{name}.stories.ts",
        locale_path="locales/{locale}/{kebab}.json",
        comment="/*",
    )
    storybook_package = "@storybook/html"

    def header(self, ctx: ComponentContext) -> str:
        text = f"{ctx.name} ({ctx.category}) generated by dsforge for {ctx.platform}."
        return f"/* {text} */"

    def component(self, ctx: ComponentContext) -> str:
        root = f".{ctx.kebab}"
        rules = [
            f"/* {ctx.name} ({ctx.category}) generated by dsforge for css.\n"
            f" * Markup: <{host_element(ctx)} class=\"{ctx.kebab}\" role=\"{ctx.role}\" "
            f"data-i18n=\"{i18n_title(ctx)}\">\n"
            f" * Props: {', '.join(p.name for p in ctx.props) or 'none'}\n"
            f" */",
            f"{root} {{\n"
            f"  display: inline-flex;\n"
            f"  gap: var(--spacing-sm, 0.5rem);\n"
            f"}}",
        ]
        for prop in ctx.value_props:
            attr = f"data-{kebab_case(prop.name)}"
            if prop.values:
                for value in prop.values:
                    rules.append(f"{root}[{attr}=\"{value}\"] {{\n}}")
            else:
                rules.append(f"{root}[{attr}] {{\n}}")
        rules.append(f"{root}[data-i18n]:empty::before {{\n  content: attr(data-i18n);\n}}")
        return "\n\n".join(rules) + "\n"

    def types_file(self, ctx: ComponentContext) -> str | None:
        lines = []
        for prop in ctx.value_props:
            lines.append(f"{self.doc_comment(prop)}  readonly '{ 'data-' + kebab_case(prop.name) }'?: {prop.type};")
        body = "\n".join(lines)
        decl = f"export interface {ctx.name}Attributes {{\n{body}\n}}" if body else (
            f"export interface {ctx.name}Attributes {{}}"
        )
        parts: list[str] = []
        declarations = ctx.types.render_declarations()
        if declarations:
            parts.append(declarations)
        parts.append(decl)
        parts.append(f"export declare const {camel_case(ctx.name)}ClassName: '{ctx.kebab}';")
        return f"{self.header(ctx)}\n" + self.with_imports(ctx, "\n\n".join(parts))

    def story_import(self, ctx: ComponentContext) -> str:
        return f"'../css/components/{ctx.kebab}.css'"

    def story_file(self, ctx: ComponentContext) -> str | None:
        tag = host_element(ctx)
        return (
            f"{self.header(ctx)}\n"
            f"import type {{ Meta, StoryObj }} from '{self.storybook_package}';\n"
            f"import {self.story_import(ctx)};\n\n"
            f"const meta = {{\n"
            f"  title: '{pascal_case(ctx.category)}/{ctx.name}',\n"
            f"  render: () => {{\n"
            f"    const el = document.createElement('{tag}');\n"
            f"    el.className = '{ctx.kebab}';\n"
            f"    el.setAttribute('role', '{ctx.role}');\n"
            f"    el.dataset.i18n = '{i18n_title(ctx)}';\n"
            f"    return el;\n"
            f"  }},\n"
            f"}} satisfies Meta;\n\n"
            f"export default meta;\n"
            f"export const Default: StoryObj = {{}};\n"
        )

    def test_file(self, ctx: ComponentContext) -> str:
        return (
            f"{self.header(ctx)}\n"
            f"import {{ readFileSync }} from 'node:fs';\n"
            f"import {{ describe, expect, it }} from 'vitest';\n\n"
            f"describe('{ctx.kebab}.css', () => {{\n"
            f"  it('defines the root class', () => {{\n"
            f"    const css = readFileSync('css/components/{ctx.kebab}.css', 'utf8');\n"
            f"    expect(css).toContain('.{ctx.kebab}');\n"
            f"  }});\n"
            f"}});\n"
        )


class TailwindFallback(TypeScriptFallback):
    """Tailwind: a typed class-recipe function per component."""

    profile = PlatformProfile(
        platform="tailwind",
        language="typescript",
        extension=".classes.ts",
        component_path="src/components/{kebab}.classes.ts",
        types_path="src/types/{kebab}.types.ts",
        test_path="src/__tests__/{kebab}.classes.test.ts",
        story_path="src/stories/{name}.stories.ts",
        locale_path="src/locales/{locale}/{kebab}.json",
    )
    storybook_package = "@storybook/html"

    SIZE_UTILITIES = {"xs": "text-xs", "sm": "text-sm", "md": "text-base", "lg": "text-lg", "xl": "text-xl"}

    def utility(self, axis: str, value: str) -> str:
        if axis == "size" and value in self.SIZE_UTILITIES:
            return self.SIZE_UTILITIES[value]
        return f"{kebab_case(axis)}-{kebab_case(value)}"

    def component(self, ctx: ComponentContext) -> str:
        recipe_name = f"{camel_case(ctx.name)}Classes"
        variants = variant_props(ctx)
        table_lines = []
        for prop in variants:
            entries = ", ".join(
                f"{json.dumps(str(v))}: '{self.utility(prop.name, str(v))}'" for v in prop.values or []
            )
            table_lines.append(f"  {prop.name}: {{ {entries} }},")
        table = "{\n" + "\n".join(table_lines) + "\n}" if table_lines else "{}"
        picks = ", ".join(
            f"{p.name} = {p.default}" if p.default is not None else p.name for p in variants
        )
        lookups = "".join(
            f", {p.name} !== undefined ? variants.{p.name}[{p.name}] : undefined" for p in variants
        )
        return (
            f"{self.header(ctx)}\n"
            f"import type {{ {ctx.name}Props }} from '../types/{ctx.kebab}.types';\n\n"
            f"export const {camel_case(ctx.name)}I18nKey = '{i18n_title(ctx)}';\n\n"
            f"const base = 'inline-flex items-center gap-2 focus-visible:outline-2';\n\n"
            f"const variants = {table} as const;\n\n"
            f"/**\n"
            f" * Classes for a {ctx.kebab} host element.\n"
            f" * Props: {', '.join(p.name for p in ctx.props) or 'none'}\n"
            f" */\n"
            f"export function {recipe_name}(props: Partial<{ctx.name}Props> = {{}}): string {{\n"
            f"  const {{ {picks} }} = props;\n"
            f"  return [base{lookups}].filter(Boolean).join(' ');\n"
            f"}}\n"
        ).replace("  const {  } = props;\n", "  void props;\n")

    def story_file(self, ctx: ComponentContext) -> str | None:
        recipe_name = f"{camel_case(ctx.name)}Classes"
        return (
            f"{self.header(ctx)}\n"
            f"import type {{ Meta, StoryObj }} from '{self.storybook_package}';\n"
            f"import {{ {recipe_name} }} from '../components/{ctx.kebab}.classes';\n\n"
            f"const meta = {{\n"
            f"  title: '{pascal_case(ctx.category)}/{ctx.name}',\n"
            f"  render: () => {{\n"
            f"    const el = document.createElement('{host_element(ctx)}');\n"
            f"    el.className = {recipe_name}();\n"
            f"    el.setAttribute('role', '{ctx.role}');\n"
            f"    return el;\n"
            f"  }},\n"
            f"}} satisfies Meta;\n\n"
            f"export default meta;\n"
            f"export const Default: StoryObj = {{}};\n"
        )

    def test_file(self, ctx: ComponentContext) -> str:
        recipe_name = f"{camel_case(ctx.name)}Classes"
        return (
            f"{self.header(ctx)}\n"
            f"import {{ describe, expect, it }} from 'vitest';\n"
            f"import {{ {recipe_name} }} from '../components/{ctx.kebab}.classes';\n\n"
            f"describe('{recipe_name}', () => {{\n"
            f"  it('always includes the base classes', () => {{\n"
            f"    expect({recipe_name}()).toContain('inline-flex');\n"
            f"  }});\n"
            f"}});\n"
        )
