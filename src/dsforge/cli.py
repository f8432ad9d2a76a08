"""
dsforge command line interface.

Commands:
- platforms: List registered platforms
- recommend: Show generation guidance for a platform
- tokens: Flatten and resolve a schema's tokens
- transform: Generate artifacts for one or more platforms
- component: Generate a single component
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ._version import get_version
from .core import ir
from .core.config import load_config
from .core.errors import DsforgeError
from .core.schema_loader import load_schema
from .core.tokens import TokenSet
from .engine import TransformationEngine

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Transform a Universal Token Schema into platform-native design-system code",
    no_args_is_help=True,
)

console = Console()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Token output format to file name
TOKEN_FILES = {
    "css-variables": "tokens.css",
    "json": "tokens.json",
    "typescript": "tokens.ts",
    "scss": "_tokens.scss",
    "tailwind-config": "tailwind.config.ts",
    "dart": "tokens.dart",
    "swift": "Tokens.swift",
    "kotlin": "Tokens.kt",
}

THEME_FILES = {
    "react": "src/theme/DesignSystemProvider.tsx",
    "vue": "src/theme/designSystem.ts",
    "angular": "src/app/theme/design-system.service.ts",
    "svelte": "src/lib/theme.ts",
    "flutter": "lib/theme/theme.dart",
    "ios-swift": "Sources/Theme/DesignSystemTheme.swift",
    "android-kotlin": "src/main/kotlin/theme/DesignSystemTheme.kt",
    "css": "css/theme.css",
    "tailwind": "src/styles/tailwind.css",
}


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"dsforge {get_version()}")
        raise typer.Exit()


def configure_logging(level: str | None) -> None:
    name = (level or os.getenv("DSFORGE_LOG_LEVEL", "WARNING")).upper()
    logging.basicConfig(level=getattr(logging, name, logging.WARNING), format=LOG_FORMAT)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Logging level (default: DSFORGE_LOG_LEVEL or WARNING)"
    ),
) -> None:
    """dsforge CLI main callback for global options."""
    configure_logging(log_level)


def _engine(project_dir: Path) -> TransformationEngine:
    try:
        config = load_config(project_dir)
    except DsforgeError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)
    return TransformationEngine(config=config)


def _load(schema_path: Path) -> ir.UniversalTokenSchema:
    try:
        return load_schema(schema_path)
    except DsforgeError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)


def _write(out: Path, relative: str, content: str) -> None:
    target = out / relative
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")


def _parse_prop(raw: str) -> tuple[str, Any]:
    """Parse ``name=value``; the value is JSON when it parses, else a string."""
    if "=" not in raw:
        raise typer.BadParameter(f"expected name=value, got '{raw}'")
    name, value = raw.split("=", 1)
    try:
        return name.strip(), json.loads(value)
    except json.JSONDecodeError:
        return name.strip(), value


def write_result(result: ir.TransformationResult, out: Path) -> int:
    """Write a transformation result under ``out``. Returns the file count."""
    written = 0
    for file in result.files:
        _write(out, file.path, file.content)
        written += 1
    for fmt, content in result.tokens.items():
        _write(out, f"tokens/{TOKEN_FILES.get(fmt, fmt)}", content)
        written += 1
    if result.theme:
        _write(out, THEME_FILES.get(result.platform, "theme.txt"), result.theme)
        written += 1
    for relative, content in {**result.utils, **result.examples}.items():
        _write(out, relative, content)
        written += 1
    return written


@app.command(name="platforms")
def platforms_command() -> None:
    """List registered platforms."""
    engine = TransformationEngine()
    table = Table(title="Platforms")
    table.add_column("Platform", style="cyan")
    table.add_column("Styling")
    table.add_column("Accessibility")
    for platform in engine.available_platforms():
        rec = engine.get_recommendations(platform)
        table.add_row(platform, rec.styling, rec.accessibility)
    console.print(table)


@app.command(name="recommend")
def recommend_command(
    platform: str = typer.Argument(..., help="Platform id"),
    as_json: bool = typer.Option(False, "--json", help="Output JSON"),
) -> None:
    """Show generation guidance for a platform."""
    engine = TransformationEngine()
    try:
        rec = engine.get_recommendations(platform)
    except DsforgeError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(rec.model_dump_json(indent=2))
        return

    console.print(f"[bold]{rec.platform}[/bold]  styling: {rec.styling}  accessibility: {rec.accessibility}")
    console.print(f"Preferred components: {', '.join(rec.preferred_components)}")
    console.print(f"Layout patterns: {', '.join(rec.layout_patterns)}")
    for name, snippet in rec.patterns.items():
        console.print(f"\n[cyan]{name}[/cyan] ({', '.join(snippet.components)})")
        console.print(snippet.template, markup=False, highlight=False)


@app.command(name="tokens")
def tokens_command(
    schema_path: Path = typer.Argument(..., help="Schema file (.yaml, .yml or .json)"),
    fmt: str = typer.Option("table", "--format", "-f", help="table, css or json"),
) -> None:
    """Flatten and resolve a schema's tokens."""
    schema = _load(schema_path)
    try:
        tokens = TokenSet.from_system(schema.tokens)
    except DsforgeError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    if fmt == "css":
        typer.echo(tokens.css_block())
    elif fmt == "json":
        typer.echo(tokens.to_json())
    elif fmt == "table":
        table = Table(title=f"Tokens: {schema.name or schema.id}")
        table.add_column("Name", style="cyan")
        table.add_column("Layer")
        table.add_column("Value")
        table.add_column("Reference", style="dim")
        for entry in tokens:
            table.add_row(entry.name, entry.layer, str(entry.resolved), entry.ref or "")
        console.print(table)
    else:
        console.print(f"[red]Error: unknown format '{fmt}' (expected table, css or json)[/red]")
        raise typer.Exit(code=1)


@app.command(name="transform")
def transform_command(
    schema_path: Path = typer.Argument(..., help="Schema file (.yaml, .yml or .json)"),
    platform: list[str] | None = typer.Option(
        None, "--platform", "-p", help="Target platform (repeatable, default: all)"
    ),
    out: Path | None = typer.Option(None, "--out", "-o", help="Output directory"),
    locale: list[str] | None = typer.Option(None, "--locale", "-l", help="Locale stub (repeatable)"),
    component: list[str] | None = typer.Option(
        None, "--component", "-c", help="Only generate these components (repeatable)"
    ),
    convention: str | None = typer.Option(None, "--convention", help="Routing convention, e.g. app-router"),
    production: bool = typer.Option(False, "--production", help="Production build"),
    project_dir: Path = typer.Option(Path("."), "--project", help="Directory containing dsforge.toml"),
) -> None:
    """Generate artifacts for one or more platforms."""
    engine = _engine(project_dir)
    schema = _load(schema_path)
    options = ir.TransformationOptions(
        target=ir.BuildTarget.PRODUCTION if production else ir.BuildTarget.DEVELOPMENT,
        locales=list(locale) if locale else list(engine.config.locales),
        convention=convention,
        components=list(component) if component else None,
    )

    try:
        results = asyncio.run(engine.transform_all(schema, platform or None, options))
    except DsforgeError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    table = Table(title=f"Transformed {schema.name or schema.id}")
    table.add_column("Platform", style="cyan")
    table.add_column("Components", justify="right")
    table.add_column("Failures", justify="right")
    table.add_column("Skipped", justify="right")
    table.add_column("Files", justify="right")
    failed = False
    for name, result in results.items():
        files = len(result.files)
        if out is not None:
            files = write_result(result, out / name)
        table.add_row(
            name,
            str(len(result.components)),
            f"[red]{len(result.failures)}[/red]" if result.failures else "0",
            str(len(result.skipped)),
            str(files),
        )
        failed = failed or not result.success
    console.print(table)

    for name, result in results.items():
        for failure in result.failures:
            console.print(f"[yellow]{name}: {failure.component}: {escape(failure.message)}[/yellow]")
    if out is not None:
        console.print(f"Wrote output to [green]{out}[/green]")
    if failed:
        raise typer.Exit(code=1)


@app.command(name="component")
def component_command(
    schema_path: Path = typer.Argument(..., help="Schema file (.yaml, .yml or .json)"),
    name: str = typer.Argument(..., help="Component name"),
    platform: str = typer.Option(..., "--platform", "-p", help="Target platform"),
    prop: list[str] | None = typer.Option(None, "--prop", help="Default override name=value (repeatable)"),
    out: Path | None = typer.Option(None, "--out", "-o", help="Write the file manifest here"),
    project_dir: Path = typer.Option(Path("."), "--project", help="Directory containing dsforge.toml"),
) -> None:
    """Generate a single component."""
    engine = _engine(project_dir)
    schema = _load(schema_path)
    spec = schema.components.get(name)
    if spec is None:
        console.print(f"[red]Error: component '{name}' not found in {escape(str(schema_path))}[/red]")
        raise typer.Exit(code=1)

    overrides = dict(_parse_prop(p) for p in prop or [])
    try:
        generated = asyncio.run(engine.generate_component(spec, platform, overrides or None))
    except DsforgeError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    if out is None:
        typer.echo(generated.code, nl=False)
        return
    for file in generated.files:
        _write(out, file.path, file.content)
    source = generated.used_template or "fallback"
    console.print(f"Wrote {len(generated.files)} files to [green]{out}[/green] ({source})")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
