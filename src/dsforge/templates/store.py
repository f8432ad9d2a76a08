"""
Template stores.

A store answers two questions: does a template exist at a path, and how do
Jinja2 environments load it. The existence check is explicit so the
resolver can branch to fallback generation without relying on loader
exceptions.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path

from jinja2 import BaseLoader, ChoiceLoader, DictLoader, FileSystemLoader, PrefixLoader

# Templates shipped with dsforge
BUILTIN_TEMPLATES_DIR = Path(__file__).parent / "builtin"

# "builtin://" always resolves to shipped templates so that project
# overrides can extend the originals they replace:
#   {% extends "builtin://react/interactive/button.tsx.j2" %}
BUILTIN_PREFIX = "builtin"


class TemplateStore(ABC):
    """Source of component templates."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Whether a template is present at ``path`` (relative, '/'-separated)."""

    @abstractmethod
    def loader(self) -> BaseLoader:
        """Jinja2 loader serving the same templates."""

    def describe(self) -> str:
        return self.__class__.__name__


class FileSystemTemplateStore(TemplateStore):
    """
    Templates from one or more directories.

    Earlier roots shadow later ones. Built-in templates are searched last
    unless ``include_builtin`` is False.
    """

    def __init__(self, roots: Iterable[Path] = (), include_builtin: bool = True) -> None:
        self.roots = [Path(r) for r in roots if Path(r).is_dir()]
        self.include_builtin = include_builtin
        if include_builtin:
            self.roots.append(BUILTIN_TEMPLATES_DIR)

    def exists(self, path: str) -> bool:
        return any((root / path).is_file() for root in self.roots)

    def loader(self) -> BaseLoader:
        main_loader = ChoiceLoader([FileSystemLoader(str(root)) for root in self.roots])
        if not self.include_builtin:
            return main_loader
        prefixed = PrefixLoader(
            {BUILTIN_PREFIX: FileSystemLoader(str(BUILTIN_TEMPLATES_DIR))}, delimiter="://"
        )
        return ChoiceLoader([prefixed, main_loader])

    def describe(self) -> str:
        return "FileSystemTemplateStore(" + ", ".join(str(r) for r in self.roots) + ")"


class DictTemplateStore(TemplateStore):
    """In-memory templates keyed by path. Useful for tests and embedding."""

    def __init__(self, templates: dict[str, str] | None = None) -> None:
        self.templates: dict[str, str] = dict(templates or {})

    def add(self, path: str, source: str) -> None:
        self.templates[path] = source

    def exists(self, path: str) -> bool:
        return path in self.templates

    def loader(self) -> BaseLoader:
        return DictLoader(self.templates)


def default_store(project_dirs: Iterable[Path] = ()) -> FileSystemTemplateStore:
    """Project template directories first, then the built-in templates."""
    return FileSystemTemplateStore(project_dirs, include_builtin=True)
