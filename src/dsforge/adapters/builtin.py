"""
The nine built-in platform adapters.
"""

from __future__ import annotations

from ..templates.store import TemplateStore, default_store
from . import PlatformAdapter
from .native import ComposeAdapter, FlutterAdapter, SwiftUIAdapter
from .stylesheet import CssAdapter, TailwindAdapter
from .web import AngularAdapter, ReactAdapter, SvelteAdapter, VueAdapter

BUILTIN_ADAPTERS = (
    ReactAdapter,
    VueAdapter,
    AngularAdapter,
    SvelteAdapter,
    FlutterAdapter,
    SwiftUIAdapter,
    ComposeAdapter,
    CssAdapter,
    TailwindAdapter,
)


def builtin_adapters(store: TemplateStore | None = None) -> dict[str, PlatformAdapter]:
    """Instantiate every built-in adapter against one shared template store."""
    store = store or default_store()
    return {cls.platform: cls(store) for cls in BUILTIN_ADAPTERS}
