"""Shared pytest fixtures for dsforge tests."""

import copy
from pathlib import Path
from typing import Any

import pytest
import yaml

from dsforge.core import ir
from dsforge.core.schema_loader import parse_schema
from dsforge.adapters import PlatformAdapter
from dsforge.engine import TransformationEngine
from dsforge.templates.store import DictTemplateStore

SCHEMA_DATA: dict[str, Any] = {
    "id": "acme-ds",
    "name": "Acme Design System",
    "version": "1.0.0",
    "tokens": {
        "primitive": {
            "spacing": {"sm": "0.5rem", "md": "1rem"},
            "color": {"blue": {"500": "#3b82f6"}},
        },
        "semantic": {
            "spacing": {"section": {"ref": "md"}},
            "color": {"primary": {"ref": "color.blue.500"}},
        },
    },
    "components": {
        "Button": {
            "category": "interactive",
            "description": "Primary call to action",
            "props": {
                "size": {"type": "custom", "custom": "size", "default": "md"},
                "label": {"type": "string", "required": True},
                "onClick": {"type": "function"},
            },
            "accessibility": {
                "role": "button",
                "keyboard": [{"key": "Enter", "action": "activate"}],
                "announcements": [{"trigger": "press", "message": "Pressed"}],
            },
        },
        "Stack": {
            "category": "layout",
            "props": {
                "gap": "size",
                "children": "node",
            },
            "accessibility": {"role": "group"},
        },
    },
}


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep DSFORGE_* variables from the outer environment out of tests."""
    for name in ("DSFORGE_ENV", "DSFORGE_CACHE_SIZE", "DSFORGE_TEMPLATES", "DSFORGE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def schema_data() -> dict[str, Any]:
    """Return a fresh copy of the sample schema document."""
    return copy.deepcopy(SCHEMA_DATA)


@pytest.fixture
def schema(schema_data: dict[str, Any]) -> ir.UniversalTokenSchema:
    """Return the sample schema as a model."""
    return parse_schema(copy.deepcopy(schema_data))


@pytest.fixture
def button(schema: ir.UniversalTokenSchema) -> ir.ComponentSpecification:
    return schema.components["Button"]


@pytest.fixture
def stack(schema: ir.UniversalTokenSchema) -> ir.ComponentSpecification:
    return schema.components["Stack"]


@pytest.fixture
def empty_store() -> DictTemplateStore:
    """Template store with no templates, so every component falls back."""
    return DictTemplateStore()


@pytest.fixture
def engine(empty_store: DictTemplateStore) -> TransformationEngine:
    """Engine whose built-in adapters only ever use fallback generation."""
    return TransformationEngine(store=empty_store)


@pytest.fixture
def schema_file(tmp_path: Path, schema_data: dict[str, Any]) -> Path:
    """Write the sample schema as YAML and return its path."""
    path = tmp_path / "acme.yaml"
    path.write_text(yaml.safe_dump(schema_data, sort_keys=False), encoding="utf-8")
    return path


class EchoAdapter(PlatformAdapter):
    """Minimal third-party adapter."""

    async def transform(self, schema, options=None):
        return ir.TransformationResult(platform="echo", schema_id=schema.id)

    async def generate_component_code(self, spec, props=None, options=None):
        return ir.GeneratedComponent(platform="echo", name=spec.name, code=spec.name)

    def get_ai_recommendations(self):
        return ir.Recommendations(platform="echo")


@pytest.fixture
def echo_adapter_cls() -> type[PlatformAdapter]:
    """Adapter class registered by plugin tests."""
    return EchoAdapter
