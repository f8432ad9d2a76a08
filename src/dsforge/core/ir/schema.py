"""
Universal Token Schema: the root input document.
"""

from __future__ import annotations

import hashlib
import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .components import ComponentSpecification

TOKEN_LAYERS = ("primitive", "semantic", "component")


class TokenSystem(BaseModel):
    """
    Three token layers.

    Leaves are scalars, lists of scalars, or reference nodes ``{"ref": "path"}``.
    Semantic and component layers normally reference primitives.
    """

    primitive: dict[str, Any] = Field(default_factory=dict)
    semantic: dict[str, Any] = Field(default_factory=dict)
    component: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    def layers(self) -> list[tuple[str, dict[str, Any]]]:
        """Layers in resolution order."""
        return [(name, getattr(self, name)) for name in TOKEN_LAYERS]


class UniversalTokenSchema(BaseModel):
    """
    Platform-neutral design-system description.

    ``id`` and ``version`` identify the schema for caching and invalidation;
    ``fingerprint()`` addresses its content.
    """

    id: str = Field(min_length=1)
    name: str
    version: str = "1.0.0"
    description: str | None = None
    tokens: TokenSystem = Field(default_factory=TokenSystem)
    components: dict[str, ComponentSpecification] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @field_validator("components", mode="before")
    @classmethod
    def fill_component_names(cls, v: Any) -> Any:
        # Components keyed by name may omit the name inside the body
        if isinstance(v, dict):
            filled: dict[str, Any] = {}
            for key, spec in v.items():
                if isinstance(spec, dict) and "name" not in spec:
                    spec = {**spec, "name": key}
                filled[key] = spec
            return filled
        return v

    def fingerprint(self) -> str:
        """
        SHA-256 over the canonical JSON dump.

        Key order is preserved, not sorted: token insertion order drives
        flattening order and therefore the generated output.
        """
        payload = json.dumps(
            self.model_dump(mode="json"),
            separators=(",", ":"),
            ensure_ascii=False,
            default=str,
        )
        return hashlib.sha256(payload.encode("utf-8")).hexdigest()

    def component_names(self) -> list[str]:
        return list(self.components.keys())
