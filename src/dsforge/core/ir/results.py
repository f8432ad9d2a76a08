"""
Transformation options and results.
"""

from __future__ import annotations

import json
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_LOCALES = ("en", "nb-NO", "fr", "ar")


class BuildTarget(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"


class WcagLevel(str, Enum):
    A = "wcag-a"
    AA = "wcag-aa"
    AAA = "wcag-aaa"


class FileKind(str, Enum):
    """Artifact kinds produced by the assembler."""

    COMPONENT = "component"
    TYPES = "types"
    STYLES = "styles"
    TEST = "test"
    STORY = "story"
    LOCALE = "locale"


class TransformationOptions(BaseModel):
    """
    Caller-controlled knobs. Every field participates in the cache key.

    Attributes:
        target: Development builds keep comments, production builds strip them
        features: Feature flags exposed to templates (order-insensitive)
        optimization: Emit memoised / optimised variants where templates support it
        accessibility: WCAG conformance level requested
        locales: Locale stubs to emit, in order
        convention: Routing convention tried before the plain category folder
        components: Optional subset of component names to generate
    """

    target: BuildTarget = BuildTarget.DEVELOPMENT
    features: list[str] = Field(default_factory=list)
    optimization: bool = False
    accessibility: WcagLevel = WcagLevel.AA
    locales: list[str] = Field(default_factory=lambda: list(DEFAULT_LOCALES))
    convention: str | None = None
    components: list[str] | None = None

    model_config = ConfigDict(frozen=True)

    @field_validator("features")
    @classmethod
    def dedupe_features(cls, v: list[str]) -> list[str]:
        return sorted(set(v))

    def has_feature(self, name: str) -> bool:
        return name in self.features

    def wants(self, component: str) -> bool:
        return self.components is None or component in self.components

    def cache_token(self) -> str:
        """Stable serialization with sorted keys."""
        return json.dumps(self.model_dump(mode="json"), sort_keys=True, separators=(",", ":"))


class GeneratedFile(BaseModel):
    path: str
    content: str
    kind: FileKind

    model_config = ConfigDict(frozen=True)


class ComponentFailure(BaseModel):
    """A component that could not be generated in a batch."""

    component: str
    error_type: str
    message: str

    model_config = ConfigDict(frozen=True)


class GeneratedComponent(BaseModel):
    """Single-component output: main source plus the assembled file manifest."""

    platform: str
    name: str
    code: str
    files: list[GeneratedFile] = Field(default_factory=list)
    used_template: str | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def from_fallback(self) -> bool:
        return self.used_template is None


class TransformationResult(BaseModel):
    """
    Everything one platform adapter produced for a schema.

    Every component eligible for the platform appears in exactly one of
    ``components`` or ``failures``; ineligible ones are listed in ``skipped``.
    """

    platform: str
    schema_id: str
    tokens: dict[str, str] = Field(default_factory=dict)
    components: dict[str, str] = Field(default_factory=dict)
    theme: str = ""
    utils: dict[str, str] = Field(default_factory=dict)
    examples: dict[str, str] = Field(default_factory=dict)
    files: list[GeneratedFile] = Field(default_factory=list)
    failures: list[ComponentFailure] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def success(self) -> bool:
        """Whether every eligible component was generated."""
        return len(self.failures) == 0

    def files_of_kind(self, kind: FileKind) -> list[GeneratedFile]:
        return [f for f in self.files if f.kind == kind]


class PatternSnippet(BaseModel):
    template: str
    components: list[str]

    model_config = ConfigDict(frozen=True)


class Recommendations(BaseModel):
    """Static guidance for code-generating assistants targeting a platform."""

    platform: str
    preferred_components: list[str] = Field(
        default_factory=lambda: ["Button", "Card", "Input", "Container", "Stack"]
    )
    layout_patterns: list[str] = Field(
        default_factory=lambda: ["container-stack", "card-grid", "form-stack"]
    )
    styling: str = "tokens"
    accessibility: str = "wcag-aa"
    patterns: dict[str, PatternSnippet] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)
