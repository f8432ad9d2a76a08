"""
Error types for dsforge schema validation, type mapping and code generation.
"""

from __future__ import annotations

from dataclasses import dataclass, field


class DsforgeError(Exception):
    """Base exception for all dsforge errors."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            location = self.context.format()
            if location:
                return f"{location}: {self.message}"
        return self.message


class UnknownPlatformError(DsforgeError):
    """
    Raised when no adapter is registered for a platform id.

    Examples:
    - Typo in a platform name ("raect")
    - Platform whose adapter was never registered ("gtk4")
    """

    def __init__(self, platform: str, available: list[str] | None = None):
        self.platform = platform
        self.available = sorted(available or [])
        super().__init__(
            f"Platform '{platform}' not found. Available platforms: {self.available}",
            ErrorContext(platform=platform),
        )


class TemplateRenderError(DsforgeError):
    """
    Raised when a template exists but fails to render.

    Never triggers fallback generation: a broken template is a bug in the
    template, not a missing one.

    Examples:
    - Jinja syntax errors
    - Undefined variables (templates render with StrictUndefined)
    - Exceptions raised by filters
    """

    def __init__(self, message: str, template: str, context: ErrorContext | None = None):
        self.template = template
        super().__init__(message, context)


class UnmappableTypeError(DsforgeError):
    """
    Raised when a type descriptor has no mapping on a target platform.

    Examples:
    - Custom type name without explicit values that no table knows
    - Complex kind a platform table does not cover
    """

    def __init__(self, kind: str, detail: str, platform: str, component: str | None = None):
        self.kind = kind
        self.detail = detail
        self.platform = platform
        super().__init__(
            f"Cannot map {kind} type '{detail}'",
            ErrorContext(platform=platform, component=component),
        )


class InvalidSpecificationError(DsforgeError):
    """
    Raised when a single component specification is malformed.

    Batch transformations skip the component and record the failure;
    single-component calls propagate it.

    Examples:
    - Component name is not PascalCase
    - Compound variant conditions reference a missing prop
    - Simple variant default not among its values
    """

    pass


class SchemaValidationError(DsforgeError):
    """
    Raised when the schema as a whole is malformed.

    Examples:
    - Dangling or cyclic token references
    - Token names colliding across layers
    - Structurally invalid input documents
    """

    def __init__(
        self,
        message: str,
        issues: list[str] | None = None,
        context: ErrorContext | None = None,
    ):
        self.issues = list(issues or [])
        if self.issues:
            message = message + "\n" + "\n".join(f"  - {issue}" for issue in self.issues)
        super().__init__(message, context)


class ConfigError(DsforgeError):
    """
    Raised when dsforge.toml cannot be parsed.

    Examples:
    - Invalid TOML syntax
    - Non-integer cache size
    """

    pass


@dataclass
class ErrorContext:
    """
    Where an error happened.

    Attributes:
        platform: Target platform id, if relevant
        component: Component name, if relevant
        path: Token path, template path or file path, if relevant
    """

    platform: str | None = None
    component: str | None = None
    path: str | None = None
    extra: dict[str, str] = field(default_factory=dict)

    def format(self) -> str:
        """
        Format context as a compact location string.

        Returns:
            String like "[react] Button (react/form/button.tsx.j2)"
        """
        parts: list[str] = []
        if self.platform:
            parts.append(f"[{self.platform}]")
        if self.component:
            parts.append(self.component)
        if self.path:
            parts.append(f"({self.path})")
        return " ".join(parts)


def make_component_error(
    component: str, message: str, platform: str | None = None
) -> InvalidSpecificationError:
    """Create an InvalidSpecificationError for a named component."""
    return InvalidSpecificationError(
        message, ErrorContext(platform=platform, component=component)
    )


def make_token_error(issues: list[str]) -> SchemaValidationError:
    """Create a SchemaValidationError summarising token-layer problems."""
    noun = "issue" if len(issues) == 1 else "issues"
    return SchemaValidationError(f"Token validation failed with {len(issues)} {noun}", issues)
