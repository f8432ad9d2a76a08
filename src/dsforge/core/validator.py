"""
Schema and component validation.

Two levels:

- Schema-level problems (token references, component key/name mismatches,
  duplicate names) fail the whole request with SchemaValidationError before
  any adapter runs.
- Component-level problems raise InvalidSpecificationError from
  ``validate_component``; batch transformations catch it per component.
"""

from __future__ import annotations

import logging
import re

from .errors import SchemaValidationError, make_component_error
from .ir.components import ComponentSpecification
from .ir.schema import UniversalTokenSchema
from .tokens import collect_token_issues

logger = logging.getLogger(__name__)

PASCAL_CASE = re.compile(r"^[A-Z][A-Za-z0-9]*$")


def validate_schema(schema: UniversalTokenSchema) -> None:
    """
    Check cross-cutting schema invariants.

    Raises:
        SchemaValidationError: With one issue per problem found
    """
    issues = collect_token_issues(schema.tokens)

    seen: dict[str, str] = {}
    for key, spec in schema.components.items():
        if key != spec.name:
            issues.append(f"component key '{key}' does not match its name '{spec.name}'")
        folded = spec.name.lower()
        if folded in seen:
            issues.append(f"component names '{seen[folded]}' and '{spec.name}' differ only by case")
        else:
            seen[folded] = spec.name

    if issues:
        logger.debug(f"Schema {schema.id} failed validation with {len(issues)} issue(s)")
        raise SchemaValidationError(f"Schema '{schema.id}' is invalid", issues)


def component_issues(spec: ComponentSpecification) -> list[str]:
    """Return every problem with a single component specification."""
    issues: list[str] = []

    if not PASCAL_CASE.match(spec.name):
        issues.append(f"name '{spec.name}' must be PascalCase")

    for axis, variant in spec.variants.simple.items():
        if variant.default is not None and variant.default not in variant.values:
            issues.append(
                f"variant '{axis}' default '{variant.default}' is not one of {variant.values}"
            )
        if len(set(variant.values)) != len(variant.values):
            issues.append(f"variant '{axis}' lists duplicate values")

    for index, compound in enumerate(spec.variants.compound):
        for prop_name in compound.conditions:
            if prop_name not in spec.props:
                issues.append(
                    f"compound variant #{index} ({compound.class_name}) "
                    f"references unknown prop '{prop_name}'"
                )

    for prop_name, prop in spec.props.items():
        if prop.required and prop.has_default:
            issues.append(f"prop '{prop_name}' is required but declares a default")

    return issues


def validate_component(spec: ComponentSpecification, platform: str | None = None) -> None:
    """
    Raises:
        InvalidSpecificationError: If the component is malformed
    """
    issues = component_issues(spec)
    if issues:
        raise make_component_error(spec.name, "; ".join(issues), platform)
