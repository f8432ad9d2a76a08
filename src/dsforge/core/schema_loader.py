"""
Universal Token Schema loading.

Reads schema documents from YAML or JSON files and validates them into
``UniversalTokenSchema``. Structural validation errors from pydantic are
reported as SchemaValidationError with one issue per failing location.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import ErrorContext, SchemaValidationError
from .ir.schema import UniversalTokenSchema

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


def _format_validation_error(error: ValidationError) -> list[str]:
    issues = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"]) or "<root>"
        issues.append(f"{location}: {detail['msg']}")
    return issues


def parse_schema(data: dict[str, Any] | UniversalTokenSchema) -> UniversalTokenSchema:
    """
    Validate raw schema data.

    Raises:
        SchemaValidationError: If the data does not describe a valid schema
    """
    if isinstance(data, UniversalTokenSchema):
        return data
    if not isinstance(data, dict):
        raise SchemaValidationError(
            f"Schema document must be a mapping, got {type(data).__name__}"
        )
    try:
        return UniversalTokenSchema.model_validate(data)
    except ValidationError as e:
        schema_id = data.get("id", "<unknown>")
        raise SchemaValidationError(
            f"Schema '{schema_id}' has an invalid structure", _format_validation_error(e)
        ) from e


def load_schema(path: Path) -> UniversalTokenSchema:
    """
    Load a schema document from disk.

    YAML is used for ``.yaml``/``.yml`` files, JSON for everything else.

    Raises:
        SchemaValidationError: If the file cannot be parsed or validated
    """
    context = ErrorContext(path=str(path))
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SchemaValidationError(f"Cannot read schema file: {e}", context=context) from e

    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise SchemaValidationError(f"Cannot parse schema file: {e}", context=context) from e

    schema = parse_schema(data or {})
    logger.info(
        f"Loaded schema '{schema.id}' v{schema.version} from {path} "
        f"({len(schema.components)} components)"
    )
    return schema


def dump_schema(schema: UniversalTokenSchema, path: Path) -> None:
    """Write a schema back to disk as YAML or JSON, matching the suffix."""
    data = schema.model_dump(mode="json", exclude_none=True)
    if path.suffix.lower() in YAML_SUFFIXES:
        text = yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    else:
        text = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
