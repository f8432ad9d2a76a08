"""
Engine configuration.

Settings come from the ``[engine]`` table of ``dsforge.toml`` with
environment overrides on top:

    [engine]
    cache_size = 128
    template_dirs = ["templates"]
    locales = ["en", "nb-NO", "fr", "ar"]
    log_level = "INFO"

Environment variables:
    DSFORGE_ENV          development | test | production
    DSFORGE_CACHE_SIZE   overrides engine.cache_size
    DSFORGE_TEMPLATES    os.pathsep-separated template roots, searched first
    DSFORGE_LOG_LEVEL    overrides engine.log_level
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

from .errors import ConfigError, ErrorContext
from .ir.results import DEFAULT_LOCALES

logger = logging.getLogger(__name__)

CONFIG_FILE = "dsforge.toml"
DEFAULT_CACHE_SIZE = 128


class DsforgeEnv(StrEnum):
    """Runtime environment values."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


def get_dsforge_env() -> DsforgeEnv:
    """Read DSFORGE_ENV, defaulting to development for unset or unknown values."""
    value = os.environ.get("DSFORGE_ENV", "").lower().strip()
    if value in ("production", "prod"):
        return DsforgeEnv.PRODUCTION
    if value in ("test", "testing"):
        return DsforgeEnv.TEST
    if value not in ("", "development", "dev"):
        logger.warning(
            "Unknown DSFORGE_ENV value '%s'. "
            "Valid values: development, test, production. Defaulting to development.",
            value,
        )
    return DsforgeEnv.DEVELOPMENT


@dataclass
class EngineConfig:
    """Transformation engine settings."""

    cache_size: int = DEFAULT_CACHE_SIZE
    template_dirs: list[Path] = field(default_factory=list)
    locales: list[str] = field(default_factory=lambda: list(DEFAULT_LOCALES))
    log_level: str = "INFO"
    env: DsforgeEnv = DsforgeEnv.DEVELOPMENT

    def apply_env_overrides(self) -> EngineConfig:
        """Apply DSFORGE_* environment variables in place and return self."""
        self.env = get_dsforge_env()

        raw_size = os.environ.get("DSFORGE_CACHE_SIZE")
        if raw_size:
            self.cache_size = _parse_cache_size(raw_size, "DSFORGE_CACHE_SIZE")

        raw_dirs = os.environ.get("DSFORGE_TEMPLATES")
        if raw_dirs:
            extra = [Path(p) for p in raw_dirs.split(os.pathsep) if p]
            self.template_dirs = extra + self.template_dirs

        level = os.environ.get("DSFORGE_LOG_LEVEL")
        if level:
            self.log_level = level.upper()
        return self


def _parse_cache_size(raw: object, source: str) -> int:
    try:
        size = int(raw)  # type: ignore[call-overload]
    except (TypeError, ValueError) as e:
        raise ConfigError(f"cache_size must be an integer, got {raw!r}", ErrorContext(path=source)) from e
    if size < 1:
        raise ConfigError(f"cache_size must be at least 1, got {size}", ErrorContext(path=source))
    return size


def load_config(project_root: Path | None = None) -> EngineConfig:
    """
    Load engine configuration for a project directory.

    Missing ``dsforge.toml`` yields defaults. Relative template directories
    are resolved against the project root.

    Raises:
        ConfigError: If the file exists but is malformed
    """
    config = EngineConfig()
    root = project_root or Path.cwd()
    config_path = root / CONFIG_FILE

    if config_path.exists():
        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML: {e}", ErrorContext(path=str(config_path))) from e

        engine = data.get("engine", {})
        if "cache_size" in engine:
            config.cache_size = _parse_cache_size(engine["cache_size"], str(config_path))
        config.template_dirs = [root / Path(p) for p in engine.get("template_dirs", [])]
        if "locales" in engine:
            config.locales = [str(loc) for loc in engine["locales"]]
        config.log_level = str(engine.get("log_level", config.log_level)).upper()
        logger.debug(f"Loaded engine config from {config_path}")

    return config.apply_env_overrides()
