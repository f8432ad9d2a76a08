"""Tests for engine configuration loading."""

from pathlib import Path

import pytest

from dsforge.core.config import (
    DEFAULT_CACHE_SIZE,
    DsforgeEnv,
    EngineConfig,
    get_dsforge_env,
    load_config,
)
from dsforge.core.errors import ConfigError
from dsforge.core.ir import DEFAULT_LOCALES


def write_config(root: Path, text: str) -> None:
    (root / "dsforge.toml").write_text(text, encoding="utf-8")


class TestLoadConfig:
    def test_defaults_without_file(self, tmp_path):
        config = load_config(tmp_path)
        assert config.cache_size == DEFAULT_CACHE_SIZE
        assert config.template_dirs == []
        assert config.locales == list(DEFAULT_LOCALES)
        assert config.env == DsforgeEnv.DEVELOPMENT

    def test_engine_table(self, tmp_path):
        write_config(
            tmp_path,
            """
[engine]
cache_size = 16
template_dirs = ["templates"]
locales = ["en", "de"]
log_level = "debug"
""",
        )
        config = load_config(tmp_path)
        assert config.cache_size == 16
        assert config.template_dirs == [tmp_path / "templates"]
        assert config.locales == ["en", "de"]
        assert config.log_level == "DEBUG"

    def test_invalid_toml(self, tmp_path):
        write_config(tmp_path, "[engine\ncache_size = 1")
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path)
        assert "Invalid TOML" in str(exc_info.value)

    @pytest.mark.parametrize("value", ['"many"', "0"])
    def test_invalid_cache_size(self, tmp_path, value):
        write_config(tmp_path, f"[engine]\ncache_size = {value}\n")
        with pytest.raises(ConfigError):
            load_config(tmp_path)


class TestEnvOverrides:
    def test_cache_size_override(self, tmp_path, monkeypatch):
        write_config(tmp_path, "[engine]\ncache_size = 16\n")
        monkeypatch.setenv("DSFORGE_CACHE_SIZE", "4")
        assert load_config(tmp_path).cache_size == 4

    def test_template_dirs_are_searched_first(self, tmp_path, monkeypatch):
        write_config(tmp_path, '[engine]\ntemplate_dirs = ["templates"]\n')
        monkeypatch.setenv("DSFORGE_TEMPLATES", "/opt/overrides")
        config = load_config(tmp_path)
        assert config.template_dirs == [Path("/opt/overrides"), tmp_path / "templates"]

    def test_log_level_override(self, monkeypatch):
        monkeypatch.setenv("DSFORGE_LOG_LEVEL", "warning")
        assert EngineConfig().apply_env_overrides().log_level == "WARNING"

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("prod", DsforgeEnv.PRODUCTION),
            ("production", DsforgeEnv.PRODUCTION),
            ("testing", DsforgeEnv.TEST),
            ("", DsforgeEnv.DEVELOPMENT),
            ("staging", DsforgeEnv.DEVELOPMENT),
        ],
    )
    def test_dsforge_env(self, monkeypatch, value, expected):
        monkeypatch.setenv("DSFORGE_ENV", value)
        assert get_dsforge_env() == expected

    def test_unknown_env_logs_warning(self, monkeypatch, caplog):
        monkeypatch.setenv("DSFORGE_ENV", "staging")
        get_dsforge_env()
        assert "Unknown DSFORGE_ENV value 'staging'" in caplog.text
