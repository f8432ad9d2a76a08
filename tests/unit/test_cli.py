"""Tests for the dsforge command line interface."""

import json

import pytest
import yaml
from typer.testing import CliRunner

from dsforge import __version__
from dsforge.cli import app

runner = CliRunner()


@pytest.fixture
def project(tmp_path):
    """Project directory without a dsforge.toml."""
    path = tmp_path / "project"
    path.mkdir()
    return path


class TestInfoCommands:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_version_matches_project_metadata(self):
        assert __version__ == "0.4.0"

    def test_platforms(self):
        result = runner.invoke(app, ["platforms"])
        assert result.exit_code == 0
        assert "react" in result.stdout
        assert "android-kotlin" in result.stdout

    def test_recommend_json(self):
        result = runner.invoke(app, ["recommend", "react", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["platform"] == "react"
        assert data["styling"] == "styled-components"
        assert "form" in data["patterns"]

    def test_recommend_unknown_platform(self):
        result = runner.invoke(app, ["recommend", "gtk4"])
        assert result.exit_code == 1
        assert "gtk4" in result.stdout


class TestTokensCommand:
    def test_css(self, schema_file):
        result = runner.invoke(app, ["tokens", str(schema_file), "--format", "css"])
        assert result.exit_code == 0
        assert "--spacing-md: 1rem;" in result.stdout

    def test_json(self, schema_file):
        result = runner.invoke(app, ["tokens", str(schema_file), "-f", "json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)

    def test_unknown_format(self, schema_file):
        result = runner.invoke(app, ["tokens", str(schema_file), "-f", "xml"])
        assert result.exit_code == 1

    def test_missing_schema(self, tmp_path):
        result = runner.invoke(app, ["tokens", str(tmp_path / "missing.yaml")])
        assert result.exit_code == 1


class TestTransformCommand:
    def test_writes_platform_tree(self, schema_file, project, tmp_path):
        out = tmp_path / "out"
        result = runner.invoke(
            app,
            ["transform", str(schema_file), "-p", "react", "-o", str(out), "--project", str(project)],
        )
        assert result.exit_code == 0, result.stdout
        assert (out / "react" / "src" / "components" / "Button.tsx").is_file()
        assert (out / "react" / "src" / "locales" / "en" / "button.json").is_file()
        assert (out / "react" / "tokens" / "tokens.css").is_file()
        assert (out / "react" / "src" / "theme" / "DesignSystemProvider.tsx").is_file()

    def test_locales_and_components(self, schema_file, project, tmp_path):
        out = tmp_path / "out"
        result = runner.invoke(
            app,
            [
                "transform", str(schema_file),
                "-p", "flutter",
                "-l", "nb",
                "-c", "Stack",
                "-o", str(out),
                "--project", str(project),
            ],
        )
        assert result.exit_code == 0, result.stdout
        assert (out / "flutter" / "lib" / "components" / "stack.dart").is_file()
        assert not (out / "flutter" / "lib" / "components" / "button.dart").exists()
        assert (out / "flutter" / "assets" / "locales" / "nb" / "stack.json").is_file()

    def test_unknown_platform(self, schema_file, project):
        result = runner.invoke(
            app, ["transform", str(schema_file), "-p", "gtk4", "--project", str(project)]
        )
        assert result.exit_code == 1
        assert "gtk4" in result.stdout

    def test_component_failures_exit_nonzero(self, tmp_path, schema_data, project):
        schema_data["components"]["Mood"] = {
            "category": "feedback",
            "props": {"mood": "mood"},
            "accessibility": {"role": "status"},
        }
        path = tmp_path / "mood.yaml"
        path.write_text(yaml.safe_dump(schema_data), encoding="utf-8")
        result = runner.invoke(
            app, ["transform", str(path), "-p", "react", "--project", str(project)]
        )
        assert result.exit_code == 1
        assert "Mood" in result.stdout

    def test_invalid_config(self, schema_file, project):
        (project / "dsforge.toml").write_text("[engine\n", encoding="utf-8")
        result = runner.invoke(
            app, ["transform", str(schema_file), "-p", "react", "--project", str(project)]
        )
        assert result.exit_code == 1


class TestComponentCommand:
    def test_prints_fallback_code(self, schema_file, project):
        result = runner.invoke(
            app,
            ["component", str(schema_file), "Button", "-p", "ios-swift", "--project", str(project)],
        )
        assert result.exit_code == 0
        assert "struct Button: View" in result.stdout

    def test_prop_override(self, schema_file, project):
        result = runner.invoke(
            app,
            [
                "component", str(schema_file), "Button",
                "-p", "flutter",
                "--prop", "size=lg",
                "--project", str(project),
            ],
        )
        assert result.exit_code == 0
        assert "this.size = ButtonSize.lg," in result.stdout

    def test_writes_manifest(self, schema_file, project, tmp_path):
        out = tmp_path / "button"
        result = runner.invoke(
            app,
            [
                "component", str(schema_file), "Button",
                "-p", "react",
                "-o", str(out),
                "--project", str(project),
            ],
        )
        assert result.exit_code == 0
        assert (out / "src" / "components" / "Button.tsx").is_file()
        assert (out / "src" / "types" / "button.types.ts").is_file()

    def test_unknown_component(self, schema_file, project):
        result = runner.invoke(
            app, ["component", str(schema_file), "Tooltip", "-p", "react", "--project", str(project)]
        )
        assert result.exit_code == 1
