"""Version lookup: the source checkout's pyproject.toml, else installed metadata."""

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def get_version() -> str:
    if PYPROJECT.is_file():
        with PYPROJECT.open("rb") as f:
            project = tomllib.load(f).get("project", {})
        if project.get("name") == "dsforge" and project.get("version"):
            return str(project["version"])
    try:
        return version("dsforge")
    except PackageNotFoundError:
        return "0.0.0"
