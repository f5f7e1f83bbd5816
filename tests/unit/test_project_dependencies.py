"""Sanity checks for project metadata."""

from __future__ import annotations

from pathlib import Path
import tomllib

import pytest

pytestmark = pytest.mark.unit_common


def _load_pyproject() -> dict:
    pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
    return tomllib.loads(pyproject.read_text(encoding="utf-8"))


def _load_project_dependencies() -> list[str]:
    return list(_load_pyproject()["project"]["dependencies"])


@pytest.mark.parametrize("name", ["pydantic", "rich", "structlog", "typer"])
def test_runtime_dependency_is_declared(name: str) -> None:
    assert any(dep.startswith(name) for dep in _load_project_dependencies())


def test_pytest_is_test_only() -> None:
    data = _load_pyproject()
    assert not any(dep.startswith("pytest") for dep in data["project"]["dependencies"])
    assert any(dep.startswith("pytest") for dep in data["project"]["optional-dependencies"]["test"])


def test_markers_are_registered() -> None:
    markers = _load_pyproject()["tool"]["pytest"]["ini_options"]["markers"]
    assert any(m.startswith("unit_ui") for m in markers)
    assert any(m.startswith("unit_common") for m in markers)
