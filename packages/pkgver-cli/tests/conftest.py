# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project with pyproject.toml and requirements files."""
    project_dir = tmp_path / "test_project"
    project_dir.mkdir()

    pyproject = project_dir / "pyproject.toml"
    pyproject.write_text(
        """[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "test-project"
version = "1.0.0"

[tool.pkgver]
requirements = "requirements/base.txt"
"""
    )

    requirements_dir = project_dir / "requirements"
    requirements_dir.mkdir()
    (requirements_dir / "base.txt").write_text(
        "# runtime dependencies\n"
        "Pygments==2.11.2\n"
        "click>=8.1\n"
        "\n"
        "requests\n"
    )

    yield project_dir


@pytest.fixture
def clean_requirements(tmp_path: Path) -> Path:
    """Create a requirements.txt where every line parses."""
    path = tmp_path / "requirements.txt"
    path.write_text("Pygments==2.11.2\ntomli<=2.0.1\n")
    return path
