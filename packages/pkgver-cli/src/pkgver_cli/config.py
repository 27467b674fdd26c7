# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml.

Settings live in the ``[tool.pkgver]`` table:

    [tool.pkgver]
    requirements = "requirements/base.txt"
    strict = true
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


DEFAULT_REQUIREMENTS = "requirements.txt"


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class CLIConfig:
    """CLI configuration loaded from pyproject.toml.

    Attributes:
        project_dir: Directory the configuration applies to
        requirements: Requirements file checked when no path is given
        strict: Treat unparsable requirement lines as errors
    """

    project_dir: Path
    requirements: Path = Path(DEFAULT_REQUIREMENTS)
    strict: bool = False

    @property
    def requirements_path(self) -> Path:
        """Return the requirements file resolved against the project directory."""
        if self.requirements.is_absolute():
            return self.requirements
        return self.project_dir / self.requirements

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "CLIConfig":
        """Load configuration from pyproject.toml.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            CLIConfig instance

        Raises:
            ConfigError: If the file is invalid or a setting has the wrong type
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Path,
    ) -> "CLIConfig":
        """Create CLIConfig from a parsed pyproject.toml dictionary.

        Args:
            pyproject: Parsed pyproject.toml as a dictionary
            project_dir: Directory containing pyproject.toml

        Returns:
            CLIConfig instance

        Raises:
            ConfigError: If a setting has the wrong type
        """
        tool_pkgver = pyproject.get("tool", {}).get("pkgver", {})
        if not isinstance(tool_pkgver, dict):
            raise ConfigError("[tool.pkgver] must be a table")

        requirements = tool_pkgver.get("requirements", DEFAULT_REQUIREMENTS)
        if not isinstance(requirements, str) or not requirements:
            raise ConfigError("[tool.pkgver].requirements must be a non-empty string")

        strict = tool_pkgver.get("strict", False)
        if not isinstance(strict, bool):
            raise ConfigError("[tool.pkgver].strict must be true or false")

        return cls(
            project_dir=project_dir,
            requirements=Path(requirements),
            strict=strict,
        )


def find_project_root(start_dir: Optional[str | Path] = None) -> Path:
    """Find the project root by looking for pyproject.toml or requirements.txt.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the project root directory

    Raises:
        ConfigError: If no project root is found
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        if (current / DEFAULT_REQUIREMENTS).exists():
            return current
        current = current.parent

    raise ConfigError("Could not find project root (no pyproject.toml or requirements.txt found)")


def load_config(project_dir: Optional[str | Path] = None) -> CLIConfig:
    """Load CLI configuration from the project directory.

    Args:
        project_dir: Project directory (defaults to finding project root,
            then to the current directory)

    Returns:
        CLIConfig instance

    Raises:
        ConfigError: If configuration cannot be loaded
    """
    if project_dir is None:
        try:
            project_dir = find_project_root()
        except ConfigError:
            project_dir = Path.cwd()

    project_path = Path(project_dir)

    if (project_path / "pyproject.toml").exists():
        return CLIConfig.from_pyproject(project_path)

    # Defaults for projects with only a requirements file
    return CLIConfig(project_dir=project_path)
