# SPDX-License-Identifier: MIT
"""The pkgver command: version parsing, ordering and requirements checks."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .config import CLIConfig, ConfigError, load_config


class Context:
    """State shared by pkgver commands: the -C directory and its configuration."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> CLIConfig:
        """Load the [tool.pkgver] configuration once per invocation."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config

    def resolve(self, path: Path) -> Path:
        """Resolve a command-line path against the -C directory, if one was given."""
        if self.project_dir is None or path.is_absolute():
            return path
        return self.project_dir / path


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


@click.group()
@click.version_option(package_name="pkgver-tools")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Log parsing details at debug level to stderr.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Run as if pkgver was started in this directory.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """PEP 440 version and requirements tool.

    Parse and compare package versions, and check requirements files.

    \b
    Examples:
        pkgver parse 1.0a1 2!1.0.pre0
        pkgver compare 1.0.dev1 1.0a1
        pkgver sort 1.0 1.0.post1 1.0rc1
        pkgver check requirements.txt
    """
    ctx.verbose = verbose
    ctx.project_dir = directory
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register commands
from .commands import check, version

cli.add_command(version.parse)
cli.add_command(version.compare_command)
cli.add_command(version.sort)
cli.add_command(check.check)


def main() -> None:
    """Run pkgver, reporting configuration and unexpected errors with exit status 1."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
