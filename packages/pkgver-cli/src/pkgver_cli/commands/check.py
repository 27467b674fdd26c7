# SPDX-License-Identifier: MIT
"""Check a requirements file for unparsable lines."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import click

from pkgver_requirements import RequirementsFile, RequirementsFileError, parse_requirements_file

from ..main import Context, echo_error, echo_info, echo_success, echo_warning, pass_context


def _as_json(result: RequirementsFile) -> str:
    return json.dumps(
        {
            "source": str(result.source_path),
            "requirements": [
                {
                    "package": req.package,
                    "operator": req.operator.value,
                    "version": str(req.version),
                    "normalized_version": req.version.normalized,
                }
                for req in result.requirements
            ],
            "diagnostics": [
                {"line": diag.line_number, "message": diag.message}
                for diag in result.diagnostics
            ],
        },
        indent=2,
    )


@click.command()
@click.argument(
    "path",
    required=False,
    type=click.Path(path_type=Path),
)
@click.option(
    "--strict",
    is_flag=True,
    help="Treat unparsable lines as errors.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print requirements and diagnostics as JSON.",
)
@pass_context
def check(ctx: Context, path: Optional[Path], strict: bool, as_json: bool) -> None:
    """Parse a requirements file and report lines that could not be parsed.

    PATH defaults to the [tool.pkgver] requirements setting, or
    requirements.txt in the project root. A relative PATH is read from
    the -C directory when one is given.

    \b
    Examples:
        pkgver check                       # Check the project's requirements.txt
        pkgver check dev-requirements.txt  # Check a specific file
        pkgver check --strict              # Fail on unparsable lines
    """
    config = ctx.load_config()
    if path is None:
        path = config.requirements_path
    else:
        path = ctx.resolve(path)
    strict = strict or config.strict

    try:
        result = parse_requirements_file(path)
    except RequirementsFileError as e:
        echo_error(str(e))
        raise SystemExit(1)

    if as_json:
        echo_info(_as_json(result))
    else:
        echo_info(f"Checking: {result.source_path}")
        for req in result.requirements:
            echo_info(f"  {req.package} {req.operator.value} {req.version}")

        if result.diagnostics:
            echo_info("")
            echo_warning(f"Skipped lines ({len(result.diagnostics)}):")
            for diagnostic in result.diagnostics:
                echo_warning(f"  - {diagnostic}")

    if result.diagnostics and strict:
        echo_error("Check failed (strict mode)!")
        raise SystemExit(1)

    if not as_json:
        echo_success(f"\n{len(result.requirements)} requirement(s) parsed.")
