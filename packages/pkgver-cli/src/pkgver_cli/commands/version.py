# SPDX-License-Identifier: MIT
"""Parse, compare and sort version identifiers."""

from __future__ import annotations

import json

import click

from pkgver_version import Version, VersionParseError, compare, parse_version

from ..main import echo_error, echo_info


def _describe(version: Version) -> list[str]:
    """Render the parsed segments of a version as indented lines."""
    lines = [
        f"  normalized: {version.normalized}",
        f"  epoch:      {version.epoch if version.epoch is not None else '-'}",
        f"  release:    {'.'.join(str(part) for part in version.release)}",
    ]
    if version.pre is not None:
        number = "" if version.pre.number is None else f" {version.pre.number}"
        lines.append(f"  pre:        {version.pre.label.name.lower()}{number}")
    if version.post is not None:
        marker = "-" if version.post.marker is None else version.post.marker.value
        number = "" if version.post.number is None else f" {version.post.number}"
        lines.append(f"  post:       {marker}{number}")
    if version.dev is not None:
        number = "" if version.dev.number is None else f" {version.dev.number}"
        lines.append(f"  dev:        dev{number}")
    if version.local is not None:
        lines.append(f"  local:      {version.local}")
    return lines


def _parse_all(texts: tuple[str, ...]) -> list[Version]:
    """Parse every argument or exit with the first failure."""
    parsed: list[Version] = []
    for text in texts:
        try:
            parsed.append(parse_version(text))
        except VersionParseError as e:
            echo_error(str(e))
            raise SystemExit(1)
    return parsed


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print parsed versions as JSON.",
)
def parse(versions: tuple[str, ...], as_json: bool) -> None:
    """Parse version identifiers and show their segments.

    Exits with status 1 if any version is malformed.

    \b
    Examples:
        pkgver parse 1.0a1
        pkgver parse --json 1!2.0.post3+local.1
    """
    results = []
    failed = False

    for text in versions:
        try:
            version = parse_version(text)
        except VersionParseError as e:
            failed = True
            if as_json:
                results.append({"original": text, "error": str(e)})
            else:
                echo_error(str(e))
            continue

        if as_json:
            results.append(version.as_dict())
        else:
            echo_info(str(version))
            for line in _describe(version):
                echo_info(line)

    if as_json:
        echo_info(json.dumps(results, indent=2))

    if failed:
        raise SystemExit(1)


@click.command("compare")
@click.argument("left")
@click.argument("right")
def compare_command(left: str, right: str) -> None:
    """Compare two versions by PEP 440 precedence.

    \b
    Examples:
        pkgver compare 1.0.dev1 1.0a1    # 1.0.dev1 < 1.0a1
        pkgver compare 1.0rc 1.0c        # 1.0rc == 1.0c
    """
    a, b = _parse_all((left, right))
    ordering = compare(a, b)
    echo_info(f"{a} {ordering.symbol} {b}")


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--reverse",
    "-r",
    is_flag=True,
    help="Print the highest version first.",
)
def sort(versions: tuple[str, ...], reverse: bool) -> None:
    """Print versions in precedence order, lowest first.

    \b
    Examples:
        pkgver sort 1.0 1.0.post1 1.0a1 1.0.dev1
        pkgver sort --reverse 2.0 1!1.0
    """
    for version in sorted(_parse_all(versions), reverse=reverse):
        echo_info(str(version))
