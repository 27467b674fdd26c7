# SPDX-License-Identifier: MIT
"""PEP 440 version parsing and comparison.

This package parses package version identifiers (epoch, release, pre-, post-
and dev-release, local segment) into immutable ``Version`` values and orders
them by PEP 440 precedence.

Example:
    >>> from pkgver_version import parse_version, compare, Ordering
    >>>
    >>> version = parse_version("1!1.0rc2.post1+build.5")
    >>> version.epoch
    1
    >>> version.pre
    PreRelease(label=<PreLabel.RELEASE_CANDIDATE: 'rc'>, number=2)
    >>>
    >>> compare(parse_version("1.0.dev1"), parse_version("1.0a1")) is Ordering.LESS
    True
"""

__version__ = "0.1.0"

from .pep440 import (
    Version,
    PreRelease,
    PostRelease,
    DevRelease,
    PreLabel,
    PostMarker,
    Captures,
    scan,
    build,
    parse_version,
    is_valid_version,
    normalize_label,
    VersionParseError,
    MalformedVersionError,
    InvalidNumberError,
    VERSION_PATTERN,
)
from .compare import (
    Ordering,
    Phase,
    VersionKey,
    compare,
    compare_versions,
    version_key,
)

__all__ = [
    # Version parsing
    "Version",
    "PreRelease",
    "PostRelease",
    "DevRelease",
    "PreLabel",
    "PostMarker",
    "Captures",
    "scan",
    "build",
    "parse_version",
    "is_valid_version",
    "normalize_label",
    "VersionParseError",
    "MalformedVersionError",
    "InvalidNumberError",
    "VERSION_PATTERN",
    # Version comparison
    "Ordering",
    "Phase",
    "VersionKey",
    "compare",
    "compare_versions",
    "version_key",
]
