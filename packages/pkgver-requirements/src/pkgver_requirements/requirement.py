# SPDX-License-Identifier: MIT
"""Parsing of single requirement lines.

A requirement line has the shape ``<package><operator><version>`` with no
required whitespace, for example ``Pygments==2.11.2``. Supported operators
are ``==``, ``>=`` and ``<=``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from pkgver_version import Ordering, Version, VersionParseError, compare, parse_version

# First occurrence of any supported operator token
OPERATOR_PATTERN = re.compile(r"==|>=|<=")


class RequirementError(ValueError):
    """Raised when a requirement line cannot be parsed."""

    def __init__(self, line: str, message: str):
        self.line = line
        self.message = message
        super().__init__(message)


class UnknownOperatorError(RequirementError):
    """Raised when a line contains none of the supported operators."""

    def __init__(self, line: str):
        super().__init__(line, f"No supported operator (==, >=, <=) in {line.strip()!r}")


class EmptyPackageNameError(RequirementError):
    """Raised when nothing precedes the operator."""

    def __init__(self, line: str):
        super().__init__(line, f"Missing package name in {line.strip()!r}")


class InvalidVersionError(RequirementError):
    """Raised when the text after the operator is not a valid version.

    Attributes:
        cause: The underlying version parse error
    """

    def __init__(self, line: str, cause: VersionParseError):
        self.cause = cause
        super().__init__(line, f"Invalid version in {line.strip()!r}: {cause}")


class Operator(str, Enum):
    """Comparison operator of a requirement."""

    EQUAL_TO = "=="
    GREATER_EQUAL = ">="
    LESS_EQUAL = "<="

    def __str__(self) -> str:
        return self.value

    def accepts(self, ordering: Ordering) -> bool:
        """Return True if a candidate with this ordering satisfies the operator.

        ``ordering`` is the result of comparing the candidate against the
        required version.
        """
        if self is Operator.EQUAL_TO:
            return ordering is Ordering.EQUAL
        if self is Operator.GREATER_EQUAL:
            return ordering is not Ordering.LESS
        return ordering is not Ordering.GREATER


def normalize_package_name(name: str) -> str:
    """Normalize a package name for comparison (PEP 503).

    Examples:
        >>> normalize_package_name("Foo.Bar_baz")
        'foo-bar-baz'
    """
    return re.sub(r"[-_.]+", "-", name).lower()


@dataclass(frozen=True, slots=True)
class Requirement:
    """A version constraint on a single package.

    Attributes:
        package: Package name as written
        operator: Comparison operator
        version: Required version
    """

    package: str
    operator: Operator
    version: Version

    def __str__(self) -> str:
        return f"{self.package}{self.operator.value}{self.version}"

    @property
    def normalized_name(self) -> str:
        return normalize_package_name(self.package)

    def is_satisfied_by(self, candidate: Version | str) -> bool:
        """Check a candidate version against this requirement.

        Args:
            candidate: Version object or version string

        Raises:
            VersionParseError: If a candidate string is not a valid version

        Examples:
            >>> parse_requirement("Pygments>=2.11").is_satisfied_by("2.12.0")
            True
        """
        if isinstance(candidate, str):
            candidate = parse_version(candidate)
        return self.operator.accepts(compare(candidate, self.version))


def parse_requirement(line: str) -> Requirement:
    """Parse a requirement line into a Requirement.

    Args:
        line: Text such as ``Pygments==2.11.2``

    Returns:
        The parsed Requirement

    Raises:
        UnknownOperatorError: If no supported operator is present
        EmptyPackageNameError: If the package name is empty
        InvalidVersionError: If the version does not parse

    Examples:
        >>> req = parse_requirement("Pygments==2.11.2")
        >>> req.package, req.operator, str(req.version)
        ('Pygments', <Operator.EQUAL_TO: '=='>, '2.11.2')
    """
    match = OPERATOR_PATTERN.search(line)
    if match is None:
        raise UnknownOperatorError(line)

    package = line[: match.start()].strip()
    if not package:
        raise EmptyPackageNameError(line)

    try:
        version = parse_version(line[match.end() :])
    except VersionParseError as e:
        raise InvalidVersionError(line, e) from e

    return Requirement(
        package=package,
        operator=Operator(match.group()),
        version=version,
    )
