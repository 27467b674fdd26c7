# SPDX-License-Identifier: MIT
"""Requirement parsing for requirements.txt files.

Example:
    >>> from pkgver_requirements import parse_requirement
    >>>
    >>> req = parse_requirement("Pygments==2.11.2")
    >>> req.package
    'Pygments'
    >>> req.is_satisfied_by("2.11.2.0")
    True
"""

__version__ = "0.1.0"

from .requirement import (
    Operator,
    Requirement,
    parse_requirement,
    normalize_package_name,
    RequirementError,
    UnknownOperatorError,
    EmptyPackageNameError,
    InvalidVersionError,
)
from .loader import (
    Diagnostic,
    RequirementsFile,
    parse_requirements_file,
    parse_requirements_text,
    RequirementsFileError,
    RequirementsNotFoundError,
    RequirementsNotAFileError,
    RequirementsReadError,
)

__all__ = [
    # Requirement lines
    "Operator",
    "Requirement",
    "parse_requirement",
    "normalize_package_name",
    "RequirementError",
    "UnknownOperatorError",
    "EmptyPackageNameError",
    "InvalidVersionError",
    # Requirements files
    "Diagnostic",
    "RequirementsFile",
    "parse_requirements_file",
    "parse_requirements_text",
    "RequirementsFileError",
    "RequirementsNotFoundError",
    "RequirementsNotAFileError",
    "RequirementsReadError",
]
