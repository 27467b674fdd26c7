# SPDX-License-Identifier: MIT
"""Loading of requirements.txt files.

Each non-blank line is parsed on its own. Lines that fail to parse are
recorded as diagnostics and skipped, so one bad line never aborts a load.
Only problems with the file itself (missing, not a file, unreadable) are
raised to the caller.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional

from .requirement import Requirement, RequirementError, normalize_package_name, parse_requirement

logger = logging.getLogger(__name__)

# A comment starts at "#" at the beginning of a line or after whitespace
COMMENT_PATTERN = re.compile(r"(^|\s)#.*$")


class RequirementsFileError(OSError):
    """Raised when a requirements file cannot be loaded.

    Attributes:
        path: The path that was requested
    """

    def __init__(self, path: Path, message: str):
        self.path = path
        super().__init__(message)


class RequirementsNotFoundError(RequirementsFileError):
    """Raised when the requirements path does not exist."""

    def __init__(self, path: Path):
        super().__init__(path, f"Requirements file not found: {path}")


class RequirementsNotAFileError(RequirementsFileError):
    """Raised when the requirements path is not a regular file."""

    def __init__(self, path: Path):
        super().__init__(path, f"Requirements path is not a file: {path}")


class RequirementsReadError(RequirementsFileError):
    """Raised when the requirements file cannot be read or decoded."""

    def __init__(self, path: Path, reason: str):
        super().__init__(path, f"Unable to read requirements file {path}: {reason}")


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A requirement line that could not be parsed.

    Attributes:
        line_number: 1-based line number in the source
        message: Why the line was rejected
    """

    line_number: int
    message: str

    def __str__(self) -> str:
        return f"line {self.line_number}: {self.message}"


@dataclass(frozen=True)
class RequirementsFile:
    """The parsed contents of a requirements file.

    Attributes:
        source_path: Where the requirements were read from
        requirements: Successfully parsed requirements, in file order
        diagnostics: Lines that were skipped, in file order
    """

    source_path: Path
    requirements: tuple[Requirement, ...] = field(default_factory=tuple)
    diagnostics: tuple[Diagnostic, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[Requirement]:
        return iter(self.requirements)

    def __len__(self) -> int:
        return len(self.requirements)

    @property
    def has_diagnostics(self) -> bool:
        return bool(self.diagnostics)

    def get(self, package: str) -> Optional[Requirement]:
        """Return the first requirement for a package, matched by normalized name."""
        wanted = normalize_package_name(package)
        for requirement in self.requirements:
            if requirement.normalized_name == wanted:
                return requirement
        return None


def _strip_comment(line: str) -> str:
    return COMMENT_PATTERN.sub("", line).strip()


def parse_requirements_text(text: str, source_path: str | Path = "<string>") -> RequirementsFile:
    """Parse requirements from already loaded text.

    Args:
        text: Contents of a requirements file
        source_path: Path recorded on the result

    Returns:
        RequirementsFile with parsed requirements and per-line diagnostics
    """
    requirements: list[Requirement] = []
    diagnostics: list[Diagnostic] = []

    for line_number, raw_line in enumerate(text.split("\n"), start=1):
        line = _strip_comment(raw_line)
        if not line:
            continue
        try:
            requirements.append(parse_requirement(line))
        except RequirementError as e:
            logger.debug("Skipping line %d of %s: %s", line_number, source_path, e)
            diagnostics.append(Diagnostic(line_number, e.message))

    logger.info(
        "Loaded %d requirement(s) from %s with %d diagnostic(s)",
        len(requirements),
        source_path,
        len(diagnostics),
    )
    return RequirementsFile(
        source_path=Path(source_path),
        requirements=tuple(requirements),
        diagnostics=tuple(diagnostics),
    )


def parse_requirements_file(path: str | Path) -> RequirementsFile:
    """Load and parse a requirements file.

    Args:
        path: Path to a requirements file (conventionally requirements.txt)

    Returns:
        RequirementsFile with parsed requirements and per-line diagnostics

    Raises:
        RequirementsNotFoundError: If the path does not exist
        RequirementsNotAFileError: If the path is not a regular file
        RequirementsReadError: If the file cannot be read as UTF-8 text
    """
    file_path = Path(path)

    if not file_path.exists():
        raise RequirementsNotFoundError(file_path)
    if not file_path.is_file():
        raise RequirementsNotAFileError(file_path)

    try:
        text = file_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise RequirementsReadError(file_path, str(e)) from e

    return parse_requirements_text(text, file_path)
