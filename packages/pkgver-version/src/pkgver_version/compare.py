# SPDX-License-Identifier: MIT
"""Version comparison following PEP 440 ordering semantics.

Phase ordering: dev < alpha < beta < rc == preview < release < post
A dev segment lowers a version within its phase: 1.0a1.dev1 < 1.0a1.
An absent number ranks below any written number: 1.0a < 1.0a0 < 1.0a1.
"""

from __future__ import annotations

import re
from enum import IntEnum
from typing import NamedTuple, Optional, Union

from .pep440 import PreLabel, Version, parse_version


class Ordering(IntEnum):
    """Result of comparing two versions."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @property
    def symbol(self) -> str:
        return {-1: "<", 0: "==", 1: ">"}[self.value]


class Phase(IntEnum):
    """Release phase, lowest first."""

    DEV = 0
    PRE = 1
    FINAL = 2
    POST = 3


# Pre-release label ordering (lower = earlier in release cycle)
_LABEL_ORDER = {
    PreLabel.ALPHA: 0,
    PreLabel.BETA: 1,
    PreLabel.RELEASE_CANDIDATE: 2,
    PreLabel.PREVIEW: 2,
}

_LOCAL_SEPARATORS = re.compile(r"[-_.]")


class VersionKey(NamedTuple):
    """Composite sort key, most significant field first."""

    epoch: int
    release: tuple[int, ...]
    phase: Phase
    pre: tuple
    post: tuple
    dev: tuple
    local: tuple


def _number_key(number: Optional[int]) -> tuple:
    """Rank an optional number so that None sorts below every integer."""
    return (0,) if number is None else (1, number)


def _release_key(release: tuple[int, ...]) -> tuple[int, ...]:
    # Trailing zeros do not change the release: 1.0 == 1.0.0
    parts = list(release)
    while parts and parts[-1] == 0:
        parts.pop()
    return tuple(parts)


def _phase(version: Version) -> Phase:
    if version.pre is not None:
        return Phase.PRE
    if version.post is not None:
        return Phase.POST
    if version.dev is not None:
        return Phase.DEV
    return Phase.FINAL


def _local_key(local: Optional[str]) -> tuple:
    """Order local labels per PEP 440.

    Numeric parts compare numerically and above alphanumeric parts,
    alphanumeric parts compare case-insensitively, and a label that is a
    prefix of another sorts lower.
    """
    if local is None:
        return (0,)
    parts = []
    for part in _LOCAL_SEPARATORS.split(local):
        if part.isdigit():
            parts.append((1, int(part), ""))
        else:
            parts.append((0, 0, part.lower()))
    return (1, tuple(parts))


def version_key(version: Union[str, Version]) -> VersionKey:
    """Return a sort key for a version, suitable for sorting.

    Args:
        version: Version string or Version object

    Returns:
        A VersionKey whose natural tuple order is the PEP 440 precedence

    Examples:
        >>> sorted(["1.0", "1.0.dev1", "1.0.post1", "1.0a1"], key=version_key)
        ['1.0.dev1', '1.0a1', '1.0', '1.0.post1']
    """
    v = parse_version(version) if isinstance(version, str) else version

    if v.pre is not None:
        pre_key: tuple = (_LABEL_ORDER[v.pre.label], _number_key(v.pre.number))
    else:
        pre_key = ()

    post_key = (0,) if v.post is None else (1, _number_key(v.post.number))

    # No dev segment ranks above every dev segment of the same phase
    dev_key = (2,) if v.dev is None else (1, _number_key(v.dev.number))

    return VersionKey(
        epoch=v.epoch or 0,
        release=_release_key(v.release),
        phase=_phase(v),
        pre=pre_key,
        post=post_key,
        dev=dev_key,
        local=_local_key(v.local),
    )


def compare(a: Version, b: Version) -> Ordering:
    """Compare two parsed versions.

    Returns:
        Ordering.LESS, Ordering.EQUAL or Ordering.GREATER

    Examples:
        >>> compare(parse_version("1.0a1"), parse_version("1.0"))
        <Ordering.LESS: -1>
    """
    key_a = version_key(a)
    key_b = version_key(b)
    if key_a < key_b:
        return Ordering.LESS
    if key_a > key_b:
        return Ordering.GREATER
    return Ordering.EQUAL


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> Ordering:
    """Compare two versions following PEP 440 ordering.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        Ordering.LESS (-1), Ordering.EQUAL (0) or Ordering.GREATER (1)

    Raises:
        VersionParseError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0", "2.0")
        <Ordering.LESS: -1>
        >>> compare_versions("1.0rc", "1.0c")
        <Ordering.EQUAL: 0>
        >>> compare_versions("1.0.post1", "1.0")
        <Ordering.GREATER: 1>
    """
    v1 = parse_version(version1) if isinstance(version1, str) else version1
    v2 = parse_version(version2) if isinstance(version2, str) else version2
    return compare(v1, v2)
