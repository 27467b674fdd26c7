# SPDX-License-Identifier: MIT
"""PEP 440 version parsing.

Parsing happens in two steps:

- ``scan()`` matches the raw text against ``VERSION_PATTERN`` and returns the
  named sub-matches.
- ``build()`` turns those sub-matches into an immutable ``Version``.

Supported forms, all case-insensitive:
- Release: 1, 1.0, 2.11.2 (an optional leading "v" is ignored)
- Epoch: 1!1.0
- Pre-release: 1.0a1, 1.0-beta.2, 1.0rc, 1.0.pre0, 1.0preview-3
- Post-release: 1.0-9, 1.0.post2, 1.0-rev.3, 1.0r
- Dev-release: 1.0.dev4, 1.0_dev_9
- Local: 1.0+abc.5

References:
- PEP 440: https://peps.python.org/pep-0440/
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

# Version grammar, adapted from PEP 440 Appendix B
VERSION_PATTERN = re.compile(
    r"""
    ^v?
    (?:(?P<epoch>[0-9]+)!)?
    (?P<release>[0-9]+(?:\.[0-9]+)*)
    (?:
        [-_.]?
        (?P<pre_l>preview|pre|alpha|a|beta|b|rc|c)
        [-_.]?
        (?P<pre_n>[0-9]+)?
    )?
    (?:
        -(?P<post_n1>[0-9]+)
        |
        [-_.]?
        (?P<post_l>post|rev|r)
        [-_.]?
        (?P<post_n2>[0-9]+)?
    )?
    (?:
        [-_.]?
        (?P<dev_l>dev)
        [-_.]?
        (?P<dev_n>[0-9]+)?
    )?
    (?:\+(?P<local>[a-z0-9]+(?:[-_.][a-z0-9]+)*))?
    $
    """,
    re.VERBOSE | re.IGNORECASE,
)

Captures = Mapping[str, Optional[str]]


class VersionParseError(ValueError):
    """Base class for version parsing failures."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid version: {version}"
        super().__init__(self.message)


class MalformedVersionError(VersionParseError):
    """Raised when text does not match the version grammar."""

    def __init__(self, version: str, message: str = ""):
        super().__init__(version, message or f"Malformed version: {version!r}")


class InvalidNumberError(VersionParseError):
    """Raised when a numeric segment is not a non-negative integer.

    Attributes:
        segment: Name of the offending segment (epoch, release, pre, post, dev)
        value: The text that failed to convert
    """

    def __init__(self, segment: str, value: Any = None, version: str = ""):
        self.segment = segment
        self.value = value
        super().__init__(
            version,
            f"Invalid number in {segment} segment: {value!r}",
        )


class PreLabel(str, Enum):
    """Pre-release phase label."""

    ALPHA = "a"
    BETA = "b"
    RELEASE_CANDIDATE = "rc"
    PREVIEW = "pre"


class PostMarker(str, Enum):
    """Spelling of a post-release marker."""

    POST = "post"
    REV = "rev"


_LABELS: dict[str, Enum] = {
    "a": PreLabel.ALPHA,
    "alpha": PreLabel.ALPHA,
    "b": PreLabel.BETA,
    "beta": PreLabel.BETA,
    "rc": PreLabel.RELEASE_CANDIDATE,
    "c": PreLabel.RELEASE_CANDIDATE,
    "pre": PreLabel.PREVIEW,
    "preview": PreLabel.PREVIEW,
    "post": PostMarker.POST,
    "rev": PostMarker.REV,
    "r": PostMarker.REV,
}


def normalize_label(label: str) -> Enum:
    """Map a spelled pre- or post-release label onto its enum member.

    Raises:
        KeyError: If the label is not part of the grammar

    Examples:
        >>> normalize_label("alpha")
        <PreLabel.ALPHA: 'a'>
        >>> normalize_label("r")
        <PostMarker.REV: 'rev'>
    """
    return _LABELS[label.lower()]


@dataclass(frozen=True, slots=True)
class PreRelease:
    """Pre-release segment, e.g. ``a1`` or ``rc``."""

    label: PreLabel
    number: Optional[int] = None


@dataclass(frozen=True, slots=True)
class PostRelease:
    """Post-release segment. ``marker`` is None for the short ``-N`` form."""

    marker: Optional[PostMarker] = None
    number: Optional[int] = None


@dataclass(frozen=True, slots=True)
class DevRelease:
    """Development-release segment."""

    number: Optional[int] = None


def _number_text(number: Optional[int]) -> str:
    # an absent number ranks below 0, so it must not be spelled as one
    return "" if number is None else str(number)


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """A parsed PEP 440 version.

    Equality, hashing and ordering go through ``version_key()``; ``original``
    is only used for display.

    Attributes:
        original: The text the version was parsed from
        epoch: Version epoch, None when not written
        release: Release numbers, always at least (major, minor)
        pre: Optional pre-release segment
        post: Optional post-release segment
        dev: Optional development-release segment
        local: Optional local version label
    """

    original: str
    release: tuple[int, ...]
    epoch: Optional[int] = None
    pre: Optional[PreRelease] = None
    post: Optional[PostRelease] = None
    dev: Optional[DevRelease] = None
    local: Optional[str] = None

    def __str__(self) -> str:
        return self.original

    def __repr__(self) -> str:
        return f"<Version({self.original!r})>"

    def _key(self) -> tuple:
        from .compare import version_key

        return version_key(self)

    def __hash__(self) -> int:
        return hash(self._key())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() >= other._key()

    @property
    def major(self) -> int:
        return self.release[0]

    @property
    def minor(self) -> int:
        return self.release[1]

    @property
    def is_prerelease(self) -> bool:
        """Return True for pre-releases and development releases."""
        return self.pre is not None or self.dev is not None

    @property
    def is_postrelease(self) -> bool:
        return self.post is not None

    @property
    def is_devrelease(self) -> bool:
        return self.dev is not None

    @property
    def base_version(self) -> str:
        """Return the normalized epoch and release, e.g. ``1!2.0``."""
        release = ".".join(str(part) for part in self.release)
        if self.epoch:
            return f"{self.epoch}!{release}"
        return release

    @property
    def public(self) -> str:
        """Return the normalized version without its local segment."""
        return self.normalized.split("+", 1)[0]

    @property
    def normalized(self) -> str:
        """Return the canonical PEP 440 spelling of this version.

        Examples:
            >>> parse_version("v1.0-ALPHA-1").normalized
            '1.0a1'
            >>> parse_version("1.0-r_2.dev").normalized
            '1.0.post2.dev'
        """
        parts = [self.base_version]
        if self.pre is not None:
            # PEP 440 spells both preview labels as rc
            label = "rc" if self.pre.label is PreLabel.PREVIEW else self.pre.label.value
            parts.append(f"{label}{_number_text(self.pre.number)}")
        if self.post is not None:
            parts.append(f".post{_number_text(self.post.number)}")
        if self.dev is not None:
            parts.append(f".dev{_number_text(self.dev.number)}")
        if self.local is not None:
            parts.append(f"+{self.local.lower().replace('-', '.').replace('_', '.')}")
        return "".join(parts)

    def as_dict(self) -> dict[str, Any]:
        """Return the parsed segments as JSON-compatible data."""
        return {
            "original": self.original,
            "normalized": self.normalized,
            "epoch": self.epoch,
            "release": list(self.release),
            "pre": None
            if self.pre is None
            else {"label": self.pre.label.name.lower(), "number": self.pre.number},
            "post": None
            if self.post is None
            else {
                "marker": None if self.post.marker is None else self.post.marker.value,
                "number": self.post.number,
            },
            "dev": None if self.dev is None else {"number": self.dev.number},
            "local": self.local,
        }


def scan(raw: str) -> Captures:
    """Match text against the version grammar.

    Args:
        raw: Candidate version text; surrounding whitespace is ignored

    Returns:
        Mapping from each group of ``VERSION_PATTERN`` to its matched text,
        or None for groups that did not participate in the match

    Raises:
        MalformedVersionError: If the text is not a version
    """
    if not isinstance(raw, str):
        raise MalformedVersionError(
            str(raw), f"Version must be a string, got {type(raw).__name__}"
        )

    match = VERSION_PATTERN.match(raw.strip())
    if match is None:
        raise MalformedVersionError(raw)
    return match.groupdict()


def _to_number(segment: str, value: Optional[str], version: str) -> Optional[int]:
    """Convert an optional numeric sub-match to an int."""
    if value is None:
        return None
    try:
        number = int(value)
    except (TypeError, ValueError) as e:
        raise InvalidNumberError(segment, value, version) from e
    if number < 0:
        raise InvalidNumberError(segment, value, version)
    return number


def _build_release(text: Optional[str], version: str) -> tuple[int, ...]:
    if not text:
        raise InvalidNumberError("release", text, version)
    numbers = [_to_number("release", part, version) for part in text.split(".")]
    if len(numbers) == 1:
        numbers.append(0)
    return tuple(n for n in numbers if n is not None)


def _build_label(kind: type[Enum], label: str, version: str) -> Any:
    try:
        member = normalize_label(label)
    except KeyError:
        raise MalformedVersionError(version, f"Unknown label {label!r} in {version!r}") from None
    if not isinstance(member, kind):
        raise MalformedVersionError(version, f"Unexpected label {label!r} in {version!r}")
    return member


def build(captures: Captures, original: str = "") -> Version:
    """Build a Version from the sub-matches produced by ``scan()``.

    Args:
        captures: Group name to matched text, as returned by ``scan()``
        original: Text to keep for display

    Returns:
        The constructed Version

    Raises:
        InvalidNumberError: If a numeric segment is not a non-negative integer
        MalformedVersionError: If a label is not part of the grammar
    """
    original = original.strip()

    epoch = _to_number("epoch", captures.get("epoch"), original)
    release = _build_release(captures.get("release"), original)

    pre = None
    pre_label = captures.get("pre_l")
    if pre_label is not None:
        pre = PreRelease(
            label=_build_label(PreLabel, pre_label, original),
            number=_to_number("pre", captures.get("pre_n"), original),
        )

    post = None
    post_label = captures.get("post_l")
    short_post = captures.get("post_n1")
    if short_post is not None:
        post = PostRelease(number=_to_number("post", short_post, original))
    elif post_label is not None:
        post = PostRelease(
            marker=_build_label(PostMarker, post_label, original),
            number=_to_number("post", captures.get("post_n2"), original),
        )

    dev = None
    if captures.get("dev_l") is not None:
        dev = DevRelease(number=_to_number("dev", captures.get("dev_n"), original))

    return Version(
        original=original,
        release=release,
        epoch=epoch,
        pre=pre,
        post=post,
        dev=dev,
        local=captures.get("local"),
    )


def parse_version(version_string: str) -> Version:
    """Parse a PEP 440 version string into a Version object.

    Args:
        version_string: Version text such as ``1.0``, ``1!2.0rc1`` or ``1.0+abc.5``

    Returns:
        A Version object with parsed components

    Raises:
        MalformedVersionError: If the string does not follow the grammar
        InvalidNumberError: If a numeric segment cannot be converted

    Examples:
        >>> v = parse_version("1.0.post456.dev34")
        >>> v.post
        PostRelease(marker=<PostMarker.POST: 'post'>, number=456)
        >>> str(v)
        '1.0.post456.dev34'
    """
    return build(scan(version_string), version_string)


def is_valid_version(version_string: str) -> bool:
    """Check if a string is a valid PEP 440 version.

    Examples:
        >>> is_valid_version("1.0a1")
        True
        >>> is_valid_version("not a version")
        False
    """
    try:
        parse_version(version_string)
    except VersionParseError:
        return False
    return True
