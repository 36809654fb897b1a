"""
relinstall_core.semver
----------------------
Finds and parses the semantic version embedded in a release file name,
e.g. ``myapp-v1.2.3-rc.1+build5.tar.gz``.

The grammar is applied as a leftmost search rather than a full match, so
callers can pass file names and other free-form strings directly. Numeric
components never carry leading zeros; such candidates are rejected, never
repaired.
"""

from __future__ import annotations
from dataclasses import dataclass
import re

from .errors import ParseError
from .logger import get_logger

log = get_logger("relinstall.semver")

MAX_UINT32 = 0xFFFFFFFF

_NUM = r"(?:0|[1-9][0-9]*)"
_PRE_ID = r"(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)(?![0-9a-zA-Z-])"
_BUILD_ID = r"[0-9a-zA-Z-]+"

RELEASE_RE = re.compile(
    r"(?:v|release-v)?"
    # a component may not start in the middle of a digit run ("01.2.3")
    r"(?<![0-9])"
    rf"({_NUM})\.({_NUM})\.({_NUM})(?![0-9])"
    rf"(?:-({_PRE_ID}(?:\.{_PRE_ID})*))?"
    rf"(?:\+({_BUILD_ID}(?:\.{_BUILD_ID})*))?",
    re.ASCII,
)

# Archive extensions are file-name structure, not build metadata.
ARCHIVE_SUFFIX_RE = re.compile(
    r"(?:(?:\.tar)?\.(?:gz|bz2|xz|zst)|\.(?:tar|tgz|tbz2|txz|zip))$",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class SemVerInfo:
    major: int
    minor: int
    patch: int
    pre_release: str = ""
    build: str = ""

    def canonical(self) -> str:
        """``vMAJOR.MINOR.PATCH[-PRE]``; build metadata is dropped."""
        version = f"v{self.major}.{self.minor}.{self.patch}"
        if self.pre_release:
            version += "-" + self.pre_release
        return version

    def __str__(self) -> str:
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre_release:
            version += "-" + self.pre_release
        if self.build:
            version += "+" + self.build
        return version


def strip_archive_suffix(s: str) -> str:
    return ARCHIVE_SUFFIX_RE.sub("", s, count=1)


def _parse_component(text: str, name: str, source: str) -> int:
    value = int(text, 10)
    try:
        # fixed-width unsigned 32-bit encoding rejects anything above MAX_UINT32
        value.to_bytes(4, "big")
    except OverflowError as e:
        raise ParseError(
            f"version string {source!r}: {name} component {text} does not fit in 32 bits",
            source,
        ) from e
    return value


def extract_semver(s: str) -> SemVerInfo:
    """
    Locate the first semantic version in ``s`` and parse it.

    Accepts an optional ``v`` or ``release-v`` prefix, which is discarded.
    Raises ParseError when no conformant substring exists or a numeric
    component overflows 32 bits.
    """
    m = RELEASE_RE.search(strip_archive_suffix(s))
    if m is None:
        raise ParseError(
            f"version string {s!r} does not follow semantic versioning requirements", s
        )

    major, minor, patch, pre_release, build = m.groups()
    info = SemVerInfo(
        major=_parse_component(major, "major", s),
        minor=_parse_component(minor, "minor", s),
        patch=_parse_component(patch, "patch", s),
        pre_release=pre_release or "",
        build=build or "",
    )
    log.debug(f"[SEMVER] {s!r} -> {info}")
    return info
