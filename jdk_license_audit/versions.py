"""
Java version identifier parsing.

Two shapes are understood: the legacy ``1.<major>...`` scheme used up to Java 8
(``1.8.0_271``) and the modern ``<major>[.<minor>[.<patch>]]`` scheme
(``11.0.1``, ``21``).
"""

from __future__ import annotations

import re
from typing import Optional

from .errors import VersionParseError


_MODERN_PATTERN = re.compile(r"^(\d+)(\.|$)", re.ASCII)
_DIGITS_PATTERN = re.compile(r"^\d+$", re.ASCII)
_JAVA8_UPDATE_PATTERN = re.compile(r"^1\.8\.0_(\d+)", re.ASCII)


def parse_major(version: str) -> int:
    """Return the major version number of a Java version identifier.

    Raises:
        VersionParseError: if the string matches neither shape or the major
            segment is not numeric.
    """
    if version is None:
        raise VersionParseError("version is missing")
    value = version.strip()

    if value.startswith("1."):
        segment = value.split(".")[1]
        if not _DIGITS_PATTERN.match(segment):
            raise VersionParseError("legacy major segment is not numeric", value)
        return int(segment)

    match = _MODERN_PATTERN.match(value)
    if match is None:
        raise VersionParseError("unrecognised version shape", value)
    return int(match.group(1))


def extract_update_number(version: str) -> Optional[int]:
    """Return N for legacy ``1.8.0_<N>`` identifiers, otherwise None."""
    if not version:
        return None
    match = _JAVA8_UPDATE_PATTERN.match(version.strip())
    if match is None:
        return None
    return int(match.group(1))


def extract_minor_segment(version: str) -> Optional[int]:
    """Return the third dot segment of ``<major>.<minor>.<patch>``, otherwise None.

    ``17.0.13`` yields 13. Only the Java 17 license rule needs this value.
    """
    if not version:
        return None
    parts = version.strip().split(".")
    if len(parts) < 3 or not _DIGITS_PATTERN.match(parts[2]):
        return None
    return int(parts[2])
