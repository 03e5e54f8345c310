"""
Age tiers for Java runtimes.
"""

from __future__ import annotations

from .errors import VersionParseError
from .models import AgeTier
from .versions import parse_major


LEGACY_MAJOR_BELOW = 8


def classify_age(version: str) -> AgeTier:
    """Map a version identifier to VERY_OLD (< 11), OLD (11-20) or OK (21+).

    Unparseable versions are reported as VERY_OLD.
    """
    try:
        major = parse_major(version)
    except VersionParseError:
        return AgeTier.VERY_OLD

    if major < 11:
        return AgeTier.VERY_OLD
    if major <= 20:
        return AgeTier.OLD
    return AgeTier.OK


def is_legacy_tier(version: str) -> bool:
    """True for runtimes predating Java 8. Unparseable versions are not legacy."""
    try:
        return parse_major(version) < LEGACY_MAJOR_BELOW
    except VersionParseError:
        return False
