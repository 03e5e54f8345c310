"""
Core data models for runtime observations.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional, Tuple

# Raw key-value record as extracted from one configuration source.
RawRuntimeRecord = Mapping[str, str]


class AgeTier(str, Enum):
    """Coarse age of a Java runtime."""

    VERY_OLD = "VERY_OLD"
    OLD = "OLD"
    OK = "OK"


@dataclass(frozen=True)
class LicenseDecision:
    """Outcome of the license decision table."""

    requires_license: bool
    explanation: str


@dataclass(frozen=True)
class RuntimeObservation:
    """One classified Java runtime seen in one source file."""

    version: str
    runtime_version: Optional[str]
    vm_version: Optional[str]
    vendor: Optional[str]
    vm_vendor: Optional[str]
    source_name: str
    is_legacy_tier: bool
    requires_commercial_license: bool
    license_explanation: str
    age_tier: AgeTier

    @property
    def identity(self) -> Tuple[str, Optional[str], Optional[str]]:
        """Key under which repeated observations collapse."""
        return (self.version, self.runtime_version, self.vendor)


@dataclass(frozen=True)
class DistinctObservationSet:
    """Deduplicated, sorted observations of an analysis run with summary counters."""

    observations: Tuple[RuntimeObservation, ...]
    total_count: int
    distinct_count: int
    legacy_count: int
    license_required_count: int
