"""
Collapse repeated runtime observations into a distinct report set.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

import pandas as pd

from .models import DistinctObservationSet, RuntimeObservation


OBSERVATION_COLUMNS = [
    "version",
    "runtime_version",
    "vm_version",
    "vendor",
    "vm_vendor",
    "source_name",
    "is_legacy_tier",
    "requires_commercial_license",
    "license_explanation",
    "age_tier",
]


def aggregate(observations: Iterable[RuntimeObservation]) -> DistinctObservationSet:
    """Deduplicate by ``(version, runtime_version, vendor)`` and sort by version.

    The first observation of each identity is kept. Versions are ordered as
    plain strings, so ``"10"`` sorts before ``"9"``.
    """
    total = 0
    distinct: Dict[Tuple[str, Optional[str], Optional[str]], RuntimeObservation] = {}
    for observation in observations:
        total += 1
        distinct.setdefault(observation.identity, observation)

    ordered = sorted(distinct.values(), key=lambda o: o.version)
    return DistinctObservationSet(
        observations=tuple(ordered),
        total_count=total,
        distinct_count=len(ordered),
        legacy_count=sum(1 for o in ordered if o.is_legacy_tier),
        license_required_count=sum(1 for o in ordered if o.requires_commercial_license),
    )


def to_dataframe(result: DistinctObservationSet) -> pd.DataFrame:
    """One row per distinct observation, in report order."""
    rows: List[Dict] = []
    for o in result.observations:
        rows.append({
            "version": o.version,
            "runtime_version": o.runtime_version,
            "vm_version": o.vm_version,
            "vendor": o.vendor,
            "vm_vendor": o.vm_vendor,
            "source_name": o.source_name,
            "is_legacy_tier": o.is_legacy_tier,
            "requires_commercial_license": o.requires_commercial_license,
            "license_explanation": o.license_explanation,
            "age_tier": o.age_tier.value,
        })
    return pd.DataFrame(rows, columns=OBSERVATION_COLUMNS)


def summary_counts(result: DistinctObservationSet) -> Dict[str, int]:
    return {
        "total_files": result.total_count,
        "distinct_count": result.distinct_count,
        "legacy_count": result.legacy_count,
        "license_required_count": result.license_required_count,
    }
