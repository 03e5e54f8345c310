"""
Turn raw runtime records into classified observations.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from .age import classify_age, is_legacy_tier
from .licensing import classify_license
from .models import RawRuntimeRecord, RuntimeObservation


logger = logging.getLogger(__name__)


def build_observation(
    record: RawRuntimeRecord, source_name: str
) -> Optional[RuntimeObservation]:
    """Classify one raw record.

    Returns None when the record carries no ``version``; such sources are not
    Java runtime dumps and are skipped by callers.
    """
    version = (record.get("version") or "").strip()
    if not version:
        logger.debug("Skipping %s: no version", source_name)
        return None

    decision = classify_license(record)
    return RuntimeObservation(
        version=version,
        runtime_version=record.get("runtimeVersion"),
        vm_version=record.get("vmVersion"),
        vendor=record.get("vendor"),
        vm_vendor=record.get("vmVendor"),
        source_name=source_name,
        is_legacy_tier=is_legacy_tier(version),
        requires_commercial_license=decision.requires_license,
        license_explanation=decision.explanation,
        age_tier=classify_age(version),
    )


def build_observations(
    records: Iterable[Tuple[RawRuntimeRecord, str]]
) -> List[RuntimeObservation]:
    """Classify ``(record, source_name)`` pairs, dropping records without a version."""
    observations = []
    for record, source_name in records:
        observation = build_observation(record, source_name)
        if observation is not None:
            observations.append(observation)
    return observations
