"""
Java Runtime License Audit

Classifies collected Java runtime dumps by Oracle commercial license
requirement and age, and reduces repeated observations to a distinct report.
"""

__version__ = "0.1.0"

from .aggregation import aggregate
from .builder import build_observation, build_observations
from .cli import main
from .licensing import classify_license
from .age import classify_age, is_legacy_tier

__all__ = [
    "aggregate",
    "build_observation",
    "build_observations",
    "classify_age",
    "classify_license",
    "is_legacy_tier",
    "main",
]
