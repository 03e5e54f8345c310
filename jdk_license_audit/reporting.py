"""
Reporting and export utilities.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pandas as pd

from .aggregation import summary_counts, to_dataframe
from .models import DistinctObservationSet


logger = logging.getLogger(__name__)


def print_summary(result: DistinctObservationSet) -> None:
    logger.info("=" * 60)
    logger.info("JAVA RUNTIME AUDIT")
    logger.info("=" * 60)
    logger.info("Files with a Java runtime: %s", result.total_count)
    logger.info("Distinct runtimes: %s", result.distinct_count)
    logger.info("Older than Java 8: %s", result.legacy_count)
    logger.info("Requiring an Oracle license: %s", result.license_required_count)
    logger.info("-" * 60)
    for o in result.observations:
        logger.info(
            "%-16s %-28s %-8s %-4s %s",
            o.version,
            o.vendor or "-",
            o.age_tier.value,
            "PAID" if o.requires_commercial_license else "FREE",
            o.license_explanation,
        )
    logger.info("=" * 60)


def save_results_json(result: DistinctObservationSet, output_dir: Path, name: str) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    results_file = output_dir / f"{name}_results.json"
    payload = dict(summary_counts(result))
    payload["observations"] = to_dataframe(result).to_dict(orient="records")
    with open(results_file, 'w', encoding='utf-8') as f:
        json.dump(payload, f, indent=2, default=str)
    return results_file


def export_csv(result: DistinctObservationSet, output_dir: Path, name: str) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    csv_file = output_dir / f"{name}_runtimes.csv"
    to_dataframe(result).to_csv(csv_file, index=False)
    return csv_file


def export_worksheet(result: DistinctObservationSet, output_dir: Path, name: str) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    excel_file = output_dir / f"{name}_runtimes.xlsx"
    summary = pd.DataFrame(
        list(summary_counts(result).items()), columns=["metric", "value"]
    )
    with pd.ExcelWriter(excel_file, engine='openpyxl') as writer:
        to_dataframe(result).to_excel(writer, sheet_name="runtimes", index=False)
        summary.to_excel(writer, sheet_name="summary", index=False)
    return excel_file


EXPORTERS = {
    "json": save_results_json,
    "csv": export_csv,
    "xlsx": export_worksheet,
}
