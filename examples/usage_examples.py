#!/usr/bin/env python3
"""
Example script showing how to use the jdk-license-audit library.
"""

from pathlib import Path

from jdk_license_audit.aggregation import aggregate
from jdk_license_audit.builder import build_observations
from jdk_license_audit.catalog import get_default_catalog
from jdk_license_audit.properties import collect_observations
from jdk_license_audit.reporting import export_csv


def example_classify_records():
    """Example: classify records reported by another system."""
    print("="*60)
    print("Example 1: Classify raw records")
    print("="*60)

    records = [
        ({"version": "1.8.0_181", "vendor": "Oracle Corporation"}, "build-agent-1"),
        ({"version": "1.8.0_291", "vendor": "Oracle Corporation"}, "build-agent-2"),
        ({"version": "17.0.13", "vendor": "Oracle Corporation"}, "api-server"),
        ({"version": "21.0.5", "vendor": "Eclipse Adoptium"}, "worker"),
    ]

    result = aggregate(build_observations(records))

    for o in result.observations:
        paid = "license required" if o.requires_commercial_license else "free"
        print(f"{o.version:<12} {o.age_tier.value:<9} {paid:<17} {o.license_explanation}")
    print(f"\nDistinct runtimes: {result.distinct_count}")
    print(f"Requiring a license: {result.license_required_count}")


def example_scan_directory():
    """Example: scan a directory of collected .properties dumps."""
    print("\n" + "="*60)
    print("Example 2: Scan collected runtime dumps")
    print("="*60)

    observations, scanned = collect_observations([Path("./collected")])
    result = aggregate(observations)
    csv_file = export_csv(result, Path("./output/example2"), "fleet")

    print(f"Scanned {scanned} files, {result.distinct_count} distinct runtimes")
    print(f"CSV written to {csv_file}")


def example_list_versions():
    """Example: read the known versions catalog."""
    print("\n" + "="*60)
    print("Example 3: Known Java versions")
    print("="*60)

    versions = get_default_catalog().get_all()
    print(f"{len(versions)} versions, newest listed: {versions[-1]}")


if __name__ == "__main__":
    example_classify_records()
    example_list_versions()
    # Requires a ./collected directory of .properties dumps
    # example_scan_directory()
