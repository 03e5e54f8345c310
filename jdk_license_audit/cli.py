"""
Command-line interface for the Java runtime license audit.
"""

import argparse
import logging
import sys
from pathlib import Path

from .aggregation import aggregate
from .catalog import VersionCatalogLoader, get_default_catalog
from .errors import CatalogLoadError
from .logging_config import setup_logging
from .properties import collect_observations
from .reporting import EXPORTERS, print_summary


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jdk-license-audit",
        description="Classify collected Java runtime dumps by Oracle license requirement and age"
    )

    parser.add_argument(
        "paths",
        nargs="*",
        help="Runtime .properties files or directories containing them"
    )

    parser.add_argument(
        "--output-dir",
        default="./output",
        help="Output directory for exported reports. Default: ./output"
    )

    parser.add_argument(
        "--name",
        default="audit",
        help="Prefix for exported report files. Default: audit"
    )

    parser.add_argument(
        "--format",
        dest="formats",
        action="append",
        choices=sorted(EXPORTERS),
        default=None,
        help="Export format; may be repeated. Default: json"
    )

    parser.add_argument(
        "--catalog",
        default=None,
        help="Version catalog file to use instead of the packaged one"
    )

    parser.add_argument(
        "--list-versions",
        action="store_true",
        help="Print the known Java versions catalog and exit"
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level. Default: INFO"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Verbose log format with timestamps and source locations"
    )

    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable the progress bar"
    )

    return parser


def main(argv=None):
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level, verbose=args.verbose)

    if not args.paths and not args.list_versions:
        parser.error("at least one path is required unless --list-versions is given")

    catalog = VersionCatalogLoader(args.catalog) if args.catalog else get_default_catalog()
    try:
        versions = catalog.load()
    except CatalogLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.list_versions:
        for version in versions:
            print(version)
        return 0

    observations, scanned = collect_observations(args.paths, progress=not args.no_progress)
    if scanned == 0:
        logger.warning("No .properties files found in %s", ", ".join(args.paths))

    result = aggregate(observations)
    print_summary(result)

    output_dir = Path(args.output_dir)
    for fmt in args.formats or ["json"]:
        path = EXPORTERS[fmt](result, output_dir, args.name)
        logger.info("%s report saved to: %s", fmt.upper(), path)

    return 0


if __name__ == "__main__":
    sys.exit(main())
