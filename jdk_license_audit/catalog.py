"""
Catalog of known Java version identifiers.

The catalog is read once from a packaged text file (one identifier per line)
and then served from memory for the rest of the process lifetime.
"""

from __future__ import annotations

import logging
import threading
from enum import Enum
from importlib import resources
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

from .errors import CatalogLoadError


logger = logging.getLogger(__name__)

CATALOG_RESOURCE = "java_versions.txt"
# Consumers serving the list may cache it this long.
CATALOG_CACHE_SECONDS = 3600

VersionCatalog = Tuple[str, ...]


class CatalogState(str, Enum):
    UNINITIALIZED = "UNINITIALIZED"
    LOADING = "LOADING"
    READY = "READY"
    FAILED = "FAILED"


def parse_catalog_lines(lines: Iterable[str], source: str = CATALOG_RESOURCE) -> VersionCatalog:
    """Trim lines and drop blank ones, warning about entries with inner whitespace."""
    versions = []
    for line_number, line in enumerate(lines, start=1):
        trimmed = line.strip()
        if not trimmed:
            continue
        if any(ch.isspace() for ch in trimmed):
            logger.warning(
                "Line %d in %s contains whitespace (will be used as-is): '%s'",
                line_number, source, trimmed,
            )
        versions.append(trimmed)
    return tuple(versions)


class VersionCatalogLoader:
    """Load the version catalog exactly once and serve it read-only."""

    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        """
        Args:
            path: Catalog file on disk. Defaults to the file packaged with
                ``jdk_license_audit``.
        """
        self.path = Path(path) if path is not None else None
        self.state = CatalogState.UNINITIALIZED
        self._versions: Optional[VersionCatalog] = None
        self._error: Optional[CatalogLoadError] = None
        self._lock = threading.Lock()

    @property
    def source(self) -> str:
        return str(self.path) if self.path is not None else CATALOG_RESOURCE

    def load(self) -> VersionCatalog:
        """Read the catalog. Later calls return the cached result or re-raise the failure."""
        if self.state is CatalogState.READY:
            return self._versions

        with self._lock:
            if self.state is CatalogState.READY:
                return self._versions
            if self.state is CatalogState.FAILED:
                raise self._error

            self.state = CatalogState.LOADING
            try:
                versions = parse_catalog_lines(self._read_lines(), self.source)
                if not versions:
                    raise CatalogLoadError(
                        "file is empty or contains no valid versions", self.source
                    )
            except CatalogLoadError as e:
                self.state = CatalogState.FAILED
                self._error = e
                logger.error("%s", e)
                raise

            self._versions = versions
            self.state = CatalogState.READY
            logger.info("Loaded %d Java versions from %s", len(versions), self.source)
            return versions

    def get_all(self) -> VersionCatalog:
        """Return the catalog, loading it on first use."""
        if self.state is CatalogState.READY:
            return self._versions
        return self.load()

    def _read_lines(self) -> Iterable[str]:
        try:
            if self.path is not None:
                text = self.path.read_text(encoding="utf-8")
            else:
                text = (
                    resources.files("jdk_license_audit")
                    .joinpath("data").joinpath(CATALOG_RESOURCE)
                    .read_text(encoding="utf-8")
                )
        except (OSError, UnicodeDecodeError) as e:
            raise CatalogLoadError(f"resource cannot be read ({e})", self.source) from e
        return text.splitlines()


_DEFAULT_LOADER = VersionCatalogLoader()


def get_default_catalog() -> VersionCatalogLoader:
    """Process-wide loader for the packaged catalog."""
    return _DEFAULT_LOADER
