"""
Exceptions raised by the audit tool.
"""


class AuditError(Exception):
    """Base exception for all audit errors."""
    pass


class VersionParseError(AuditError, ValueError):
    """Raised when a Java version identifier has no recognisable major version."""

    def __init__(self, message: str, version: str = None):
        self.version = version
        if version is not None:
            message = f"Cannot parse version '{version}': {message}"
        super().__init__(message)


class CatalogLoadError(AuditError):
    """Raised when the version catalog resource is missing or empty."""

    def __init__(self, message: str, source: str = None):
        self.source = source
        if source:
            message = f"Failed to load version catalog from '{source}': {message}"
        super().__init__(message)
