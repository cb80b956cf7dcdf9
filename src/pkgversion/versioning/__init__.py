"""Version model, namespace resolution and caching."""

from .cache import VersionCache
from .diagnostics import DiagnosticSink, LoggingDiagnostics
from .models import UNKNOWN, Version, VersionRecord, decorate_project_version
from .namespace import is_valid_namespace
from .resolver import VersionResolver

__all__ = [
    "UNKNOWN",
    "Version",
    "VersionRecord",
    "VersionCache",
    "VersionResolver",
    "DiagnosticSink",
    "LoggingDiagnostics",
    "decorate_project_version",
    "is_valid_namespace",
]
