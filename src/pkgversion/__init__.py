"""Report the artifact, release version and SCM build of a Python package.

Drop a ``.version`` file next to a package's ``__init__.py``::

    artifact=swissknife
    version=1.0
    build=3a77

then ask for it from anywhere inside the package::

    import pkgversion

    pkgversion.of("org.mrcool.swissknife.db")      # namespace path
    pkgversion.of_type(SwissKnife)                 # class
    pkgversion.caller_version()                    # the calling module

``pkgversion.VERSION`` is this library's own version, read from its
``pkgversion/versioning/.version`` resource.

Top-level packages (``org``, ``com``) are never read. The module-level helpers
share one lazily created resolver; build a ``VersionResolver`` directly for an
isolated cache or a custom loader.
"""

from __future__ import annotations

import inspect
import threading
from typing import Optional

from .constants import Constants, load_config
from .errors import InvalidNamespaceError, MissingReferenceError, PkgVersionError
from .versioning import UNKNOWN, Version, VersionRecord, VersionResolver, decorate_project_version

__all__ = [
    "UNKNOWN",
    "Constants",
    "Version",
    "VersionRecord",
    "VersionResolver",
    "PkgVersionError",
    "InvalidNamespaceError",
    "MissingReferenceError",
    "decorate_project_version",
    "default_resolver",
    "set_default_resolver",
    "of",
    "of_type",
    "of_instance",
    "of_module",
    "caller_version",
    "VERSION",
]

_default_resolver: Optional[VersionResolver] = None
_default_lock = threading.Lock()

# Namespace that carries this library's own .version resource
_SELF_NAMESPACE = "pkgversion.versioning"


def default_resolver() -> VersionResolver:
    """Return the shared resolver, creating it on first use.

    Creation applies the YAML config (see ``constants.load_config``).
    """
    global _default_resolver
    with _default_lock:
        if _default_resolver is None:
            load_config()
            _default_resolver = VersionResolver()
        return _default_resolver


def set_default_resolver(resolver: Optional[VersionResolver]) -> None:
    """Replace the shared resolver; None resets it to be rebuilt lazily."""
    global _default_resolver
    with _default_lock:
        _default_resolver = resolver


def of(namespace: str) -> Version:
    return default_resolver().resolve(namespace)


def of_type(cls: type) -> Version:
    return default_resolver().resolve_for_type(cls)


def of_instance(obj: object) -> Version:
    return default_resolver().resolve_for_instance(obj)


def of_module(module) -> Version:
    return default_resolver().resolve_for_module(module)


def caller_version() -> Version:
    """Return the version of the module that called this function.

    Best effort: relies on frame introspection. Prefer
    ``of_module(__name__)`` where the call site is known.
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    try:
        name = caller.f_globals.get("__name__") if caller is not None else None
    finally:
        del frame, caller
    if not name:
        return UNKNOWN
    return default_resolver().resolve_caller_version(name)


def __getattr__(name):
    # Resolved on access through the shared resolver, which caches it.
    if name == "VERSION":
        return default_resolver().resolve(_SELF_NAMESPACE)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
