"""Resolve the version that owns a namespace by walking up its ancestors."""

from __future__ import annotations

import logging
import types
from typing import Optional, Union

from ..common.logging_utils import extra_context, is_debug_enabled
from ..constants import Constants
from ..errors import InvalidNamespaceError, MissingReferenceError
from ..loaders.base import ResourceLoader
from .cache import VersionCache
from .diagnostics import DiagnosticSink, LoggingDiagnostics
from .models import UNKNOWN, Version, VersionRecord
from .namespace import is_top_level, is_valid_namespace, lookup_chain, namespace_of_type

logger = logging.getLogger(__name__)

MSG_NO_VERSION = "version not defined in %s file for %%s"
MSG_NO_ARTIFACT = "artifact not defined in %s file for %%s, using package name instead"
MSG_PLACEHOLDER = "variable found in %s file for %%s: %s"


class VersionResolver:
    """Resolve and cache ``Version`` objects per namespace.

    On a cache miss the loader is asked for a resource at the namespace
    itself, then at each ancestor that still has at least two segments.
    Top-level namespaces (``org``, ``com``) are never consulted.

    A version found at an ancestor is cached under the namespace that was
    asked for as well, so ``a.b.c.d`` resolved from a resource at ``a.b``
    reports ``a.b``'s artifact id and is served from the cache next time.

    Each resolver owns its cache; create a new resolver for an isolated one.
    """

    def __init__(
        self,
        loader: Optional[ResourceLoader] = None,
        cache: Optional[VersionCache] = None,
        diagnostics: Optional[DiagnosticSink] = None,
        file_name: Optional[str] = None,
    ):
        """Initialize the resolver.

        Args:
            loader: Resource loader; defaults to ``PackageResourceLoader``.
            cache: Cache store; defaults to a new ``VersionCache``.
            diagnostics: Sink for anomalies; defaults to logging.
            file_name: Resource file name used in diagnostics and by the
                default loader. Defaults to ``Constants.VERSION_FILE``.
        """
        self.file_name = file_name or Constants.VERSION_FILE
        if loader is None:
            from ..loaders.package import PackageResourceLoader
            loader = PackageResourceLoader(self.file_name)
        self.loader = loader
        self.cache = cache if cache is not None else VersionCache()
        self.diagnostics = diagnostics if diagnostics is not None else LoggingDiagnostics()

    def resolve(self, namespace: str) -> Version:
        """Return the version for a namespace path.

        Raises:
            InvalidNamespaceError: if ``namespace`` is not a valid dotted
                identifier path.
        """
        if not is_valid_namespace(namespace):
            raise InvalidNamespaceError(namespace)
        return self._lookup(namespace)

    def resolve_for_type(self, cls: type) -> Version:
        """Return the version of the library that defines ``cls``.

        Raises:
            MissingReferenceError: if ``cls`` is None.
            InvalidNamespaceError: if ``cls`` is not a class or its module name
                is not a dotted identifier path (e.g. ``<run_path>``).
        """
        if cls is None:
            raise MissingReferenceError("type must not be None")
        if not isinstance(cls, type):
            raise InvalidNamespaceError(cls)
        namespace = namespace_of_type(cls)
        if namespace is None:
            return UNKNOWN
        if not is_valid_namespace(namespace):
            raise InvalidNamespaceError(namespace)
        return self._lookup(namespace)

    def resolve_for_module(self, module: Union[types.ModuleType, str]) -> Version:
        """Return the version for a module object or module name."""
        if module is None:
            raise MissingReferenceError("module must not be None")
        name = module if isinstance(module, str) else getattr(module, "__name__", None)
        return self.resolve(name)

    def resolve_for_instance(self, obj: object) -> Version:
        """Return the version of the library that defines ``obj``'s type.

        Classes and modules are resolved as themselves rather than through
        their metaclass or module type.

        Raises:
            MissingReferenceError: if ``obj`` is None.
        """
        if obj is None:
            raise MissingReferenceError("instance must not be None")
        if isinstance(obj, type):
            return self.resolve_for_type(obj)
        if isinstance(obj, types.ModuleType):
            return self.resolve_for_module(obj)
        return self.resolve_for_type(type(obj))

    def resolve_caller_version(self, caller: Union[types.ModuleType, str]) -> Version:
        """Return the version for the calling code.

        The caller passes its own ``__name__`` (or module object). Code run as
        ``__main__`` resolves to ``UNKNOWN``.
        """
        return self.resolve_for_module(caller)

    def clear_cache(self) -> None:
        """Drop every cached version. Not safe while other threads resolve."""
        self.cache.clear()

    def _lookup(self, namespace: str) -> Version:
        if is_top_level(namespace):
            return UNKNOWN

        cached = self.cache.get(namespace)
        if cached is not None:
            return cached

        for current in lookup_chain(namespace):
            if current != namespace:
                cached = self.cache.get(current)
                if cached is not None:
                    return self.cache.put_if_absent(namespace, cached)

            record = self.loader.load(current)
            if record is None:
                if is_debug_enabled(logger):
                    logger.debug("No %s resource for %s", self.file_name, current, extra=extra_context(
                        event="lookup", component="resolver", namespace=current, outcome="not_found"
                    ))
                continue

            version = self._build(current, record)
            if version is UNKNOWN:
                return UNKNOWN
            version = self.cache.put_if_absent(current, version)
            if current != namespace:
                version = self.cache.put_if_absent(namespace, version)
            return version

        return UNKNOWN

    def _build(self, namespace: str, record: VersionRecord) -> Version:
        """Turn a raw record found at ``namespace`` into a Version.

        Returns ``UNKNOWN`` when the record has no version.
        """
        for name, value in record.items():
            if value is not None and Constants.PLACEHOLDER_MARKER in value:
                self.diagnostics.warning(MSG_PLACEHOLDER % (self.file_name, name), namespace)

        if not record.version or not record.version.strip():
            self.diagnostics.error(MSG_NO_VERSION % self.file_name, namespace)
            return UNKNOWN

        artifact = record.artifact
        if not artifact or not artifact.strip():
            self.diagnostics.warning(MSG_NO_ARTIFACT % self.file_name, namespace)
            artifact = namespace

        return Version(artifact, record.version, record.build or "")
